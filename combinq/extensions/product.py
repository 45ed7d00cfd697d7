from __future__ import annotations
import logging
from ..types import *
from ..errors import OneShotSourceError
from ..lending import LendingIterator

logger = logging.getLogger(__name__)

_MISSING = object()


def _is_one_shot(data: Iterable[Any]) -> bool:
    return iter(data) is data


class ProductEnumerator(LendingIterator[Any]):
    """
    lends every (outer, inner) pair in row-major order: the outer item changes
    slowest. the view has two slots, slot 0 caches the current outer item and
    slot 1 receives each inner item in turn.

    the inner source is restarted for every outer item, so it must be
    re-iterable; one-shot iterators are materialized into a list first. the
    outer source may be any iterable, infinite ones included. an inner pass that
    yields nothing ends the product at once instead of walking the outer source
    forever.

    once exhausted, stays exhausted until reset().
    """

    def __init__(self, outer: Iterable[T], inner: Iterable[U]):
        self._outer_source = outer
        self._inner_template = list(inner) if _is_one_shot(inner) else inner
        self._outer: Iterator[T] = iter(())
        self._inner: Iterator[U] = iter(())
        self._pass_length = 0
        super().__init__([None, None])
        self._restart()

    def _restart(self) -> None:
        self._outer = iter(self._outer_source)
        self._inner = iter(())
        self._pass_length = 0
        self._buffer[:] = [None, None]

    def reset(self) -> None:
        if _is_one_shot(self._outer_source) and self._phase is not Phase.NOT_STARTED:
            raise OneShotSourceError("the outer source is a one-shot iterator and cannot be replayed")
        super().reset()

    def _next_outer(self) -> bool:
        item = next(self._outer, _MISSING)
        if item is _MISSING:
            return False
        self._buffer[0] = item
        self._inner = iter(self._inner_template)
        self._pass_length = 0
        return True

    def _start(self) -> bool:
        return self._next_outer() and self._step()

    def _step(self) -> bool:
        while True:
            item = next(self._inner, _MISSING)
            if item is not _MISSING:
                self._buffer[1] = item
                self._pass_length += 1
                return True
            if self._pass_length == 0:
                logger.warning("inner source of the product is empty, ending the product")
                return False
            if not self._next_outer():
                return False

    def _validate(self) -> None:
        assert len(self._buffer) == 2, "product buffer must hold exactly one pair"
        assert self._pass_length > 0, "lent a pair without an inner item"

    def expected_count(self) -> int:
        try:
            return len(self._outer_source) * len(self._inner_template)
        except TypeError:
            raise TypeError("expected_count needs sized outer and inner sources") from None

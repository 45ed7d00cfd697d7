from __future__ import annotations
from ..types import *
from ..errors import InvalidParameterError
from ..lending import LendingIterator
from .counting import choose


class CombinationEnumerator(LendingIterator[T]):
    """
    lends every k-subset of the source, in lexicographic order of source indices.

    slot i of the buffer may hold the source element at index j with
    i <= j <= n-k+i. the difference array records, per slot, how far the
    chosen index is from that maximum: gaps[i] = (n-k+i) - j. the gaps are the
    ground truth, the buffer is their projection onto the source.

    once exhausted, stays exhausted until reset().
    """

    def __init__(self, source: Iterable[T], k: int):
        self._source = as_source(source)
        n = len(self._source)
        if not 0 <= k <= n:
            raise InvalidParameterError(f"combination size must be within 0..{n}, got {k}")
        self._k = k
        self._gaps: List[int] = []
        super().__init__([])
        self._restart()

    @property
    def k(self) -> int:
        return self._k

    def _restart(self) -> None:
        n, k = len(self._source), self._k
        self._gaps[:] = [n - k] * k
        self._buffer[:] = self._source[0:k]

    def _start(self) -> bool:
        return True

    def _step(self) -> bool:
        gaps = self._gaps
        n, k = len(self._source), self._k

        # rightmost slot that can still move up
        i = k - 1
        while i >= 0 and gaps[i] == 0:
            i -= 1
        if i < 0:
            return False

        # slot i moves up by one, every later slot follows right behind it
        h = gaps[i]
        stop = n - h + 1
        gaps[i:] = [h - 1] * (k - i)
        self._buffer[i:] = self._source[stop - k + i:stop]
        return True

    def _validate(self) -> None:
        n, k = len(self._source), self._k
        assert len(self._gaps) == len(self._buffer) == k, "gaps and buffer diverged in length"
        for slot, gap in enumerate(self._gaps):
            assert 0 <= gap <= n - k, f"gap {gap} out of range in slot {slot}"
            assert self._buffer[slot] == self._source[n - k + slot - gap], f"slot {slot} out of sync"

    def indices(self) -> List[int]:
        """source indices currently held by each slot"""
        n, k = len(self._source), self._k
        return [n - k + slot - gap for slot, gap in enumerate(self._gaps)]

    def expected_count(self) -> int:
        return choose(len(self._source), self._k)

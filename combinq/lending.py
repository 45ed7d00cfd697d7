from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .types import *
from .config import get_config

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ILendingIterator(ABC, Generic[T]):
    @abstractmethod
    def _start(self) -> bool:
        """put the first object in the buffer; false if there is none"""
        pass

    @abstractmethod
    def _step(self) -> bool:
        """transition the buffer to the next object; false once the pass is over"""
        pass

    @abstractmethod
    def _restart(self) -> None:
        """rebuild the initial index state and buffer"""
        pass

    @abstractmethod
    def expected_count(self) -> int:
        """number of objects in one full pass"""
        pass

# --- lending iterator implementation ---

class LendingIterator(ILendingIterator[T]):
    """
    a stateful enumerator that reuses one buffer for every object it produces.

    advance() mutates the buffer and lends a View of it. the view is valid
    only until the next advance() or reset(); callers that need to keep an
    object must copy it (view.to_tuple()). the first advance() lends the
    initial object without running any transition.

    families with rearms = True go back to NOT_STARTED when a pass ends, so
    driving them again replays the enumeration. the others stay EXHAUSTED and
    keep returning None until reset() is called.
    """

    rearms: bool = False

    def __init__(self, buffer: List[T]):
        config = get_config()
        self._buffer = buffer
        self._phase = Phase.NOT_STARTED
        self._generation = 0
        self._check_views = config.check_stale_views
        self._check_invariants = config.check_invariants
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @property
    def phase(self) -> Phase:
        return self._phase

    def advance(self) -> Optional[View[T]]:
        """move to the next object and lend a view of it, or None once exhausted"""
        self._generation += 1
        if self._phase is Phase.EXHAUSTED:
            return None

        if self._phase is Phase.NOT_STARTED:
            has_item = self._start()
        else:
            has_item = self._step()

        if not has_item:
            self._finish()
            return None

        self._phase = Phase.IN_PROGRESS
        if self._check_invariants:
            self._validate()
        return View(self, self._buffer, self._generation)

    def _finish(self) -> None:
        if self.rearms:
            logger.debug(f"{type(self).__name__} finished a pass, re-arming")
            self._restart()
            self._phase = Phase.NOT_STARTED
        else:
            logger.debug(f"{type(self).__name__} exhausted")
            self._phase = Phase.EXHAUSTED

    def reset(self) -> None:
        """rewind to the initial object; outstanding views become stale"""
        logger.debug(f"{type(self).__name__} reset from {self._phase.value}")
        self._generation += 1
        self._restart()
        self._phase = Phase.NOT_STARTED

    def _validate(self) -> None:
        """hook for families to assert that the buffer matches the index state"""
        pass

    def __iter__(self) -> LendingIterator[T]:
        return self

    def __next__(self) -> View[T]:
        view = self.advance()
        if view is None:
            raise StopIteration
        return view

    def __repr__(self) -> str:
        return f"{type(self).__name__}(phase={self._phase.value}, buffer={self._buffer!r})"

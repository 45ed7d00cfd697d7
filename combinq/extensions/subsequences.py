from __future__ import annotations
from ..types import *
from ..lending import LendingIterator
from .counting import power_set_size


class SubsequenceEnumerator(LendingIterator[T]):
    """
    lends all 2^n subsequences of the source, starting with the empty one.

    the order is a depth-first walk of the include/skip decision tree: extend
    with the next source position while possible, otherwise drop the last
    position and move the new last one forward. only the tail of the buffer
    ever changes.

    re-arms after a pass: the call that reports exhaustion also rewinds, so
    driving the enumerator again replays the same sequence.
    """

    rearms = True

    def __init__(self, source: Iterable[T]):
        self._source = as_source(source)
        self._positions: List[int] = []
        super().__init__([])

    def _restart(self) -> None:
        self._positions.clear()
        self._buffer.clear()

    def _start(self) -> bool:
        # the empty subsequence
        return True

    def _step(self) -> bool:
        positions, buffer = self._positions, self._buffer
        n = len(self._source)

        # descend: include the next source position while we can
        following = positions[-1] + 1 if positions else 0
        if following < n:
            positions.append(following)
            buffer.append(self._source[following])
            return True

        # end of the source: backtrack and move the previous position forward
        if positions:
            positions.pop()
            buffer.pop()
        if not positions:
            return False
        positions[-1] += 1
        buffer[-1] = self._source[positions[-1]]
        return True

    def _validate(self) -> None:
        assert len(self._positions) == len(self._buffer), "positions and buffer diverged in length"
        for slot, position in enumerate(self._positions):
            assert slot == 0 or self._positions[slot - 1] < position, "positions are not increasing"
            assert self._buffer[slot] == self._source[position], f"slot {slot} out of sync"

    def indices(self) -> List[int]:
        """source positions included in the current subsequence"""
        return list(self._positions)

    def expected_count(self) -> int:
        return power_set_size(len(self._source))

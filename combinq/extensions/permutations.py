from __future__ import annotations
from abc import ABC, abstractmethod
from ..types import *
from ..lending import LendingIterator
from .counting import factorial


class SwapGenerator(ABC):
    """
    source of in-place transpositions for a permutation buffer.
    yields IDENTITY once for the initial arrangement, then one position pair per
    following arrangement, then stops.
    """

    def __iter__(self) -> 'SwapGenerator':
        return self

    @abstractmethod
    def __next__(self) -> Swap:
        pass

    @abstractmethod
    def reset(self) -> None:
        """start the swap sequence over"""
        pass


class ElementSwaps(SwapGenerator):
    """
    steinhaus-johnson-trotter adjacent transpositions with even's direction rule.

    every element carries a direction. at each step the largest element whose
    neighbour in its direction is smaller swaps with that neighbour, then every
    larger element reverses direction. visits all n! arrangements with n! - 1
    adjacent swaps.
    """

    def __init__(self, size: int):
        self._size = size
        self._elements: List[int] = []
        self._directions: List[int] = []
        self.reset()

    def reset(self) -> None:
        self._elements = list(range(self._size))
        self._directions = [-1] * self._size  # all start looking left
        self._started = False

    @property
    def arrangement(self) -> List[int]:
        """original position of the element now sitting at each position"""
        return list(self._elements)

    def _largest_mobile(self) -> int:
        elements, directions = self._elements, self._directions
        best = -1
        for position, element in enumerate(elements):
            neighbour = position + directions[position]
            if not 0 <= neighbour < self._size: continue
            if elements[neighbour] > element: continue
            if best < 0 or element > elements[best]:
                best = position
        return best

    def __next__(self) -> Swap:
        if not self._started:
            self._started = True
            return IDENTITY

        position = self._largest_mobile()
        if position < 0:
            raise StopIteration

        elements, directions = self._elements, self._directions
        neighbour = position + directions[position]
        moved = elements[position]
        elements[position], elements[neighbour] = elements[neighbour], elements[position]
        directions[position], directions[neighbour] = directions[neighbour], directions[position]
        for p, element in enumerate(elements):
            if element > moved:
                directions[p] = -directions[p]
        return min(position, neighbour), max(position, neighbour)


class PermutationEnumerator(LendingIterator[T]):
    """
    lends every ordering of the source by swapping buffer positions in place.
    consecutive views differ by exactly one transposition. the swap sequence is
    an injected strategy, ElementSwaps unless told otherwise.

    once exhausted, stays exhausted until reset().
    """

    def __init__(self, source: Iterable[T], swaps: Optional[SwapGenerator] = None):
        self._source = as_source(source)
        self._swaps = swaps if swaps is not None else ElementSwaps(len(self._source))
        super().__init__(list(self._source))

    def _restart(self) -> None:
        self._buffer[:] = self._source
        self._swaps.reset()

    def _pull(self) -> bool:
        swap = next(self._swaps, None)
        if swap is None:
            return False
        if swap != IDENTITY:
            a, b = swap
            self._buffer[a], self._buffer[b] = self._buffer[b], self._buffer[a]
        return True

    def _start(self) -> bool:
        return self._pull()

    def _step(self) -> bool:
        return self._pull()

    def _validate(self) -> None:
        assert len(self._buffer) == len(self._source), "buffer length changed"
        arrangement = getattr(self._swaps, 'arrangement', None)
        if arrangement is None: return
        for position, origin in enumerate(arrangement):
            assert self._buffer[position] == self._source[origin], f"position {position} out of sync"

    def expected_count(self) -> int:
        return factorial(len(self._source))

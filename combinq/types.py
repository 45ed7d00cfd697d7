from collections import abc
from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Sequence
)

import numpy as np

from .errors import StaleViewError

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]

# a pair of buffer positions to exchange
Swap = Tuple[int, int]

# emitted once by swap generators: "lend the buffer unchanged"
IDENTITY: Swap = (0, 0)


class Phase(Enum):
    """cursor phase of a lending iterator"""
    NOT_STARTED = 'not_started'
    IN_PROGRESS = 'in_progress'
    EXHAUSTED = 'exhausted'


def as_source(data: Iterable[T]) -> Sequence[T]:
    """borrow sequences as they are, materialize any other iterable once"""
    if isinstance(data, (abc.Sequence, np.ndarray)):
        return data
    return tuple(data)


class View(Generic[T]):
    """
    read-only window onto the buffer of a lending iterator.

    a view is only meaningful until its owner advances again: the owner keeps
    mutating the same buffer in place. when the owner was built with
    check_stale_views enabled, any read of an outdated view raises
    StaleViewError instead of silently showing the newer object.
    use to_tuple(), to_list() or to_array() to keep an owned copy.
    """

    __slots__ = ('_owner', '_buffer', '_generation')
    __hash__ = None  # contents change underneath

    def __init__(self, owner: Any, buffer: List[T], generation: int):
        self._owner = owner
        self._buffer = buffer
        self._generation = generation

    @property
    def is_valid(self) -> bool:
        """true while the owner has not advanced past this view"""
        return self._owner._generation == self._generation

    def _check(self) -> None:
        if self._owner._check_views and self._owner._generation != self._generation:
            raise StaleViewError(
                f"view from generation {self._generation} read after the iterator "
                f"moved to generation {self._owner._generation}")

    def __len__(self) -> int:
        self._check()
        return len(self._buffer)

    def __getitem__(self, index: Union[int, slice]) -> Union[T, Tuple[T, ...]]:
        self._check()
        if isinstance(index, slice):
            return tuple(self._buffer[index])
        return self._buffer[index]

    def __iter__(self) -> Iterator[T]:
        self._check()
        for position in range(len(self._buffer)):
            self._check()
            yield self._buffer[position]

    def __contains__(self, item: Any) -> bool:
        self._check()
        return item in self._buffer

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, View):
            return self.to_tuple() == other.to_tuple()
        if isinstance(other, (list, tuple)):
            return self.to_tuple() == tuple(other)
        return NotImplemented

    def to_tuple(self) -> Tuple[T, ...]:
        """owned copy as a tuple"""
        self._check()
        return tuple(self._buffer)

    def to_list(self) -> List[T]:
        """owned copy as a list"""
        self._check()
        return list(self._buffer)

    def to_array(self) -> np.ndarray:
        """owned copy as a numpy array"""
        self._check()
        return np.array(self._buffer)

    def __repr__(self) -> str:
        state = "" if self.is_valid else ", stale"
        return f"View({list(self._buffer)!r}{state})"

from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..lending import LendingIterator

class TerminalAccessor(Generic[T]):
    """
    drains a lending iterator into owned containers.
    every view is copied before the next advance, so the results stay stable.
    draining starts at the current position and stops at the end of the pass.
    """

    def __init__(self, iterator_instance: 'LendingIterator[T]'):
        self._iterator = iterator_instance

    def _snapshots(self) -> Iterator[Tuple[T, ...]]:
        for view in self._iterator:
            yield view.to_tuple()

    def list(self) -> List[Tuple[T, ...]]:
        """copy every remaining object into a list of tuples"""
        return [item for item in self._snapshots()]

    def set(self) -> Set[Tuple[T, ...]]:
        """copy every remaining object into a set (elements must be hashable)"""
        return set(self._snapshots())

    def array(self) -> np.ndarray:
        """convert to a 2-d numpy array, one row per object"""
        return np.array(self.list())

    def df(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """convert to pandas dataframe, ragged rows are padded with nan"""
        return pd.DataFrame(self.list(), columns=columns)

    def count(self, predicate: Optional[Predicate[View[T]]] = None) -> int:
        """count remaining objects"""
        if predicate is None: return sum(1 for _ in self._iterator)
        return sum(1 for view in self._iterator if predicate(view))

    def any(self, predicate: Optional[Predicate[View[T]]] = None) -> bool:
        """check if any remaining object satisfies condition"""
        if predicate is None: return self._iterator.advance() is not None
        return any(predicate(view) for view in self._iterator)

    def all(self, predicate: Predicate[View[T]]) -> bool:
        """check if all remaining objects satisfy condition"""
        return all(predicate(view) for view in self._iterator)

    def first(self, predicate: Optional[Predicate[View[T]]] = None) -> Tuple[T, ...]:
        """copy of the next object (matching predicate)"""
        for view in self._iterator:
            if predicate is None or predicate(view): return view.to_tuple()
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[View[T]]] = None,
                         default: Optional[Tuple[T, ...]] = None) -> Optional[Tuple[T, ...]]:
        """copy of the next object or default"""
        try: return self.first(predicate)
        except ValueError: return default

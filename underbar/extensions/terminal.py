from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from . import iteration, selectors
from ..types import *
from ..types import _MISSING

if typing.TYPE_CHECKING:
    from ..wrapped import Wrapped


class TerminalAccessor(Generic[T]):
    def __init__(self, wrapped_instance: 'Wrapped[T]'):
        self._wrapped = wrapped_instance

    def value(self) -> Collection[T]:
        """the wrapped collection itself"""
        return self._wrapped._get_data()

    def list(self) -> List[T]:
        """convert to list. mappings give their values."""
        return list(iter_values(self._wrapped._get_data()))

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series. a wrapped mapping keeps its keys as the index."""
        data = self._wrapped._get_data()
        return pd.Series(dict(data) if is_mapping(data) else data)

    def frame(self) -> pd.DataFrame:
        """convert a sequence of records to a pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self) -> int:
        return len(self._wrapped._get_data())

    def first(self) -> Optional[T]:
        """first element or None"""
        return selectors.first(self.list())

    def last(self) -> Optional[T]:
        """last element or None"""
        return selectors.last(self.list())

    def reduce(self, iterator: Accumulator[U, T], initial: U = _MISSING) -> Optional[U]:
        return iteration.reduce(self._wrapped._get_data(), iterator, initial)

    def contains(self, target: Any) -> bool:
        return iteration.contains(self._wrapped._get_data(), target)

    def every(self, iterator: Optional[Predicate[T]] = None) -> bool:
        return iteration.every(self._wrapped._get_data(), iterator)

    def some(self, iterator: Optional[Predicate[T]] = None) -> bool:
        return iteration.some(self._wrapped._get_data(), iterator)

    def index_of(self, target: Any) -> int:
        return iteration.index_of(self.list(), target)

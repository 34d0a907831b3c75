from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IWrapped(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Collection[T]:
        """get the underlying collection"""
        pass

# --- base wrapper implementation ---

class _BaseWrapped(IWrapped[T]):
    def __init__(self, data: Collection[T]):
        """hold an already materialized collection"""
        self._data = data

    def _get_data(self) -> Collection[T]:
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter_values(self._data)

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        kind = "mapping" if is_mapping(self._data) else "sequence"
        return f"Wrapped({kind}, length={len(self._data)})"

# --- main wrapper class ---

class Wrapped(
    _BaseWrapped[T],
    _CoreOperations[T]
):
    """an eager, chainable view over a sequence or mapping."""
    def __init__(self, data: Collection[T]):
        super().__init__(data)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.to = TerminalAccessor(self)

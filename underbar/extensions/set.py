from __future__ import annotations
import typing
from . import shape
from ..types import *

if typing.TYPE_CHECKING:
    from ..wrapped import Wrapped


class SetAccessor(Generic[T]):
    """
    set-like combination and restructuring of the wrapped sequence.
    membership tests use strict equality and keep the wrapped sequence's order.
    """
    def __init__(self, wrapped_instance: 'Wrapped[T]'):
        self._wrapped = wrapped_instance

    def intersection(self, *others: Sequence[Any]) -> 'Wrapped[T]':
        """elements present in every other sequence"""
        from ..wrapped import Wrapped
        return Wrapped(shape.intersection(self._wrapped._get_data(), *others))

    def difference(self, *others: Sequence[Any]) -> 'Wrapped[T]':
        """elements present in none of the other sequences"""
        from ..wrapped import Wrapped
        return Wrapped(shape.difference(self._wrapped._get_data(), *others))

    def zip(self, *others: Sequence[Any]) -> 'Wrapped[Tuple[Any, ...]]':
        """index-aligned tuples, as long as the wrapped sequence, padded with None"""
        from ..wrapped import Wrapped
        return Wrapped(shape.zip(self._wrapped._get_data(), *others))

    def flatten(self) -> 'Wrapped[Any]':
        from ..wrapped import Wrapped
        return Wrapped(shape.flatten(self._wrapped._get_data()))

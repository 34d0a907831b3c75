from __future__ import annotations
import typing
import numpy as np
from . import iteration, merge, ordering, selectors, transform
from ..types import *

if typing.TYPE_CHECKING:
    from ..wrapped import Wrapped


class _CoreOperations(Generic[T]):
    """sequence operators as chainable methods. every call evaluates immediately."""

    def each(self: 'Wrapped[T]', iterator: Iterator3[T]) -> 'Wrapped[T]':
        """
        calls iterator(value, key, collection) for every element for its side effects.
        returns this wrapper unchanged so the chain can continue.
        """
        iteration.each(self._get_data(), iterator)
        return self

    def filter(self: 'Wrapped[T]', predicate: Predicate[T]) -> 'Wrapped[T]':
        from ..wrapped import Wrapped
        return Wrapped(transform.filter(self._get_data(), predicate))

    def reject(self: 'Wrapped[T]', predicate: Predicate[T]) -> 'Wrapped[T]':
        from ..wrapped import Wrapped
        return Wrapped(transform.reject(self._get_data(), predicate))

    def map(self: 'Wrapped[T]', fn: Transform[T, U]) -> 'Wrapped[U]':
        from ..wrapped import Wrapped
        return Wrapped(transform.map(self._get_data(), fn))

    def pluck(self: 'Wrapped[T]', name: str) -> 'Wrapped[Any]':
        from ..wrapped import Wrapped
        return Wrapped(transform.pluck(self._get_data(), name))

    def uniq(self: 'Wrapped[T]') -> 'Wrapped[T]':
        """distinct by string form, first appearance kept"""
        from ..wrapped import Wrapped
        return Wrapped(transform.uniq(self._get_data()))

    def invoke(self: 'Wrapped[T]', method: Union[str, Callable[..., Any]], *args: Any) -> 'Wrapped[T]':
        """calls a method on every element; the elements themselves may change"""
        transform.invoke(self._get_data(), method, *args)
        return self

    def first(self: 'Wrapped[T]', n: int) -> 'Wrapped[T]':
        """keep the first n elements. use .to.first() for a single element."""
        from ..wrapped import Wrapped
        return Wrapped(selectors.first(self._get_data(), n))

    def last(self: 'Wrapped[T]', n: int) -> 'Wrapped[T]':
        """keep the last n elements. use .to.last() for a single element."""
        from ..wrapped import Wrapped
        return Wrapped(selectors.last(self._get_data(), n))

    def sort_by(self: 'Wrapped[T]', criterion: Criterion[T]) -> 'Wrapped[T]':
        from ..wrapped import Wrapped
        return Wrapped(ordering.sort_by(self._get_data(), criterion))

    def shuffle(self: 'Wrapped[T]', random_state: Union[None, int, np.random.Generator] = None) -> 'Wrapped[T]':
        from ..wrapped import Wrapped
        return Wrapped(ordering.shuffle(self._get_data(), random_state))

    def extend(self: 'Wrapped[T]', *sources: Optional[Mapping[str, Any]]) -> 'Wrapped[T]':
        """merge the sources into a wrapped mapping, later keys winning"""
        from ..wrapped import Wrapped
        return Wrapped(merge.extend(self._get_data(), *sources))

    def defaults(self: 'Wrapped[T]', *sources: Optional[Mapping[str, Any]]) -> 'Wrapped[T]':
        """fill keys the wrapped mapping is missing"""
        from ..wrapped import Wrapped
        return Wrapped(merge.defaults(self._get_data(), *sources))

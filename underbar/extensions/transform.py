from __future__ import annotations
from ..types import *


def filter(sequence: Sequence[T], predicate: Predicate[T]) -> List[T]:
    """return all elements that pass a truth test"""
    return [item for item in sequence if predicate(item)]


def reject(sequence: Sequence[T], predicate: Predicate[T]) -> List[T]:
    """return all elements that fail a truth test. the complement of filter()."""
    return [item for item in sequence if not predicate(item)]


def map(sequence: Sequence[T], transform: Transform[T, U]) -> List[U]:
    return [transform(item) for item in sequence]


def pluck(sequence: Sequence[Any], name: str) -> List[Any]:
    """
    project every element to one named field.
    mappings are read by key, other objects by attribute; missing fields become None.
    """
    return [field(item, name) for item in sequence]


def uniq(sequence: Sequence[T]) -> List[T]:
    """
    duplicate-free copy preserving first appearance.
    distinctness is decided on str(value), so 1 and '1' count as the same value.
    """
    seen = set()
    # 'and not seen.add(key)' records the key inside the comprehension
    return [item for item in sequence if (key := str(item)) not in seen and not seen.add(key)]


def invoke(sequence: Sequence[T], method: Union[str, Callable[..., Any]], *args: Any) -> Sequence[T]:
    """
    call a method on every element for its side effects and return the same sequence.
    a string names a method looked up on each element; a callable receives the element first.
    """
    if isinstance(method, str):
        for item in sequence:
            getattr(item, method)(*args)
    else:
        for item in sequence:
            method(item, *args)
    return sequence

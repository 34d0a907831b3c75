from __future__ import annotations
from ..types import *
from ..types import _MISSING


def each(collection: Collection[T], iterator: Iterator3[T]) -> None:
    """call iterator(value, key, collection) for every element, in order"""
    for key, value in iter_items(collection):
        iterator(value, key, collection)


def reduce(collection: Collection[T], iterator: Accumulator[U, T], initial: U = _MISSING) -> Optional[U]:
    """
    fold the collection into one value with iterator(accumulator, value).
    without an initial value the first element seeds the accumulator;
    an empty collection without one reduces to None.
    """
    values = iter_values(collection)
    if initial is _MISSING:
        accumulator = next(values, None)
    else:
        accumulator = initial
    for value in values:
        accumulator = iterator(accumulator, value)
    return accumulator


def contains(collection: Collection[T], target: Any) -> bool:
    """true if any value is strictly equal to target"""
    return any(strict_equal(value, target) for value in iter_values(collection))


def every(collection: Collection[T], iterator: Optional[Predicate[T]] = None) -> bool:
    """true if every value passes the test (truthiness by default). vacuously true when empty."""
    test = iterator or bool
    for value in iter_values(collection):
        if not test(value):
            return False
    return True


def some(collection: Collection[T], iterator: Optional[Predicate[T]] = None) -> bool:
    """true if at least one value passes the test (truthiness by default)"""
    test = iterator or bool
    for value in iter_values(collection):
        if test(value):
            return True
    return False


def index_of(sequence: Sequence[T], target: Any) -> int:
    for index, value in enumerate(sequence):
        if strict_equal(value, target):
            return index
    return -1

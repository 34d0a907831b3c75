from __future__ import annotations
from ..types import *


def zip(primary: Sequence[Any], *others: Sequence[Any]) -> List[Tuple[Any, ...]]:
    """
    group elements sharing an index into tuples.
    the result is as long as primary; shorter sequences are padded with None
    and longer ones are cut off.
    """
    rows = []
    for index, item in enumerate(primary):
        row = [item]
        for other in others:
            row.append(other[index] if index < len(other) else None)
        rows.append(tuple(row))
    return rows


def flatten(nested: Sequence[Any], result: Optional[List[Any]] = None) -> List[Any]:
    """flatten arbitrarily nested sequences into result, depth first, left to right"""
    if result is None:
        result = []
    for item in nested:
        if is_sequence(item):
            flatten(item, result)
        else:
            result.append(item)
    return result


def intersection(primary: Sequence[T], *others: Sequence[Any]) -> List[T]:
    """
    elements of primary that are present in every other sequence, in primary's order.
    membership uses strict equality. primary is left untouched.
    """
    lookups = [Lookup(other) for other in others]
    return [item for item in primary if all(item in lookup for lookup in lookups)]


def difference(primary: Sequence[T], *others: Sequence[Any]) -> List[T]:
    """elements of primary that appear in none of the other sequences"""
    lookups = [Lookup(other) for other in others]
    return [item for item in primary if not any(item in lookup for lookup in lookups)]

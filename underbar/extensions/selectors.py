from __future__ import annotations
from ..types import *


def first(sequence: Sequence[T], n: Optional[int] = None) -> Union[Optional[T], List[T]]:
    """
    without n, the first element (None when empty).
    with n, a new list of up to n leading elements; n <= 0 gives [].
    """
    if n is None:
        return sequence[0] if len(sequence) else None
    if n <= 0:
        return []
    return list(sequence[:n])


def last(sequence: Sequence[T], n: Optional[int] = None) -> Union[Optional[T], List[T]]:
    """
    without n, the final element (None when empty).
    with n, a new list of up to n trailing elements in their original order.
    """
    if n is None:
        return sequence[-1] if len(sequence) else None
    if n <= 0:
        return []
    if n >= len(sequence):
        return list(sequence)
    return list(sequence[len(sequence) - n:])

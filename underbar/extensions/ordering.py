from __future__ import annotations
import logging
import math
import numpy as np
from ..types import *

logger = logging.getLogger(__name__)


def _resolve_rng(random_state: Union[None, int, np.random.Generator]) -> np.random.Generator:
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


def shuffle(sequence: Sequence[T], random_state: Union[None, int, np.random.Generator] = None) -> List[T]:
    """
    a single randomized riffle: cut the sequence somewhere between a quarter and
    three quarters of its length, then repeatedly pop from the tail of a randomly
    chosen half until both are empty.
    this is not a uniform shuffle; from three elements up, some permutations,
    the identity among them, are never produced.
    """
    rng = _resolve_rng(random_state)
    cut = math.floor((0.25 + rng.random() / 2) * len(sequence))
    left = list(sequence[cut:])
    right = list(sequence[:cut])

    result = []
    while left and right:
        if rng.random() < 0.5:
            result.append(left.pop())
        else:
            result.append(right.pop())
    # one half is exhausted, drain whatever remains of the other
    while left:
        result.append(left.pop())
    while right:
        result.append(right.pop())
    return result


def sort_by(sequence: Sequence[T], criterion: Criterion[T]) -> Sequence[T]:
    """
    sort ascending by criterion(element), or by the named field when criterion is a string.
    elements whose criterion is None (a missing field) go last, in their original order.
    lists are sorted in place and returned; other sequences come back as a new sorted list.
    """
    if isinstance(criterion, str):
        name = criterion
        criterion = lambda item: field(item, name)

    def sort_key(item):
        value = criterion(item)
        # None never meets a real value in a comparison
        return (True, 0) if value is None else (False, value)

    if isinstance(sequence, list):
        sequence.sort(key=sort_key)
        result = sequence
    else:
        result = sorted(sequence, key=sort_key)
    logger.debug(f"sort_by ordered {len(result)} elements")
    return result

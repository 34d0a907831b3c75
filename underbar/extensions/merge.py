from __future__ import annotations
from ..types import *


def extend(target: MutableMapping[str, Any], *sources: Optional[Mapping[str, Any]]) -> MutableMapping[str, Any]:
    """copy every key of every source into target, left to right. later sources win."""
    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            target[key] = value
    return target


def defaults(target: MutableMapping[str, Any], *sources: Optional[Mapping[str, Any]]) -> MutableMapping[str, Any]:
    """
    like extend(), but only fills keys target is missing or holds None for.
    among the sources, the first one to supply a key wins.
    """
    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            if target.get(key) is None:
                target[key] = value
    return target

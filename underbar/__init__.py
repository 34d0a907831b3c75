r"""
                 _           _
 _   _ _ __   __| | ___ _ __| |__   __ _ _ __
| | | | '_ \ / _` |/ _ \ '__| '_ \ / _` | '__|
| |_| | | | | (_| |  __/ |  | |_) | (_| | |
 \__,_|_| |_|\__,_|\___|_|  |_.__/ \__,_|_|
"""

# expose the operators
from .extensions.iteration import each, reduce, contains, every, some, index_of
from .extensions.selectors import first, last
from .extensions.transform import filter, reject, map, pluck, uniq, invoke
from .extensions.shape import zip, flatten, intersection, difference
from .extensions.merge import extend, defaults
from .extensions.functions import once, memoize, delay
from .extensions.ordering import shuffle, sort_by

# expose the chain wrapper
from .wrapped import Wrapped
from .factories import chain, W

# expose supporting state classes
from .types import OnceGuard, MemoCache

# define what `import *` does
__all__ = [
    "each",
    "reduce",
    "contains",
    "every",
    "some",
    "index_of",
    "first",
    "last",
    "filter",
    "reject",
    "map",
    "pluck",
    "uniq",
    "invoke",
    "zip",
    "flatten",
    "intersection",
    "difference",
    "extend",
    "defaults",
    "once",
    "memoize",
    "delay",
    "shuffle",
    "sort_by",
    "Wrapped",
    "chain",
    "W",
    "OnceGuard",
    "MemoCache"
]

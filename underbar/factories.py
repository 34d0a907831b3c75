import typing
from .types import *

if typing.TYPE_CHECKING:
    from .wrapped import Wrapped


def chain(data: Union[Iterable[T], Mapping[str, T]]) -> 'Wrapped[T]':
    """
    wrap a collection for method chaining.
    the wrapper holds its own copy, so in-place steps never touch the caller's container.
    """
    from .wrapped import Wrapped
    if is_mapping(data):
        return Wrapped(dict(data))
    return Wrapped(list(data))

# --- aliases ---
W = chain

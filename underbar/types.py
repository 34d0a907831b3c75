from collections.abc import Mapping as MappingABC, Sequence as SequenceABC
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping, Sequence, MutableMapping
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Collection = Union[Sequence[T], Mapping[str, T]]
Predicate = Callable[[T], Any]
Transform = Callable[[T], U]
Iterator3 = Callable[[T, Any, Any], Any]
Accumulator = Callable[[U, T], U]
Criterion = Union[str, Callable[[T], Any]]

# marks an omitted optional argument where None is a legal value
_MISSING = object()


def is_mapping(collection: Any) -> bool:
    return isinstance(collection, MappingABC)


def is_sequence(value: Any) -> bool:
    """true for ordered containers that should be expanded; strings are atoms"""
    return isinstance(value, SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def iter_values(collection: Collection[T]) -> Iterator[T]:
    """values of a sequence, or of a mapping in insertion order"""
    if is_mapping(collection):
        return iter(collection.values())
    return iter(collection)


def iter_items(collection: Collection[T]) -> Iterator[Tuple[Any, T]]:
    """(key, value) pairs; keys of a sequence are its indices"""
    if is_mapping(collection):
        return iter(collection.items())
    return enumerate(collection)


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and value != value


def strict_equal(a: Any, b: Any) -> bool:
    """
    same object, or same exact type and equal. 1, 1.0 and True are all distinct.
    nan never equals anything, itself included.
    """
    if is_nan(a) or is_nan(b):
        return False
    return a is b or (type(a) is type(b) and a == b)


def field(element: Any, name: str) -> Any:
    """read a named field from a mapping or an attribute from an object, None when missing"""
    if is_mapping(element):
        return element.get(name)
    return getattr(element, name, None)


class Lookup:
    """
    strict-equality membership test over one sequence.
    hashable values go through a (type, value) set, the rest fall back to a linear scan.
    """

    def __init__(self, values: Iterable[Any]):
        self._hashed = set()
        self._unhashable = []
        for value in values:
            try:
                self._hashed.add((type(value), value))
            except TypeError:
                self._unhashable.append(value)

    def __contains__(self, value: Any) -> bool:
        if is_nan(value):
            return False
        try:
            if (type(value), value) in self._hashed:
                return True
        except TypeError:
            pass
        return any(strict_equal(value, other) for other in self._unhashable)

    def __repr__(self) -> str:
        return f"Lookup(hashed={len(self._hashed)}, unhashable={len(self._unhashable)})"


class OnceGuard(Generic[T]):
    """the flag and cached result owned by a single once() wrapper"""

    def __init__(self):
        self.used = False
        self.result: Optional[T] = None

    def __repr__(self) -> str:
        return f"OnceGuard(used={self.used}, result={self.result!r})"


class MemoCache(Generic[T]):
    """
    string-keyed result cache owned by a single memoize() wrapper.
    keys are str(argument), so arguments whose string forms collide share an entry.
    """

    def __init__(self):
        self._entries: Dict[str, T] = {}

    @staticmethod
    def key_for(argument: Any) -> str:
        return str(argument)

    def __contains__(self, argument: Any) -> bool:
        return self.key_for(argument) in self._entries

    def get(self, argument: Any) -> T:
        return self._entries[self.key_for(argument)]

    def store(self, argument: Any, result: T) -> T:
        self._entries[self.key_for(argument)] = result
        return result

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoCache(entries={len(self._entries)})"

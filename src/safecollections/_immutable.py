"""Read-only views, one per container shape, and the canonical empty instances.

A view never copies on its own: it reads through to whatever backing container
it was handed. The construction functions in ``views`` decide whether that
backing container is a private copy or the caller's own object.
"""

from __future__ import annotations

from collections.abc import (
    Callable,
    Collection,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    Sequence,
    Set,
)
from typing import Any, Final, NoReturn, TypeVar

from ._definitions import MUTATION_REJECTED_MSG, Shape
from .exceptions import MutationRejectedError

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _rejecting(op: str) -> Callable[..., NoReturn]:
    def reject(self: Any, *args: Any, **kwargs: Any) -> NoReturn:
        raise MutationRejectedError(
            MUTATION_REJECTED_MSG.format(kind=type(self).__name__, op=op)
        )

    reject.__name__ = op
    return reject


class ImmutableSequence(Sequence[T]):
    """Ordered, duplicate-preserving read-only view."""

    __slots__ = ("_data",)

    def __init__(self, data: Sequence[T] = ()) -> None:
        self._data = data

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return ImmutableSequence(self._data[index])
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str | bytes | bytearray) or not isinstance(
            other, Sequence
        ):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

    append = _rejecting("append")
    extend = _rejecting("extend")
    insert = _rejecting("insert")
    remove = _rejecting("remove")
    pop = _rejecting("pop")
    clear = _rejecting("clear")
    reverse = _rejecting("reverse")
    sort = _rejecting("sort")
    __setitem__ = _rejecting("__setitem__")
    __delitem__ = _rejecting("__delitem__")
    __iadd__ = _rejecting("__iadd__")
    __imul__ = _rejecting("__imul__")


class ImmutableSet(Set[H]):
    """Read-only set view; iteration follows the backing set's order."""

    __slots__ = ("_data",)

    def __init__(self, data: Set[H] = frozenset()) -> None:
        self._data = data

    @classmethod
    def _from_iterable(cls, it: Iterable[H]) -> ImmutableSet[H]:
        # results of &, |, - and ^ keep first-occurrence order
        return cls(dict.fromkeys(it).keys())

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __iter__(self) -> Iterator[H]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

    add = _rejecting("add")
    discard = _rejecting("discard")
    remove = _rejecting("remove")
    pop = _rejecting("pop")
    clear = _rejecting("clear")
    update = _rejecting("update")
    intersection_update = _rejecting("intersection_update")
    difference_update = _rejecting("difference_update")
    symmetric_difference_update = _rejecting("symmetric_difference_update")
    __ior__ = _rejecting("__ior__")
    __iand__ = _rejecting("__iand__")
    __isub__ = _rejecting("__isub__")
    __ixor__ = _rejecting("__ixor__")


class ImmutableMapping(Mapping[K, V]):
    """Read-only key/value view."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[K, V] | None = None) -> None:
        self._data: Mapping[K, V] = {} if data is None else data

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"

    __setitem__ = _rejecting("__setitem__")
    __delitem__ = _rejecting("__delitem__")
    __ior__ = _rejecting("__ior__")
    pop = _rejecting("pop")
    popitem = _rejecting("popitem")
    clear = _rejecting("clear")
    update = _rejecting("update")
    setdefault = _rejecting("setdefault")


class ImmutableCollection(Collection[T]):
    """Read-only view over a sized, re-iterable container of no specific shape."""

    __slots__ = ("_data",)

    def __init__(self, data: Collection[T]) -> None:
        self._data = data

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

    add = _rejecting("add")
    append = _rejecting("append")
    extend = _rejecting("extend")
    update = _rejecting("update")
    discard = _rejecting("discard")
    remove = _rejecting("remove")
    pop = _rejecting("pop")
    clear = _rejecting("clear")


# Created once, at import, and shared by every caller asking for an empty view
EMPTY_SEQUENCE: Final[ImmutableSequence[Any]] = ImmutableSequence(())
EMPTY_SET: Final[ImmutableSet[Any]] = ImmutableSet(frozenset())
EMPTY_MAPPING: Final[ImmutableMapping[Any, Any]] = ImmutableMapping({})

VIEW_TYPES: Final[dict[Shape, type]] = {
    Shape.SEQUENCE: ImmutableSequence,
    Shape.SET: ImmutableSet,
    Shape.MAPPING: ImmutableMapping,
    Shape.COLLECTION: ImmutableCollection,
}

# the abc a container must register as before it can be viewed as a shape
CAPABILITIES: Final[dict[Shape, type]] = {
    Shape.SEQUENCE: Sequence,
    Shape.SET: Set,
    Shape.MAPPING: Mapping,
    Shape.COLLECTION: Collection,
}

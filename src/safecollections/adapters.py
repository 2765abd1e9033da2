"""Adapters bridging foreign iteration shapes into plain Python containers.

Covers the has-more/advance style ``Enumeration`` cursor, the legacy
``Properties`` key/value store with its defaults chain, and merging of
array-like values into caller owned containers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from typing import Any, Final, Generic, NoReturn, Protocol, TypeVar, runtime_checkable

from ._definitions import REMOVE_NOT_SUPPORTED_MSG
from ._logging import null_logger
from ._objects import to_object_list
from .exceptions import (
    InvalidArgumentError,
    NoSuchElementError,
    UnsupportedOperationError,
)

logger: Final = null_logger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

_MISSING: Final = object()


@runtime_checkable
class Enumeration(Protocol[T_co]):
    """Forward-only cursor answering "has more" and "advance"."""

    def has_more_elements(self) -> bool: ...

    def next_element(self) -> T_co: ...


class PropertyStore(Protocol):
    """Read side of a legacy property store, as drained by
    :func:`merge_properties_into_map`."""

    def property_names(self) -> Enumeration[Any]: ...

    def get_property(self, key: Any) -> str | None: ...

    def get(self, key: Any) -> Any: ...


class IterableEnumeration(Generic[T]):
    """Enumeration reading ahead one element from an iterator."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator = iter(iterable)
        self._pending: Any = _MISSING

    def has_more_elements(self) -> bool:
        if self._pending is _MISSING:
            self._pending = next(self._iterator, _MISSING)
        return self._pending is not _MISSING

    def next_element(self) -> T:
        if not self.has_more_elements():
            raise NoSuchElementError("Enumeration has no more elements")
        element, self._pending = self._pending, _MISSING
        return element


class EnumerationIterator(Iterator[T]):
    """Python iterator projecting an Enumeration. Removal is not supported."""

    def __init__(self, enumeration: Enumeration[T]) -> None:
        self._enumeration = enumeration

    def __next__(self) -> T:
        if not self._enumeration.has_more_elements():
            raise StopIteration
        return self._enumeration.next_element()

    def remove(self) -> NoReturn:
        raise UnsupportedOperationError(REMOVE_NOT_SUPPORTED_MSG)


def enumeration(iterable: Iterable[T]) -> Enumeration[T]:
    return IterableEnumeration(iterable)


def to_iterator(enumeration: Enumeration[T]) -> EnumerationIterator[T]:
    """Adapt an enumeration to a standard single-pass iterator."""
    if enumeration is None:
        raise InvalidArgumentError("Enumeration must not be None")
    if not isinstance(enumeration, Enumeration):
        raise InvalidArgumentError(
            f"Expected an enumeration, got {type(enumeration).__name__!r}"
        )
    return EnumerationIterator(enumeration)


def to_list(enumeration: Enumeration[T]) -> list[T]:
    """Drain the remaining elements of an enumeration into a new list."""
    return list(to_iterator(enumeration))


class Properties(dict[Any, Any]):
    """
    Key/value store of string properties with an optional chain of defaults.

    Lookups through :meth:`get_property` only answer with ``str`` values and
    fall back to ``defaults`` when the store itself has none for a key. Plain
    dict access (``[]``, ``get``) sees the store's own entries only, whatever
    their type.

    Example::

        defaults = Properties({"colour": "blue", "size": "M"})
        props = Properties({"size": "L"}, defaults=defaults)
        props.get_property("colour")  # "blue"
        props.get_property("size")  # "L"
    """

    def __init__(
        self, *args: Any, defaults: Properties | None = None, **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.defaults = defaults

    def get_property(self, key: Any, default: str | None = None) -> str | None:
        value = self.get(key)
        if isinstance(value, str):
            return value
        if self.defaults is not None:
            return self.defaults.get_property(key, default)
        return default

    def property_names(self) -> Enumeration[Any]:
        """Enumerate every key of the defaults chain and of this store, once."""
        return enumeration(list(self._collect_names()))

    def _collect_names(self) -> dict[Any, None]:
        names = {} if self.defaults is None else self.defaults._collect_names()
        names.update(dict.fromkeys(self))
        return names

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self)!r}, defaults={self.defaults!r})"


def merge_array_into_collection(array: Any, collection: Any) -> None:
    """
    Append the elements of an array-like value to a caller owned collection.

    Sequences are extended in array order, sets receive each element through
    ``add``. A None array is treated as having no elements.

    Args:
        array: Array-like value accepted by ``array_to_list``, or None.
        collection: Target with ``extend`` (list-like) or ``add`` (set-like).

    Raises:
        InvalidArgumentError: ``collection`` is None or accepts neither
            ``extend`` nor ``add``, or ``array`` is not array-like. Raised
            before the target is touched.
    """
    if collection is None:
        raise InvalidArgumentError("Collection must not be None")

    elements = to_object_list(array)

    if hasattr(collection, "extend"):
        collection.extend(elements)
    elif hasattr(collection, "add"):
        for element in elements:
            collection.add(element)
    else:
        raise InvalidArgumentError(
            f"Cannot merge into a {type(collection).__name__!r}, "
            "it has neither extend() nor add()"
        )
    logger.debug(
        "Merged %s array elements into %s", len(elements), type(collection).__name__
    )


def merge_properties_into_map(
    props: PropertyStore | None, target: MutableMapping[Any, Any]
) -> None:
    """
    Copy every property of a legacy property store into a mapping.

    Keys come from ``props.property_names()`` so entries held only by a
    linked defaults store are copied as well. A key whose value is not a
    string is copied with the store's raw value.

    Raises:
        InvalidArgumentError: ``target`` is None.
    """
    if target is None:
        raise InvalidArgumentError("Map must not be None")
    if props is None:
        return

    for key in to_iterator(props.property_names()):
        value = props.get_property(key)
        if value is None:
            # not a string, or only known to the defaults chain
            value = props.get(key)
        target[key] = value

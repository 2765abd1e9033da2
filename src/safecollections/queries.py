"""Single-pass search and classification over containers.

Every function here reads its input through iteration or ``in`` only, so the
same call works on lists, sets, views, dict key/value views or any other
container offering that capability. A None container behaves as an empty one.
"Nothing found" is a return value (False or None), never an exception.
"""

from __future__ import annotations

from collections.abc import Container, Iterable, Sized
from typing import Any, Final, TypeVar

from ._objects import null_safe_equals
from .adapters import Enumeration, to_iterator

T = TypeVar("T")

_NO_VALUE: Final = object()
_AMBIGUOUS: Final = object()


def _nothing_in(container: object) -> bool:
    return container is None or (isinstance(container, Sized) and len(container) == 0)


def contains(cursor: Iterable[Any] | Enumeration[Any] | None, element: Any) -> bool:
    """Advance ``cursor`` until an element equal to ``element`` turns up.

    ``cursor`` may be an iterator, any iterable, or an Enumeration. Equality is
    None-tolerant: None only equals None. The cursor is left positioned just
    after the match, or exhausted when there is none.
    """
    if cursor is None:
        return False
    iterator = to_iterator(cursor) if isinstance(cursor, Enumeration) else iter(cursor)
    return any(null_safe_equals(candidate, element) for candidate in iterator)


def contains_instance(collection: Iterable[Any] | None, element: Any) -> bool:
    """Return True if the very object ``element`` is in the collection.

    Identity, not equality: an equal but distinct object does not count.
    """
    if collection is None:
        return False
    return any(candidate is element for candidate in collection)


def contains_any(
    source: Container[Any] | None, candidates: Iterable[Any] | None
) -> bool:
    """Return True if any of ``candidates`` is in ``source``.

    Membership is decided by ``source``'s own ``in``. Stops at the first hit.
    """
    if _nothing_in(source) or _nothing_in(candidates):
        return False
    return any(candidate in source for candidate in candidates)


def find_first_match(
    source: Container[Any] | None, candidates: Iterable[T] | None
) -> T | None:
    """Return the first of ``candidates`` present in ``source``, else None.

    "First" follows the iteration order of ``candidates``.
    """
    if _nothing_in(source) or _nothing_in(candidates):
        return None
    return next((candidate for candidate in candidates if candidate in source), None)


def find_value_of_type(
    collection: Iterable[Any] | None, type_: type[T] | None
) -> T | None:
    """Find the single element that is an instance of ``type_``.

    Args:
        collection: The elements to search.
        type_: The type to look for. None matches every element.

    Returns:
        The element if exactly one matches. None when no element matches and
        also when more than one does, since there is no clear single value.
    """
    if _nothing_in(collection):
        return None

    value: Any = _NO_VALUE
    for element in collection:
        if type_ is None or isinstance(element, type_):
            if value is not _NO_VALUE:
                # more than one value found, no clear single value
                return None
            value = element
    return None if value is _NO_VALUE else value


def find_value_of_types(
    collection: Iterable[Any] | None, types: Iterable[type | None] | None
) -> Any:
    """Find a single element of one of ``types``, trying them in order.

    The collection is read once, tracking the matches of every type, so a
    plain iterator works. The first type with exactly one match wins.
    """
    types = list(types or ())
    if _nothing_in(collection) or not types:
        return None

    # per type: _NO_VALUE, the single match so far, or _AMBIGUOUS
    found: list[Any] = [_NO_VALUE] * len(types)
    for element in collection:
        for index, type_ in enumerate(types):
            if found[index] is _AMBIGUOUS:
                continue
            if type_ is None or isinstance(element, type_):
                found[index] = element if found[index] is _NO_VALUE else _AMBIGUOUS

    for value in found:
        if value is not _NO_VALUE and value is not _AMBIGUOUS and value is not None:
            return value
    return None


def has_unique_object(collection: Iterable[Any] | None) -> bool:
    """Return True if the collection holds one object, possibly several times.

    Every element must be the same object (identity). An empty or None
    collection has no unique object.
    """
    if _nothing_in(collection):
        return False

    iterator = iter(collection)
    first = next(iterator, _NO_VALUE)
    if first is _NO_VALUE:
        return False
    return all(element is first for element in iterator)


def find_common_element_type(collection: Iterable[Any] | None) -> type | None:
    """Return the runtime type shared by all non-None elements.

    None elements are skipped. Returns None for an empty collection, one
    holding only None, or one mixing types. Subclasses count as distinct
    types, so ``[1, True]`` has no common type.
    """
    if _nothing_in(collection):
        return None

    candidate: type | None = None
    for value in collection:
        if value is None:
            continue
        if candidate is None:
            candidate = type(value)
        elif candidate is not type(value):
            return None
    return candidate

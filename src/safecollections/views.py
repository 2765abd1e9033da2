"""View construction: canonical empties, literal views and null-safe normalizing.

Absence is kept distinct from emptiness at this layer. ``immutable`` hands None
straight back, while ``null_safe`` and the literal constructors never return
None. Pick the function that matches the null handling wanted at the call site.
"""

from __future__ import annotations

from collections.abc import Collection, Hashable, Set, Sized
from typing import Any, Final, TypeVar, assert_never

from ._definitions import Shape
from ._immutable import (
    CAPABILITIES,
    EMPTY_MAPPING,
    EMPTY_SEQUENCE,
    EMPTY_SET,
    VIEW_TYPES,
    ImmutableCollection,
    ImmutableMapping,
    ImmutableSequence,
    ImmutableSet,
)
from ._logging import null_logger
from ._objects import to_object_list
from .exceptions import InvalidArgumentError

logger: Final = null_logger(__name__)

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

AnyView = ImmutableSequence | ImmutableSet | ImmutableMapping | ImmutableCollection


def empty(shape: Shape | str) -> ImmutableSequence | ImmutableSet | ImmutableMapping:
    """Return the shared empty view for a shape.

    The generic collection shape has no empty instance of its own and gets the
    empty sequence, which satisfies the same capabilities.
    """
    resolved = Shape.resolve(shape)
    match resolved:
        case Shape.SEQUENCE | Shape.COLLECTION:
            return EMPTY_SEQUENCE
        case Shape.SET:
            return EMPTY_SET
        case Shape.MAPPING:
            return EMPTY_MAPPING
        case _:
            assert_never(resolved)


def empty_list() -> ImmutableSequence[Any]:
    return EMPTY_SEQUENCE


def empty_set() -> ImmutableSet[Any]:
    return EMPTY_SET


def empty_map() -> ImmutableMapping[Any, Any]:
    return EMPTY_MAPPING


def of(*elements: T) -> ImmutableSequence[T]:
    """Return a read-only sequence of the given elements, in argument order.

    Duplicates are kept. The view owns its elements: unpacking a list into this
    function and changing the list afterwards leaves the view untouched.
    """
    if not elements:
        return EMPTY_SEQUENCE
    return ImmutableSequence(elements)


def set_of(*elements: H) -> ImmutableSet[H]:
    """Return a read-only set of the given elements.

    Equal elements collapse onto the first occurrence, and iteration follows
    first-occurrence order. Elements must be hashable.
    """
    if not elements:
        return EMPTY_SET
    return ImmutableSet(dict.fromkeys(elements).keys())


def as_set(collection: Collection[H] | None) -> ImmutableSet[H]:
    """Return the distinct elements of a collection as a read-only set.

    None and empty collections give the shared empty set. The result is a copy,
    ordered by first occurrence in the source.
    """
    if is_empty(collection):
        return EMPTY_SET
    return ImmutableSet(dict.fromkeys(collection).keys())


def immutable(container: Any, shape: Shape | str | None = None) -> AnyView | None:
    """Wrap a container in a read-only view of its shape, None stays None.

    The view reads through to ``container``; nothing is copied. Changes made
    through the caller's own reference to ``container`` are visible through
    the view, keeping that container stable is the caller's business.

    A single-pass iterable such as a generator or iterator is not a container
    and cannot be viewed repeatedly, so it is rejected rather than wrapped.

    Args:
        container: A sequence, set, mapping or other sized re-iterable
            container, or None.
        shape: The shape to view ``container`` as. Resolved from the abc the
            container registers as when not given.

    Raises:
        InvalidArgumentError: ``container`` does not offer the capabilities of
            ``shape``, or is a single-pass iterator with no shape at all.
    """
    if container is None:
        return None

    resolved = Shape.of(container) if shape is None else Shape.resolve(shape)
    if not isinstance(container, CAPABILITIES[resolved]):
        raise InvalidArgumentError(
            f"A {type(container).__name__!r} cannot be viewed as a {resolved}"
        )

    view_type = VIEW_TYPES[resolved]
    if type(container) is view_type:
        return container

    logger.debug("Wrapping %s in a %s view", type(container).__name__, resolved)
    return view_type(container)


def null_safe(container: Any, shape: Shape | str | None = None) -> Any:
    """Return ``container`` unchanged, or the shared empty view when it is None.

    A present container is not made read-only. ``shape`` picks which empty view
    stands in for None and defaults to the generic collection shape.
    """
    resolved = Shape.COLLECTION if shape is None else Shape.resolve(shape)
    return empty(resolved) if container is None else container


def concat(s: Set[H] | None, *elements: H) -> ImmutableSet[H]:
    """Return a new read-only set holding ``s`` followed by ``elements``.

    Elements already present, in ``s`` or earlier in ``elements``, keep their
    first position. ``s`` itself is not modified, and None counts as empty.
    """
    merged = dict.fromkeys(null_safe(s, Shape.SET))
    merged.update(dict.fromkeys(elements))
    if not merged:
        return EMPTY_SET
    return ImmutableSet(merged.keys())


def size(container: Sized | None) -> int:
    """Return the number of elements or entries, 0 for None."""
    return 0 if container is None else len(container)


def is_empty(container: Sized | None) -> bool:
    return size(container) == 0


def array_to_list(source: Any) -> list[Any]:
    """Convert a possibly-None array-like value into a list.

    numpy and pandas arrays come back holding native Python values.
    None gives an empty list.
    """
    return to_object_list(source)

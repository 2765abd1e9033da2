"""Various definitions and hard settings used in safecollections."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence, Set
from enum import StrEnum
from typing import Any, Final

from .exceptions import InvalidArgumentError


class Shape(StrEnum):
    """The container shapes the library knows how to view and normalize."""

    SEQUENCE = "sequence"
    SET = "set"
    MAPPING = "mapping"
    COLLECTION = "collection"

    @classmethod
    def of(cls, container: Any) -> Shape:
        """Resolve the shape a container declares through its abc registration.

        ``str`` and ``bytes`` declare ``Sequence`` but are resolved like any
        other sequence; callers wanting otherwise pass an explicit shape.
        """
        if isinstance(container, Mapping):
            return cls.MAPPING
        if isinstance(container, Set):
            return cls.SET
        if isinstance(container, Sequence):
            return cls.SEQUENCE
        if isinstance(container, Collection):
            return cls.COLLECTION
        raise InvalidArgumentError(
            f"Cannot resolve a container shape for {type(container).__name__!r}"
        )

    @classmethod
    def resolve(cls, shape: Shape | str) -> Shape:
        """Return ``shape`` as a member, accepting the plain string values too."""
        try:
            return cls(shape)
        except ValueError as err:
            raise InvalidArgumentError(
                f"Invalid shape {shape!r}, use one of {[s.value for s in cls]}"
            ) from err


MUTATION_REJECTED_MSG: Final = "{kind} is read-only and does not support {op}()"
NOT_AN_ARRAY_MSG: Final = "Source is not an array"
REMOVE_NOT_SUPPORTED_MSG: Final = "Enumeration iterators do not support remove()"

"""Top-level package for safe-collections"""

from safecollections._definitions import Shape
from safecollections._immutable import (
    EMPTY_MAPPING,
    EMPTY_SEQUENCE,
    EMPTY_SET,
    ImmutableCollection,
    ImmutableMapping,
    ImmutableSequence,
    ImmutableSet,
)
from safecollections._objects import null_safe_equals
from safecollections.adapters import (
    Enumeration,
    EnumerationIterator,
    Properties,
    PropertyStore,
    enumeration,
    merge_array_into_collection,
    merge_properties_into_map,
    to_iterator,
    to_list,
)
from safecollections.exceptions import (
    InvalidArgumentError,
    MutationRejectedError,
    NoSuchElementError,
    UnsupportedOperationError,
)
from safecollections.queries import (
    contains,
    contains_any,
    contains_instance,
    find_common_element_type,
    find_first_match,
    find_value_of_type,
    find_value_of_types,
    has_unique_object,
)
from safecollections.views import (
    array_to_list,
    as_set,
    concat,
    empty,
    empty_list,
    empty_map,
    empty_set,
    immutable,
    is_empty,
    null_safe,
    of,
    set_of,
    size,
)

try:
    from .version import version

    __version__ = version
except ImportError:
    __version__ = "0.0.0"

__all__ = [
    "EMPTY_MAPPING",
    "EMPTY_SEQUENCE",
    "EMPTY_SET",
    "Enumeration",
    "EnumerationIterator",
    "ImmutableCollection",
    "ImmutableMapping",
    "ImmutableSequence",
    "ImmutableSet",
    "InvalidArgumentError",
    "MutationRejectedError",
    "NoSuchElementError",
    "Properties",
    "PropertyStore",
    "Shape",
    "UnsupportedOperationError",
    "array_to_list",
    "as_set",
    "concat",
    "contains",
    "contains_any",
    "contains_instance",
    "empty",
    "empty_list",
    "empty_map",
    "empty_set",
    "enumeration",
    "find_common_element_type",
    "find_first_match",
    "find_value_of_type",
    "find_value_of_types",
    "has_unique_object",
    "immutable",
    "is_empty",
    "merge_array_into_collection",
    "merge_properties_into_map",
    "null_safe",
    "null_safe_equals",
    "of",
    "set_of",
    "size",
    "to_iterator",
    "to_list",
]

"""Test enumeration adapters, the property store and the merge functions"""

import logging

import numpy as np
import pandas as pd
import pytest

from safecollections import (
    Enumeration,
    EnumerationIterator,
    InvalidArgumentError,
    MutationRejectedError,
    NoSuchElementError,
    Properties,
    UnsupportedOperationError,
    enumeration,
    merge_array_into_collection,
    merge_properties_into_map,
    of,
    set_of,
    to_iterator,
    to_list,
)

# --------------------------------------------------------------------------------------
# Enumeration
# --------------------------------------------------------------------------------------


def test_enumeration_over_iterable():
    elements = enumeration(["a", "b"])

    assert isinstance(elements, Enumeration)
    assert elements.has_more_elements()
    assert elements.has_more_elements()
    assert elements.next_element() == "a"
    assert elements.next_element() == "b"
    assert not elements.has_more_elements()


def test_enumeration_exhausted():
    elements = enumeration([])
    with pytest.raises(NoSuchElementError):
        elements.next_element()
    with pytest.raises(LookupError):
        elements.next_element()


def test_enumeration_reads_lazily():
    pulled = []

    def source():
        for value in range(3):
            pulled.append(value)
            yield value

    elements = enumeration(source())
    assert pulled == []
    elements.has_more_elements()
    assert pulled == [0]


def test_hand_written_enumeration_satisfies_protocol(countdown):
    assert isinstance(countdown, Enumeration)
    assert not isinstance([1, 2], Enumeration)


def test_to_iterator(countdown):
    iterator = to_iterator(countdown)

    assert isinstance(iterator, EnumerationIterator)
    assert iter(iterator) is iterator
    assert list(iterator) == [3, 2, 1]
    with pytest.raises(StopIteration):
        next(iterator)


def test_to_iterator_remove_is_not_supported():
    iterator = to_iterator(enumeration([1, 2]))
    next(iterator)
    with pytest.raises(UnsupportedOperationError, match="do not support remove"):
        iterator.remove()
    assert list(iterator) == [2]


def test_to_iterator_none():
    with pytest.raises(InvalidArgumentError):
        to_iterator(None)


@pytest.mark.parametrize("not_an_enumeration", [[1, 2], iter([1]), "ab", 3])
def test_to_iterator_rejects_non_enumeration(not_an_enumeration):
    with pytest.raises(InvalidArgumentError, match="Expected an enumeration"):
        to_iterator(not_an_enumeration)


def test_to_list(countdown):
    countdown.next_element()
    assert to_list(countdown) == [2, 1]
    assert to_list(countdown) == []
    assert to_list(enumeration("ab")) == ["a", "b"]


# --------------------------------------------------------------------------------------
# Properties
# --------------------------------------------------------------------------------------


def test_properties_get_property(layered_properties):
    assert layered_properties.get_property("colour") == "red"
    assert layered_properties.get_property("size") == "M"
    assert layered_properties.get_property("missing") is None
    assert layered_properties.get_property("missing", "fallback") == "fallback"


def test_properties_get_property_ignores_non_strings(layered_properties):
    assert layered_properties.get_property("retries") is None
    assert layered_properties["retries"] == 3


def test_properties_dict_access_skips_defaults(layered_properties):
    assert "size" not in layered_properties
    assert layered_properties.get("size") is None


def test_properties_property_names(layered_properties):
    assert to_list(layered_properties.property_names()) == [
        "size",
        "colour",
        "retries",
    ]


def test_properties_without_defaults():
    props = Properties(a="1")
    assert props.defaults is None
    assert to_list(props.property_names()) == ["a"]
    assert repr(props) == "Properties({'a': '1'}, defaults=None)"


# --------------------------------------------------------------------------------------
# merge_properties_into_map
# --------------------------------------------------------------------------------------


def test_merge_properties_into_map(layered_properties):
    target = {"existing": True, "colour": "green"}
    merge_properties_into_map(layered_properties, target)

    assert target == {
        "existing": True,
        "colour": "red",
        "size": "M",
        "retries": 3,
    }


def test_merge_properties_non_string_default_is_none():
    props = Properties(defaults=Properties({"timeout": 30}))
    target = {}
    merge_properties_into_map(props, target)
    assert target == {"timeout": None}


def test_merge_properties_none_props():
    target = {"a": 1}
    merge_properties_into_map(None, target)
    assert target == {"a": 1}


def test_merge_properties_none_target(layered_properties):
    with pytest.raises(InvalidArgumentError, match="Map must not be None"):
        merge_properties_into_map(layered_properties, None)


# --------------------------------------------------------------------------------------
# merge_array_into_collection
# --------------------------------------------------------------------------------------


@pytest.mark.parametrize(
    "array",
    [
        [1, 2],
        (1, 2),
        np.array([1, 2]),
        pd.Series([1, 2]),
    ],
)
def test_merge_array_into_list(array):
    target = [0]
    merge_array_into_collection(array, target)
    assert target == [0, 1, 2]


def test_merge_array_into_set():
    target = {1}
    merge_array_into_collection(np.array([1, 2, 2, 3]), target)
    assert target == {1, 2, 3}


def test_merge_array_none_array():
    target = ["a"]
    merge_array_into_collection(None, target)
    assert target == ["a"]


def test_merge_array_none_target():
    with pytest.raises(InvalidArgumentError, match="Collection must not be None"):
        merge_array_into_collection([1], None)


def test_merge_array_not_an_array_leaves_target_untouched():
    target = [1]
    with pytest.raises(InvalidArgumentError, match="Source is not an array"):
        merge_array_into_collection("abc", target)
    assert target == [1]


def test_merge_array_into_mapping_is_invalid():
    with pytest.raises(InvalidArgumentError, match="neither extend"):
        merge_array_into_collection([1], {})


@pytest.mark.parametrize("target", [of(1), set_of(1)])
def test_merge_array_into_view_is_rejected(target):
    with pytest.raises(MutationRejectedError):
        merge_array_into_collection([2], target)


def test_merge_array_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="safecollections.adapters")
    merge_array_into_collection([1, 2], [])
    assert "Merged 2 array elements into list" in caplog.text

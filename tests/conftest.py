"""The conftest.py, providing shared fixtures to tests."""

import pytest

from safecollections import Properties


class Bag:
    """Sized, re-iterable container with membership but no specific shape."""

    def __init__(self, *items):
        self._items = list(items)

    def __contains__(self, value):
        return value in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)


class CountdownEnumeration:
    """Hand written has-more/advance cursor, not built on the package helpers."""

    def __init__(self, start):
        self.current = start

    def has_more_elements(self):
        return self.current > 0

    def next_element(self):
        value = self.current
        self.current -= 1
        return value


@pytest.fixture(name="bag", scope="function")
def fixture_bag():
    return Bag("x", "y", "x")


@pytest.fixture(name="countdown", scope="function")
def fixture_countdown():
    """Return an enumeration producing 3, 2, 1"""
    return CountdownEnumeration(3)


@pytest.fixture(name="layered_properties", scope="function")
def fixture_layered_properties():
    """Return a property store linked to a defaults store.

    The store overrides "colour", adds a non-string "retries" entry and leaves
    "size" to the defaults.
    """
    defaults = Properties({"size": "M", "colour": "blue"})
    return Properties({"colour": "red", "retries": 3}, defaults=defaults)

"""Module for element level helpers: null-safe equality and array widening."""

from __future__ import annotations

import array
from collections.abc import Iterable, Mapping, Sized
from typing import Any, Final

import numpy as np
import pandas as pd

from ._definitions import NOT_AN_ARRAY_MSG
from .exceptions import InvalidArgumentError


# pandas containers have an equals() of their own
_PANDAS: Final = (pd.DataFrame, pd.Series, pd.Index)
# array types whose == is element-wise and never a plain bool
_VECTORISED: Final = (np.ndarray, *_PANDAS)


def null_safe_equals(a: Any, b: Any) -> bool:
    """Return True if a and b are equal, with two Nones being equal.

    None is never equal to anything else. numpy and pandas arrays are compared
    element by element instead of through their vectorised ``==``, and so are
    containers holding arrays. Values that cannot be compared are not equal.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if isinstance(a, _PANDAS) and type(a) is type(b):
        return bool(a.equals(b))
    if isinstance(a, _VECTORISED) or isinstance(b, _VECTORISED):
        return _elementwise_equals(a, b)
    try:
        return bool(a == b)
    except ValueError:
        # == gave an array, e.g. for lists holding numpy arrays
        return _elementwise_equals(a, b)


def _elementwise_equals(a: Any, b: Any) -> bool:
    try:
        return bool(np.array_equal(np.asarray(a), np.asarray(b)))
    except ValueError:
        # ragged input numpy cannot turn into one array
        pass
    if not (_is_nested(a) and _is_nested(b)) or len(a) != len(b):
        return False
    return all(null_safe_equals(x, y) for x, y in zip(a, b))


def _is_nested(value: Any) -> bool:
    if isinstance(value, str | bytes | bytearray | Mapping):
        return False
    return isinstance(value, Sized) and isinstance(value, Iterable)


def to_object_list(source: Any) -> list[Any]:
    """
    Widen a possibly-None array-like value into a plain list of Python objects.

    numpy and pandas values are converted through ``tolist()`` so that numpy
    scalars come out as native Python numbers. None gives an empty list.

    Args:
        source: numpy array, pandas Series/Index, array.array, memoryview, bytes,
            bytearray, list, tuple or None.

    Raises:
        InvalidArgumentError: source is not an array-like value, e.g. a str,
            a 0-d numpy array or a mapping.
    """
    if source is None:
        return []

    if isinstance(source, np.ndarray):
        if source.ndim == 0:
            raise InvalidArgumentError(f"{NOT_AN_ARRAY_MSG}: 0-d numpy array")
        return source.tolist()

    if isinstance(source, pd.Series | pd.Index | array.array | memoryview):
        return source.tolist()

    if isinstance(source, bytes | bytearray | list | tuple):
        return list(source)

    raise InvalidArgumentError(f"{NOT_AN_ARRAY_MSG}: {type(source).__name__}")


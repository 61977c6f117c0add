"""Column type predicates and numeric coercion for the outlier engine.

``classify_column`` turns a raw column into a tagged variant:

  - ``Numeric``: float values aligned with the original rows, NaN where a
    value is missing (or infinite)
  - ``NonNumeric``: the column cannot be treated as numbers; ``reason``
    says why

The outlier engine only ever looks at ``Numeric`` columns.  Failing to
coerce a column is not an error, the column is just skipped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
import pandas as pd


def is_numeric(dtype) -> bool:
    """Check if dtype is numeric."""
    try:
        return bool(pd.api.types.is_numeric_dtype(dtype))
    except TypeError:
        return False


def is_boolean(dtype) -> bool:
    try:
        return bool(pd.api.types.is_bool_dtype(dtype))
    except TypeError:
        return False


def is_string(dtype) -> bool:
    """Check if dtype is string/object."""
    try:
        return bool(
            pd.api.types.is_string_dtype(dtype)
            or pd.api.types.is_object_dtype(dtype)
        )
    except TypeError:
        return False


def is_numeric_not_bool(dtype) -> bool:
    """True for numeric types excluding boolean."""
    return is_numeric(dtype) and not is_boolean(dtype)


@dataclass(frozen=True, eq=False)
class Numeric:
    """A column usable by the outlier engine."""
    values: np.ndarray  # float64, NaN marks missing


@dataclass(frozen=True)
class NonNumeric:
    """A column the outlier engine skips."""
    reason: str


ColumnKind = Union[Numeric, NonNumeric]


def _as_float_array(ser: pd.Series) -> np.ndarray:
    values = ser.to_numpy(dtype='float64', na_value=np.nan)
    # a copy, so the caller's data is never written through
    values = np.array(values, dtype='float64', copy=True)
    values[~np.isfinite(values)] = np.nan
    return values


def classify_column(ser: pd.Series) -> ColumnKind:
    """Decide whether ``ser`` is a numeric column, coercing text if needed."""
    dtype = ser.dtype
    if is_boolean(dtype):
        return NonNumeric("boolean column")
    if is_numeric(dtype):
        coerced = ser
    elif is_string(dtype):
        try:
            coerced = pd.to_numeric(ser, errors='raise')
        except (ValueError, TypeError) as e:
            return NonNumeric(f"could not convert to numbers: {e}")
        if not is_numeric_not_bool(coerced.dtype):
            return NonNumeric(f"converted to non numeric dtype {coerced.dtype}")
    else:
        return NonNumeric(f"dtype {dtype} is not numeric")

    try:
        return Numeric(_as_float_array(coerced))
    except (ValueError, TypeError) as e:
        # complex and other numbers with no float representation
        return NonNumeric(f"could not convert to float: {e}")

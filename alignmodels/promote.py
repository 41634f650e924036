"""
promote.py — numeric-type promotion for scoring scalars

Scores and costs are summed position by position inside the alignment DP,
so every scalar belonging to one model must live in a single numeric type.
This module resolves that type:

  - promote_scalars    : widest common type of several scalars, plus the
                         scalars converted to it.
  - coerce_scalar      : convert one scalar to a known element type (the
                         type of an existing substitution table).
  - check_numeric_dtype: accept integer/floating dtypes only.

Promotion follows numpy.result_type: int + float -> float and
float32 + float64 -> float64.  A Python float counts as float64 and, among
integers only, a Python int counts as int64, so mixing them with narrower
numpy types widens instead of rounding or overflowing.
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np


def is_numeric_scalar(value: Any) -> bool:
    # bool is an int subclass, but True/False are not scores
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def check_numeric_dtype(dtype) -> np.dtype:
    """
    Return `dtype` as a numpy dtype if it is an integer or floating type.

    Raises
    ------
    TypeError
        For bool, complex, object, string and other non-real dtypes.
    """
    dtype = np.dtype(dtype)
    if dtype == np.bool_ or not (
        np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)
    ):
        raise TypeError(f"Expected an integer or floating element type, got {dtype}")
    return dtype


def promote_scalars(*values) -> Tuple[np.dtype, Tuple[np.generic, ...]]:
    """
    Promote scalars to their widest common numeric type.

    Parameters
    ----------
    *values : int, float, numpy integer or numpy floating
        Scalars to promote.  At least one is required.

    Returns
    -------
    dtype : numpy.dtype
        Common element type.
    promoted : tuple of numpy scalars
        `values` converted to `dtype`, in the same order.

    Raises
    ------
    TypeError
        If no value is given, or a value is not a real numeric scalar.
    """
    if not values:
        raise TypeError("promote_scalars requires at least one value")
    for value in values:
        if not is_numeric_scalar(value):
            raise TypeError(
                f"Cannot promote {value!r} of type {type(value).__name__}: "
                "expected an integer or floating-point scalar"
            )

    has_float = any(isinstance(v, (float, np.floating)) for v in values)
    typed = [_widest_type_of(v, has_float) for v in values]
    dtype = check_numeric_dtype(np.result_type(*typed))
    return dtype, tuple(coerce_scalar(v, dtype) for v in values)


def _widest_type_of(value, has_float: bool):
    # numpy treats Python scalars as "weak" and would narrow them to a typed peer
    if isinstance(value, np.generic):
        return value.dtype
    if isinstance(value, float):
        return np.dtype(np.float64)
    if has_float:
        return value
    if not np.iinfo(np.int64).min <= value <= np.iinfo(np.int64).max:
        raise TypeError(f"{value!r} does not fit any supported integer type")
    return np.dtype(np.int64)


def coerce_scalar(value, dtype) -> np.generic:
    """
    Convert `value` to a scalar of numeric type `dtype`.

    Integer targets only accept values they can hold exactly, so that a
    fractional gap score is never truncated silently.

    Raises
    ------
    TypeError
        If `value` is not numeric, or cannot be represented in `dtype`.
    """
    dtype = check_numeric_dtype(dtype)
    if not is_numeric_scalar(value):
        raise TypeError(
            f"Cannot convert {value!r} of type {type(value).__name__} to {dtype}"
        )

    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        if not float(value).is_integer() or not (info.min <= value <= info.max):
            raise TypeError(f"{value!r} cannot be represented exactly as {dtype}")
        return dtype.type(int(value))
    return dtype.type(value)

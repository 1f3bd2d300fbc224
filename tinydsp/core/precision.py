"""Floating-point precision selection for processors."""

from __future__ import annotations

import os
from typing import Union

import numpy as np

_PRECISION_ENV_VAR = "TINYDSP_PRECISION"


class Precision:
    """
    Named floating-point element type used for coefficients and history.

    Instances are immutable in the sense that their attributes should not be
    modified after construction.
    """

    def __init__(self, name: str, dtype: np.dtype) -> None:
        """
        Initialize a Precision.

        Args:
            name: Logical precision name ("single", "double", "extended").
            dtype: Underlying numpy floating dtype.
        """
        self.name = name
        self.dtype = np.dtype(dtype)

    def __repr__(self) -> str:
        return f"Precision(name={self.name!r}, dtype={self.dtype})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.dtype == other.dtype

    def __hash__(self) -> int:
        return hash(self.dtype)


_PRECISIONS = {
    "single": np.float32,
    "double": np.float64,
    "extended": np.longdouble,
}

PrecisionLike = Union[Precision, str, np.dtype, type, None]


def precision(value: PrecisionLike) -> Precision:
    """
    Resolve a precision specification.

    Supported specifications:
        - "single": float32
        - "double": float64
        - "extended": numpy.longdouble
        - a Precision instance (returned as is)
        - any numpy floating dtype or scalar type (e.g. np.float32)
        - None: the current default precision

    Args:
        value: Precision specification.

    Returns:
        A Precision instance.

    Raises:
        ValueError: If the name is unknown or the dtype is not floating point.
    """
    if value is None:
        return default_precision()
    if isinstance(value, Precision):
        return value
    if isinstance(value, str) and value.lower() in _PRECISIONS:
        name = value.lower()
        return Precision(name, _PRECISIONS[name])

    try:
        dtype = np.dtype(value)
    except TypeError as exc:
        raise ValueError(
            f"Unsupported precision: {value!r}. Supported names: {sorted(_PRECISIONS)}"
        ) from exc

    if not np.issubdtype(dtype, np.floating):
        raise ValueError(f"Precision must be a floating-point type, got {dtype}")
    for name, candidate in _PRECISIONS.items():
        if np.dtype(candidate) == dtype:
            return Precision(name, dtype)
    return Precision(dtype.name, dtype)


_default_precision: Precision = precision(os.getenv(_PRECISION_ENV_VAR) or "double")


def default_precision() -> Precision:
    """
    Return the default precision for newly constructed processors.

    Initialized from the TINYDSP_PRECISION environment variable ("double"
    when unset).
    """
    return _default_precision


def set_default_precision(value: PrecisionLike) -> None:
    """
    Change the default precision for newly constructed processors.

    Existing processors keep the precision they were built with.

    Args:
        value: Any specification accepted by precision(); None is rejected.

    Raises:
        ValueError: If value is None or not a valid precision.
    """
    global _default_precision
    if value is None:
        raise ValueError("Default precision cannot be None")
    _default_precision = precision(value)

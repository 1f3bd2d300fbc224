"""Utility functions for signal processing.

Provides helper routines for input validation of sample buffers.
"""

import operator
from typing import Optional

import numpy as np


def check_1d_array(x, dtype=float) -> np.ndarray:
    """Validate and cast input to a 1D floating-point array.

    Args:
        x: Input array-like object.
        dtype: Target floating dtype (default: float64).

    Returns:
        1D numpy array of ``dtype``.

    Raises:
        ValueError: If input is not 1D, contains NaN, or contains Inf.
    """
    arr = np.asarray(x, dtype=dtype)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"Expected 1D array, got {arr.ndim}D array")
    if np.any(np.isnan(arr)):
        raise ValueError("Input contains NaN values")
    if np.any(np.isinf(arr)):
        raise ValueError("Input contains Inf values")
    return arr


def check_sample_buffer(buffer, length: Optional[int] = None) -> int:
    """Validate a caller-owned sample buffer before in-place processing.

    Accepts any mutable, indexable sequence with a length: numpy arrays,
    lists, Signal instances. Nothing is modified here, so a failing call
    leaves the buffer untouched.

    Args:
        buffer: Sample buffer to be processed in place.
        length: Number of leading samples to process. None means the whole
            buffer.

    Returns:
        The number of samples to process.

    Raises:
        ValueError: If buffer is None, length is zero or negative, length
            exceeds the buffer, or a numpy buffer is not a writable 1D
            floating-point array.
        TypeError: If buffer is not a mutable sequence or length is not an
            integer.
    """
    if buffer is None:
        raise ValueError("Sample buffer must not be None")

    if isinstance(buffer, np.ndarray):
        if buffer.ndim != 1:
            raise ValueError(f"Expected 1D sample buffer, got {buffer.ndim}D array")
        if not np.issubdtype(buffer.dtype, np.floating):
            raise ValueError(f"Sample buffer must hold floating-point values, got {buffer.dtype}")
        if not buffer.flags.writeable:
            raise ValueError("Sample buffer is read-only")
    elif not (hasattr(buffer, "__setitem__") and hasattr(buffer, "__len__")):
        raise TypeError(f"Sample buffer must be a mutable sequence, got {type(buffer).__name__}")

    available = len(buffer)
    if length is None:
        length = available
    else:
        length = operator.index(length)

    if length <= 0:
        raise ValueError(f"Sample buffer length must be positive, got {length}")
    if length > available:
        raise ValueError(f"length {length} exceeds buffer size {available}")
    return length


def gather_samples(buffer, length: int, dtype) -> np.ndarray:
    """Copy the first ``length`` samples of a sequence into a new array.

    Used for buffers that are not numpy arrays, so that every sample is
    known to be numeric before the buffer is written to.

    Raises:
        ValueError: If a sample is None or cannot be converted to ``dtype``.
    """
    values = [buffer[i] for i in range(length)]
    missing = [i for i, value in enumerate(values) if value is None]
    if missing:
        raise ValueError(f"Sample buffer holds None at indices {missing}")
    try:
        samples = np.array(values, dtype=dtype)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Sample buffer holds non-numeric values: {e}")
    if samples.ndim != 1:
        raise ValueError(f"Expected 1D sample buffer, got {samples.ndim}D values")
    return samples

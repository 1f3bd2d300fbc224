"""Base sample processor class."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

import numpy as np

from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .precision import Precision, PrecisionLike, precision

logger = get_logger(__name__)


def as_factor_vector(values, size: int, dtype: np.dtype, what: str = "factors") -> np.ndarray:
    """Copy ``values`` into a fresh 1D array of ``dtype`` with exactly ``size`` entries.

    Raises:
        ValueError: If values is None, not 1D, or has the wrong length.
    """
    if values is None:
        raise ValueError(f"{what} must not be None")
    arr = np.array(values, dtype=dtype)
    if arr.ndim != 1:
        raise ValueError(f"{what} must be 1D, got {arr.ndim}D")
    if arr.shape[0] != size:
        raise ValueError(f"Expected {size} {what}, got {arr.shape[0]}")
    return arr


class SampleProcessor(ABC):
    """
    Base class for everything that transforms a sample buffer in place.

    A processor owns a fixed-length coefficient vector ("factors") whose
    length is chosen at construction and never changes. Subclasses implement
    process() and, when they carry history, extend _state() so that copies
    and equality cover the full internal state.
    """

    def __init__(
        self,
        size: int,
        name: Optional[str] = None,
        dtype: PrecisionLike = None,
    ) -> None:
        """
        Initialize a SampleProcessor.

        Args:
            size: Number of coefficients. Must be >= 1.
            name: Optional label. Defaults to the class name; an empty string
                is rejected.
            dtype: Precision specification ("single", "double", "extended",
                a numpy floating dtype or None for the default precision).

        Raises:
            TypeError: If size is not an integer or name is not a string.
            ValueError: If size < 1, name is empty or dtype is not floating point.
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"size must be an integer, got {type(size).__name__}")
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")

        if name is None:
            name = type(self).__name__
        elif not isinstance(name, str):
            raise TypeError(f"name must be a string, got {type(name).__name__}")
        elif not name:
            raise ValueError("name must be a non-empty string")

        self._size = int(size)
        self._name = name
        self._precision = precision(dtype)
        self._factors = np.zeros(self._size, dtype=self._precision.dtype)

    @property
    def size(self) -> int:
        """Number of coefficients."""
        return self._size

    @property
    def name(self) -> str:
        return self._name

    @property
    def precision(self) -> Precision:
        return self._precision

    @property
    def dtype(self) -> np.dtype:
        """Numpy dtype of coefficients and history."""
        return self._precision.dtype

    @abstractmethod
    def process(self, buffer, length: Optional[int] = None) -> None:
        """
        Process ``buffer`` in place.

        Args:
            buffer: Mutable sequence of samples (numpy array, list, Signal).
            length: Number of leading samples to process. None means
                ``len(buffer)``.
        """

    def set_factors(self, factors) -> None:
        """
        Replace the coefficient vector.

        Values are copied verbatim (cast to the processor dtype); no numeric
        validation is performed, so the caller must supply finite, correctly
        scaled coefficients.

        Args:
            factors: Array-like of exactly ``size`` values.

        Raises:
            ValueError: If the number of values differs from ``size``.
        """
        arr = as_factor_vector(factors, self._size, self.dtype)
        if is_debug_enabled() and not np.all(np.isfinite(arr)):
            logger.warning("%s received non-finite factors: %s", self._name, arr)
        self._factors = arr

    def get_factors(self) -> np.ndarray:
        """Return a copy of the coefficient vector."""
        return self._factors.copy()

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int):
        """
        Return coefficient ``index``.

        Raises:
            IndexError: If index is outside ``[0, size)``.
        """
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Coefficient index must be an integer, got {type(index).__name__}")
        if not 0 <= index < self._size:
            raise IndexError(f"Coefficient index {index} out of range for size {self._size}")
        return self._factors[index]

    def _state(self) -> Tuple[Any, ...]:
        """Return everything that defines the processor's behaviour."""
        return (self._factors,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleProcessor):
            return NotImplemented
        if type(self) is not type(other):
            return False
        mine, theirs = self._state(), other._state()
        if len(mine) != len(theirs):
            return False
        for a, b in zip(mine, theirs):
            if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
                if not np.array_equal(a, b):
                    return False
            elif a != b:
                return False
        return True

    __hash__ = None  # mutable state

    def copy(self) -> "SampleProcessor":
        """Return an independent processor with identical coefficients and history."""
        return copy.deepcopy(self)

    def __copy__(self) -> "SampleProcessor":
        return self.copy()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self._size}, name={self._name!r}, "
            f"dtype={self.dtype})"
        )

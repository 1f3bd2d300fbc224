"""Fixed-size sample container.

A Signal owns a contiguous numpy array of samples and is the usual buffer
handed to Window.process() and Filter.process(), which mutate it in place.
"""

from __future__ import annotations

from typing import Iterator, Optional

import numpy as np

from .core.precision import PrecisionLike, precision
from .logging import get_logger

logger = get_logger(__name__)


class Signal:
    """
    Fixed-length sequence of real-valued samples.

    Indexing is bounds-checked: only ``0 <= index < size`` is accepted.
    Arithmetic operators work element-wise between signals of equal size.
    """

    def __init__(
        self,
        size: int,
        samples=None,
        dtype: PrecisionLike = None,
    ) -> None:
        """
        Initialize a Signal.

        Parameters
        ----------
        size:
            Number of samples (>= 1).
        samples:
            Optional initial samples; must contain exactly ``size`` values.
            Zeros when omitted.
        dtype:
            Precision specification (default precision when None).

        Raises
        ------
        ValueError
            If size < 1 or samples has the wrong length.
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"size must be an integer, got {type(size).__name__}")
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")

        self._precision = precision(dtype)
        if samples is None:
            self._samples = np.zeros(int(size), dtype=self._precision.dtype)
        else:
            arr = np.array(samples, dtype=self._precision.dtype).reshape(-1)
            if arr.shape[0] != size:
                raise ValueError(f"Expected {size} samples, got {arr.shape[0]}")
            self._samples = arr

    @classmethod
    def from_file(cls, path: str, size: int, dtype: PrecisionLike = None) -> "Signal":
        """
        Create a Signal of ``size`` samples read from a text file.

        See load() for the file format.
        """
        signal = cls(size, dtype=dtype)
        signal.load(path)
        return signal

    def load(self, path: str) -> None:
        """
        Overwrite all samples with values read from a text file.

        The file holds whitespace-separated numbers (spaces, tabs or
        newlines). The first ``size`` values are used; extra values are
        ignored. The signal is left unchanged when reading fails.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        ValueError
            If the file cannot be read, holds fewer than ``size`` values or
            a value is not a number.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                tokens = f.read().split()
        except FileNotFoundError:
            raise FileNotFoundError(f"Signal file not found: {path}")
        except OSError as e:
            raise ValueError(f"Signal file {path} cannot be opened: {e}")

        size = len(self)
        if len(tokens) < size:
            raise ValueError(
                f"Signal file {path} holds {len(tokens)} values, expected {size}"
            )
        try:
            values = np.array([float(token) for token in tokens[:size]], dtype=self.dtype)
        except ValueError as e:
            raise ValueError(f"Invalid sample in signal file {path}: {e}")

        self._samples[:] = values
        logger.debug("Loaded %d samples from %s", size, path)

    def save(self, path: str) -> None:
        """
        Write all samples to a text file, one value per line.

        An existing file is overwritten.

        Raises
        ------
        ValueError
            If the file cannot be opened for writing.
        """
        try:
            with open(path, "w", encoding="utf-8") as f:
                for value in self._samples:
                    f.write(f"{float(value)!r}\n")
        except OSError as e:
            raise ValueError(f"Signal file {path} cannot be opened for writing: {e}")
        logger.debug("Saved %d samples to %s", len(self), path)

    @property
    def size(self) -> int:
        return self._samples.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._samples.dtype

    @property
    def data(self) -> np.ndarray:
        """The backing sample array (not a copy)."""
        return self._samples

    def energy(self):
        """Sum of squared samples."""
        return np.sum(self._samples * self._samples)

    def power(self):
        """Average power: energy / size."""
        return self.energy() / self.size

    def rms(self):
        """Root mean square: sqrt(power)."""
        return np.sqrt(self.power())

    def copy(self) -> "Signal":
        return Signal(self.size, self._samples, dtype=self.dtype)

    def __len__(self) -> int:
        return self._samples.shape[0]

    def __iter__(self) -> Iterator:
        return iter(self._samples)

    def _check_index(self, index) -> int:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Signal index must be an integer, got {type(index).__name__}")
        if not 0 <= index < self.size:
            raise IndexError(f"Signal index {index} out of range for size {self.size}")
        return int(index)

    def __getitem__(self, index):
        return self._samples[self._check_index(index)]

    def __setitem__(self, index, value) -> None:
        self._samples[self._check_index(index)] = value

    def _check_other(self, other: object) -> "Signal":
        if not isinstance(other, Signal):
            raise TypeError(f"Expected Signal, got {type(other).__name__}")
        if other.size != self.size:
            raise ValueError(f"Signal sizes differ: {self.size} != {other.size}")
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signal):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._samples, other._samples))

    __hash__ = None

    def __add__(self, other: "Signal") -> "Signal":
        other = self._check_other(other)
        return Signal(self.size, self._samples + other._samples, dtype=self.dtype)

    def __iadd__(self, other: "Signal") -> "Signal":
        other = self._check_other(other)
        self._samples += other._samples
        return self

    def __sub__(self, other: "Signal") -> "Signal":
        other = self._check_other(other)
        return Signal(self.size, self._samples - other._samples, dtype=self.dtype)

    def __isub__(self, other: "Signal") -> "Signal":
        other = self._check_other(other)
        self._samples -= other._samples
        return self

    def __repr__(self) -> str:
        return f"Signal(size={self.size}, dtype={self.dtype})"


def signal_from_file(path: str, size: Optional[int] = None, dtype: PrecisionLike = None) -> Signal:
    """
    Read a signal from a text file.

    Parameters
    ----------
    path:
        File of whitespace-separated numbers.
    size:
        Number of samples to read. When None, every value in the file is used.

    Returns
    -------
    Signal
    """
    if size is not None:
        return Signal.from_file(path, size, dtype=dtype)

    try:
        with open(path, "r", encoding="utf-8") as f:
            count = len(f.read().split())
    except FileNotFoundError:
        raise FileNotFoundError(f"Signal file not found: {path}")
    except OSError as e:
        raise ValueError(f"Signal file {path} cannot be opened: {e}")
    if count == 0:
        raise ValueError(f"Signal file {path} holds no values")
    return Signal.from_file(path, count, dtype=dtype)

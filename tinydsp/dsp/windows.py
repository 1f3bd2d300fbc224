"""Window weights and the Window processor.

All tapered shapes here are symmetric: with N = size - 1 the weight of
sample n depends on n / N, so w[n] == w[size - 1 - n] and both ends carry
the same weight. The module-level generators return plain arrays; Window
stores the same weights as its coefficients and applies them in place.
"""

from typing import Optional, Sequence

import numpy as np

from ..core.precision import PrecisionLike
from ..core.processor import SampleProcessor
from ..logging import get_logger
from .utils import check_sample_buffer, gather_samples

logger = get_logger(__name__)


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"Window size must be positive, got {size}")


def _cosine_sum(size: int, terms: Sequence[float]) -> np.ndarray:
    """w[n] = terms[0] - terms[1] cos(2πn/N) + terms[2] cos(4πn/N) - ...

    A single point carries weight 1.
    """
    _check_size(size)
    if size == 1:
        return np.ones(1)
    phase = 2.0 * np.pi * np.arange(size) / (size - 1)
    w = np.zeros(size)
    for k, term in enumerate(terms):
        w += (-1) ** k * term * np.cos(k * phase)
    return w


def hann(size: int) -> np.ndarray:
    """Hann weights: 0.5 (1 - cos(2πn/(size-1))). Zero at both ends."""
    return _cosine_sum(size, (0.5, 0.5))


def hamming(size: int) -> np.ndarray:
    """Hamming weights: 0.54 - 0.46 cos(2πn/(size-1)). 0.08 at both ends."""
    return _cosine_sum(size, (0.54, 0.46))


def blackman(size: int) -> np.ndarray:
    """Blackman weights: 0.42 - 0.5 cos(2πn/(size-1)) + 0.08 cos(4πn/(size-1))."""
    return _cosine_sum(size, (0.42, 0.5, 0.08))


def rectangular(size: int) -> np.ndarray:
    """All-ones weights; applying them leaves a buffer unchanged."""
    _check_size(size)
    return np.ones(size)


class Window(SampleProcessor):
    """Fixed-length window applied to whole sample buffers.

    A window scales sample n by coefficient n. It has no history and no
    notion of partial application, so process() only accepts buffers of
    exactly ``size`` samples. A new window is rectangular.

    Usage:
        win = Window(256)
        win.setup_hann()
        win.process(frame)
    """

    def __init__(self, size: int, name: Optional[str] = None, dtype: PrecisionLike = None) -> None:
        super().__init__(size, name=name, dtype=dtype)
        self.setup_rectangular()

    def process(self, buffer, length: Optional[int] = None) -> None:
        """Multiply the buffer element-wise by the window coefficients.

        Raises:
            ValueError: If the buffer is invalid or its length differs from ``size``.
                Non-numeric samples in a list or Signal are rejected before
                anything is written.
        """
        length = check_sample_buffer(buffer, length)
        if length != self._size:
            raise ValueError(f"Window of size {self._size} cannot process {length} samples")

        if isinstance(buffer, np.ndarray):
            buffer[:length] *= self._factors
            return
        weighted = gather_samples(buffer, length, self.dtype) * self._factors
        for i in range(length):
            buffer[i] = weighted[i]

    def _assign(self, shape: str, weights: np.ndarray) -> None:
        logger.debug("%s: %s window, %d points", self._name, shape, self._size)
        self._factors = weights.astype(self.dtype)

    def setup_rectangular(self) -> None:
        self._assign("rectangular", rectangular(self._size))

    # The tapered shapes leave the current coefficients alone for size 1:
    # the symmetric formulas divide by size - 1.
    def setup_hamming(self) -> None:
        if self._size <= 1:
            return
        self._assign("hamming", hamming(self._size))

    def setup_hann(self) -> None:
        if self._size <= 1:
            return
        self._assign("hann", hann(self._size))

    def setup_blackman(self) -> None:
        if self._size <= 1:
            return
        self._assign("blackman", blackman(self._size))

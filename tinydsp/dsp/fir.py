"""FIR filtering and windowed-sinc coefficient design.

Implements direct-form FIR convolution over a circular history buffer, plus
low-pass, high-pass (spectral inversion) and band-pass (difference of two
low-passes) coefficient design.
"""

from typing import Optional

import numpy as np

from ..core.precision import PrecisionLike
from ..logging import get_logger
from .filters import Filter

logger = get_logger(__name__)


def _check_cutoff(freq: float) -> None:
    if not 0.0 < freq < 0.5:
        raise ValueError(
            f"Invalid cutoff frequency: {freq}. Use normalized frequency in (0.0, 0.5)"
        )


class FirFilter(Filter):
    """Finite impulse response filter.

    y[n] = sum_i h[i] * x[n - i],  i = 0 .. size-1

    The newest input is aligned with h[0]. Inputs live in a circular buffer
    indexed by a rotating head, so each sample costs O(size) without shifting
    the history. FIR filters are always stable.

    Usage:
        fir = FirFilter(31)
        fir.setup_low_pass(0.1)
        fir.process(samples)
    """

    def __init__(self, size: int, name: Optional[str] = None, dtype: PrecisionLike = None) -> None:
        super().__init__(size, name=name, dtype=dtype)
        self._history = np.zeros(self._size, dtype=self.dtype)
        self._head = 0
        self._offsets = np.arange(self._size)

    @property
    def history(self) -> np.ndarray:
        """Copy of the stored inputs, newest first."""
        return self._history[(self._head - 1 - self._offsets) % self._size]

    def process_sample(self, x: float) -> float:
        self._history[self._head] = x
        taps = self._history[(self._head - self._offsets) % self._size]
        y = np.dot(self._factors, taps)
        self._head += 1
        if self._head >= self._size:
            self._head = 0
        return y

    def reset(self) -> None:
        """Clear the history and rewind the head. Coefficients are kept."""
        self._history[:] = 0.0
        self._head = 0

    def _low_pass_taps(self, freq: float) -> np.ndarray:
        """Windowed-sinc low-pass taps normalized to unity DC gain."""
        _check_cutoff(freq)
        n = np.arange(self._size, dtype=self.dtype)
        center = (self._size - 1) / 2.0
        # 2f * sinc(2f(n - c)) == sin(2πf(n - c)) / (π(n - c)), and 2f at the center
        h = 2.0 * freq * np.sinc(2.0 * freq * (n - center))
        return (h / np.sum(h)).astype(self.dtype)

    def setup_low_pass(self, freq: float) -> None:
        """Configure as a low-pass filter.

        Args:
            freq: Normalized cutoff frequency (fraction of the sampling rate)
                in (0.0, 0.5).

        Raises:
            ValueError: If freq <= 0 or freq >= 0.5.
        """
        self._factors = self._low_pass_taps(freq)
        logger.debug("%s: low-pass at %s, %d taps", self._name, freq, self._size)

    def setup_high_pass(self, freq: float) -> None:
        """Configure as a high-pass filter by spectral inversion of a low-pass.

        All low-pass taps are negated and 1 is added to the center tap
        (size - 1) // 2.

        Raises:
            ValueError: If freq <= 0 or freq >= 0.5.
        """
        h = -self._low_pass_taps(freq)
        h[(self._size - 1) // 2] += 1.0
        self._factors = h
        logger.debug("%s: high-pass at %s, %d taps", self._name, freq, self._size)

    def setup_band_pass(self, freq_low: float, freq_high: float) -> None:
        """Configure as a band-pass filter.

        The taps are low_pass(freq_high) - low_pass(freq_low), which passes
        the band between the two cutoffs.

        Raises:
            ValueError: If freq_low >= freq_high or either cutoff is outside
                (0.0, 0.5).
        """
        if not freq_low < freq_high:
            raise ValueError(
                f"freq_low must be < freq_high, got ({freq_low}, {freq_high})"
            )
        high = self._low_pass_taps(freq_high)
        low = self._low_pass_taps(freq_low)
        self._factors = high - low
        logger.debug(
            "%s: band-pass %s..%s, %d taps", self._name, freq_low, freq_high, self._size
        )

    def _state(self):
        return (self._factors, self._history, self._head)

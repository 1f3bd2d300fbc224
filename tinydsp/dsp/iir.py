"""IIR filtering via the direct-form difference equation.

    y[n] = sum_i b[i] * x[n - i] - sum_j a[j] * y[n - 1 - j]

with a0 implicitly 1. Coefficients are supplied by the caller; the filter
performs no stability analysis (see tinydsp.diagnostics.is_stable).
"""

from typing import Optional

import numpy as np

from ..core.precision import PrecisionLike
from ..core.processor import as_factor_vector
from ..logging import get_logger
from .filters import Filter

logger = get_logger(__name__)


class IirFilter(Filter):
    """Infinite impulse response filter with feedforward and feedback taps.

    The factor vector holds ``num_b`` feedforward coefficients
    ``b0 .. b(num_b-1)`` followed by ``num_a`` feedback coefficients
    ``a1 .. a(num_a)``. Input and output histories are linear buffers,
    newest sample at index 0, shifted by one on every sample.

    Unstable coefficient sets (poles on or outside the unit circle) make the
    output grow without bound; keeping the poles inside is the caller's job.

    reset() clears the coefficients as well as the histories, so numerator
    and denominator must be supplied again together through
    set_coefficients().
    """

    def __init__(
        self,
        num_b: int,
        num_a: int,
        name: Optional[str] = None,
        dtype: PrecisionLike = None,
    ) -> None:
        """
        Initialize an IirFilter with zeroed coefficients and histories.

        Args:
            num_b: Number of feedforward coefficients (>= 1).
            num_a: Number of feedback coefficients, a0 excluded (>= 0).
            name: Optional label.
            dtype: Precision specification.

        Raises:
            ValueError: If num_b < 1 or num_a < 0.
        """
        for label, value in (("num_b", num_b), ("num_a", num_a)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{label} must be an integer, got {type(value).__name__}")
        if num_b < 1:
            raise ValueError(f"num_b must be >= 1, got {num_b}")
        if num_a < 0:
            raise ValueError(f"num_a must be >= 0, got {num_a}")

        super().__init__(int(num_b) + int(num_a), name=name, dtype=dtype)
        self._num_b = int(num_b)
        self._num_a = int(num_a)
        self._in_history = np.zeros(self._num_b, dtype=self.dtype)
        self._out_history = np.zeros(self._num_a, dtype=self.dtype)

    @property
    def num_b(self) -> int:
        return self._num_b

    @property
    def num_a(self) -> int:
        return self._num_a

    @property
    def feedforward(self) -> np.ndarray:
        """Copy of b0 .. b(num_b-1)."""
        return self._factors[: self._num_b].copy()

    @property
    def feedback(self) -> np.ndarray:
        """Copy of a1 .. a(num_a)."""
        return self._factors[self._num_b :].copy()

    def set_coefficients(self, b, a) -> None:
        """Set feedforward and feedback coefficients together.

        Args:
            b: ``num_b`` feedforward coefficients [b0, ..., b(num_b-1)].
            a: ``num_a`` feedback coefficients [a1, ..., a(num_a)], a0 excluded.

        Raises:
            ValueError: If either vector has the wrong length. Nothing is
                written in that case.
        """
        b = as_factor_vector(b, self._num_b, self.dtype, what="feedforward coefficients")
        a = as_factor_vector(a, self._num_a, self.dtype, what="feedback coefficients")
        self.set_factors(np.concatenate([b, a]))
        logger.debug("%s: coefficients b=%s a=%s", self._name, b, a)

    def process_sample(self, x: float) -> float:
        self._in_history[1:] = self._in_history[:-1]
        self._in_history[0] = x

        feedforward = np.dot(self._factors[: self._num_b], self._in_history)
        feedback = np.dot(self._factors[self._num_b :], self._out_history)
        y = feedforward - feedback

        if self._num_a > 0:
            self._out_history[1:] = self._out_history[:-1]
            self._out_history[0] = y
        return y

    def reset(self) -> None:
        """Clear both histories and all coefficients."""
        self._in_history[:] = 0.0
        self._out_history[:] = 0.0
        self._factors[:] = 0.0

    def _state(self):
        return (self._factors, self._in_history, self._out_history)

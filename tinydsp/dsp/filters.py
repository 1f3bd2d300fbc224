"""Stateful filter base class and runtime filter selection.

Every filter processes a buffer the same way: each sample, in order, is
replaced by the output of process_sample(). Concrete filters only implement
process_sample() and reset().
"""

from abc import abstractmethod
from typing import Optional

import numpy as np

from ..core.processor import SampleProcessor
from .utils import check_1d_array, check_sample_buffer, gather_samples


class Filter(SampleProcessor):
    """Base class for digital filters with history that persists across calls.

    History is only cleared by an explicit reset(), so consecutive process()
    calls on chunks of one stream give the same result as a single call on
    the whole stream.
    """

    @abstractmethod
    def reset(self) -> None:
        """Clear internal history."""

    @abstractmethod
    def process_sample(self, x: float) -> float:
        """Filter one sample, update history and return the output."""

    def process(self, buffer, length: Optional[int] = None) -> None:
        """Filter the first ``length`` samples of ``buffer`` in place.

        Args:
            buffer: Mutable sequence of samples (numpy array, list, Signal).
            length: Number of leading samples to filter (default: all).

        Raises:
            ValueError: If buffer is None, length is not positive or exceeds
                the buffer, or a list or Signal holds a non-numeric
                sample. Neither the buffer nor the history is touched then.
        """
        length = check_sample_buffer(buffer, length)
        if isinstance(buffer, np.ndarray):
            for i in range(length):
                buffer[i] = self.process_sample(buffer[i])
            return

        samples = gather_samples(buffer, length, self.dtype)
        for i in range(length):
            samples[i] = self.process_sample(samples[i])
        for i in range(length):
            buffer[i] = samples[i]

    def filter(self, x) -> np.ndarray:
        """Filter a copy of ``x`` and return it, leaving ``x`` untouched.

        Args:
            x: Array-like of finite samples.

        Returns:
            Filtered samples in the filter's dtype.

        Raises:
            ValueError: If x is not 1D, is empty or holds NaN/Inf.
        """
        out = np.array(check_1d_array(x, dtype=self.dtype))
        self.process(out)
        return out


def create_filter(kind: str, *args, **kwargs) -> Filter:
    """Create a filter by name.

    Supported kinds:
        - "fir": FirFilter(size, name=None, dtype=None)
        - "iir": IirFilter(num_b, num_a, name=None, dtype=None)

    Args:
        kind: Filter kind (case-insensitive).
        *args, **kwargs: Forwarded to the filter constructor.

    Returns:
        A freshly constructed filter with zeroed history.

    Raises:
        ValueError: If kind is not supported.
    """
    from .fir import FirFilter
    from .iir import IirFilter

    kinds = {"fir": FirFilter, "iir": IirFilter}
    key = kind.lower() if isinstance(kind, str) else kind
    if key not in kinds:
        raise ValueError(
            f"Unsupported filter kind: {kind!r}. Supported kinds: {sorted(kinds)}"
        )
    return kinds[key](*args, **kwargs)

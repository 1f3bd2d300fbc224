"""Stateful filters and windows operating on sample buffers in place.

This package provides:
- Window functions (Hann, Hamming, Blackman, rectangular) and the Window processor
- FIR filtering with windowed-sinc low-pass, high-pass and band-pass design
- IIR filtering from caller-supplied feedforward/feedback coefficients
- Runtime filter selection through a common Filter interface
"""

from .filters import Filter, create_filter
from .fir import FirFilter
from .iir import IirFilter
from .utils import check_1d_array, check_sample_buffer, gather_samples
from .windows import Window, blackman, hamming, hann, rectangular

__all__ = [
    # Utils
    "check_1d_array",
    "check_sample_buffer",
    "gather_samples",
    # Windows
    "hann",
    "hamming",
    "blackman",
    "rectangular",
    "Window",
    # Filters
    "Filter",
    "create_filter",
    "FirFilter",
    "IirFilter",
]

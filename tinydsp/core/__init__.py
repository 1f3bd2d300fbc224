"""Core abstractions: sample processors and numeric precision."""

from .precision import Precision, default_precision, precision, set_default_precision
from .processor import SampleProcessor

__all__ = [
    "Precision",
    "precision",
    "default_precision",
    "set_default_precision",
    "SampleProcessor",
]

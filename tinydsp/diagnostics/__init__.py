"""Diagnostics and debugging utilities for tinydsp."""

from .core import assert_finite, iir_poles, is_stable
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_finite",
    "iir_poles",
    "is_stable",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

"""tinydsp - fixed-length FIR/IIR filters and window functions on in-memory sample buffers."""

__version__ = "0.1.0"

# Core abstractions
from .core import (
    Precision,
    SampleProcessor,
    default_precision,
    precision,
    set_default_precision,
)

# Diagnostics
from .diagnostics import (
    assert_finite,
    debug_context,
    iir_poles,
    is_debug_enabled,
    is_stable,
    set_debug_enabled,
)

# Filters and windows
from .dsp import (
    Filter,
    FirFilter,
    IirFilter,
    Window,
    blackman,
    check_1d_array,
    check_sample_buffer,
    gather_samples,
    create_filter,
    hamming,
    hann,
    rectangular,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Sample container
from .signals import Signal, signal_from_file

__all__ = [
    "__version__",
    # Core
    "Precision",
    "precision",
    "default_precision",
    "set_default_precision",
    "SampleProcessor",
    # Diagnostics
    "assert_finite",
    "iir_poles",
    "is_stable",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Filters and windows
    "Filter",
    "FirFilter",
    "IirFilter",
    "create_filter",
    "Window",
    "hann",
    "hamming",
    "blackman",
    "rectangular",
    "check_1d_array",
    "check_sample_buffer",
    "gather_samples",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Signals
    "Signal",
    "signal_from_file",
]

"""Filter chain example: window a noisy tone, then filter it through FIR and IIR stages.

The filter kinds are picked at runtime by name, and each stage is driven
only through the common Filter interface.
"""

from __future__ import annotations

import numpy as np

import tinydsp as td

# Second-order Butterworth low-pass at 0.05 of the sampling rate.
IIR_B = [0.02008337, 0.04016673, 0.02008337]
IIR_A = [-1.56101808, 0.64135154]


def main() -> None:
    """Run a 256-sample frame through a window and two filter stages."""
    rng = np.random.default_rng(0)
    n = np.arange(256)
    frame = td.Signal(256, np.sin(2.0 * np.pi * 0.02 * n) + 0.3 * rng.standard_normal(256))
    print(f"Input RMS:            {frame.rms():.6f}")

    window = td.Window(256)
    window.setup_hann()
    window.process(frame)
    print(f"After Hann window:    {frame.rms():.6f}")

    stages = [td.create_filter("fir", 31), td.create_filter("iir", 3, 2)]
    stages[0].setup_low_pass(0.1)
    stages[1].set_coefficients(IIR_B, IIR_A)
    print(f"IIR poles stable:     {td.is_stable(IIR_A)}")

    for stage in stages:
        stage.process(frame)
        print(f"After {type(stage).__name__:<14} {frame.rms():.6f}")


if __name__ == "__main__":
    main()

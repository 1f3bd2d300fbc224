"""FIR example: impulse response of a short windowed-sinc low-pass filter.

Feeds a unit impulse through a 5-tap low-pass FirFilter designed at a
normalized cutoff of 0.1. The first five outputs are the filter taps, the
rest are zeros.
"""

from __future__ import annotations

import numpy as np

import tinydsp as td


def main() -> None:
    """Print the impulse response of a 5-tap low-pass filter."""
    fir = td.FirFilter(5, name="demo")
    fir.setup_low_pass(0.1)

    impulse = np.zeros(15)
    impulse[0] = 1.0
    fir.process(impulse, len(impulse))

    print(" ".join(f"{x:.6g}" for x in impulse))
    print(f"Sum of taps (DC gain): {np.sum(fir.get_factors()):.6f}")


if __name__ == "__main__":
    main()

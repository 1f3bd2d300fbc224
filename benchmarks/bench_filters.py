"""Benchmark per-sample throughput of FIR and IIR filters and windows."""

import time
from typing import Dict

import numpy as np

import tinydsp as td


def benchmark_filter(
    kind: str,
    n_samples: int = 20000,
    size: int = 64,
    dtype: str = "double",
) -> Dict[str, float]:
    """Benchmark buffer processing for one filter kind.

    Args:
        kind: "fir" or "iir".
        n_samples: Number of samples per run.
        size: FIR tap count, or total IIR coefficient count (split evenly).
        dtype: Precision name.

    Returns:
        Dictionary with timing results.
    """
    if kind == "fir":
        filt = td.create_filter("fir", size, dtype=dtype)
        filt.setup_low_pass(0.1)
    else:
        num_b = size // 2
        filt = td.create_filter("iir", num_b, size - num_b, dtype=dtype)
        filt.set_coefficients(np.full(num_b, 1.0 / num_b), np.zeros(size - num_b))

    x = np.random.default_rng(0).standard_normal(n_samples).astype(filt.dtype)

    # Warmup
    filt.process(x[:100].copy())
    filt.reset()

    start = time.perf_counter()
    filt.process(x)
    end = time.perf_counter()

    total_time = end - start
    return {
        "total_time": total_time,
        "time_per_sample": total_time / n_samples,
        "samples_per_second": n_samples / total_time,
    }


def benchmark_window(size: int = 1024, repeats: int = 1000) -> Dict[str, float]:
    """Benchmark applying a Hann window to frames of ``size`` samples."""
    window = td.Window(size)
    window.setup_hann()
    frame = np.ones(size)

    start = time.perf_counter()
    for _ in range(repeats):
        window.process(frame)
    end = time.perf_counter()

    total_time = end - start
    return {"total_time": total_time, "time_per_frame": total_time / repeats}


def main() -> None:
    """Run all benchmarks."""
    print("=" * 60)
    print("Filter Benchmarks")
    print("=" * 60)

    for kind in ("fir", "iir"):
        for size in (8, 64, 256):
            result = benchmark_filter(kind, size=size)
            print(
                f"  {kind.upper()} size={size:4d}: "
                f"{result['time_per_sample'] * 1e6:.2f} µs/sample "
                f"({result['samples_per_second']:.0f} samples/s)"
            )

    result = benchmark_window()
    print(f"  Window size=1024: {result['time_per_frame'] * 1e6:.2f} µs/frame")


if __name__ == "__main__":
    main()

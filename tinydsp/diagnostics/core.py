"""Numerical sanity checks for coefficient vectors.

None of these run on the processing path: the engine trusts its caller.
They exist so that callers can vet coefficients (for example IIR stability)
before handing them over.
"""

from __future__ import annotations

import numpy as np


def assert_finite(values, what: str = "values") -> None:
    """
    Raise if any entry of ``values`` is NaN or infinite.

    Parameters
    ----------
    values:
        Array-like of numbers.
    what:
        Name used in the error message.

    Raises
    ------
    ValueError
        If a non-finite entry is found.
    """
    arr = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(arr)):
        bad = np.flatnonzero(~np.isfinite(arr)).tolist()
        raise ValueError(f"{what} contain non-finite entries at indices {bad}")


def iir_poles(a) -> np.ndarray:
    """
    Return the poles of the recursive part ``1 + a1 z^-1 + ... + aN z^-N``.

    Parameters
    ----------
    a:
        Feedback coefficients ``[a1, ..., aN]`` without the implicit ``a0 = 1``.

    Returns
    -------
    np.ndarray
        Complex array of the N poles (empty when N is 0).
    """
    a = np.asarray(a, dtype=float).reshape(-1)
    order = a.size
    if order == 0:
        return np.zeros(0, dtype=complex)

    # Companion matrix of z^N + a1 z^(N-1) + ... + aN
    companion = np.zeros((order, order), dtype=float)
    companion[0, :] = -a
    if order > 1:
        companion[1:, :-1] = np.eye(order - 1)
    return np.linalg.eigvals(companion).astype(complex)


def is_stable(a, margin: float = 0.0) -> bool:
    """
    Check whether every pole of the feedback polynomial lies inside the unit circle.

    Parameters
    ----------
    a:
        Feedback coefficients ``[a1, ..., aN]``.
    margin:
        Required distance from the unit circle (default: 0).

    Returns
    -------
    bool
        True if ``max |p| < 1 - margin``.
    """
    poles = iir_poles(a)
    if poles.size == 0:
        return True
    return bool(np.max(np.abs(poles)) < 1.0 - margin)

"""Pytest configuration and shared fixtures for tinydsp tests.

This module provides:
- A deterministic numpy RNG fixture
- Global seeding so that tests are reproducible
- Restoration of process-wide settings (precision, debug mode) after each test
"""

import os

import numpy as np
import pytest

from tinydsp.core.precision import default_precision, set_default_precision
from tinydsp.diagnostics.debug_mode import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set the global numpy seed for reproducibility."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture(scope="function", autouse=True)
def restore_global_settings():
    """Undo changes a test makes to the default precision or debug mode."""
    saved_precision = default_precision()
    saved_debug = is_debug_enabled()
    yield
    set_default_precision(saved_precision)
    set_debug_enabled(saved_debug)


@pytest.fixture
def impulse():
    """Return a factory for unit impulses of a given length."""

    def make(length: int) -> np.ndarray:
        x = np.zeros(length)
        x[0] = 1.0
        return x

    return make

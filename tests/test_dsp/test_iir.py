"""Tests for dsp.iir module."""

import numpy as np
import pytest

from tinydsp.diagnostics import is_stable
from tinydsp.dsp.iir import IirFilter

B = [0.02008337, 0.04016673, 0.02008337]
A = [-1.56101808, 0.64135154]


def reference_direct_form(b, a, x):
    """Textbook difference equation with a0 = 1, written with plain lists."""
    y = []
    for n in range(len(x)):
        acc = 0.0
        for i, bi in enumerate(b):
            if n - i >= 0:
                acc += bi * x[n - i]
        for j, aj in enumerate(a):
            if n - 1 - j >= 0:
                acc -= aj * y[n - 1 - j]
        y.append(acc)
    return np.array(y)


def test_zero_coefficients_give_zero_output(rng):
    iir = IirFilter(3, 2)
    x = rng.standard_normal(25)
    iir.process(x)
    np.testing.assert_array_equal(x, np.zeros(25))


def test_reference_impulse_response(impulse):
    iir = IirFilter(3, 2)
    iir.set_coefficients(B, A)

    x = impulse(5)
    iir.process(x)

    expected = reference_direct_form(B, A, impulse(5))
    np.testing.assert_allclose(x, expected, rtol=1e-12, atol=1e-15)
    assert x[0] == pytest.approx(B[0])
    assert x[1] == pytest.approx(B[1] - A[0] * B[0])


def test_impulse_response_decays(impulse):
    assert is_stable(A)
    iir = IirFilter(3, 2)
    iir.set_coefficients(B, A)

    x = impulse(400)
    iir.process(x)

    assert np.max(np.abs(x[300:])) < 1e-6
    # Complex poles: the response changes sign (decaying oscillation)
    assert np.any(x[:100] < 0.0)


def test_matches_reference_on_random_input(rng):
    x = rng.standard_normal(64)
    iir = IirFilter(3, 2)
    iir.set_coefficients(B, A)
    y = x.copy()
    iir.process(y)
    np.testing.assert_allclose(y, reference_direct_form(B, A, x), rtol=1e-10, atol=1e-12)


def test_unity_dc_gain_butterworth():
    """b sums to 1 + a1 + a2, so the steady-state step response is 1."""
    iir = IirFilter(3, 2)
    iir.set_coefficients(B, A)
    step = np.ones(500)
    iir.process(step)
    assert step[-1] == pytest.approx(1.0, abs=1e-6)


def test_pure_fir_when_no_feedback(impulse):
    iir = IirFilter(3, 0)
    iir.set_coefficients([1.0, 2.0, 3.0], [])
    x = impulse(5)
    iir.process(x)
    np.testing.assert_array_equal(x, [1.0, 2.0, 3.0, 0.0, 0.0])


def test_one_pole_recursion():
    """y[n] = x[n] + 0.5 y[n-1]."""
    iir = IirFilter(1, 1)
    iir.set_coefficients([1.0], [-0.5])
    x = np.array([1.0, 0.0, 0.0, 0.0])
    iir.process(x)
    np.testing.assert_allclose(x, [1.0, 0.5, 0.25, 0.125])


def test_unstable_coefficients_diverge_silently(impulse):
    iir = IirFilter(1, 1)
    iir.set_coefficients([1.0], [-1.5])
    assert not is_stable([-1.5])
    x = impulse(60)
    iir.process(x)
    assert abs(x[-1]) > 1e9


def test_state_persists_across_calls(rng):
    x = rng.standard_normal(30)
    whole = IirFilter(3, 2)
    whole.set_coefficients(B, A)
    chunked = whole.copy()

    y_whole = x.copy()
    whole.process(y_whole)
    y_chunked = x.copy()
    chunked.process(y_chunked[:7])
    chunked.process(y_chunked[7:])

    np.testing.assert_allclose(y_chunked, y_whole)
    assert chunked == whole


def test_factor_layout():
    iir = IirFilter(3, 2)
    iir.set_coefficients(B, A)
    np.testing.assert_array_equal(iir.get_factors(), B + A)
    np.testing.assert_array_equal(iir.feedforward, B)
    np.testing.assert_array_equal(iir.feedback, A)
    assert iir.size == 5
    assert (iir.num_b, iir.num_a) == (3, 2)


def test_set_factors_matches_set_coefficients():
    via_coefficients = IirFilter(3, 2)
    via_coefficients.set_coefficients(B, A)
    via_factors = IirFilter(3, 2)
    via_factors.set_factors(B + A)
    assert via_factors == via_coefficients


@pytest.mark.parametrize(
    "b, a",
    [
        ([1.0, 2.0], A),
        (B, [0.1]),
        (B + [0.0], A),
        (B, A + [0.0]),
    ],
)
def test_set_coefficients_length_checked_before_write(b, a):
    iir = IirFilter(3, 2)
    iir.set_coefficients(B, A)
    with pytest.raises(ValueError):
        iir.set_coefficients(b, a)
    np.testing.assert_array_equal(iir.get_factors(), B + A)


def test_reset_clears_coefficients_and_history(rng):
    iir = IirFilter(3, 2)
    iir.set_coefficients(B, A)
    iir.process(rng.standard_normal(10))

    iir.reset()
    np.testing.assert_array_equal(iir.get_factors(), np.zeros(5))
    assert iir == IirFilter(3, 2)

    x = rng.standard_normal(10)
    iir.process(x)
    np.testing.assert_array_equal(x, np.zeros(10))


def test_reset_then_set_coefficients_restarts_cleanly(impulse):
    iir = IirFilter(3, 2)
    iir.set_coefficients(B, A)
    iir.process(np.ones(20))
    iir.reset()
    iir.set_coefficients(B, A)

    x = impulse(5)
    iir.process(x)
    np.testing.assert_allclose(x, reference_direct_form(B, A, impulse(5)))


def test_constructor_validation():
    with pytest.raises(ValueError, match="num_b"):
        IirFilter(0, 2)
    with pytest.raises(ValueError, match="num_a"):
        IirFilter(2, -1)
    with pytest.raises(TypeError):
        IirFilter(2.0, 1)


def test_extended_precision(impulse):
    iir = IirFilter(1, 1, dtype="extended")
    iir.set_coefficients([1.0], [-0.5])
    x = impulse(3).astype(np.longdouble)
    iir.process(x)
    assert iir.get_factors().dtype == np.longdouble
    np.testing.assert_allclose(x.astype(float), [1.0, 0.5, 0.25])

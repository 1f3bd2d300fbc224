"""Tests for core precision and sample processor abstractions."""

import copy

import numpy as np
import pytest

import tinydsp as td
from tinydsp.core.precision import (
    Precision,
    default_precision,
    precision,
    set_default_precision,
)
from tinydsp.core.processor import SampleProcessor
from tinydsp.dsp.fir import FirFilter
from tinydsp.dsp.iir import IirFilter
from tinydsp.dsp.windows import Window


class TestPrecision:
    """Tests for Precision resolution."""

    @pytest.mark.parametrize(
        "name, dtype",
        [("single", np.float32), ("double", np.float64), ("extended", np.longdouble)],
    )
    def test_named_precisions(self, name, dtype):
        p = precision(name)
        assert p.name == name
        assert p.dtype == np.dtype(dtype)

    def test_name_is_case_insensitive(self):
        assert precision("SINGLE").dtype == np.float32

    def test_numpy_dtype_maps_to_name(self):
        assert precision(np.float32).name == "single"
        assert precision(np.dtype("float64")).name == "double"

    def test_precision_instance_passthrough(self):
        p = Precision("single", np.float32)
        assert precision(p) is p

    def test_none_is_default(self):
        assert precision(None) == default_precision()

    def test_integral_dtype_rejected(self):
        with pytest.raises(ValueError, match="floating-point"):
            precision(np.int32)

    def test_unknown_name_rejected(self):
        with pytest.raises(ValueError, match="Unsupported precision"):
            precision("quadruple")

    def test_repr(self):
        assert "single" in repr(precision("single"))

    def test_set_default_precision(self):
        set_default_precision("single")
        assert default_precision().dtype == np.float32
        assert FirFilter(4).dtype == np.float32
        # Explicit dtype wins over the default
        assert FirFilter(4, dtype="double").dtype == np.float64

    def test_set_default_precision_rejects_none(self):
        with pytest.raises(ValueError):
            set_default_precision(None)


class TestSampleProcessor:
    """Tests for behaviour shared by every processor."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            SampleProcessor(4)

    @pytest.mark.parametrize("size", [0, -3])
    def test_size_must_be_positive(self, size):
        with pytest.raises(ValueError, match="size must be >= 1"):
            FirFilter(size)

    def test_size_must_be_integer(self):
        with pytest.raises(TypeError):
            Window(4.0)

    def test_default_name_is_class_name(self):
        assert FirFilter(3).name == "FirFilter"
        assert Window(3, name="analysis").name == "analysis"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            Window(8, name="")
        with pytest.raises(ValueError, match="non-empty"):
            IirFilter(2, 1, name="")

    def test_integral_dtype_rejected(self):
        with pytest.raises(ValueError):
            FirFilter(4, dtype=np.int64)

    def test_factors_start_at_zero(self):
        fir = FirFilter(6)
        np.testing.assert_array_equal(fir.get_factors(), np.zeros(6))
        assert len(fir) == 6
        assert fir.size == 6

    def test_set_and_get_factors(self):
        fir = FirFilter(3)
        fir.set_factors([0.25, 0.5, 0.25])
        np.testing.assert_array_equal(fir.get_factors(), [0.25, 0.5, 0.25])

    def test_get_factors_is_a_copy(self):
        fir = FirFilter(3)
        fir.set_factors([1.0, 2.0, 3.0])
        factors = fir.get_factors()
        factors[0] = 100.0
        assert fir.get_factors()[0] == 1.0

    def test_set_factors_copies_input(self):
        fir = FirFilter(2)
        source = np.array([1.0, 2.0])
        fir.set_factors(source)
        source[0] = -5.0
        assert fir.get_factors()[0] == 1.0

    def test_set_factors_is_not_validated_numerically(self):
        fir = FirFilter(2)
        fir.set_factors([np.inf, -1e300])
        assert np.isinf(fir.get_factors()[0])

    @pytest.mark.parametrize("values", [[1.0, 2.0], [1.0, 2.0, 3.0, 4.0], []])
    def test_set_factors_length_mismatch(self, values):
        fir = FirFilter(3)
        fir.set_factors([1.0, 1.0, 1.0])
        with pytest.raises(ValueError, match="Expected 3 factors"):
            fir.set_factors(values)
        np.testing.assert_array_equal(fir.get_factors(), [1.0, 1.0, 1.0])

    def test_set_factors_rejects_none_and_2d(self):
        fir = FirFilter(4)
        with pytest.raises(ValueError):
            fir.set_factors(None)
        with pytest.raises(ValueError, match="1D"):
            fir.set_factors(np.ones((2, 2)))

    def test_factors_take_processor_dtype(self):
        fir = FirFilter(3, dtype="single")
        fir.set_factors(np.array([0.1, 0.2, 0.3], dtype=np.float64))
        assert fir.get_factors().dtype == np.float32

    def test_indexed_access(self):
        win = Window(4)
        assert win[0] == 1.0
        assert win[3] == 1.0
        with pytest.raises(IndexError):
            win[4]
        with pytest.raises(IndexError):
            win[-1]
        with pytest.raises(TypeError):
            win["0"]

    def test_repr(self):
        text = repr(FirFilter(5, name="lp"))
        assert "FirFilter" in text
        assert "size=5" in text
        assert "'lp'" in text

    def test_processors_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(FirFilter(2))


class TestCopyAndEquality:
    """Copies duplicate and equality compares coefficients and history."""

    def test_copy_is_equal_and_independent(self):
        fir = FirFilter(4)
        fir.setup_low_pass(0.2)
        fir.process(np.array([1.0, 2.0, 3.0]))

        clone = fir.copy()
        assert clone == fir
        assert clone is not fir

        clone.process(np.array([1.0]))
        assert clone != fir

    def test_copy_module_uses_full_state(self):
        iir = IirFilter(2, 1)
        iir.set_coefficients([0.5, 0.5], [-0.5])
        iir.process(np.array([1.0, 0.0]))

        shallow = copy.copy(iir)
        deep = copy.deepcopy(iir)
        assert shallow == iir
        assert deep == iir

        shallow.process(np.array([1.0]))
        assert shallow != iir
        assert deep == iir

    def test_equality_includes_history(self):
        a = FirFilter(3)
        b = FirFilter(3)
        a.set_factors([1.0, 0.0, 0.0])
        b.set_factors([1.0, 0.0, 0.0])
        assert a == b

        a.process(np.array([0.5]))
        assert a != b
        a.reset()
        assert a == b

    def test_equality_requires_same_type(self):
        assert FirFilter(3) != Window(3)
        assert IirFilter(2, 1) != FirFilter(3)
        assert (FirFilter(3) == "FirFilter") is False

    def test_name_does_not_affect_equality(self):
        assert FirFilter(3, name="a") == FirFilter(3, name="b")

    def test_top_level_exports(self):
        assert td.SampleProcessor is SampleProcessor
        assert td.FirFilter is FirFilter

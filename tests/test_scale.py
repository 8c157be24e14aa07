import numpy as np
import pytest
from numpy.testing import assert_allclose

from svg_charts.scale import (
    as_samples,
    format_tick,
    linear_scale,
    nice_num,
    nice_scale,
    value_range,
)
from svg_charts.types import Series


class TestSamples:
    def test_accepts_lists_arrays_and_series(self):
        assert_allclose(as_samples([1, 2, 3]), [1.0, 2.0, 3.0])
        assert_allclose(as_samples(np.array([[1.0], [2.0]])), [1.0, 2.0])
        assert_allclose(as_samples(Series.from_pairs([(4, "a"), (5, "b")])), [4.0, 5.0])
        assert_allclose(as_samples(x for x in (7, 8)), [7.0, 8.0])

    def test_empty(self):
        assert as_samples([]).shape == (0,)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValueError, match="finite"):
            as_samples([1.0, bad])


def test_value_range_includes_zero():
    assert value_range([-4, 10, 0, 50, 2, -6, 7]) == (-6.0, 50.0)
    assert value_range([-4.9, 10.0, 0.8, 50.2, 2.7, -6.3, 7.5]) == (-6.3, 50.2)
    assert value_range([-4, -10, -3, -50, -2, -6, -7]) == (-50.0, 0.0)
    assert value_range([4, 10, 2, 50, 2, 6, 7]) == (0.0, 50.0)
    assert value_range([]) == (0.0, 0.0)
    assert value_range([5.0]) == (0.0, 5.0)


class TestLinearScale:
    def test_even_ticks(self):
        scale = linear_scale(0.0, 3.0, 4)
        ticks = scale.ticks()
        assert len(ticks) == 5
        assert_allclose([t.value for t in ticks], [0.0, 0.75, 1.5, 2.25, 3.0], atol=1e-12)
        assert_allclose([t.y_fraction for t in ticks], [0.0, 0.25, 0.5, 0.75, 1.0], atol=1e-12)
        assert [t.label for t in ticks] == ["0", "0.75", "1.5", "2.25", "3"]

    def test_top_tick_never_exceeds_max(self):
        for upper in (0.1, 0.3, 1.0 / 3.0, 7.7, 1e6 + 0.1):
            scale = linear_scale(0.0, upper, 7)
            values = scale.tick_values()
            assert values[-1] == upper
            assert np.all(values <= upper)
            assert len(values) <= 7 + 1

    def test_normalize_is_linear_and_bounded(self):
        scale = linear_scale(-2.0, 4.0, 3)
        assert scale.normalize(-2.0) == 0.0
        assert scale.normalize(4.0) == 1.0
        assert scale.normalize(1.0) == pytest.approx(0.5)
        assert scale.baseline == pytest.approx(1.0 / 3.0)
        assert scale.normalize(100.0) == 1.0
        assert scale.normalize(-100.0) == 0.0

    def test_degenerate_range_single_tick_normalizes_to_zero(self):
        scale = linear_scale(0.0, 0.0, 5)
        assert scale.is_degenerate
        ticks = scale.ticks()
        assert len(ticks) == 1
        assert ticks[0].value == 0.0
        assert ticks[0].y_fraction == 0.0
        assert scale.normalize(0.0) == 0.0
        assert scale.normalize(3.0) == 0.0

    def test_max_ticks_must_be_positive(self):
        with pytest.raises(ValueError):
            linear_scale(0.0, 1.0, 0)


class TestNiceScale:
    def test_nice_num(self):
        assert nice_num(20.0, False) == 20.0
        assert nice_num(21.0, False) == 50.0
        assert nice_num(2.22, True) == 2.0
        assert nice_num(0.8, True) == pytest.approx(1.0)
        assert nice_num(0.04, True) == pytest.approx(0.05)
        assert nice_num(140.0, True) == pytest.approx(100.0)

    def test_symmetric_range(self):
        scale = nice_scale(-10.0, 10.0, 10)
        assert scale.lower == -10.0
        assert scale.upper == 10.0
        assert scale.spacing == 2.0
        assert scale.num_ticks == 11

        ticks = scale.ticks()
        assert ticks[0].y_fraction == 0.0
        assert ticks[0].label == "-10"
        assert ticks[4].y_fraction == pytest.approx(0.4)
        assert ticks[4].label == "-2"
        assert ticks[10].y_fraction == 1.0
        assert ticks[10].label == "10"

    def test_widens_range_to_spacing_multiples(self):
        scale = nice_scale(0.0, 47.0, 5)
        assert scale.lower == 0.0
        assert scale.upper >= 47.0
        assert scale.num_ticks <= 6
        assert_allclose(np.diff(scale.tick_values()), scale.spacing)

    @pytest.mark.parametrize("max_ticks", [1, 2, 3, 4, 5, 8, 10])
    def test_tick_count_bounded(self, max_ticks):
        for lower, upper in [(0.0, 1.0), (-3.0, 97.0), (-1.0, 1.0), (0.0, 12345.0), (-0.02, 0.0)]:
            scale = nice_scale(lower, upper, max_ticks)
            assert scale.num_ticks <= max_ticks + 1
            assert scale.lower <= lower
            assert scale.upper >= upper

    def test_degenerate(self):
        scale = nice_scale(0.0, 0.0, 5)
        assert scale.num_ticks == 1
        assert scale.normalize(1.0) == 0.0

    @pytest.mark.parametrize("lower, upper", [(-1e308, 1e308), (0.0, 5e-324), (0.0, 1.7e308)])
    def test_unrepresentable_spacing_falls_back_to_linear(self, lower, upper):
        scale = nice_scale(lower, upper, 5)
        assert scale == linear_scale(lower, upper, 5)
        assert np.all(np.isfinite(scale.tick_values()))
        assert np.isfinite(scale.spacing)

    @pytest.mark.parametrize("num", [0.0, -1.0, float("inf"), 5e-324])
    def test_nice_num_rejects_unrepresentable(self, num):
        with pytest.raises(ValueError):
            nice_num(num, True)


def test_format_tick():
    assert format_tick(0.1 + 0.2) == "0.3"
    assert format_tick(-0.0) == "0"
    assert format_tick(-10.0) == "-10"
    assert format_tick(2.25) == "2.25"

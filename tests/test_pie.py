import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from svg_charts.color import DEFAULT_PALETTE
from svg_charts.options import PieChartOptions
from svg_charts.pie import TAU, pie_layout, sector_angles


def _spans(layout):
    return np.array([s.span for s in layout.sectors])


class TestScenarios:
    def test_equal_quarters(self):
        layout = pie_layout([1.0, 1.0, 1.0, 1.0])
        assert len(layout.sectors) == 4
        assert_allclose(_spans(layout), math.pi / 2, atol=1e-12)
        for i, sector in enumerate(layout.sectors):
            assert sector.start_angle == pytest.approx(i * math.pi / 2)
            assert sector.color == DEFAULT_PALETTE.color_at(i)

    def test_empty(self):
        layout = pie_layout([])
        assert layout.sectors == ()
        assert layout.is_empty

    def test_single_value_full_circle(self):
        layout = pie_layout([5.0])
        (sector,) = layout.sectors
        assert sector.start_angle == 0.0
        assert sector.end_angle == TAU
        assert sector.large_arc

    @pytest.mark.parametrize("samples", [[0.0, 0.0], [-1.0, -2.0], [0.0, -3.0]])
    def test_non_positive_total_is_empty(self, samples):
        layout = pie_layout(samples)
        assert layout.sectors == ()
        assert layout.total == 0.0


class TestPartition:
    def test_contiguous_and_ordered(self):
        layout = pie_layout([3.0, 1.0, 4.0, 1.0, 5.0])
        sectors = layout.sectors
        assert sectors[0].start_angle == 0.0
        for prev, cur in zip(sectors, sectors[1:]):
            assert cur.start_angle == prev.end_angle
        assert sectors[-1].end_angle == TAU
        assert [s.value for s in sectors] == [3.0, 1.0, 4.0, 1.0, 5.0]

    def test_spans_proportional(self):
        layout = pie_layout([1.0, 3.0])
        assert_allclose(_spans(layout), [TAU / 4, 3 * TAU / 4])
        assert layout.total == 4.0

    def test_negative_values_clamped_to_zero(self):
        layout = pie_layout([2.0, -5.0, 2.0])
        assert len(layout.sectors) == 3
        assert_allclose(_spans(layout), [math.pi, 0.0, math.pi], atol=1e-12)
        assert layout.sectors[1].value == -5.0
        assert layout.total == 4.0

    def test_trailing_zero_sectors_sit_at_full_turn(self):
        layout = pie_layout([1.0, 2.0, 0.0, 0.0])
        assert layout.sectors[1].end_angle == TAU
        assert layout.sectors[2].start_angle == layout.sectors[2].end_angle == TAU
        assert layout.sectors[3].span == 0.0

    def test_huge_values_do_not_overflow(self):
        layout = pie_layout([1e308, 1e308])
        assert_allclose(_spans(layout), math.pi)
        assert layout.total == np.finfo(np.float64).max

    def test_random_partitions_sum_to_full_turn(self):
        rng = np.random.default_rng(42)
        for _ in range(100):
            values = rng.exponential(5.0, size=int(rng.integers(1, 50)))
            layout = pie_layout(values)
            spans = _spans(layout)
            assert abs(spans.sum() - TAU) < 1e-9
            assert np.all(spans >= 0.0)
            for s in layout.sectors:
                assert 0.0 <= s.start_angle <= s.end_angle <= TAU


def test_sector_angles_shape():
    angles = sector_angles(np.array([1.0, 1.0]))
    assert angles.shape == (2, 2)
    assert_allclose(angles, [[0.0, math.pi], [math.pi, TAU]])


class TestSectorGeometry:
    def test_points_and_label_position(self):
        layout = pie_layout([1.0, 1.0, 1.0, 1.0], PieChartOptions(radius=0.5))
        first = layout.sectors[0]
        assert_allclose(first.start_point, (0.5, 0.0), atol=1e-12)
        assert_allclose(first.end_point, (0.0, 0.5), atol=1e-12)
        assert first.mid_angle == pytest.approx(math.pi / 4)
        x, y = first.label_position(1.0)
        assert math.hypot(x, y) == pytest.approx(0.5)
        assert x == pytest.approx(y)
        assert not first.large_arc

    def test_large_arc_flag(self):
        small, large = pie_layout([1.0, 3.0]).sectors
        assert not small.large_arc
        assert large.large_arc

    def test_radius_from_options(self):
        layout = pie_layout([1.0, 2.0], PieChartOptions(radius=0.99))
        assert all(s.radius == 0.99 for s in layout.sectors)

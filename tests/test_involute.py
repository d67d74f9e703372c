"""
Tests for involute sampling.
"""

import math
import pytest

from gearprofile.core.involute import (
    InvoluteSample,
    involute_point,
    involute_parameter,
    sample_involute,
)


class TestInvolutePoint:

    def test_starts_on_base_circle(self):
        assert involute_point(10.0, 0.0) == pytest.approx((10.0, 0.0))

    def test_radius_law(self):
        """r(t) = rb·sqrt(1 + t²)"""
        for t in (0.1, 0.5, 1.0, 2.0):
            x, y = involute_point(10.0, t)
            assert math.hypot(x, y) == pytest.approx(10.0 * math.sqrt(1 + t * t))

    def test_unwinds_counter_clockwise(self):
        x, y = involute_point(10.0, 0.5)
        assert y > 0


class TestInvoluteParameter:

    def test_at_base_circle(self):
        assert involute_parameter(10.0, 10.0) == 0.0

    def test_inside_base_circle_clamps(self):
        assert involute_parameter(10.0, 8.0) == 0.0

    def test_pitch_circle_gives_tan_pressure_angle(self):
        rp = 20.0
        rb = rp * math.cos(math.radians(20))
        assert involute_parameter(rb, rp) == pytest.approx(math.tan(math.radians(20)))


class TestSampleInvolute:

    def test_point_count(self):
        sample = sample_involute(10.0, 12.0, 12)
        assert isinstance(sample, InvoluteSample)
        assert len(sample.points) == 13

    def test_end_points(self):
        sample = sample_involute(10.0, 12.0, 24)
        assert sample.points[0] == pytest.approx((10.0, 0.0))
        assert math.hypot(*sample.points[-1]) == pytest.approx(12.0)
        assert sample.t_max == pytest.approx(math.sqrt(0.44))

    def test_radii_increase(self):
        sample = sample_involute(10.0, 15.0, 30)
        radii = [math.hypot(x, y) for x, y in sample.points]
        assert all(b > a for a, b in zip(radii, radii[1:]))

    def test_uniform_in_parameter(self):
        """Samples are evenly spaced in t, not in arc length."""
        rb, n = 10.0, 20
        sample = sample_involute(rb, 15.0, n)
        for i, (x, y) in enumerate(sample.points):
            t = sample.t_max * i / n
            assert math.hypot(x, y) == pytest.approx(rb * math.sqrt(1 + t * t))

        # Denser near the base circle
        first = math.dist(sample.points[0], sample.points[1])
        last = math.dist(sample.points[-2], sample.points[-1])
        assert first < last

    def test_target_inside_base_circle(self):
        sample = sample_involute(10.0, 9.0, 12)
        assert sample.t_max == 0.0
        assert len(sample.points) == 13
        assert all(p == pytest.approx((10.0, 0.0)) for p in sample.points)

    @pytest.mark.parametrize("samples", [0, 1, 11])
    def test_samples_floored(self, samples):
        assert len(sample_involute(10.0, 12.0, samples).points) == 13

"""
Tests for the roulette curve generator.
"""
import math

import numpy as np
import pytest

from roulettecurves.model.curves import CurveFamily, CurveParameters, evaluate, generate, point_count


def params(family=CurveFamily.HYPOTROCHOID, **overrides):
    values = dict(radius_one=3.305, radius_two=6.6, distance=7.5, stretch=2.0, scale=0.1)
    values.update(overrides)
    return CurveParameters(family=family, **values)


class TestSequenceLength:

    @pytest.mark.parametrize("segments", [1, 10, 100])
    @pytest.mark.parametrize("multiplier", [1, 3, 10])
    def test_length_is_multiplier_times_segments_plus_one(self, segments, multiplier):
        points = generate(params(), segments, multiplier)
        assert points.shape == (multiplier * segments + 1, 3)

    def test_fractional_multiplier(self):
        """Preset multipliers such as 7.5 are not integers."""
        points = generate(params(), 100, 7.5)
        assert len(points) == 751
        assert point_count(100, 7.5) == 751

    @pytest.mark.parametrize("segments, multiplier, expected", [
        (100, 0.29, 30),
        (100, 0.57, 58),
        (10, 0.7, 8),
    ])
    def test_product_rounding_does_not_drop_a_sample(self, segments, multiplier, expected):
        assert point_count(segments, multiplier) == expected
        assert len(generate(params(), segments, multiplier)) == expected

    def test_samples_are_index_over_segments(self):
        p = params(CurveFamily.EPITROCHOID)
        points = generate(p, 10, 2)
        for index in (0, 7, 20):
            np.testing.assert_allclose(points[index], evaluate(p, index / 10))


class TestEvaluate:

    def test_scalar_returns_single_point(self):
        assert evaluate(params(), 0.3).shape == (3,)

    def test_array_returns_stack(self):
        assert evaluate(params(), np.linspace(0.0, 1.0, 5)).shape == (5, 3)

    @pytest.mark.parametrize("family", list(CurveFamily))
    def test_deterministic(self, family):
        p = params(family)
        np.testing.assert_array_equal(evaluate(p, 1.2345), evaluate(p, 1.2345))

    @pytest.mark.parametrize("family", list(CurveFamily))
    @pytest.mark.parametrize("k", [0.01, 0.5, 3.0, -2.0])
    def test_scale_linearity(self, family, k):
        t = np.linspace(0.0, 3.0, 31)
        scaled = evaluate(params(family, scale=k), t)
        unit = evaluate(params(family, scale=1.0), t)
        np.testing.assert_allclose(scaled, k * unit)

    def test_epitrochoid_base_case(self):
        p = CurveParameters(2.0, 3.0, 1.0, 0.0, 1.0, CurveFamily.EPITROCHOID)
        np.testing.assert_allclose(evaluate(p, 0.0), [4.0, 0.0, 0.0])

    def test_hypotrochoid_base_case(self):
        p = CurveParameters(5.0, 3.0, 1.0, 0.0, 1.0, CurveFamily.HYPOTROCHOID)
        np.testing.assert_allclose(evaluate(p, 0.0), [3.0, 0.0, 0.0])

    def test_z_is_t_times_stretch_times_scale(self):
        p = params(stretch=4.0, scale=0.5)
        assert evaluate(p, 1.5)[2] == pytest.approx(1.5 * 4.0 * 0.5)

    def test_angle_is_degree_scaled_but_not_converted(self):
        """t * 360 goes into cos/sin unconverted by default."""
        p = CurveParameters(3.0, 1.0, 1.0, 0.0, 1.0, CurveFamily.HYPOTROCHOID)
        angle = 0.5 * 360.0
        expected = [
            2.0 * math.cos(angle) + math.cos(2.0 * angle),
            2.0 * math.sin(angle) + math.sin(2.0 * angle),
            0.0,
        ]
        np.testing.assert_allclose(evaluate(p, 0.5), expected)

    def test_radians_mode_gives_textbook_curve(self):
        p = CurveParameters(3.0, 1.0, 1.0, 0.0, 1.0, CurveFamily.HYPOTROCHOID)
        np.testing.assert_allclose(evaluate(p, 0.25, radians=True), [-1.0, 2.0, 0.0], atol=1e-12)

    def test_radians_mode_closes_after_one_turn_for_integer_ratio(self):
        p = CurveParameters(3.0, 1.0, 0.5, 0.0, 1.0, CurveFamily.EPITROCHOID)
        np.testing.assert_allclose(
            evaluate(p, 1.0, radians=True), evaluate(p, 0.0, radians=True), atol=1e-12
        )


class TestDegenerateGeometry:

    @pytest.mark.parametrize("family", list(CurveFamily))
    def test_zero_radius_two_yields_non_finite_without_raising(self, family):
        points = generate(params(family, radius_two=0.0), 10, 1)
        assert len(points) == 11
        assert not np.isfinite(points[:, :2]).all()

    def test_zero_radius_two_does_not_warn(self, recwarn):
        evaluate(params(radius_two=0.0), np.linspace(0.0, 1.0, 4))
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]

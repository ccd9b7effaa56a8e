"""
Tests for Bezier sampling helpers.
"""

import pytest
from xplane_apt.utils.bezier import (
    DEFAULT_BEZIER_RESOLUTION,
    quadratic_bezier,
    cubic_bezier,
    calculate_bezier,
    calculate_cubic_bezier,
    mirror_control_point,
)


class TestBezierEvaluation:
    """Test single-axis Bernstein evaluation."""

    def test_quadratic_endpoints_and_midpoint(self):
        assert quadratic_bezier(0.0, 1.0, 5.0, 3.0) == 1.0
        assert quadratic_bezier(1.0, 1.0, 5.0, 3.0) == 3.0
        # 0.25 * 0 + 0.5 * 1 + 0.25 * 2
        assert quadratic_bezier(0.5, 0.0, 1.0, 2.0) == pytest.approx(1.0)

    def test_cubic_endpoints_and_midpoint(self):
        assert cubic_bezier(0.0, 2.0, 7.0, -3.0, 4.0) == 2.0
        assert cubic_bezier(1.0, 2.0, 7.0, -3.0, 4.0) == 4.0
        # 0.125 * 0 + 0.375 * 1 + 0.375 * 2 + 0.125 * 3
        assert cubic_bezier(0.5, 0.0, 1.0, 2.0, 3.0) == pytest.approx(1.5)


class TestBezierSampling:
    """Test curve sampling."""

    @pytest.mark.parametrize('resolution', [1, 4, 17, DEFAULT_BEZIER_RESOLUTION])
    def test_quadratic_point_count(self, resolution):
        p0, p1, p2 = (-75.0, 40.0), (-74.99, 40.02), (-74.98, 40.0)
        points = calculate_bezier(p0, p1, p2, resolution)
        assert len(points) == resolution + 1
        assert points[0] == p0
        assert points[-1] == p2

    @pytest.mark.parametrize('resolution', [1, 4, 17, DEFAULT_BEZIER_RESOLUTION])
    def test_cubic_point_count(self, resolution):
        p0, p1, p2, p3 = (0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)
        points = calculate_cubic_bezier(p0, p1, p2, p3, resolution)
        assert len(points) == resolution + 1
        assert points[0] == p0
        assert points[-1] == p3

    def test_default_resolution(self):
        points = calculate_bezier((0.0, 0.0), (1.0, 1.0), (2.0, 0.0))
        assert len(points) == DEFAULT_BEZIER_RESOLUTION + 1

    def test_uniform_parameter_steps(self):
        # a straight control polygon with an evenly spaced control point samples evenly
        points = calculate_bezier((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), 4)
        assert [x for x, _ in points] == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0])

    def test_invalid_resolution(self):
        with pytest.raises(ValueError):
            calculate_bezier((0.0, 0.0), (1.0, 1.0), (2.0, 0.0), 0)
        with pytest.raises(ValueError):
            calculate_cubic_bezier((0.0, 0.0), (1.0, 1.0), (2.0, 1.0), (3.0, 0.0), -1)


class TestMirrorControlPoint:
    """Test control point reflection."""

    def test_mirror(self):
        assert mirror_control_point((1.0, 1.0), (2.0, 3.0)) == (0.0, -1.0)

    def test_mirror_is_self_inverse(self):
        vertex = (-75.0030, 40.0025)
        control = (-75.0035, 40.0030)
        mirrored = mirror_control_point(vertex, control)
        assert mirror_control_point(vertex, mirrored) == pytest.approx(control)

    def test_mirror_of_vertex_is_vertex(self):
        assert mirror_control_point((3.0, 4.0), (3.0, 4.0)) == (3.0, 4.0)

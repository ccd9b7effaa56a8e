"""
Tests for runway and shoulder rectangles.
"""

import pytest
from xplane_apt.models.navpoint import NavPoint
from xplane_apt.models.runway import Runway, RunwayEnd
from xplane_apt.utils.runway_geometry import (
    destination_point,
    runway_end_heading,
    get_runway_polygon,
    get_runway_shoulder_polygon,
    get_default_shoulder_width,
)


def make_runway(width=45.0, shoulder_surface_type=1, shoulder_width=0.0, names=('09L', '27R')):
    return Runway(
        width=width,
        surface_type=1,
        ends=(
            RunwayEnd(names[0], 40.0, -75.0),
            RunwayEnd(names[1], 40.0, -74.97),
        ),
        shoulder_surface_type=shoulder_surface_type,
        shoulder_width=shoulder_width,
    )


def distance_m(lonlat, lat, lon):
    _, distance = NavPoint(lat, lon).haversine_distance(NavPoint(lonlat[1], lonlat[0]))
    return distance


class TestDestinationPoint:
    """Test great circle projection."""

    def test_one_degree_north(self):
        lat, lon = destination_point(0.0, 0.0, 111194.93, 0.0)
        assert lat == pytest.approx(1.0, abs=1e-6)
        assert lon == pytest.approx(0.0, abs=1e-9)

    def test_east_along_equator(self):
        lat, lon = destination_point(0.0, 10.0, 111194.93, 90.0)
        assert lat == pytest.approx(0.0, abs=1e-9)
        assert lon == pytest.approx(11.0, abs=1e-6)

    def test_distance_round_trip(self):
        lat, lon = destination_point(40.0, -75.0, 2500.0, 37.0)
        bearing, distance = NavPoint(40.0, -75.0).haversine_distance(NavPoint(lat, lon))
        assert distance == pytest.approx(2500.0, rel=1e-6)
        assert bearing == pytest.approx(37.0, abs=1e-3)

    def test_crossing_antimeridian(self):
        _, lon = destination_point(0.0, 179.99, 5000.0, 90.0)
        assert -180 <= lon < -179.9


class TestRunwayHeading:
    """Test heading derivation from designators."""

    @pytest.mark.parametrize('name,heading', [
        ('09L', 90), ('27R', 270), ('18C', 180), ('36', 0), ('01', 10), ('9', 90),
    ])
    def test_numeric_designators(self, name, heading):
        assert runway_end_heading(RunwayEnd(name, 40.0, -75.0)) == heading

    def test_non_numeric_designator_uses_bearing(self):
        north = RunwayEnd('N', 40.0, -75.0)
        south = RunwayEnd('S', 40.01, -75.0)
        assert runway_end_heading(north, south) == pytest.approx(0.0, abs=1e-6)
        assert runway_end_heading(north) == 0.0


class TestRunwayPolygon:
    """Test rectangle construction."""

    def test_polygon_is_closed_rectangle(self):
        polygon = get_runway_polygon(make_runway())
        assert len(polygon) == 5
        assert polygon[0] == polygon[-1]

    def test_corners_at_half_width(self):
        polygon = get_runway_polygon(make_runway(width=45.0))
        for corner in polygon[:2]:
            assert distance_m(corner, 40.0, -75.0) == pytest.approx(22.5, rel=1e-6)
        for corner in polygon[2:4]:
            assert distance_m(corner, 40.0, -74.97) == pytest.approx(22.5, rel=1e-6)

    def test_consistent_winding(self):
        polygon = get_runway_polygon(make_runway())
        # heading 090: first corner north of the threshold, second south
        assert polygon[0][1] > 40.0
        assert polygon[1][1] < 40.0
        assert polygon[2][1] < 40.0
        assert polygon[3][1] > 40.0

    def test_shoulder_polygon(self):
        polygon = get_runway_shoulder_polygon(make_runway(width=45.0, shoulder_width=2))
        assert len(polygon) == 5
        assert distance_m(polygon[0], 40.0, -75.0) == pytest.approx(24.5, rel=1e-6)

    def test_shoulder_polygon_default_width(self):
        polygon = get_runway_shoulder_polygon(make_runway(width=45.0))
        assert distance_m(polygon[0], 40.0, -75.0) == pytest.approx(26.5, rel=1e-6)

    def test_no_shoulder(self):
        assert get_runway_shoulder_polygon(make_runway(shoulder_surface_type=0)) is None

    @pytest.mark.parametrize('width,shoulder', [
        (18, 3), (29.9, 3), (30, 4), (45, 4), (45.1, 5), (60, 5),
    ])
    def test_default_shoulder_width(self, width, shoulder):
        assert get_default_shoulder_width(width) == shoulder

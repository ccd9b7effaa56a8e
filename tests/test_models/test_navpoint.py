import math
import pytest
from xplane_apt.models.navpoint import NavPoint

def test_navpoint_validation():
    """Test that out of range coordinates are rejected."""
    with pytest.raises(ValueError):
        NavPoint(91.0, 0.0)
    with pytest.raises(ValueError):
        NavPoint(0.0, -181.0)

def test_is_valid():
    assert NavPoint.is_valid(40.0, -75.0)
    assert not NavPoint.is_valid(None, -75.0)
    assert not NavPoint.is_valid(math.nan, -75.0)
    assert not NavPoint.is_valid(40.0, math.inf)
    assert not NavPoint.is_valid(-90.5, 0.0)

def test_lonlat():
    assert NavPoint(40.0, -75.0, 'KTST').lonlat == (-75.0, 40.0)

def test_bearing_distance_round_trip():
    """Test that projecting then measuring gives back bearing and distance."""
    start = NavPoint(51.4706, -0.461941, 'EGLL')
    end = start.point_from_bearing_distance(123.0, 15000.0, 'TARGET')
    bearing, distance = start.haversine_distance(end)
    assert end.name == 'TARGET'
    assert bearing == pytest.approx(123.0, abs=1e-6)
    assert distance == pytest.approx(15000.0, rel=1e-9)

def test_str():
    assert str(NavPoint(40.0, -75.0, 'KTST')) == 'KTST (40.0, -75.0)'
    assert str(NavPoint(40.0, -75.0)) == '(40.0, -75.0)'

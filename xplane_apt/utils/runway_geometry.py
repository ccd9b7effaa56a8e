"""
Runway and shoulder rectangle geometry.

Rectangles are returned as closed rings of ``(longitude, latitude)`` tuples,
corner order: first end left, first end right, second end right, second end
left, first corner repeated.
"""

import re
import logging
from typing import List, Optional, Tuple

from xplane_apt.models.enums import ShoulderSurfaceType
from xplane_apt.models.navpoint import NavPoint
from xplane_apt.models.path import LonLat
from xplane_apt.models.runway import Runway, RunwayEnd

logger = logging.getLogger(__name__)

EARTH_RADIUS_M = NavPoint.EARTH_RADIUS_M

_DESIGNATOR_SUFFIX = re.compile(r'[LCR]$')


def destination_point(lat: float, lon: float, distance: float, bearing: float) -> Tuple[float, float]:
    """
    Project a point along a great circle.

    Args:
        lat: Start latitude in degrees
        lon: Start longitude in degrees
        distance: Distance in meters
        bearing: True bearing in degrees

    Returns:
        (latitude, longitude) of the destination
    """
    point = NavPoint(latitude=lat, longitude=lon).point_from_bearing_distance(bearing, distance)
    return point.latitude, point.longitude


def runway_end_heading(end: RunwayEnd, opposite: Optional[RunwayEnd] = None) -> float:
    """
    Heading of a runway end derived from its designator ("08L" -> 80).

    Designators that are not numeric ("N", "H1") fall back to the true
    bearing towards the opposite end when it is given, 0 otherwise.
    """
    number = _DESIGNATOR_SUFFIX.sub('', end.name.strip().upper())
    try:
        return (int(number) * 10) % 360
    except ValueError:
        if opposite is None:
            logger.debug(f"Runway end '{end.name}' has no numeric designator, using heading 0")
            return 0.0
        bearing, _ = end.navpoint.haversine_distance(opposite.navpoint)
        return bearing


def _rectangle(runway: Runway, half_width: float) -> List[LonLat]:
    end1, end2 = runway.ends
    heading1 = runway_end_heading(end1, end2)
    heading2 = (heading1 + 180) % 360

    corners = [
        destination_point(end1.latitude, end1.longitude, half_width, (heading1 - 90) % 360),
        destination_point(end1.latitude, end1.longitude, half_width, (heading1 + 90) % 360),
        destination_point(end2.latitude, end2.longitude, half_width, (heading2 - 90) % 360),
        destination_point(end2.latitude, end2.longitude, half_width, (heading2 + 90) % 360),
    ]
    ring = [(lon, lat) for lat, lon in corners]
    ring.append(ring[0])
    return ring


def get_runway_polygon(runway: Runway) -> List[LonLat]:
    """Closed rectangle covering the runway surface."""
    return _rectangle(runway, runway.width / 2)


def get_default_shoulder_width(runway_width: float) -> float:
    """
    Shoulder width used when the runway row does not encode one.

    Narrow runways (< 30 m) get 3 m, medium (30-45 m) 4 m, wide (> 45 m) 5 m.
    """
    if runway_width < 30:
        return 3
    if runway_width <= 45:
        return 4
    return 5


def get_runway_shoulder_polygon(runway: Runway) -> Optional[List[LonLat]]:
    """Closed rectangle covering runway plus shoulders, None without shoulder surface."""
    if runway.shoulder_surface_type == ShoulderSurfaceType.NONE:
        return None

    shoulder_width = runway.shoulder_width if runway.shoulder_width > 0 else get_default_shoulder_width(runway.width)
    return _rectangle(runway, runway.width / 2 + shoulder_width)

"""
X-Plane apt.dat airport definition parsing library.

This package rebuilds airport geometry from the row-based apt.dat text
format: pavements with holes, Bezier-curved boundaries, painted and lit
linear features, runway rectangles and decoded taxi signs.

The main public API includes:
- AirportParser / parse_airport: Parse one airport's apt.dat rows
- PathParser: Rebuild the rings and chains of a single feature
- parse_sign_text: Decode the taxi-sign mini-language
- get_runway_polygon / get_runway_shoulder_polygon: Runway rectangles
- ParsedAirport: Aggregate result of a parse
"""

from xplane_apt.models import ParsedAirport, ParsedPath, LinearFeature, Runway, RunwayEnd, NavPoint
from xplane_apt.parsers import AirportParser, PathParser, parse_airport, parse_sign_text
from xplane_apt.utils.runway_geometry import get_runway_polygon, get_runway_shoulder_polygon

__version__ = '0.1.0'
__all__ = [
    'AirportParser',
    'PathParser',
    'parse_airport',
    'parse_sign_text',
    'get_runway_polygon',
    'get_runway_shoulder_polygon',
    'ParsedAirport',
    'ParsedPath',
    'LinearFeature',
    'Runway',
    'RunwayEnd',
    'NavPoint',
]

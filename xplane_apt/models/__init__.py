"""
Data models for the xplane_apt library.

This package contains the data models produced by the parsers: row code
enumerations, path geometry, runways, airport features and decoded signs.
"""

from .enums import (
    RowCode,
    AirportType,
    FrequencyType,
    LineType,
    LineLightingType,
    SurfaceType,
    ShoulderSurfaceType,
    RunwayMarking,
    ApproachLighting,
    RunwayEndIdentifierLights,
    SignSize,
)
from .navpoint import NavPoint
from .path import LonLat, CoordLineType, LineProps, PathVertex, ParsedPath, LinearFeature
from .runway import Runway, RunwayEnd
from .airport import (
    Pavement,
    TaxiwayFeature,
    BoundaryFeature,
    Frequency,
    StartupLocation,
    Windsock,
    Sign,
    Helipad,
    TowerLocation,
    Beacon,
    ParsedAirport,
)
from .sign import SignColorMode, SignSegment, ParsedSign
from .validation import ParseError, ParseStats, ParseResult

__all__ = [
    # Enumerations
    'RowCode',
    'AirportType',
    'FrequencyType',
    'LineType',
    'LineLightingType',
    'SurfaceType',
    'ShoulderSurfaceType',
    'RunwayMarking',
    'ApproachLighting',
    'RunwayEndIdentifierLights',
    'SignSize',
    # Geometry
    'NavPoint',
    'LonLat',
    'CoordLineType',
    'LineProps',
    'PathVertex',
    'ParsedPath',
    'LinearFeature',
    # Airport
    'Runway',
    'RunwayEnd',
    'Pavement',
    'TaxiwayFeature',
    'BoundaryFeature',
    'Frequency',
    'StartupLocation',
    'Windsock',
    'Sign',
    'Helipad',
    'TowerLocation',
    'Beacon',
    'ParsedAirport',
    # Signs
    'SignColorMode',
    'SignSegment',
    'ParsedSign',
    # Parse reporting
    'ParseError',
    'ParseStats',
    'ParseResult',
]

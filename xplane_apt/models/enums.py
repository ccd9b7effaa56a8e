"""
Enumerations for apt.dat row codes and attribute values.

Values follow the X-Plane apt.dat 12.00 file format specification.
"""

from enum import Enum, IntEnum
from typing import Optional


class RowCode(IntEnum):
    """Leading integer on each apt.dat line identifying the record type."""

    AIRPORT_HEADER = 1
    TOWER_LOCATION = 14
    START_LOCATION_LEGACY = 15
    SEAPLANE_HEADER = 16
    HELIPORT_HEADER = 17
    BEACON = 18
    WINDSOCK = 19
    TAXI_SIGN = 20
    FREQUENCY_AWOS = 50
    FREQUENCY_CTAF = 51
    FREQUENCY_DELIVERY = 52
    FREQUENCY_GROUND = 53
    FREQUENCY_TOWER = 54
    FREQUENCY_APPROACH = 55
    FREQUENCY_CENTER = 56
    FREQUENCY_UNICOM = 57
    END_OF_FILE = 99
    LAND_RUNWAY = 100
    HELIPAD = 102
    TAXIWAY = 110
    LINE_SEGMENT = 111
    LINE_CURVE = 112
    RING_SEGMENT = 113
    RING_CURVE = 114
    END_SEGMENT = 115
    END_CURVE = 116
    FREE_CHAIN = 120
    BOUNDARY = 130
    START_LOCATION_NEW = 1300
    METADATA = 1302

    @classmethod
    def from_value(cls, value: Optional[int]) -> Optional['RowCode']:
        """Return the matching RowCode, or None for codes this library does not handle."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_path_node(self) -> bool:
        return RowCode.LINE_SEGMENT <= self <= RowCode.END_CURVE

    @property
    def is_curve(self) -> bool:
        return self in (RowCode.LINE_CURVE, RowCode.RING_CURVE, RowCode.END_CURVE)

    @property
    def is_header(self) -> bool:
        return self in (RowCode.AIRPORT_HEADER, RowCode.SEAPLANE_HEADER, RowCode.HELIPORT_HEADER)

    @property
    def is_frequency(self) -> bool:
        return RowCode.FREQUENCY_AWOS <= self <= RowCode.FREQUENCY_UNICOM


class AirportType(Enum):
    LAND = "land"
    SEAPLANE = "seaplane"
    HELIPORT = "heliport"

    @classmethod
    def from_row_code(cls, code: RowCode) -> 'AirportType':
        if code == RowCode.SEAPLANE_HEADER:
            return cls.SEAPLANE
        if code == RowCode.HELIPORT_HEADER:
            return cls.HELIPORT
        return cls.LAND


class FrequencyType(Enum):
    AWOS = "AWOS"
    CTAF = "CTAF"
    DELIVERY = "DELIVERY"
    GROUND = "GROUND"
    TOWER = "TOWER"
    APPROACH = "APPROACH"
    CENTER = "CENTER"
    UNICOM = "UNICOM"

    @classmethod
    def from_row_code(cls, code: RowCode) -> 'FrequencyType':
        return _FREQUENCY_TYPES.get(code, cls.CTAF)


_FREQUENCY_TYPES = {
    RowCode.FREQUENCY_AWOS: FrequencyType.AWOS,
    RowCode.FREQUENCY_CTAF: FrequencyType.CTAF,
    RowCode.FREQUENCY_DELIVERY: FrequencyType.DELIVERY,
    RowCode.FREQUENCY_GROUND: FrequencyType.GROUND,
    RowCode.FREQUENCY_TOWER: FrequencyType.TOWER,
    RowCode.FREQUENCY_APPROACH: FrequencyType.APPROACH,
    RowCode.FREQUENCY_CENTER: FrequencyType.CENTER,
    RowCode.FREQUENCY_UNICOM: FrequencyType.UNICOM,
}


class LineType(IntEnum):
    """Painted line types carried by path nodes."""

    NONE = 0
    SOLID_YELLOW = 1
    BROKEN_YELLOW = 2
    DOUBLE_SOLID_YELLOW = 3
    RUNWAY_HOLD = 4
    OTHER_HOLD = 5
    ILS_HOLD = 6
    ILS_CRITICAL_CENTERLINE = 7
    SEPARATED_BROKEN_YELLOW = 8
    SEPARATED_DOUBLE_BROKEN_YELLOW = 9
    WIDE_SOLID_YELLOW = 10
    WIDE_ILS_CRITICAL_CENTERLINE = 11
    WIDE_RUNWAY_HOLD = 12
    WIDE_OTHER_HOLD = 13
    WIDE_ILS_HOLD = 14
    VERY_WIDE_YELLOW = 19
    SOLID_WHITE = 20
    CHEQUERED_WHITE = 21
    BROKEN_WHITE = 22
    SHORT_BROKEN_WHITE = 23
    WIDE_SOLID_WHITE = 24
    WIDE_BROKEN_WHITE = 25
    SOLID_RED = 30
    BROKEN_RED = 31
    WIDE_SOLID_RED = 32
    SOLID_ORANGE = 40
    SOLID_BLUE = 41
    SOLID_GREEN = 42
    SOLID_YELLOW_WITH_BLACK_BORDER = 51
    BROKEN_YELLOW_WITH_BLACK_BORDER = 52
    DOUBLE_SOLID_YELLOW_WITH_BLACK_BORDER = 53
    RUNWAY_HOLD_WITH_BLACK_BORDER = 54
    OTHER_HOLD_WITH_BLACK_BORDER = 55
    ILS_HOLD_WITH_BLACK_BORDER = 56
    ILS_CRITICAL_CENTERLINE_WITH_BLACK_BORDER = 57
    SEPARATED_BROKEN_YELLOW_WITH_BLACK_BORDER = 58
    SEPARATED_DOUBLE_BROKEN_YELLOW_WITH_BLACK_BORDER = 59
    WIDE_SOLID_YELLOW_WITH_BLACK_BORDER = 60
    WIDE_ILS_CRITICAL_CENTERLINE_WITH_BLACK_BORDER = 61
    WIDE_RUNWAY_HOLD_WITH_BLACK_BORDER = 62
    WIDE_OTHER_HOLD_WITH_BLACK_BORDER = 63
    WIDE_ILS_HOLD_WITH_BLACK_BORDER = 64
    SOLID_WHITE_WITH_BLACK_BORDER = 70
    CHEQUERED_WHITE_WITH_BLACK_BORDER = 71
    BROKEN_WHITE_WITH_BLACK_BORDER = 72
    SHORT_BROKEN_WHITE_WITH_BLACK_BORDER = 73
    WIDE_SOLID_WHITE_WITH_BLACK_BORDER = 74
    WIDE_BROKEN_WHITE_WITH_BLACK_BORDER = 75
    SOLID_RED_WITH_BLACK_BORDER = 80
    BROKEN_RED_WITH_BLACK_BORDER = 81
    WIDE_SOLID_RED_WITH_BLACK_BORDER = 82
    SOLID_ORANGE_WITH_BLACK_BORDER = 90
    SOLID_BLUE_WITH_BLACK_BORDER = 91
    SOLID_GREEN_WITH_BLACK_BORDER = 92


class LineLightingType(IntEnum):
    """Embedded light types carried by path nodes."""

    NONE = 0
    GREEN_BIDIRECTIONAL_LIGHTS = 101          # taxiway centerline
    BLUE_OMNIDIRECTIONAL_LIGHTS = 102         # taxiway edge
    AMBER_UNIDIRECTIONAL_LIGHTS = 103         # clearance bar
    AMBER_UNIDIRECTIONAL_PULSATING_LIGHTS = 104  # runway hold / stop bar
    ALTERNATING_AMBER_GREEN_BIDIRECTIONAL_LIGHTS = 105
    RED_OMNIDIRECTIONAL_LIGHTS = 106
    GREEN_UNIDIRECTIONAL_LIGHTS = 107
    ALTERNATING_AMBER_GREEN_UNIDIRECTIONAL_LIGHTS = 108


class SurfaceType(IntEnum):
    ASPHALT = 1
    CONCRETE = 2
    TURF_OR_GRASS = 3
    DIRT = 4
    GRAVEL = 5
    DRY_LAKEBED = 12
    WATER_RUNWAY = 13
    SNOW_OR_ICE = 14
    TRANSPARENT = 15


class ShoulderSurfaceType(IntEnum):
    # X-Plane 12 also allows asphalt (20-38) and concrete (50-57) variants
    NONE = 0
    ASPHALT = 1
    CONCRETE = 2


class RunwayMarking(IntEnum):
    NONE = 0
    VISUAL = 1
    NON_PRECISION = 2
    PRECISION = 3


class ApproachLighting(IntEnum):
    NONE = 0
    ALSF_I = 1
    ALSF_II = 2
    CALVERT = 3
    CALVERT_II = 4
    SSALR = 5
    SSALF = 6
    SALS = 7
    MALSR = 8
    MALSF = 9
    MALS = 10
    ODALS = 11
    RAIL = 12


class RunwayEndIdentifierLights(IntEnum):
    NONE = 0
    OMNIDIRECTIONAL_REIL = 1
    UNIDIRECTIONAL_REIL = 2


class SignSize(IntEnum):
    SMALL = 1
    MEDIUM = 2
    LARGE = 3
    LARGE_DISTANCE_REMAINING = 4
    SMALL_DISTANCE_REMAINING = 5

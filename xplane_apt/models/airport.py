from dataclasses import dataclass, field
from typing import Optional, List, Dict, Tuple

from xplane_apt.models.enums import AirportType, FrequencyType
from xplane_apt.models.path import LonLat, ParsedPath, LinearFeature
from xplane_apt.models.runway import Runway


@dataclass
class Pavement:
    """Taxiway/apron polygon: one outer ring plus optional holes."""

    surface_type: int
    smoothness: float
    texture_orientation: float
    name: str
    coordinates: List[LonLat] = field(default_factory=list)
    holes: List[List[LonLat]] = field(default_factory=list)


@dataclass
class TaxiwayFeature:
    """Raw paths of a row 110 pavement, holes included, as parsed."""

    surface: int
    smoothness: float
    orientation: float
    name: str = ""
    paths: List[ParsedPath] = field(default_factory=list)


@dataclass
class BoundaryFeature:
    name: str = ""
    paths: List[ParsedPath] = field(default_factory=list)


@dataclass
class Frequency:
    type: FrequencyType
    frequency: float  # MHz
    name: str = ""


@dataclass
class StartupLocation:
    latitude: float
    longitude: float
    heading: float
    location_type: str
    airplane_types: str
    name: str


@dataclass
class Windsock:
    latitude: float
    longitude: float
    illuminated: bool
    name: str = ""


@dataclass
class Sign:
    latitude: float
    longitude: float
    heading: float
    size: int
    text: str


@dataclass
class Helipad:
    name: str
    latitude: float
    longitude: float
    heading: float
    length: float
    width: float
    surface_type: int


@dataclass
class TowerLocation:
    latitude: float
    longitude: float
    height: float
    name: str = ""


@dataclass
class Beacon:
    latitude: float
    longitude: float
    type: int
    name: str = ""


# apt.dat 1302 keys understood by the typed accessors below
METADATA_KEYS = (
    'city', 'country', 'datum_lat', 'datum_lon', 'drive_on_left', 'faa_code',
    'gui_label', 'iata_code', 'icao_code', 'local_code', 'region_code',
    'state', 'transition_alt', 'transition_level', 'tower_service_type',
)


@dataclass
class ParsedAirport:
    """
    Everything parsed from one airport's apt.dat rows.

    Built fresh by each parse and owned by the caller; nothing in it is
    shared with the parser once parsing returns.
    """

    id: str = ""
    name: str = ""
    elevation: float = 0.0
    airport_type: AirportType = AirportType.LAND
    metadata: Dict[str, str] = field(default_factory=dict)

    runways: List[Runway] = field(default_factory=list)
    taxiways: List[TaxiwayFeature] = field(default_factory=list)
    pavements: List[Pavement] = field(default_factory=list)
    boundaries: List[BoundaryFeature] = field(default_factory=list)
    linear_features: List[LinearFeature] = field(default_factory=list)
    startup_locations: List[StartupLocation] = field(default_factory=list)
    windsocks: List[Windsock] = field(default_factory=list)
    signs: List[Sign] = field(default_factory=list)
    frequencies: List[Frequency] = field(default_factory=list)
    helipads: List[Helipad] = field(default_factory=list)

    tower_location: Optional[TowerLocation] = None
    beacon: Optional[Beacon] = None

    @property
    def iata_code(self) -> Optional[str]:
        return self.metadata.get('iata_code')

    @property
    def faa_code(self) -> Optional[str]:
        return self.metadata.get('faa_code')

    @property
    def icao_code(self) -> Optional[str]:
        return self.metadata.get('icao_code')

    @property
    def city(self) -> Optional[str]:
        return self.metadata.get('city')

    @property
    def country(self) -> Optional[str]:
        return self.metadata.get('country')

    @property
    def region_code(self) -> Optional[str]:
        return self.metadata.get('region_code')

    @property
    def state(self) -> Optional[str]:
        return self.metadata.get('state')

    @property
    def gui_label(self) -> Optional[str]:
        return self.metadata.get('gui_label')

    @property
    def transition_level(self) -> Optional[str]:
        return self.metadata.get('transition_level')

    @property
    def transition_alt(self) -> Optional[int]:
        """Transition altitude in feet, None when absent or not a positive integer."""
        value = self.metadata.get('transition_alt')
        if value is None:
            return None
        try:
            altitude = int(value)
        except ValueError:
            return None
        return altitude if altitude > 0 else None

    @property
    def drive_on_left(self) -> Optional[bool]:
        value = self.metadata.get('drive_on_left')
        if value is None:
            return None
        return value.strip() == '1'

    @property
    def datum(self) -> Optional[Tuple[float, float]]:
        """Airport reference point as (longitude, latitude) when the metadata carries one."""
        try:
            lat = float(self.metadata['datum_lat'])
            lon = float(self.metadata['datum_lon'])
        except (KeyError, ValueError):
            return None
        return (lon, lat)

    def feature_count(self) -> int:
        """Number of point and area records, matching ParseStats.parsed."""
        return (
            len(self.runways)
            + len(self.taxiways)
            + len(self.startup_locations)
            + len(self.windsocks)
            + len(self.signs)
            + len(self.helipads)
            + len(self.frequencies)
            + (1 if self.tower_location else 0)
            + (1 if self.beacon else 0)
        )

    def __str__(self) -> str:
        return f"{self.id} {self.name}".strip()

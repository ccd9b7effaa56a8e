"""
Parser for one airport's apt.dat rows.

Walks the rows once, dispatching on the row code. Feature headers that own
node rows (110, 120, 130) hand the following rows to a PathParser and skip
ahead by however many rows it consumed.

Example:
    result = AirportParser(text).parse()
    airport = result.data
    for error in result.errors:
        print(error)
"""

import time
import logging
from typing import Iterable, List, Optional, Tuple

from xplane_apt.models.airport import (
    Beacon,
    BoundaryFeature,
    Frequency,
    Helipad,
    ParsedAirport,
    Pavement,
    Sign,
    StartupLocation,
    TaxiwayFeature,
    TowerLocation,
    Windsock,
)
from xplane_apt.models.enums import AirportType, FrequencyType, RowCode
from xplane_apt.models.navpoint import NavPoint
from xplane_apt.models.path import LinearFeature, ParsedPath
from xplane_apt.models.runway import Runway, RunwayEnd
from xplane_apt.models.validation import ParseError, ParseResult, ParseStats
from xplane_apt.parsers.path_parser import PathMode, PathParser
from xplane_apt.parsers.rows import Row, split_rows, to_bool, to_float, to_int
from xplane_apt.utils.bezier import DEFAULT_BEZIER_RESOLUTION

logger = logging.getLogger(__name__)

# Minimum token counts, row code included
MIN_TOKENS = {
    RowCode.AIRPORT_HEADER: 5,
    RowCode.TOWER_LOCATION: 4,
    RowCode.BEACON: 4,
    RowCode.WINDSOCK: 4,
    RowCode.TAXI_SIGN: 7,
    RowCode.LAND_RUNWAY: 26,
    RowCode.HELIPAD: 8,
    RowCode.START_LOCATION_LEGACY: 4,
    RowCode.START_LOCATION_NEW: 6,
    RowCode.METADATA: 3,
}
FREQUENCY_MIN_TOKENS = 2
RUNWAY_END_TOKENS = 9
DEFAULT_RUNWAY_WIDTH = 30.0


def split_linear_features(name: str, paths: Iterable[ParsedPath]) -> List[LinearFeature]:
    """
    Split paths into runs of constant paint and light type.

    A run ends at the first vertex whose type differs, that vertex included,
    and the next run starts from it, so neighbouring features share one
    coordinate. Runs shorter than two vertices are dropped, as are paths
    whose line types do not match their coordinates.
    """
    features = []

    for path in paths:
        coordinates = path.coordinates
        line_types = path.line_types

        if len(coordinates) < 2 or len(line_types) != len(coordinates):
            continue

        seg_start = 0
        seg_type = line_types[0]

        for i in range(1, len(coordinates)):
            this_type = line_types[i]
            if this_type.line_type != seg_type.line_type or this_type.light_type != seg_type.light_type:
                seg_coords = coordinates[seg_start:i + 1]
                if len(seg_coords) >= 2:
                    features.append(LinearFeature(
                        name=name,
                        painted_line_type=seg_type.line_type,
                        lighting_line_type=seg_type.light_type,
                        coordinates=seg_coords,
                    ))
                seg_start = i
                seg_type = this_type

        seg_coords = coordinates[seg_start:]
        if len(seg_coords) >= 2:
            features.append(LinearFeature(
                name=name,
                painted_line_type=seg_type.line_type,
                lighting_line_type=seg_type.light_type,
                coordinates=seg_coords,
            ))

    return features


def build_pavement(row: Row, paths: List[ParsedPath]) -> Pavement:
    """Pavement from a 110 header and its rings: first non-hole ring is the outline."""
    outer = next((path for path in paths if not path.is_hole), paths[0])
    holes = [path.coordinates for path in paths if path.is_hole and path is not outer]
    return Pavement(
        surface_type=to_int(row.tokens[1], 0) if len(row) > 1 else 0,
        smoothness=to_float(row.tokens[2]) or 0.0 if len(row) > 2 else 0.0,
        texture_orientation=to_float(row.tokens[3]) or 0.0 if len(row) > 3 else 0.0,
        name=row.text_from(4),
        coordinates=outer.coordinates,
        holes=holes,
    )


class AirportParser:
    """
    Parse the apt.dat text of a single airport.

    Each instance holds only the state of its own parse; independent
    instances can run concurrently.

    Args:
        data: apt.dat text for one airport (header row first)
        bezier_resolution: Steps used to sample each Bezier segment
    """

    def __init__(self, data: str, bezier_resolution: int = DEFAULT_BEZIER_RESOLUTION):
        self.rows = split_rows(data)
        self.bezier_resolution = bezier_resolution
        self.errors: List[ParseError] = []
        self.skipped = 0

    def parse(self) -> ParseResult[ParsedAirport]:
        start_time = time.perf_counter()
        self.errors = []
        self.skipped = 0
        airport = ParsedAirport()

        i = 0
        while i < len(self.rows):
            row = self.rows[i]
            code = row.row_code
            i += 1

            if code is None:
                # unknown or future row codes
                continue

            if code == RowCode.END_OF_FILE:
                break

            if not self._has_min_tokens(row, code):
                continue

            if code.is_header:
                self._parse_header(row, code, airport)
            elif code == RowCode.TOWER_LOCATION:
                airport.tower_location = self._parse_tower(row) or airport.tower_location
            elif code == RowCode.BEACON:
                airport.beacon = self._parse_beacon(row) or airport.beacon
            elif code.is_frequency:
                self._append(airport.frequencies, self._parse_frequency(row, code))
            elif code == RowCode.METADATA:
                airport.metadata[row.tokens[1]] = row.text_from(2)
            elif code == RowCode.LAND_RUNWAY:
                self._append(airport.runways, self._parse_runway(row))
            elif code == RowCode.HELIPAD:
                self._append(airport.helipads, self._parse_helipad(row))
            elif code == RowCode.WINDSOCK:
                self._append(airport.windsocks, self._parse_windsock(row))
            elif code == RowCode.TAXI_SIGN:
                self._append(airport.signs, self._parse_sign(row))
            elif code == RowCode.START_LOCATION_LEGACY:
                self._append(airport.startup_locations, self._parse_startup_location_legacy(row))
            elif code == RowCode.START_LOCATION_NEW:
                self._append(airport.startup_locations, self._parse_startup_location(row))
            elif code == RowCode.TAXIWAY:
                paths, consumed = self._parse_paths(i, 'polygon')
                i += consumed
                self._add_taxiway(row, paths, airport)
            elif code == RowCode.BOUNDARY:
                paths, consumed = self._parse_paths(i, 'polygon')
                i += consumed
                if paths:
                    airport.boundaries.append(BoundaryFeature(name=row.text_from(1), paths=paths))
            elif code == RowCode.FREE_CHAIN:
                paths, consumed = self._parse_paths(i, 'line')
                i += consumed
                if paths:
                    airport.linear_features.extend(split_linear_features(row.text_from(1), paths))
            elif code.is_path_node:
                self._skip(row, "Node row outside of a pavement, boundary or linear feature", 'node')

        stats = ParseStats(
            total=len(self.rows),
            parsed=airport.feature_count(),
            skipped=self.skipped,
            time_ms=(time.perf_counter() - start_time) * 1000,
        )
        logger.info(
            f"Parsed airport {airport.id or '?'}: {len(airport.runways)} runways, "
            f"{len(airport.pavements)} pavements, {len(airport.linear_features)} linear features "
            f"({stats.skipped} rows skipped)"
        )
        return ParseResult(data=airport, errors=self.errors, stats=stats)

    # --- Feature helpers ---

    def _parse_paths(self, start: int, mode: PathMode) -> Tuple[List[ParsedPath], int]:
        parser = PathParser(self.rows, start=start, mode=mode, bezier_resolution=self.bezier_resolution)
        paths = parser.get_paths()
        for error in parser.errors:
            self.errors.append(error)
            self.skipped += 1
        logger.debug(f"Path parser consumed {parser.lines_consumed} rows from line {start + 1}, {len(paths)} paths")
        return paths, parser.lines_consumed

    def _add_taxiway(self, row: Row, paths: List[ParsedPath], airport: ParsedAirport) -> None:
        if not paths:
            return
        name = row.text_from(4)
        airport.taxiways.append(TaxiwayFeature(
            surface=to_int(row.tokens[1], 0) if len(row) > 1 else 0,
            smoothness=to_float(row.tokens[2]) or 0.0 if len(row) > 2 else 0.0,
            orientation=to_float(row.tokens[3]) or 0.0 if len(row) > 3 else 0.0,
            name=name,
            paths=paths,
        ))
        airport.pavements.append(build_pavement(row, paths))

        # painted edge lines and embedded lights along the pavement boundary
        if any(path.has_markings for path in paths):
            edges = split_linear_features(f"{name} edge", paths)
            airport.linear_features.extend(feature for feature in edges if feature.is_marked)

    # --- Row parsers ---

    def _parse_header(self, row: Row, code: RowCode, airport: ParsedAirport) -> None:
        elevation = to_float(row.tokens[1])
        airport.elevation = elevation if elevation is not None else 0.0
        airport.id = row.tokens[4]
        airport.name = row.text_from(5)
        airport.airport_type = AirportType.from_row_code(code)

    def _parse_tower(self, row: Row) -> Optional[TowerLocation]:
        lat, lon = self._coordinate(row, 1, 'tower location')
        if lat is None:
            return None
        height = to_float(row.tokens[3])
        return TowerLocation(
            latitude=lat,
            longitude=lon,
            height=height if height is not None else 0.0,
            name=row.text_from(4),
        )

    def _parse_beacon(self, row: Row) -> Optional[Beacon]:
        lat, lon = self._coordinate(row, 1, 'beacon')
        if lat is None:
            return None
        return Beacon(latitude=lat, longitude=lon, type=to_int(row.tokens[3], 0), name=row.text_from(4))

    def _parse_frequency(self, row: Row, code: RowCode) -> Optional[Frequency]:
        if len(row) < FREQUENCY_MIN_TOKENS:
            self._skip(row, f"Frequency row needs {FREQUENCY_MIN_TOKENS} tokens", 'frequency')
            return None
        value = to_float(row.tokens[1])
        if value is None:
            self._skip(row, f"Invalid frequency '{row.tokens[1]}'", 'frequency')
            return None
        return Frequency(
            type=FrequencyType.from_row_code(code),
            frequency=value / 100,
            name=row.text_from(2),
        )

    def _parse_runway_end(self, row: Row, offset: int) -> Optional[RunwayEnd]:
        tokens = row.tokens[offset:offset + RUNWAY_END_TOKENS]
        if len(tokens) < RUNWAY_END_TOKENS:
            return None
        lat = to_float(tokens[1])
        lon = to_float(tokens[2])
        if not NavPoint.is_valid(lat, lon):
            return None
        return RunwayEnd(
            name=tokens[0],
            latitude=lat,
            longitude=lon,
            dthr_length=max(0.0, to_float(tokens[3]) or 0.0),
            overrun_length=max(0.0, to_float(tokens[4]) or 0.0),
            marking=to_int(tokens[5], 0),
            lighting=to_int(tokens[6], 0),
            tdz_lighting=to_bool(tokens[7]),
            reil=to_int(tokens[8], 0),
        )

    def _parse_runway(self, row: Row) -> Optional[Runway]:
        end1 = self._parse_runway_end(row, 8)
        end2 = self._parse_runway_end(row, 8 + RUNWAY_END_TOKENS)
        if end1 is None or end2 is None:
            self._skip(row, "Invalid runway end", 'runway')
            return None

        width = to_float(row.tokens[1])
        shoulder_token = to_int(row.tokens[3], 0)
        shoulder_surface_type = shoulder_token
        shoulder_width = 0
        if shoulder_token >= 100:
            shoulder_width = shoulder_token // 100
            shoulder_surface_type = shoulder_token % 100

        smoothness = to_float(row.tokens[4])
        return Runway(
            width=width if width is not None and width > 0 else DEFAULT_RUNWAY_WIDTH,
            surface_type=to_int(row.tokens[2], 0),
            ends=(end1, end2),
            shoulder_surface_type=shoulder_surface_type,
            shoulder_width=shoulder_width,
            smoothness=smoothness if smoothness is not None else 0.0,
            centerline_lights=to_bool(row.tokens[5]),
            edge_lights=to_bool(row.tokens[6]),
            auto_distance_remaining_signs=to_bool(row.tokens[7]),
        )

    def _parse_helipad(self, row: Row) -> Optional[Helipad]:
        lat, lon = self._coordinate(row, 2, 'helipad')
        if lat is None:
            return None
        length = to_float(row.tokens[5])
        width = to_float(row.tokens[6])
        return Helipad(
            name=row.tokens[1],
            latitude=lat,
            longitude=lon,
            heading=self._heading(row.tokens[4]),
            length=length if length is not None and length > 0 else 1.0,
            width=width if width is not None and width > 0 else 1.0,
            surface_type=to_int(row.tokens[7], 0),
        )

    def _parse_windsock(self, row: Row) -> Optional[Windsock]:
        lat, lon = self._coordinate(row, 1, 'windsock')
        if lat is None:
            return None
        return Windsock(latitude=lat, longitude=lon, illuminated=to_bool(row.tokens[3]), name=row.text_from(4))

    def _parse_sign(self, row: Row) -> Optional[Sign]:
        lat, lon = self._coordinate(row, 1, 'sign')
        if lat is None:
            return None
        return Sign(
            latitude=lat,
            longitude=lon,
            heading=self._heading(row.tokens[3]),
            size=to_int(row.tokens[5], 0),
            text=row.tokens[6],
        )

    def _parse_startup_location(self, row: Row) -> Optional[StartupLocation]:
        lat, lon = self._coordinate(row, 1, 'startup location')
        if lat is None:
            return None
        return StartupLocation(
            latitude=lat,
            longitude=lon,
            heading=self._heading(row.tokens[3]),
            location_type=row.tokens[4],
            airplane_types=row.tokens[5],
            name=row.text_from(6),
        )

    def _parse_startup_location_legacy(self, row: Row) -> Optional[StartupLocation]:
        lat, lon = self._coordinate(row, 1, 'startup location')
        if lat is None:
            return None
        return StartupLocation(
            latitude=lat,
            longitude=lon,
            heading=self._heading(row.tokens[3]),
            location_type='misc',
            airplane_types='ABCDEF',
            name=row.text_from(4) or 'Startup',
        )

    # --- Validation helpers ---

    def _has_min_tokens(self, row: Row, code: RowCode) -> bool:
        required = MIN_TOKENS.get(RowCode.AIRPORT_HEADER if code.is_header else code)
        if required is not None and len(row) < required:
            self._skip(row, f"Row {code.value} needs at least {required} tokens, got {len(row)}", code.name.lower())
            return False
        return True

    def _coordinate(self, row: Row, index: int, context: str) -> Tuple[Optional[float], Optional[float]]:
        lat = to_float(row.tokens[index])
        lon = to_float(row.tokens[index + 1])
        if not NavPoint.is_valid(lat, lon):
            self._skip(row, f"Invalid coordinate in {context}", 'coordinate')
            return None, None
        return lat, lon

    @staticmethod
    def _heading(token: str) -> float:
        heading = to_float(token)
        if heading is None or not 0 <= heading <= 360:
            return 0.0
        return heading

    @staticmethod
    def _append(items: list, item) -> None:
        if item is not None:
            items.append(item)

    def _skip(self, row: Row, message: str, path: Optional[str] = None) -> None:
        logger.debug(f"Skipping line {row.line_number}: {message}")
        self.skipped += 1
        self.errors.append(ParseError(message=message, line=row.line_number, path=path))


def parse_airport(data: str, bezier_resolution: int = DEFAULT_BEZIER_RESOLUTION) -> ParsedAirport:
    """Parse one airport's apt.dat text and return the airport, discarding the error report."""
    return AirportParser(data, bezier_resolution=bezier_resolution).parse().data

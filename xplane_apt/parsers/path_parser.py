"""
Path reconstruction for apt.dat node rows (111-116).

A feature header (110 pavement, 120 linear feature, 130 boundary) is followed
by node rows. Plain nodes (111, 113, 115) carry a position and optional paint
and light types; curve nodes (112, 114, 116) add a Bezier control point that
is the node's outgoing control, the incoming one being its mirror image.

Ring rows (113/114) close the current ring and the next node starts a new
ring of the same feature (a hole for pavements). End rows (115/116) close the
last ring and end the feature.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Optional, Sequence, Tuple

from xplane_apt.models.enums import RowCode
from xplane_apt.models.navpoint import NavPoint
from xplane_apt.models.path import CoordLineType, LineProps, LonLat, ParsedPath
from xplane_apt.models.validation import ParseError
from xplane_apt.parsers.rows import Row, to_float, to_int
from xplane_apt.utils.bezier import (
    DEFAULT_BEZIER_RESOLUTION,
    calculate_bezier,
    calculate_cubic_bezier,
    mirror_control_point,
)

logger = logging.getLogger(__name__)

# 'line' leaves chains ended by 115/116 open, 'polygon' always closes rings
PathMode = Literal['line', 'polygon']

RING_CODES = (RowCode.RING_SEGMENT, RowCode.RING_CURVE)
END_CODES = (RowCode.END_SEGMENT, RowCode.END_CURVE)


def signed_area(coordinates: Sequence[LonLat]) -> float:
    """
    Shoelace signed area of a ring in (lon, lat) degrees squared.

    Counter-clockwise rings are positive, clockwise rings negative. The ring
    may be given closed or open.
    """
    area = 0.0
    count = len(coordinates)
    for i in range(count):
        x1, y1 = coordinates[i]
        x2, y2 = coordinates[(i + 1) % count]
        area += x1 * y2 - x2 * y1
    return area / 2


def is_clockwise(coordinates: Sequence[LonLat]) -> bool:
    return signed_area(coordinates) < 0


class BezierState(Enum):
    NOT_IN_BEZIER = "not_in_bezier"
    IN_BEZIER = "in_bezier"


@dataclass(frozen=True)
class PathNode:
    """A decoded node row."""

    coordinate: LonLat
    control: Optional[LonLat] = None
    line_type: int = 0
    light_type: int = 0

    @property
    def is_curve(self) -> bool:
        return self.control is not None


@dataclass
class RingState:
    """
    Accumulators for the ring being built.

    ``outgoing`` holds the (vertex, control point) left open by the last
    curve node while ``bezier_state`` is IN_BEZIER.
    """

    coordinates: List[LonLat] = field(default_factory=list)
    line_types: List[CoordLineType] = field(default_factory=list)
    properties: LineProps = field(default_factory=LineProps)
    bezier_state: BezierState = BezierState.NOT_IN_BEZIER
    outgoing: Optional[Tuple[LonLat, LonLat]] = None
    line_type: int = 0
    light_type: int = 0
    first_node: Optional[PathNode] = None

    def append(self, coordinate: LonLat, line_type: int, light_type: int) -> None:
        self.coordinates.append(coordinate)
        self.line_types.append(CoordLineType(line_type, light_type))

    def splice(self, points: List[LonLat], node: PathNode) -> None:
        """
        Append sampled curve points ending at node.

        Interior samples keep the current segment type, the last sample takes
        the node's own type. A first sample equal to the last vertex is not
        repeated.
        """
        start = 1 if self.coordinates and self.coordinates[-1] == points[0] else 0
        for point in points[start:-1]:
            self.append(point, self.line_type, self.light_type)
        self.append(points[-1], node.line_type, node.light_type)

    def to_path(self) -> ParsedPath:
        return ParsedPath(
            coordinates=self.coordinates,
            line_types=self.line_types,
            properties=self.properties,
            is_hole=is_clockwise(self.coordinates),
        )


def add_node(state: RingState, node: PathNode, resolution: int = DEFAULT_BEZIER_RESOLUTION) -> None:
    """Advance the ring state by one node, drawing the segment that ends at it."""
    coord = node.coordinate

    if state.bezier_state is BezierState.IN_BEZIER:
        start, out_control = state.outgoing
        if start == coord:
            # split bezier: both halves share the vertex, nothing to draw
            state.append(coord, node.line_type, node.light_type)
        elif node.is_curve:
            incoming = mirror_control_point(coord, node.control)
            state.splice(calculate_cubic_bezier(start, out_control, incoming, coord, resolution), node)
        else:
            state.splice(calculate_bezier(start, out_control, coord, resolution), node)
    elif node.is_curve and state.coordinates:
        last = state.coordinates[-1]
        if last == coord:
            state.append(coord, node.line_type, node.light_type)
        else:
            incoming = mirror_control_point(coord, node.control)
            state.splice(calculate_bezier(last, incoming, coord, resolution), node)
    else:
        state.append(coord, node.line_type, node.light_type)

    if node.is_curve:
        state.bezier_state = BezierState.IN_BEZIER
        state.outgoing = (coord, node.control)
    else:
        state.bezier_state = BezierState.NOT_IN_BEZIER
        state.outgoing = None

    state.line_type = node.line_type
    state.light_type = node.light_type
    state.properties.record(node.line_type, node.light_type)


def close_ring(state: RingState, resolution: int = DEFAULT_BEZIER_RESOLUTION) -> None:
    """Draw the closing segment back to the ring's first node."""
    if state.first_node is not None:
        add_node(state, state.first_node, resolution)


class PathParser:
    """
    Consume the node rows of one feature and build its paths.

    The parser reads rows from ``rows[start]`` until the feature ends
    (115/116), a non-node row appears, or input runs out. ``lines_consumed``
    then tells the caller how far to advance; a terminating non-node row is
    not counted.

    Example:
        parser = PathParser(rows, start=i + 1, mode='polygon')
        paths = parser.get_paths()
        i += parser.lines_consumed
    """

    def __init__(
        self,
        rows: Sequence[Row],
        start: int = 0,
        mode: PathMode = 'line',
        bezier_resolution: int = DEFAULT_BEZIER_RESOLUTION,
    ):
        if mode not in ('line', 'polygon'):
            raise ValueError(f"Unknown path mode: {mode}")
        self.rows = rows
        self.start = start
        self.mode = mode
        self.bezier_resolution = bezier_resolution
        self.errors: List[ParseError] = []
        self._lines_consumed = 0

    @property
    def lines_consumed(self) -> int:
        return self._lines_consumed

    def get_paths(self) -> List[ParsedPath]:
        paths: List[ParsedPath] = []
        self._lines_consumed = 0
        self.errors = []
        state = RingState()

        for index in range(self.start, len(self.rows)):
            row = self.rows[index]
            code = row.row_code
            if code is None or not code.is_path_node:
                # another feature starts here; the caller re-reads this row
                if state.coordinates:
                    logger.debug(f"Dropping unterminated ring of {len(state.coordinates)} points before line {row.line_number}")
                return paths

            self._lines_consumed += 1
            node = self._parse_node(row, code)
            if node is not None:
                if state.first_node is None:
                    state.first_node = node
                add_node(state, node, self.bezier_resolution)

            if code in RING_CODES:
                close_ring(state, self.bezier_resolution)
                self._finalize(state, paths)
                state = RingState()
            elif code in END_CODES:
                if self.mode == 'polygon':
                    close_ring(state, self.bezier_resolution)
                self._finalize(state, paths)
                return paths

        # input ran out before an end row
        if self.mode == 'polygon':
            close_ring(state, self.bezier_resolution)
        self._finalize(state, paths)
        return paths

    def _finalize(self, state: RingState, paths: List[ParsedPath]) -> None:
        if state.coordinates:
            paths.append(state.to_path())

    def _parse_node(self, row: Row, code: RowCode) -> Optional[PathNode]:
        """Decode a node row, recording an error and returning None when malformed."""
        tokens = row.tokens
        type_offset = 5 if code.is_curve else 3
        if len(tokens) < type_offset:
            self._error(row, f"Node row {code.value} needs at least {type_offset} tokens, got {len(tokens)}")
            return None

        lat = to_float(tokens[1])
        lon = to_float(tokens[2])
        if not NavPoint.is_valid(lat, lon):
            self._error(row, f"Invalid node coordinate {tokens[1]} {tokens[2]}")
            return None

        control = None
        if code.is_curve:
            control_lat = to_float(tokens[3])
            control_lon = to_float(tokens[4])
            if not NavPoint.is_valid(control_lat, control_lon):
                self._error(row, f"Invalid control point {tokens[3]} {tokens[4]}")
                return None
            control = (control_lon, control_lat)

        line_type = to_int(tokens[type_offset], 0) if len(tokens) > type_offset else 0
        light_type = to_int(tokens[type_offset + 1], 0) if len(tokens) > type_offset + 1 else 0

        return PathNode(
            coordinate=(lon, lat),
            control=control,
            line_type=line_type,
            light_type=light_type,
        )

    def _error(self, row: Row, message: str) -> None:
        logger.debug(f"Skipping node row at line {row.line_number}: {message}")
        self.errors.append(ParseError(message=message, line=row.line_number, path='node'))

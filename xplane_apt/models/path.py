"""Path geometry produced by the path parser."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# (longitude, latitude)
LonLat = Tuple[float, float]


@dataclass(frozen=True)
class CoordLineType:
    """Paint and light type recorded on a vertex."""

    line_type: int = 0
    light_type: int = 0

    @property
    def is_marked(self) -> bool:
        return self.line_type > 0 or self.light_type > 0


@dataclass
class LineProps:
    """First non-zero paint and light types met along a path (legacy summary)."""

    painted_line_type: Optional[int] = None
    lighting_line_type: Optional[int] = None

    def record(self, line_type: int, light_type: int) -> None:
        if line_type > 0 and self.painted_line_type is None:
            self.painted_line_type = line_type
        if light_type > 0 and self.lighting_line_type is None:
            self.lighting_line_type = light_type


@dataclass(frozen=True)
class PathVertex:
    coordinate: LonLat
    paint_type: int
    light_type: int


@dataclass
class ParsedPath:
    """
    One ring or chain of a feature.

    ``coordinates`` and ``line_types`` are parallel. A node vertex carries the
    types of its own row; the points sampled along a curve towards it carry
    the types of the previous node, and the node itself closes the curve with
    its own. Features are split wherever consecutive entries differ.
    ``is_hole`` is derived from the winding of the ring, never read from the
    input.
    """

    coordinates: List[LonLat] = field(default_factory=list)
    line_types: List[CoordLineType] = field(default_factory=list)
    properties: LineProps = field(default_factory=LineProps)
    is_hole: bool = False

    @property
    def vertices(self) -> List[PathVertex]:
        return [
            PathVertex(coord, lt.line_type, lt.light_type)
            for coord, lt in zip(self.coordinates, self.line_types)
        ]

    @property
    def is_closed(self) -> bool:
        return len(self.coordinates) > 2 and self.coordinates[0] == self.coordinates[-1]

    @property
    def has_markings(self) -> bool:
        return any(lt.is_marked for lt in self.line_types)

    def __len__(self) -> int:
        return len(self.coordinates)


@dataclass
class LinearFeature:
    """A run of a path along which paint and light types are constant."""

    name: str
    painted_line_type: int
    lighting_line_type: int
    coordinates: List[LonLat] = field(default_factory=list)

    @property
    def is_marked(self) -> bool:
        return self.painted_line_type > 0 or self.lighting_line_type > 0

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'painted_line_type': self.painted_line_type,
            'lighting_line_type': self.lighting_line_type,
            'vertex_count': len(self.coordinates),
        }

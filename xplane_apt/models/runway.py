from dataclasses import dataclass
from typing import Optional, Tuple

from xplane_apt.models.navpoint import NavPoint

@dataclass
class RunwayEnd:
    """Data class for one end of a land runway (9 positional tokens of row 100)."""
    
    name: str
    latitude: float
    longitude: float
    dthr_length: float = 0.0  # displaced threshold, meters
    overrun_length: float = 0.0  # blastpad/overrun, meters
    marking: int = 0
    lighting: int = 0  # approach lighting code
    tdz_lighting: bool = False
    reil: int = 0

    @property
    def navpoint(self) -> NavPoint:
        return NavPoint(latitude=self.latitude, longitude=self.longitude, name=self.name)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'dthr_length': self.dthr_length,
            'overrun_length': self.overrun_length,
            'marking': self.marking,
            'lighting': self.lighting,
            'tdz_lighting': self.tdz_lighting,
            'reil': self.reil,
        }


@dataclass
class Runway:
    """Data class for storing land runway information."""
    
    width: float
    surface_type: int
    ends: Tuple[RunwayEnd, RunwayEnd]
    shoulder_surface_type: int = 0
    shoulder_width: float = 0.0
    smoothness: float = 0.25
    centerline_lights: bool = False
    edge_lights: bool = False
    auto_distance_remaining_signs: bool = False

    @property
    def le(self) -> RunwayEnd:
        return self.ends[0]

    @property
    def he(self) -> RunwayEnd:
        return self.ends[1]

    @property
    def name(self) -> str:
        return f"{self.le.name}/{self.he.name}"

    @property
    def length_m(self) -> float:
        """Distance between the two runway end coordinates, in meters."""
        _, distance = self.le.navpoint.haversine_distance(self.he.navpoint)
        return distance

    @property
    def true_heading(self) -> float:
        """True bearing from the first end to the second, in degrees."""
        bearing, _ = self.le.navpoint.haversine_distance(self.he.navpoint)
        return bearing
    
    def to_dict(self) -> dict:
        """Convert to a flat dictionary, one prefixed column set per end."""
        data = {
            'name': self.name,
            'width': self.width,
            'length_m': self.length_m,
            'surface_type': self.surface_type,
            'shoulder_surface_type': self.shoulder_surface_type,
            'shoulder_width': self.shoulder_width,
            'smoothness': self.smoothness,
            'centerline_lights': self.centerline_lights,
            'edge_lights': self.edge_lights,
            'auto_distance_remaining_signs': self.auto_distance_remaining_signs,
        }
        for prefix, end in (('le', self.le), ('he', self.he)):
            for key, value in end.to_dict().items():
                data[f'{prefix}_{key}'] = value
        return data
    
    def __repr__(self):
        return f"Runway(le_ident='{self.le.name}', he_ident='{self.he.name}', width={self.width})"
        
    def __str__(self):
        """Return a human-readable string representation of the runway."""
        status = []
        if self.centerline_lights:
            status.append("CENTERLINE LIGHTS")
        if self.edge_lights:
            status.append("EDGE LIGHTS")
            
        runway_info = f"Runway {self.name}"
        if status:
            runway_info += f" ({', '.join(status)})"

        runway_info += f"\nLength: {self.length_m:.0f}m Width: {self.width:.0f}m"
        if self.shoulder_width:
            runway_info += f" Shoulder: {self.shoulder_width:.0f}m"
            
        return runway_info

#!/usr/bin/env python3

import math
from typing import Optional, Tuple
from dataclasses import dataclass

@dataclass
class NavPoint:
    """
    A geographic point with coordinates and optional name.
    
    All coordinates are stored in decimal degrees:
    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)
    
    Distances are expressed in meters, on a spherical Earth of mean radius
    EARTH_RADIUS_M. Bearings are true, in degrees (0-360, 0 is North, 90 is East).
    """

    EARTH_RADIUS_M = 6371000.0

    latitude: float  # Decimal degrees, -90 to +90
    longitude: float  # Decimal degrees, -180 to +180
    name: Optional[str] = None  # Optional identifier for the point

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")

    @staticmethod
    def is_valid(latitude: Optional[float], longitude: Optional[float]) -> bool:
        """
        Check that a latitude/longitude pair is usable without building a point.

        NaN, infinities and out-of-range values are rejected.
        """
        if latitude is None or longitude is None:
            return False
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            return False
        return -90 <= latitude <= 90 and -180 <= longitude <= 180

    @property
    def lonlat(self) -> Tuple[float, float]:
        return (self.longitude, self.latitude)

    def point_from_bearing_distance(self, bearing: float, distance: float, name: Optional[str] = None) -> 'NavPoint':
        """
        Create a new NavPoint from this point's position, bearing, and distance.
        
        Args:
            bearing: Bearing in degrees (0-360, where 0/360 is North, 90 is East, etc.)
            distance: Distance in meters
            name: Optional name for the new point
            
        Returns:
            A new NavPoint at the calculated position
            
        Note:
            Uses the direct great circle formula; the resulting longitude is
            normalised to [-180, 180).
        """
        R = self.EARTH_RADIUS_M

        # Convert to radians
        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)
        bearing_rad = math.radians(bearing)
        angular = distance / R

        # Calculate new latitude
        lat2 = math.asin(
            math.sin(lat1) * math.cos(angular) +
            math.cos(lat1) * math.sin(angular) * math.cos(bearing_rad)
        )

        # Calculate new longitude
        lon2 = lon1 + math.atan2(
            math.sin(bearing_rad) * math.sin(angular) * math.cos(lat1),
            math.cos(angular) - math.sin(lat1) * math.sin(lat2)
        )

        longitude = math.degrees(lon2)
        if not -180 <= longitude <= 180:
            longitude = (longitude + 180) % 360 - 180

        return NavPoint(
            latitude=math.degrees(lat2),
            longitude=longitude,
            name=name
        )

    def haversine_distance(self, other: 'NavPoint') -> Tuple[float, float]:
        """
        Calculate the bearing and distance to another NavPoint using the Haversine formula.
        
        Args:
            other: The target NavPoint
            
        Returns:
            Tuple of (bearing in degrees, distance in meters)
        """
        # Convert to radians
        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)
        lat2 = math.radians(other.latitude)
        lon2 = math.radians(other.longitude)
        
        # Calculate differences
        dlat = lat2 - lat1
        dlon = lon2 - lon1
        
        # Haversine formula
        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        distance = self.EARTH_RADIUS_M * c
        
        # Calculate bearing
        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
        bearing = math.degrees(math.atan2(y, x))
        bearing = (bearing + 360) % 360  # Normalize to [0, 360)
        
        return bearing, distance

    def __str__(self) -> str:
        """String representation of the NavPoint."""
        name_str = f"{self.name} " if self.name else ""
        return f"{name_str}({self.latitude}, {self.longitude})"

"""Geographic primitives: coordinates, great-circle distance and curve sampling."""

import math
from dataclasses import dataclass

import numpy as np

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point in decimal degrees."""

    lat: float
    lon: float

    def as_list(self) -> list[float]:
        """Return [lat, lon]."""
        return [self.lat, self.lon]

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """Parse a "lat,lon" string.

        Raises:
            ValueError: If the string is not two comma-separated numbers
        """
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'lat,lon', got {text!r}")
        return cls(lat=float(parts[0]), lon=float(parts[1]))


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates in kilometers."""
    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def haversine_m(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates in meters."""
    return haversine_km(a, b) * 1000.0


def quadratic_bezier(
    start: Coordinate,
    control_lat: np.ndarray,
    control_lon: np.ndarray,
    end: Coordinate,
    t: np.ndarray,
) -> list[Coordinate]:
    """Evaluate a quadratic Bezier curve at parameters t.

    The control point may vary with t (one entry per parameter value), which
    lets callers bend the curve non-uniformly.

    Args:
        start: Curve start (t = 0)
        control_lat: Control point latitude, scalar or one value per t
        control_lon: Control point longitude, scalar or one value per t
        end: Curve end (t = 1)
        t: Parameter values in [0, 1]

    Returns:
        List of coordinates in parameter order
    """
    a = (1 - t) ** 2
    b = 2 * (1 - t) * t
    c = t**2
    lats = a * start.lat + b * control_lat + c * end.lat
    lons = a * start.lon + b * control_lon + c * end.lon
    return [Coordinate(lat=float(lat), lon=float(lon)) for lat, lon in zip(lats, lons)]

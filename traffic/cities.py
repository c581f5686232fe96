"""Preset cities with a centre point and a bounding box for incident queries."""

from dataclasses import dataclass

from core.geo import Coordinate
from traffic.incidents import BoundingBox


@dataclass(frozen=True)
class City:
    name: str
    center: Coordinate
    bbox: BoundingBox


def _city(name: str, lat: float, lon: float, bbox: str) -> City:
    return City(name=name, center=Coordinate(lat, lon), bbox=BoundingBox.parse(bbox))


CITIES: tuple[City, ...] = (
    _city("New York", 40.7128, -74.0060, "-74.2591,40.4774,-73.7004,41.0074"),
    _city("London", 51.5074, -0.1278, "-0.5103,51.2867,0.3340,51.6919"),
    _city("Paris", 48.8566, 2.3522, "2.2241,48.8155,2.4699,48.9022"),
    _city("Dubai", 25.2048, 55.2708, "55.1713,25.0657,55.5472,25.3587"),
    _city("Tokyo", 35.6762, 139.6503, "139.4976,35.5175,139.9199,35.8167"),
    _city("Berlin", 52.5200, 13.4050, "13.0883,52.3382,13.7611,52.6755"),
    _city("Sydney", -33.8688, 151.2093, "150.5210,-34.1183,151.3430,-33.5781"),
    _city("Singapore", 1.3521, 103.8198, "103.6920,1.1304,104.0120,1.4710"),
    _city("Mumbai", 19.0760, 72.8777, "72.7760,18.8947,72.9786,19.2703"),
    _city("Toronto", 43.6532, -79.3832, "-79.6391,43.5810,-79.1168,43.8554"),
)


def get_city(name: str) -> City:
    """Look up a preset city by name, ignoring case.

    Raises:
        KeyError: If no preset city has that name
    """
    wanted = name.strip().lower()
    for city in CITIES:
        if city.name.lower() == wanted:
            return city
    raise KeyError(f"Unknown city: {name}")

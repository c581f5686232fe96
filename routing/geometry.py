from dataclasses import dataclass

from core.geo import Coordinate
from core.types import RouteSource


@dataclass(frozen=True)
class RouteGeometry:
    """Ordered coordinates describing a travel path, with its length and travel time."""

    coordinates: tuple[Coordinate, ...]
    distance_m: float
    duration_s: float
    source: RouteSource = RouteSource.LIVE

    @property
    def is_empty(self) -> bool:
        return not self.coordinates

    @property
    def is_synthetic(self) -> bool:
        return self.source == RouteSource.SYNTHETIC

"""Traffic incidents and the demo incident generator."""

import random
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from core.geo import Coordinate
from core.types import IncidentType

INCIDENT_DESCRIPTIONS: dict[IncidentType, str] = {
    IncidentType.ACCIDENT: "Multi-vehicle accident",
    IncidentType.ROAD_WORK: "Road construction in progress",
    IncidentType.CONGESTION: "Heavy traffic congestion",
    IncidentType.CLOSED_ROAD: "Road closure due to maintenance",
    IncidentType.BROKEN_VEHICLE: "Disabled vehicle blocking lane",
    IncidentType.WEATHER: "Hazardous weather conditions",
    IncidentType.EVENT: "Special event causing delays",
}


@dataclass(frozen=True)
class BoundingBox:
    """Geographic rectangle in decimal degrees."""

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def __post_init__(self) -> None:
        if self.min_lon > self.max_lon or self.min_lat > self.max_lat:
            raise ValueError(f"Bounding box minimum exceeds maximum: {self}")

    @classmethod
    def parse(cls, text: str) -> "BoundingBox":
        """Parse "minLon,minLat,maxLon,maxLat".

        Raises:
            ValueError: If the string does not hold four numbers in order
        """
        parts = text.split(",")
        if len(parts) != 4:
            raise ValueError(f"Expected 'minLon,minLat,maxLon,maxLat', got {text!r}")
        min_lon, min_lat, max_lon, max_lat = (float(part) for part in parts)
        return cls(min_lon=min_lon, min_lat=min_lat, max_lon=max_lon, max_lat=max_lat)

    def contains(self, point: Coordinate) -> bool:
        return (
            self.min_lat <= point.lat <= self.max_lat and self.min_lon <= point.lon <= self.max_lon
        )

    def to_string(self) -> str:
        return f"{self.min_lon},{self.min_lat},{self.max_lon},{self.max_lat}"


@dataclass(frozen=True)
class TrafficIncident:
    """A reported disruption on the road network."""

    coordinate: Coordinate
    type: IncidentType
    description: str
    delay_min: int
    length_m: int
    severity: int  # 1 (minor) to 4 (major)
    start_time: datetime | None = None
    end_time: datetime | None = None
    road_name: str | None = None


class DemoIncidentGenerator:
    """Random incidents inside a bounding box, for running without a live provider."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize generator.

        Args:
            rng: Random source (seed it for reproducible output)
            clock: Returns "now" for incident timestamps
        """
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now

    def generate(self, bbox: BoundingBox) -> list[TrafficIncident]:
        """Generate between 3 and 7 incidents placed uniformly in bbox."""
        now = self.clock()
        types = list(IncidentType)
        incidents = []

        for _ in range(3 + self.rng.randrange(5)):
            incident_type = types[self.rng.randrange(len(types))]
            coordinate = Coordinate(
                lat=bbox.min_lat + self.rng.random() * (bbox.max_lat - bbox.min_lat),
                lon=bbox.min_lon + self.rng.random() * (bbox.max_lon - bbox.min_lon),
            )
            incidents.append(
                TrafficIncident(
                    coordinate=coordinate,
                    type=incident_type,
                    description=INCIDENT_DESCRIPTIONS[incident_type],
                    delay_min=self.rng.randrange(20) + 1,
                    length_m=self.rng.randrange(1500) + 100,
                    severity=self.rng.randrange(4) + 1,
                    start_time=now - timedelta(minutes=self.rng.randrange(120)),
                    end_time=now + timedelta(minutes=self.rng.randrange(180)),
                    road_name=f"Highway {self.rng.randrange(50) + 1}",
                )
            )

        return incidents

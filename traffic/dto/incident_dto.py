"""DTO for traffic incidents."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.types import IncidentType
from traffic.incidents import TrafficIncident

TIMESTAMP_FORMAT = "%b %d, %Y %H:%M"


class IncidentDTO(BaseModel):
    """Transport shape of a TrafficIncident."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    type: IncidentType
    description: str
    delay: int = Field(ge=0, description="Delay in minutes")
    length: int = Field(ge=0, description="Affected length in meters")
    severity: int = Field(ge=1, le=4)
    start_time: datetime | None = None
    end_time: datetime | None = None
    road_name: str | None = None

    @classmethod
    def from_incident(cls, incident: TrafficIncident) -> "IncidentDTO":
        return cls(
            latitude=incident.coordinate.lat,
            longitude=incident.coordinate.lon,
            type=incident.type,
            description=incident.description,
            delay=incident.delay_min,
            length=incident.length_m,
            severity=incident.severity,
            start_time=incident.start_time,
            end_time=incident.end_time,
            road_name=incident.road_name,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with human-readable timestamps."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "type": self.type.value,
            "description": self.description,
            "delay": self.delay,
            "length": self.length,
            "severity": self.severity,
            "start_time": self.start_time.strftime(TIMESTAMP_FORMAT) if self.start_time else None,
            "end_time": self.end_time.strftime(TIMESTAMP_FORMAT) if self.end_time else None,
            "road_name": self.road_name,
        }

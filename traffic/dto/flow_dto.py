"""DTO for traffic flow samples."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from traffic.flow import FlowSample


class FlowSampleDTO(BaseModel):
    """Transport shape of a FlowSample.

    Fields:
        latitude: Sampled latitude
        longitude: Sampled longitude
        current_speed: Measured speed (km/h)
        free_flow_speed: Free-flow speed (km/h)
        congestion: Percent reduction vs free flow (0-100)
        confidence: Provider confidence (0 marks a failed lookup)
        road_name: Provider road label
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    current_speed: float = Field(ge=0.0)
    free_flow_speed: float = Field(ge=0.0)
    congestion: int = Field(ge=0, le=100)
    confidence: float = Field(ge=0.0, le=1.0)
    road_name: str | None = None

    @classmethod
    def from_sample(cls, sample: FlowSample) -> "FlowSampleDTO":
        return cls(
            latitude=sample.coordinate.lat,
            longitude=sample.coordinate.lon,
            current_speed=sample.current_speed_kph,
            free_flow_speed=sample.free_flow_speed_kph,
            congestion=sample.congestion,
            confidence=sample.confidence,
            road_name=sample.road_name,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "current_speed": self.current_speed,
            "free_flow_speed": self.free_flow_speed,
            "congestion": self.congestion,
            "confidence": self.confidence,
            "road_name": self.road_name,
        }

"""DTO for area traffic summaries."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from traffic.analysis import AreaSummary


class AreaSummaryDTO(BaseModel):
    """Transport shape of an AreaSummary."""

    model_config = ConfigDict(frozen=True)

    area: str
    analysis: str
    average_congestion: int | None = Field(default=None, ge=0, le=100)
    incident_count: int = Field(ge=0)
    severe_incidents: int = Field(ge=0)

    @classmethod
    def from_summary(cls, summary: AreaSummary) -> "AreaSummaryDTO":
        return cls(
            area=summary.area,
            analysis=summary.text,
            average_congestion=summary.average_congestion,
            incident_count=summary.incident_count,
            severe_incidents=summary.severe_incidents,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "area": self.area,
            "analysis": self.analysis,
            "average_congestion": self.average_congestion,
            "incident_count": self.incident_count,
            "severe_incidents": self.severe_incidents,
        }

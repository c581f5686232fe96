"""DTO for route recommendations.

RouteDTO flattens a RouteDecision into the shape consumed by clients:
geometry as [lat, lon] pairs, summary metrics, the congestion aggregate and
the sampled traffic points. Routes returned without traffic evaluation carry
no congestion fields.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from routing.selection import RouteDecision

from .flow_dto import FlowSampleDTO


class RouteDTO(BaseModel):
    """Transport shape of a RouteDecision."""

    model_config = ConfigDict(frozen=True)

    coordinates: list[tuple[float, float]] = Field(description="[lat, lon] pairs in travel order")
    distance: float = Field(ge=0.0, description="Total distance in meters")
    duration: float = Field(ge=0.0, description="Total duration in seconds")
    source: str = Field(description="Geometry source (synthetic or live)")
    average_congestion: int | None = Field(default=None, ge=0, le=100)
    traffic_level: str | None = None
    recommended: bool = False
    recommendation_reason: str | None = None
    route_traffic_points: list[FlowSampleDTO] = Field(default_factory=list)

    @classmethod
    def from_decision(cls, decision: RouteDecision) -> "RouteDTO":
        route = decision.route
        profile = decision.profile
        return cls(
            coordinates=[(c.lat, c.lon) for c in route.coordinates],
            distance=route.distance_m,
            duration=route.duration_s,
            source=route.source.value,
            average_congestion=profile.average_congestion if profile else None,
            traffic_level=profile.traffic_level.value if profile else None,
            recommended=decision.is_alternate,
            recommendation_reason=decision.reason,
            route_traffic_points=(
                [FlowSampleDTO.from_sample(s) for s in profile.samples] if profile else []
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting congestion fields when traffic was not evaluated."""
        result: dict[str, Any] = {
            "coordinates": [[lat, lon] for lat, lon in self.coordinates],
            "distance": self.distance,
            "duration": self.duration,
            "source": self.source,
            "recommended": self.recommended,
        }
        if self.average_congestion is not None:
            result["average_congestion"] = self.average_congestion
            result["traffic_level"] = self.traffic_level
            result["route_traffic_points"] = [p.to_dict() for p in self.route_traffic_points]
        if self.recommendation_reason is not None:
            result["recommendation_reason"] = self.recommendation_reason
        return result

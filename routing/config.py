"""Pydantic model for route selection parameters."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class RoutingConfig(BaseModel):
    """Tunable parameters for route synthesis, congestion sampling and selection.

    Defaults reproduce the behaviour of the production service: an alternate
    route is only requested above 60% congestion and only chosen when it is
    more than 20 points better.
    """

    # Selection policy
    congestion_trigger: int = Field(
        default=60,
        ge=0,
        le=100,
        description="Primary congestion (%) above which an alternate route is requested",
    )
    improvement_threshold: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Points by which the alternate must beat the primary to be chosen",
    )

    # Congestion sampling
    sample_stride: int = Field(default=5, ge=1, description="Sample every Nth route point")
    max_workers: int = Field(
        default=4, ge=1, le=64, description="Concurrent flow lookups per scored route"
    )
    lookup_timeout_s: float = Field(
        default=10.0, gt=0.0, description="Seconds to wait for a single flow lookup"
    )

    # Synthetic geometry
    assumed_speed_kph: float = Field(
        default=50.0, gt=0.0, description="Speed used to derive synthetic durations"
    )
    curve_steps: int = Field(
        default=25, ge=1, description="Bezier steps (points = steps + 1, endpoints included)"
    )
    primary_jitter_deg: float = Field(
        default=0.0075, ge=0.0, description="Max random control-point jitter per axis (degrees)"
    )
    alternate_offset_deg: float = Field(
        default=0.025, ge=0.0, description="Sinusoidal control-point offset for alternates"
    )
    alternate_distance_factor: float = Field(
        default=1.15, ge=1.0, description="Distance inflation applied to synthetic alternates"
    )

    @field_validator("lookup_timeout_s", "assumed_speed_kph")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Reject infinite values, which pass the gt=0 constraint."""
        if v == float("inf"):
            raise ValueError("value must be finite")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoutingConfig":
        """Create config from a dictionary, using defaults for missing keys."""
        return cls(**data)

"""Traffic flow samples and the flow-lookup capability."""

import random
from dataclasses import dataclass, replace
from typing import Protocol

from core.geo import Coordinate
from core.utils import clamp


@dataclass(frozen=True)
class FlowSample:
    """Observed traffic flow at a single point.

    Attributes:
        coordinate: Where the sample applies
        current_speed_kph: Measured speed
        free_flow_speed_kph: Speed achievable absent congestion
        congestion: Percent speed reduction vs free flow, 0-100
        confidence: Provider confidence, 0-1 (0 for failed lookups)
        road_name: Road label reported by the provider, if any

    Congestion must agree with the two speeds; build samples with
    from_speeds or failed. Construction raises ValueError otherwise.
    """

    coordinate: Coordinate
    current_speed_kph: float
    free_flow_speed_kph: float
    congestion: int
    confidence: float
    road_name: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.congestion <= 100:
            raise ValueError(f"Congestion must be within 0-100, got {self.congestion}")
        # Failed samples carry zero speeds and zero congestion
        if self.confidence == 0.0:
            return
        derived = congestion_percent(self.current_speed_kph, self.free_flow_speed_kph)
        if self.congestion != derived:
            raise ValueError(
                f"Congestion {self.congestion} does not match speeds "
                f"{self.current_speed_kph}/{self.free_flow_speed_kph} (expected {derived})"
            )

    @classmethod
    def from_speeds(
        cls,
        coordinate: Coordinate,
        current_speed_kph: float,
        free_flow_speed_kph: float,
        confidence: float = 1.0,
        road_name: str | None = None,
    ) -> "FlowSample":
        """Create a sample whose congestion is derived from the two speeds."""
        return cls(
            coordinate=coordinate,
            current_speed_kph=current_speed_kph,
            free_flow_speed_kph=free_flow_speed_kph,
            congestion=congestion_percent(current_speed_kph, free_flow_speed_kph),
            confidence=confidence,
            road_name=road_name,
        )

    @classmethod
    def failed(cls, coordinate: Coordinate) -> "FlowSample":
        """Placeholder for a point whose lookup failed or timed out."""
        return cls(
            coordinate=coordinate,
            current_speed_kph=0.0,
            free_flow_speed_kph=0.0,
            congestion=0,
            confidence=0.0,
            road_name=None,
        )

    def with_coordinate(self, coordinate: Coordinate) -> "FlowSample":
        """Return a copy located at coordinate."""
        return replace(self, coordinate=coordinate)


def congestion_percent(current_speed_kph: float, free_flow_speed_kph: float) -> int:
    """Percent reduction of current speed relative to free-flow speed.

    Always in [0, 100]. A free-flow speed of zero (or less) counts as fully
    congested.
    """
    if free_flow_speed_kph <= 0:
        return 100
    congestion = 100 - int(current_speed_kph / free_flow_speed_kph * 100)
    return int(clamp(congestion, 0, 100))


class FlowLookup(Protocol):
    """Capability that reports traffic flow at a point.

    Implementations may call a live flow API. They may raise on failure;
    callers treat a raised lookup as a failed sample.
    """

    def lookup(self, point: Coordinate) -> FlowSample:
        ...


class DemoFlowLookup:
    """Random flow data for running without a live traffic provider."""

    def __init__(self, rng: random.Random | None = None, road_name: str = "Main Street") -> None:
        self.rng = rng or random.Random()
        self.road_name = road_name

    def lookup(self, point: Coordinate) -> FlowSample:
        current = 25 + self.rng.randrange(60)
        free_flow = 60 + self.rng.randrange(40)
        confidence = 0.7 + self.rng.random() * 0.3
        return FlowSample.from_speeds(
            point, float(current), float(free_flow), confidence, self.road_name
        )

from enum import Enum
from typing import NewType

# IDs
NodeID = NewType("NodeID", int)


class TrafficLevel(str, Enum):
    """Traffic level label derived from an aggregate congestion percentage."""

    HEAVY = "Heavy"
    MODERATE = "Moderate"
    LIGHT = "Light"
    FREE_FLOW = "Free Flow"


class IncidentType(str, Enum):
    """Kinds of traffic incident reported by incident providers."""

    ACCIDENT = "ACCIDENT"
    ROAD_WORK = "ROAD_WORK"
    CONGESTION = "CONGESTION"
    CLOSED_ROAD = "CLOSED_ROAD"
    BROKEN_VEHICLE = "BROKEN_VEHICLE"
    WEATHER = "WEATHER"
    EVENT = "EVENT"


class RouteSource(str, Enum):
    """Where a route geometry came from."""

    SYNTHETIC = "synthetic"
    LIVE = "live"

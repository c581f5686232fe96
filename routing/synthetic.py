"""Synthetic route geometry used when no live routing provider is configured."""

import logging
import math
import random

import numpy as np

from core.geo import Coordinate, haversine_m, quadratic_bezier
from core.types import RouteSource
from routing.config import RoutingConfig
from routing.geometry import RouteGeometry

logger = logging.getLogger(__name__)


class SyntheticRouteGenerator:
    """Builds curved stand-in routes between two coordinates.

    Both routes are quadratic Bezier curves from start to end. The primary
    curve bends through a randomly jittered midpoint; the alternate curve
    swings wider with a fixed sinusoidal offset and is reported as longer.
    """

    def __init__(self, config: RoutingConfig | None = None, rng: random.Random | None = None) -> None:
        """Initialize generator.

        Args:
            config: Routing parameters (defaults used if None)
            rng: Random source for the primary route's jitter. Pass a seeded
                instance for reproducible output.
        """
        self.config = config or RoutingConfig()
        self.rng = rng or random.Random()

    def primary(self, start: Coordinate, end: Coordinate) -> RouteGeometry:
        """Generate the primary route through a jittered midpoint."""
        jitter = self.config.primary_jitter_deg
        control_lat = (start.lat + end.lat) / 2 + self.rng.uniform(-jitter, jitter)
        control_lon = (start.lon + end.lon) / 2 + self.rng.uniform(-jitter, jitter)

        coordinates = quadratic_bezier(
            start, np.float64(control_lat), np.float64(control_lon), end, self._parameters()
        )
        distance_m = haversine_m(start, end)
        return self._build(coordinates, distance_m)

    def alternate(self, start: Coordinate, end: Coordinate) -> RouteGeometry:
        """Generate a visibly divergent, longer alternate route.

        Deterministic for a given (start, end).
        """
        t = self._parameters()
        offset = self.config.alternate_offset_deg
        control_lat = (start.lat + end.lat) / 2 + offset * np.sin(t * math.pi)
        control_lon = (start.lon + end.lon) / 2 + offset * np.cos(t * math.pi)

        coordinates = quadratic_bezier(start, control_lat, control_lon, end, t)
        distance_m = haversine_m(start, end) * self.config.alternate_distance_factor
        return self._build(coordinates, distance_m)

    def _parameters(self) -> np.ndarray:
        return np.linspace(0.0, 1.0, self.config.curve_steps + 1)

    def _build(self, coordinates: list[Coordinate], distance_m: float) -> RouteGeometry:
        # m / (km/h) -> s: divide by speed in m/s
        duration_s = distance_m / (self.config.assumed_speed_kph / 3.6)
        logger.debug(
            f"Synthetic route: {len(coordinates)} points, {distance_m:.0f} m, {duration_s:.0f} s"
        )
        return RouteGeometry(
            coordinates=tuple(coordinates),
            distance_m=distance_m,
            duration_s=duration_s,
            source=RouteSource.SYNTHETIC,
        )

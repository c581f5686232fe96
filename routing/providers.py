"""Routing provider capability and its synthetic implementation."""

from typing import Protocol

from core.geo import Coordinate
from routing.geometry import RouteGeometry
from routing.synthetic import SyntheticRouteGenerator


class RoutingProvider(Protocol):
    """Capability that produces route geometry between two points.

    Implementations may call a live routing API. They may raise, or return
    None, when no geometry can be produced; the selection policy falls back
    to a synthetic route in that case.
    """

    def primary(self, start: Coordinate, end: Coordinate) -> RouteGeometry | None:
        """Return the provider's preferred route."""
        ...

    def alternate(self, start: Coordinate, end: Coordinate) -> RouteGeometry | None:
        """Return a different route, e.g. one avoiding highways."""
        ...


class SyntheticRoutingProvider:
    """RoutingProvider backed by SyntheticRouteGenerator."""

    def __init__(self, generator: SyntheticRouteGenerator | None = None) -> None:
        self.generator = generator or SyntheticRouteGenerator()

    def primary(self, start: Coordinate, end: Coordinate) -> RouteGeometry:
        return self.generator.primary(start, end)

    def alternate(self, start: Coordinate, end: Coordinate) -> RouteGeometry:
        return self.generator.alternate(start, end)

"""Congestion-aware choice between a primary and an alternate route."""

import logging
from dataclasses import dataclass

from core.geo import Coordinate
from core.utils import round_half_up
from routing.config import RoutingConfig
from routing.geometry import RouteGeometry
from routing.providers import RoutingProvider
from routing.synthetic import SyntheticRouteGenerator
from traffic.flow import FlowLookup
from traffic.sampler import CongestionProfile, CongestionSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteDecision:
    """The route recommended for a request.

    Attributes:
        route: Chosen geometry
        profile: Congestion profile of the chosen route, or None when traffic
            was not evaluated
        is_alternate: True if the alternate replaced the primary
        reason: Human-readable recommendation, only set for alternates
    """

    route: RouteGeometry
    profile: CongestionProfile | None
    is_alternate: bool = False
    reason: str | None = None


def minutes_saved(primary_congestion: int, alternate_congestion: int) -> int:
    """Estimated minutes saved: 5 minutes per 10 points of congestion avoided."""
    return round_half_up((primary_congestion - alternate_congestion) / 10.0 * 5)


class RouteSelectionPolicy:
    """Picks the primary route unless it is congested and a clearly better alternate exists.

    One pass per request with no retries. Provider failures never reach the
    caller: a routing failure is replaced by a synthetic route and a flow
    failure by a zero-congestion sample.
    """

    def __init__(
        self,
        flow_lookup: FlowLookup,
        config: RoutingConfig | None = None,
        sampler: CongestionSampler | None = None,
        fallback: SyntheticRouteGenerator | None = None,
    ) -> None:
        """Initialize policy.

        Args:
            flow_lookup: Flow data collaborator used to score routes
            config: Thresholds and sampling parameters (defaults if None)
            sampler: Congestion sampler (built from config if None)
            fallback: Synthetic generator used when the routing provider fails
        """
        self.flow_lookup = flow_lookup
        self.config = config or RoutingConfig()
        self.sampler = sampler or CongestionSampler(self.config)
        self.fallback = fallback or SyntheticRouteGenerator(self.config)

    def select_route(
        self,
        start: Coordinate,
        end: Coordinate,
        avoid_traffic: bool,
        routing_provider: RoutingProvider,
    ) -> RouteDecision:
        """Compute the recommended route from start to end.

        Args:
            start: Origin
            end: Destination
            avoid_traffic: If False, return the primary route without scoring
            routing_provider: Source of primary and alternate geometry

        Returns:
            RouteDecision; always carries a route
        """
        primary = self._primary_route(start, end, routing_provider)

        if not avoid_traffic or primary.is_empty:
            return RouteDecision(route=primary, profile=None)

        primary_profile = self.sampler.score(primary, self.flow_lookup)
        primary_congestion = primary_profile.average_congestion

        if primary_congestion <= self.config.congestion_trigger:
            return RouteDecision(route=primary, profile=primary_profile)

        logger.info(
            f"Primary route congestion {primary_congestion}% exceeds "
            f"{self.config.congestion_trigger}%, evaluating alternate"
        )
        alternate = self._alternate_route(start, end, routing_provider)
        if alternate.is_empty:
            return RouteDecision(route=primary, profile=primary_profile)

        alternate_profile = self.sampler.score(alternate, self.flow_lookup)
        alternate_congestion = alternate_profile.average_congestion

        if alternate_congestion < primary_congestion - self.config.improvement_threshold:
            saved = minutes_saved(primary_congestion, alternate_congestion)
            logger.info(
                f"Alternate route chosen: {alternate_congestion}% vs {primary_congestion}%, "
                f"~{saved} min saved"
            )
            return RouteDecision(
                route=alternate,
                profile=alternate_profile,
                is_alternate=True,
                reason=f"Lower traffic congestion - saves approximately {saved} minutes",
            )

        logger.info(
            f"Keeping primary route: alternate {alternate_congestion}% is not "
            f"{self.config.improvement_threshold} points better than {primary_congestion}%"
        )
        return RouteDecision(route=primary, profile=primary_profile)

    def _primary_route(
        self, start: Coordinate, end: Coordinate, routing_provider: RoutingProvider
    ) -> RouteGeometry:
        try:
            route = routing_provider.primary(start, end)
        except Exception as e:
            logger.warning(f"Routing provider failed for primary route, using synthetic: {e}")
            return self.fallback.primary(start, end)
        if route is None:
            logger.warning("Routing provider returned no primary route, using synthetic")
            return self.fallback.primary(start, end)
        return route

    def _alternate_route(
        self, start: Coordinate, end: Coordinate, routing_provider: RoutingProvider
    ) -> RouteGeometry:
        try:
            route = routing_provider.alternate(start, end)
        except Exception as e:
            logger.warning(f"Routing provider failed for alternate route, using synthetic: {e}")
            return self.fallback.alternate(start, end)
        if route is None:
            logger.warning("Routing provider returned no alternate route, using synthetic")
            return self.fallback.alternate(start, end)
        return route

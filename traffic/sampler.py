"""Congestion scoring of a route by sampling flow along its geometry."""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass

from core.geo import Coordinate
from core.types import TrafficLevel
from core.utils import round_half_up
from routing.config import RoutingConfig
from routing.geometry import RouteGeometry
from traffic.flow import FlowLookup, FlowSample

logger = logging.getLogger(__name__)

HEAVY_THRESHOLD = 70
MODERATE_THRESHOLD = 40
LIGHT_THRESHOLD = 20


def traffic_level(congestion: int) -> TrafficLevel:
    """Map an aggregate congestion percentage to a traffic level."""
    if congestion >= HEAVY_THRESHOLD:
        return TrafficLevel.HEAVY
    if congestion >= MODERATE_THRESHOLD:
        return TrafficLevel.MODERATE
    if congestion >= LIGHT_THRESHOLD:
        return TrafficLevel.LIGHT
    return TrafficLevel.FREE_FLOW


@dataclass(frozen=True)
class CongestionProfile:
    """Flow samples taken along a route plus their aggregate."""

    samples: tuple[FlowSample, ...]
    average_congestion: int
    traffic_level: TrafficLevel

    @classmethod
    def from_samples(cls, samples: list[FlowSample]) -> "CongestionProfile":
        if samples:
            average = round_half_up(sum(s.congestion for s in samples) / len(samples))
        else:
            average = 0
        return cls(
            samples=tuple(samples),
            average_congestion=average,
            traffic_level=traffic_level(average),
        )

    @property
    def failed_samples(self) -> int:
        """Number of samples with zero confidence (failed lookups)."""
        return sum(1 for s in self.samples if s.confidence == 0.0)


class CongestionSampler:
    """Scores a route by looking up flow at every Nth point.

    Lookups for one route always run on a bounded thread pool, a pool of one
    included, so every lookup is subject to the timeout. A lookup that raises
    or exceeds it is recorded as a zero-congestion, zero-confidence sample and
    still counts towards the average.
    """

    def __init__(self, config: RoutingConfig | None = None) -> None:
        self.config = config or RoutingConfig()

    def sample_points(self, route: RouteGeometry) -> list[Coordinate]:
        """Route coordinates that will be looked up, in route order."""
        return list(route.coordinates[:: self.config.sample_stride])

    def score(self, route: RouteGeometry, lookup: FlowLookup) -> CongestionProfile:
        """Build the congestion profile of route.

        Args:
            route: Geometry to score
            lookup: Flow lookup collaborator

        Returns:
            CongestionProfile with samples in route order
        """
        points = self.sample_points(route)
        if not points:
            return CongestionProfile.from_samples([])

        samples = self._lookup_points(lookup, points)
        profile = CongestionProfile.from_samples(samples)
        logger.debug(
            f"Scored route: {len(samples)} samples, {profile.failed_samples} failed, "
            f"average congestion {profile.average_congestion}% ({profile.traffic_level.value})"
        )
        return profile

    def _lookup_points(
        self, lookup: FlowLookup, points: list[Coordinate]
    ) -> list[FlowSample]:
        workers = min(self.config.max_workers, len(points))
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="flow-lookup")
        try:
            futures = [executor.submit(lookup.lookup, point) for point in points]
            samples: list[FlowSample] = []
            for point, future in zip(points, futures):
                try:
                    sample = future.result(timeout=self.config.lookup_timeout_s)
                    samples.append(sample.with_coordinate(point))
                except FutureTimeoutError:
                    logger.warning(
                        f"Flow lookup timed out after {self.config.lookup_timeout_s}s "
                        f"at ({point.lat:.5f}, {point.lon:.5f})"
                    )
                    samples.append(FlowSample.failed(point))
                except Exception as e:
                    logger.warning(
                        f"Flow lookup failed at ({point.lat:.5f}, {point.lon:.5f}): {e}"
                    )
                    samples.append(FlowSample.failed(point))
            return samples
        finally:
            # Don't wait on lookups that already timed out
            executor.shutdown(wait=False, cancel_futures=True)

"""Tests for congestion sampling along a route."""

import threading
from unittest.mock import Mock

import pytest

from core.geo import Coordinate
from core.types import TrafficLevel
from routing.config import RoutingConfig
from routing.geometry import RouteGeometry
from traffic.flow import FlowSample
from traffic.sampler import CongestionProfile, CongestionSampler, traffic_level


def create_route(point_count: int, lat: float = 0.0) -> RouteGeometry:
    coordinates = tuple(Coordinate(lat, i * 0.001) for i in range(point_count))
    return RouteGeometry(coordinates=coordinates, distance_m=1000.0, duration_s=72.0)


def fixed_sample(congestion: int, coordinate: Coordinate | None = None) -> FlowSample:
    # 100.5 - c km/h against 100 km/h free flow truncates to exactly c percent
    return FlowSample.from_speeds(
        coordinate or Coordinate(99.0, 99.0),
        current_speed_kph=100.5 - congestion,
        free_flow_speed_kph=100.0,
    )


class IndexedLookup:
    """Returns the congestion configured for each point's longitude index."""

    def __init__(self, congestion_by_index: dict[int, int]) -> None:
        self.congestion_by_index = congestion_by_index

    def lookup(self, point: Coordinate) -> FlowSample:
        index = round(point.lon / 0.001)
        value = self.congestion_by_index[index]
        if value < 0:
            raise ConnectionError("upstream unavailable")
        return fixed_sample(value)


class TestTrafficLevel:
    @pytest.mark.parametrize(
        ("congestion", "expected"),
        [
            (0, TrafficLevel.FREE_FLOW),
            (19, TrafficLevel.FREE_FLOW),
            (20, TrafficLevel.LIGHT),
            (39, TrafficLevel.LIGHT),
            (40, TrafficLevel.MODERATE),
            (69, TrafficLevel.MODERATE),
            (70, TrafficLevel.HEAVY),
            (100, TrafficLevel.HEAVY),
        ],
    )
    def test_thresholds(self, congestion: int, expected: TrafficLevel) -> None:
        assert traffic_level(congestion) == expected

    def test_labels(self) -> None:
        assert TrafficLevel.FREE_FLOW.value == "Free Flow"
        assert TrafficLevel.HEAVY.value == "Heavy"


class TestCongestionProfile:
    def test_empty(self) -> None:
        profile = CongestionProfile.from_samples([])
        assert profile.average_congestion == 0
        assert profile.traffic_level == TrafficLevel.FREE_FLOW
        assert profile.samples == ()

    def test_mean_rounds_half_up(self) -> None:
        profile = CongestionProfile.from_samples([fixed_sample(62), fixed_sample(63)])
        assert profile.average_congestion == 63
        assert profile.traffic_level == TrafficLevel.MODERATE

    def test_mean_rounds_down_below_half(self) -> None:
        samples = [fixed_sample(10), fixed_sample(10), fixed_sample(11)]
        assert CongestionProfile.from_samples(samples).average_congestion == 10


class TestCongestionSampler:
    def test_samples_every_fifth_point(self) -> None:
        route = create_route(26)
        sampler = CongestionSampler()

        points = sampler.sample_points(route)

        assert points == [route.coordinates[i] for i in (0, 5, 10, 15, 20, 25)]

    def test_short_route_samples_first_point(self) -> None:
        route = create_route(3)
        assert CongestionSampler().sample_points(route) == [route.coordinates[0]]

    def test_empty_route(self) -> None:
        lookup = Mock()
        route = RouteGeometry(coordinates=(), distance_m=0.0, duration_s=0.0)

        profile = CongestionSampler().score(route, lookup)

        assert profile.samples == ()
        assert profile.average_congestion == 0
        lookup.lookup.assert_not_called()

    def test_overwrites_sample_coordinates(self) -> None:
        route = create_route(11)
        lookup = Mock()
        lookup.lookup.return_value = fixed_sample(40)

        profile = CongestionSampler().score(route, lookup)

        assert [s.coordinate for s in profile.samples] == [
            route.coordinates[0],
            route.coordinates[5],
            route.coordinates[10],
        ]
        assert lookup.lookup.call_count == 3

    @pytest.mark.parametrize("max_workers", [1, 4])
    def test_average_and_order(self, max_workers: int) -> None:
        route = create_route(16)
        lookup = IndexedLookup({0: 90, 5: 80, 10: 50, 15: 20})
        sampler = CongestionSampler(RoutingConfig(max_workers=max_workers))

        profile = sampler.score(route, lookup)

        assert [s.congestion for s in profile.samples] == [90, 80, 50, 20]
        assert profile.average_congestion == 60
        assert profile.traffic_level == TrafficLevel.MODERATE

    @pytest.mark.parametrize("max_workers", [1, 4])
    def test_failed_lookup_counts_as_zero(self, max_workers: int) -> None:
        route = create_route(11)
        lookup = IndexedLookup({0: 90, 5: -1, 10: 60})
        sampler = CongestionSampler(RoutingConfig(max_workers=max_workers))

        profile = sampler.score(route, lookup)

        failed = profile.samples[1]
        assert failed.congestion == 0
        assert failed.confidence == 0.0
        assert failed.coordinate == route.coordinates[5]
        assert profile.failed_samples == 1
        assert profile.average_congestion == 50

    def test_timed_out_lookup_is_failed_sample(self) -> None:
        route = create_route(11)
        release = threading.Event()

        class SlowFirstPoint:
            def lookup(self, point: Coordinate) -> FlowSample:
                if point == route.coordinates[0]:
                    release.wait(timeout=5.0)
                return fixed_sample(80)

        sampler = CongestionSampler(RoutingConfig(max_workers=3, lookup_timeout_s=0.05))
        try:
            profile = sampler.score(route, SlowFirstPoint())
        finally:
            release.set()

        assert [s.confidence for s in profile.samples] == [0.0, 1.0, 1.0]
        assert [s.congestion for s in profile.samples] == [0, 80, 80]
        assert profile.average_congestion == 53

    @pytest.mark.parametrize(
        ("point_count", "max_workers", "expected_samples"),
        [(3, 4, 1), (11, 1, 3)],
    )
    def test_timeout_applies_to_single_worker_and_single_point(
        self, point_count: int, max_workers: int, expected_samples: int
    ) -> None:
        """Every lookup is bounded by the timeout, even without parallelism."""
        route = create_route(point_count)
        release = threading.Event()

        class HangingLookup:
            def lookup(self, point: Coordinate) -> FlowSample:
                release.wait(timeout=5.0)
                return fixed_sample(80)

        sampler = CongestionSampler(
            RoutingConfig(max_workers=max_workers, lookup_timeout_s=0.05)
        )
        try:
            profile = sampler.score(route, HangingLookup())
        finally:
            release.set()

        assert len(profile.samples) == expected_samples
        assert all(s.confidence == 0.0 for s in profile.samples)
        assert profile.failed_samples == expected_samples
        assert profile.average_congestion == 0

    def test_out_of_range_congestion_is_failed_sample(self) -> None:
        route = create_route(11)

        class BrokenLookup:
            def lookup(self, point: Coordinate) -> FlowSample:
                if point == route.coordinates[5]:
                    return FlowSample(
                        coordinate=point,
                        current_speed_kph=50.0,
                        free_flow_speed_kph=50.0,
                        congestion=150,
                        confidence=1.0,
                    )
                return fixed_sample(60)

        profile = CongestionSampler().score(route, BrokenLookup())

        assert [s.congestion for s in profile.samples] == [60, 0, 60]
        assert profile.failed_samples == 1
        assert profile.average_congestion == 40

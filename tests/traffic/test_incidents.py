"""Tests for bounding boxes and demo incident generation."""

import random
from datetime import datetime, timedelta

import pytest

from core.geo import Coordinate
from core.types import IncidentType
from traffic.incidents import INCIDENT_DESCRIPTIONS, BoundingBox, DemoIncidentGenerator

NOW = datetime(2025, 3, 14, 8, 30)
LONDON = BoundingBox(min_lon=-0.5103, min_lat=51.2867, max_lon=0.3340, max_lat=51.6919)


class TestBoundingBox:
    def test_parse(self) -> None:
        bbox = BoundingBox.parse("-0.5103,51.2867,0.3340,51.6919")
        assert bbox == LONDON

    @pytest.mark.parametrize("text", ["1,2,3", "a,b,c,d", "", "1,2,3,4,5"])
    def test_parse_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            BoundingBox.parse(text)

    def test_rejects_inverted_box(self) -> None:
        with pytest.raises(ValueError, match="minimum exceeds maximum"):
            BoundingBox.parse("10,10,0,0")

    def test_contains(self) -> None:
        assert LONDON.contains(Coordinate(51.5074, -0.1278))
        assert not LONDON.contains(Coordinate(48.8566, 2.3522))

    def test_to_string_round_trip(self) -> None:
        assert BoundingBox.parse(LONDON.to_string()) == LONDON


class TestDemoIncidentGenerator:
    def create_generator(self, seed: int) -> DemoIncidentGenerator:
        return DemoIncidentGenerator(rng=random.Random(seed), clock=lambda: NOW)

    @pytest.mark.parametrize("seed", range(10))
    def test_count_and_placement(self, seed: int) -> None:
        incidents = self.create_generator(seed).generate(LONDON)

        assert 3 <= len(incidents) <= 7
        for incident in incidents:
            assert LONDON.contains(incident.coordinate)

    @pytest.mark.parametrize("seed", range(10))
    def test_field_ranges(self, seed: int) -> None:
        for incident in self.create_generator(seed).generate(LONDON):
            assert incident.description == INCIDENT_DESCRIPTIONS[incident.type]
            assert 1 <= incident.delay_min <= 20
            assert 100 <= incident.length_m <= 1599
            assert 1 <= incident.severity <= 4
            assert incident.road_name is not None
            assert incident.road_name.startswith("Highway ")
            assert 1 <= int(incident.road_name.split()[1]) <= 50

    def test_timestamps_bracket_now(self) -> None:
        for incident in self.create_generator(4).generate(LONDON):
            assert incident.start_time is not None
            assert incident.end_time is not None
            assert NOW - timedelta(minutes=119) <= incident.start_time <= NOW
            assert NOW <= incident.end_time <= NOW + timedelta(minutes=179)

    def test_reproducible_with_seed(self) -> None:
        assert self.create_generator(9).generate(LONDON) == self.create_generator(9).generate(
            LONDON
        )

    def test_every_type_has_description(self) -> None:
        assert set(INCIDENT_DESCRIPTIONS) == set(IncidentType)

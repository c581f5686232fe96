"""Tests for numeric helpers."""

import pytest

from core.utils import clamp, round_half_up


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, 0),
        (0.4, 0),
        (0.5, 1),
        (2.5, 3),
        (62.5, 63),
        (15.0, 15),
        (-0.5, -1),
        (-1.4, -1),
    ],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


def test_clamp() -> None:
    assert clamp(-5, 0, 100) == 0
    assert clamp(150, 0, 100) == 100
    assert clamp(42, 0, 100) == 42

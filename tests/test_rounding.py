"""
Tests for display rounding.
"""

import math
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from fiscal_projection.rounding import round_bps, round_display


@pytest.mark.parametrize("value,decimals,expected", [
    (115.789, 1, 115.8),
    (1.25, 1, 1.3),
    (-0.25, 1, -0.2),
    (5.13158, 2, 5.13),
    (0.05, 1, 0.1),
    (-3.0, 1, -3.0),
])
def test_round_half_up(value, decimals, expected):
    assert round_display(value, decimals) == expected


def test_round_bps():
    assert round_bps(193.158) == 193
    assert round_bps(2.5) == 3
    assert round_bps(-0.5) == 0
    assert isinstance(round_bps(12.2), int)


def test_non_finite_passthrough():
    assert round_display(float("inf")) == float("inf")
    assert math.isnan(round_display(float("nan")))
    assert round_bps(float("-inf")) == float("-inf")


def test_repeatable():
    values = [round_display(x / 7, 2) for x in range(100)]
    assert values == [round_display(x / 7, 2) for x in range(100)]

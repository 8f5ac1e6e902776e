"""Tests for fingerprint LED brightness stepping."""

import pytest

from fwtui.core.fingerprint import (
    HIGH_PERCENTAGE,
    LOW_PERCENTAGE,
    MEDIUM_PERCENTAGE,
    FingerprintBrightnessPolicy,
    adjust_level_by_delta,
    level_to_percentage,
    percentage_to_level,
    percentage_to_level_name,
)
from fwtui.models import FpLedBrightnessCapability, FpLedBrightnessLevel


@pytest.fixture
def level_policy():
    return FingerprintBrightnessPolicy(FpLedBrightnessCapability.LEVEL)


@pytest.fixture
def percentage_policy():
    return FingerprintBrightnessPolicy(FpLedBrightnessCapability.PERCENTAGE)


class TestLevelMapping:
    """Test percentage/level conversions."""

    @pytest.mark.parametrize(
        "percentage, level",
        [
            (0, FpLedBrightnessLevel.LOW),
            (15, FpLedBrightnessLevel.LOW),
            (16, FpLedBrightnessLevel.MEDIUM),
            (40, FpLedBrightnessLevel.MEDIUM),
            (41, FpLedBrightnessLevel.HIGH),
            (100, FpLedBrightnessLevel.HIGH),
        ],
    )
    def test_percentage_to_level(self, percentage, level):
        assert percentage_to_level(percentage) == level

    def test_level_to_percentage(self):
        assert level_to_percentage(FpLedBrightnessLevel.LOW) == 15
        assert level_to_percentage(FpLedBrightnessLevel.MEDIUM) == 40
        assert level_to_percentage(FpLedBrightnessLevel.HIGH) == 55

    def test_level_names(self):
        assert percentage_to_level_name(10) == "Low"
        assert percentage_to_level_name(30) == "Medium"
        assert percentage_to_level_name(90) == "High"

    def test_level_cycle_up(self):
        assert adjust_level_by_delta(FpLedBrightnessLevel.LOW, 5) == FpLedBrightnessLevel.MEDIUM
        assert adjust_level_by_delta(FpLedBrightnessLevel.MEDIUM, 5) == FpLedBrightnessLevel.HIGH
        assert adjust_level_by_delta(FpLedBrightnessLevel.HIGH, 5) == FpLedBrightnessLevel.LOW

    def test_level_cycle_down(self):
        assert adjust_level_by_delta(FpLedBrightnessLevel.LOW, -5) == FpLedBrightnessLevel.HIGH
        assert adjust_level_by_delta(FpLedBrightnessLevel.MEDIUM, -5) == FpLedBrightnessLevel.LOW
        assert adjust_level_by_delta(FpLedBrightnessLevel.HIGH, -5) == FpLedBrightnessLevel.MEDIUM

    def test_zero_delta_steps_down(self):
        assert adjust_level_by_delta(FpLedBrightnessLevel.MEDIUM, 0) == FpLedBrightnessLevel.LOW


class TestLevelPolicy:
    """Test the three-level policy."""

    def test_steps_snap_to_canonical_percentages(self, level_policy):
        assert level_policy.adjust_by_delta(LOW_PERCENTAGE, 5) == MEDIUM_PERCENTAGE
        assert level_policy.adjust_by_delta(MEDIUM_PERCENTAGE, 5) == HIGH_PERCENTAGE
        assert level_policy.adjust_by_delta(HIGH_PERCENTAGE, 5) == LOW_PERCENTAGE

    def test_off_level_value_snaps(self, level_policy):
        assert level_policy.adjust_by_delta(30, 5) == HIGH_PERCENTAGE
        assert level_policy.adjust_by_delta(90, -5) == MEDIUM_PERCENTAGE

    @pytest.mark.parametrize("start", [LOW_PERCENTAGE, MEDIUM_PERCENTAGE, HIGH_PERCENTAGE])
    def test_three_steps_return_to_start(self, level_policy, start):
        value = start
        for _ in range(3):
            value = level_policy.adjust_by_delta(value, 5)
        assert value == start

    @pytest.mark.parametrize("start", [LOW_PERCENTAGE, MEDIUM_PERCENTAGE, HIGH_PERCENTAGE])
    def test_up_then_down_is_identity(self, level_policy, start):
        assert level_policy.adjust_by_delta(level_policy.adjust_by_delta(start, 5), -5) == start

    def test_display_value(self, level_policy):
        assert level_policy.display_value(40) == "Medium"


class TestPercentagePolicy:
    """Test the arbitrary percentage policy."""

    def test_plain_steps(self, percentage_policy):
        assert percentage_policy.adjust_by_delta(40, 5) == 45
        assert percentage_policy.adjust_by_delta(40, -5) == 35

    def test_floor_of_five(self, percentage_policy):
        assert percentage_policy.adjust_by_delta(10, -5) == 5
        assert percentage_policy.adjust_by_delta(11, -5) == 6
        assert percentage_policy.adjust_by_delta(9, -5) == 9
        assert percentage_policy.adjust_by_delta(5, -5) == 5

    def test_ceiling(self, percentage_policy):
        assert percentage_policy.adjust_by_delta(100, 5) == 100
        assert percentage_policy.adjust_by_delta(96, 5) == 96
        assert percentage_policy.adjust_by_delta(95, 5) == 100

    def test_display_value(self, percentage_policy):
        assert percentage_policy.display_value(40) == "40%"

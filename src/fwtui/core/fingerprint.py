"""Fingerprint LED brightness stepping.

Depending on firmware, the fingerprint LED either takes an arbitrary
percentage or one of three levels. The UI always works in percentages;
in level mode every step moves to the neighbouring level (cycling
LOW -> MEDIUM -> HIGH -> LOW) and snaps to that level's canonical
percentage.
"""

import logging

from fwtui.models.enums import FpLedBrightnessCapability, FpLedBrightnessLevel

logger = logging.getLogger(__name__)

LOW_PERCENTAGE = 15
MEDIUM_PERCENTAGE = 40
HIGH_PERCENTAGE = 55

# Lowest percentage reachable by stepping down; 0 would turn the LED off
MIN_PERCENTAGE = 5
MAX_PERCENTAGE = 100

_LEVEL_PERCENTAGES = {
    FpLedBrightnessLevel.LOW: LOW_PERCENTAGE,
    FpLedBrightnessLevel.MEDIUM: MEDIUM_PERCENTAGE,
    FpLedBrightnessLevel.HIGH: HIGH_PERCENTAGE,
}

_LEVEL_NAMES = {
    FpLedBrightnessLevel.LOW: "Low",
    FpLedBrightnessLevel.MEDIUM: "Medium",
    FpLedBrightnessLevel.HIGH: "High",
}


def percentage_to_level(percentage: int) -> FpLedBrightnessLevel:
    if percentage <= LOW_PERCENTAGE:
        return FpLedBrightnessLevel.LOW
    if percentage <= MEDIUM_PERCENTAGE:
        return FpLedBrightnessLevel.MEDIUM
    return FpLedBrightnessLevel.HIGH


def level_to_percentage(level: FpLedBrightnessLevel) -> int:
    return _LEVEL_PERCENTAGES[level]


def percentage_to_level_name(percentage: int) -> str:
    """Display name of the level a percentage falls into."""
    return _LEVEL_NAMES[percentage_to_level(percentage)]


def adjust_level_by_delta(level: FpLedBrightnessLevel, delta: int) -> FpLedBrightnessLevel:
    """Move one level up (delta > 0) or down (delta <= 0), wrapping around."""
    order = list(FpLedBrightnessLevel)
    step = 1 if delta > 0 else -1
    return order[(order.index(level) + step) % len(order)]


class FingerprintBrightnessPolicy:
    """
    Maps Left/Right steps on the fingerprint control to new percentages.

    The capability is probed once at startup and never changes while
    the dashboard runs.

    Example:
        >>> policy = FingerprintBrightnessPolicy(FpLedBrightnessCapability.LEVEL)
        >>> policy.adjust_by_delta(15, 5)
        40
        >>> policy.adjust_by_delta(15, -5)
        55
    """

    def __init__(self, capability: FpLedBrightnessCapability):
        self.capability = capability

    def __repr__(self) -> str:
        return f"FingerprintBrightnessPolicy({self.capability.value})"

    @property
    def is_level_based(self) -> bool:
        return self.capability == FpLedBrightnessCapability.LEVEL

    def adjust_by_delta(self, current: int, delta: int) -> int:
        """
        Compute the next brightness percentage.

        Args:
            current: Current brightness percentage
            delta: Signed step (its magnitude only matters in percentage mode)

        Returns:
            The new percentage. In percentage mode a result outside
            MIN_PERCENTAGE to MAX_PERCENTAGE leaves the value unchanged.
        """
        if self.is_level_based:
            level = adjust_level_by_delta(percentage_to_level(current), delta)
            return level_to_percentage(level)

        new_value = current + delta
        if MIN_PERCENTAGE <= new_value <= MAX_PERCENTAGE:
            return new_value
        return current

    def display_value(self, percentage: int) -> str:
        """Text shown next to the fingerprint brightness bar."""
        if self.is_level_based:
            return percentage_to_level_name(percentage)
        return f"{percentage}%"

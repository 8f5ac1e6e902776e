"""Outbound commands produced by key handling.

A command is a request to change something outside the panels (device
settings, configuration, application lifetime). The controller executes
them; panels only create them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Quit:
    """Stop the dashboard."""


@dataclass(frozen=True)
class SetMaxChargeLimit:
    """Set the battery max charge limit (percent)."""

    value: int


@dataclass(frozen=True)
class SetFingerprintBrightness:
    """Set the fingerprint LED brightness (percent)."""

    value: int


@dataclass(frozen=True)
class SetKeyboardBrightness:
    """Set the keyboard backlight brightness (percent)."""

    value: int


@dataclass(frozen=True)
class CycleTheme:
    """Switch to the next colour theme and persist it."""


@dataclass(frozen=True)
class AdjustTickInterval:
    """Change the refresh interval by delta_ms and persist it."""

    delta_ms: int


Command = (
    Quit
    | SetMaxChargeLimit
    | SetFingerprintBrightness
    | SetKeyboardBrightness
    | CycleTheme
    | AdjustTickInterval
)

"""Enumerations for the Framework dashboard."""

from enum import Enum


class ThemeVariant(str, Enum):
    """Available colour themes, in cycling order."""

    FRAMEWORK = "framework"
    ALUCARD = "alucard"
    CATPPUCCIN_FRAPPE = "catppuccin-frappe"
    CATPPUCCIN_LATTE = "catppuccin-latte"
    CATPPUCCIN_MACCHIATO = "catppuccin-macchiato"
    CATPPUCCIN_MOCHA = "catppuccin-mocha"
    DRACULA = "dracula"
    GITHUB_DARK = "github-dark"
    GITHUB_LIGHT = "github-light"
    MONOKAI_PRO_LIGHT = "monokai-pro-light"

    def next(self) -> "ThemeVariant":
        """Return the following theme, wrapping to the first."""
        variants = list(ThemeVariant)
        return variants[(variants.index(self) + 1) % len(variants)]

    def previous(self) -> "ThemeVariant":
        """Return the preceding theme, wrapping to the last."""
        variants = list(ThemeVariant)
        return variants[(variants.index(self) - 1) % len(variants)]


class FpLedBrightnessCapability(str, Enum):
    """How the fingerprint LED accepts brightness settings.

    Older firmware only understands three discrete levels; newer firmware
    accepts an arbitrary percentage.
    """

    LEVEL = "level"
    PERCENTAGE = "percentage"


class FpLedBrightnessLevel(str, Enum):
    """Discrete fingerprint LED brightness levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PdPortRole(str, Enum):
    """USB-PD role of a Type-C port."""

    DISCONNECTED = "Disconnected"
    SOURCE = "Source"
    SINK = "Sink"
    SINK_NOT_CHARGING = "Sink (Not Charging)"

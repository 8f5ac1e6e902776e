"""Data models for the dashboard."""

from .config import AppConfig
from .enums import FpLedBrightnessCapability, FpLedBrightnessLevel, PdPortRole, ThemeVariant
from .snapshot import PdPortInfo, PdPortsInfo, Snapshot, TemperatureReading
from .theme import Theme

__all__ = [
    "AppConfig",
    "FpLedBrightnessCapability",
    "FpLedBrightnessLevel",
    "PdPortInfo",
    "PdPortRole",
    "PdPortsInfo",
    "Snapshot",
    "TemperatureReading",
    "Theme",
    "ThemeVariant",
]

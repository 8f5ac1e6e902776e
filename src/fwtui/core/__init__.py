"""Interaction core: event loop, adjustable panels and the dashboard controller."""

from .commands import (
    AdjustTickInterval,
    Command,
    CycleTheme,
    Quit,
    SetFingerprintBrightness,
    SetKeyboardBrightness,
    SetMaxChargeLimit,
)
from .components import AdjustableComponent, BrightnessPanel, ChargePanel, ChargePanels, ThermalHistory
from .control import AdjustableControl, PercentageControl, RangeControl, percentage_control, range_control
from .controller import DashboardController
from .event_loop import Event, EventLoop, InputEvent, KeyInputQueue, TickEvent, TickIntervalCell
from .fingerprint import FingerprintBrightnessPolicy
from .keys import Key
from .panel import AdjustablePanel
from .refresh import SnapshotRefreshSource
from .registry import PanelRegistry

__all__ = [
    "AdjustTickInterval",
    "AdjustableComponent",
    "AdjustableControl",
    "AdjustablePanel",
    "BrightnessPanel",
    "ChargePanel",
    "ChargePanels",
    "Command",
    "CycleTheme",
    "DashboardController",
    "Event",
    "EventLoop",
    "FingerprintBrightnessPolicy",
    "InputEvent",
    "Key",
    "KeyInputQueue",
    "PanelRegistry",
    "PercentageControl",
    "Quit",
    "RangeControl",
    "SetFingerprintBrightness",
    "SetKeyboardBrightness",
    "SetMaxChargeLimit",
    "SnapshotRefreshSource",
    "TickEvent",
    "ThermalHistory",
    "TickIntervalCell",
    "percentage_control",
    "range_control",
]

"""Concrete adjustable panels.

Each component wraps an AdjustablePanel, translates key presses into
panel operations and emits a command when an edit is committed. Values
shown by unfocused controls are refreshed from every new snapshot.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque

from fwtui.models.snapshot import Snapshot

from .commands import Command, SetFingerprintBrightness, SetKeyboardBrightness, SetMaxChargeLimit
from .control import AdjustableControl, percentage_control
from .fingerprint import FingerprintBrightnessPolicy
from .keys import Key
from .panel import AdjustablePanel

logger = logging.getLogger(__name__)

# Percentage points added or removed by Left/Right
ADJUST_STEP = 5

# Number of samples kept for the charger and fan graphs
HISTORY_SIZE = 200

# Top of the fan graph (RPM); faster readings are clamped
FAN_RPM_MAX = 6000


class AdjustableComponent(ABC):
    """A dashboard panel that accepts keyboard edits."""

    title: str = ""

    def __init__(self, panel: AdjustablePanel) -> None:
        self._panel = panel

    @property
    def panel(self) -> AdjustablePanel:
        return self._panel

    def handle_input(self, key: Key) -> Command | None:
        """
        React to a key press.

        Keys are ignored unless this panel is selected.

        Args:
            key: The key that was pressed

        Returns:
            A command when Enter commits an edit, otherwise None
        """
        panel = self.panel
        if not panel.is_selected():
            return None

        match key:
            case Key.UP:
                # The cursor stays on an armed control until it is committed or cancelled
                if not panel.is_armed():
                    panel.cycle_controls_up()
            case Key.DOWN:
                if not panel.is_armed():
                    panel.cycle_controls_down()
            case Key.ENTER:
                command = None
                if panel.is_armed():
                    command = self.commit(panel.selected_control, panel.get_selected_control())
                panel.toggle_selected_control_focus()
                return command
            case Key.ESCAPE:
                if panel.is_armed():
                    panel.toggle_selected_control_focus()
                    logger.debug(f"{self.title}: edit cancelled")
            case Key.LEFT:
                if panel.is_armed():
                    self.adjust(panel.selected_control, -ADJUST_STEP)
            case Key.RIGHT:
                if panel.is_armed():
                    self.adjust(panel.selected_control, ADJUST_STEP)
        return None

    def adjust(self, index: int, delta: int) -> None:
        self.panel.adjust_focused_percentage_control_by_delta(delta)

    def sync_control(self, index: int, value: int | None) -> None:
        """Show a live value on a control that is not being edited."""
        if value is None or not 0 <= value <= 100:
            return
        if self.panel.controls[index].is_focused:
            return
        self.panel.set_percentage_control_by_index(index, percentage_control(value))

    @abstractmethod
    def commit(self, index: int, control: AdjustableControl) -> Command | None:
        """Build the command for a committed edit of control `index`."""

    @abstractmethod
    def sync(self, snapshot: Snapshot) -> None:
        """Refresh unfocused controls from a new snapshot."""


class ChargePanel(AdjustableComponent):
    """Battery panel with an editable max charge limit."""

    title = "Charge"
    MAX_CHARGE_LIMIT = 0

    def __init__(self, max_charge_limit: int = 100) -> None:
        super().__init__(AdjustablePanel([percentage_control(max_charge_limit)]))

    def commit(self, index: int, control: AdjustableControl) -> Command | None:
        value = control.percentage_value
        if value is None:
            return None
        return SetMaxChargeLimit(value)

    def sync(self, snapshot: Snapshot) -> None:
        self.sync_control(self.MAX_CHARGE_LIMIT, snapshot.max_charge_limit)


class BrightnessPanel(AdjustableComponent):
    """Fingerprint LED and keyboard backlight brightness."""

    title = "Brightness"
    FINGERPRINT = 0
    KEYBOARD = 1

    def __init__(self, policy: FingerprintBrightnessPolicy) -> None:
        super().__init__(AdjustablePanel([percentage_control(0), percentage_control(0)]))
        self.policy = policy

    def adjust(self, index: int, delta: int) -> None:
        if index == self.FINGERPRINT:
            current = self.panel.selected_control_value()
            if current is not None:
                self.panel.set_focused_percentage_value(self.policy.adjust_by_delta(current, delta))
            return
        super().adjust(index, delta)

    def commit(self, index: int, control: AdjustableControl) -> Command | None:
        value = control.percentage_value
        if value is None:
            return None
        if index == self.FINGERPRINT:
            return SetFingerprintBrightness(value)
        return SetKeyboardBrightness(value)

    def sync(self, snapshot: Snapshot) -> None:
        self.sync_control(self.FINGERPRINT, snapshot.fp_brightness_percentage)
        self.sync_control(self.KEYBOARD, snapshot.kb_brightness_percentage)


class ChargeHistory:
    """Rolling charger voltage (V) and current (A) samples for the graph."""

    def __init__(self, size: int = HISTORY_SIZE) -> None:
        self.voltage: deque[float] = deque(maxlen=size)
        self.current: deque[float] = deque(maxlen=size)
        self._last_snapshot: Snapshot | None = None

    def __len__(self) -> int:
        return len(self.voltage)

    def record(self, snapshot: Snapshot) -> None:
        """Append one sample per distinct snapshot."""
        if snapshot is self._last_snapshot:
            return
        self._last_snapshot = snapshot
        self.voltage.append(snapshot.charger_voltage_volts or 0.0)
        self.current.append(snapshot.charger_current_amps or 0.0)


class ChargePanels(AdjustableComponent):
    """The charge graph and the charge panel, navigated as one panel."""

    title = "Charge"

    def __init__(self, max_charge_limit: int = 100, history_size: int = HISTORY_SIZE) -> None:
        self.charge = ChargePanel(max_charge_limit)
        self.history = ChargeHistory(history_size)
        super().__init__(self.charge.panel)

    def handle_input(self, key: Key) -> Command | None:
        return self.charge.handle_input(key)

    def commit(self, index: int, control: AdjustableControl) -> Command | None:
        return self.charge.commit(index, control)

    def sync(self, snapshot: Snapshot) -> None:
        self.history.record(snapshot)
        self.charge.sync(snapshot)


class ThermalHistory:
    """Rolling RPM samples of the first fan for the thermal graph.

    Samples are clamped to 0..FAN_RPM_MAX; a snapshot without fans
    records 0 so the graph keeps scrolling.
    """

    def __init__(self, size: int = HISTORY_SIZE) -> None:
        self.rpm: deque[int] = deque(maxlen=size)
        self._last_snapshot: Snapshot | None = None

    def __len__(self) -> int:
        return len(self.rpm)

    def record(self, snapshot: Snapshot) -> None:
        """Append one sample per distinct snapshot."""
        if snapshot is self._last_snapshot:
            return
        self._last_snapshot = snapshot
        rpm = snapshot.fan_rpm[0] if snapshot.fan_rpm else 0
        self.rpm.append(min(max(rpm, 0), FAN_RPM_MAX))

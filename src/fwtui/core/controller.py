"""Dashboard controller: owns the application state and executes commands.

The controller is UI-agnostic. It consumes events from the EventLoop,
routes keys through the PanelRegistry, runs the resulting commands
against the hardware backend and keeps the current Snapshot, theme and
error message for whatever renders the dashboard.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from fwtui.exceptions import ErrorContext, handle_errors
from fwtui.hardware.protocols import HardwareBackend
from fwtui.models import AppConfig, FpLedBrightnessCapability, Snapshot, Theme
from fwtui.models.config import MAX_TICK_INTERVAL_MS, MIN_TICK_INTERVAL_MS

from .commands import (
    AdjustTickInterval,
    Command,
    CycleTheme,
    Quit,
    SetFingerprintBrightness,
    SetKeyboardBrightness,
    SetMaxChargeLimit,
)
from .components import BrightnessPanel, ChargePanels, ThermalHistory
from .decorators import report_errors
from .event_loop import Event, EventLoop, InputEvent, TickEvent
from .fingerprint import FingerprintBrightnessPolicy, percentage_to_level
from .keys import Key
from .refresh import SnapshotRefreshSource
from .registry import PanelRegistry

logger = logging.getLogger(__name__)

# Refresh interval change per +/- key press
TICK_INTERVAL_STEP_MS = 250

_GLOBAL_KEYS: dict[Key, Command] = {
    Key.QUIT: Quit(),
    Key.THEME: CycleTheme(),
    Key.SLOWER: AdjustTickInterval(TICK_INTERVAL_STEP_MS),
    Key.FASTER: AdjustTickInterval(-TICK_INTERVAL_STEP_MS),
}


def _normalize_key(key: Key | str) -> Key | None:
    if isinstance(key, Key):
        return key
    try:
        return Key(key)
    except ValueError:
        return None


class DashboardController:
    """
    Application state and command execution.

    State:
        snapshot: The latest telemetry (replaced wholesale on every poll)
        registry: The adjustable panels and which one is selected
        thermal_history: First fan RPM samples for the thermal graph
        theme: The active colour palette
        error_message: Last command failure, shown until dismissed with Esc
        running: False once Quit was executed
    """

    def __init__(
        self,
        backend: HardwareBackend,
        config: AppConfig | None = None,
        config_path: Path | None = None,
        fp_capability: FpLedBrightnessCapability | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            backend: Hardware access layer
            config: Loaded configuration (defaults if None)
            config_path: Where theme and interval changes are saved.
                If None, changes are kept in memory only.
            fp_capability: Fingerprint LED capability. Probed from the
                backend if None.
        """
        self.backend = backend
        self.config = config or AppConfig()
        self.config_path = config_path

        if fp_capability is None:
            fp_capability = self._probe_fingerprint_capability()
        self.fingerprint_policy = FingerprintBrightnessPolicy(fp_capability)

        self.charge_panels = ChargePanels()
        self.brightness_panel = BrightnessPanel(self.fingerprint_policy)
        self.registry = PanelRegistry([self.charge_panels, self.brightness_panel])
        self.thermal_history = ThermalHistory()

        self.refresh_source = SnapshotRefreshSource(backend, self.config.tick_interval)
        self.snapshot = Snapshot()
        self.theme = Theme.from_variant(self.config.theme)
        self.error_message: str | None = None
        self.running = True
        self._event_loop: EventLoop | None = None

    @property
    def tick_interval_ms(self) -> int:
        return self.config.tick_interval_ms

    def _probe_fingerprint_capability(self) -> FpLedBrightnessCapability:
        with ErrorContext("probe fingerprint capability", logger_instance=logger, re_raise=False) as ctx:
            capability = self.backend.probe_fingerprint_capability()

        if ctx.error is not None:
            logger.warning("Falling back to level based fingerprint brightness")
            return FpLedBrightnessCapability.LEVEL

        logger.info(f"Fingerprint LED capability: {capability.value}")
        return capability

    # =================================================================
    # Messages
    # =================================================================

    def show_error(self, message: str) -> None:
        """Display an error until it is dismissed or replaced."""
        self.error_message = message

    def dismiss_error(self) -> None:
        self.error_message = None

    # =================================================================
    # Event handling
    # =================================================================

    async def run(self, event_loop: EventLoop, render: Callable[[], None] | None = None) -> None:
        """
        Consume events until Quit.

        Args:
            event_loop: A started EventLoop
            render: Called before waiting for each event

        Raises:
            EventLoopClosedError: If the event producer stops
        """
        self._event_loop = event_loop
        logger.info("Dashboard running")

        while self.running:
            if render is not None:
                render()
            event = await event_loop.next()
            self.handle_event(event)

        logger.info("Dashboard stopped")

    def handle_event(self, event: Event) -> None:
        match event:
            case TickEvent():
                self.refresh()
            case InputEvent(key=key):
                self.handle_key(key)
                if self.running:
                    self.refresh(only_if_needed=True)

        self.registry.sync(self.snapshot)
        self.thermal_history.record(self.snapshot)

    def handle_key(self, key: Key | str) -> Command | None:
        """
        Route a key press and execute the resulting command.

        Global keys (quit, theme, refresh interval) win over panel keys;
        Esc dismisses a displayed error before it reaches the panels.

        Returns:
            The executed command, if any
        """
        normalized = _normalize_key(key)
        if normalized is None:
            logger.debug(f"Ignoring unmapped key {key!r}")
            return None

        if normalized in _GLOBAL_KEYS:
            command = _GLOBAL_KEYS[normalized]
        elif normalized == Key.ESCAPE and self.error_message is not None:
            self.dismiss_error()
            return None
        else:
            command = self.registry.handle_input(normalized)

        if command is not None:
            self.execute(command)
        return command

    @report_errors("poll hardware")
    def refresh(self, only_if_needed: bool = False) -> None:
        if only_if_needed:
            snapshot = self.refresh_source.poll_if_needed()
        else:
            snapshot = self.refresh_source.poll()

        if snapshot is not None:
            self.snapshot = snapshot

    # =================================================================
    # Commands
    # =================================================================

    def execute(self, command: Command) -> None:
        logger.debug(f"Executing {command}")

        match command:
            case Quit():
                self.running = False
            case SetMaxChargeLimit(value=value):
                self._set_max_charge_limit(value)
            case SetFingerprintBrightness(value=value):
                self._set_fingerprint_brightness(value)
            case SetKeyboardBrightness(value=value):
                self._set_keyboard_brightness(value)
            case CycleTheme():
                self._cycle_theme()
            case AdjustTickInterval(delta_ms=delta_ms):
                self.set_tick_interval(self.config.tick_interval_ms + delta_ms)

    @report_errors("set max charge limit")
    def _set_max_charge_limit(self, value: int) -> None:
        self.backend.set_max_charge_limit(value)
        self.snapshot = self.snapshot.model_copy(update={"max_charge_limit": value})
        logger.info(f"Max charge limit set to {value}%")

    @report_errors("set fingerprint brightness")
    def _set_fingerprint_brightness(self, value: int) -> None:
        self.backend.set_fingerprint_brightness(value)
        update = {"fp_brightness_percentage": value}
        if self.fingerprint_policy.is_level_based:
            update["fp_brightness_level"] = percentage_to_level(value)
        self.snapshot = self.snapshot.model_copy(update=update)
        logger.info(f"Fingerprint brightness set to {value}%")

    @handle_errors(operation_name="set keyboard brightness", re_raise=False, log_level=logging.WARNING)
    def _set_keyboard_brightness(self, value: int) -> None:
        self.backend.set_keyboard_brightness(value)
        self.snapshot = self.snapshot.model_copy(update={"kb_brightness_percentage": value})

    def _cycle_theme(self) -> None:
        variant = self.theme.variant.next()
        self.theme = Theme.from_variant(variant)
        self.config = self.config.with_theme(variant)
        logger.info(f"Theme changed to {variant.value}")
        self._save_config()

    def set_tick_interval(self, tick_interval_ms: int) -> None:
        """
        Change how often telemetry is refreshed.

        The value is clamped to the allowed range; the event loop is
        rescheduled and the configuration saved.
        """
        tick_interval_ms = max(MIN_TICK_INTERVAL_MS, min(MAX_TICK_INTERVAL_MS, tick_interval_ms))
        if tick_interval_ms == self.config.tick_interval_ms:
            return

        self.config = self.config.with_tick_interval(tick_interval_ms)
        self.refresh_source.period = self.config.tick_interval
        if self._event_loop is not None:
            self._event_loop.set_tick_interval(self.config.tick_interval)
        logger.info(f"Tick interval changed to {tick_interval_ms} ms")
        self._save_config()

    @report_errors("save configuration")
    def _save_config(self) -> None:
        if self.config_path is None:
            return
        self.config.save(self.config_path)

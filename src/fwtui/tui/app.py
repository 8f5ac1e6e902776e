"""Textual dashboard application."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical

from fwtui.core import DashboardController, EventLoop, Key, KeyInputQueue
from fwtui.exceptions import FwTuiError

from .decorators import handle_action_errors
from .widgets import (
    BrightnessPanelWidget,
    ChargeGraphPanel,
    ChargePanelWidget,
    HelpFooter,
    MessageBar,
    PdPortsPanel,
    PrivacyPanel,
    SmbiosPanel,
    ThermalGraphPanel,
    ThermalPanel,
    TitleBar,
)

logger = logging.getLogger(__name__)


class FwTuiApp(App):
    """
    Textual front end for the dashboard.

    This is a PURE UI layer. The DashboardController owns all state; the
    app only forwards key presses into the event loop and redraws the
    widgets from the controller before each event is awaited.

    Flow:
    1. Key bindings feed KeyInputQueue
    2. EventLoop merges keys with refresh ticks
    3. A worker runs DashboardController.run(), which handles each event
       and calls refresh_widgets() before waiting for the next one
    4. Quit ends the worker, which exits the app
    """

    TITLE = "Framework System"

    CSS = """
    #panels {
        height: 1fr;
    }

    .column {
        width: 1fr;
        height: auto;
    }
    """

    # Priority bindings: Tab, arrows and Enter must reach the dashboard
    # instead of moving Textual's widget focus.
    BINDINGS = [
        Binding(key.value, f"forward_key('{key.value}')", key.name.title(), show=False, priority=True)
        for key in Key
    ]

    # =================================================================
    # Initialization & Lifecycle
    # =================================================================

    def __init__(self, controller: DashboardController) -> None:
        """
        Initialize the Textual UI application.

        Args:
            controller: The dashboard controller (state and commands)
        """
        super().__init__()
        self.controller = controller
        self.keys = KeyInputQueue()
        self.event_loop: Optional[EventLoop] = None
        self._fatal_error: Optional[Exception] = None  # Re-raised after Textual exits
        logger.info("Dashboard TUI created")

    def compose(self) -> ComposeResult:
        """Create the main layout."""
        yield TitleBar()
        with Horizontal(id="panels"):
            with Vertical(classes="column"):
                yield ChargeGraphPanel()
                yield ChargePanelWidget()
                yield PrivacyPanel()
            with Vertical(classes="column"):
                yield SmbiosPanel()
                yield BrightnessPanelWidget()
                yield ThermalGraphPanel()
                yield ThermalPanel()
                yield PdPortsPanel()
        yield MessageBar()
        yield HelpFooter()

    def on_mount(self) -> None:
        """Start the event loop and the controller worker."""
        self.event_loop = EventLoop(self.keys)
        self.event_loop.run(self.controller.config.tick_interval)
        self.run_worker(self._run_controller(), name="dashboard", exclusive=True)
        logger.info("TUI mounted - event loop running")

    def on_unmount(self) -> None:
        self.keys.close()
        logger.info("TUI unmounted")

    def run(self, *args, **kwargs):
        """
        Run the Textual TUI (blocks until app exits).

        Raises:
            FwTuiError: If the dashboard stopped because of a fatal error
        """
        result = super().run(*args, **kwargs)

        if self._fatal_error:
            raise self._fatal_error
        return result

    async def _run_controller(self) -> None:
        assert self.event_loop is not None
        try:
            await self.controller.run(self.event_loop, render=self.refresh_widgets)
        except FwTuiError as e:
            logger.error(f"Dashboard stopped: {e.technical_message}")
            self._fatal_error = e
            self.exit(1)
            return
        finally:
            await self.event_loop.stop()

        self.exit()

    # =================================================================
    # Rendering
    # =================================================================

    def refresh_widgets(self) -> None:
        """Redraw every widget from the controller state."""
        self.screen.styles.background = self.controller.theme.background
        for widget in self.query(
            "TitleBar, ChargeGraphPanel, ThermalGraphPanel, DashboardPanel, MessageBar, HelpFooter"
        ):
            widget.update_state(self.controller)

    # =================================================================
    # Actions
    # =================================================================

    @handle_action_errors("forward key")
    def action_forward_key(self, key: str) -> None:
        """Hand a key press to the event loop."""
        self.keys.feed(key)

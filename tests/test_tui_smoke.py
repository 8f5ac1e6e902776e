"""Smoke tests for TUI using Textual's test framework.

These tests verify that the dashboard can launch, render, and respond to
basic key presses without crashing. Hardware is simulated with the demo
backend.
"""

import asyncio

import pytest
from textual.widgets import Sparkline

from fwtui.core import DashboardController
from fwtui.hardware import DemoBackend
from fwtui.models import AppConfig, Theme, ThemeVariant
from fwtui.tui import FwTuiApp
from fwtui.tui.widgets.base import DashboardPanel


@pytest.fixture
def app(config_path):
    """Dashboard app over simulated hardware."""
    controller = DashboardController(DemoBackend(), AppConfig(), config_path)
    return FwTuiApp(controller)


async def wait_until(predicate, attempts: int = 40):
    """Give the controller worker time to process queued events."""
    for _ in range(attempts):
        if predicate():
            return True
        await asyncio.sleep(0.05)
    return predicate()


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUILaunch:
    """Test that the TUI can launch without crashing."""

    async def test_tui_launches_successfully(self, app):
        async with app.run_test() as pilot:
            assert await wait_until(lambda: app.controller.backend.poll_count > 0)
            assert app.event_loop is not None
            assert app.event_loop.is_running

    async def test_tui_mounts_widgets(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            assert app.query_one("TitleBar") is not None
            assert app.query_one("ChargeGraphPanel") is not None
            assert app.query_one("ThermalGraphPanel") is not None
            assert app.query_one("ChargePanelWidget") is not None
            assert app.query_one("BrightnessPanelWidget") is not None
            assert app.query_one("PdPortsPanel") is not None
            assert app.query_one("MessageBar") is not None
            assert app.query_one("HelpFooter") is not None

    async def test_fan_graph_fills_from_ticks(self, app):
        async with app.run_test() as pilot:
            fan_graph = app.query_one("#fan", Sparkline)
            assert await wait_until(lambda: len(fan_graph.data) > 0)


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUIKeys:
    """Test that key presses reach the controller."""

    async def test_edit_charge_limit(self, app):
        backend = app.controller.backend

        async with app.run_test() as pilot:
            await wait_until(lambda: backend.poll_count > 0)
            await pilot.press("tab", "enter", "right", "enter")

            assert await wait_until(lambda: backend.calls == [("charge", 85)])

    async def test_error_shown_and_dismissed(self, config_path):
        backend = DemoBackend(fail_setters={"fingerprint"})
        app = FwTuiApp(DashboardController(backend, AppConfig(), config_path))

        async with app.run_test() as pilot:
            await wait_until(lambda: backend.poll_count > 0)
            await pilot.press("tab", "tab", "enter", "right", "enter")
            assert await wait_until(lambda: app.controller.error_message is not None)
            assert await wait_until(lambda: app.query_one("MessageBar").has_class("has-message"))

            await pilot.press("escape")
            assert await wait_until(lambda: app.controller.error_message is None)

    async def test_cycle_theme(self, app, config_path):
        async with app.run_test() as pilot:
            await pilot.press("t")

            assert await wait_until(lambda: app.controller.theme.variant == ThemeVariant.ALUCARD)
            assert AppConfig.load_or_create(config_path).theme == ThemeVariant.ALUCARD

    async def test_quit(self, app):
        async with app.run_test() as pilot:
            await pilot.press("q")
            assert await wait_until(lambda: not app.controller.running)


class TestDashboardPanel:
    """Test the read-only panel base class."""

    def test_base_panel_renders_empty(self):
        theme = Theme.from_variant(ThemeVariant.FRAMEWORK)
        content = DashboardPanel().render_content(None, theme)
        assert content.plain == ""

"""Fans and temperatures."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Sparkline

from fwtui.models import Theme

from .base import DashboardPanel

# Temperatures above this are shown with the warning colour (°C)
HOT_TEMPERATURE = 80.0


class ThermalGraphPanel(Vertical):
    """RPM history of the first fan."""

    DEFAULT_CSS = """
    ThermalGraphPanel {
        border: round $primary;
        padding: 0 1;
        height: 6;
    }

    ThermalGraphPanel Sparkline {
        height: 3;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("Fan N/A", id="fan-label")
        yield Sparkline([], summary_function=max, id="fan")

    def on_mount(self) -> None:
        self.border_title = "Fan"

    def update_state(self, controller) -> None:
        fans = controller.snapshot.fan_rpm
        self.styles.border = ("round", controller.theme.border)
        self.query_one("#fan-label", Label).update(
            f"Fan 1 {fans[0]} RPM" if fans else "Fan N/A"
        )
        self.query_one("#fan", Sparkline).data = list(controller.thermal_history.rpm)


class ThermalPanel(DashboardPanel):
    panel_title = "Thermal"

    def render_content(self, controller, theme: Theme) -> Text:
        snapshot = controller.snapshot
        text = Text()

        if not snapshot.fan_rpm and not snapshot.temperatures:
            self.line(text, "Sensors", "N/A")
            return text

        for index, rpm in enumerate(snapshot.fan_rpm, start=1):
            self.line(text, f"Fan {index}", f"{rpm} RPM")

        for reading in snapshot.temperatures:
            if reading.celsius is None:
                self.line(text, reading.name, "N/A")
                continue
            style = theme.indication_warning if reading.celsius >= HOT_TEMPERATURE else theme.indication_ok
            self.line(text, reading.name, f"{reading.celsius:.1f} °C", style)
        return text

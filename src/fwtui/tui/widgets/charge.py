"""Battery widgets: the charger graph and the charge panel."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Sparkline

from fwtui.models import Theme
from fwtui.models.snapshot import NORMAL_CAPACITY_LOSS_MAX, NORMAL_CAPACITY_LOSS_MIN

from .base import DashboardPanel, na


class ChargeGraphPanel(Vertical):
    """Charger voltage and current history."""

    DEFAULT_CSS = """
    ChargeGraphPanel {
        border: round $primary;
        padding: 0 1;
        height: 9;
    }

    ChargeGraphPanel Sparkline {
        height: 2;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("Voltage", id="voltage-label")
        yield Sparkline([], summary_function=max, id="voltage")
        yield Label("Current", id="current-label")
        yield Sparkline([], summary_function=max, id="current")

    def on_mount(self) -> None:
        self.border_title = "Charger"

    def update_state(self, controller) -> None:
        history = controller.charge_panels.history
        snapshot = controller.snapshot
        theme = controller.theme

        self.styles.border = ("round", theme.border)
        voltage = snapshot.charger_voltage_volts
        current = snapshot.charger_current_amps
        self.query_one("#voltage-label", Label).update(
            f"Voltage {voltage:.2f} V" if voltage is not None else "Voltage N/A"
        )
        self.query_one("#current-label", Label).update(
            f"Current {current:.2f} A" if current is not None else "Current N/A"
        )
        self.query_one("#voltage", Sparkline).data = list(history.voltage)
        self.query_one("#current", Sparkline).data = list(history.current)


class ChargePanelWidget(DashboardPanel):
    """Battery state and the editable max charge limit."""

    panel_title = "Charge"

    def is_active(self, controller) -> bool:
        return controller.charge_panels.panel.is_selected()

    def render_content(self, controller, theme: Theme) -> Text:
        snapshot = controller.snapshot
        panel = controller.charge_panels.panel
        text = Text()

        self.line(text, "Charge level", na(snapshot.charge_percentage, "%"))
        self.line(text, "Status", snapshot.charging_status)
        self.line(text, "Design capacity", na(snapshot.design_capacity, " mAh"))
        self.line(text, "Last full charge", na(snapshot.last_full_charge_capacity, " mAh"))
        self.line(text, "Cycle count", na(snapshot.cycle_count))

        loss = snapshot.capacity_loss_percentage
        self.line(text, "Capacity loss", "N/A" if loss is None else f"{loss:.2f}%")

        per_cycle = snapshot.capacity_loss_per_cycle
        if per_cycle is None:
            self.line(text, "Loss per cycle", "N/A")
        else:
            style = theme.indication_ok if per_cycle <= NORMAL_CAPACITY_LOSS_MAX else theme.indication_warning
            self.line(
                text,
                "Loss per cycle",
                f"{per_cycle:.3f}% (normal loss is {NORMAL_CAPACITY_LOSS_MIN}-{NORMAL_CAPACITY_LOSS_MAX}%)",
                style,
            )

        control = panel.controls[0]
        value = control.percentage_value
        self.control_line(
            text,
            "Max charge limit",
            na(value, "%"),
            value,
            theme.charge_bar,
            theme,
            highlighted=panel.is_control_highlighted(0),
            focused=panel.is_panel_selected_and_control_focused_by_index(0),
        )
        return text

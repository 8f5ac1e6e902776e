"""USB-C power delivery ports."""

from rich.text import Text

from fwtui.models import PdPortInfo, PdPortRole, Theme

from .base import DashboardPanel, na

_PORT_LABELS = (
    ("left_back", "Left back"),
    ("left_front", "Left front"),
    ("right_back", "Right back"),
    ("right_front", "Right front"),
)


class PdPortsPanel(DashboardPanel):
    """Role and negotiated power of each Type-C port."""

    panel_title = "USB-PD ports"

    def render_content(self, controller, theme: Theme) -> Text:
        ports = controller.snapshot.pd_ports
        text = Text()
        for field, label in _PORT_LABELS:
            self._port(text, label, getattr(ports, field), theme)
        return text

    def _port(self, text: Text, label: str, port: PdPortInfo | None, theme: Theme) -> None:
        if port is None:
            self.line(text, label, "N/A")
            return

        if port.role == PdPortRole.DISCONNECTED:
            self.line(text, label, port.role.value)
            return

        style = theme.indication_ok if port.role != PdPortRole.SINK_NOT_CHARGING else theme.indication_warning
        self.line(text, label, f"{port.role.value} ({na(port.dualrole)}, {na(port.charging_type)})", style)
        self.line(text, "  Max power", na(port.max_power, " W"))
        voltage_now = "N/A" if port.voltage_now is None else f"{port.voltage_now:.1f}"
        voltage_max = "N/A" if port.voltage_max is None else f"{port.voltage_max:.1f}"
        self.line(text, "  Voltage", f"{voltage_now} / {voltage_max} V")
        self.line(text, "  Current", f"{na(port.current_limit)} / {na(port.current_max)} mA")

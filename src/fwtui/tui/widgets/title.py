"""Title bar widget."""

from rich.text import Text
from textual.widgets import Static

from fwtui import __version__

APP_TITLE = "Framework System"


class TitleBar(Static):
    """Application name, BIOS version, battery summary and refresh interval."""

    DEFAULT_CSS = """
    TitleBar {
        height: 1;
        padding: 0 1;
        text-style: bold;
    }
    """

    def update_state(self, controller) -> None:
        snapshot = controller.snapshot
        theme = controller.theme

        text = Text()
        text.append(f" {APP_TITLE} ", style=f"bold reverse {theme.highlighted_text}")
        text.append(f" v{__version__}")
        if snapshot.smbios_version:
            text.append(f" | BIOS {snapshot.smbios_version}")

        status_style = theme.indication_ok if snapshot.is_ac_connected else theme.indication_warning
        text.append(" | ")
        text.append(snapshot.charging_status, style=status_style)
        if snapshot.charge_percentage is not None:
            text.append(f" {snapshot.charge_percentage}%")
        if snapshot.max_charge_limit is not None:
            text.append(f" (limit {snapshot.max_charge_limit}%)")
        text.append(f" | Refresh {controller.tick_interval_ms} ms")
        text.append(f" | Theme {theme.variant.value}")

        self.styles.background = theme.background
        self.update(text)

"""Read-only information panels: privacy switches and firmware."""

from rich.text import Text

from fwtui.models import Theme

from .base import DashboardPanel, na


class PrivacyPanel(DashboardPanel):
    """Microphone and camera hardware switches."""

    panel_title = "Privacy"

    def render_content(self, controller, theme: Theme) -> Text:
        snapshot = controller.snapshot
        text = Text()
        for label, enabled in (
            ("Microphone", snapshot.is_microphone_enabled),
            ("Camera", snapshot.is_camera_enabled),
        ):
            self.line(
                text,
                label,
                "Connected" if enabled else "Disconnected",
                theme.indication_ok if enabled else theme.indication_warning,
            )
        return text


class SmbiosPanel(DashboardPanel):
    """BIOS vendor, version and release date."""

    panel_title = "BIOS"

    def render_content(self, controller, theme: Theme) -> Text:
        snapshot = controller.snapshot
        text = Text()
        self.line(text, "Vendor", na(snapshot.smbios_vendor))
        self.line(text, "Version", na(snapshot.smbios_version))
        self.line(text, "Release date", na(snapshot.smbios_release_date))
        return text

"""Brightness panel widget."""

from rich.text import Text

from fwtui.models import Theme

from .base import DashboardPanel


class BrightnessPanelWidget(DashboardPanel):
    """Fingerprint LED and keyboard backlight brightness."""

    panel_title = "Brightness"

    def is_active(self, controller) -> bool:
        return controller.brightness_panel.panel.is_selected()

    def render_content(self, controller, theme: Theme) -> Text:
        component = controller.brightness_panel
        panel = component.panel
        text = Text()

        labels = {
            component.FINGERPRINT: "Fingerprint brightness",
            component.KEYBOARD: "Keyboard brightness",
        }
        for index, label in labels.items():
            value = panel.controls[index].percentage_value
            if value is None:
                value_text = "N/A"
            elif index == component.FINGERPRINT:
                value_text = component.policy.display_value(value)
            else:
                value_text = f"{value}%"

            self.control_line(
                text,
                label,
                value_text,
                value,
                theme.brightness_bar,
                theme,
                highlighted=panel.is_control_highlighted(index),
                focused=panel.is_panel_selected_and_control_focused_by_index(index),
            )
        return text

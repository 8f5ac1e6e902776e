"""Shared rendering for dashboard panels."""

from rich.text import Text
from textual.widgets import Static

from fwtui.models import Theme

BAR_WIDTH = 24


def percentage_bar(value: int | None, width: int = BAR_WIDTH) -> str:
    """'█████░░░░░' style bar for a 0-100 value."""
    if value is None:
        return "░" * width
    filled = round(max(0, min(100, value)) * width / 100)
    return "█" * filled + "░" * (width - filled)


def na(value: object | None, suffix: str = "") -> str:
    return "N/A" if value is None else f"{value}{suffix}"


class DashboardPanel(Static):
    """
    A bordered, read-only panel.

    Subclasses build their content from the controller state in
    ``render_content``; ``update_state`` redraws the panel and recolours
    its border from the active theme.
    """

    DEFAULT_CSS = """
    DashboardPanel {
        border: round $primary;
        padding: 0 1;
        height: auto;
    }
    """

    panel_title = ""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = self.panel_title

    def update_state(self, controller) -> None:
        """Redraw from the controller (read-only access)."""
        theme = controller.theme
        active = self.is_active(controller)
        self.styles.border = ("round", theme.border_active if active else theme.border)
        self.styles.color = theme.informative_text
        self.update(self.render_content(controller, theme))

    def is_active(self, controller) -> bool:
        return False

    def render_content(self, controller, theme: Theme) -> Text:
        """Panel body; empty unless a subclass fills it."""
        return Text()

    @staticmethod
    def line(text: Text, label: str, value: str, style: str = "") -> None:
        text.append(f"{label:<24}")
        text.append(value, style=style)
        text.append("\n")

    @staticmethod
    def control_line(
        text: Text,
        label: str,
        value_text: str,
        value: int | None,
        bar_color: str,
        theme: Theme,
        highlighted: bool,
        focused: bool,
    ) -> None:
        """Render an adjustable control: label, bar and value.

        The cursor is shown as a highlighted label; an edit in progress
        as arrows around the value.
        """
        label_style = f"bold {theme.highlighted_text}" if highlighted else ""
        text.append(f"{label:<24}", style=label_style)
        text.append(percentage_bar(value), style=bar_color)
        if focused:
            text.append(f" ◀ {value_text} ▶", style=f"bold reverse {theme.border_active}")
        else:
            text.append(f" {value_text}")
        text.append("\n")

"""Error message bar and key help footer."""

from rich.text import Text
from textual.widgets import Static

FOOTER_HELP = (
    "[Tab] Switch panels [Up/Down] Scroll [Enter] Edit/Apply "
    "[Left/Right] Adjust value [Esc] Cancel [t] Theme [+/-] Refresh rate [q] Quit"
)


class MessageBar(Static):
    """
    Shows the last command failure until it is dismissed.

    Hidden while there is no message.
    """

    DEFAULT_CSS = """
    MessageBar {
        height: auto;
        padding: 0 1;
        display: none;
    }

    MessageBar.has-message {
        display: block;
    }
    """

    def update_state(self, controller) -> None:
        message = controller.error_message
        if message is None:
            self.remove_class("has-message")
            self.update("")
            return

        theme = controller.theme
        text = Text()
        text.append(" Error ", style=f"bold reverse {theme.indication_warning}")
        text.append(f" {message} ", style=theme.indication_warning)
        text.append("[Esc] Dismiss")
        self.add_class("has-message")
        self.update(text)


class HelpFooter(Static):
    """Key help line."""

    DEFAULT_CSS = """
    HelpFooter {
        height: 1;
        padding: 0 1;
    }
    """

    def update_state(self, controller) -> None:
        self.styles.color = controller.theme.informative_text
        self.update(Text(FOOTER_HELP))

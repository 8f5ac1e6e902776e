"""Panel registry and focus router.

Tab walks the selection through the panels in order:
none -> panel 0 -> panel 1 -> ... -> last -> none -> panel 0 ...
Every other key is offered to the panels in order; only a selected panel
reacts, and the first command produced wins.
"""

import logging

from fwtui.models.snapshot import Snapshot

from .commands import Command
from .components import AdjustableComponent
from .keys import Key

logger = logging.getLogger(__name__)


class PanelRegistry:
    """Ordered adjustable panels with at most one selected."""

    def __init__(self, components: list[AdjustableComponent]) -> None:
        self.components = list(components)
        self.selected_panel: int | None = None

    def __len__(self) -> int:
        return len(self.components)

    def switch_panels(self) -> None:
        """
        Move the selection to the next panel.

        After the last panel nothing is selected; the following switch
        selects the first panel again.
        """
        if not self.components:
            return

        if self.selected_panel is None:
            self.selected_panel = 0
            self.components[0].panel.toggle()
        elif self.selected_panel < len(self.components) - 1:
            self.components[self.selected_panel].panel.toggle()
            self.selected_panel += 1
            self.components[self.selected_panel].panel.toggle()
        else:
            self.components[self.selected_panel].panel.toggle()
            self.selected_panel = None

        logger.debug(f"Selected panel: {self.selected_panel}")

    def handle_input(self, key: Key) -> Command | None:
        if key == Key.TAB:
            self.switch_panels()
            return None

        for component in self.components:
            command = component.handle_input(key)
            if command is not None:
                return command
        return None

    def sync(self, snapshot: Snapshot) -> None:
        """Forward a snapshot to every panel."""
        for component in self.components:
            component.sync(snapshot)

    @property
    def selected_component(self) -> AdjustableComponent | None:
        if self.selected_panel is None:
            return None
        return self.components[self.selected_panel]

    @property
    def any_control_focused(self) -> bool:
        return any(component.panel.is_armed() for component in self.components)

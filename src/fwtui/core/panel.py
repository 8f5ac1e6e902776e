"""Focus and selection state for one adjustable panel.

A panel owns an ordered list of controls and a cursor into it. The panel
is "armed" for value edits only while it is selected AND the control under
the cursor is focused; every adjust operation is a no-op otherwise.
"""

import logging

from .control import AdjustableControl, PercentageControl

logger = logging.getLogger(__name__)


class AdjustablePanel:
    """Selection, cursor and focus state for a group of controls."""

    def __init__(self, controls: list[AdjustableControl]) -> None:
        """
        Initialize the panel.

        Args:
            controls: Controls in display order (must not be empty)

        Raises:
            ValueError: If no controls are given
        """
        if not controls:
            raise ValueError("An adjustable panel needs at least one control")
        self.selected = False
        self.controls: list[AdjustableControl] = list(controls)
        self.selected_control = 0

    def __repr__(self) -> str:
        return (
            f"AdjustablePanel(selected={self.selected}, "
            f"selected_control={self.selected_control}, controls={self.controls!r})"
        )

    # =================================================================
    # Selection
    # =================================================================

    def is_selected(self) -> bool:
        return self.selected

    def toggle(self) -> None:
        self.selected = not self.selected

    def cycle_controls_up(self) -> None:
        """Move the cursor to the previous control, wrapping to the last."""
        self.selected_control = (self.selected_control - 1) % len(self.controls)

    def cycle_controls_down(self) -> None:
        """Move the cursor to the next control, wrapping to the first."""
        self.selected_control = (self.selected_control + 1) % len(self.controls)

    # =================================================================
    # Focus
    # =================================================================

    def get_selected_control(self) -> AdjustableControl:
        return self.controls[self.selected_control]

    def toggle_selected_control_focus(self) -> None:
        control = self.get_selected_control()
        self.controls[self.selected_control] = control.toggle_focus()
        logger.debug(
            f"Control {self.selected_control} focus -> "
            f"{self.controls[self.selected_control].is_focused}"
        )

    def get_selected_and_focused_control(self) -> AdjustableControl | None:
        """Return the control under the cursor if it is focused."""
        control = self.get_selected_control()
        return control if control.is_focused else None

    def is_armed(self) -> bool:
        """True if value edits currently apply to this panel."""
        return self.selected and self.get_selected_control().is_focused

    def is_panel_selected_and_control_focused_by_index(self, index: int) -> bool:
        return (
            self.selected
            and self.selected_control == index
            and self.controls[index].is_focused
        )

    def is_control_highlighted(self, index: int) -> bool:
        """True if the cursor of a selected panel rests on this control."""
        return self.selected and self.selected_control == index

    # =================================================================
    # Values
    # =================================================================

    def selected_control_value(self) -> int | None:
        return self.get_selected_control().percentage_value

    def adjust_focused_percentage_control_by_delta(self, delta: int) -> None:
        """
        Add delta to the focused percentage control.

        The new value is committed only if it stays within 0-100;
        otherwise the control is left unchanged (no clamping).

        Args:
            delta: Signed change in percentage points
        """
        control = self.get_selected_and_focused_control()
        if not isinstance(control, PercentageControl):
            return

        new_value = control.value + delta
        if 0 <= new_value <= 100:
            self.controls[self.selected_control] = control.with_value(new_value)

    def set_focused_percentage_value(self, value: int) -> None:
        """Replace the value of the focused percentage control.

        Out-of-range values are ignored, like in
        adjust_focused_percentage_control_by_delta.
        """
        control = self.get_selected_and_focused_control()
        if isinstance(control, PercentageControl) and 0 <= value <= 100:
            self.controls[self.selected_control] = control.with_value(value)

    def set_percentage_control_by_index(self, index: int, control: AdjustableControl) -> None:
        """Replace a control, used to sync displayed values from telemetry.

        Callers must only do this while the control is not focused, so that
        live data never overwrites an edit in progress.
        """
        self.controls[index] = control

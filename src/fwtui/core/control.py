"""Adjustable controls.

A control is either a single percentage or an unbounded from/to range
of floats. Each carries
its own focus flag: a focused control is being edited and ignores live
telemetry until the edit is committed or cancelled.
"""

from pydantic import BaseModel, ConfigDict, Field


class PercentageControl(BaseModel):
    """A single value in 0-100."""

    model_config = ConfigDict(frozen=True)

    focused: bool = False
    value: int = Field(ge=0, le=100)

    @property
    def is_focused(self) -> bool:
        return self.focused

    @property
    def percentage_value(self) -> int | None:
        return self.value

    def toggle_focus(self) -> "PercentageControl":
        return self.model_copy(update={"focused": not self.focused})

    def with_value(self, value: int) -> "PercentageControl":
        """Return a copy holding another value (validated)."""
        return PercentageControl(focused=self.focused, value=value)


class RangeControl(BaseModel):
    """A from/to pair of floats. Neither end is bounded or ordered."""

    model_config = ConfigDict(frozen=True)

    focused: bool = False
    from_: float
    to: float

    @property
    def is_focused(self) -> bool:
        return self.focused

    @property
    def percentage_value(self) -> int | None:
        return None

    def toggle_focus(self) -> "RangeControl":
        return self.model_copy(update={"focused": not self.focused})


AdjustableControl = PercentageControl | RangeControl


def percentage_control(value: int) -> PercentageControl:
    """Create an unfocused percentage control."""
    return PercentageControl(value=value)


def range_control(from_: float, to: float) -> RangeControl:
    """Create an unfocused range control."""
    return RangeControl(from_=from_, to=to)

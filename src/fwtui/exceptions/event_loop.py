"""Event loop exceptions."""

from .base import FwTuiError


class EventLoopClosedError(FwTuiError):
    """The event producer has stopped and no events are left.

    This is fatal: the dashboard cannot receive ticks or key presses anymore.
    """

    def __init__(self, reason: str | None = None):
        tech_msg = "Event loop async channel error"
        if reason:
            tech_msg += f": {reason}"
        super().__init__(
            user_message="Event loop async channel error",
            technical_message=tech_msg,
            recoverable=False,
        )

"""Root of the fwtui exception tree.

The dashboard only ever shows ``user_message`` (message bar, CLI error
box); ``technical_message`` goes to the log file. Whether the dashboard
keeps running after an error is decided by ``recoverable``.
"""


class FwTuiError(Exception):
    """An error with one message for the user and one for the log."""

    def __init__(
        self,
        user_message: str,
        *,
        technical_message: str | None = None,
        recoverable: bool = False,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """The user message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"

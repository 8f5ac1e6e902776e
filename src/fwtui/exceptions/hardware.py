"""Hardware-related exceptions.

This module defines exceptions for failed device commands:
- HardwareError: Base class for hardware command failures
- FirmwareUpdateRequiredError: The EC rejected a command as unsupported
- HardwareToolNotFoundError: The framework_tool binary is missing
"""

from typing import Optional

from .base import FwTuiError


class HardwareError(FwTuiError):
    """A hardware read or write command failed."""

    def __init__(self, user_message: str, operation: Optional[str] = None, **kwargs):
        """
        Initialize hardware error.

        Args:
            user_message: User-friendly error message
            operation: The hardware operation that failed (if known)
        """
        kwargs.setdefault("recoverable", True)
        super().__init__(user_message, **kwargs)
        self.operation = operation


class FirmwareUpdateRequiredError(HardwareError):
    """The embedded controller does not support the requested command."""

    def __init__(self, feature: str, original_error: Optional[str] = None):
        """
        Initialize firmware-update-required error.

        Args:
            feature: Human readable name of the setting, e.g. "fingerprint brightness"
            original_error: The raw error reported by the tool
        """
        user_msg = f"Couldn't set {feature}. Please, update your BIOS."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            operation=f"set {feature}",
            recovery_hint="Install the latest BIOS from the Framework support site.",
        )
        self.feature = feature


class HardwareToolNotFoundError(HardwareError):
    """The framework_tool executable could not be found."""

    def __init__(self, tool: str):
        super().__init__(
            user_message=f"'{tool}' was not found.",
            technical_message=f"Executable not found on PATH: {tool}",
            operation="run tool",
            recovery_hint=(
                "Install framework_tool or point 'framework_tool' in the config "
                "file at its location. Run 'fwtui --demo' to try the dashboard without hardware."
            ),
        )
        self.tool = tool

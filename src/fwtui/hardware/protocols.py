"""Hardware access protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fwtui.models import FpLedBrightnessCapability, Snapshot


@runtime_checkable
class HardwareBackend(Protocol):
    """Reads telemetry from and writes settings to a Framework laptop."""

    def poll(self) -> Snapshot:
        """
        Read the complete device state.

        Values that cannot be read are left empty in the snapshot; a poll
        never fails because of a single missing sensor.
        """
        ...

    def probe_fingerprint_capability(self) -> FpLedBrightnessCapability:
        """Detect whether the fingerprint LED takes levels or percentages."""
        ...

    def set_max_charge_limit(self, value: int) -> None:
        """
        Set the battery max charge limit.

        Raises:
            HardwareError: If the embedded controller rejects the command
        """
        ...

    def set_fingerprint_brightness(self, value: int) -> None:
        """
        Set the fingerprint LED brightness.

        Raises:
            FirmwareUpdateRequiredError: If the firmware is too old
            HardwareError: For other failures
        """
        ...

    def set_keyboard_brightness(self, value: int) -> None:
        """Set the keyboard backlight brightness. Failures are only logged."""
        ...

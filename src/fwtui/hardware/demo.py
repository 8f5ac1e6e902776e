"""Simulated Framework laptop for --demo and tests."""

import logging
import math

from fwtui.exceptions import FirmwareUpdateRequiredError, HardwareError
from fwtui.models import (
    FpLedBrightnessCapability,
    PdPortInfo,
    PdPortRole,
    PdPortsInfo,
    Snapshot,
    TemperatureReading,
)

logger = logging.getLogger(__name__)


class DemoBackend:
    """
    A deterministic fake device.

    Each poll advances a counter that drives slowly varying charger
    voltage/current, fan speed and temperatures. Setters store the value
    so the next poll reports it.

    Args:
        fp_capability: What probe_fingerprint_capability reports
        fail_setters: Names of setters that raise ("charge", "fingerprint",
            "keyboard"); "fingerprint" fails with a firmware update error
    """

    def __init__(
        self,
        fp_capability: FpLedBrightnessCapability = FpLedBrightnessCapability.PERCENTAGE,
        fail_setters: set[str] | None = None,
    ) -> None:
        self.fp_capability = fp_capability
        self.fail_setters = set(fail_setters or ())
        self.poll_count = 0
        self.max_charge_limit = 80
        self.fp_brightness = 40
        self.kb_brightness = 50
        self.calls: list[tuple[str, int]] = []

    def poll(self) -> Snapshot:
        self.poll_count += 1
        phase = self.poll_count / 10

        return Snapshot(
            charge_percentage=min(100, 60 + self.poll_count // 30),
            is_charging=True,
            is_ac_connected=True,
            charger_voltage=int(17_200 + 300 * math.sin(phase)),
            charger_current=int(1_500 + 400 * math.cos(phase)),
            design_capacity=3572,
            last_full_charge_capacity=3450,
            cycle_count=42,
            max_charge_limit=self.max_charge_limit,
            is_microphone_enabled=True,
            is_camera_enabled=False,
            fp_brightness_percentage=self.fp_brightness,
            kb_brightness_percentage=self.kb_brightness,
            smbios_vendor="INSYDE Corp.",
            smbios_version="03.05",
            smbios_release_date="03/29/2024",
            pd_ports=PdPortsInfo(
                right_back=PdPortInfo(
                    role=PdPortRole.SINK,
                    dualrole="Charger",
                    charging_type="PD",
                    max_power=60,
                    voltage_now=20.0,
                    voltage_max=20.0,
                    current_limit=3000,
                    current_max=3000,
                ),
                right_front=PdPortInfo(role=PdPortRole.DISCONNECTED),
                left_front=PdPortInfo(role=PdPortRole.DISCONNECTED),
                left_back=PdPortInfo(
                    role=PdPortRole.SOURCE,
                    dualrole="DRP",
                    charging_type="C",
                    max_power=7,
                    voltage_now=5.0,
                    voltage_max=5.0,
                    current_limit=1500,
                    current_max=1500,
                ),
            ),
            fan_rpm=[int(2_000 + 500 * math.sin(phase / 2))],
            temperatures=[
                TemperatureReading(name="cpu", celsius=round(48 + 6 * math.sin(phase), 1)),
                TemperatureReading(name="battery", celsius=31.0),
            ],
        )

    def probe_fingerprint_capability(self) -> FpLedBrightnessCapability:
        return self.fp_capability

    def set_max_charge_limit(self, value: int) -> None:
        self.calls.append(("charge", value))
        if "charge" in self.fail_setters:
            raise HardwareError("Couldn't set max charge limit.", operation="set max charge limit")
        self.max_charge_limit = value

    def set_fingerprint_brightness(self, value: int) -> None:
        self.calls.append(("fingerprint", value))
        if "fingerprint" in self.fail_setters:
            raise FirmwareUpdateRequiredError("fingerprint brightness", original_error="InvalidVersion")
        self.fp_brightness = value

    def set_keyboard_brightness(self, value: int) -> None:
        self.calls.append(("keyboard", value))
        if "keyboard" in self.fail_setters:
            logger.warning("Demo: keyboard brightness not set")
            return
        self.kb_brightness = value

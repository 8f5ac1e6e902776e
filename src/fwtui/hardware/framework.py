"""Hardware access for Framework laptops.

Battery, firmware, fan, temperature and USB-PD data come from sysfs.
Values only the embedded controller knows (charge limit, privacy
switches, fingerprint and keyboard brightness) are read and written
through the ``framework_tool`` command line utility.
"""

import logging
import re
import subprocess
from pathlib import Path

from fwtui.exceptions import HardwareError, HardwareToolNotFoundError, wrap_hardware_error
from fwtui.exceptions.handlers import INVALID_VERSION_MARKER
from fwtui.models import (
    FpLedBrightnessCapability,
    FpLedBrightnessLevel,
    PdPortInfo,
    PdPortRole,
    PdPortsInfo,
    Snapshot,
    TemperatureReading,
)

logger = logging.getLogger(__name__)

TOOL_TIMEOUT = 5.0
PD_PORT_COUNT = 4

_CHARGE_LIMIT_RE = re.compile(r"Maximum\s+(\d+)\s*%", re.IGNORECASE)
_PERCENT_RE = re.compile(r"(\d+)\s*%")
_FP_BRIGHTNESS_RE = re.compile(r"Brightness:\s*(\d+)\s*%", re.IGNORECASE)
_FP_LEVEL_RE = re.compile(r"Requested:\s*(\w+)", re.IGNORECASE)
_PRIVACY_RE = re.compile(r"(Microphone|Camera):\s*(\w+)", re.IGNORECASE)
_SELECTED_RE = re.compile(r"\[([^\]]+)\]")


def parse_charge_limit(output: str) -> int | None:
    """'Minimum 0%, Maximum 80%' -> 80"""
    match = _CHARGE_LIMIT_RE.search(output)
    return int(match.group(1)) if match else None


def parse_privacy(output: str) -> tuple[bool, bool]:
    """Return (microphone enabled, camera enabled)."""
    states = {name.lower(): value.lower() == "connected" for name, value in _PRIVACY_RE.findall(output)}
    return states.get("microphone", False), states.get("camera", False)


def parse_fp_brightness(output: str) -> tuple[int | None, FpLedBrightnessLevel | None]:
    """Return (percentage, requested level) from fingerprint LED output."""
    percentage = None
    level = None

    match = _FP_BRIGHTNESS_RE.search(output)
    if match:
        percentage = int(match.group(1))

    match = _FP_LEVEL_RE.search(output)
    if match:
        try:
            level = FpLedBrightnessLevel(match.group(1).lower())
        except ValueError:
            level = None

    return percentage, level


def parse_keyboard_brightness(output: str) -> int | None:
    match = _PERCENT_RE.search(output)
    return int(match.group(1)) if match else None


def selected_option(value: str | None) -> str | None:
    """'source [sink]' -> 'sink'"""
    if value is None:
        return None
    match = _SELECTED_RE.search(value)
    return match.group(1) if match else value.strip()


class FrameworkBackend:
    """
    Reads and writes Framework laptop hardware state.

    Example:
        ```python
        backend = FrameworkBackend()
        snapshot = backend.poll()
        backend.set_max_charge_limit(80)
        ```
    """

    def __init__(self, tool: str = "framework_tool", sysfs_root: Path = Path("/sys")) -> None:
        """
        Initialize the backend.

        Args:
            tool: Name or path of the framework_tool executable
            sysfs_root: Root of the sysfs tree (overridable for tests)
        """
        self.tool = tool
        self.sysfs_root = sysfs_root

    # =================================================================
    # framework_tool
    # =================================================================

    def _run_tool(self, *args: str) -> str:
        """
        Run framework_tool and return its output.

        Raises:
            HardwareToolNotFoundError: If the executable is missing
            HardwareError: If the tool exits non-zero or reports an EC error
        """
        command = [self.tool, *args]
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=TOOL_TIMEOUT,
                check=True,
            )
        except FileNotFoundError as e:
            raise HardwareToolNotFoundError(self.tool) from e
        except subprocess.TimeoutExpired as e:
            raise HardwareError(
                user_message=f"'{self.tool}' did not respond.",
                technical_message=f"Timed out after {TOOL_TIMEOUT}s: {' '.join(command)}",
                operation=" ".join(args),
            ) from e

        output = result.stdout + result.stderr
        # framework_tool reports some EC errors with a zero exit status
        if INVALID_VERSION_MARKER in output or output.lstrip().startswith("Error"):
            raise subprocess.CalledProcessError(1, command, output=result.stdout, stderr=result.stderr)
        return result.stdout

    def _query(self, *args: str) -> str | None:
        """Run a read-only query; failures are logged and yield None."""
        try:
            return self._run_tool(*args)
        except (HardwareError, subprocess.CalledProcessError) as e:
            logger.debug(f"Query {' '.join(args)} failed: {e}")
            return None

    def _set(self, feature: str, *args: str) -> None:
        try:
            self._run_tool(*args)
        except (HardwareError, subprocess.CalledProcessError) as e:
            raise wrap_hardware_error(e, feature) from e
        logger.info(f"Set {feature}: {' '.join(args)}")

    # =================================================================
    # Setters
    # =================================================================

    def set_max_charge_limit(self, value: int) -> None:
        self._set("max charge limit", "--charge-limit", str(value))

    def set_fingerprint_brightness(self, value: int) -> None:
        self._set("fingerprint brightness", "--fp-brightness", str(value))

    def set_keyboard_brightness(self, value: int) -> None:
        try:
            self._set("keyboard brightness", "--kblight", str(value))
        except HardwareError as e:
            logger.warning(f"Failed to set keyboard brightness: {e.technical_message}")

    def probe_fingerprint_capability(self) -> FpLedBrightnessCapability:
        """
        Detect how the fingerprint LED brightness can be set.

        Firmware that reports the requested level alongside the brightness
        accepts arbitrary percentages; older firmware only reports a
        brightness and is driven through the three levels.

        Raises:
            HardwareError: If the fingerprint LED cannot be queried
        """
        try:
            output = self._run_tool("--fp-brightness")
        except subprocess.CalledProcessError as e:
            raise wrap_hardware_error(e, "fingerprint brightness") from e

        _, level = parse_fp_brightness(output)
        if level is not None:
            return FpLedBrightnessCapability.PERCENTAGE
        return FpLedBrightnessCapability.LEVEL

    # =================================================================
    # Polling
    # =================================================================

    def poll(self) -> Snapshot:
        """Read every value; unreadable ones stay empty."""
        values: dict = {}
        values.update(self._battery())
        values.update(self._smbios())

        output = self._query("--charge-limit")
        if output is not None:
            values["max_charge_limit"] = parse_charge_limit(output)

        output = self._query("--privacy")
        if output is not None:
            microphone, camera = parse_privacy(output)
            values["is_microphone_enabled"] = microphone
            values["is_camera_enabled"] = camera

        output = self._query("--fp-brightness")
        if output is not None:
            percentage, level = parse_fp_brightness(output)
            values["fp_brightness_percentage"] = percentage
            values["fp_brightness_level"] = level

        output = self._query("--kblight")
        if output is not None:
            values["kb_brightness_percentage"] = parse_keyboard_brightness(output)

        fans, temperatures = self._thermals()
        values["fan_rpm"] = fans
        values["temperatures"] = temperatures
        values["pd_ports"] = self._pd_ports()

        return Snapshot(**values)

    # =================================================================
    # sysfs
    # =================================================================

    def _read(self, path: Path) -> str | None:
        try:
            return path.read_text().strip()
        except OSError:
            return None

    def _read_int(self, path: Path) -> int | None:
        value = self._read(path)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    def _power_supplies(self, kind: str) -> list[Path]:
        base = self.sysfs_root / "class" / "power_supply"
        if not base.is_dir():
            return []
        return sorted(path for path in base.iterdir() if self._read(path / "type") == kind)

    def _battery(self) -> dict:
        values: dict = {}

        adapters = self._power_supplies("Mains")
        values["is_ac_connected"] = any(self._read_int(path / "online") == 1 for path in adapters)

        batteries = self._power_supplies("Battery")
        if not batteries:
            return values
        battery = batteries[0]

        def micro(name: str) -> int | None:
            value = self._read_int(battery / name)
            return None if value is None else value // 1000

        values["charge_percentage"] = self._read_int(battery / "capacity")
        values["charger_voltage"] = micro("voltage_now")
        current = micro("current_now")
        values["charger_current"] = None if current is None else abs(current)
        values["design_capacity"] = micro("charge_full_design")
        values["last_full_charge_capacity"] = micro("charge_full")
        values["cycle_count"] = self._read_int(battery / "cycle_count")
        values["is_charging"] = self._read(battery / "status") == "Charging"
        return values

    def _smbios(self) -> dict:
        dmi = self.sysfs_root / "class" / "dmi" / "id"
        return {
            "smbios_vendor": self._read(dmi / "bios_vendor"),
            "smbios_version": self._read(dmi / "bios_version"),
            "smbios_release_date": self._read(dmi / "bios_date"),
        }

    def _thermals(self) -> tuple[list[int], list[TemperatureReading]]:
        base = self.sysfs_root / "class" / "hwmon"
        if not base.is_dir():
            return [], []

        for hwmon in sorted(base.iterdir()):
            if self._read(hwmon / "name") != "cros_ec":
                continue

            fans = [
                rpm for path in sorted(hwmon.glob("fan*_input"))
                if (rpm := self._read_int(path)) is not None
            ]
            temperatures = []
            for path in sorted(hwmon.glob("temp*_input")):
                label = self._read(path.with_name(path.name.replace("_input", "_label")))
                millidegrees = self._read_int(path)
                temperatures.append(TemperatureReading(
                    name=label or path.name.removesuffix("_input"),
                    celsius=None if millidegrees is None else millidegrees / 1000,
                ))
            return fans, temperatures

        return [], []

    def _pd_ports(self) -> PdPortsInfo:
        typec = self.sysfs_root / "class" / "typec"
        supplies = self.sysfs_root / "class" / "power_supply"
        if not typec.is_dir():
            return PdPortsInfo()

        ports: dict[int, PdPortInfo] = {}
        for index in range(PD_PORT_COUNT):
            port = typec / f"port{index}"
            if not port.is_dir():
                continue
            supply = supplies / f"ucsi-source-psy-USBC000:00{index + 1}"
            ports[index] = self._pd_port(port, supply)
        return PdPortsInfo.from_indexed(ports)

    def _pd_port(self, port: Path, supply: Path) -> PdPortInfo:
        if not (port.parent / f"{port.name}-partner").exists():
            return PdPortInfo(role=PdPortRole.DISCONNECTED)

        power_role_options = self._read(port / "power_role")
        power_role = selected_option(power_role_options)
        online = self._read_int(supply / "online") == 1

        if power_role == "source":
            role = PdPortRole.SOURCE
        elif online:
            role = PdPortRole.SINK
        else:
            role = PdPortRole.SINK_NOT_CHARGING

        dualrole = None
        if power_role_options is not None:
            dualrole = "DRP" if "source" in power_role_options and "sink" in power_role_options else "Charger"

        voltage_now = self._read_int(supply / "voltage_now")
        voltage_max = self._read_int(supply / "voltage_max")
        current_now = self._read_int(supply / "current_now")
        current_max = self._read_int(supply / "current_max")
        max_power = None
        if voltage_max is not None and current_max is not None:
            max_power = round(voltage_max * current_max / 1_000_000_000_000)

        return PdPortInfo(
            role=role,
            dualrole=dualrole,
            charging_type=selected_option(self._read(supply / "usb_type")),
            max_power=max_power,
            voltage_now=None if voltage_now is None else voltage_now / 1_000_000,
            voltage_max=None if voltage_max is None else voltage_max / 1_000_000,
            current_limit=None if current_now is None else current_now // 1000,
            current_max=None if current_max is None else current_max // 1000,
        )

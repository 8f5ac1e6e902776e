"""Tests for the framework_tool/sysfs hardware backend."""

import subprocess
from pathlib import Path

import pytest

from fwtui.exceptions import FirmwareUpdateRequiredError, HardwareError, HardwareToolNotFoundError
from fwtui.hardware import FrameworkBackend
from fwtui.hardware.framework import (
    parse_charge_limit,
    parse_fp_brightness,
    parse_keyboard_brightness,
    parse_privacy,
    selected_option,
)
from fwtui.models import FpLedBrightnessCapability, FpLedBrightnessLevel, PdPortRole

TOOL_OUTPUT = {
    "--charge-limit": "Minimum 0%, Maximum 80%\n",
    "--privacy": "Privacy Switches\n  Microphone: Connected\n  Camera:     Disconnected\n",
    "--fp-brightness": "Fingerprint LED Brightness\n  Requested:  Medium\n  Brightness: 40%\n",
    "--kblight": "Keyboard backlight: 30%\n",
}


class FakeTool:
    """Stands in for subprocess.run and records framework_tool invocations."""

    def __init__(self, outputs=None, error=None):
        self.outputs = TOOL_OUTPUT if outputs is None else outputs
        self.error = error
        self.commands = []

    def __call__(self, command, **kwargs):
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        stdout = self.outputs.get(command[1], "") if len(command) == 2 else ""
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")


@pytest.fixture
def fake_tool(monkeypatch):
    tool = FakeTool()
    monkeypatch.setattr(subprocess, "run", tool)
    return tool


def write(path: Path, value) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{value}\n")


@pytest.fixture
def sysfs(tmp_path):
    """A minimal sysfs tree of a charging Framework laptop."""
    root = tmp_path / "sys"
    supplies = root / "class" / "power_supply"

    battery = supplies / "BAT1"
    write(battery / "type", "Battery")
    write(battery / "capacity", 76)
    write(battery / "status", "Charging")
    write(battery / "voltage_now", 17_123_000)
    write(battery / "current_now", -1_500_000)
    write(battery / "charge_full_design", 3_572_000)
    write(battery / "charge_full", 3_400_000)
    write(battery / "cycle_count", 12)

    write(supplies / "ACAD" / "type", "Mains")
    write(supplies / "ACAD" / "online", 1)

    dmi = root / "class" / "dmi" / "id"
    write(dmi / "bios_vendor", "INSYDE Corp.")
    write(dmi / "bios_version", "03.05")
    write(dmi / "bios_date", "03/29/2024")

    write(root / "class" / "hwmon" / "hwmon0" / "name", "acpitz")
    write(root / "class" / "hwmon" / "hwmon0" / "temp1_input", 99_000)
    ec = root / "class" / "hwmon" / "hwmon3"
    write(ec / "name", "cros_ec")
    write(ec / "fan1_input", 2100)
    write(ec / "temp1_input", 45_500)
    write(ec / "temp1_label", "cpu")
    write(ec / "temp2_input", 30_000)

    typec = root / "class" / "typec"
    write(typec / "port0" / "power_role", "source [sink]")
    (typec / "port0-partner").mkdir(parents=True)
    write(typec / "port1" / "power_role", "[source] sink")

    psy = supplies / "ucsi-source-psy-USBC000:001"
    write(psy / "online", 1)
    write(psy / "usb_type", "C [PD] PD_PPS")
    write(psy / "voltage_now", 20_000_000)
    write(psy / "voltage_max", 20_000_000)
    write(psy / "current_now", 3_000_000)
    write(psy / "current_max", 3_250_000)
    return root


class TestParsers:
    """Test framework_tool output parsing."""

    def test_charge_limit(self):
        assert parse_charge_limit("Minimum 0%, Maximum 80%") == 80
        assert parse_charge_limit("garbage") is None

    def test_privacy(self):
        assert parse_privacy(TOOL_OUTPUT["--privacy"]) == (True, False)
        assert parse_privacy("") == (False, False)

    def test_fp_brightness(self):
        assert parse_fp_brightness(TOOL_OUTPUT["--fp-brightness"]) == (40, FpLedBrightnessLevel.MEDIUM)
        assert parse_fp_brightness("Brightness: 55%") == (55, None)
        assert parse_fp_brightness("Requested: Custom\nBrightness: 70%") == (70, None)

    def test_keyboard_brightness(self):
        assert parse_keyboard_brightness("Keyboard backlight: 30%") == 30
        assert parse_keyboard_brightness("unsupported") is None

    def test_selected_option(self):
        assert selected_option("source [sink]") == "sink"
        assert selected_option("PD") == "PD"
        assert selected_option(None) is None


class TestSetters:
    """Test writes through framework_tool."""

    def test_set_max_charge_limit(self, fake_tool):
        FrameworkBackend().set_max_charge_limit(90)
        assert fake_tool.commands == [["framework_tool", "--charge-limit", "90"]]

    def test_custom_tool_path(self, fake_tool):
        FrameworkBackend(tool="/opt/framework_tool").set_fingerprint_brightness(55)
        assert fake_tool.commands == [["/opt/framework_tool", "--fp-brightness", "55"]]

    def test_invalid_version_requires_firmware_update(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", FakeTool(error=subprocess.CalledProcessError(
            1, ["framework_tool"], output="", stderr="EC Response: InvalidVersion",
        )))

        with pytest.raises(FirmwareUpdateRequiredError) as exc_info:
            FrameworkBackend().set_fingerprint_brightness(40)

        assert exc_info.value.user_message == "Couldn't set fingerprint brightness. Please, update your BIOS."

    def test_invalid_version_with_zero_exit_status(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", lambda command, **kwargs: subprocess.CompletedProcess(
            command, 0, stdout="Error: InvalidVersion\n", stderr="",
        ))

        with pytest.raises(FirmwareUpdateRequiredError):
            FrameworkBackend().set_max_charge_limit(80)

    def test_failure(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", FakeTool(error=subprocess.CalledProcessError(
            1, ["framework_tool"], stderr="Permission denied",
        )))

        with pytest.raises(HardwareError) as exc_info:
            FrameworkBackend().set_max_charge_limit(80)

        assert exc_info.value.user_message == "Couldn't set max charge limit."

    def test_missing_tool(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", FakeTool(error=FileNotFoundError("framework_tool")))

        with pytest.raises(HardwareToolNotFoundError):
            FrameworkBackend().set_max_charge_limit(80)

    def test_timeout(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", FakeTool(
            error=subprocess.TimeoutExpired(["framework_tool"], 5)
        ))

        with pytest.raises(HardwareError) as exc_info:
            FrameworkBackend().set_max_charge_limit(80)

        assert "did not respond" in exc_info.value.user_message

    def test_keyboard_failure_is_only_logged(self, monkeypatch, caplog):
        monkeypatch.setattr(subprocess, "run", FakeTool(error=subprocess.CalledProcessError(1, ["framework_tool"])))

        FrameworkBackend().set_keyboard_brightness(50)

        assert "keyboard brightness" in caplog.text


class TestProbe:
    """Test fingerprint capability detection."""

    def test_requested_level_means_percentage(self, fake_tool):
        assert FrameworkBackend().probe_fingerprint_capability() == FpLedBrightnessCapability.PERCENTAGE

    def test_brightness_only_means_level(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", FakeTool(outputs={"--fp-brightness": "Brightness: 55%"}))
        assert FrameworkBackend().probe_fingerprint_capability() == FpLedBrightnessCapability.LEVEL

    def test_probe_failure_raises(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", FakeTool(error=FileNotFoundError("framework_tool")))

        with pytest.raises(HardwareError):
            FrameworkBackend().probe_fingerprint_capability()


class TestPoll:
    """Test reading a full snapshot."""

    def test_poll(self, fake_tool, sysfs):
        snapshot = FrameworkBackend(sysfs_root=sysfs).poll()

        assert snapshot.charge_percentage == 76
        assert snapshot.is_charging
        assert snapshot.is_ac_connected
        assert snapshot.charging_status == "Charging"
        assert snapshot.charger_voltage == 17_123
        assert snapshot.charger_current == 1_500
        assert snapshot.design_capacity == 3_572
        assert snapshot.last_full_charge_capacity == 3_400
        assert snapshot.cycle_count == 12

        assert snapshot.max_charge_limit == 80
        assert snapshot.is_microphone_enabled
        assert not snapshot.is_camera_enabled
        assert snapshot.fp_brightness_percentage == 40
        assert snapshot.fp_brightness_level == FpLedBrightnessLevel.MEDIUM
        assert snapshot.kb_brightness_percentage == 30

        assert snapshot.smbios_vendor == "INSYDE Corp."
        assert snapshot.smbios_version == "03.05"
        assert snapshot.smbios_release_date == "03/29/2024"

    def test_poll_thermals(self, fake_tool, sysfs):
        snapshot = FrameworkBackend(sysfs_root=sysfs).poll()

        assert snapshot.fan_rpm == [2100]
        assert [(t.name, t.celsius) for t in snapshot.temperatures] == [("cpu", 45.5), ("temp2", 30.0)]

    def test_poll_pd_ports(self, fake_tool, sysfs):
        ports = FrameworkBackend(sysfs_root=sysfs).poll().pd_ports

        assert ports.right_back.role == PdPortRole.SINK
        assert ports.right_back.dualrole == "DRP"
        assert ports.right_back.charging_type == "PD"
        assert ports.right_back.max_power == 65
        assert ports.right_back.voltage_now == 20.0
        assert ports.right_back.current_limit == 3000
        assert ports.right_back.current_max == 3250

        assert ports.right_front.role == PdPortRole.DISCONNECTED
        assert ports.left_front is None
        assert ports.left_back is None

    def test_poll_without_tool(self, monkeypatch, sysfs):
        monkeypatch.setattr(subprocess, "run", FakeTool(error=FileNotFoundError("framework_tool")))

        snapshot = FrameworkBackend(sysfs_root=sysfs).poll()

        assert snapshot.charge_percentage == 76
        assert snapshot.max_charge_limit is None
        assert snapshot.fp_brightness_percentage is None

    def test_poll_empty_sysfs(self, fake_tool, tmp_path):
        snapshot = FrameworkBackend(sysfs_root=tmp_path).poll()

        assert snapshot.charge_percentage is None
        assert not snapshot.is_ac_connected
        assert snapshot.fan_rpm == []
        assert snapshot.pd_ports.right_back is None
        assert snapshot.max_charge_limit == 80

"""Snapshot command - print one telemetry poll without the TUI."""

import logging
import sys

import click

from fwtui.exceptions import FwTuiError, format_error_for_display
from fwtui.hardware import DemoBackend, FrameworkBackend
from fwtui.models import AppConfig, Snapshot

logger = logging.getLogger(__name__)


def _format_snapshot(snapshot: Snapshot) -> str:
    def value(v, suffix=""):
        return "N/A" if v is None else f"{v}{suffix}"

    loss = snapshot.capacity_loss_percentage
    per_cycle = snapshot.capacity_loss_per_cycle
    lines = [
        f"Charge level:        {value(snapshot.charge_percentage, '%')}",
        f"Status:              {snapshot.charging_status}",
        f"Max charge limit:    {value(snapshot.max_charge_limit, '%')}",
        f"Charger voltage:     {value(snapshot.charger_voltage, ' mV')}",
        f"Charger current:     {value(snapshot.charger_current, ' mA')}",
        f"Cycle count:         {value(snapshot.cycle_count)}",
        f"Capacity loss:       {'N/A' if loss is None else f'{loss:.2f}%'}",
        f"Loss per cycle:      {'N/A' if per_cycle is None else f'{per_cycle:.3f}%'}",
        f"Microphone:          {'Connected' if snapshot.is_microphone_enabled else 'Disconnected'}",
        f"Camera:              {'Connected' if snapshot.is_camera_enabled else 'Disconnected'}",
        f"Fingerprint LED:     {value(snapshot.fp_brightness_percentage, '%')}",
        f"Keyboard backlight:  {value(snapshot.kb_brightness_percentage, '%')}",
        f"BIOS:                {value(snapshot.smbios_vendor)} {value(snapshot.smbios_version)} "
        f"({value(snapshot.smbios_release_date)})",
    ]
    for index, rpm in enumerate(snapshot.fan_rpm, start=1):
        lines.append(f"Fan {index}:               {rpm} RPM")
    for reading in snapshot.temperatures:
        lines.append(f"{reading.name + ':':<21}{value(reading.celsius, ' °C')}")
    return "\n".join(lines)


@click.command()
@click.option('--demo', is_flag=True, help='Use simulated hardware')
@click.option('--json', 'as_json', is_flag=True, help='Print the snapshot as JSON')
def snapshot(demo: bool, as_json: bool):
    """
    Print the current hardware state once.

    \b
    Examples:
      fwtui snapshot
      fwtui snapshot --json
      fwtui snapshot --demo
    """
    try:
        if demo:
            backend = DemoBackend()
        else:
            backend = FrameworkBackend(tool=AppConfig.load_or_create().framework_tool)
        result = backend.poll()
    except FwTuiError as e:
        logger.error(f"Snapshot failed: {e.technical_message}")
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(recovery_hint, err=True)
        sys.exit(1)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
    else:
        click.echo(_format_snapshot(result))

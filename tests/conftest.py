"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from fwtui.core import DashboardController
from fwtui.hardware import DemoBackend
from fwtui.models import AppConfig, FpLedBrightnessCapability, Snapshot


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def demo_backend():
    """Simulated hardware with percentage-capable fingerprint LED."""
    return DemoBackend()


@pytest.fixture
def config_path(temp_dir):
    return temp_dir / "config.json"


@pytest.fixture
def controller(demo_backend, config_path):
    """Controller over the demo backend with one snapshot polled."""
    controller = DashboardController(
        backend=demo_backend,
        config=AppConfig(),
        config_path=config_path,
    )
    controller.refresh()
    controller.registry.sync(controller.snapshot)
    return controller


@pytest.fixture
def level_controller(config_path):
    """Controller whose fingerprint LED only supports three levels."""
    backend = DemoBackend(fp_capability=FpLedBrightnessCapability.LEVEL)
    controller = DashboardController(backend=backend, config=AppConfig(), config_path=config_path)
    controller.refresh()
    controller.registry.sync(controller.snapshot)
    return controller


@pytest.fixture
def snapshot():
    """A fully populated snapshot."""
    return Snapshot(
        charge_percentage=75,
        is_charging=True,
        is_ac_connected=True,
        charger_voltage=17_000,
        charger_current=2_500,
        design_capacity=4000,
        last_full_charge_capacity=3800,
        cycle_count=100,
        max_charge_limit=80,
        fp_brightness_percentage=40,
        kb_brightness_percentage=50,
    )

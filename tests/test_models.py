"""Unit tests for Pydantic models."""

import json

import pytest
from pydantic import ValidationError

from fwtui.models import (
    AppConfig,
    PdPortInfo,
    PdPortRole,
    PdPortsInfo,
    Snapshot,
    Theme,
    ThemeVariant,
)


class TestSnapshot:
    """Test Snapshot derived values."""

    def test_empty_snapshot(self):
        snapshot = Snapshot()
        assert snapshot.charge_percentage is None
        assert snapshot.capacity_loss_percentage is None
        assert snapshot.capacity_loss_per_cycle is None
        assert snapshot.is_capacity_loss_normal is None
        assert snapshot.pd_ports == PdPortsInfo()
        assert snapshot.temperatures == []

    def test_capacity_loss(self, snapshot):
        assert snapshot.capacity_loss_percentage == pytest.approx(5.0)
        assert snapshot.capacity_loss_per_cycle == pytest.approx(0.05)
        assert snapshot.is_capacity_loss_normal is False

    def test_normal_capacity_loss(self):
        snapshot = Snapshot(design_capacity=4000, last_full_charge_capacity=3920, cycle_count=50)
        assert snapshot.capacity_loss_per_cycle == pytest.approx(0.04)
        assert snapshot.is_capacity_loss_normal is True

    def test_no_cycles(self):
        snapshot = Snapshot(design_capacity=4000, last_full_charge_capacity=4000, cycle_count=0)
        assert snapshot.capacity_loss_percentage == 0
        assert snapshot.capacity_loss_per_cycle is None

    @pytest.mark.parametrize(
        "is_charging, is_ac_connected, expected",
        [
            (True, True, "Charging"),
            (False, True, "Fully charged"),
            (False, False, "Discharging"),
            (True, False, "Unknown"),
        ],
    )
    def test_charging_status(self, is_charging, is_ac_connected, expected):
        snapshot = Snapshot(is_charging=is_charging, is_ac_connected=is_ac_connected)
        assert snapshot.charging_status == expected

    def test_charger_units(self, snapshot):
        assert snapshot.charger_voltage_volts == pytest.approx(17.0)
        assert snapshot.charger_current_amps == pytest.approx(2.5)

    def test_percentages_are_validated(self):
        with pytest.raises(ValidationError):
            Snapshot(max_charge_limit=101)
        with pytest.raises(ValidationError):
            Snapshot(kb_brightness_percentage=-1)

    def test_snapshot_is_immutable(self, snapshot):
        with pytest.raises(ValidationError):
            snapshot.max_charge_limit = 60

        updated = snapshot.model_copy(update={"max_charge_limit": 60})
        assert updated.max_charge_limit == 60
        assert snapshot.max_charge_limit == 80


class TestPdPorts:
    """Test PD port mapping."""

    def test_from_indexed(self):
        sink = PdPortInfo(role=PdPortRole.SINK, max_power=60)
        ports = PdPortsInfo.from_indexed({0: sink, 3: PdPortInfo()})

        assert ports.right_back == sink
        assert ports.right_front is None
        assert ports.left_front is None
        assert ports.left_back.role == PdPortRole.DISCONNECTED

    def test_from_indexed_ignores_unknown_ports(self):
        ports = PdPortsInfo.from_indexed({7: PdPortInfo(role=PdPortRole.SOURCE)})
        assert ports == PdPortsInfo()

    def test_port_names_are_not_fields(self):
        assert "PORT_NAMES" not in PdPortsInfo.model_fields


class TestTheme:
    """Test theme variants and palettes."""

    def test_next_wraps(self):
        assert ThemeVariant.FRAMEWORK.next() == ThemeVariant.ALUCARD
        assert ThemeVariant.MONOKAI_PRO_LIGHT.next() == ThemeVariant.FRAMEWORK

    def test_previous_wraps(self):
        assert ThemeVariant.FRAMEWORK.previous() == ThemeVariant.MONOKAI_PRO_LIGHT
        assert ThemeVariant.ALUCARD.previous() == ThemeVariant.FRAMEWORK

    def test_full_cycle(self):
        variant = ThemeVariant.FRAMEWORK
        seen = []
        for _ in ThemeVariant:
            seen.append(variant)
            variant = variant.next()
        assert variant == ThemeVariant.FRAMEWORK
        assert len(set(seen)) == len(ThemeVariant)

    @pytest.mark.parametrize("variant", list(ThemeVariant))
    def test_every_variant_has_a_palette(self, variant):
        theme = Theme.from_variant(variant)
        assert theme.variant == variant
        assert theme.border.startswith("#")
        assert theme.border_active.startswith("#")

    def test_framework_palette(self):
        theme = Theme.from_variant(ThemeVariant.FRAMEWORK)
        assert theme.background == "#000000"
        assert theme.brightness_bar == theme.border_active


class TestAppConfig:
    """Test AppConfig model."""

    def test_defaults(self):
        config = AppConfig()
        assert config.theme == ThemeVariant.FRAMEWORK
        assert config.tick_interval_ms == 1000
        assert config.tick_interval == 1.0
        assert config.framework_tool == "framework_tool"

    @pytest.mark.parametrize("value", [249, 10_001, 0])
    def test_tick_interval_bounds(self, value):
        with pytest.raises(ValidationError):
            AppConfig(tick_interval_ms=value)

    def test_with_tick_interval_validates(self):
        config = AppConfig(theme=ThemeVariant.DRACULA)

        assert config.with_tick_interval(250).tick_interval_ms == 250
        assert config.with_tick_interval(250).theme == ThemeVariant.DRACULA
        with pytest.raises(ValidationError):
            config.with_tick_interval(100)

    def test_with_theme(self):
        config = AppConfig().with_theme(ThemeVariant.GITHUB_LIGHT)
        assert config.theme == ThemeVariant.GITHUB_LIGHT

    def test_load_or_create_creates_file(self, config_path):
        config = AppConfig.load_or_create(config_path)

        assert config == AppConfig()
        assert json.loads(config_path.read_text())["theme"] == "framework"

    def test_save_and_load(self, config_path):
        AppConfig(theme=ThemeVariant.CATPPUCCIN_MOCHA, tick_interval_ms=2000).save(config_path)

        loaded = AppConfig.load_or_create(config_path)
        assert loaded.theme == ThemeVariant.CATPPUCCIN_MOCHA
        assert loaded.tick_interval == 2.0

    def test_corrupted_file_falls_back_to_defaults(self, config_path):
        config_path.write_text("{not json")

        assert AppConfig.load_or_create(config_path) == AppConfig()
        assert config_path.read_text() == "{not json"

"""Point-in-time device telemetry."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .enums import FpLedBrightnessLevel, PdPortRole

# Capacity loss per charge cycle that is still considered normal wear (percent)
NORMAL_CAPACITY_LOSS_MIN = 0.025
NORMAL_CAPACITY_LOSS_MAX = 0.048


class PdPortInfo(BaseModel):
    """State of a single USB-C power delivery port."""

    model_config = ConfigDict(frozen=True)

    role: PdPortRole = PdPortRole.DISCONNECTED
    dualrole: str | None = Field(default=None, description='"DRP" or "Charger"')
    charging_type: str | None = None
    max_power: int | None = Field(default=None, description="Negotiated power (W)")
    voltage_now: float | None = Field(default=None, description="Volts")
    voltage_max: float | None = Field(default=None, description="Volts")
    current_limit: int | None = Field(default=None, description="mA")
    current_max: int | None = Field(default=None, description="mA")


class PdPortsInfo(BaseModel):
    """The four Type-C ports of a Framework laptop."""

    model_config = ConfigDict(frozen=True)

    right_back: PdPortInfo | None = None
    right_front: PdPortInfo | None = None
    left_front: PdPortInfo | None = None
    left_back: PdPortInfo | None = None

    # EC port index -> field
    PORT_NAMES: ClassVar[tuple[str, ...]] = ("right_back", "right_front", "left_front", "left_back")

    @classmethod
    def from_indexed(cls, ports: dict[int, PdPortInfo]) -> "PdPortsInfo":
        """Build from EC port indices (0 = right back ... 3 = left back)."""
        return cls(**{
            cls.PORT_NAMES[index]: info
            for index, info in ports.items()
            if 0 <= index < len(cls.PORT_NAMES)
        })


class TemperatureReading(BaseModel):
    """A named temperature sensor value."""

    model_config = ConfigDict(frozen=True)

    name: str
    celsius: float | None = None


class Snapshot(BaseModel):
    """An immutable read of device state at one instant.

    Optional fields are None when the value could not be read.
    """

    model_config = ConfigDict(frozen=True)

    # Battery
    charge_percentage: int | None = None
    is_charging: bool = False
    is_ac_connected: bool = False
    charger_voltage: int | None = Field(default=None, description="mV")
    charger_current: int | None = Field(default=None, description="mA")
    design_capacity: int | None = Field(default=None, description="mAh")
    last_full_charge_capacity: int | None = Field(default=None, description="mAh")
    cycle_count: int | None = None
    max_charge_limit: int | None = Field(default=None, ge=0, le=100)

    # Privacy switches
    is_microphone_enabled: bool = False
    is_camera_enabled: bool = False

    # Brightness
    fp_brightness_percentage: int | None = Field(default=None, ge=0, le=100)
    fp_brightness_level: FpLedBrightnessLevel | None = None
    kb_brightness_percentage: int | None = Field(default=None, ge=0, le=100)

    # Firmware
    smbios_vendor: str | None = None
    smbios_version: str | None = None
    smbios_release_date: str | None = None

    # Ports and thermals
    pd_ports: PdPortsInfo = Field(default_factory=PdPortsInfo)
    fan_rpm: list[int] = Field(default_factory=list)
    temperatures: list[TemperatureReading] = Field(default_factory=list)

    @property
    def capacity_loss_percentage(self) -> float | None:
        if (
            self.design_capacity is None
            or self.last_full_charge_capacity is None
            or self.design_capacity <= 0
        ):
            return None
        loss = self.design_capacity - self.last_full_charge_capacity
        return loss / self.design_capacity * 100

    @property
    def capacity_loss_per_cycle(self) -> float | None:
        loss = self.capacity_loss_percentage
        if loss is None or not self.cycle_count:
            return None
        return loss / self.cycle_count

    @property
    def is_capacity_loss_normal(self) -> bool | None:
        per_cycle = self.capacity_loss_per_cycle
        if per_cycle is None:
            return None
        return per_cycle <= NORMAL_CAPACITY_LOSS_MAX

    @property
    def charging_status(self) -> str:
        match (self.is_charging, self.is_ac_connected):
            case (True, True):
                return "Charging"
            case (False, True):
                return "Fully charged"
            case (False, False):
                return "Discharging"
            case _:
                return "Unknown"

    @property
    def charger_voltage_volts(self) -> float | None:
        return None if self.charger_voltage is None else self.charger_voltage / 1000

    @property
    def charger_current_amps(self) -> float | None:
        return None if self.charger_current is None else self.charger_current / 1000

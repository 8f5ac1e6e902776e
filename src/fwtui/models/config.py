"""Application configuration model."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from fwtui.model_manager.persistence import PydanticPersistence

from .enums import ThemeVariant

logger = logging.getLogger(__name__)

MIN_TICK_INTERVAL_MS = 250
MAX_TICK_INTERVAL_MS = 10_000
DEFAULT_TICK_INTERVAL_MS = 1000


def default_config_path() -> Path:
    """Location of the config file (~/.fwtui/config.json)."""
    return Path.home() / ".fwtui" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    theme: ThemeVariant = Field(
        default=ThemeVariant.FRAMEWORK, description="Colour theme of the dashboard"
    )
    tick_interval_ms: int = Field(
        default=DEFAULT_TICK_INTERVAL_MS,
        ge=MIN_TICK_INTERVAL_MS,
        le=MAX_TICK_INTERVAL_MS,
        description="How often hardware telemetry is refreshed (milliseconds)",
    )
    framework_tool: str = Field(
        default="framework_tool",
        description="Name or path of the framework_tool executable used to talk to the EC",
    )

    @property
    def tick_interval(self) -> float:
        """Refresh period in seconds."""
        return self.tick_interval_ms / 1000

    @classmethod
    def load_or_create(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file, creating it with defaults if missing.

        A corrupted file is left untouched and defaults are used instead.

        Args:
            path: Path to config file. If None, uses ~/.fwtui/config.json.
        """
        if path is None:
            path = default_config_path()

        return PydanticPersistence.ensure_valid_or_create(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()

        PydanticPersistence.save_json(self, path)
        logger.info(f"Saved configuration to {path}")

    def with_theme(self, theme: ThemeVariant) -> "AppConfig":
        """Return a copy using another theme."""
        return self.model_copy(update={"theme": theme})

    def with_tick_interval(self, tick_interval_ms: int) -> "AppConfig":
        """Return a copy with another refresh interval, validated."""
        return AppConfig.model_validate(
            {**self.model_dump(), "tick_interval_ms": tick_interval_ms}
        )

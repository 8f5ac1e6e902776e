"""Errors raised while loading or validating ``~/.fwtui/config.json``.

Both are recoverable: AppConfig.load_or_create falls back to defaults and
leaves the broken file alone so the user can fix it.
"""

import re
from dataclasses import dataclass
from typing import Any

from .base import FwTuiError

# Position in pydantic's JSON parse errors, e.g. "line 3 column 17"
_POSITION_RE = re.compile(r"line \d+ column \d+")


class ConfigurationError(FwTuiError):
    """The configuration could not be loaded or saved."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is empty or not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        position = _POSITION_RE.search(parse_error)
        where = f" at {position.group(0)}" if position else ""

        super().__init__(
            f"Configuration file is not valid JSON{where}",
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=(
                f"Fix {file_path} by hand, or delete it: fwtui writes a fresh "
                "one with default settings on the next start."
            ),
        )
        self.file_path = file_path
        self.parse_error = parse_error


@dataclass(frozen=True)
class InvalidSetting:
    """One rejected config value.

    ``constraint`` describes what the field accepts, e.g.
    "must be between 250 and 10000", when the model declares it.
    """

    field: str
    value: Any
    reason: str
    constraint: str | None = None

    def describe(self) -> str:
        line = f"{self.field} = {self.value!r}: {self.reason}"
        if self.constraint:
            line += f" ({self.constraint})"
        return line


class ConfigValidationError(ConfigurationError):
    """The config file parsed, but one or more values are rejected."""

    def __init__(self, settings: list[InvalidSetting], file_path: str | None = None):
        if not settings:
            raise ValueError("ConfigValidationError needs at least one invalid setting")

        if len(settings) == 1:
            user_msg = f"Invalid setting '{settings[0].field}': {settings[0].reason}"
        else:
            names = ", ".join(setting.field for setting in settings)
            user_msg = f"{len(settings)} invalid settings: {names}"

        hints = [f"{s.field} {s.constraint}" for s in settings if s.constraint]
        target = file_path or "the config file"
        hints.append(f"Edit {target} or use 'fwtui config set'.")

        super().__init__(
            user_msg,
            technical_message="Config validation failed: "
            + "; ".join(setting.describe() for setting in settings),
            recoverable=True,
            recovery_hint="\n".join(hints),
        )
        self.settings = list(settings)
        self.file_path = file_path

    @property
    def fields(self) -> list[str]:
        return [setting.field for setting in self.settings]

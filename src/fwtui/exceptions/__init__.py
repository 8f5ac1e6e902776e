"""
Custom exception hierarchy for fwtui.

## Exception Hierarchy

```
FwTuiError (base)
├── HardwareError
│   ├── FirmwareUpdateRequiredError
│   └── HardwareToolNotFoundError
├── EventLoopClosedError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Hardware errors are recoverable: the dashboard shows them in the message
bar until dismissed with Esc. EventLoopClosedError is fatal and ends the
application.

See `fwtui.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import FwTuiError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError, InvalidSetting
from .event_loop import EventLoopClosedError
from .handlers import (
    ErrorContext,
    describe_field_constraint,
    format_error_for_display,
    handle_errors,
    wrap_hardware_error,
    wrap_pydantic_error,
)
from .hardware import FirmwareUpdateRequiredError, HardwareError, HardwareToolNotFoundError

__all__ = [
    # Base
    "FwTuiError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "InvalidSetting",
    # Event loop
    "EventLoopClosedError",
    # Hardware
    "FirmwareUpdateRequiredError",
    "HardwareError",
    "HardwareToolNotFoundError",
    # Handlers
    "ErrorContext",
    "describe_field_constraint",
    "format_error_for_display",
    "handle_errors",
    "wrap_hardware_error",
    "wrap_pydantic_error",
]

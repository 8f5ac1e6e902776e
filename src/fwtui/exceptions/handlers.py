"""
Centralized error handling utilities.

The dashboard translates errors in layers:

```
┌─────────────────────────────────────┐
│  USER LAYER (CLI/TUI)               │
│  - Shows error.user_message         │
│  - Esc dismisses the message bar    │
└─────────────────────────────────────┘
                  ↑
                  │ FwTuiError
                  │
┌─────────────────────────────────────┐
│  CONTROLLER                         │
│  - Executes commands                │
│  - Converts to FwTuiError           │
└─────────────────────────────────────┘
                  ↑
                  │ CalledProcessError, OSError, ...
                  │
┌─────────────────────────────────────┐
│  HARDWARE (framework_tool, sysfs)   │
└─────────────────────────────────────┘
```

### Handling Patterns

| Pattern | Code |
|---------|------|
| Show error to user, continue | `@handle_errors(operation_name="set charge limit", user_notification=self.show_error, re_raise=False)` |
| Log and re-raise | `@handle_errors(operation_name="poll", re_raise=True)` |
| Critical section with auto-logging | `with ErrorContext("start event loop"): ...` |
"""

import logging
from enum import Enum
from functools import wraps
from typing import Callable, Optional, TypeVar

from .base import FwTuiError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError, InvalidSetting
from .hardware import FirmwareUpdateRequiredError, HardwareError, HardwareToolNotFoundError


logger = logging.getLogger(__name__)

T = TypeVar('T')

# Marker printed by framework_tool when the EC rejects a host command
INVALID_VERSION_MARKER = "InvalidVersion"


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator for consistent error handling.

    Args:
        operation_name: Name of the operation for logging (e.g., "set charge limit")
        user_notification: Optional callback to notify user (e.g., controller.show_error)
        fallback_value: Value to return if error occurs and re_raise=False
        re_raise: Whether to re-raise the exception after handling
        log_level: Logging level for the error (default: ERROR)

    Returns:
        Decorated function
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except FwTuiError as e:
                logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")

                if user_notification:
                    user_notification(e.user_message)

                if re_raise:
                    raise
                return fallback_value

            except Exception as e:
                logger.log(
                    log_level,
                    f"Unexpected error during {operation_name}: {e}",
                    exc_info=True
                )

                if user_notification:
                    user_notification(f"Error: {e}")

                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("probe fingerprint capability", re_raise=False) as ctx:
            capability = backend.probe_fingerprint_capability()

        if ctx.error:
            capability = FpLedBrightnessCapability.LEVEL
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, FwTuiError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return not self.re_raise


def describe_field_constraint(model_type: Optional[type], field: str) -> Optional[str]:
    """
    Describe what a model field accepts, from its declaration.

    Bounds come from ``Field(ge=..., le=...)``; enum fields list their values.

    Returns:
        e.g. "must be between 250 and 10000", or None if the field is unconstrained
    """
    if model_type is None:
        return None
    info = getattr(model_type, "model_fields", {}).get(field)
    if info is None:
        return None

    low = next((m.ge for m in info.metadata if getattr(m, "ge", None) is not None), None)
    high = next((m.le for m in info.metadata if getattr(m, "le", None) is not None), None)
    if low is not None and high is not None:
        return f"must be between {low} and {high}"
    if low is not None:
        return f"must be at least {low}"
    if high is not None:
        return f"must be at most {high}"

    annotation = info.annotation
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return "must be one of: " + ", ".join(str(member.value) for member in annotation)
    return None


def wrap_pydantic_error(
    error: Exception,
    file_path: str,
    model_type: Optional[type] = None,
) -> ConfigurationError:
    """
    Convert a failed model validation into a configuration error.

    Args:
        error: Usually a pydantic ValidationError
        file_path: The file that was being loaded
        model_type: The model that was validated; used to describe field constraints

    Returns:
        ConfigFileInvalidError for unparsable JSON, ConfigValidationError otherwise
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError):
        return ConfigFileInvalidError(file_path, str(error))

    details = error.errors()
    for detail in details:
        if detail["type"] == "json_invalid":
            return ConfigFileInvalidError(file_path, detail["msg"].removeprefix("Invalid JSON: "))

    settings = []
    for detail in details:
        location = [str(part) for part in detail.get("loc", ())]
        settings.append(InvalidSetting(
            field=".".join(location) or "<root>",
            value=detail.get("input"),
            reason=detail.get("msg", "validation failed"),
            constraint=describe_field_constraint(model_type, location[0]) if location else None,
        ))
    return ConfigValidationError(settings, file_path)


def wrap_hardware_error(error: Exception, feature: str) -> FwTuiError:
    """
    Convert low-level tool and I/O errors to fwtui exceptions.

    The EC answers commands it does not understand with an
    ``InvalidVersion`` status; those become FirmwareUpdateRequiredError.

    Args:
        error: The original exception (CalledProcessError, OSError, ...)
        feature: Human readable name of the setting, e.g. "max charge limit"

    Returns:
        A HardwareError with appropriate type and message
    """
    if isinstance(error, FwTuiError):
        return error

    if isinstance(error, FileNotFoundError) and error.filename:
        return HardwareToolNotFoundError(str(error.filename))

    details = str(error)
    output = getattr(error, "output", None) or ""
    stderr = getattr(error, "stderr", None) or ""
    if isinstance(output, bytes):
        output = output.decode(errors="replace")
    if isinstance(stderr, bytes):
        stderr = stderr.decode(errors="replace")
    combined = " ".join(part for part in (details, output, stderr) if part)

    if INVALID_VERSION_MARKER in combined:
        return FirmwareUpdateRequiredError(feature, original_error=combined)

    return HardwareError(
        user_message=f"Couldn't set {feature}.",
        technical_message=f"Failed to set {feature}: {combined}",
        operation=f"set {feature}",
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, FwTuiError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None

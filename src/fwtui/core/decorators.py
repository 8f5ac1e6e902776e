"""Decorators for the dashboard controller."""

from functools import wraps

from fwtui.exceptions import handle_errors as _handle_errors


def report_errors(operation_name: str):
    """
    Decorator for controller methods that wraps the centralized error handler.

    - Uses self.show_error for user notifications
    - Doesn't re-raise exceptions (keeps the dashboard running)
    - Returns None on error

    Fatal errors (EventLoopClosedError) never pass through methods
    decorated with this.

    Example:
        @report_errors("set max charge limit")
        def _set_max_charge_limit(self, value):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            handler = _handle_errors(
                operation_name=operation_name,
                user_notification=self.show_error,
                re_raise=False,
                fallback_value=None
            )
            return handler(func)(self, *args, **kwargs)
        return wrapper
    return decorator

"""Textual user interface."""

from .app import FwTuiApp

__all__ = ["FwTuiApp"]

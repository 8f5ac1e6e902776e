"""Hardware backends."""

from .demo import DemoBackend
from .framework import FrameworkBackend
from .protocols import HardwareBackend

__all__ = ["DemoBackend", "FrameworkBackend", "HardwareBackend"]

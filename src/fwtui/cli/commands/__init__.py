"""CLI commands for fwtui."""

from .config import config
from .snapshot import snapshot

__all__ = ["config", "snapshot"]

"""fwtui: terminal dashboard for Framework laptop hardware."""

__version__ = "0.1.0"

__all__ = ["__version__"]

"""Air-quality baseline tracking, spike detection and pollution signature matching."""

__version__ = "0.1.0"

__all__ = ["__version__"]
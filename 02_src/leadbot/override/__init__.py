"""Human takeover tracking."""

from .tracker import OverrideTracker

__all__ = ["OverrideTracker"]

"""Utility modules for mbta-subway."""

from .matching import suggest_stop_names

__all__ = ["suggest_stop_names"]

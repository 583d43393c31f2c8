"""MBTA Subway Package

A Python package for exploring MBTA subway routes, stops and transfers,
and for finding the routes that connect two stops, from the command line.
"""

__version__ = "0.1.0"

from .core.client import MbtaClient
from .core.models import Connection, MbtaConfig, Stop, SubwayRoute

__all__ = ["Connection", "MbtaClient", "MbtaConfig", "Stop", "SubwayRoute"]

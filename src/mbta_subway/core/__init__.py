"""Core subway route and stop functionality."""

from .client import MbtaClient
from .exceptions import (
    FetchError,
    MbtaSubwayError,
    StopNotFoundError,
    ValidationError,
)
from .index import OrderedSet, RouteAdjacency, StopIndex, StopRecord, build_stop_index
from .models import (
    Connection,
    MbtaConfig,
    RouteStopCount,
    Stop,
    SubwayRoute,
    TransferStation,
)
from .queries import (
    collect_stop_counts,
    find_route_by_stop_count,
    find_transfer_stations,
    list_route_names,
    list_stop_names,
)
from .routing import connect_stops, find_connection, find_predecessors

__all__ = [
    "Connection",
    "MbtaClient",
    "MbtaConfig",
    "OrderedSet",
    "RouteAdjacency",
    "RouteStopCount",
    "Stop",
    "StopIndex",
    "StopRecord",
    "SubwayRoute",
    "TransferStation",
    "build_stop_index",
    "collect_stop_counts",
    "connect_stops",
    "find_connection",
    "find_predecessors",
    "find_route_by_stop_count",
    "find_transfer_stations",
    "list_route_names",
    "list_stop_names",
    "MbtaSubwayError",
    "FetchError",
    "StopNotFoundError",
    "ValidationError",
]

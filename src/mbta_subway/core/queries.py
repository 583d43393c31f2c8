"""Aggregate queries over subway routes and stops."""

from collections.abc import Iterable, Sequence

from .index import StopIndex
from .models import RouteStopCount, SubwayRoute, TransferStation


def list_route_names(routes: Iterable[SubwayRoute]) -> list[str]:
    """Get the long names of routes, in order."""
    return [route.long_name for route in routes]


def list_stop_names(
    route_stops: Iterable[tuple[str, Iterable[str]]], unique: bool = False
) -> list[str]:
    """Get every stop name of every route, in route order.

    Args:
        route_stops: ``(route_name, stop_names)`` pairs
        unique: Keep only the first occurrence of each stop name
    """
    names: list[str] = []
    seen: set[str] = set()
    for _, stop_names in route_stops:
        for name in stop_names:
            if unique:
                if name in seen:
                    continue
                seen.add(name)
            names.append(name)
    return names


def collect_stop_counts(
    route_stops: Iterable[tuple[str, Sequence[str]]],
) -> list[RouteStopCount]:
    """Count the stops of each route, keeping route order."""
    return [
        RouteStopCount(route=route_name, stop_count=len(stop_names))
        for route_name, stop_names in route_stops
    ]


def find_route_by_stop_count(
    counts: Iterable[RouteStopCount], fewest: bool = False
) -> RouteStopCount | None:
    """Find the route with the most (or fewest) stops.

    Ties go to the first route in input order.

    Returns:
        The matching route count, or None if there are no routes
    """
    best: RouteStopCount | None = None
    for count in counts:
        if best is None:
            best = count
        elif fewest and count.stop_count < best.stop_count:
            best = count
        elif not fewest and count.stop_count > best.stop_count:
            best = count
    return best


def find_transfer_stations(index: StopIndex) -> list[TransferStation]:
    """Get every stop served by more than one route, in index order."""
    return [
        TransferStation(name=record.name, routes=list(record.routes))
        for record in index.stops.values()
        if record.is_transfer
    ]

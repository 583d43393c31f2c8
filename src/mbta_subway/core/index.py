"""Stop-to-route index and route adjacency graph."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class OrderedSet:
    """Deduplicated sequence of strings that keeps insertion order."""

    def __init__(self, items: Iterable[str] = ()):
        self._items: list[str] = []
        self._seen: set[str] = set()
        for item in items:
            self.add(item)

    def add(self, item: str) -> bool:
        """Append an item if absent. Returns True if it was added."""
        if item in self._seen:
            return False
        self._seen.add(item)
        self._items.append(item)
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedSet):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderedSet({self._items!r})"


class RouteAdjacency(Mapping[str, OrderedSet]):
    """Undirected graph of routes that share at least one stop.

    Neighbours of a route are listed in the order the shared stops were
    discovered. Routes with no neighbours have no entry.
    """

    def __init__(self) -> None:
        self._neighbors: dict[str, OrderedSet] = {}

    def connect(self, route_a: str, route_b: str) -> None:
        """Insert the edge in both directions. Self edges are ignored."""
        if route_a == route_b:
            return
        self._neighbors.setdefault(route_a, OrderedSet()).add(route_b)
        self._neighbors.setdefault(route_b, OrderedSet()).add(route_a)

    def neighbors(self, route: str) -> list[str]:
        return list(self._neighbors.get(route, ()))

    def __getitem__(self, route: str) -> OrderedSet:
        return self._neighbors[route]

    def __iter__(self) -> Iterator[str]:
        return iter(self._neighbors)

    def __len__(self) -> int:
        return len(self._neighbors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RouteAdjacency):
            return self._neighbors == other._neighbors
        return super().__eq__(other)

    def to_dict(self) -> dict[str, list[str]]:
        return {route: list(neighbors) for route, neighbors in self.items()}


@dataclass
class StopRecord:
    """A stop and the routes serving it, in processing order."""

    name: str
    routes: list[str] = field(default_factory=list)

    @property
    def is_transfer(self) -> bool:
        return len(self.routes) > 1


@dataclass
class StopIndex:
    """Stops keyed by name, plus the route adjacency graph when built."""

    stops: dict[str, StopRecord] = field(default_factory=dict)
    adjacency: RouteAdjacency | None = None

    def __contains__(self, stop_name: object) -> bool:
        return stop_name in self.stops

    def __len__(self) -> int:
        return len(self.stops)

    def routes_for(self, stop_name: str) -> list[str]:
        """Get the routes serving a stop.

        Raises:
            KeyError: If the stop is not in the index
        """
        return list(self.stops[stop_name].routes)


def build_stop_index(
    route_stops: Iterable[tuple[str, Iterable[str]]],
    build_adjacency: bool = True,
) -> StopIndex:
    """Map every stop to the routes that serve it.

    Routes and their stops are processed in the given order. When
    ``build_adjacency`` is set, each stop that is already recorded against
    other routes links the current route to each of them, so the graph is
    built in the same pass as the index.

    Args:
        route_stops: ``(route_name, stop_names)`` pairs
        build_adjacency: Whether to also build the route adjacency graph

    Returns:
        StopIndex with ``adjacency`` set only if requested
    """
    index = StopIndex(adjacency=RouteAdjacency() if build_adjacency else None)

    for route_name, stop_names in route_stops:
        for stop_name in stop_names:
            record = index.stops.get(stop_name)
            if record is None:
                record = StopRecord(name=stop_name)
                index.stops[stop_name] = record

            if not record.routes or record.routes[-1] != route_name:
                record.routes.append(route_name)

            if index.adjacency is None:
                continue
            for other_route in record.routes:
                index.adjacency.connect(other_route, route_name)

    if index.adjacency is not None:
        logger.debug(
            f"Indexed {len(index.stops)} stops, "
            f"{len(index.adjacency)} routes with transfers"
        )
    else:
        logger.debug(f"Indexed {len(index.stops)} stops")
    return index

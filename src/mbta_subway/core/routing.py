"""Route-level path finding between stops."""

import logging
from collections import deque
from collections.abc import Iterable, Mapping, Sequence

from ..utils.matching import suggest_stop_names
from .exceptions import StopNotFoundError, ValidationError
from .index import StopIndex
from .models import Connection

logger = logging.getLogger(__name__)

Adjacency = Mapping[str, Iterable[str]]


def find_predecessors(
    source: str, destination: str, adjacency: Adjacency
) -> dict[str, str]:
    """Breadth-first search from ``source`` until ``destination`` is discovered.

    The search stops as soon as the destination is reached, so the returned
    map only covers the routes visited so far. Equal endpoints are not
    special-cased; callers handle the single-route case themselves.

    Args:
        source: Route to start from
        destination: Route to reach
        adjacency: Neighbouring routes for each route

    Returns:
        Map of each discovered route to the route it was reached from, or an
        empty dict if the destination is unreachable
    """
    visited = {source}
    predecessors: dict[str, str] = {}
    queue = deque([source])

    while queue:
        current = queue.popleft()
        for neighbor in adjacency.get(current, ()):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            predecessors[neighbor] = current
            queue.append(neighbor)

            if neighbor == destination:
                return predecessors

    return {}


def reconstruct_path(
    source: str, destination: str, predecessors: Mapping[str, str]
) -> list[str]:
    """Walk predecessors back from ``destination`` to ``source``.

    Raises:
        ValueError: If the chain does not lead back to the source
    """
    path = [destination]
    current = destination
    while current != source:
        if current not in predecessors or len(path) > len(predecessors):
            raise ValueError(f"No predecessor chain from {destination} to {source}")
        current = predecessors[current]
        path.append(current)

    path.reverse()
    return path


def find_connection(
    from_routes: Sequence[str], to_routes: Sequence[str], adjacency: Adjacency
) -> list[str]:
    """Find a sequence of routes from any ``from`` route to any ``to`` route.

    Route pairs are tried in (from, to) order and the first success wins, so
    the result is the shortest path for that pair, not necessarily the
    shortest over all pairs.

    Returns:
        Routes to ride in order, or an empty list if no pair is connected
    """
    for from_route in from_routes:
        for to_route in to_routes:
            if from_route == to_route:
                return [from_route]

            predecessors = find_predecessors(from_route, to_route, adjacency)
            if not predecessors:
                continue

            path = reconstruct_path(from_route, to_route, predecessors)
            logger.debug(f"Connected {from_route} to {to_route}: {path}")
            return path

    return []


def connect_stops(index: StopIndex, from_stop: str, to_stop: str) -> Connection:
    """Find the routes linking two stops in a built index.

    Raises:
        ValidationError: If a stop name is empty or the index has no adjacency
        StopNotFoundError: If either stop is not in the index
    """
    if not from_stop or not from_stop.strip():
        raise ValidationError("Starting stop name cannot be empty")
    if not to_stop or not to_stop.strip():
        raise ValidationError("Destination stop name cannot be empty")
    if index.adjacency is None:
        raise ValidationError("Stop index was built without route adjacency")

    for stop_name in (from_stop, to_stop):
        if stop_name not in index:
            raise StopNotFoundError(
                stop_name, suggest_stop_names(stop_name, index.stops)
            )

    routes = find_connection(
        index.routes_for(from_stop), index.routes_for(to_stop), index.adjacency
    )
    if not routes:
        logger.info(f"No connecting route from {from_stop} to {to_stop}")

    return Connection(from_stop=from_stop, to_stop=to_stop, routes=routes)

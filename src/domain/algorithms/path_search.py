from __future__ import annotations

import logging
from collections import deque

from src.domain.exceptions import InvalidStation
from src.domain.models import NoPathFound, StationGraph, StationPath

logger = logging.getLogger(__name__)


def shortest_path(
    graph: StationGraph, source: str, destination: str
) -> StationPath | NoPathFound:
    """Minimum-hop path between two stations (breadth-first search).

    Every edge costs 1, so the result minimizes the number of stations
    traversed, not travel time. When several paths are equally short, the
    one found first in neighbor order wins.

    Raises InvalidStation if either key is not in the graph. Returns a
    NoPathFound value when the destination is unreachable.
    """

    for key in (source, destination):
        if key not in graph:
            raise InvalidStation(key)

    if source == destination:
        return (source,)

    # Each station enters the frontier at most once, so it is bounded by len(graph).
    frontier: deque[str] = deque([source])
    prev_by_station: dict[str, str] = {}
    visited = {source}

    while frontier:
        current = frontier.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            prev_by_station[neighbor] = current
            if neighbor == destination:
                return reconstruct_path(prev_by_station, destination=destination)
            frontier.append(neighbor)

    logger.info("No path between %r and %r", source, destination)
    return NoPathFound(source=source, destination=destination)


def reconstruct_path(prev_by_station: dict[str, str], *, destination: str) -> StationPath:
    """Walk predecessor links back from destination to the search source."""

    out = [destination]
    cur = destination
    while cur in prev_by_station:
        cur = prev_by_station[cur]
        out.append(cur)
    out.reverse()
    return tuple(out)

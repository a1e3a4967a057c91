"""Shortest-path computation using Dijkstra's algorithm.

The vertex selection is a linear scan over all locations, which keeps
the algorithm in its textbook O(V^2) form. Road maps handled here are
small enough that a priority queue buys nothing.
"""

import math
from typing import List, Optional

from ..domain.models import LocationId, NoPath, Route, RouteResult
from .road_graph import RoadGraph


def dijkstra(
    graph: RoadGraph, source: LocationId, destination: LocationId
) -> RouteResult:
    """Compute the shortest route between two locations.

    Parameters
    ----------
    graph:
        Road graph holding both locations.
    source:
        Identity of the departure location.
    destination:
        Identity of the arrival location.

    Returns
    -------
    Route or NoPath
        ``Route`` with the total distance and the location names from
        ``source`` to ``destination`` (inclusive), or ``NoPath`` when
        the destination is unreachable.

    Raises
    ------
    InvalidEndpointError
        If either identity was not issued by ``graph``.
    """
    src = graph.registry.validate(source)
    dst = graph.registry.validate(destination)

    count = graph.vertex_count
    locations = graph.locations()
    dist: List[float] = [math.inf] * count
    visited = [False] * count
    parent: List[Optional[int]] = [None] * count
    dist[src] = 0

    for _ in range(count - 1):
        u = _closest_unvisited(dist, visited)
        if u is None:
            break

        visited[u] = True

        for neighbor, weight in graph.neighbors(locations[u].id):
            v = neighbor.index
            if not visited[v] and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u

    if math.isinf(dist[dst]):
        return NoPath(source=locations[src].name, destination=locations[dst].name)

    path: List[str] = []
    current: Optional[int] = dst
    while current is not None:
        path.append(locations[current].name)
        current = parent[current]
    path.reverse()

    return Route(distance=int(dist[dst]), path=tuple(path))


def _closest_unvisited(dist: List[float], visited: List[bool]) -> Optional[int]:
    """Index of the unvisited vertex with the smallest finite distance.

    Ties go to the lowest index.
    """
    best: Optional[int] = None
    for i, d in enumerate(dist):
        if visited[i] or math.isinf(d):
            continue
        if best is None or d < dist[best]:
            best = i
    return best

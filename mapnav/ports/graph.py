"""Graph ports - Abstractions for routing over the road map.

These protocols define the contract for computing shortest paths so
that the service can be driven by any solver implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import LocationId, RouteResult
    from ..graph.road_graph import RoadGraph


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    Wraps: graph/dijkstra.py

    The solver computes optimal paths through the road graph.
    """

    def solve(
        self,
        graph: RoadGraph,
        source: LocationId,
        destination: LocationId,
    ) -> RouteResult:
        """Find the shortest path between two locations.

        Args:
            graph: The road graph.
            source: Identity of the departure location.
            destination: Identity of the arrival location.

        Returns:
            Route with distance and path, or NoPath if unreachable.
        """
        ...

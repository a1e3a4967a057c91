"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Domain result logging
- Protocol conformance for dependency injection
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import LocationId, NoPath, RouteResult
from ...graph.dijkstra import dijkstra
from ...graph.road_graph import RoadGraph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
            Route with path and distance, or NoPath if unreachable.

        Raises:
            InvalidEndpointError: If either identity is foreign to graph.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source.index, "destination": destination.index},
        )

        result = dijkstra(graph, source, destination)

        if isinstance(result, NoPath):
            self._logger.warning(
                "No route found",
                extra={"source": result.source, "destination": result.destination},
            )
            return result

        self._logger.info(
            "Route found",
            extra={
                "source": result.path[0],
                "destination": result.path[-1],
                "stops": result.num_stops,
                "distance": result.distance,
            },
        )
        return result

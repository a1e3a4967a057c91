"""Map navigation service - Core-facing contract.

This service is the single entry point the shell talks to. It resolves
location names to identities before touching the graph, so the graph
only ever sees identities it issued itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import get_config
from ..domain.errors import LocationNotFoundError
from ..domain.models import LocationId, RouteResult
from ..graph.road_graph import RoadGraph, validate_distance
from ..ports.graph import RouteSolverPort
from ..ports.rendering import MapRendererPort


def _default_graph() -> RoadGraph:
    return RoadGraph(max_locations=get_config().graph.max_locations)


@dataclass
class MapNavigationService:
    """Main service for building and querying a road map.

    Each service owns its own graph, so independent maps can coexist
    in one process.

    Attributes:
        route_solver: Computes shortest paths
        map_renderer: Formats the map for display
        graph: The road graph being built
    """

    route_solver: RouteSolverPort
    map_renderer: MapRendererPort
    graph: RoadGraph = field(default_factory=_default_graph)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_location(self, name: str) -> LocationId:
        """Register a new location.

        Raises:
            DuplicateNameError: If the name is already registered.
            CapacityExceededError: If the map is full.
        """
        identity = self.graph.add_location(name)
        self._logger.info(
            "Location added",
            extra={"location": name, "index": identity.index},
        )
        return identity

    def resolve(self, name: str) -> Optional[LocationId]:
        return self.graph.lookup(name)

    def add_road(self, source: str, destination: str, distance: int) -> None:
        """Add a bidirectional road between two named locations.

        Args:
            source: Name of one endpoint.
            destination: Name of the other endpoint.
            distance: Non-negative road length.

        Raises:
            LocationNotFoundError: If either name is not registered.
            InvalidDistanceError: If distance is negative or not an integer.
        """
        src = self._require(source)
        dst = self._require(destination)
        validate_distance(distance)

        self.graph.add_road(src, dst, distance)
        self._logger.info(
            "Road added",
            extra={"source": source, "destination": destination, "distance": distance},
        )

    def shortest_path(self, source: str, destination: str) -> RouteResult:
        """Compute the shortest route between two named locations.

        Returns:
            Route with distance and path, or NoPath if unreachable.

        Raises:
            LocationNotFoundError: If either name is not registered.
        """
        src = self._require(source)
        dst = self._require(destination)

        return self.route_solver.solve(self.graph, src, dst)

    def render_map(self) -> List[str]:
        return self.map_renderer.render(self.graph)

    def _require(self, name: str) -> LocationId:
        identity = self.graph.lookup(name)
        if identity is None:
            raise LocationNotFoundError(
                f"Location not found: {name!r}",
                name=name,
            )
        return identity

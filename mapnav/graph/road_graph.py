"""Undirected weighted road graph.

The graph owns a LocationRegistry and, for every registered index, a
growable adjacency list of Neighbor entries. Roads are always inserted
on both endpoints so the adjacency structure stays symmetric.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Dict, Iterator, List, Optional, overload

from ..domain.errors import InvalidDistanceError
from ..domain.models import Location, LocationId, Neighbor
from .registry import LocationRegistry

logger = logging.getLogger(__name__)


class NeighborView(Sequence):
    """Read-only, re-iterable view over one adjacency list.

    Most recently added roads come first, as in a prepend-built
    linked adjacency list. The view is live: roads added after it was
    created show up on the next iteration.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: List[Neighbor]) -> None:
        self._entries = entries

    def __len__(self) -> int:
        return len(self._entries)

    @overload
    def __getitem__(self, index: int) -> Neighbor: ...

    @overload
    def __getitem__(self, index: slice) -> List[Neighbor]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self)[index]
        if index < 0:
            index += len(self._entries)
        if not 0 <= index < len(self._entries):
            raise IndexError("neighbor index out of range")
        return self._entries[len(self._entries) - 1 - index]

    def __iter__(self) -> Iterator[Neighbor]:
        return reversed(self._entries)

    def __repr__(self) -> str:
        return f"NeighborView({list(self)!r})"


class RoadGraph:
    """Road map of named locations joined by bidirectional roads.

    Attributes:
        registry: The registry issuing identities for this graph
    """

    def __init__(self, max_locations: Optional[int] = None) -> None:
        self.registry = LocationRegistry(capacity=max_locations)
        self._adjacency: Dict[int, List[Neighbor]] = {}
        self._road_count = 0

    def add_location(self, name: str) -> LocationId:
        """Register a location; see LocationRegistry.add for errors."""
        identity = self.registry.add(name)
        self._adjacency[identity.index] = []
        return identity

    def add_road(
        self, source: LocationId, destination: LocationId, distance: int
    ) -> None:
        """Insert a bidirectional road between two registered locations.

        Raises:
            InvalidEndpointError: If either identity is foreign to the graph.
            InvalidDistanceError: If distance is negative or not an integer.
        """
        src = self.registry.validate(source)
        dst = self.registry.validate(destination)
        validate_distance(distance)

        self._adjacency[src].append(Neighbor(destination, distance))
        self._adjacency[dst].append(Neighbor(source, distance))
        self._road_count += 1
        logger.debug(
            "Road inserted",
            extra={"source": src, "destination": dst, "distance": distance},
        )

    def neighbors(self, identity: LocationId) -> NeighborView:
        return NeighborView(self._adjacency[self.registry.validate(identity)])

    def lookup(self, name: str) -> Optional[LocationId]:
        return self.registry.lookup(name)

    def name_of(self, identity: LocationId) -> str:
        return self.registry.name_of(identity)

    def locations(self) -> List[Location]:
        """Registered locations in identity order."""
        return list(self.registry)

    @property
    def vertex_count(self) -> int:
        return len(self.registry)

    @property
    def road_count(self) -> int:
        return self._road_count

    def __len__(self) -> int:
        return self.vertex_count

    def __contains__(self, name: object) -> bool:
        return name in self.registry


def validate_distance(distance: object) -> int:
    """Return distance unchanged if it is a non-negative integer.

    Raises:
        InvalidDistanceError: For negative, boolean or non-integer values.
    """
    if isinstance(distance, bool) or not isinstance(distance, int):
        raise InvalidDistanceError(
            f"Distance must be an integer, got {distance!r}",
            distance=distance,
        )
    if distance < 0:
        raise InvalidDistanceError(
            f"Distance must not be negative, got {distance}",
            distance=distance,
        )
    return distance

"""Immutable domain models for the map navigation system.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the road map.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Union


@dataclass(frozen=True, slots=True)
class LocationId:
    """Opaque identity of a registered location.

    Only a LocationRegistry creates these. The identity remembers which
    registry issued it, so an identity from one graph is rejected by
    another even when the raw index happens to be in range.

    Attributes:
        index: Dense zero-based insertion rank of the location
    """

    index: int
    issuer: object = field(repr=False)


@dataclass(frozen=True, slots=True)
class Location:
    """A named location on the map."""

    id: LocationId
    name: str


class Neighbor(NamedTuple):
    """One side of a road as seen from its other endpoint."""

    location: LocationId
    distance: int


@dataclass(frozen=True, slots=True)
class Route:
    """A shortest route between two locations.

    Attributes:
        distance: Total length of the route
        path: Location names from source to destination, inclusive
    """

    distance: int
    path: tuple[str, ...]

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the route."""
        return len(self.path)

    def describe(self, separator: str = " -> ") -> str:
        """Join the path into a single display string."""
        return separator.join(self.path)


@dataclass(frozen=True, slots=True)
class NoPath:
    """Query outcome when the destination cannot be reached.

    Attributes:
        source: Name of the departure location
        destination: Name of the unreachable location
    """

    source: str
    destination: str


RouteResult = Union[Route, NoPath]

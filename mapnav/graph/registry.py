"""Location registry.

Assigns every named location a dense, stable identity and enforces
name uniqueness and the configured capacity.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from ..domain.errors import (
    CapacityExceededError,
    DuplicateNameError,
    InvalidEndpointError,
)
from ..domain.models import Location, LocationId

logger = logging.getLogger(__name__)


class LocationRegistry:
    """Arena of Location records addressed by insertion index.

    Identities are never reused or reassigned; the registry only grows.

    Attributes:
        capacity: Maximum number of locations, or None for no limit
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        self.capacity = capacity
        self._locations: List[Location] = []
        self._issuer = object()

    def add(self, name: str) -> LocationId:
        """Register a new location and return its identity.

        Raises:
            CapacityExceededError: If the registry is full.
            DuplicateNameError: If the exact name is already registered.
        """
        if self.capacity is not None and len(self._locations) >= self.capacity:
            raise CapacityExceededError(
                "Maximum number of locations reached",
                capacity=self.capacity,
            )

        if self.lookup(name) is not None:
            raise DuplicateNameError(
                "Location already exists",
                name=name,
            )

        identity = LocationId(index=len(self._locations), issuer=self._issuer)
        self._locations.append(Location(id=identity, name=name))
        logger.debug(
            "Location registered",
            extra={"location": name, "index": identity.index},
        )
        return identity

    def lookup(self, name: str) -> Optional[LocationId]:
        """Find the identity registered under exactly this name."""
        for location in self._locations:
            if location.name == name:
                return location.id
        return None

    def name_of(self, identity: LocationId) -> str:
        return self._locations[self.validate(identity)].name

    def validate(self, identity: LocationId) -> int:
        """Return the raw index of an identity issued by this registry.

        Raises:
            InvalidEndpointError: If the identity belongs to another
                registry or lies outside the registered range.
        """
        if identity.issuer is not self._issuer or not (
            0 <= identity.index < len(self._locations)
        ):
            raise InvalidEndpointError(
                f"Identity {identity.index} was not issued by this registry",
                index=identity.index,
            )
        return identity.index

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

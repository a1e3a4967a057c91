"""Typed domain errors for the map navigation system.

Every recoverable failure of the core is raised as one of these types
so the shell can report it and keep the interaction loop running.

All errors inherit from MapNavigationError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MapNavigationError(Exception):
    """Base error for the map navigation domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateNameError(MapNavigationError):
    """A location with exactly this name is already registered.

    Attributes:
        name: The rejected location name
    """

    name: str = ""


@dataclass
class CapacityExceededError(MapNavigationError):
    """The registry already holds its maximum number of locations.

    Attributes:
        capacity: The configured maximum location count
    """

    capacity: int = 0


@dataclass
class LocationNotFoundError(MapNavigationError):
    """A location name does not resolve to a registered location.

    Attributes:
        name: The name that failed to resolve
    """

    name: str = ""


@dataclass
class InvalidDistanceError(MapNavigationError):
    """A road distance is negative or not an integer.

    Attributes:
        distance: The rejected value, as supplied
    """

    distance: object = None


@dataclass
class InvalidEndpointError(MapNavigationError):
    """An identity was not issued by the graph it is used with.

    Only reachable by bypassing the registry, so it signals a
    programming error rather than bad user input.

    Attributes:
        index: Raw index carried by the offending identity
    """

    index: Optional[int] = None


@dataclass
class ConfigurationError(MapNavigationError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None

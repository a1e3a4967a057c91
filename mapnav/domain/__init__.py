"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CapacityExceededError,
    ConfigurationError,
    DuplicateNameError,
    InvalidDistanceError,
    InvalidEndpointError,
    LocationNotFoundError,
    MapNavigationError,
)
from .models import Location, LocationId, Neighbor, NoPath, Route, RouteResult

__all__ = [
    # Models
    "Location",
    "LocationId",
    "Neighbor",
    "Route",
    "NoPath",
    "RouteResult",
    # Errors
    "MapNavigationError",
    "DuplicateNameError",
    "CapacityExceededError",
    "LocationNotFoundError",
    "InvalidDistanceError",
    "InvalidEndpointError",
    "ConfigurationError",
]

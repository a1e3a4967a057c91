"""Top-level package for the map navigation system.

Builds an undirected road map of named locations and answers
shortest-path queries over it with Dijkstra's algorithm. The
interactive menu lives in ``mapnav.cli``.
"""

from .domain.models import NoPath, Route
from .services import MapNavigationService

__version__ = "0.1.0"

__all__ = ["MapNavigationService", "NoPath", "Route"]

"""Graph-related building blocks for the road map.

This subpackage contains the location registry, the in-memory road
graph, and the path-finding algorithm that runs on top of it.
"""

from .dijkstra import dijkstra
from .registry import LocationRegistry
from .road_graph import NeighborView, RoadGraph, validate_distance

__all__ = [
    "LocationRegistry",
    "NeighborView",
    "RoadGraph",
    "dijkstra",
    "validate_distance",
]

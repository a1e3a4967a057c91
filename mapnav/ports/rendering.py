"""Rendering port - Abstraction for map display.

This protocol defines the contract for turning the road graph into
printable output, allowing different layouts to be plugged in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from ..graph.road_graph import RoadGraph


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/text_renderer.py

    Renderers are read-only: they must never mutate the graph.
    """

    def render(self, graph: RoadGraph) -> List[str]:
        """Render the road map as lines of text.

        Args:
            graph: The road graph to display.

        Returns:
            One line per location, in identity order.
        """
        ...

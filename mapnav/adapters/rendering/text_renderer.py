"""Plain-text map renderer adapter.

Lists every location followed by the roads leaving it, one location
per line, in the same order the graph stores them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ...graph.road_graph import RoadGraph


@dataclass
class TextMapRenderer:
    """Adjacency-listing renderer.

    This adapter implements MapRendererPort. A location without roads
    renders as its name followed by the bare arrow.

    Attributes:
        arrow: Separator between a location and its roads
    """

    arrow: str = "->"
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, graph: RoadGraph) -> List[str]:
        """Render the road map as lines of text.

        Args:
            graph: The road graph to display.

        Returns:
            One line per location, in identity order.
        """
        lines: List[str] = []
        for location in graph.locations():
            roads = " ".join(
                f"({graph.name_of(neighbor.location)}, {neighbor.distance})"
                for neighbor in graph.neighbors(location.id)
            )
            line = f"{location.name} {self.arrow}"
            lines.append(f"{line} {roads}" if roads else line)

        self._logger.debug("Map rendered", extra={"lines": len(lines)})
        return lines

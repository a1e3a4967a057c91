"""Rendering adapters - Implementations of the MapRendererPort.

Available implementations:
- TextMapRenderer: Plain-text adjacency listing
"""

from .text_renderer import TextMapRenderer

__all__ = ["TextMapRenderer"]

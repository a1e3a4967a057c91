"""Tests for the plain-text map renderer."""

import pytest

from mapnav.adapters.rendering import TextMapRenderer
from mapnav.graph.road_graph import RoadGraph


@pytest.fixture
def graph():
    graph = RoadGraph()
    x = graph.add_location("X")
    y = graph.add_location("Y")
    z = graph.add_location("Z")
    graph.add_location("Island")
    graph.add_road(x, y, 4)
    graph.add_road(y, z, 3)
    graph.add_road(x, z, 10)
    return graph


def test_render_lists_locations_in_identity_order(graph):
    lines = TextMapRenderer().render(graph)

    assert lines == [
        "X -> (Z, 10) (Y, 4)",
        "Y -> (Z, 3) (X, 4)",
        "Z -> (X, 10) (Y, 3)",
        "Island ->",
    ]


def test_render_is_idempotent(graph):
    renderer = TextMapRenderer()

    assert renderer.render(graph) == renderer.render(graph)
    assert graph.vertex_count == 4
    assert graph.road_count == 3


def test_render_empty_graph():
    assert TextMapRenderer().render(RoadGraph()) == []


def test_render_custom_arrow(graph):
    lines = TextMapRenderer(arrow=":").render(graph)

    assert lines[0] == "X : (Z, 10) (Y, 4)"
    assert lines[-1] == "Island :"

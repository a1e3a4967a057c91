import pytest

from mapnav.domain.errors import InvalidDistanceError, InvalidEndpointError
from mapnav.domain.models import Neighbor, NoPath, Route
from mapnav.graph.dijkstra import dijkstra
from mapnav.graph.road_graph import RoadGraph


def build_graph(names, roads):
    graph = RoadGraph()
    ids = {name: graph.add_location(name) for name in names}
    for a, b, distance in roads:
        graph.add_road(ids[a], ids[b], distance)
    return graph, ids


def test_add_road_is_symmetric():
    graph, ids = build_graph(["A", "B"], [("A", "B", 7)])

    assert (ids["B"], 7) in graph.neighbors(ids["A"])
    assert (ids["A"], 7) in graph.neighbors(ids["B"])
    assert graph.road_count == 1


def test_neighbors_most_recent_first():
    graph, ids = build_graph(
        ["A", "B", "C"], [("A", "B", 1), ("A", "C", 2)]
    )

    assert list(graph.neighbors(ids["A"])) == [
        Neighbor(ids["C"], 2),
        Neighbor(ids["B"], 1),
    ]


def test_neighbors_view_is_reiterable_and_indexable():
    graph, ids = build_graph(["A", "B", "C"], [("A", "B", 1), ("A", "C", 2)])
    view = graph.neighbors(ids["A"])

    assert list(view) == list(view)
    assert len(view) == 2
    assert view[0] == (ids["C"], 2)
    assert view[-1] == (ids["B"], 1)
    with pytest.raises(IndexError):
        view[2]


def test_duplicate_roads_coexist():
    graph, ids = build_graph(["A", "B"], [("A", "B", 5), ("A", "B", 2)])

    assert list(graph.neighbors(ids["A"])) == [(ids["B"], 2), (ids["B"], 5)]
    assert graph.road_count == 2


def test_self_loop_appears_twice():
    graph, ids = build_graph(["A"], [("A", "A", 3)])

    assert list(graph.neighbors(ids["A"])) == [(ids["A"], 3), (ids["A"], 3)]


@pytest.mark.parametrize("distance", [-1, 2.5, "4", True, None])
def test_add_road_rejects_invalid_distance(distance):
    graph, ids = build_graph(["A", "B"], [])

    with pytest.raises(InvalidDistanceError):
        graph.add_road(ids["A"], ids["B"], distance)

    assert len(graph.neighbors(ids["A"])) == 0
    assert len(graph.neighbors(ids["B"])) == 0


def test_zero_distance_is_allowed():
    graph, ids = build_graph(["A", "B"], [("A", "B", 0)])

    assert (ids["B"], 0) in graph.neighbors(ids["A"])


def test_identity_from_another_graph_is_rejected():
    first, first_ids = build_graph(["A", "B"], [])
    second, second_ids = build_graph(["A", "B"], [])

    with pytest.raises(InvalidEndpointError):
        second.add_road(first_ids["A"], second_ids["B"], 1)
    with pytest.raises(InvalidEndpointError):
        second.neighbors(first_ids["A"])

    assert len(second.neighbors(second_ids["B"])) == 0


def test_vertex_count_tracks_registry():
    graph, _ = build_graph(["A", "B", "C"], [])

    assert graph.vertex_count == 3
    assert len(graph) == 3
    assert [loc.name for loc in graph.locations()] == ["A", "B", "C"]
    assert "B" in graph
    assert "b" not in graph


def test_dijkstra_finds_direct_edge():
    graph, ids = build_graph(["A", "B"], [("A", "B", 10)])

    result = dijkstra(graph, ids["A"], ids["B"])

    assert result == Route(distance=10, path=("A", "B"))


def test_dijkstra_chooses_shortest_path():
    # X can reach Z directly, but X->Y->Z is shorter
    graph, ids = build_graph(
        ["X", "Y", "Z"],
        [("X", "Y", 4), ("Y", "Z", 3), ("X", "Z", 10)],
    )

    result = dijkstra(graph, ids["X"], ids["Z"])

    assert isinstance(result, Route)
    assert result.distance == 7
    assert result.path == ("X", "Y", "Z")


def test_dijkstra_source_equals_destination():
    graph, ids = build_graph(["A", "B"], [("A", "B", 3)])

    result = dijkstra(graph, ids["A"], ids["A"])

    assert result == Route(distance=0, path=("A",))


def test_dijkstra_single_location():
    graph, ids = build_graph(["Solo"], [])

    assert dijkstra(graph, ids["Solo"], ids["Solo"]) == Route(0, ("Solo",))


def test_dijkstra_no_path_returns_result_variant():
    graph, ids = build_graph(["A", "B", "C"], [("A", "B", 1)])

    result = dijkstra(graph, ids["A"], ids["C"])

    assert result == NoPath(source="A", destination="C")


def test_dijkstra_is_undirected():
    graph, ids = build_graph(["A", "B", "C"], [("A", "B", 2), ("B", "C", 5)])

    assert dijkstra(graph, ids["C"], ids["A"]) == Route(7, ("C", "B", "A"))


def test_dijkstra_uses_cheapest_duplicate_road():
    graph, ids = build_graph(["A", "B"], [("A", "B", 9), ("A", "B", 4), ("A", "B", 6)])

    assert dijkstra(graph, ids["A"], ids["B"]) == Route(4, ("A", "B"))


def test_dijkstra_zero_weight_roads():
    graph, ids = build_graph(
        ["A", "B", "C"], [("A", "B", 0), ("B", "C", 0), ("A", "C", 1)]
    )

    assert dijkstra(graph, ids["A"], ids["C"]) == Route(0, ("A", "B", "C"))


def test_dijkstra_tie_prefers_lowest_identity():
    # Two equal routes A-B-D and A-C-D; B was registered before C
    roads = [("C", "D", 1), ("A", "C", 1), ("B", "D", 1), ("A", "B", 1)]
    graph, ids = build_graph(["A", "B", "C", "D"], roads)

    results = {dijkstra(graph, ids["A"], ids["D"]) for _ in range(5)}

    assert results == {Route(2, ("A", "B", "D"))}


def test_dijkstra_longer_chain():
    names = ["A", "B", "C", "D", "E", "F"]
    roads = [
        ("A", "B", 2),
        ("A", "C", 5),
        ("B", "C", 1),
        ("B", "D", 4),
        ("C", "D", 2),
        ("C", "E", 3),
        ("D", "F", 1),
        ("E", "F", 5),
    ]
    graph, ids = build_graph(names, roads)

    result = dijkstra(graph, ids["A"], ids["F"])

    assert result == Route(6, ("A", "B", "C", "D", "F"))


def test_dijkstra_invalid_endpoint():
    graph, ids = build_graph(["A"], [])
    other, other_ids = build_graph(["A", "B"], [])

    with pytest.raises(InvalidEndpointError):
        dijkstra(graph, ids["A"], other_ids["B"])


def test_dijkstra_does_not_mutate_graph():
    graph, ids = build_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1)])
    before = [list(graph.neighbors(i)) for i in ids.values()]

    dijkstra(graph, ids["A"], ids["C"])

    assert [list(graph.neighbors(i)) for i in ids.values()] == before
    assert graph.vertex_count == 3

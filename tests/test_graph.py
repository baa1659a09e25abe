"""Tests for the graph store."""

import random

import pytest

from forcegraph.core import DuplicateNodeError, Graph, GraphStyle, LayoutBusyError, UnknownEndpointWarning


@pytest.fixture
def graph():
    g = Graph(width=400, height=300, rng=random.Random(1))
    g.add_node("a", 50, 60)
    g.add_node("b", 100, 120)
    g.add_node("c")
    return g


def test_add_node_keeps_insertion_order(graph):
    assert [n.id for n in graph.nodes] == ["a", "b", "c"]
    assert graph.get_node("b").position == (100, 120)
    assert "c" in graph
    assert graph.has_node("a") and not graph.has_node("z")
    assert len(graph) == 3


def test_add_node_applies_palette_defaults(graph):
    node = graph.get_node("a")
    assert node.stroke_color == "#90a4ae"
    assert node.fill_color == "#b0bec5"
    assert node.weight == 1.0
    assert node.label == ""
    assert node.display_label is False


def test_random_placement_within_margin(graph):
    for i in range(50):
        node = graph.add_node(f"r{i}")
        assert 10 <= node.x <= 390
        assert 10 <= node.y <= 290


def test_random_placement_on_empty_canvas():
    g = Graph()
    node = g.add_node("a")
    assert node.position == (10, 10)


def test_duplicate_node_leaves_store_unchanged(graph):
    graph.add_edge("a", "b")
    before_nodes = list(graph.nodes)
    before_edges = list(graph.edges)
    original = graph.get_node("a")

    with pytest.raises(DuplicateNodeError) as exc:
        graph.add_node("a", 1, 2)

    assert exc.value.node_id == "a"
    assert graph.nodes == before_nodes
    assert graph.edges == before_edges
    assert graph.get_node("a") is original
    assert original.position == (50, 60)


def test_add_edge_unknown_endpoint_warns_and_skips(graph):
    with pytest.warns(UnknownEndpointWarning) as record:
        result = graph.add_edge("a", "zzz")

    assert result is None
    assert record[0].message.missing == "zzz"
    assert graph.edges == []
    assert graph.edges_from("a") == []

    with pytest.warns(UnknownEndpointWarning):
        graph.add_edge("missing", "b")
    assert len(graph.edges) == 0


def test_duplicate_edges_and_self_loops_are_kept(graph):
    graph.add_edge("a", "b")
    graph.add_edge("a", "b")
    graph.add_edge("c", "c")
    assert len(graph.edges) == 3
    assert len(graph.edges_from("a")) == 2
    assert graph.stats()["self_loops"] == 1


def test_from_specs_skips_duplicates_and_drops_unknown_edges(recwarn):
    g = Graph.from_specs(
        nodes=[
            {"id": "a", "x": 5, "y": "7", "strokeColor": "#000", "label": "A", "displayLabel": True},
            {"id": "b"},
            {"id": "a", "x": 999},
        ],
        edges=[
            {"source": "a", "target": "b"},
            {"source": "a", "target": "ghost"},
        ],
        width=200,
        height=100,
        rng=random.Random(0),
    )

    assert [n.id for n in g.nodes] == ["a", "b"]
    a = g.get_node("a")
    assert a.position == (5.0, 7.0)
    assert a.stroke_color == "#000"
    assert a.fill_color == "#b0bec5"
    assert a.label == "A"
    assert a.display_label is True
    assert [(e.source, e.target) for e in g.edges] == [("a", "b")]
    assert len(recwarn) == 0


def test_delete_all_nodes_clears_everything(graph):
    graph.add_edge("a", "b")
    graph.delete_all_nodes()

    assert graph.nodes == []
    assert graph.edges == []
    assert graph.get_node("a") is None
    assert graph.edges_from("a") == []
    # ids are free again
    graph.add_node("a")


def test_snapshot_is_detached_copy(graph):
    graph.add_edge("a", "c")
    graph.style = GraphStyle(weight_factor=2.0)
    snap = graph.snapshot()

    graph.get_node("a").x = 0
    assert snap.positions()["a"] == (50, 60)
    assert snap.nodes[0].weight == 2.0
    assert snap.edges[0].source_id == "a"
    assert snap.edges[0].target_id == "c"
    assert (snap.width, snap.height) == (400, 300)


def test_direct_construction_builds_indexes():
    from forcegraph.core import GraphEdge, GraphNode

    g = Graph(nodes=[GraphNode("a", 1, 1), GraphNode("b", 2, 2)], edges=[GraphEdge("a", "b")])
    assert g.get_node("b") is g.nodes[1]
    assert g.edges_to("b") == [GraphEdge("a", "b")]
    assert Graph.contains_node(g.edges[0], "a")
    assert not Graph.contains_node(g.edges[0], "c")


def test_direct_construction_rejects_repeated_ids():
    from forcegraph.core import GraphNode

    with pytest.raises(DuplicateNodeError) as exc:
        Graph(nodes=[GraphNode("a", 1, 1), GraphNode("a", 2, 2)])
    assert exc.value.node_id == "a"


def test_direct_construction_drops_dangling_edges():
    from forcegraph.core import GraphEdge, GraphNode

    with pytest.warns(UnknownEndpointWarning) as record:
        g = Graph(nodes=[GraphNode("a", 50, 50)], edges=[GraphEdge("a", "a"), GraphEdge("a", "zzz")])

    assert record[0].message.missing == "zzz"
    assert g.edges == [GraphEdge("a", "a")]
    assert g.edges_to("zzz") == []


@pytest.mark.parametrize(
    "mutate",
    [
        lambda g: g.add_node("d"),
        lambda g: g.add_edge("a", "b"),
        lambda g: g.delete_all_nodes(),
    ],
)
def test_store_is_frozen_while_animating(graph, mutate):
    before = graph.snapshot()
    graph.animating = True
    with pytest.raises(LayoutBusyError):
        mutate(graph)
    assert graph.snapshot() == before

    graph.animating = False
    mutate(graph)

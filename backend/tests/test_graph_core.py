import pytest

from kraph.graph.graph_errors import EdgeNotFoundError, NodeNotFoundError
from kraph.graph.graph_schema import Node, NodeID
from kraph.graph.graph_store import GraphStore


def test_node_identity_is_by_label():
    assert NodeID("a") == NodeID("a")
    assert NodeID("a") != NodeID("b")
    assert hash(NodeID("a")) == hash(NodeID("a"))
    assert str(NodeID("a")) == "a"
    assert NodeID.coerce("a") == NodeID("a")

    node = Node.create("a", {"kind": "x"})
    assert node.id == NodeID("a")
    assert node == Node.create("a")

    with pytest.raises(TypeError):
        NodeID.coerce(42)


def test_add_node_rejects_duplicates(store):
    assert store.add_node(Node.create("n1"))
    assert store.add_node(Node.create("n2"))
    assert store.add_node(Node.create("n3"))

    original = store.get_node("n1")
    assert not store.add_node(Node.create("n1", {"replaced": True}))

    assert store.node_count() == 3
    assert len(store) == 3
    assert store.get_node("n1") is original


def test_get_node_absent_returns_none(store):
    assert store.get_node("missing") is None
    assert not store.has_node("missing")
    assert "missing" not in store


def test_get_nodes_returns_copy(abc_store):
    nodes = abc_store.get_nodes()
    assert set(nodes) == {NodeID("A"), NodeID("B"), NodeID("C")}

    nodes.clear()
    assert abc_store.node_count() == 3

    snapshot = abc_store.get_nodes()
    abc_store.add_node(Node.create("D"))
    assert NodeID("D") not in snapshot


def test_add_edge_accumulates_and_replace_overwrites(abc_store, assert_mirrored):
    assert abc_store.add_edge("A", "B", 5.0) == 5.0
    assert abc_store.add_edge("A", "B", 3.0) == 8.0
    assert abc_store.get_weight("A", "B") == 8.0

    abc_store.replace_edge("A", "B", 1.0)
    assert abc_store.get_weight("A", "B") == 1.0

    abc_store.replace_edge("B", "C", 0.9)
    assert abc_store.get_weight("B", "C") == 0.9
    assert abc_store.edge_count() == 2
    assert_mirrored(abc_store)


def test_edges_are_directed(abc_store):
    abc_store.add_edge("A", "B", 2.0)

    assert abc_store.has_edge("A", "B")
    assert not abc_store.has_edge("B", "A")
    with pytest.raises(EdgeNotFoundError) as info:
        abc_store.get_weight("B", "A")
    assert info.value.source == NodeID("B")
    assert info.value.target == NodeID("A")


def test_edge_operations_check_source_before_target(abc_store):
    operations = [
        lambda s, t: abc_store.add_edge(s, t, 1.0),
        lambda s, t: abc_store.replace_edge(s, t, 1.0),
        lambda s, t: abc_store.delete_edge(s, t),
        lambda s, t: abc_store.get_weight(s, t),
    ]
    for op in operations:
        with pytest.raises(NodeNotFoundError) as info:
            op("X", "Y")
        assert info.value.node_id == NodeID("X")
        assert str(info.value) == "X does not exist in graph"

        with pytest.raises(NodeNotFoundError) as info:
            op("A", "Y")
        assert info.value.node_id == NodeID("Y")

    assert abc_store.edge_count() == 0


def test_delete_edge(abc_store, assert_mirrored):
    abc_store.add_edge("A", "B", 4.0)
    abc_store.delete_edge("A", "B")

    assert not abc_store.has_edge("A", "B")
    assert abc_store.get_targets("A") == {}
    assert abc_store.get_sources("B") == {}
    assert_mirrored(abc_store)


def test_delete_missing_edge_is_noop(abc_store):
    abc_store.add_edge("A", "B", 4.0)
    before = abc_store.adjacency()

    abc_store.delete_edge("B", "C")

    assert abc_store.adjacency() == before


def test_neighbour_queries(abc_store):
    abc_store.add_edge("A", "B", 1.0)
    abc_store.add_edge("A", "C", 1.0)
    abc_store.add_edge("B", "C", 1.0)

    targets = abc_store.get_targets("A")
    assert set(targets) == {NodeID("B"), NodeID("C")}
    assert targets[NodeID("B")] == abc_store.get_node("B")

    assert set(abc_store.get_sources("C")) == {NodeID("A"), NodeID("B")}
    assert abc_store.get_sources("A") == {}

    with pytest.raises(NodeNotFoundError):
        abc_store.get_sources("missing")
    with pytest.raises(NodeNotFoundError):
        abc_store.get_targets("missing")


def test_neighbour_without_node_maps_to_none(abc_store):
    abc_store.add_edge("A", "B", 1.0)
    # Simulate an index entry whose node has vanished.
    del abc_store._nodes[NodeID("B")]

    assert abc_store.get_targets("A") == {NodeID("B"): None}


def test_delete_node_cascades(abc_store, assert_mirrored):
    abc_store.add_edge("A", "B", 1.0)
    abc_store.add_edge("B", "A", 2.0)
    abc_store.add_edge("B", "C", 3.0)
    abc_store.add_edge("C", "B", 4.0)

    assert abc_store.delete_node("B")
    assert not abc_store.delete_node("B")

    assert NodeID("B") not in abc_store.get_nodes()
    assert abc_store.get_targets("A") == {}
    assert abc_store.get_sources("A") == {}
    assert abc_store.get_targets("C") == {}
    assert abc_store.get_sources("C") == {}
    assert abc_store.edge_count() == 0
    with pytest.raises(NodeNotFoundError):
        abc_store.get_weight("A", "B")
    with pytest.raises(NodeNotFoundError):
        abc_store.get_weight("B", "C")
    assert_mirrored(abc_store)


def test_delete_node_absent_returns_false(store):
    assert not store.delete_node("nobody")


def test_scenario_accumulate_replace_cascade(abc_store, assert_mirrored):
    abc_store.add_edge("A", "B", 5)
    abc_store.add_edge("A", "B", 3)
    assert abc_store.get_weight("A", "B") == 8

    abc_store.replace_edge("A", "B", 1)
    assert abc_store.get_weight("A", "B") == 1

    abc_store.add_edge("A", "C", 2)
    abc_store.delete_node("C")

    with pytest.raises(NodeNotFoundError):
        abc_store.get_weight("A", "C")
    assert NodeID("C") not in abc_store.get_targets("A")
    assert_mirrored(abc_store)


def test_reset_empties_store(abc_store):
    abc_store.add_edge("A", "B", 1.0)

    abc_store.reset()
    abc_store.reset()

    assert abc_store.node_count() == 0
    assert abc_store.edge_count() == 0
    for label in ("A", "B", "C"):
        assert abc_store.get_node(label) is None
    with pytest.raises(NodeNotFoundError):
        abc_store.get_weight("A", "B")


def test_indices_stay_mirrored_through_mixed_mutations(assert_mirrored):
    store = GraphStore()
    labels = [f"n{i}" for i in range(6)]
    for label in labels:
        store.add_node(Node.create(label))

    for i, src in enumerate(labels):
        for dst in labels[i + 1:]:
            store.add_edge(src, dst, 1.0)
            store.add_edge(dst, src, 0.5)
    assert_mirrored(store)

    store.replace_edge("n0", "n5", 9.0)
    store.delete_edge("n1", "n2")
    store.delete_node("n3")
    assert_mirrored(store)

    for src, tmap in store.adjacency().items():
        for dst, weight in tmap.items():
            assert store.get_weight(src, dst) == weight
            assert src in store.get_sources(dst)

import pytest

from graph_traversal.graph import InMemoryGraphStore, SAMPLE_ADJACENCY


def test_neighbors_follow_stored_order(sample_store):
    assert sample_store.neighbors("B") == ("A", "D", "E")
    assert sample_store.neighbors("F") == ("C", "E")


def test_unknown_node_has_no_neighbors(sample_store):
    assert sample_store.neighbors("Z") == ()
    assert not sample_store.has_node("Z")
    assert "Z" not in sample_store


def test_nodes_keep_insertion_order(sample_store):
    assert sample_store.nodes() == ("A", "B", "C", "D", "E", "F")
    assert list(sample_store) == ["A", "B", "C", "D", "E", "F"]
    assert len(sample_store) == 6


def test_store_is_isolated_from_source_mapping():
    source = {"A": ["B"], "B": ["A"]}
    store = InMemoryGraphStore(source)

    source["A"].append("C")
    source["C"] = ["A"]

    assert store.neighbors("A") == ("B",)
    assert not store.has_node("C")


def test_adjacency_is_read_only(sample_store):
    with pytest.raises(TypeError):
        sample_store.adjacency["G"] = ("A",)


def test_to_dict_returns_copy(sample_store):
    data = sample_store.to_dict()
    data["A"].append("Z")

    assert data["B"] == ["A", "D", "E"]
    assert sample_store.neighbors("A") == ("B", "C")


def test_stats_for_sample_graph(sample_store):
    stats = sample_store.get_stats()

    assert stats.total_nodes == 6
    assert stats.total_edges == 12
    assert stats.undirected_edges == 6
    assert stats.isolated_nodes == 0
    assert stats.avg_degree == 2.0
    assert stats.to_dict()["undirected_edges"] == 6


def test_stats_for_empty_graph():
    stats = InMemoryGraphStore({}).get_stats()

    assert stats.total_nodes == 0
    assert stats.avg_degree == 0.0


def test_non_string_node_ids():
    store = InMemoryGraphStore({1: [2], 2: [1], (3, 4): []})

    assert store.neighbors(1) == (2,)
    assert store.has_node((3, 4))
    assert store.get_stats().isolated_nodes == 1


def test_sample_dataset_is_symmetric():
    for node, adjacent in SAMPLE_ADJACENCY.items():
        for neighbor in adjacent:
            assert node in SAMPLE_ADJACENCY[neighbor]

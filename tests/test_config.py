import pytest
from pydantic import ValidationError

from graph_traversal.config import DEFAULT_CONFIG, GraphConfig, get_default_config
from graph_traversal.errors import GraphConfigError, GraphTraversalError
from graph_traversal.graph import InMemoryGraphStore, SAMPLE_ADJACENCY


def test_default_config_matches_sample_dataset():
    config = get_default_config()

    assert config is DEFAULT_CONFIG
    assert config.start_node == "A"
    assert dict(config.adjacency) == dict(SAMPLE_ADJACENCY)


def test_store_from_config():
    store = InMemoryGraphStore.from_config(DEFAULT_CONFIG)

    assert store.nodes() == ("A", "B", "C", "D", "E", "F")
    assert store.neighbors("E") == ("B", "F")


def test_dangling_neighbor_rejected():
    with pytest.raises(GraphConfigError, match="Z"):
        GraphConfig.build(adjacency={"A": ["B", "Z"], "B": ["A"]})


def test_missing_start_node_rejected():
    with pytest.raises(GraphConfigError):
        GraphConfig.build(adjacency={"B": []}, start_node="A")


def test_empty_adjacency_rejected():
    with pytest.raises(GraphConfigError):
        GraphConfig.build(adjacency={})


def test_open_graph_allowed_when_not_required_closed():
    config = GraphConfig.build(
        adjacency={"A": ["Z"]},
        start_node="Q",
        require_closed=False,
    )

    assert dict(config.adjacency) == {"A": ("Z",)}


def test_config_error_is_traversal_error():
    assert issubclass(GraphConfigError, GraphTraversalError)


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.start_node = "B"


def test_default_adjacency_is_read_only():
    adjacency = get_default_config().adjacency

    with pytest.raises(TypeError):
        adjacency["A"] = ("C", "B")
    with pytest.raises(TypeError):
        adjacency["G"] = ("A",)
    with pytest.raises(AttributeError):
        adjacency["A"].reverse()

    assert adjacency["A"] == ("B", "C")


def test_config_copies_caller_adjacency():
    source = {"A": ["B"], "B": ["A"]}
    config = GraphConfig.build(adjacency=source)

    source["A"].append("C")

    assert config.adjacency["A"] == ("B",)

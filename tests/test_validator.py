from graph_traversal.graph import (
    GraphValidator,
    InMemoryGraphStore,
    ValidationSeverity,
)


def test_sample_graph_is_clean(sample_store):
    result = GraphValidator().validate(sample_store)

    assert result.valid
    assert result.issues == []
    assert result.validated_at


def test_dangling_neighbor_is_error():
    store = InMemoryGraphStore({"A": ["B", "Z"], "B": ["A"]})
    result = GraphValidator().validate(store)

    assert not result.valid
    assert [e.code for e in result.errors] == ["DANGLING_NEIGHBOR"]
    assert result.errors[0].node == "A"


def test_asymmetric_edge_is_warning():
    store = InMemoryGraphStore({"A": ["B"], "B": []})
    result = GraphValidator().validate(store)

    assert result.valid
    assert "ASYMMETRIC_EDGE" in [w.code for w in result.warnings]
    assert "ISOLATED_NODE" in result.codes


def test_duplicate_neighbor_and_self_loop():
    store = InMemoryGraphStore({"A": ["A", "B", "B"], "B": ["A"]})
    result = GraphValidator().validate(store)

    assert result.valid
    assert "SELF_LOOP" in result.codes
    assert [w.code for w in result.warnings] == ["DUPLICATE_NEIGHBOR"]


def test_strict_mode_promotes_warnings():
    store = InMemoryGraphStore({"A": ["B"], "B": []})
    result = GraphValidator(strict=True).validate(store)

    assert not result.valid
    assert [e.code for e in result.errors] == ["ASYMMETRIC_EDGE"]
    assert result.errors[0].message.startswith("[Strict]")
    assert result.warnings == []

    data = result.to_dict()
    assert data["error_count"] == 1
    assert data["warning_count"] == 0
    assert "ISOLATED_NODE" in result.codes


def test_to_dict():
    store = InMemoryGraphStore({"A": ["Z"]})
    data = GraphValidator().validate(store).to_dict()

    assert data["valid"] is False
    assert data["error_count"] == 1
    assert data["issues"][0]["severity"] == ValidationSeverity.ERROR.value

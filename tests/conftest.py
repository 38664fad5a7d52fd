import pytest

from graph_traversal.graph import GraphTraverser, InMemoryGraphStore, SAMPLE_ADJACENCY


@pytest.fixture
def sample_store():
    return InMemoryGraphStore(SAMPLE_ADJACENCY)


@pytest.fixture
def traverser(sample_store):
    return GraphTraverser(sample_store)


@pytest.fixture
def path_adjacency():
    """재귀 한도보다 긴 경로 그래프 생성기"""
    def _build(length):
        return {
            i: [n for n in (i - 1, i + 1) if 0 <= n < length]
            for i in range(length)
        }
    return _build

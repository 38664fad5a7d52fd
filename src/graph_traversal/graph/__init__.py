"""
Graph Package

그래프 저장소 및 탐색 모듈
"""

from .stores import (
    # Base
    GraphStore,
    GraphStats,
    NodeId,
    # Implementations
    InMemoryGraphStore,
)

from .traversal import (
    GraphTraverser,
    TraversalStrategy,
    TraversalResult,
    iterative_bfs,
    iterative_dfs,
    recursive_bfs,
    recursive_dfs,
)

from .validator import (
    GraphValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)

from .dataset import SAMPLE_ADJACENCY, SAMPLE_START_NODE


__all__ = [
    # Stores
    "GraphStore",
    "GraphStats",
    "NodeId",
    "InMemoryGraphStore",
    # Traversal
    "GraphTraverser",
    "TraversalStrategy",
    "TraversalResult",
    "iterative_bfs",
    "iterative_dfs",
    "recursive_bfs",
    "recursive_dfs",
    # Validation
    "GraphValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    # Dataset
    "SAMPLE_ADJACENCY",
    "SAMPLE_START_NODE",
]

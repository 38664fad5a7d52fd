# Graph Traversal Package
__version__ = "1.0.0"

from . import graph
from .config import GraphConfig, DEFAULT_CONFIG, get_default_config
from .errors import GraphTraversalError, GraphConfigError, TraversalDepthError
from .graph import (
    GraphStore,
    InMemoryGraphStore,
    GraphTraverser,
    TraversalStrategy,
    TraversalResult,
    iterative_bfs,
    iterative_dfs,
    recursive_bfs,
    recursive_dfs,
)

__all__ = [
    "graph",
    # Config
    "GraphConfig",
    "DEFAULT_CONFIG",
    "get_default_config",
    # Errors
    "GraphTraversalError",
    "GraphConfigError",
    "TraversalDepthError",
    # Graph
    "GraphStore",
    "InMemoryGraphStore",
    "GraphTraverser",
    "TraversalStrategy",
    "TraversalResult",
    "iterative_bfs",
    "iterative_dfs",
    "recursive_bfs",
    "recursive_dfs",
]

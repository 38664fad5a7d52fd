"""
Graph Stores Package

그래프 저장소 모듈
"""

from .base import (
    GraphStore,
    GraphStats,
    NodeId,
)

from .memory_store import InMemoryGraphStore


__all__ = [
    # Base
    "GraphStore",
    "GraphStats",
    "NodeId",
    # Implementations
    "InMemoryGraphStore",
]

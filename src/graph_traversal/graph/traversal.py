"""
Graph Traversal

그래프 탐색 유틸리티 (반복/재귀 BFS, DFS)
"""

from typing import Any, Deque, Dict, Iterator, List, Optional, Set, Tuple, Union
from collections import deque
from dataclasses import dataclass
from enum import Enum
import logging
import sys

from .stores.base import GraphStore, NodeId
from ..errors import TraversalDepthError

logger = logging.getLogger(__name__)


class TraversalStrategy(Enum):
    """탐색 전략"""
    ITERATIVE_BFS = "iterative_bfs"
    ITERATIVE_DFS = "iterative_dfs"
    RECURSIVE_BFS = "recursive_bfs"
    RECURSIVE_DFS = "recursive_dfs"

    @property
    def label(self) -> str:
        """출력용 이름 (예: "Iterative BFS")"""
        kind, algorithm = self.value.split("_")
        return f"{kind.capitalize()} {algorithm.upper()}"

    @property
    def is_recursive(self) -> bool:
        return self in (TraversalStrategy.RECURSIVE_BFS, TraversalStrategy.RECURSIVE_DFS)


# ===================
# Iterative
# ===================

def iterative_bfs(store: GraphStore, start: NodeId) -> Iterator[NodeId]:
    """
    반복 BFS

    큐에 넣는 시점에 방문 표시하므로 큐에는 중복이 없습니다.
    같은 레벨 안에서는 저장된 이웃 순서를 따릅니다.
    """
    visited: Set[NodeId] = {start}
    queue: Deque[NodeId] = deque([start])

    while queue:
        node = queue.popleft()
        yield node

        for neighbor in store.neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)


def iterative_dfs(store: GraphStore, start: NodeId) -> Iterator[NodeId]:
    """
    반복 DFS

    꺼내는 시점에 방문 표시합니다. 스택에는 중복 항목이 쌓일 수 있고
    꺼낸 뒤 방문 여부를 확인해 버립니다. 이웃을 역순으로 넣어야
    재귀 DFS와 같은 왼쪽->오른쪽 순서가 나옵니다.
    """
    visited: Set[NodeId] = set()
    stack: List[NodeId] = [start]

    while stack:
        node = stack.pop()
        if node in visited:
            continue

        visited.add(node)
        yield node

        for neighbor in reversed(store.neighbors(node)):
            if neighbor not in visited:
                stack.append(neighbor)


# ===================
# Recursive
# ===================
# 재귀 깊이 = 방문한 노드 수. 인터프리터 재귀 한도를 넘는 그래프에서는
# TraversalDepthError가 발생합니다.

def recursive_bfs(store: GraphStore, start: NodeId) -> Iterator[NodeId]:
    """재귀 BFS (한 번의 호출이 큐 원소 하나를 처리)"""
    visited: Set[NodeId] = {start}
    queue: Deque[NodeId] = deque([start])

    try:
        yield from _bfs_step(store, queue, visited)
    except RecursionError as e:
        raise TraversalDepthError(
            TraversalStrategy.RECURSIVE_BFS.label, start, sys.getrecursionlimit()
        ) from e


def _bfs_step(
    store: GraphStore,
    queue: Deque[NodeId],
    visited: Set[NodeId]
) -> Iterator[NodeId]:
    if not queue:
        return

    node = queue.popleft()
    yield node

    for neighbor in store.neighbors(node):
        if neighbor not in visited:
            visited.add(neighbor)
            queue.append(neighbor)

    yield from _bfs_step(store, queue, visited)


def recursive_dfs(store: GraphStore, start: NodeId) -> Iterator[NodeId]:
    """재귀 DFS (전위 순회, 진입 시 방문 표시)"""
    visited: Set[NodeId] = set()

    try:
        yield from _dfs_visit(store, start, visited)
    except RecursionError as e:
        raise TraversalDepthError(
            TraversalStrategy.RECURSIVE_DFS.label, start, sys.getrecursionlimit()
        ) from e


def _dfs_visit(
    store: GraphStore,
    node: NodeId,
    visited: Set[NodeId]
) -> Iterator[NodeId]:
    visited.add(node)
    yield node

    for neighbor in store.neighbors(node):
        # 앞선 형제 노드의 하위 탐색에서 방문했을 수 있으므로 매번 확인
        if neighbor not in visited:
            yield from _dfs_visit(store, neighbor, visited)


_ALGORITHMS = {
    TraversalStrategy.ITERATIVE_BFS: iterative_bfs,
    TraversalStrategy.ITERATIVE_DFS: iterative_dfs,
    TraversalStrategy.RECURSIVE_BFS: recursive_bfs,
    TraversalStrategy.RECURSIVE_DFS: recursive_dfs,
}


@dataclass
class TraversalResult:
    """탐색 결과"""
    start: NodeId
    strategy: TraversalStrategy
    order: Tuple[NodeId, ...]
    start_known: bool = True

    @property
    def visited_count(self) -> int:
        return len(self.order)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "strategy": self.strategy.value,
            "order": list(self.order),
            "visited_count": self.visited_count,
            "start_known": self.start_known,
        }


class GraphTraverser:
    """
    그래프 탐색기

    Example:
        traverser = GraphTraverser(store)
        result = traverser.traverse("A", TraversalStrategy.ITERATIVE_DFS)
        result.order  # ("A", "B", "D", "E", "F", "C")
    """

    def __init__(self, store: GraphStore):
        self.store = store

    def walk(
        self,
        start: NodeId,
        strategy: Union[TraversalStrategy, str] = TraversalStrategy.ITERATIVE_BFS
    ) -> Iterator[NodeId]:
        """
        지연 탐색

        Args:
            start: 시작 노드 ID
            strategy: 탐색 전략 (enum 또는 값 문자열)

        Returns:
            방문 순서대로 노드를 내는 이터레이터 (한 번만 소비 가능)
        """
        strategy = TraversalStrategy(strategy)
        return _ALGORITHMS[strategy](self.store, start)

    def traverse(
        self,
        start: NodeId,
        strategy: Union[TraversalStrategy, str] = TraversalStrategy.ITERATIVE_BFS
    ) -> TraversalResult:
        """전체 탐색 후 결과 반환"""
        strategy = TraversalStrategy(strategy)
        start_known = self.store.has_node(start)
        if not start_known:
            logger.warning(f"Start node {start!r} not in graph; only the start will be visited")

        logger.debug(f"{strategy.label} starting from {start!r}")
        order = tuple(self.walk(start, strategy))
        logger.debug(f"{strategy.label} visited {len(order)} nodes")

        return TraversalResult(
            start=start,
            strategy=strategy,
            order=order,
            start_known=start_known,
        )

    def traverse_all(
        self,
        start: NodeId,
        strategies: Optional[List[TraversalStrategy]] = None
    ) -> List[TraversalResult]:
        """여러 전략으로 각각 독립 탐색"""
        strategies = strategies or list(TraversalStrategy)
        return [self.traverse(start, strategy) for strategy in strategies]

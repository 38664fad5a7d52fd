"""
Graph Store Base

그래프 저장소 추상 베이스 클래스
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Hashable, Iterator, Tuple
from dataclasses import dataclass


# 노드 식별자: 해시 가능한 임의의 값 (데이터셋은 한 글자 문자열)
NodeId = Hashable


@dataclass
class GraphStats:
    """그래프 통계"""
    total_nodes: int = 0
    total_edges: int = 0  # 저장된 방향 간선 수
    undirected_edges: int = 0
    isolated_nodes: int = 0

    @property
    def avg_degree(self) -> float:
        if not self.total_nodes:
            return 0.0
        return self.total_edges / self.total_nodes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_nodes": self.total_nodes,
            "total_edges": self.total_edges,
            "undirected_edges": self.undirected_edges,
            "isolated_nodes": self.isolated_nodes,
            "avg_degree": self.avg_degree,
        }


class GraphStore(ABC):
    """
    그래프 저장소 추상 베이스 클래스

    읽기 전용 인접 리스트 계약입니다. 변경 연산은 제공하지 않습니다.
    """

    @abstractmethod
    def neighbors(self, node: NodeId) -> Tuple[NodeId, ...]:
        """
        이웃 노드 조회

        Args:
            node: 노드 ID

        Returns:
            저장된 순서의 이웃 노드들. 모르는 노드면 빈 튜플 (예외 없음)
        """
        pass

    @abstractmethod
    def nodes(self) -> Tuple[NodeId, ...]:
        """
        전체 노드 조회

        Returns:
            삽입 순서의 노드 ID들
        """
        pass

    def has_node(self, node: NodeId) -> bool:
        """노드 존재 여부"""
        return node in self.nodes()

    def get_stats(self) -> GraphStats:
        """그래프 통계 계산"""
        all_nodes = self.nodes()
        total_edges = 0
        undirected = set()
        isolated = 0

        for node in all_nodes:
            adjacent = self.neighbors(node)
            if not adjacent:
                isolated += 1
            total_edges += len(adjacent)
            for neighbor in adjacent:
                undirected.add(frozenset((node, neighbor)))

        return GraphStats(
            total_nodes=len(all_nodes),
            total_edges=total_edges,
            undirected_edges=len(undirected),
            isolated_nodes=isolated,
        )

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self.nodes())

    def __len__(self) -> int:
        return len(self.nodes())

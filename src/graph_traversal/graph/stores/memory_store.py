"""
In-Memory Graph Store

인메모리 불변 그래프 저장소 구현
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple, TYPE_CHECKING
import logging

from .base import GraphStore, NodeId

if TYPE_CHECKING:
    from ...config import GraphConfig

logger = logging.getLogger(__name__)


class InMemoryGraphStore(GraphStore):
    """
    인메모리 그래프 저장소

    생성 시 인접 리스트를 튜플로 복사해 읽기 전용 매핑에 고정합니다.
    호출자가 원본 매핑을 나중에 바꿔도 저장소에는 반영되지 않습니다.

    Example:
        store = InMemoryGraphStore({"A": ["B"], "B": ["A"]})
        store.neighbors("A")   # ("B",)
        store.neighbors("Z")   # ()
    """

    def __init__(self, adjacency: Mapping[NodeId, Iterable[NodeId]]):
        frozen: Dict[NodeId, Tuple[NodeId, ...]] = {
            node: tuple(adjacent) for node, adjacent in adjacency.items()
        }
        self._adjacency = MappingProxyType(frozen)
        self._nodes: Tuple[NodeId, ...] = tuple(frozen)

        logger.debug(
            f"Built graph store: {len(self._nodes)} nodes, "
            f"{sum(len(a) for a in frozen.values())} edges"
        )

    @classmethod
    def from_config(cls, config: "GraphConfig") -> "InMemoryGraphStore":
        """검증된 설정으로부터 저장소 생성"""
        return cls(config.adjacency)

    @property
    def adjacency(self) -> Mapping[NodeId, Tuple[NodeId, ...]]:
        """읽기 전용 인접 매핑"""
        return self._adjacency

    def neighbors(self, node: NodeId) -> Tuple[NodeId, ...]:
        return self._adjacency.get(node, ())

    def nodes(self) -> Tuple[NodeId, ...]:
        return self._nodes

    def has_node(self, node: NodeId) -> bool:
        return node in self._adjacency

    def to_dict(self) -> Dict[NodeId, List[NodeId]]:
        """일반 딕셔너리 복사본으로 변환"""
        return {node: list(adjacent) for node, adjacent in self._adjacency.items()}

    def __repr__(self) -> str:
        return f"InMemoryGraphStore(nodes={list(self._nodes)!r})"

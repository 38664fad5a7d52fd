"""
Program Runner

독립 실행 프로그램 공통 로직
"""

from typing import List, Optional, TextIO
import logging

from ..config import GraphConfig, get_default_config
from ..errors import GraphTraversalError
from ..graph import GraphTraverser, InMemoryGraphStore, TraversalStrategy
from ..output import format_label, write_visitation

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING) -> None:
    """로그는 stderr로 보내고 stdout에는 방문 순서만 남긴다"""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run(
    strategies: List[TraversalStrategy],
    config: Optional[GraphConfig] = None,
    stream: Optional[TextIO] = None
) -> int:
    """
    고정 그래프를 탐색하고 전략마다 한 줄씩 출력

    Returns:
        종료 코드 (정상 0, GraphTraversalError 1)
    """
    config = config or get_default_config()

    try:
        store = InMemoryGraphStore.from_config(config)
        traverser = GraphTraverser(store)
        for strategy in strategies:
            result = traverser.traverse(config.start_node, strategy)
            write_visitation(
                format_label(strategy, config.start_node),
                result.order,
                stream
            )
    except GraphTraversalError as e:
        logger.error(f"Traversal failed: {e}")
        return 1

    return 0

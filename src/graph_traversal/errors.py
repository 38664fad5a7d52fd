"""
Graph Traversal Errors

그래프 탐색 예외 정의
"""

from typing import Any, Hashable, Optional


class GraphTraversalError(Exception):
    """그래프 탐색 패키지 공통 예외"""
    pass


class GraphConfigError(GraphTraversalError):
    """그래프 설정이 유효하지 않을 때 발생"""
    pass


class TraversalDepthError(GraphTraversalError):
    """재귀 탐색이 인터프리터 재귀 한도를 넘었을 때 발생"""

    def __init__(
        self,
        strategy: Any,
        start: Hashable,
        limit: Optional[int] = None
    ):
        self.strategy = strategy
        self.start = start
        self.limit = limit
        super().__init__(
            f"{strategy} from {start!r} exceeded the recursion limit ({limit})"
        )

"""
Visitation Output

방문 순서 출력
"""

from typing import Hashable, Iterable, Optional, TextIO, Union
import sys

from .graph.traversal import TraversalStrategy


def format_label(strategy: Union[TraversalStrategy, str], start: Hashable) -> str:
    """출력 라벨 생성 (예: "Iterative BFS starting from A: ")"""
    strategy = TraversalStrategy(strategy)
    return f"{strategy.label} starting from {start}: "


def format_visitation(nodes: Iterable[Hashable]) -> str:
    """방문 순서를 공백으로 구분"""
    return " ".join(str(node) for node in nodes)


def write_visitation(
    label: str,
    nodes: Iterable[Hashable],
    stream: Optional[TextIO] = None
) -> None:
    """
    라벨, 방문 순서, 개행을 한 줄로 출력

    Args:
        label: 앞에 붙일 고정 라벨
        nodes: 방문 순서
        stream: 출력 대상 (기본값 sys.stdout)
    """
    stream = stream or sys.stdout
    stream.write(label)
    stream.write(format_visitation(nodes))
    stream.write("\n")
    stream.flush()

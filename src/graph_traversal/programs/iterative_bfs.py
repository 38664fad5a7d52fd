"""
Iterative BFS Program

큐 기반 반복 BFS로 고정 그래프를 탐색합니다.

Usage:
    iterative-bfs
    python -m graph_traversal.programs.iterative_bfs
"""

import sys

from ..graph import TraversalStrategy
from .base import run, setup_logging


def main() -> int:
    setup_logging()
    return run([TraversalStrategy.ITERATIVE_BFS])


if __name__ == "__main__":
    sys.exit(main())

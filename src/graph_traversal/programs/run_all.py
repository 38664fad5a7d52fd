"""
Run All Traversals

네 가지 탐색을 순서대로 실행하고 각각 한 줄씩 출력합니다.

Usage:
    graph-traversal
    python -m graph_traversal.programs.run_all
"""

import sys

from ..graph import TraversalStrategy
from .base import run, setup_logging


def main() -> int:
    setup_logging()
    return run(list(TraversalStrategy))


if __name__ == "__main__":
    sys.exit(main())

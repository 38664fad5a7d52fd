"""
Recursive BFS Program

큐 소비 단계를 자기 재귀로 표현한 BFS
"""

import sys

from ..graph import TraversalStrategy
from .base import run, setup_logging


def main() -> int:
    setup_logging()
    return run([TraversalStrategy.RECURSIVE_BFS])


if __name__ == "__main__":
    sys.exit(main())

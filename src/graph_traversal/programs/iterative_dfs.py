"""
Iterative DFS Program

스택 기반 반복 DFS (이웃 역순 push)
"""

import sys

from ..graph import TraversalStrategy
from .base import run, setup_logging


def main() -> int:
    setup_logging()
    return run([TraversalStrategy.ITERATIVE_DFS])


if __name__ == "__main__":
    sys.exit(main())

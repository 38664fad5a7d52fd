"""
Recursive DFS Program
"""

import sys

from ..graph import TraversalStrategy
from .base import run, setup_logging


def main() -> int:
    setup_logging()
    return run([TraversalStrategy.RECURSIVE_DFS])


if __name__ == "__main__":
    sys.exit(main())

"""
Sample Graph Dataset

고정된 6노드 무방향 그래프
"""

from types import MappingProxyType
from typing import Mapping, Tuple


# A - B - D
# |   |
# C   E
#  \ /
#   F
SAMPLE_ADJACENCY: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "A": ("B", "C"),
    "B": ("A", "D", "E"),
    "C": ("A", "F"),
    "D": ("B",),
    "E": ("B", "F"),
    "F": ("C", "E"),
})

SAMPLE_START_NODE = "A"

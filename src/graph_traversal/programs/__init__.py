# Standalone traversal programs
from .base import run, setup_logging

__all__ = [
    "run",
    "setup_logging",
]

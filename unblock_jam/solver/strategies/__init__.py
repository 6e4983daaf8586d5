"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .bfs import BreadthFirstStrategy
from .dfs import DepthFirstStrategy

__all__ = [
    "BreadthFirstStrategy",
    "DepthFirstStrategy",
]

"""
Depth-First Strategy - Deepest-first search with a larger budget.
"""

from typing import Deque

from ..base import SolverStrategy
from ..factory import register_strategy
from ..solution import SearchNode


@register_strategy
class DepthFirstStrategy(SolverStrategy):
    """
    LIFO frontier search.

    Follows the most recently generated state first. Finds a solution
    with little frontier memory but gives no guarantee on path length.
    """
    name = "dfs"
    description = "DFS (low memory) - Any solution, not necessarily shortest"
    max_iterations = 200000

    def _pop(self, frontier: Deque[SearchNode]) -> SearchNode:
        return frontier.pop()

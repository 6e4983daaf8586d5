"""
Breadth-First Strategy - Level-by-level search returning a shortest path.
"""

from typing import Deque

from ..base import SolverStrategy
from ..factory import register_strategy
from ..solution import SearchNode


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    FIFO frontier search.

    Every state at depth d is expanded before any state at depth d + 1,
    so the first goal reached uses the fewest moves. Memory grows with
    the width of the state graph, hence the smaller default budget.
    """
    name = "bfs"
    description = "BFS (optimal) - Shortest solution by move count"
    max_iterations = 30000

    def _pop(self, frontier: Deque[SearchNode]) -> SearchNode:
        return frontier.popleft()

"""
Base Strategy Module - Abstract frontier search shared by all strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Generator, List, Optional, Set, Tuple

from .board import Board, PuzzleState
from .context import SolutionContext
from .hashing import state_key
from .move import Move
from .rules import ExitPolicy
from .solution import SearchNode, SearchStatus, Solution, SolutionMetrics
from .successors import SuccessorMode, generate_successors

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for exhaustive search strategies.

    The search loop lives here; subclasses only decide which end of the
    frontier to take the next node from.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for UI
        max_iterations: Default iteration budget when limits leave it unset
    """
    name: str = "base"
    description: str = "Base strategy"
    max_iterations: int = 30000

    def __init__(self, exit_policy: ExitPolicy = ExitPolicy.ANY_CELL,
                 successor_mode: SuccessorMode = SuccessorMode.UNIT_STEP):
        """
        Initialize strategy.

        Args:
            exit_policy: Gate exit rule used by the move resolver
            successor_mode: Unit steps (default) or full slides
        """
        self.exit_policy = ExitPolicy(exit_policy)
        self.successor_mode = SuccessorMode(successor_mode)

    @abstractmethod
    def _pop(self, frontier: Deque[SearchNode]) -> SearchNode:
        """Remove and return the next node to expand."""

    def find_successors(self, board: Board, state: PuzzleState) -> List[Tuple[Move, PuzzleState]]:
        """
        Find every state reachable from state in one move.

        Args:
            board: Board geometry
            state: State to expand

        Returns:
            List of (move, successor_state) pairs
        """
        return generate_successors(board, state, self.exit_policy, self.successor_mode)

    def solve(self, context: SolutionContext) -> Solution:
        """
        Run the search to completion, yielding to the host at checkpoints.

        Args:
            context: Solution context with puzzle, limits, cancellation, progress

        Returns:
            Solution whose status tells why the search stopped
        """
        search = self.iter_search(context)
        while True:
            try:
                next(search)
            except StopIteration as stop:
                return stop.value
            context.yield_to_host()

    def iter_search(self, context: SolutionContext) -> Generator[int, None, Solution]:
        """
        Search generator.

        Suspends (yields the explored count) only at checkpoint boundaries,
        after progress was reported and cancellation checked; never in the
        middle of expanding a node.

        Args:
            context: Solution context

        Returns:
            Solution, delivered through StopIteration.value
        """
        start_time = time.perf_counter()
        board = context.board
        max_iterations = context.limits.max_iterations
        if max_iterations is None:
            max_iterations = self.max_iterations
        interval = context.limits.checkpoint_interval

        root = SearchNode(context.state)
        frontier: Deque[SearchNode] = deque([root])
        visited = {state_key(board, root.state)}
        metrics = SolutionMetrics(strategy_name=self.name, max_frontier=1)
        iterations = 0

        logger.info(
            f"[{self.name}] Search started: {context.state.piece_count} pieces, "
            f"budget {max_iterations} iterations"
        )

        while frontier:
            iterations += 1
            if iterations > max_iterations:
                logger.warning(f"[{self.name}] Search limit reached ({max_iterations} iterations)")
                return self._finish(SearchStatus.LIMIT_EXCEEDED, None, metrics,
                                    iterations - 1, visited, start_time)

            if iterations % interval == 0:
                explored = iterations - 1
                context.report_progress(explored, f"{explored} states explored")
                logger.debug(
                    f"[{self.name}] Checkpoint: {explored} explored, "
                    f"frontier {len(frontier)}, visited {len(visited)}"
                )
                if context.is_cancelled():
                    logger.info(f"[{self.name}] Search cancelled after {explored} states")
                    return self._finish(SearchStatus.CANCELLED, None, metrics,
                                        explored, visited, start_time)
                yield explored

            node = self._pop(frontier)

            if node.state.is_goal:
                return self._finish(SearchStatus.SOLVED, node, metrics,
                                    iterations, visited, start_time)

            for move, successor in self.find_successors(board, node.state):
                metrics.states_generated += 1
                key = state_key(board, successor)
                if key not in visited:
                    visited.add(key)
                    frontier.append(node.child(move, successor))

            if len(frontier) > metrics.max_frontier:
                metrics.max_frontier = len(frontier)

        return self._finish(SearchStatus.NO_SOLUTION, None, metrics,
                            iterations, visited, start_time)

    def _finish(self, status: SearchStatus, goal: Optional[SearchNode], metrics: SolutionMetrics,
                explored: int, visited: Set[bytes], start_time: float) -> Solution:
        """Build Solution object from computation results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        metrics.states_explored = explored
        metrics.visited_count = len(visited)

        solution = Solution(status=status, metrics=metrics)
        if goal is not None:
            solution.moves = goal.path_moves()
            solution.states = goal.path_states()

        logger.info(
            f"[{self.name}] Search finished: {status.value}, {solution.move_count} moves, "
            f"{explored} states explored ({metrics.computation_time_ms:.1f}ms)"
        )
        return solution

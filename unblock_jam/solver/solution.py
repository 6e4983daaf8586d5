"""
Solution Module - Search results, path nodes and cached solution playback.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .board import PuzzleState
from .errors import NoSolution, SearchCancelled, SearchLimitExceeded
from .move import Move


class SearchStatus(Enum):
    """Terminal status of a search run."""
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    LIMIT_EXCEEDED = "limit_exceeded"
    CANCELLED = "cancelled"


class SearchNode:
    """
    Frontier entry: a state plus a link to the node it was reached from.

    Paths share their prefixes through parent links instead of copying
    the whole path into every frontier entry.
    """
    __slots__ = ("state", "parent", "move", "depth")

    def __init__(self, state: PuzzleState, parent: Optional["SearchNode"] = None,
                 move: Optional[Move] = None):
        self.state = state
        self.parent = parent
        self.move = move
        self.depth = parent.depth + 1 if parent is not None else 0

    def child(self, move: Move, state: PuzzleState) -> "SearchNode":
        return SearchNode(state, parent=self, move=move)

    def _chain(self) -> List["SearchNode"]:
        nodes = []
        node = self
        while node.parent is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes

    def path_states(self) -> List[PuzzleState]:
        """States from the first move through this node (root excluded)."""
        return [node.state for node in self._chain()]

    def path_moves(self) -> List[Move]:
        """Moves from the root to this node."""
        return [node.move for node in self._chain()]


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a search run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Frontier pops (iterations) performed
        states_generated: Successors produced, before deduplication
        visited_count: Distinct states recorded in the visited set
        max_frontier: Largest frontier size observed
        strategy_name: Name of strategy that ran the search
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_generated: int = 0
    visited_count: int = 0
    max_frontier: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Outcome of one search run.

    Attributes:
        status: Why the search stopped
        moves: Ordered moves from the initial state to the goal
        states: State after each move (last is the empty goal state)
        metrics: Performance statistics
    """
    status: SearchStatus
    moves: List[Move] = field(default_factory=list)
    states: List[PuzzleState] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def is_solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def was_cancelled(self) -> bool:
        return self.status is SearchStatus.CANCELLED

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        return bool(self.moves)

    @property
    def final_state(self) -> Optional[PuzzleState]:
        """Goal state for a solved search, None otherwise."""
        return self.states[-1] if self.states else None

    def get_move(self, index: int) -> Move:
        return self.moves[index]

    def get_state_after_move(self, index: int) -> PuzzleState:
        """Pieces left on the board once moves[index] is applied (IndexError past the end)."""
        return self.states[index]

    def raise_for_status(self) -> "Solution":
        """
        Convert a failed search into an exception.

        Returns:
            self, when solved

        Raises:
            SearchLimitExceeded, NoSolution or SearchCancelled
        """
        explored = self.metrics.states_explored
        if self.status is SearchStatus.LIMIT_EXCEEDED:
            raise SearchLimitExceeded(f"Search limit reached after {explored} states", self)
        if self.status is SearchStatus.NO_SOLUTION:
            raise NoSolution(f"No solution found ({explored} states explored)", self)
        if self.status is SearchStatus.CANCELLED:
            raise SearchCancelled(f"Search cancelled after {explored} states", self)
        return self


@dataclass
class CachedSolution:
    """
    Playback cursor over a solved search.

    move_index points at the next move to apply; the state that move
    produces is solution.states[move_index].
    """
    solution: Solution
    move_index: int = 0

    @property
    def total_moves(self) -> int:
        return self.solution.move_count

    @property
    def moves_remaining(self) -> int:
        return max(0, self.total_moves - self.move_index)

    @property
    def is_exhausted(self) -> bool:
        return self.moves_remaining == 0

    @property
    def current_move(self) -> Optional[Move]:
        return None if self.is_exhausted else self.solution.moves[self.move_index]

    @property
    def expected_state_after(self) -> Optional[PuzzleState]:
        """State to display once current_move has been applied."""
        return None if self.is_exhausted else self.solution.states[self.move_index]

    def advance(self) -> Optional[Move]:
        """Consume current_move and return it (None once exhausted)."""
        move = self.current_move
        if move is not None:
            self.move_index += 1
        return move

    def peek_moves(self, count: int = 3) -> List[Move]:
        """Next count moves, fewer near the end of the path."""
        return self.solution.moves[self.move_index:self.move_index + count]

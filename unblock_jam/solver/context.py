"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board, PuzzleState


@dataclass(frozen=True)
class SearchLimits:
    """
    Budgets bounding a search run.

    Attributes:
        max_iterations: Frontier pops allowed (None = strategy default)
        checkpoint_interval: Iterations between progress/cancel checkpoints
    """
    max_iterations: Optional[int] = None
    checkpoint_interval: int = 1000

    def __post_init__(self):
        if self.checkpoint_interval <= 0:
            raise ValueError(f"checkpoint_interval must be positive, got {self.checkpoint_interval}")
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {self.max_iterations}")


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the puzzle,
    cancellation, progress reporting and the host yield hook.

    Attributes:
        board: Board geometry
        state: Initial state to solve from
        cancel_flag: Threading event for cancellation
        limits: Iteration budget and checkpoint interval
        progress_callback: Optional callback(explored, message) run at checkpoints
        yield_hook: Optional callable run at each checkpoint suspension so
            the host can service pending work
    """
    board: Board
    state: PuzzleState
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    limits: SearchLimits = field(default_factory=SearchLimits)
    progress_callback: Optional[Callable[[int, str], None]] = None
    yield_hook: Optional[Callable[[], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation was requested.

        Returns:
            True if strategy should stop execution
        """
        return self.cancel_flag.is_set()

    def cancel(self) -> None:
        """Request cancellation; honoured at the next checkpoint."""
        self.cancel_flag.set()

    def report_progress(self, explored: int, message: str = "") -> None:
        """
        Report progress to the host.

        Args:
            explored: Cumulative number of states expanded
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(explored, message)

    def yield_to_host(self) -> None:
        """Give the host a chance to run pending work."""
        if self.yield_hook:
            self.yield_hook()

"""
Puzzle Session Module - Host-side state machine around the search engine.

This module provides the PuzzleSession which owns the caller-visible piece
positions, applies manual slides, and runs searches one at a time:

  - Starting a search first cancels any in-flight search and waits for it
    to observe the cancellation before the new one begins
  - Results arriving from a superseded search are ignored
  - Manual moves are rejected while a search is running

For the core solving logic, see the unblock_jam.solver package.
"""

from enum import Enum, auto
from typing import Any, Callable, Dict, Iterable, Optional
import logging

from unblock_jam.settings import load_settings, limits_from_settings, strategy_kwargs_from_settings
from unblock_jam.solver import (
    Board, CachedSolution, Direction, Move, MoveOutcome, Piece, PuzzleState, Solution,
    SolutionContext, apply_manual_move, apply_outcome, create_strategy, get_strategy_names,
    load_puzzle
)
from unblock_jam.solver_worker import SearchWorker

logger = logging.getLogger(__name__)


__all__ = [
    "SessionState",
    "PuzzleSession",
]


class SessionState(Enum):
    """
    Session states.

    States:
        IDLE: Pieces remain; manual moves and searches allowed
        SEARCHING: A search is running; manual moves rejected
        SOLVED: Every piece has exited
    """
    IDLE = auto()
    SEARCHING = auto()
    SOLVED = auto()


class PuzzleSession:
    """
    One puzzle attempt: board, current pieces, and at most one live search.

    State Flow:
        IDLE -> SEARCHING -> IDLE (solution cached) -> step_solution() ... -> SOLVED
          |                                                                  ^
          |_______________ manual moves until the last piece exits __________|
    """

    # Grace period before logging that a cancelled search is slow to stop
    STOP_TIMEOUT_MS = 2000

    def __init__(self, board: Board, pieces: Iterable[Piece],
                 settings: Optional[Dict[str, Any]] = None, threaded: bool = True):
        """
        Initialize puzzle session.

        Args:
            board: Board geometry
            pieces: Piece definitions (validated with load_puzzle)
            settings: Settings dictionary (default: load_settings())
            threaded: Run searches on a QThread (False runs them inline)

        Raises:
            InvalidLevelError: If the initial geometry is invalid
        """
        self._board = board
        self._initial_state = load_puzzle(board, pieces)
        self._current_state = self._initial_state
        self._settings = settings if settings is not None else load_settings()
        self._strategy_name: str = self._settings["strategy_name"]
        self._threaded = threaded

        # Search tracking
        self._worker: Optional[SearchWorker] = None
        self._generation = 0
        self._last_solution: Optional[Solution] = None
        self._last_error: Optional[str] = None

        # Solution cursor, valid only from the state it was searched from
        self._cached_solution: Optional[CachedSolution] = None

        self._state = SessionState.SOLVED if self._current_state.is_goal else SessionState.IDLE

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_state(self) -> PuzzleState:
        """Get current (displayed) piece positions."""
        return self._current_state

    @property
    def state(self) -> SessionState:
        """Get current state machine state."""
        return self._state

    @property
    def is_searching(self) -> bool:
        return self._state == SessionState.SEARCHING

    @property
    def worker(self) -> Optional[SearchWorker]:
        return self._worker

    @property
    def last_solution(self) -> Optional[Solution]:
        """Result of the most recent non-superseded search."""
        return self._last_solution

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def cached_solution(self) -> Optional[CachedSolution]:
        return self._cached_solution

    @property
    def strategy_name(self) -> str:
        return self._strategy_name

    def set_strategy(self, strategy_name: str) -> None:
        """
        Change the strategy used by the next search.

        Raises:
            ValueError: If strategy name not found
        """
        if strategy_name not in get_strategy_names():
            available = ", ".join(get_strategy_names())
            raise ValueError(f"Unknown strategy: {strategy_name}. Available: {available}")
        self._strategy_name = strategy_name
        logger.info(f"Strategy changed to: {strategy_name}")

    def apply_manual_move(self, piece_id: int, direction: Direction,
                          max_steps: Optional[int] = None) -> MoveOutcome:
        """
        Slide a piece as a player would.

        Args:
            piece_id: Piece to slide
            direction: Direction of the slide
            max_steps: Optional bound on cells travelled

        Returns:
            Outcome of the slide (BLOCKED if rejected)

        Raises:
            KeyError: If piece_id is not on the board
        """
        if self._state != SessionState.IDLE:
            logger.warning(f"Manual move rejected in state {self._state.name}")
            return MoveOutcome.blocked()

        exit_policy = strategy_kwargs_from_settings(self._settings)["exit_policy"]
        outcome = apply_manual_move(self._board, self._current_state, piece_id,
                                    direction, max_steps, exit_policy)
        if outcome.is_blocked:
            return outcome

        index = self._current_state.index_of(piece_id)
        self._set_current_state(apply_outcome(self._current_state, index, outcome))
        self._cached_solution = None
        logger.debug(f"Manual move: piece {piece_id} {direction.value} -> {outcome.kind.name}")
        return outcome

    def start_search(self, strategy_name: Optional[str] = None,
                     progress_callback: Optional[Callable[[int, str], None]] = None
                     ) -> Optional[Solution]:
        """
        Start searching from the current pieces.

        Any in-flight search is cancelled and waited for first.

        Args:
            strategy_name: Strategy to use (default: session strategy)
            progress_callback: Optional callback(explored, message)

        Returns:
            The Solution when running inline, None when threaded
            (the result arrives through last_solution)
        """
        self.cancel_search()

        if self._current_state.is_goal:
            logger.info("Puzzle already solved, nothing to search")
            return None

        name = strategy_name or self._strategy_name
        strategy = create_strategy(name, **strategy_kwargs_from_settings(self._settings))
        context = SolutionContext(
            board=self._board,
            state=self._current_state,
            limits=limits_from_settings(self._settings, name),
            progress_callback=progress_callback,
        )

        self._generation += 1
        generation = self._generation
        self._cached_solution = None
        self._last_error = None

        worker = SearchWorker(strategy, context)
        worker.search_finished.connect(
            lambda solution, gen=generation: self._on_search_finished(gen, solution)
        )
        worker.error_occurred.connect(
            lambda message, gen=generation: self._on_search_error(gen, message)
        )
        self._worker = worker
        self._state = SessionState.SEARCHING
        logger.info(f"Search {generation} started with {name}")

        if self._threaded:
            worker.start()
            return None

        worker.run()
        return self._last_solution

    def cancel_search(self, wait_ms: int = STOP_TIMEOUT_MS) -> bool:
        """
        Cancel the in-flight search and wait until it has stopped.

        Args:
            wait_ms: Time before logging that the worker is slow to stop

        Returns:
            True if a running search was cancelled
        """
        worker = self._worker
        cancelled = False

        if worker is not None and worker.isRunning():
            logger.info("Cancelling in-flight search")
            worker.request_stop()
            if not worker.wait(wait_ms):
                logger.warning("Search did not stop in time, waiting for next checkpoint")
                worker.wait()
            cancelled = True

        if self._state == SessionState.SEARCHING:
            # Results of the stopped search are now stale
            self._generation += 1
            self._state = SessionState.IDLE
        return cancelled

    def step_solution(self) -> Optional[Move]:
        """
        Apply the next move of the cached solution to the current pieces.

        Returns:
            The applied move, or None if no solution is cached or it is exhausted
        """
        if self._state != SessionState.IDLE or self._cached_solution is None:
            return None

        next_state = self._cached_solution.expected_state_after
        move = self._cached_solution.advance()
        if move is None or next_state is None:
            return None

        self._set_current_state(next_state)
        return move

    def reset(self) -> None:
        """Cancel any search and put every piece back to its initial cells."""
        self.cancel_search()
        self._cached_solution = None
        self._last_solution = None
        self._set_current_state(self._initial_state)
        logger.info("Session reset")

    def _set_current_state(self, state: PuzzleState) -> None:
        self._current_state = state
        if state.is_goal:
            logger.info("State[SOLVED]: all pieces exited")
            self._state = SessionState.SOLVED
        else:
            self._state = SessionState.IDLE

    def _on_search_finished(self, generation: int, solution: Solution) -> None:
        if generation != self._generation:
            logger.debug(f"Ignoring result of superseded search {generation}")
            return

        self._last_solution = solution
        if solution.is_solved:
            self._cached_solution = CachedSolution(solution=solution)
        self._state = SessionState.IDLE

        logger.info(
            f"Search {generation} finished: {solution.status.value}, "
            f"{solution.move_count} moves, {solution.metrics.states_explored} states"
        )

    def _on_search_error(self, generation: int, message: str) -> None:
        if generation != self._generation:
            return
        logger.error(f"Search {generation} failed: {message}")
        self._last_error = message
        self._state = SessionState.IDLE

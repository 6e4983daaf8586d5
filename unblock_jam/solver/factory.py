"""
Strategy Factory Module - Registry, factory and one-call solve entry points.
"""

import asyncio
import threading
from typing import Any, Callable, Dict, List, Optional, Type

from .base import SolverStrategy
from .board import Board, PuzzleState
from .context import SearchLimits, SolutionContext
from .solution import Solution


# Strategy classes keyed by their `name` attribute
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Usage:
        @register_strategy
        class IterativeDeepeningStrategy(SolverStrategy):
            name = "iddfs"
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Registered name, e.g. "bfs" or "dfs"
        **kwargs: exit_policy / successor_mode for the strategy constructor

    Raises:
        ValueError: If no strategy is registered under name
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown strategy: {name}. Available: {', '.join(_STRATEGIES)}"
        ) from None
    return strategy_cls(**kwargs)


def get_strategy_names() -> List[str]:
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name/description pairs, in registration order, for pickers."""
    return [{"name": name, "description": cls.description} for name, cls in _STRATEGIES.items()]


def get_default_strategy_name() -> str:
    """Prefer "bfs" (shortest paths); fall back to the first registered name."""
    if "bfs" in _STRATEGIES:
        return "bfs"
    return next(iter(_STRATEGIES), "")


def _build_context(board: Board, state: PuzzleState,
                   limits: Optional[SearchLimits],
                   cancel_flag: Optional[threading.Event],
                   progress_callback: Optional[Callable[[int, str], None]],
                   yield_hook: Optional[Callable[[], None]]) -> SolutionContext:
    return SolutionContext(
        board=board,
        state=state,
        cancel_flag=cancel_flag if cancel_flag is not None else threading.Event(),
        limits=limits if limits is not None else SearchLimits(),
        progress_callback=progress_callback,
        yield_hook=yield_hook,
    )


def solve_puzzle(board: Board, state: PuzzleState, strategy: str = "bfs",
                 limits: Optional[SearchLimits] = None,
                 cancel_flag: Optional[threading.Event] = None,
                 progress_callback: Optional[Callable[[int, str], None]] = None,
                 yield_hook: Optional[Callable[[], None]] = None,
                 **strategy_kwargs: Any) -> Solution:
    """
    Solve a puzzle with a named strategy.

    Args:
        board: Board geometry
        state: Initial state (from load_puzzle)
        strategy: Registered strategy name
        limits: Iteration budget and checkpoint interval
        cancel_flag: Event the caller sets to cancel
        progress_callback: Called at each checkpoint with the explored count
        yield_hook: Called at each checkpoint suspension
        **strategy_kwargs: exit_policy / successor_mode overrides

    Returns:
        Solution with status, path and metrics
    """
    context = _build_context(board, state, limits, cancel_flag, progress_callback, yield_hook)
    return create_strategy(strategy, **strategy_kwargs).solve(context)


async def solve_puzzle_async(board: Board, state: PuzzleState, strategy: str = "bfs",
                             limits: Optional[SearchLimits] = None,
                             cancel_flag: Optional[threading.Event] = None,
                             progress_callback: Optional[Callable[[int, str], None]] = None,
                             **strategy_kwargs: Any) -> Solution:
    """
    Solve a puzzle inside an asyncio event loop.

    Control returns to the loop at every checkpoint, so other tasks
    (including the one that sets cancel_flag) keep running.

    Returns:
        Solution with status, path and metrics
    """
    context = _build_context(board, state, limits, cancel_flag, progress_callback, None)
    search = create_strategy(strategy, **strategy_kwargs).iter_search(context)
    while True:
        try:
            next(search)
        except StopIteration as stop:
            return stop.value
        await asyncio.sleep(0)

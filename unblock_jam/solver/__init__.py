"""
Solver Package - State-space search engine for color-gate sliding-block puzzles.

Pieces move along their own axis; a piece leaves the board when it reaches
a gate of its color. The puzzle is solved when every piece has exited.

Public API:
    - Board, Gate, Piece, PuzzleState: Immutable puzzle model
    - Axis, Direction: Movement constraint and unit directions
    - load_puzzle(): Validate geometry and build the initial state
    - try_move(), apply_manual_move(): Move resolution (search and manual play)
    - generate_successors(): One-move neighbours of a state
    - state_key(): Exact canonical key for deduplication
    - SolutionContext, SearchLimits: Cancellation, progress and budgets
    - Solution, SearchStatus: Result of a search run
    - create_strategy(), solve_puzzle(): Run "bfs" or "dfs"

Usage:
    from unblock_jam.solver import Board, Piece, load_puzzle, solve_puzzle

    board = Board.create(3, 3, static_blocks=[(1, 1)],
                         gates=[{"color": 1, "cells": [(0, 2)]}])
    state = load_puzzle(board, [Piece.create(0, 1, [(0, 0)])])

    solution = solve_puzzle(board, state, strategy="bfs")
    for move in solution.moves:
        print(move)
"""

# Core data structures
from .board import MAX_PIECE_ID, Axis, Board, Direction, Gate, Piece, PuzzleState, load_puzzle
from .move import Move, MoveOutcome, OutcomeKind
from .rules import ExitPolicy, apply_manual_move, apply_outcome, try_move
from .successors import SuccessorMode, generate_successors
from .hashing import state_key
from .errors import (
    InvalidLevelError,
    NoSolution,
    PuzzleError,
    SearchCancelled,
    SearchFailure,
    SearchLimitExceeded,
)
from .solution import CachedSolution, SearchNode, SearchStatus, Solution, SolutionMetrics
from .context import SearchLimits, SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    solve_puzzle,
    solve_puzzle_async,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Model
    "Axis",
    "Board",
    "Direction",
    "Gate",
    "Piece",
    "PuzzleState",
    "load_puzzle",
    "MAX_PIECE_ID",
    # Moves
    "Move",
    "MoveOutcome",
    "OutcomeKind",
    "ExitPolicy",
    "try_move",
    "apply_outcome",
    "apply_manual_move",
    "SuccessorMode",
    "generate_successors",
    "state_key",
    # Errors
    "PuzzleError",
    "InvalidLevelError",
    "SearchFailure",
    "SearchLimitExceeded",
    "NoSolution",
    "SearchCancelled",
    # Results
    "SearchStatus",
    "SearchNode",
    "Solution",
    "SolutionMetrics",
    "CachedSolution",
    "SearchLimits",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve_puzzle",
    "solve_puzzle_async",
]

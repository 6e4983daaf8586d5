"""
Successors Module - Enumerates the states reachable in one action.
"""

from enum import Enum
from typing import List, Tuple

from .board import Board, PuzzleState
from .move import Move
from .rules import ExitPolicy, apply_outcome, resolve_step


class SuccessorMode(Enum):
    """
    Transition granularity.

    UNIT_STEP: one successor per legal single-cell step.
    SLIDE: one successor per intermediate resting cell along a direction,
        stopping at the first block or exit.
    """
    UNIT_STEP = "unit_step"
    SLIDE = "slide"


def generate_successors(
    board: Board,
    state: PuzzleState,
    exit_policy: ExitPolicy = ExitPolicy.ANY_CELL,
    mode: SuccessorMode = SuccessorMode.UNIT_STEP
) -> List[Tuple[Move, PuzzleState]]:
    """
    Enumerate every legal move from state.

    Pieces are visited in state order and directions in Axis.directions
    order, so the result is deterministic.

    Args:
        board: Board geometry
        state: State to expand
        exit_policy: Gate exit rule
        mode: Unit steps or full slides

    Returns:
        List of (move, successor_state) pairs
    """
    successors: List[Tuple[Move, PuzzleState]] = []

    for index, piece in enumerate(state.pieces):
        occupied = state.occupied_cells(exclude_index=index)

        for direction in piece.axis.directions:
            current = piece
            steps = 0

            while True:
                outcome = resolve_step(board, current, direction, occupied, exit_policy)
                if outcome.is_blocked:
                    break

                steps += 1
                move = Move(piece_id=piece.id, direction=direction,
                            steps=steps, exited=outcome.is_exited)
                successors.append((move, apply_outcome(state, index, outcome)))

                if outcome.is_exited or mode is SuccessorMode.UNIT_STEP:
                    break
                current = current.with_cells(outcome.cells)

    return successors

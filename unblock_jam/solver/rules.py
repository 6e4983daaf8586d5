"""
Rules Module - Move resolution shared by manual play and search.

All functions here are pure: they never mutate the board, the state, or
the pieces passed in.
"""

from enum import Enum
from typing import AbstractSet, Optional, Sequence, Tuple, Union

from .board import Board, Cell, Direction, Gate, Piece, PuzzleState
from .move import MoveOutcome


class ExitPolicy(Enum):
    """
    Rule deciding when a moving piece leaves through a gate.

    ANY_CELL: any shifted cell overlaps any cell of a same-color gate.
    FULL_ALIGNMENT: as ANY_CELL, and the whole footprint lies inside the
        gate's span across the direction of motion.
    """
    ANY_CELL = "any_cell"
    FULL_ALIGNMENT = "full_alignment"

    def piece_exits(self, board: Board, piece: Piece,
                    shifted: Tuple[Cell, ...], direction: Direction) -> bool:
        """
        Check whether the shifted piece exits through a matching gate.

        Args:
            board: Board geometry
            piece: The moving piece (for color)
            shifted: Piece cells after the step
            direction: Direction of the step

        Returns:
            True if the move takes the piece off the board
        """
        for gate in board.gates_for(piece.color):
            if not any(cell in gate.cells for cell in shifted):
                continue
            if self is ExitPolicy.ANY_CELL or _aligned(gate, shifted, direction):
                return True
        return False


def _aligned(gate: Gate, cells: Tuple[Cell, ...], direction: Direction) -> bool:
    if direction.is_horizontal:
        return all(r in gate.rows for r, _ in cells)
    return all(c in gate.cols for _, c in cells)


def resolve_step(board: Board, piece: Piece, direction: Direction,
                 occupied: AbstractSet[Cell],
                 exit_policy: ExitPolicy = ExitPolicy.ANY_CELL) -> MoveOutcome:
    """
    Resolve a single-cell move against a precomputed occupancy set.

    Args:
        board: Board geometry
        piece: Piece to move
        direction: Direction of the step
        occupied: Cells held by every other present piece
        exit_policy: Gate exit rule

    Returns:
        BLOCKED, RELOCATED with the shifted cells, or EXITED
    """
    if not piece.axis.allows(direction):
        return MoveOutcome.blocked()

    shifted = piece.shifted(direction)
    for cell in shifted:
        if not board.in_bounds(cell) or cell in board.static_blocks or cell in occupied:
            return MoveOutcome.blocked()

    if exit_policy.piece_exits(board, piece, shifted, direction):
        return MoveOutcome.exited()
    return MoveOutcome.relocated(shifted)


def try_move(board: Board, pieces: Union[PuzzleState, Sequence[Piece]],
             piece_index: int, direction: Direction,
             exit_policy: ExitPolicy = ExitPolicy.ANY_CELL) -> MoveOutcome:
    """
    Decide whether a single-cell move is legal and whether it exits.

    Args:
        board: Board geometry
        pieces: Current state or sequence of present pieces
        piece_index: Position of the moving piece in pieces
        direction: Direction of the step
        exit_policy: Gate exit rule

    Returns:
        MoveOutcome for the step
    """
    if not isinstance(pieces, PuzzleState):
        pieces = PuzzleState(pieces=tuple(pieces))
    piece = pieces.pieces[piece_index]
    occupied = pieces.occupied_cells(exclude_index=piece_index)
    return resolve_step(board, piece, direction, occupied, exit_policy)


def apply_outcome(state: PuzzleState, piece_index: int, outcome: MoveOutcome) -> PuzzleState:
    """
    Produce the state that results from a resolved move.

    Args:
        state: State the move was resolved against
        piece_index: Position of the moved piece
        outcome: Result of the resolver

    Returns:
        New state (the same state if the move was blocked)
    """
    if outcome.is_exited:
        return state.without_piece(piece_index)
    if outcome.is_relocated:
        return state.with_piece_cells(piece_index, outcome.cells)
    return state


def apply_manual_move(board: Board, state: PuzzleState, piece_id: int,
                      direction: Direction, max_steps: Optional[int] = None,
                      exit_policy: ExitPolicy = ExitPolicy.ANY_CELL) -> MoveOutcome:
    """
    Slide a piece as far as it goes in one direction.

    Repeats single steps until the piece is blocked, exits, or has
    travelled max_steps cells.

    Args:
        board: Board geometry
        state: Current state
        piece_id: Id of the piece to slide
        direction: Direction of the slide
        max_steps: Optional bound on cells travelled (drag distance)
        exit_policy: Gate exit rule

    Returns:
        BLOCKED if the first step is blocked, EXITED if the slide exits,
        otherwise RELOCATED at the final resting cells

    Raises:
        KeyError: If piece_id is not present in state
    """
    index = state.index_of(piece_id)
    piece = state.pieces[index]
    occupied = state.occupied_cells(exclude_index=index)

    steps = 0
    while max_steps is None or steps < max_steps:
        outcome = resolve_step(board, piece, direction, occupied, exit_policy)
        if outcome.is_blocked:
            break
        steps += 1
        if outcome.is_exited:
            return MoveOutcome.exited(steps=steps)
        piece = piece.with_cells(outcome.cells)

    if steps == 0:
        return MoveOutcome.blocked()
    return MoveOutcome.relocated(piece.cells, steps=steps)

"""
Hashing Module - Exact canonical keys for visited-state deduplication.
"""

import numpy as np

from .board import Board, PuzzleState


def state_key(board: Board, state: PuzzleState) -> bytes:
    """
    Encode a state as an exact, order-independent key.

    Each board cell holds the occupying piece's id + 1, or 0 when empty.
    load_puzzle bounds ids by MAX_PIECE_ID so the marker fits an int64 cell.
    Pieces never overlap, so two keys are equal iff the same ids occupy
    the same cells, regardless of piece order.

    Args:
        board: Board geometry (for dimensions)
        state: State to encode

    Returns:
        Bytes of the row-major occupancy grid
    """
    grid = np.zeros(board.rows * board.cols, dtype=np.int64)
    cols = board.cols
    for piece in state.pieces:
        marker = piece.id + 1
        for r, c in piece.cells:
            grid[r * cols + c] = marker
    return grid.tobytes()

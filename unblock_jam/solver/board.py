"""
Board Module - Immutable board geometry, pieces and puzzle states.

A Board is built once per puzzle attempt and is read-only afterwards.
PuzzleState values are snapshots: every transition produces a new state.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any, FrozenSet, Hashable, Iterable, List, Mapping, Optional, Sequence, Set, Tuple, Union
)

from .errors import InvalidLevelError

Cell = Tuple[int, int]
Color = Hashable

# Largest id whose state-key marker (id + 1) fits a signed 64-bit cell
MAX_PIECE_ID = 2 ** 63 - 2


class Direction(Enum):
    """Unit move directions on the grid."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Cell:
        """(row, col) offset of a single step."""
        return _DELTAS[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Axis(Enum):
    """Movement constraint of a piece."""
    UNCONSTRAINED = "any"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def directions(self) -> Tuple[Direction, ...]:
        """Permitted directions, in the fixed order used for successor generation."""
        if self is Axis.HORIZONTAL:
            return (Direction.RIGHT, Direction.LEFT)
        if self is Axis.VERTICAL:
            return (Direction.DOWN, Direction.UP)
        return (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP)

    def allows(self, direction: Direction) -> bool:
        """Check whether this axis permits moving in direction."""
        if self is Axis.HORIZONTAL:
            return direction.is_horizontal
        if self is Axis.VERTICAL:
            return not direction.is_horizontal
        return True

    @classmethod
    def parse(cls, value: Union["Axis", str, None]) -> "Axis":
        """
        Parse a level-file axis value.

        Args:
            value: Axis, "horizontal", "vertical", or None/""/"any" for unconstrained

        Returns:
            Matching Axis

        Raises:
            InvalidLevelError: If the value is not a known axis
        """
        if isinstance(value, Axis):
            return value
        if value is None or value == "":
            return cls.UNCONSTRAINED
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidLevelError(f"Unknown axis: {value!r}") from None


@dataclass(frozen=True)
class Gate:
    """
    Color-tagged exit gate.

    Attributes:
        color: Only pieces of this color exit here
        cells: Grid cells covered by the gate
    """
    color: Color
    cells: FrozenSet[Cell]

    @property
    def rows(self) -> FrozenSet[int]:
        """Rows spanned by the gate."""
        return frozenset(r for r, _ in self.cells)

    @property
    def cols(self) -> FrozenSet[int]:
        """Columns spanned by the gate."""
        return frozenset(c for _, c in self.cells)


@dataclass(frozen=True)
class Board:
    """
    Static description of the grid.

    Attributes:
        rows: Number of rows (positive)
        cols: Number of columns (positive)
        static_blocks: Permanently impassable cells
        gates: Exit gates, in level order
    """
    rows: int
    cols: int
    static_blocks: FrozenSet[Cell] = frozenset()
    gates: Tuple[Gate, ...] = ()

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidLevelError(f"Board dimensions must be positive, got {self.rows}x{self.cols}")

        for cell in self.static_blocks:
            if not self.in_bounds(cell):
                raise InvalidLevelError(f"Static block {cell} is outside the board")

        for gate in self.gates:
            if not gate.cells:
                raise InvalidLevelError(f"Gate of color {gate.color!r} has no cells")
            for cell in gate.cells:
                if not self.in_bounds(cell):
                    raise InvalidLevelError(f"Gate cell {cell} is outside the board")
                if cell in self.static_blocks:
                    raise InvalidLevelError(f"Cell {cell} is both a static block and a gate")

    @classmethod
    def create(cls, rows: int, cols: int,
               static_blocks: Iterable[Sequence[int]] = (),
               gates: Iterable[Union[Gate, Mapping[str, Any]]] = ()) -> "Board":
        """
        Create a Board from plain lists.

        Args:
            rows: Number of rows
            cols: Number of columns
            static_blocks: Iterable of (row, col) pairs
            gates: Gate objects or mappings with "color" and "cells" keys

        Returns:
            Validated Board instance
        """
        gate_list = []
        for gate in gates:
            if not isinstance(gate, Gate):
                gate = Gate(
                    color=gate["color"],
                    cells=frozenset(_to_cell(c) for c in gate["cells"])
                )
            gate_list.append(gate)

        return cls(
            rows=rows,
            cols=cols,
            static_blocks=frozenset(_to_cell(c) for c in static_blocks),
            gates=tuple(gate_list)
        )

    def in_bounds(self, cell: Cell) -> bool:
        """Check if a cell lies within [0, rows) x [0, cols)."""
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_blocked(self, cell: Cell) -> bool:
        """Check if a cell is a static block."""
        return cell in self.static_blocks

    def gates_for(self, color: Color) -> List[Gate]:
        """Get all gates matching a color."""
        return [gate for gate in self.gates if gate.color == color]

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class Piece:
    """
    Rigid, color-tagged, axis-constrained group of cells.

    Attributes:
        id: Stable identity, unique for the puzzle's lifetime
        color: Must match a gate's color to exit through it
        axis: Movement constraint
        cells: Occupied cells, in level order
    """
    id: int
    color: Color
    axis: Axis
    cells: Tuple[Cell, ...]

    @classmethod
    def create(cls, id: int, color: Color, cells: Iterable[Sequence[int]],
               axis: Union[Axis, str, None] = None) -> "Piece":
        """
        Create a Piece with list cells converted to tuples.

        Args:
            id: Piece identity
            color: Piece color
            cells: Iterable of (row, col) pairs
            axis: Axis or level-file axis string

        Returns:
            Piece instance
        """
        return cls(id=id, color=color, axis=Axis.parse(axis),
                   cells=tuple(_to_cell(c) for c in cells))

    def shifted(self, direction: Direction) -> Tuple[Cell, ...]:
        """Cells after a single step in direction."""
        dr, dc = direction.delta
        return tuple((r + dr, c + dc) for r, c in self.cells)

    def with_cells(self, cells: Tuple[Cell, ...]) -> "Piece":
        """Copy of this piece occupying different cells."""
        return Piece(id=self.id, color=self.color, axis=self.axis, cells=cells)

    @property
    def size(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class PuzzleState:
    """
    Snapshot of all still-present pieces.

    Attributes:
        pieces: Present pieces, in insertion order
    """
    pieces: Tuple[Piece, ...]

    @property
    def is_goal(self) -> bool:
        """True when every piece has exited."""
        return len(self.pieces) == 0

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

    @property
    def piece_ids(self) -> FrozenSet[int]:
        return frozenset(p.id for p in self.pieces)

    def index_of(self, piece_id: int) -> int:
        """
        Find the position of a piece in this state.

        Raises:
            KeyError: If no present piece has this id
        """
        for index, piece in enumerate(self.pieces):
            if piece.id == piece_id:
                return index
        raise KeyError(piece_id)

    def get_piece(self, piece_id: int) -> Piece:
        return self.pieces[self.index_of(piece_id)]

    def without_piece(self, index: int) -> "PuzzleState":
        """New state with the piece at index removed."""
        return PuzzleState(pieces=self.pieces[:index] + self.pieces[index + 1:])

    def with_piece_cells(self, index: int, cells: Tuple[Cell, ...]) -> "PuzzleState":
        """New state with the piece at index moved to cells."""
        moved = self.pieces[index].with_cells(cells)
        return PuzzleState(pieces=self.pieces[:index] + (moved,) + self.pieces[index + 1:])

    def occupied_cells(self, exclude_index: Optional[int] = None) -> Set[Cell]:
        """
        Collect cells occupied by present pieces.

        Args:
            exclude_index: Piece position to leave out (the moving piece)

        Returns:
            Set of occupied (row, col) cells
        """
        occupied: Set[Cell] = set()
        for index, piece in enumerate(self.pieces):
            if index != exclude_index:
                occupied.update(piece.cells)
        return occupied


def load_puzzle(board: Board, pieces: Iterable[Piece]) -> PuzzleState:
    """
    Build and validate the initial state.

    Args:
        board: Validated board geometry
        pieces: Piece definitions

    Returns:
        Initial PuzzleState

    Raises:
        InvalidLevelError: On negative or oversized ids, empty, disconnected, out-of-bounds or
            overlapping pieces, pieces on static blocks, or duplicate ids
    """
    pieces = tuple(pieces)
    seen_ids: Set[int] = set()
    occupied = {}

    for piece in pieces:
        if not 0 <= piece.id <= MAX_PIECE_ID:
            raise InvalidLevelError(f"Piece id must be in 0..{MAX_PIECE_ID}, got {piece.id}")
        if piece.id in seen_ids:
            raise InvalidLevelError(f"Duplicate piece id {piece.id}")
        seen_ids.add(piece.id)

        if not piece.cells:
            raise InvalidLevelError(f"Piece {piece.id} has no cells")
        if len(set(piece.cells)) != len(piece.cells):
            raise InvalidLevelError(f"Piece {piece.id} repeats a cell")

        for cell in piece.cells:
            if not board.in_bounds(cell):
                raise InvalidLevelError(f"Piece {piece.id} cell {cell} is outside the board")
            if board.is_blocked(cell):
                raise InvalidLevelError(f"Piece {piece.id} overlaps static block {cell}")
            if cell in occupied:
                raise InvalidLevelError(
                    f"Piece {piece.id} overlaps piece {occupied[cell]} at {cell}"
                )
            occupied[cell] = piece.id

        if not _is_connected(piece.cells):
            raise InvalidLevelError(f"Piece {piece.id} is not 4-connected")

    return PuzzleState(pieces=pieces)


def _is_connected(cells: Sequence[Cell]) -> bool:
    """Flood fill from the first cell over 4-neighbours."""
    remaining = set(cells)
    queue = deque([cells[0]])
    remaining.discard(cells[0])
    while queue:
        r, c = queue.popleft()
        for neighbour in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if neighbour in remaining:
                remaining.discard(neighbour)
                queue.append(neighbour)
    return not remaining


def _to_cell(value: Sequence[int]) -> Cell:
    row, col = value
    return (int(row), int(col))

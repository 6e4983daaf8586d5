"""
Move Module - Outcomes of the move resolver and moves along a solution path.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from .board import Cell, Direction


class OutcomeKind(Enum):
    """Result category of a move attempt."""
    BLOCKED = auto()
    RELOCATED = auto()
    EXITED = auto()


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of resolving a move.

    Attributes:
        kind: Blocked, relocated or exited
        cells: New cells of the piece (RELOCATED only, empty otherwise)
        steps: Unit steps travelled before resting or exiting
    """
    kind: OutcomeKind
    cells: Tuple[Cell, ...] = ()
    steps: int = 0

    @classmethod
    def blocked(cls) -> "MoveOutcome":
        return cls(kind=OutcomeKind.BLOCKED)

    @classmethod
    def relocated(cls, cells: Tuple[Cell, ...], steps: int = 1) -> "MoveOutcome":
        return cls(kind=OutcomeKind.RELOCATED, cells=tuple(cells), steps=steps)

    @classmethod
    def exited(cls, steps: int = 1) -> "MoveOutcome":
        return cls(kind=OutcomeKind.EXITED, steps=steps)

    @property
    def is_blocked(self) -> bool:
        return self.kind is OutcomeKind.BLOCKED

    @property
    def is_relocated(self) -> bool:
        return self.kind is OutcomeKind.RELOCATED

    @property
    def is_exited(self) -> bool:
        return self.kind is OutcomeKind.EXITED


@dataclass(frozen=True)
class Move:
    """
    One transition between two puzzle states.

    Attributes:
        piece_id: Piece that moved
        direction: Direction of travel
        steps: Cells travelled (1 for unit-step search)
        exited: True if the piece left the board through a gate
    """
    piece_id: int
    direction: Direction
    steps: int = 1
    exited: bool = False

    def __str__(self) -> str:
        action = "exits" if self.exited else "moves"
        return f"piece {self.piece_id} {action} {self.direction.value} x{self.steps}"

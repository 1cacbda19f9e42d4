"""Defines the sides and the kinds of chess pieces"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto

from src.chess.square import Square


class PieceKind(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Side(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> Side:
        return Side.BLACK if self == Side.WHITE else Side.WHITE

    @property
    def forward(self) -> int:
        """Direction of travel along the file axis: White moves up the files, Black moves down."""
        return 1 if self == Side.WHITE else -1

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


# NOTE: pawns may advance two squares only from these files
PAWN_START_FILE: dict[Side, int] = {
    Side.WHITE: 1,
    Side.BLACK: 6,
}


@dataclass(frozen=True)
class Piece:
    """A piece is a plain value. The Board hands out a handle whenever a specific piece must be addressed."""

    side: Side
    kind: PieceKind
    position: Square

    def moved_to(self, square: Square) -> Piece:
        return replace(self, position=square)

"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    DECIDED = "decided"


# --- NOTE: The domain layer has its own Side / PieceKind enums (src/chess/pieces.py).
# --- These string versions are what the boundary models send over to the presentation layer.


class Side(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceKind(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class EventType(StrEnum):
    PIECE_MOVED = "piece moved"
    PIECE_CAPTURED = "piece captured"
    TURN_CHANGED = "turn changed"
    GAME_OVER = "game over"

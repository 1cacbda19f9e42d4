"""The Board holds every live piece. It is the single source of truth for legality checks."""

from dataclasses import dataclass, field
from typing import Iterator, NewType, Optional

from src.chess.pieces import Piece, Side
from src.chess.square import Square
from src.core.exceptions import BoardError

PieceHandle = NewType("PieceHandle", int)


@dataclass
class Board:
    """
    Arena of pieces, indexed by handle.
    ----

    The handle is the primary key. Looking a piece up by its square is a derived query,
    so "the piece being moved" and "the piece standing on the target square" can never get mixed up.

    NOTE: Handles are never reused. A captured piece is removed from the arena, and its handle simply stops resolving.
    """

    pieces: dict[PieceHandle, Piece] = field(default_factory=dict)
    _next_handle: int = field(default=0, repr=False, compare=False)

    # --- CONSTRUCTION ---
    def add_piece(self, piece: Piece) -> PieceHandle:
        """Place a new piece. Only used when setting up a position, never during play."""
        if not piece.position.is_within_bounds():
            raise BoardError(f"Cannot place {piece} outside of the board.")
        if self.piece_at(piece.position) is not None:
            raise BoardError(f"Square {piece.position} is already occupied.")

        handle = PieceHandle(self._next_handle)
        self._next_handle += 1
        self.pieces[handle] = piece
        return handle

    def add_pieces(self, pieces: list[Piece]) -> list[PieceHandle]:
        """convenience method to set up a position in one go"""
        return [self.add_piece(piece) for piece in pieces]

    # --- QUERIES ---
    def piece(self, handle: PieceHandle) -> Optional[Piece]:
        return self.pieces.get(handle)

    def piece_at(self, square: Square) -> Optional[tuple[PieceHandle, Piece]]:
        for handle, piece in self.pieces.items():
            if piece.position == square:
                return handle, piece
        return None

    def handle_at(self, square: Square) -> Optional[PieceHandle]:
        found = self.piece_at(square)
        return found[0] if found else None

    def locate_side(self, side: Side) -> list[PieceHandle]:
        return [handle for handle, piece in self.pieces.items() if piece.side == side]

    def handles(self) -> list[PieceHandle]:
        return list(self.pieces.keys())

    def snapshot(self) -> tuple[Piece, ...]:
        """Read-only view of all pieces (what the rules engine works with)."""
        return tuple(self.pieces.values())

    def count_by_side(self) -> dict[Side, int]:
        """Tally the number of live pieces per side"""
        return {side: len(self.locate_side(side)) for side in Side}

    def __len__(self) -> int:
        return len(self.pieces)

    def __contains__(self, handle: object) -> bool:
        return handle in self.pieces

    def __iter__(self) -> Iterator[tuple[PieceHandle, Piece]]:
        return iter(list(self.pieces.items()))

    # --- MUTATIONS (called by the controller only) ---
    def move_piece(self, handle: PieceHandle, to_square: Square) -> Piece:
        """Update the position of a piece. Returns the piece as it was before the move."""
        piece = self.pieces[handle]
        self.pieces[handle] = piece.moved_to(to_square)
        return piece

    def remove_piece(self, handle: PieceHandle) -> Piece:
        """Take a piece off the board (capture)"""
        return self.pieces.pop(handle)

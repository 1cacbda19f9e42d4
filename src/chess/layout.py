"""
The standard starting layout.

Listed square by square on purpose (not generated): it doubles as documentation of the coordinate convention.
* White back rank on file 0, White pawns on file 1
* Black pawns on file 6, Black back rank on file 7
* Along each back rank (rank index 0 -> 7): Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook
"""

from src.chess.board import Board
from src.chess.pieces import Piece, PieceKind, Side
from src.chess.square import Square

K, Q, B, N, R, P = (
    PieceKind.KING,
    PieceKind.QUEEN,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
    PieceKind.PAWN,
)
W, BL = Side.WHITE, Side.BLACK

# (side, kind, file, rank)
STARTING_LAYOUT: tuple[tuple[Side, PieceKind, int, int], ...] = (
    # White back rank
    (W, R, 0, 0),
    (W, N, 0, 1),
    (W, B, 0, 2),
    (W, Q, 0, 3),
    (W, K, 0, 4),
    (W, B, 0, 5),
    (W, N, 0, 6),
    (W, R, 0, 7),
    # White pawns
    (W, P, 1, 0),
    (W, P, 1, 1),
    (W, P, 1, 2),
    (W, P, 1, 3),
    (W, P, 1, 4),
    (W, P, 1, 5),
    (W, P, 1, 6),
    (W, P, 1, 7),
    # Black back rank
    (BL, R, 7, 0),
    (BL, N, 7, 1),
    (BL, B, 7, 2),
    (BL, Q, 7, 3),
    (BL, K, 7, 4),
    (BL, B, 7, 5),
    (BL, N, 7, 6),
    (BL, R, 7, 7),
    # Black pawns
    (BL, P, 6, 0),
    (BL, P, 6, 1),
    (BL, P, 6, 2),
    (BL, P, 6, 3),
    (BL, P, 6, 4),
    (BL, P, 6, 5),
    (BL, P, 6, 6),
    (BL, P, 6, 7),
)


def initial_board() -> Board:
    """A fresh board with all 32 pieces on their starting squares."""
    board = Board()
    board.add_pieces(
        [Piece(side, kind, Square(file, rank)) for side, kind, file, rank in STARTING_LAYOUT]
    )
    return board

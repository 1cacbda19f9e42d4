"""
Movement rules: decide if a single piece may move to a given square.

Key idea: Use strategy pattern to define the geometric rule for each piece kind.

Everything in here is a pure function over a snapshot of the board (a collection of piece values).
Nothing gets mutated, so it is safe to call from anywhere.
"""

from typing import Callable, Iterable, Optional

from src.chess.pieces import PAWN_START_FILE, Piece, PieceKind, Side
from src.chess.square import Square, all_squares

Vector = tuple[int, int]
Pieces = Iterable[Piece]


# --- BOARD QUERIES ---
def occupant_side(square: Square, pieces: Pieces) -> Optional[Side]:
    """Return the side of the piece standing exactly on the square, or None if it is empty."""
    for piece in pieces:
        if piece.position == square:
            return piece.side
    return None


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Find the squares strictly between two squares on a common file, rank or diagonal (both endpoints excluded).

    NOTE: Only called once the geometric precondition (colinear) already holds.
    """
    delta_file = to_square.file - from_square.file
    delta_rank = to_square.rank - from_square.rank
    steps = max(abs(delta_file), abs(delta_rank))
    step: Vector = (_sign(delta_file), _sign(delta_rank))

    return [from_square.offset(step[0] * i, step[1] * i) for i in range(1, steps)]


def is_path_empty(from_square: Square, to_square: Square, pieces: Pieces) -> bool:
    """True if no piece sits on any square strictly between the two squares."""
    pieces = tuple(pieces)
    return all(
        occupant_side(square, pieces) is None
        for square in squares_between(from_square, to_square)
    )


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _deltas(piece: Piece, destination: Square) -> Vector:
    return (
        destination.file - piece.position.file,
        destination.rank - piece.position.rank,
    )


# --- MOVEMENT RULES ---
def is_king_move(piece: Piece, destination: Square, pieces: Pieces) -> bool:
    """The king moves by a single square in any of the 8 directions."""
    delta_file, delta_rank = _deltas(piece, destination)
    return max(abs(delta_file), abs(delta_rank)) == 1


def is_knight_move(piece: Piece, destination: Square, pieces: Pieces) -> bool:
    """Knights jump (2, 1) or (1, 2). Whatever stands in between does not matter."""
    delta_file, delta_rank = _deltas(piece, destination)
    return (abs(delta_file), abs(delta_rank)) in ((2, 1), (1, 2))


def is_bishop_move(piece: Piece, destination: Square, pieces: Pieces) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|, with nothing in the way."""
    delta_file, delta_rank = _deltas(piece, destination)
    if abs(delta_file) != abs(delta_rank) or delta_file == 0:
        return False
    return is_path_empty(piece.position, destination, pieces)


def is_rook_move(piece: Piece, destination: Square, pieces: Pieces) -> bool:
    """Rooks move either horizontally or vertically, with nothing in the way."""
    delta_file, delta_rank = _deltas(piece, destination)
    # exactly one of the two deltas is zero. (0, 0) does not count.
    if (delta_file == 0) == (delta_rank == 0):
        return False
    return is_path_empty(piece.position, destination, pieces)


def is_queen_move(piece: Piece, destination: Square, pieces: Pieces) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_rook_move(piece, destination, pieces) or is_bishop_move(
        piece, destination, pieces
    )


def is_pawn_move(piece: Piece, destination: Square, pieces: Pieces) -> bool:
    """
    A pawn:
    - moves a single square forward, onto an empty square.
    - can move two squares forward from its starting file, if both squares are empty.
    - takes diagonally (one square forward, one rank sideways), only onto an opponent's piece.

    NOTE: "forward" runs along the file axis: White towards higher files, Black towards lower files.
    No en passant, no promotion.
    """
    pieces = tuple(pieces)
    forward = piece.side.forward
    delta_file, delta_rank = _deltas(piece, destination)
    target = occupant_side(destination, pieces)

    # Pawn pushes
    if delta_rank == 0:
        if delta_file == forward:
            return target is None
        if delta_file == 2 * forward and piece.position.file == PAWN_START_FILE[piece.side]:
            return target is None and is_path_empty(piece.position, destination, pieces)
        return False

    # pawns take diagonally
    if delta_file == forward and abs(delta_rank) == 1:
        return target == piece.side.opponent

    return False


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Piece, Square, Pieces], bool]
MOVEMENT_RULES: dict[PieceKind, MoveRuleFn] = {
    PieceKind.PAWN: is_pawn_move,
    PieceKind.KNIGHT: is_knight_move,
    PieceKind.BISHOP: is_bishop_move,
    PieceKind.ROOK: is_rook_move,
    PieceKind.QUEEN: is_queen_move,
    PieceKind.KING: is_king_move,
}

# every kind needs a rule
_missing_rules = set(PieceKind) - set(MOVEMENT_RULES)
if _missing_rules:
    raise RuntimeError(f"No movement rule defined for: {_missing_rules}")


# --- PUBLIC CONTRACT ---
def is_move_valid(piece: Piece, destination: Square, pieces: Pieces) -> bool:
    """
    Decide if the piece may move to the destination.
    ----

    ----
    1. The destination must be on the board and differ from the current square.
    2. You cannot land on one of your own pieces.
    3. The movement rule of the piece kind decides the rest.

    NOTE: `pieces` is the whole board, including the moving piece itself.
    Its own square is never the destination (see 1.) and never strictly in between, so it cannot block itself.
    """
    if not destination.is_within_bounds() or destination == piece.position:
        return False

    pieces = tuple(pieces)
    if occupant_side(destination, pieces) == piece.side:
        return False

    movement_rule: MoveRuleFn = MOVEMENT_RULES[piece.kind]
    return movement_rule(piece, destination, pieces)


def legal_destinations(piece: Piece, pieces: Pieces) -> list[Square]:
    """All squares the piece could move to right now (used to highlight the options of the armed piece)."""
    pieces = tuple(pieces)
    return [
        square for square in all_squares() if is_move_valid(piece, square, pieces)
    ]

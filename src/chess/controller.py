"""
The GameSession is the entrypoint into the domain layer for the service layer.
It consumes the selection events produced by the presentation layer ("square picked", "deselect"),
asks the rules for a verdict, updates the board and the turn, and reports back what happened as a list of events.

NOTE: every entry point is total. Illegal moves, squares off the board, stale handles and moves after the game
has been decided all end up as a quiet no-op (selection cleared, nothing else touched).
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from loguru import logger

from src.chess.board import Board, PieceHandle
from src.chess.layout import initial_board
from src.chess.pieces import Piece, PieceKind, Side
from src.chess.rules import is_move_valid, legal_destinations
from src.chess.square import Square, all_squares
from src.core.models import EventModel, PieceModel, SessionModel
from src.core.shared_types import EventType, Status


class SelectionState(Enum):
    EMPTY = auto()
    SQUARE_ONLY = auto()
    PIECE_SELECTED = auto()


@dataclass
class Selection:
    """What the user currently has selected. Both empty in between moves."""

    square: Optional[Square] = None
    piece: Optional[PieceHandle] = None

    @property
    def state(self) -> SelectionState:
        if self.piece is not None:
            return SelectionState.PIECE_SELECTED
        if self.square is not None:
            return SelectionState.SQUARE_ONLY
        return SelectionState.EMPTY

    def clear(self) -> None:
        self.square = None
        self.piece = None


@dataclass(frozen=True)
class GameResult:
    """The game is decided as soon as a king gets captured."""

    winner: Side


# --- EVENTS: facts the presentation layer has to react to ---
@dataclass(frozen=True)
class PieceMoved:
    handle: PieceHandle
    side: Side
    kind: PieceKind
    from_square: Square
    to_square: Square

    def to_model(self) -> EventModel:
        return EventModel(
            event=EventType.PIECE_MOVED,
            handle=self.handle,
            side=self.side.name.lower(),
            kind=self.kind.name.lower(),
            from_square=self.from_square.to_tuple(),
            to_square=self.to_square.to_tuple(),
        )


@dataclass(frozen=True)
class PieceCaptured:
    handle: PieceHandle
    side: Side
    kind: PieceKind
    square: Square

    def to_model(self) -> EventModel:
        return EventModel(
            event=EventType.PIECE_CAPTURED,
            handle=self.handle,
            side=self.side.name.lower(),
            kind=self.kind.name.lower(),
            square=self.square.to_tuple(),
        )


@dataclass(frozen=True)
class TurnChanged:
    side: Side

    def to_model(self) -> EventModel:
        return EventModel(event=EventType.TURN_CHANGED, side=self.side.name.lower())


@dataclass(frozen=True)
class GameOver:
    winner: Side

    def to_model(self) -> EventModel:
        return EventModel(event=EventType.GAME_OVER, side=self.winner.name.lower())


GameEvent = PieceMoved | PieceCaptured | TurnChanged | GameOver


@dataclass(frozen=True)
class AcceptedMove:
    """Snapshot of the pieces involved, taken before the board gets updated."""

    handle: PieceHandle
    moving_piece: Piece
    to_square: Square
    captured: Optional[tuple[PieceHandle, Piece]] = None

    @classmethod
    def from_board(cls, handle: PieceHandle, to_square: Square, board: Board) -> Self:
        moving_piece = board.pieces[handle]
        occupant = board.piece_at(to_square)
        captured = (
            occupant if occupant and occupant[1].side != moving_piece.side else None
        )
        return cls(handle, moving_piece, to_square, captured)


@dataclass
class GameSession:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Side = Side.WHITE
    selection: Selection = field(default_factory=Selection)
    result: Optional[GameResult] = None

    @classmethod
    def new(cls, first_to_move: Side = Side.WHITE, board: Optional[Board] = None) -> Self:
        """Start a new game: the standard layout, unless a custom board is supplied."""
        return cls(board=board if board is not None else initial_board(), turn=first_to_move)

    # --- READ ACCESSORS ---
    @property
    def is_over(self) -> bool:
        return self.result is not None

    @property
    def winner(self) -> Optional[Side]:
        return self.result.winner if self.result else None

    @property
    def status(self) -> Status:
        return Status.DECIDED if self.is_over else Status.IN_PROGRESS

    def armed_piece(self) -> Optional[Piece]:
        if self.selection.piece is None:
            return None
        return self.board.piece(self.selection.piece)

    def highlighted_squares(self) -> list[Square]:
        """Where the armed piece could go. Empty if nothing is armed."""
        piece = self.armed_piece()
        if piece is None:
            return []
        return legal_destinations(piece, self.board.snapshot())

    def next_move_text(self) -> str:
        return f"Next move: {self.turn.display_name}"

    def result_text(self) -> Optional[str]:
        if self.result is None:
            return None
        return f"{self.result.winner.display_name} won! Thanks for playing!"

    # --- SELECTION EVENTS ---
    def on_square_picked(self, square: Square) -> list[GameEvent]:
        """
        The user picked a square.
        ----

        ----
        1. Nothing armed yet? Remember the square, and arm the piece on it if it belongs to the side to move.
        2. A piece is armed? Treat the square as the destination of a move attempt.
        """
        if self.is_over:
            logger.debug(f"Game already decided, ignoring pick of {square}")
            self.selection.clear()
            return []

        if not square.is_within_bounds():
            logger.debug(f"Square {square} is off the board, deselecting.")
            self.selection.clear()
            return []

        if self.selection.piece is None:
            self._select(square)
            return []

        return self._attempt_move(square)

    def on_deselect(self) -> list[GameEvent]:
        """Explicit cancel (e.g. the user clicked next to the board)"""
        logger.debug("Deselecting.")
        self.selection.clear()
        return []

    def to_model(self) -> SessionModel:
        """Encode into a format the Service layer uses"""
        return SessionModel(
            pieces=[
                PieceModel(
                    handle=handle,
                    side=piece.side.name.lower(),
                    kind=piece.kind.name.lower(),
                    position=piece.position.to_tuple(),
                )
                for handle, piece in self.board
            ],
            turn=self.turn.name.lower(),
            status=self.status,
            winner=self.winner.name.lower() if self.winner else None,
            selected_square=(
                self.selection.square.to_tuple() if self.selection.square else None
            ),
            selected_piece=self.selection.piece,
            highlighted_squares=[square.to_tuple() for square in self.highlighted_squares()],
            light_squares=[square.to_tuple() for square in all_squares() if square.is_light()],
        )

    # -- PRIVATE HELPERS ---
    def _select(self, square: Square) -> None:
        """Select the piece in the picked square, if it is one of yours."""
        self.selection.square = square
        found = self.board.piece_at(square)
        if found is None or found[1].side != self.turn:
            return

        handle, piece = found
        logger.info(f"Selecting piece: {handle} ({piece.side.name} {piece.kind.name})")
        self.selection.piece = handle

    def _attempt_move(self, square: Square) -> list[GameEvent]:
        """Move the armed piece to the square if the rules allow it. Either way, the selection is cleared afterwards."""
        handle = self.selection.piece
        # for the typechecker: only called with an armed piece
        assert handle is not None
        self.selection.clear()

        piece = self.board.piece(handle)
        if piece is None:
            logger.debug(f"Armed piece {handle} no longer on the board.")
            return []

        if not is_move_valid(piece, square, self.board.snapshot()):
            logger.debug(f"Invalid move: {piece.kind.name} {piece.position} -> {square}")
            return []

        accepted_move = AcceptedMove.from_board(handle, square, self.board)
        return self._apply_move(accepted_move)

    def _apply_move(self, move: AcceptedMove) -> list[GameEvent]:
        """
        Update the board, the turn and (if needed) the result.
        ----

        1. take the opponent's piece on the target square
        2. move the piece
        3. hand the turn to the opponent
        4. king taken? the game is decided
        """
        events: list[GameEvent] = []

        if move.captured is not None:
            captured_handle, captured_piece = move.captured
            self.board.remove_piece(captured_handle)
            logger.info(f"Piece taken: {captured_piece.side.name} {captured_piece.kind.name}")
            events.append(
                PieceCaptured(
                    handle=captured_handle,
                    side=captured_piece.side,
                    kind=captured_piece.kind,
                    square=captured_piece.position,
                )
            )

        self.board.move_piece(move.handle, move.to_square)
        events.append(
            PieceMoved(
                handle=move.handle,
                side=move.moving_piece.side,
                kind=move.moving_piece.kind,
                from_square=move.moving_piece.position,
                to_square=move.to_square,
            )
        )

        self.turn = self.turn.opponent
        events.append(TurnChanged(self.turn))

        if move.captured is not None and move.captured[1].kind == PieceKind.KING:
            self.result = GameResult(winner=move.moving_piece.side)
            logger.info(self.result_text())
            events.append(GameOver(move.moving_piece.side))

        return events

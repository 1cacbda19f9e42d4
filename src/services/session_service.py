"""Orchestration of communication from the presentation layer to the game sessions (and the reverse direction)."""

from dataclasses import asdict
from typing import Optional
from uuid import UUID

from loguru import logger

from src.api.models import (
    CreateSessionRequest,
    DeleteSessionRequest,
    DeselectRequest,
    EventResponse,
    GetSessionRequest,
    LegalDestinationsRequest,
    LegalDestinationsResponse,
    PickResponse,
    PickSquareRequest,
    SessionResponse,
)
from src.chess.controller import GameSession
from src.chess.pieces import Side
from src.chess.rules import legal_destinations
from src.chess.square import Square
from src.core.config import Settings, load_settings
from src.core.exceptions import SessionNotFoundError
from src.core.logging import setup_logging
from src.core.models import SessionModel
from src.db.memory_repository import InMemorySessionRepository
from src.db.repository import SessionRepository


class SessionService:
    """Orchestration of layers for a chess session."""

    def __init__(
        self, repository: SessionRepository, settings: Optional[Settings] = None
    ) -> None:
        self.repo = repository
        self.settings = settings or Settings()

    # -- Presentation layer logic ---
    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Start a new game on the standard layout."""
        first_to_move = request.first_to_move or self.settings.first_to_move
        session = GameSession.new(first_to_move=Side[first_to_move.name])

        stored_session, session_id = self.repo.create_session(session)
        logger.info(f"Created session {session_id}")
        return self._create_session_response(session_id, stored_session)

    def get_session(self, request: GetSessionRequest) -> SessionResponse:
        """
        Retrieve current session state.
        ----
        Used by the presentation layer to (re)draw the board.
        """
        session = self._fetch_session(request.session_id)
        return self._create_session_response(request.session_id, session)

    def pick_square(self, request: PickSquareRequest) -> PickResponse:
        """The user picked a square: select a piece, or attempt to move the selected one."""
        session = self._fetch_session(request.session_id)

        events = session.on_square_picked(Square(request.file, request.rank))
        self.repo.update_session(request.session_id, session)

        return PickResponse(
            events=[EventResponse(**asdict(event.to_model())) for event in events],
            session=self._create_session_response(request.session_id, session),
        )

    def deselect(self, request: DeselectRequest) -> SessionResponse:
        """Cancel whatever the user had selected."""
        session = self._fetch_session(request.session_id)
        session.on_deselect()
        self.repo.update_session(request.session_id, session)
        return self._create_session_response(request.session_id, session)

    def legal_destinations(
        self, request: LegalDestinationsRequest
    ) -> LegalDestinationsResponse:
        """Where could the piece on the given square go (regardless of whose turn it is)? Empty if the square is empty."""
        session = self._fetch_session(request.session_id)
        square = Square(request.file, request.rank)

        found = session.board.piece_at(square)
        destinations = (
            legal_destinations(found[1], session.board.snapshot()) if found else []
        )
        return LegalDestinationsResponse(
            session_id=request.session_id,
            square=square.to_tuple(),
            destinations=[destination.to_tuple() for destination in destinations],
        )

    def delete_session(self, request: DeleteSessionRequest) -> None:
        """Handle a request to forget a session."""
        if self.repo.delete_session(request.session_id) is None:
            raise SessionNotFoundError(f"Session with {request.session_id=} not found.")
        logger.info(f"Deleted session {request.session_id}")

    # -- Internal helpers --
    def _create_session_response(
        self, session_id: UUID, session: GameSession
    ) -> SessionResponse:
        """Convert the session (via its SessionModel) into a SessionResponse."""
        model: SessionModel = session.to_model()
        message = session.result_text() or session.next_move_text()
        return SessionResponse(
            session_id=session_id,
            pieces=[asdict(piece) for piece in model.pieces],
            turn=model.turn,
            status=model.status,
            winner=model.winner,
            selected_square=model.selected_square,
            selected_piece=model.selected_piece,
            highlighted_squares=model.highlighted_squares,
            light_squares=model.light_squares,
            message=message,
        )

    def _fetch_session(self, session_id: UUID) -> GameSession:
        """Attempt to find the session in the repository and raise error if it fails."""
        session = self.repo.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session with {session_id=} not found.")
        return session


def create_service(
    config_path: Optional[str] = None, overrides: Optional[list[str]] = None
) -> SessionService:
    """Wire up a ready-to-use service: load settings, configure logging, start with an empty session store."""
    settings = load_settings(config_path, overrides)
    setup_logging(settings)
    return SessionService(InMemorySessionRepository(), settings)

"""Implementation of (Session)Repository keeping everything in a dictionary"""

from uuid import UUID, uuid4

from src.chess.controller import GameSession


class InMemorySessionRepository:
    """Sessions live exactly as long as this object does."""

    def __init__(self) -> None:
        self._sessions: dict[UUID, GameSession] = {}

    def get_session(self, session_id: UUID) -> GameSession | None:
        """Get session by ID, if one exists."""
        return self._sessions.get(session_id)

    def create_session(self, session: GameSession) -> tuple[GameSession, UUID]:
        """Store new session and return it + the newly created session ID."""
        new_id = uuid4()
        self._sessions[new_id] = session
        return session, new_id

    def update_session(
        self, session_id: UUID, session: GameSession
    ) -> GameSession | None:
        """Replace the stored session."""
        if session_id not in self._sessions:
            return None
        self._sessions[session_id] = session
        return session

    def delete_session(self, session_id: UUID) -> GameSession | None:
        """Forget a session."""
        return self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

"""Protocol repository (live sessions only: nothing outlives the process)"""

from typing import Protocol
from uuid import UUID

from src.chess.controller import GameSession


class SessionRepository(Protocol):
    """Session store orchestration"""

    def get_session(self, session_id: UUID) -> GameSession | None:
        """Get session by ID, if one exists."""
        ...

    def create_session(self, session: GameSession) -> tuple[GameSession, UUID]:
        """Store new session and return it + the newly created session ID."""
        ...

    def update_session(
        self, session_id: UUID, session: GameSession
    ) -> GameSession | None:
        """Replace the stored session."""
        ...

    def delete_session(self, session_id: UUID) -> GameSession | None:
        """Forget a session."""
        ...

"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ValidationInfo, field_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import EventType, PieceKind, Side, Status

Coordinates = tuple[int, int]


# --- REQUEST MODELS ---
class CreateSessionRequest(BaseModel):
    first_to_move: Optional[Side] = None


class GetSessionRequest(BaseModel):
    session_id: UUID


class SquareRequest(BaseModel):
    """A request about one square of a session's board."""

    session_id: UUID
    file: int
    rank: int

    @field_validator(*["file", "rank"])
    @classmethod
    def validate_coordinate(cls, value: int, info: ValidationInfo) -> int:
        size = BOARD_DIMENSIONS[0] if info.field_name == "file" else BOARD_DIMENSIONS[1]
        if not 0 <= value < size:
            raise InvalidRequestError(
                f"Cannot interpret {info.field_name}: {value!r}. Must lie in [0, {size})."
            )
        return value


class PickSquareRequest(SquareRequest):
    pass


class DeselectRequest(BaseModel):
    session_id: UUID


class LegalDestinationsRequest(SquareRequest):
    pass


class DeleteSessionRequest(BaseModel):
    session_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    handle: int
    side: Side
    kind: PieceKind
    position: Coordinates


class EventResponse(BaseModel):
    event: EventType
    handle: Optional[int] = None
    side: Optional[Side] = None
    kind: Optional[PieceKind] = None
    square: Optional[Coordinates] = None
    from_square: Optional[Coordinates] = None
    to_square: Optional[Coordinates] = None


class SessionResponse(BaseModel):
    session_id: UUID
    pieces: list[PieceResponse]
    turn: Side
    status: Status
    winner: Optional[Side]
    selected_square: Optional[Coordinates]
    selected_piece: Optional[int]
    highlighted_squares: list[Coordinates]
    light_squares: list[Coordinates]
    message: str


class PickResponse(BaseModel):
    events: list[EventResponse]
    session: SessionResponse


class LegalDestinationsResponse(BaseModel):
    session_id: UUID
    square: Coordinates
    destinations: list[Coordinates]

"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
The domain layer converts a live session into a SessionModel, the service turns that into response models for the presentation layer.
(Decouples the domain objects from what actually needs to cross the boundary)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make the models easier to read
SideName = str
KindName = str
Coordinates = tuple[int, int]


@dataclass
class PieceModel:
    """Transport-safe representation of a single live piece."""

    handle: int
    side: SideName
    kind: KindName
    position: Coordinates


@dataclass
class EventModel:
    """Transport-safe representation of an emitted fact (moved / captured / turn changed / game over)."""

    event: str
    handle: Optional[int] = None
    side: Optional[SideName] = None
    kind: Optional[KindName] = None
    square: Optional[Coordinates] = None
    from_square: Optional[Coordinates] = None
    to_square: Optional[Coordinates] = None


@dataclass
class SessionModel:
    """Snapshot of one game session: board, turn, selection and result."""

    pieces: list[PieceModel]
    turn: SideName
    status: str
    winner: Optional[SideName] = None
    selected_square: Optional[Coordinates] = None
    selected_piece: Optional[int] = None
    highlighted_squares: list[Coordinates] = field(default_factory=list)
    light_squares: list[Coordinates] = field(default_factory=list)

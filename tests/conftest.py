"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Callable, Iterator

import pytest
from loguru import logger

from src.chess.board import Board
from src.chess.pieces import Piece, PieceKind, Side
from src.chess.square import Square

PieceSpec = tuple[Side, PieceKind, int, int]


def make_piece(side: Side, kind: PieceKind, file: int, rank: int) -> Piece:
    """Shorthand so the tests read like a list of (side, kind, file, rank)"""
    return Piece(side, kind, Square(file, rank))


@pytest.fixture
def board_with() -> Callable[..., Board]:
    """Call the inner function with any number of (side, kind, file, rank) tuples to get a board with just those pieces."""

    def _create_board(*specs: PieceSpec) -> Board:
        board = Board()
        board.add_pieces([make_piece(*spec) for spec in specs])
        return board

    return _create_board


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect everything logged through loguru during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)

"""Unit tests for /src/chess/square.py"""

import pytest

from src.chess.square import BOARD_DIMENSIONS, Square, all_squares


def test_square_within_bounds() -> None:
    """happy case: every coordinate in [0, 8) is on the board"""
    for file in range(BOARD_DIMENSIONS[0]):
        for rank in range(BOARD_DIMENSIONS[1]):
            square = Square(file, rank)
            assert square.is_within_bounds()


@pytest.mark.parametrize(
    "file, rank", [(8, 0), (0, 8), (-1, 0), (0, -1), (8, 8), (-1, -1)]
)
def test_square_out_of_bounds(file: int, rank: int) -> None:
    """Zero-based: 8 is already one too far."""
    assert not Square(file, rank).is_within_bounds()


def test_squares_are_equal_by_value() -> None:
    """Structural equality: two squares with the same coordinates are the same square (and hash the same)."""
    assert Square(3, 4) == Square(3, 4)
    assert Square(3, 4) != Square(4, 3)
    assert len({Square(3, 4), Square(3, 4)}) == 1


def test_offset() -> None:
    assert Square(3, 3).offset(2, -1) == Square(5, 2)
    # stepping off the board is allowed, the result is simply out of bounds
    assert not Square(7, 7).offset(1, 0).is_within_bounds()


def test_to_tuple() -> None:
    assert Square(2, 5).to_tuple() == (2, 5)


@pytest.mark.parametrize(
    "file, rank, is_light",
    [(0, 0, False), (0, 1, True), (1, 0, True), (1, 1, False), (7, 7, False), (7, 0, True)],
)
def test_square_shade(file: int, rank: int, is_light: bool) -> None:
    """Squares alternate in shade, starting with a dark corner on (0, 0)"""
    assert Square(file, rank).is_light() == is_light


def test_all_squares() -> None:
    squares = all_squares()
    assert len(squares) == BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
    assert len(set(squares)) == len(squares)
    assert all(square.is_within_bounds() for square in squares)

"""
A square on the board

(placed in its own module as multiple other modules need to import it)

NOTE: Coordinates are file-major and zero-based: (file, rank) with both in [0, 8).
White starts on files 0-1 and moves towards increasing file index, Black starts on files 6-7.
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    def to_tuple(self) -> tuple[int, int]:
        return (self.file, self.rank)

    def offset(self, delta_file: int, delta_rank: int) -> Square:
        """The square reached by stepping (delta_file, delta_rank). May land off the board."""
        return Square(self.file + delta_file, self.rank + delta_rank)

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )

    def is_light(self) -> bool:
        """Shade of the square as drawn on the board: (0, 0) is dark."""
        return (self.file + self.rank + 1) % 2 == 0


def all_squares() -> list[Square]:
    return [
        Square(file, rank)
        for file in range(BOARD_DIMENSIONS[0])
        for rank in range(BOARD_DIMENSIONS[1])
    ]

"""
A square on the board, in (row, col) coordinates over the full board.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

Vector = tuple[int, int]


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    def step(self, direction: Vector, distance: int = 1) -> Square:
        dr, dc = direction
        return Square(self.row + distance * dr, self.col + distance * dc)

    def is_dark(self) -> bool:
        """Only dark squares are playable: (0, 1), (1, 0), ..."""
        return (self.row + self.col) % 2 == 1

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

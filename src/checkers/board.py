"""
The Board stores the pieces on the dark squares and converts between the two coordinate systems.
It does NOT know anything about which moves are legal; see moves.py for that.

Linear indices run row-major over the dark squares only (8x8 shown):

__  0 __  1 __  2 __  3 || ___ 0,1 ___ 0,3 ___ 0,5 ___ 0,7
4  __  5 __  6 __  7 __ || 1,0 ___ 1,2 ___ 1,4 ___ 1,6 ___
__  8 __  9 __ 10 __ 11 || ___ 2,1 ___ 2,3 ___ 2,5 ___ 2,7
12 __ 13 __ 14 __ 15 __ || 3,0 ___ 3,2 ___ 3,4 ___ 3,6 ___
__ 16 __ 17 __ 18 __ 19 || ___ 4,1 ___ 4,3 ___ 4,5 ___ 4,7
20 __ 21 __ 22 __ 23 __ || 5,0 ___ 5,2 ___ 5,4 ___ 5,6 ___
__ 24 __ 25 __ 26 __ 27 || ___ 6,1 ___ 6,3 ___ 6,5 ___ 6,7
28 __ 29 __ 30 __ 31 __ || 7,0 ___ 7,2 ___ 7,4 ___ 7,6 ___
"""

from typing import Iterator, Optional, Self

from src.checkers.pieces import Piece
from src.checkers.square import Square
from src.core.config import MIN_BOARD_SIZE
from src.core.exceptions import InvalidBoardSizeError, InvalidNotationError
from src.core.shared_types import Player

HOME_ROWS = 3
EMPTY_NOTATION = "."
LIGHT_SQUARE = " "


class Board:
    def __init__(self, size: int, cells: Optional[list[Optional[Piece]]] = None) -> None:
        if size % 2 == 1 or size < MIN_BOARD_SIZE:
            raise InvalidBoardSizeError(
                f"Invalid board size {size}: must be even and at least {MIN_BOARD_SIZE}."
            )
        self.size = size
        self.half_size = size // 2
        self.position_count = size * size // 2
        self.cells: list[Optional[Piece]] = (
            cells if cells is not None else [None] * self.position_count
        )
        if len(self.cells) != self.position_count:
            raise InvalidBoardSizeError(
                f"A board of size {size} has {self.position_count} dark squares, got {len(self.cells)} cells."
            )

    @classmethod
    def empty(cls, size: int = 8) -> Self:
        return cls(size)

    @classmethod
    def starting_position(cls, size: int = 8) -> Self:
        """Red fills the first three rows of dark squares, White the last three. The middle rows are empty."""
        board = cls(size)
        home_count = HOME_ROWS * board.half_size
        for index in range(home_count):
            board.cells[index] = Piece(Player.RED)
        for index in range(board.position_count - home_count, board.position_count):
            board.cells[index] = Piece(Player.WHITE)
        return board

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        Construct a board from its notation.

        One group per row (top row first), separated by slashes. Each group lists the dark squares of that row:
        * r / w: a red / white man
        * R / W: a red / white king
        * .    : an empty square

        ex. starting position on an 8x8 board:
        rrrr/rrrr/rrrr/..../..../wwww/wwww/wwww
        """
        rows = notation.strip().split("/")
        size = len(rows)
        if size % 2 == 1 or size < MIN_BOARD_SIZE:
            raise InvalidBoardSizeError(
                f"Notation describes {size} rows: must be even and at least {MIN_BOARD_SIZE}."
            )
        cells: list[Optional[Piece]] = []
        for row, group in enumerate(rows):
            if len(group) != size // 2:
                raise InvalidNotationError(
                    f"Row {row} should list {size // 2} dark squares, got {group!r}."
                )
            for character in group:
                cells.append(
                    None if character == EMPTY_NOTATION else Piece.from_notation(character)
                )
        return cls(size, cells)

    def to_notation(self) -> str:
        groups: list[str] = []
        for row in range(self.size):
            start = row * self.half_size
            groups.append(
                "".join(
                    piece.to_notation() if piece else EMPTY_NOTATION
                    for piece in self.cells[start : start + self.half_size]
                )
            )
        return "/".join(groups)

    # --- COORDINATES ---
    def to_square(self, index: int) -> Square:
        row = index // self.half_size
        return Square(row, index % self.half_size * 2 + (row + 1) % 2)

    def to_index(self, square: Square) -> int:
        return square.row * self.half_size + square.col // 2

    def is_within_bounds(self, square: Square) -> bool:
        return (0 <= square.row < self.size) and (0 <= square.col < self.size)

    def is_playable(self, square: Square) -> bool:
        """On the board AND a dark square (only those have an index)"""
        return self.is_within_bounds(square) and square.is_dark()

    # --- RAW CELL ACCESS ---
    def piece(self, index: int) -> Optional[Piece]:
        return self.cells[index]

    def is_empty(self, index: int) -> bool:
        return self.cells[index] is None

    def place_piece(self, piece: Optional[Piece], index: int) -> None:
        self.cells[index] = piece

    def take_piece(self, index: int) -> Optional[Piece]:
        """Remove the piece from the board and hand it over"""
        piece = self.cells[index]
        self.cells[index] = None
        return piece

    def move_piece(self, start: int, end: int) -> None:
        self.cells[end] = self.take_piece(start)

    # --- QUERIES ---
    def locate_player(self, player: Player) -> list[int]:
        return [
            index
            for index, piece in enumerate(self.cells)
            if piece is not None and piece.player == player
        ]

    def count_pieces(self, player: Player) -> int:
        return len(self.locate_player(player))

    def occupied(self) -> Iterator[tuple[int, Piece]]:
        for index, piece in enumerate(self.cells):
            if piece is not None:
                yield index, piece

    def cells_key(self) -> tuple[Optional[Piece], ...]:
        return tuple(self.cells)

    def render(self) -> str:
        """Text grid with the row numbers on the left and column numbers on top"""
        width = len(str(self.size - 1))
        header = " " * (width + 1) + " ".join(
            f"{col:>{width}}" for col in range(self.size)
        )
        lines = [header]
        for row in range(self.size):
            symbols: list[str] = []
            for col in range(self.size):
                square = Square(row, col)
                if not square.is_dark():
                    symbols.append(LIGHT_SQUARE)
                    continue
                piece = self.piece(self.to_index(square))
                symbols.append(piece.to_notation() if piece else EMPTY_NOTATION)
            lines.append(
                f"{row:>{width}} " + " ".join(f"{s:>{width}}" for s in symbols)
            )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board.from_notation({self.to_notation()!r})"

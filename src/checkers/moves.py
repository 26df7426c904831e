"""
Movement and capturing rules

Key idea: Use strategy pattern to define the direction set of a piece by its rank (man or king).


Mandatory capture and chain continuation are enforced here as well, so the Game only needs to ask for `legal_moves()`.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Protocol

from src.checkers.pieces import Piece
from src.checkers.square import Square, Vector
from src.core.shared_types import Player


class Board(Protocol):
    """Just the parts the movement rules need"""

    size: int

    def piece(self, index: int) -> Optional[Piece]: ...
    def to_square(self, index: int) -> Square: ...
    def to_index(self, square: Square) -> int: ...
    def is_within_bounds(self, square: Square) -> bool: ...
    def locate_player(self, player: Player) -> list[int]: ...


@dataclass(frozen=True)
class Capture:
    """The piece that got jumped over, and where it stood"""

    index: int
    piece: Piece


@dataclass(frozen=True)
class Move:
    """
    A single atomic move: one piece from `start` to `end`, jumping over at most one opponent piece.

    King status before and after is recorded so that undoing a promotion is exact.
    """

    start: int
    end: int
    started_king: bool = False
    ended_king: bool = False
    capture: Optional[Capture] = None

    @property
    def is_capture(self) -> bool:
        return self.capture is not None

    @property
    def is_promotion(self) -> bool:
        return self.ended_king and not self.started_king

    def to_notation(self) -> str:
        """'8-12' for a simple move, '13x22' for a capture"""
        separator = "x" if self.is_capture else "-"
        return f"{self.start}{separator}{self.end}"

    def __str__(self) -> str:
        return self.to_notation()


# --- DIRECTIONS ---
# (d_row, d_col). Red starts on the top rows, so it moves DOWN the board (increasing row)
FORWARD: dict[Player, list[Vector]] = {
    Player.RED: [(1, -1), (1, 1)],
    Player.WHITE: [(-1, -1), (-1, 1)],
}
ALL_DIAGONALS: list[Vector] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


def man_directions(player: Player) -> list[Vector]:
    """Men only move forward (also when capturing)"""
    return FORWARD[player]


def king_directions(player: Player) -> list[Vector]:
    """Kings move along all four diagonals"""
    return ALL_DIAGONALS


# -- STRATEGY PATTERN: DIRECTION RULES (keyed by is_king) ---
DirectionsFn = Callable[[Player], list[Vector]]
DIRECTION_RULES: dict[bool, DirectionsFn] = {
    False: man_directions,
    True: king_directions,
}


def directions_for(piece: Piece) -> list[Vector]:
    return DIRECTION_RULES[piece.is_king](piece.player)


def promotion_row(player: Player, size: int) -> int:
    """The farthest row for the player"""
    return size - 1 if player == Player.RED else 0


def is_promotion_row(square: Square, player: Player, size: int) -> bool:
    return square.row == promotion_row(player, size)


# --- MOVEMENT RULES ---
def _create_move(
    board: Board, start: int, end: int, piece: Piece, capture: Optional[Capture] = None
) -> Move:
    lands_on_last_row = is_promotion_row(board.to_square(end), piece.player, board.size)
    return Move(
        start=start,
        end=end,
        started_king=piece.is_king,
        ended_king=piece.is_king or lands_on_last_row,
        capture=capture,
    )


def _scan_directions(index: int, board: Board) -> Iterator[Move]:
    """
    Look one step along every direction the piece may travel.
    ---

    * adjacent square empty --> simple move
    * adjacent square holds an opponent's piece and the square behind it is empty --> capture
    * adjacent square holds your own piece (or is off the board) --> nothing
    """
    piece = board.piece(index)
    if piece is None:
        return

    origin = board.to_square(index)
    for direction in directions_for(piece):
        adjacent = origin.step(direction)
        if not board.is_within_bounds(adjacent):
            continue

        adjacent_index = board.to_index(adjacent)
        adjacent_piece = board.piece(adjacent_index)
        if adjacent_piece is None:
            yield _create_move(board, index, adjacent_index, piece)
            continue

        if adjacent_piece.player == piece.player:
            continue

        landing = origin.step(direction, distance=2)
        if not board.is_within_bounds(landing):
            continue
        landing_index = board.to_index(landing)
        if board.piece(landing_index) is None:
            yield _create_move(
                board,
                index,
                landing_index,
                piece,
                capture=Capture(adjacent_index, adjacent_piece),
            )


def candidate_moves(index: int, board: Board) -> list[Move]:
    """All simple moves and captures of the piece standing on `index`, ignoring the mandatory capture rule."""
    return list(_scan_directions(index, board))


def capture_moves(index: int, board: Board) -> list[Move]:
    """Only the captures of the piece on `index`"""
    return [move for move in _scan_directions(index, board) if move.is_capture]


def legal_moves(
    board: Board, player: Player, chain_from: Optional[int] = None
) -> list[Move]:
    """
    List of legal atomic moves for the player
    ----

    1. Halfway a capture chain? Only further captures by that same piece are allowed.
    2. Otherwise collect the candidate moves of every piece of the player.
    3. Mandatory capture: if any of those is a capture, the simple moves are dropped.
    """
    if chain_from is not None:
        return capture_moves(chain_from, board)

    candidates: list[Move] = []
    for index in board.locate_player(player):
        candidates.extend(candidate_moves(index, board))

    captures = [move for move in candidates if move.is_capture]
    return captures if captures else candidates

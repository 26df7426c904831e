"""
Things that happened while applying an action.

The Game returns these instead of printing anything; whoever sits on top (service, CLI, ...) decides how to show them.
"""

from dataclasses import dataclass

from src.checkers.square import Square
from src.core.shared_types import Player


@dataclass(frozen=True)
class PieceSelected:
    player: Player
    square: Square

    def __str__(self) -> str:
        return f"{self.player} selected the piece at {self.square.to_tuple()}"


@dataclass(frozen=True)
class PieceMoved:
    player: Player
    from_square: Square
    to_square: Square

    def __str__(self) -> str:
        return f"{self.player} moved {self.from_square.to_tuple()} -> {self.to_square.to_tuple()}"


@dataclass(frozen=True)
class PieceCaptured:
    player: Player
    square: Square

    def __str__(self) -> str:
        return f"{self.player} lost the piece at {self.square.to_tuple()}"


@dataclass(frozen=True)
class KingPromoted:
    player: Player
    square: Square

    def __str__(self) -> str:
        return f"{self.player} crowned a king at {self.square.to_tuple()}"


@dataclass(frozen=True)
class TurnEnded:
    player: Player
    next_player: Player

    def __str__(self) -> str:
        return f"Turn change: it is now the {self.next_player} player's turn"


@dataclass(frozen=True)
class GameWon:
    winner: Player

    def __str__(self) -> str:
        return f"Congratulations to the {self.winner} player!"


@dataclass(frozen=True)
class MoveUndone:
    player: Player
    from_square: Square
    to_square: Square

    def __str__(self) -> str:
        return f"Undid {self.player}'s move {self.from_square.to_tuple()} -> {self.to_square.to_tuple()}"


Event = (
    PieceSelected
    | PieceMoved
    | PieceCaptured
    | KingPromoted
    | TurnEnded
    | GameWon
    | MoveUndone
)

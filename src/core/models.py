"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the domain layer (lower) use the model defined here to send to/receive from the Service.
"""

from dataclasses import dataclass
from typing import Optional

Coordinate = tuple[int, int]


@dataclass
class GameModel:
    """Transport-safe snapshot of a checkers game."""

    board_size: int
    board_notation: str
    board_text: str
    current_player: str
    bot_player: Optional[str]
    selected: Optional[Coordinate]
    selectable: list[Coordinate]
    piece_counts: dict[str, int]
    status: str
    winner: Optional[str]
    moves: list[str]

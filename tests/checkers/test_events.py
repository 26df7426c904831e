"""Unit tests for /src/checkers/events.py"""

import pytest

from src.checkers.events import (
    Event,
    GameWon,
    KingPromoted,
    MoveUndone,
    PieceCaptured,
    PieceMoved,
    PieceSelected,
    TurnEnded,
)
from src.checkers.square import Square
from src.core.shared_types import Player


@pytest.mark.parametrize(
    "event, expected",
    [
        (PieceSelected(Player.RED, Square(2, 1)), "red selected the piece at (2, 1)"),
        (PieceMoved(Player.RED, Square(2, 1), Square(3, 0)), "red moved (2, 1) -> (3, 0)"),
        (PieceCaptured(Player.WHITE, Square(3, 2)), "white lost the piece at (3, 2)"),
        (KingPromoted(Player.WHITE, Square(0, 3)), "white crowned a king at (0, 3)"),
        (TurnEnded(Player.RED, Player.WHITE), "Turn change: it is now the white player's turn"),
        (GameWon(Player.RED), "Congratulations to the red player!"),
        (
            MoveUndone(Player.WHITE, Square(5, 0), Square(4, 1)),
            "Undid white's move (5, 0) -> (4, 1)",
        ),
    ],
)
def test_event_messages(event: Event, expected: str) -> None:
    assert str(event) == expected


def test_events_are_values() -> None:
    assert GameWon(Player.RED) == GameWon(Player.RED)
    assert PieceSelected(Player.RED, Square(2, 1)) != PieceSelected(Player.RED, Square(2, 3))

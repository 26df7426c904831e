"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.checkers.board import Board
from src.checkers.game import GameState
from src.core.shared_types import Player


@pytest.fixture
def game_from_notation() -> Callable[..., GameState]:
    """Call the inner function with a board notation (and optionally the player to move)"""

    def _create_game(notation: str, current_player: Player = Player.RED) -> GameState:
        return GameState(Board.from_notation(notation), current_player)

    return _create_game


@pytest.fixture
def new_game() -> GameState:
    return GameState.new_game(8)

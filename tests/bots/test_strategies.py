"""Unit tests for /src/bots/strategies.py and /src/bots/factory.py"""

from typing import Callable

import pytest

from src.bots.base import Bot
from src.bots.factory import BOTS, create_bot
from src.bots.strategies import AlphaBetaBot, MinimaxBot
from src.bots.transposition import TranspositionTable
from src.checkers.game import GameState
from src.checkers.moves import Move
from src.core.config import GameConfig

GameFactory = Callable[..., GameState]

SEARCH_CHOICE_NOTATION = "r.../.w../..r./..ww/..../..../..../...."


@pytest.mark.parametrize(
    "bot",
    [
        MinimaxBot(default_depth=2),
        AlphaBetaBot(default_depth=2),
        AlphaBetaBot(default_depth=2, transposition_table=TranspositionTable()),
    ],
)
def test_bots_pick_the_winning_capture(game_from_notation: GameFactory, bot: Bot) -> None:
    game = game_from_notation(SEARCH_CHOICE_NOTATION)
    move = bot.get_next_move(game)
    assert isinstance(move, Move)
    assert (move.start, move.end) == (0, 9)


def test_depth_limit_overrides_default(new_game: GameState) -> None:
    bot = MinimaxBot(default_depth=4)
    assert bot.search(new_game, 1).nodes == 7
    assert bot.search(new_game, 1).nodes == MinimaxBot().search(new_game, 1).nodes


def test_bot_move_is_playable(new_game: GameState) -> None:
    """The returned move can be fed straight back into the game"""
    bot = AlphaBetaBot(default_depth=3)
    move = bot.get_next_move(new_game)
    assert move in new_game.legal_moves()
    new_game.apply_move(move)
    assert len(new_game.history) == 1


def test_bot_plays_whichever_side_is_to_move(new_game: GameState) -> None:
    new_game.apply_move(Move(8, 12))
    move = AlphaBetaBot(default_depth=2).get_next_move(new_game)
    assert move.start in new_game.board.locate_player(new_game.current_player)


def test_repr() -> None:
    assert repr(MinimaxBot(default_depth=3)) == "MinimaxBot(default_depth=3)"


# --- FACTORY ---
def test_registered_bots() -> None:
    assert set(BOTS) == {"minimax", "alphabeta"}


def test_create_minimax() -> None:
    bot = create_bot("minimax", GameConfig(depth_limit=3))
    assert isinstance(bot, MinimaxBot)
    assert bot.default_depth == 3


@pytest.mark.parametrize("use_table", [True, False])
def test_create_alphabeta(use_table: bool) -> None:
    config = GameConfig(use_transposition_table=use_table, transposition_table_size=10)
    bot = create_bot("alphabeta", config)
    assert isinstance(bot, AlphaBetaBot)
    assert bot.default_depth == config.depth_limit
    if use_table:
        assert bot.transposition_table is not None
        assert bot.transposition_table.max_size == 10
    else:
        assert bot.transposition_table is None


def test_create_with_default_config() -> None:
    assert create_bot("alphabeta").default_depth == GameConfig().depth_limit


def test_unknown_bot() -> None:
    with pytest.raises(ValueError, match="Unknown bot"):
        create_bot("random")

"""Pick a bot by name (strategy pattern: the caller only ever holds a `Bot`)."""

from typing import Callable

from src.bots.base import Bot
from src.bots.strategies import AlphaBetaBot, MinimaxBot
from src.bots.transposition import TranspositionTable
from src.core.config import GameConfig


def _create_minimax(config: GameConfig) -> Bot:
    return MinimaxBot(default_depth=config.depth_limit)


def _create_alphabeta(config: GameConfig) -> Bot:
    table = (
        TranspositionTable(max_size=config.transposition_table_size)
        if config.use_transposition_table
        else None
    )
    return AlphaBetaBot(default_depth=config.depth_limit, transposition_table=table)


BotFactoryFn = Callable[[GameConfig], Bot]
BOTS: dict[str, BotFactoryFn] = {
    "minimax": _create_minimax,
    "alphabeta": _create_alphabeta,
}


def create_bot(name: str, config: GameConfig | None = None) -> Bot:
    if name not in BOTS:
        raise ValueError(f"Unknown bot {name!r}. Pick one from {', '.join(BOTS)}.")
    return BOTS[name](config or GameConfig())

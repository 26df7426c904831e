"""
Bots Module

Adversarial search for the checkers engine: minimax with alpha-beta pruning over atomic moves,
with an optional transposition table.

Key Components:
    - Bot: Abstract strategy interface (get_next_move)
    - MinimaxBot / AlphaBetaBot: The two strategies
    - find_best_move / minimax: The search itself
    - TranspositionTable: Zobrist hashing and node cache
"""

from src.bots.base import Bot
from src.bots.factory import BOTS, create_bot
from src.bots.minimax import MAX_DEPTH, SearchResult, applied, find_best_move, minimax
from src.bots.strategies import AlphaBetaBot, MinimaxBot
from src.bots.transposition import TranspositionTable, zobrist_hash

__all__ = [
    "Bot",
    "BOTS",
    "create_bot",
    "MAX_DEPTH",
    "SearchResult",
    "applied",
    "find_best_move",
    "minimax",
    "AlphaBetaBot",
    "MinimaxBot",
    "TranspositionTable",
    "zobrist_hash",
]

"""The available bot strategies. Both search exhaustively up to their depth; alpha-beta just skips what cannot matter."""

from typing import Optional

from src.bots.base import Bot
from src.bots.minimax import SearchResult, find_best_move
from src.bots.transposition import TranspositionTable
from src.checkers.game import GameState


class MinimaxBot(Bot):
    """Plain minimax: every branch gets searched."""

    def search(self, state: GameState, depth_limit: Optional[int] = None) -> SearchResult:
        return find_best_move(state, depth_limit, prune=False)


class AlphaBetaBot(Bot):
    """Minimax with alpha-beta pruning and an optional transposition table."""

    def __init__(
        self,
        default_depth: Optional[int] = None,
        transposition_table: Optional[TranspositionTable] = None,
    ):
        super().__init__(default_depth)
        self.transposition_table = transposition_table

    def search(self, state: GameState, depth_limit: Optional[int] = None) -> SearchResult:
        return find_best_move(
            state,
            depth_limit,
            prune=True,
            transposition_table=self.transposition_table,
        )

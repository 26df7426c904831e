"""
Leaf evaluation for the search.

Material only: every piece (man or king) counts as one. Positive = good for `player`.
"""

from src.checkers.game import GameState
from src.core.shared_types import Player


def material_difference(state: GameState, player: Player) -> int:
    return state.piece_count(player) - state.piece_count(player.other)

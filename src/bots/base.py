"""
Abstract Bot Interface

Every bot strategy implements the same interface, so the service can hold any of them
without knowing how it picks its moves.

Convention:
    - The bot plays for whoever is to move in the state it is given
    - It returns a single ATOMIC move. Its `end` is the destination; its `start` is the piece to select first.
    - The state handed in is never changed
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.bots.minimax import SearchResult
from src.checkers.game import GameState
from src.checkers.moves import Move


class Bot(ABC):
    """
    Abstract base class for bot strategies.

    Attributes:
        default_depth: Depth used when `get_next_move()` gets no depth limit (None: as deep as allowed)
    """

    def __init__(self, default_depth: Optional[int] = None):
        self.default_depth = default_depth

    @abstractmethod
    def search(self, state: GameState, depth_limit: Optional[int] = None) -> SearchResult:
        """
        Search the position and report the best move with its statistics.

        Raises:
            GameStateError: If the player to move has no legal moves
        """
        pass

    def get_next_move(self, state: GameState, depth_limit: Optional[int] = None) -> Move:
        depth = depth_limit if depth_limit is not None else self.default_depth
        return self.search(state, depth).move

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(default_depth={self.default_depth})"

"""Protocol repository + the in-memory implementation used while the process lives (no persistence)."""

from typing import Protocol
from uuid import UUID, uuid4

from src.checkers.game import GameState


class GameRepository(Protocol):
    """Storage of the running games"""

    def get_game(self, game_id: UUID) -> GameState | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameState) -> UUID:
        """Store new game and return the newly created game ID."""
        ...

    def delete_game(self, game_id: UUID) -> GameState | None:
        """Remove a game's record."""
        ...


class InMemoryGameRepository:
    """Games live in a dictionary for as long as the process runs."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameState] = {}

    def get_game(self, game_id: UUID) -> GameState | None:
        return self._games.get(game_id)

    def create_game(self, game: GameState) -> UUID:
        game_id = uuid4()
        self._games[game_id] = game
        return game_id

    def delete_game(self, game_id: UUID) -> GameState | None:
        return self._games.pop(game_id, None)

    def __len__(self) -> int:
        return len(self._games)

"""Orchestration of communication from the API models to the domain layer and the bots (and the reverse direction)."""

import logging
from dataclasses import replace
from typing import Optional
from uuid import UUID

from src.api.models import (
    BotTurnRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    SelectRequest,
    UndoRequest,
)
from src.bots.base import Bot
from src.bots.factory import create_bot
from src.checkers.events import Event
from src.checkers.game import GameState, MoveTo, Select
from src.checkers.square import Square
from src.core.config import GameConfig
from src.core.exceptions import GameNotFoundError, GameStateError
from src.services.repository import GameRepository

logger = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for a checkers game."""

    def __init__(self, repository: GameRepository, config: Optional[GameConfig] = None) -> None:
        self.repo = repository
        self.config = config or GameConfig()
        self.config.validate()
        self._bots: dict[UUID, tuple[Bot, Optional[int]]] = {}

    # -- API logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game. With a bot player, a bot is created for it as well."""

        board_size = request.board_size or self.config.board_size
        game = GameState.new_game(board_size=board_size, bot_player=request.bot_player)
        game_id = self.repo.create_game(game)

        if request.bot_player is not None:
            game_config = replace(
                self.config,
                board_size=board_size,
                depth_limit=request.depth_limit or self.config.depth_limit,
            )
            bot = create_bot(request.bot_name or self.config.bot_name, game_config)
            self._bots[game_id] = (bot, game_config.depth_limit)

        logger.info(
            "created game %s (size %d, bot plays %s)", game_id, board_size, request.bot_player
        )
        return self._create_game_response(game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def select_piece(self, request: SelectRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        events = game.apply(Select(Square(request.row, request.col)))
        return self._create_game_response(request.game_id, game, events)

    def move_piece(self, request: MoveRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        events = game.apply(MoveTo(Square(request.row, request.col)))
        return self._create_game_response(request.game_id, game, events)

    def undo(self, request: UndoRequest) -> GameResponse:
        """Take back the last atomic move, or the whole last turn."""
        game = self._fetch_game(request.game_id)
        events = (
            game.undo_last_turn() if request.whole_turn else game.undo_last_atomic_move()
        )
        return self._create_game_response(request.game_id, game, events)

    def play_bot_turn(self, request: BotTurnRequest) -> GameResponse:
        """
        Let the bot play until its turn is over.
        ---
        The bot picks one atomic move at a time, so a capture chain takes several searches.
        """
        game = self._fetch_game(request.game_id)
        if request.game_id not in self._bots:
            raise GameStateError(f"Game {request.game_id} has no bot player.")
        if not game.is_bot_turn:
            raise GameStateError(
                f"It is not the bot's turn. Waiting for {game.current_player} to move."
            )

        bot, depth_limit = self._bots[request.game_id]
        events: list[Event] = []
        while game.is_bot_turn and not game.is_over:
            move = bot.get_next_move(game, depth_limit)
            logger.info("bot plays %s in game %s", move, request.game_id)
            events.extend(game.apply_move(move))
        return self._create_game_response(request.game_id, game, events)

    def delete_game(self, request: DeleteGameRequest) -> None:
        self.repo.delete_game(request.game_id)
        self._bots.pop(request.game_id, None)

    # -- Internal helpers --
    def _create_game_response(
        self, game_id: UUID, game: GameState, events: Optional[list[Event]] = None
    ) -> GameResponse:
        """Convert the game's boundary model into a GameResponse"""
        model = game.to_model()
        return GameResponse(
            game_id=game_id,
            board_size=model.board_size,
            board=model.board_notation,
            board_text=model.board_text,
            current_player=model.current_player,
            bot_player=model.bot_player,
            selected=model.selected,
            selectable=model.selectable,
            piece_counts=model.piece_counts,
            status=model.status,
            winner=model.winner,
            move_history=model.moves,
            events=[str(event) for event in events or []],
        )

    def _fetch_game(self, game_id: UUID) -> GameState:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game

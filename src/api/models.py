"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.bots.factory import BOTS
from src.core.config import MIN_BOARD_SIZE
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Player, Status

Coordinate = tuple[int, int]


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    board_size: Optional[int] = None
    bot_player: Optional[Player] = None
    bot_name: Optional[str] = None
    depth_limit: Optional[int] = None

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        if value % 2 == 1 or value < MIN_BOARD_SIZE:
            raise InvalidRequestError(
                f"Board size must be even and at least {MIN_BOARD_SIZE}, got {value}."
            )
        return value

    @field_validator("bot_name")
    @classmethod
    def validate_bot_name(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in BOTS:
            raise InvalidRequestError(
                f"Unknown bot {value!r}. Pick one from {', '.join(BOTS)}."
            )
        return value

    @field_validator("depth_limit")
    @classmethod
    def validate_depth_limit(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise InvalidRequestError(f"Search depth must be at least 1, got {value}.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class SquareRequest(BaseModel):
    """A square is given as two integers: row and column."""

    game_id: UUID
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Coordinates cannot be negative, got {value}.")
        return value


class SelectRequest(SquareRequest):
    pass


class MoveRequest(SquareRequest):
    pass


class UndoRequest(BaseModel):
    game_id: UUID
    whole_turn: bool = False


class BotTurnRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board_size: int
    board: str
    board_text: str
    current_player: Player
    bot_player: Optional[Player]
    selected: Optional[Coordinate]
    selectable: list[Coordinate]
    piece_counts: dict[Player, int]
    status: Status
    winner: Optional[Player]
    move_history: list[str]
    events: list[str] = []

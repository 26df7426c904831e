"""Defines the checkers piece: a man or a king, owned by one of the two players"""

from dataclasses import dataclass, replace
from typing import Self

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import Player

NOTATION_TO_PLAYER: dict[str, Player] = {
    "r": Player.RED,
    "w": Player.WHITE,
}

PLAYER_TO_NOTATION: dict[Player, str] = {
    value: key for key, value in NOTATION_TO_PLAYER.items()
}


@dataclass(frozen=True)
class Piece:
    player: Player
    is_king: bool = False

    @classmethod
    def from_notation(cls, character: str) -> Self:
        # lower case: man, upper case: king
        if character.lower() not in NOTATION_TO_PLAYER:
            raise InvalidNotationError(f"Not a piece: {character!r}")
        return cls(NOTATION_TO_PLAYER[character.lower()], character.isupper())

    def to_notation(self) -> str:
        character = PLAYER_TO_NOTATION[self.player]
        return character.upper() if self.is_king else character

    def promoted(self) -> Self:
        """Kings stay kings. The only change a piece ever goes through."""
        return replace(self, is_king=True)

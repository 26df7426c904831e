"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Self


class Player(StrEnum):
    """Red always moves first and moves DOWN the board (increasing row). White moves UP."""

    RED = "red"
    WHITE = "white"

    @property
    def other(self) -> Self:
        return Player.WHITE if self == Player.RED else Player.RED


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    RED_WON = "red won"
    WHITE_WON = "white won"

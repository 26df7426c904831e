"""
Default settings for a game and its bot opponent.
"""

from dataclasses import dataclass

from src.core.exceptions import InvalidBoardSizeError

MIN_BOARD_SIZE = 6


@dataclass
class GameConfig:
    """Defaults used by the service when a request does not specify otherwise."""

    board_size: int = 8
    """Number of rows (and columns). Even and at least 6."""

    bot_name: str = "alphabeta"
    """Key into the bot registry (see src/bots)."""

    depth_limit: int = 6
    """Search horizon in atomic moves."""

    use_transposition_table: bool = True
    """Cache node values during alpha-beta search."""

    transposition_table_size: int = 1_000_000
    """Maximum number of cached entries."""

    def validate(self) -> None:
        if self.board_size % 2 == 1 or self.board_size < MIN_BOARD_SIZE:
            raise InvalidBoardSizeError(
                f"Board size must be even and at least {MIN_BOARD_SIZE}, got {self.board_size}."
            )
        if self.depth_limit < 1:
            raise ValueError(f"depth_limit must be at least 1, got {self.depth_limit}")
        if self.transposition_table_size < 1:
            raise ValueError("transposition_table_size must be positive")

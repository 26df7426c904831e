"""
Record of the moves played, grouped per turn.

A turn is every atomic move a player makes before control passes to the opponent
(a single simple move, or one or more captures in a chain).
"""

from dataclasses import dataclass, field
from typing import Optional

from src.checkers.moves import Move
from src.core.exceptions import GameStateError
from src.core.shared_types import Player


@dataclass
class Turn:
    player: Player
    moves: list[Move] = field(default_factory=list)

    @property
    def started_king(self) -> bool:
        return self.moves[0].started_king

    @property
    def ended_king(self) -> bool:
        return self.moves[-1].ended_king

    def to_notation(self) -> str:
        """Chains are written as one path: '13x22x31'"""
        if not self.moves:
            return ""
        path = [str(self.moves[0].start)] + [str(move.end) for move in self.moves]
        separator = "x" if self.moves[0].is_capture else "-"
        return separator.join(path)


@dataclass
class History:
    turns: list[Turn] = field(default_factory=list)

    def record(self, player: Player, move: Move) -> None:
        """Same player as the last move? Then the move continues the current turn."""
        if self.turns and self.turns[-1].player == player:
            self.turns[-1].moves.append(move)
        else:
            self.turns.append(Turn(player, [move]))

    # -- QUERIES --
    @property
    def last_player(self) -> Optional[Player]:
        return self.turns[-1].player if self.turns else None

    @property
    def last_turn(self) -> Optional[Turn]:
        return self.turns[-1] if self.turns else None

    @property
    def last_move(self) -> Optional[Move]:
        return self.turns[-1].moves[-1] if self.turns else None

    def last_move_captured(self) -> bool:
        last_move = self.last_move
        return last_move is not None and last_move.is_capture

    def last_move_started_king(self) -> bool:
        return self._require_last_move().started_king

    def last_move_ended_king(self) -> bool:
        return self._require_last_move().ended_king

    def last_turn_started_king(self) -> bool:
        return self._require_last_turn().started_king

    def last_turn_ended_king(self) -> bool:
        return self._require_last_turn().ended_king

    @property
    def turn_count(self) -> int:
        return len(self.turns)

    def moves(self) -> list[Move]:
        return [move for turn in self.turns for move in turn.moves]

    def __len__(self) -> int:
        return sum(len(turn.moves) for turn in self.turns)

    # -- UNDO --
    def pop_last_move(self) -> tuple[Player, Move]:
        """Remove the last atomic move. An emptied turn is dropped as well."""
        turn = self._require_last_turn()
        move = turn.moves.pop()
        if not turn.moves:
            self.turns.pop()
        return turn.player, move

    def pop_last_turn(self) -> Turn:
        turn = self._require_last_turn()
        self.turns.pop()
        return turn

    def _require_last_turn(self) -> Turn:
        if not self.turns:
            raise GameStateError("History is empty: nothing has been played yet.")
        return self.turns[-1]

    def _require_last_move(self) -> Move:
        return self._require_last_turn().moves[-1]

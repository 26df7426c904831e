"""
The GameState is the entrypoint into the domain layer for the service layer and the bots.
It is responsible for orchestrating the rules required to play a turn: selecting a piece, moving it,
continuing a capture chain, handing the turn over, and undoing all of that again.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.events import (
    Event,
    GameWon,
    KingPromoted,
    MoveUndone,
    PieceCaptured,
    PieceMoved,
    PieceSelected,
    TurnEnded,
)
from src.checkers.history import History
from src.checkers.moves import Move, capture_moves, legal_moves
from src.checkers.pieces import Piece
from src.checkers.square import Square
from src.core.exceptions import GameStateError, IllegalMoveError, IllegalSelectionError
from src.core.models import GameModel
from src.core.shared_types import Player, Status

logger = logging.getLogger(__name__)


# --- ACTIONS A PLAYER CAN TAKE ---
@dataclass(frozen=True)
class Select:
    square: Square


@dataclass(frozen=True)
class MoveTo:
    square: Square


Action = Select | MoveTo


class GameState:
    # --- DOMAIN LAYER API CALLED BY SERVICE / BOTS ---

    def __init__(
        self,
        board: Board,
        current_player: Player = Player.RED,
        bot_player: Optional[Player] = None,
    ) -> None:
        self.board = board
        self.current_player = current_player
        self.bot_player = bot_player
        self.history = History()
        self.selected_piece: Optional[int] = None
        self._legal_moves: list[Move] = []
        self._selectable: list[int] = []
        self._refresh()

    @classmethod
    def new_game(cls, board_size: int = 8, bot_player: Optional[Player] = None) -> Self:
        """Red always goes first."""
        return cls(Board.starting_position(board_size), Player.RED, bot_player)

    def apply(self, action: Action) -> list[Event]:
        """Single entrypoint for the two player actions."""
        if isinstance(action, Select):
            return self.select_piece(action.square)
        return self.move_selected_piece(action.square)

    def select_piece(self, square: Square) -> list[Event]:
        if not self.board.is_playable(square):
            raise IllegalSelectionError(
                f"{square.to_tuple()} is not a playable square on this board."
            )
        return self.select(self.board.to_index(square))

    def move_selected_piece(self, square: Square) -> list[Event]:
        if not self.board.is_playable(square):
            raise IllegalMoveError(
                f"{square.to_tuple()} is not a playable square on this board."
            )
        return self.move_to(self.board.to_index(square))

    def select(self, position: int) -> list[Event]:
        """
        Select the piece to move
        ----

        1. Halfway a capture chain? Only the piece that is capturing may be (re)selected.
        2. The square must hold one of your pieces
        3. ... that has a legal move (mandatory capture might rule it out)
        """
        self._assert_in_progress()
        if not 0 <= position < self.board.position_count:
            raise IllegalSelectionError(f"Position {position} is not on the board.")

        chain_square = self.chain_square
        if chain_square is not None and position != chain_square:
            raise IllegalSelectionError(
                f"Finish capturing with the piece at {self._coords(chain_square)} first."
            )

        piece = self.board.piece(position)
        if piece is None:
            raise IllegalSelectionError(
                f"There is no piece at {self._coords(position)}."
            )
        if piece.player != self.current_player:
            raise IllegalSelectionError(
                f"The piece at {self._coords(position)} belongs to {piece.player}. It is {self.current_player}'s turn."
            )
        if position not in self._movable_pieces():
            reason = (
                "a capture is available elsewhere and capturing is mandatory"
                if self._capture_is_forced()
                else "it has no legal moves"
            )
            raise IllegalSelectionError(
                f"The piece at {self._coords(position)} cannot move: {reason}."
            )

        self.selected_piece = position
        self._refresh()
        logger.debug("%s selected %s", self.current_player, self._coords(position))
        return [PieceSelected(self.current_player, self.board.to_square(position))]

    def deselect(self) -> list[Event]:
        """Put the selected piece back down. Not possible halfway a capture chain."""
        if self.chain_square is not None:
            raise IllegalSelectionError(
                "Cannot deselect the piece while it is halfway a capture chain."
            )
        self.selected_piece = None
        self._refresh()
        return []

    def move_to(self, position: int) -> list[Event]:
        """
        Attempt to move the selected piece
        -----

        1. check the destination against the cached legal moves
        2. update the board (move, remove captured piece, promote)
        3. record the move in the history
        4. continue the chain from the landing square, or end the turn
        """
        self._assert_in_progress()
        if self.selected_piece is None:
            raise GameStateError("Cannot move: no piece has been selected.")
        if not 0 <= position < self.board.position_count:
            raise IllegalMoveError(f"Position {position} is not on the board.")

        move = next(
            (
                move
                for move in self._legal_moves
                if move.start == self.selected_piece and move.end == position
            ),
            None,
        )
        if move is None:
            valid = [self._coords(end) for end in self._selectable]
            raise IllegalMoveError(
                f"Moving {self._coords(self.selected_piece)} to {self._coords(position)} is not allowed. Valid moves are {valid}."
            )
        return self._execute(move)

    def apply_move(self, move: Move) -> list[Event]:
        """Select (if needed) and move in one go. Used by the bots, which think in atomic moves."""
        events: list[Event] = []
        if self.selected_piece != move.start:
            events.extend(self.select(move.start))
        events.extend(self.move_to(move.end))
        return events

    def undo_last_atomic_move(self) -> list[Event]:
        """
        Exact inverse of `move_to()`
        ----

        * the captured piece (if any) returns to its square
        * the moving piece returns to its start with the king status it had before the move
        * the mover is to play again, with the moved piece selected
        """
        player, move = self.history.pop_last_move()

        self.board.take_piece(move.end)
        self.board.place_piece(Piece(player, move.started_king), move.start)
        if move.capture is not None:
            self.board.place_piece(move.capture.piece, move.capture.index)

        self.current_player = player
        self.selected_piece = move.start
        self._refresh()
        logger.debug("undid %s by %s", move, player)
        return [
            MoveUndone(player, self.board.to_square(move.start), self.board.to_square(move.end))
        ]

    def undo_last_turn(self) -> list[Event]:
        """Undo every move of the last (possibly unfinished) turn and clear the selection."""
        turn = self.history.last_turn
        if turn is None:
            raise GameStateError("History is empty: nothing to undo.")

        events: list[Event] = []
        for _ in range(len(turn.moves)):
            events.extend(self.undo_last_atomic_move())
        self.selected_piece = None
        self._refresh()
        return events

    # --- QUERIES ---
    def selectable_positions(self) -> list[int]:
        """
        Nothing selected: the pieces that can move.
        A piece selected: the squares it can move to.
        """
        return list(self._selectable)

    def legal_moves(self) -> list[Move]:
        """Every legal atomic move for the player to move (from the chain square only, when halfway a chain)"""
        return list(self._legal_moves)

    def piece_count(self, player: Player) -> int:
        return self.board.count_pieces(player)

    @property
    def chain_square(self) -> Optional[int]:
        """
        Landing square of the piece that is halfway a capture chain.

        The last recorded move was a capture by the player who is still to move: the turn did not end, so the chain goes on.
        """
        last_move = self.history.last_move
        if (
            last_move is not None
            and last_move.is_capture
            and self.history.last_player == self.current_player
        ):
            return last_move.end
        return None

    @property
    def is_over(self) -> bool:
        return not self._legal_moves

    @property
    def winner(self) -> Optional[Player]:
        """The player to move has no legal moves left: the opponent wins."""
        if not self.is_over:
            return None
        return self.current_player.other

    @property
    def status(self) -> Status:
        winner = self.winner
        if winner is None:
            return Status.IN_PROGRESS
        return Status.RED_WON if winner == Player.RED else Status.WHITE_WON

    @property
    def is_bot_turn(self) -> bool:
        return self.bot_player is not None and self.bot_player == self.current_player

    def clone(self) -> Self:
        return deepcopy(self)

    def render(self) -> str:
        return self.board.render()

    def to_model(self) -> GameModel:
        """Encode into the format the Service layer uses"""
        return GameModel(
            board_size=self.board.size,
            board_notation=self.board.to_notation(),
            board_text=self.render(),
            current_player=str(self.current_player),
            bot_player=str(self.bot_player) if self.bot_player else None,
            selected=(
                self.board.to_square(self.selected_piece).to_tuple()
                if self.selected_piece is not None
                else None
            ),
            selectable=[
                self.board.to_square(position).to_tuple()
                for position in self._selectable
            ],
            piece_counts={str(player): self.piece_count(player) for player in Player},
            status=str(self.status),
            winner=str(self.winner) if self.winner else None,
            moves=[turn.to_notation() for turn in self.history.turns],
        )

    # -- PRIVATE HELPERS ---
    def _execute(self, move: Move) -> list[Event]:
        player = self.current_player
        piece = self.board.take_piece(move.start)

        # for the type checker: the move was generated from this very board
        assert piece is not None

        events: list[Event] = [
            PieceMoved(player, self.board.to_square(move.start), self.board.to_square(move.end))
        ]
        if move.capture is not None:
            self.board.take_piece(move.capture.index)
            events.append(
                PieceCaptured(player.other, self.board.to_square(move.capture.index))
            )

        self.board.place_piece(piece.promoted() if move.is_promotion else piece, move.end)
        if move.is_promotion:
            events.append(KingPromoted(player, self.board.to_square(move.end)))

        self.history.record(player, move)
        logger.debug("%s played %s", player, move)

        # NOTE decide on continuing the chain from the landing square BEFORE touching the turn
        if move.is_capture and capture_moves(move.end, self.board):
            self.selected_piece = move.end
            self._refresh()
            return events

        events.extend(self._end_turn())
        return events

    def _end_turn(self) -> list[Event]:
        player = self.current_player
        self.current_player = player.other
        self.selected_piece = None
        self._refresh()
        logger.debug("turn change: %s to move", self.current_player)

        events: list[Event] = [TurnEnded(player, self.current_player)]
        if self.is_over:
            logger.debug("%s has no legal moves left, %s wins", self.current_player, player)
            events.append(GameWon(player))
        return events

    def _refresh(self) -> None:
        """Recompute the cached legal moves and selectable positions after every change."""
        chain_square = self.chain_square
        if chain_square is not None:
            self.selected_piece = chain_square

        self._legal_moves = legal_moves(self.board, self.current_player, chain_square)
        if self.selected_piece is None:
            self._selectable = sorted(self._movable_pieces())
        else:
            self._selectable = sorted(
                move.end for move in self._legal_moves if move.start == self.selected_piece
            )

    def _movable_pieces(self) -> set[int]:
        return {move.start for move in self._legal_moves}

    def _capture_is_forced(self) -> bool:
        return any(move.is_capture for move in self._legal_moves)

    def _assert_in_progress(self) -> None:
        if self.is_over:
            raise GameStateError(f"Game is over. status: {self.status}")

    def _coords(self, position: int) -> tuple[int, int]:
        return self.board.to_square(position).to_tuple()

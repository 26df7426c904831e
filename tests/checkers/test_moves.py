"""Unit tests for /src/checkers/moves.py"""

import pytest

from src.checkers.board import Board
from src.checkers.moves import (
    ALL_DIAGONALS,
    Capture,
    Move,
    candidate_moves,
    capture_moves,
    directions_for,
    is_promotion_row,
    legal_moves,
    promotion_row,
)
from src.checkers.pieces import Piece
from src.checkers.square import Square
from src.core.shared_types import Player

# Red man on 8 must jump the white man on 13 (landing on 17). Red man on 3 could otherwise step to 7.
FORCED_CAPTURE_NOTATION = "...r/..../r.../.w../..../..../..../...w"


# --- MOVE VALUE OBJECT ---
def test_move_notation() -> None:
    simple = Move(8, 12)
    capture = Move(8, 17, capture=Capture(13, Piece(Player.WHITE)))
    assert simple.to_notation() == "8-12"
    assert capture.to_notation() == "8x17"
    assert str(capture) == "8x17"


def test_moves_are_hashable_values() -> None:
    """Two moves with the same content are equal, so they can be compared and deduplicated"""
    capture = Capture(13, Piece(Player.WHITE))
    assert Move(8, 17, capture=capture) == Move(8, 17, capture=Capture(13, Piece(Player.WHITE)))
    assert len({Move(8, 12), Move(8, 12), Move(8, 13)}) == 2


def test_promotion_flag() -> None:
    assert Move(24, 28, started_king=False, ended_king=True).is_promotion
    assert not Move(24, 28, started_king=True, ended_king=True).is_promotion
    assert not Move(8, 12).is_promotion


# --- DIRECTIONS ---
def test_men_move_forward_only() -> None:
    """Red moves down the board (increasing row), White moves up"""
    assert directions_for(Piece(Player.RED)) == [(1, -1), (1, 1)]
    assert directions_for(Piece(Player.WHITE)) == [(-1, -1), (-1, 1)]


@pytest.mark.parametrize("player", list(Player))
def test_kings_move_in_all_directions(player: Player) -> None:
    assert directions_for(Piece(player, is_king=True)) == ALL_DIAGONALS


def test_promotion_rows() -> None:
    assert promotion_row(Player.RED, 8) == 7
    assert promotion_row(Player.WHITE, 8) == 0
    assert is_promotion_row(Square(9, 0), Player.RED, 10)
    assert not is_promotion_row(Square(0, 1), Player.RED, 10)


# --- CANDIDATE MOVES ---
def test_initial_position_simple_moves() -> None:
    """From the start, the red man on 8 can step to 12 or 13, and nothing can be captured"""
    board = Board.starting_position(8)
    moves = candidate_moves(8, board)
    assert {move.end for move in moves} == {12, 13}
    assert not any(move.is_capture for move in moves)


def test_blocked_piece_has_no_moves() -> None:
    """The red man on 0 is boxed in by its own pieces"""
    board = Board.starting_position(8)
    assert candidate_moves(0, board) == []


def test_edge_piece_has_single_move() -> None:
    """The red man on 11 stands on the right edge"""
    board = Board.starting_position(8)
    assert [move.end for move in candidate_moves(11, board)] == [15]


def test_empty_square_has_no_moves() -> None:
    board = Board.starting_position(8)
    assert candidate_moves(16, board) == []


def test_capture_candidate() -> None:
    board = Board.from_notation(FORCED_CAPTURE_NOTATION)
    moves = candidate_moves(8, board)
    assert Move(8, 12) in moves
    assert Move(8, 17, capture=Capture(13, Piece(Player.WHITE))) in moves
    assert capture_moves(8, board) == [Move(8, 17, capture=Capture(13, Piece(Player.WHITE)))]


def test_cannot_capture_own_piece() -> None:
    board = Board.from_notation("..../..../r.../.r../..../..../..../...w")
    assert capture_moves(8, board) == []
    assert [move.end for move in candidate_moves(8, board)] == [12]


def test_cannot_capture_when_landing_occupied() -> None:
    board = Board.from_notation("..../..../r.../.w../.r../..../..../...w")
    assert capture_moves(8, board) == []


def test_cannot_capture_over_the_edge() -> None:
    """White man on 12 stands on the left edge: there is no landing square behind it"""
    board = Board.from_notation("..../..../r.../w.../..../..../..../....")
    assert capture_moves(8, board) == []
    assert [move.end for move in candidate_moves(8, board)] == [13]


def test_men_do_not_capture_backwards() -> None:
    """White man on 13 is behind the red man on 17"""
    board = Board.from_notation("..../..../..../.w../.r../..../..../....")
    assert capture_moves(17, board) == []


def test_king_captures_backwards() -> None:
    board = Board.from_notation("..../..../..../.w../.R../..../..../....")
    captures = capture_moves(17, board)
    assert captures == [
        Move(17, 8, started_king=True, ended_king=True, capture=Capture(13, Piece(Player.WHITE)))
    ]


def test_move_to_last_row_promotes() -> None:
    board = Board.from_notation("..../..../..../..../..../..../r.../....")
    moves = candidate_moves(24, board)
    assert {move.end for move in moves} == {28, 29}
    assert all(move.ended_king and not move.started_king for move in moves)


def test_white_promotes_on_row_zero() -> None:
    board = Board.from_notation("..../.w../..../..../..../..../..../....")
    assert all(move.is_promotion for move in candidate_moves(5, board))


# --- LEGAL MOVES ---
def test_mandatory_capture() -> None:
    """Any capture anywhere on the board rules out every simple move"""
    board = Board.from_notation(FORCED_CAPTURE_NOTATION)
    moves = legal_moves(board, Player.RED)
    assert moves == [Move(8, 17, capture=Capture(13, Piece(Player.WHITE)))]


def test_no_capture_means_all_simple_moves() -> None:
    board = Board.starting_position(8)
    moves = legal_moves(board, Player.RED)
    assert {move.start for move in moves} == {8, 9, 10, 11}
    assert len(moves) == 7


def test_chain_restricts_to_captures_from_square() -> None:
    """Halfway a chain only the capturing piece may continue, and only by capturing"""
    board = Board.from_notation("..../..../.r../..w./..../..../..../....")
    board.place_piece(Piece(Player.RED), 0)
    board.place_piece(Piece(Player.WHITE), 5)
    moves = legal_moves(board, Player.RED, chain_from=9)
    assert [move.start for move in moves] == [9]
    assert all(move.is_capture for move in moves)


def test_player_without_pieces_has_no_moves() -> None:
    board = Board.from_notation("rrrr/..../..../..../..../..../..../....")
    assert legal_moves(board, Player.WHITE) == []

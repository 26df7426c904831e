"""Unit tests for /src/bots/transposition.py"""

import pytest

from src.bots.transposition import (
    NodeType,
    TranspositionTable,
    ZobristKeys,
    zobrist_hash,
    zobrist_keys,
)
from src.checkers.game import GameState
from src.checkers.moves import Move
from src.core.shared_types import Player


# --- ZOBRIST HASHING ---
def test_keys_are_reproducible() -> None:
    assert ZobristKeys(32).pieces == ZobristKeys(32).pieces
    assert zobrist_keys(32) is zobrist_keys(32)


def test_same_position_same_hash() -> None:
    assert zobrist_hash(GameState.new_game(8), Player.RED) == zobrist_hash(
        GameState.new_game(8), Player.RED
    )


def test_hash_depends_on_perspective(new_game: GameState) -> None:
    assert zobrist_hash(new_game, Player.RED) != zobrist_hash(new_game, Player.WHITE)


def test_hash_depends_on_side_to_move(new_game: GameState) -> None:
    before = zobrist_hash(new_game, Player.RED)
    new_game.current_player = Player.WHITE
    assert zobrist_hash(new_game, Player.RED) != before


def test_transposition_gives_same_hash(new_game: GameState) -> None:
    """Two move orders that reach the same position"""
    other = new_game.clone()
    for move in [Move(8, 12), Move(22, 18), Move(9, 13), Move(23, 19)]:
        new_game.apply_move(move)
    for move in [Move(9, 13), Move(23, 19), Move(8, 12), Move(22, 18)]:
        other.apply_move(move)

    assert new_game.board == other.board
    assert zobrist_hash(new_game, Player.RED) == zobrist_hash(other, Player.RED)


def test_undo_restores_hash(new_game: GameState) -> None:
    before = zobrist_hash(new_game, Player.RED)
    new_game.apply_move(Move(8, 12))
    assert zobrist_hash(new_game, Player.RED) != before
    new_game.undo_last_atomic_move()
    assert zobrist_hash(new_game, Player.RED) == before


def test_chain_square_is_part_of_hash(game_from_notation) -> None:
    """Same board and side to move, but halfway a chain only one piece may move"""
    game = game_from_notation("r.../.w../..../..w./..../..../..../w...")
    game.apply_move(Move(0, 9))
    halfway = zobrist_hash(game, Player.RED)

    same_board = game_from_notation(game.board.to_notation())
    assert same_board.chain_square is None
    assert zobrist_hash(same_board, Player.RED) != halfway


# --- TABLE ---
@pytest.fixture
def table() -> TranspositionTable:
    return TranspositionTable(max_size=3)


def test_store_and_lookup(table: TranspositionTable) -> None:
    table.store(1234, 3, 2.0, NodeType.EXACT)
    entry = table.lookup(1234, 3)
    assert entry is not None
    assert entry.value == 2.0
    assert entry.node_type == NodeType.EXACT
    assert table.hits == 1


def test_lookup_is_depth_exact(table: TranspositionTable) -> None:
    table.store(1234, 3, 2.0, NodeType.EXACT)
    assert table.lookup(1234, 2) is None
    assert table.lookup(1234, 4) is None
    assert table.misses == 2


def test_exact_entry_is_not_replaced_by_bound(table: TranspositionTable) -> None:
    table.store(1234, 3, 2.0, NodeType.EXACT)
    table.store(1234, 3, 5.0, NodeType.LOWER_BOUND)
    assert table.lookup(1234, 3).value == 2.0

    table.store(1234, 3, 1.0, NodeType.EXACT)
    assert table.lookup(1234, 3).value == 1.0


def test_bound_is_replaced(table: TranspositionTable) -> None:
    table.store(1234, 3, 2.0, NodeType.UPPER_BOUND)
    table.store(1234, 3, 1.0, NodeType.EXACT)
    assert table.lookup(1234, 3).node_type == NodeType.EXACT


def test_oldest_entry_is_evicted(table: TranspositionTable) -> None:
    for zobrist in range(4):
        table.store(zobrist, 1, 0.0, NodeType.EXACT)
    assert len(table) == 3
    assert table.lookup(0, 1) is None
    assert table.lookup(3, 1) is not None


def test_stats_and_clear(table: TranspositionTable) -> None:
    table.store(1, 1, 0.0, NodeType.EXACT)
    table.lookup(1, 1)
    table.lookup(2, 1)
    assert table.get_stats() == {"entries": 1, "hits": 1, "misses": 1, "hit_rate": 50.0}
    assert repr(table) == "TranspositionTable(entries=1, hit_rate=50.0%)"

    table.clear()
    assert table.get_stats() == {"entries": 0, "hits": 0, "misses": 0, "hit_rate": 0}

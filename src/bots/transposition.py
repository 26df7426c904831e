"""
Transposition Table with Zobrist Hashing

Caches node values so that a position reached through different move orders is only searched once.

A checkers node is identified by:
    - the pieces on the board (player and king status per dark square)
    - the side to move
    - the capture chain in progress (if any), as it restricts the legal moves
    - the player the search is evaluating for (values are relative to that player)

Entries are stored per remaining depth: a value searched deeper is a different value, and reusing it would
change the outcome compared to a search without the table.

References:
    - Zobrist Hashing: https://www.chessprogramming.org/Zobrist_Hashing
    - Transposition Table: https://www.chessprogramming.org/Transposition_Table
"""

import random
from enum import Enum
from functools import lru_cache
from typing import Dict, Optional, Tuple

from src.checkers.game import GameState
from src.core.shared_types import Player

# one key per (player, is_king) combination
PIECE_KINDS = 4
ZOBRIST_SEED = 42


class NodeType(Enum):
    """
    Type of node in search tree.

    This determines how we can use the cached value:
        - EXACT: The exact evaluation (all moves searched)
        - LOWER_BOUND: Cutoff at beta (value is at least this good)
        - UPPER_BOUND: Every move failed low (value is at most this good)
    """

    EXACT = 0
    LOWER_BOUND = 1
    UPPER_BOUND = 2


class TTEntry:
    """
    Entry in the transposition table.

    Attributes:
        zobrist_hash: 64-bit hash of the node
        depth: Remaining search depth of this entry
        value: Evaluation (material difference)
        node_type: EXACT, LOWER_BOUND, or UPPER_BOUND
    """

    def __init__(self, zobrist_hash: int, depth: int, value: float, node_type: NodeType):
        self.zobrist_hash = zobrist_hash
        self.depth = depth
        self.value = value
        self.node_type = node_type

    def __repr__(self) -> str:
        return (
            f"TTEntry(hash={self.zobrist_hash}, depth={self.depth}, "
            f"value={self.value:.1f}, type={self.node_type})"
        )


class ZobristKeys:
    """Random 64-bit numbers for every (square, piece kind) plus the non-board parts of a node."""

    def __init__(self, position_count: int, seed: int = ZOBRIST_SEED):
        rng = random.Random(seed)
        self.pieces = [
            [rng.getrandbits(64) for _ in range(PIECE_KINDS)]
            for _ in range(position_count)
        ]
        self.chain = [rng.getrandbits(64) for _ in range(position_count)]
        self.white_to_move = rng.getrandbits(64)
        self.white_perspective = rng.getrandbits(64)


@lru_cache(maxsize=None)
def zobrist_keys(position_count: int) -> ZobristKeys:
    """Same keys for every board of the same size"""
    return ZobristKeys(position_count)


def _piece_kind(player: Player, is_king: bool) -> int:
    return (2 if player == Player.WHITE else 0) + (1 if is_king else 0)


# TODO: Recomputed from scratch for every node. Could be updated incrementally in apply/undo.
def zobrist_hash(state: GameState, perspective: Player) -> int:
    """
    Compute Zobrist hash for a search node.

    Args:
        state: Game state to hash
        perspective: Player the search evaluates for

    Returns:
        64-bit integer hash
    """
    keys = zobrist_keys(state.board.position_count)
    hash_value = 0

    for index, piece in state.board.occupied():
        hash_value ^= keys.pieces[index][_piece_kind(piece.player, piece.is_king)]

    chain_square = state.chain_square
    if chain_square is not None:
        hash_value ^= keys.chain[chain_square]

    if state.current_player == Player.WHITE:
        hash_value ^= keys.white_to_move

    if perspective == Player.WHITE:
        hash_value ^= keys.white_perspective

    return hash_value


class TranspositionTable:
    """
    Transposition table for caching node evaluations.

    Attributes:
        max_size: Maximum number of entries (memory limit)
        table: Dictionary mapping (hash, depth) → TTEntry
    """

    def __init__(self, max_size: int = 1_000_000):
        self.max_size = max_size
        self.table: Dict[Tuple[int, int], TTEntry] = {}
        self.hits = 0
        self.misses = 0

    def store(self, zobrist_hash: int, depth: int, value: float, node_type: NodeType):
        """
        Store a node evaluation in the transposition table.

        Args:
            zobrist_hash: Zobrist hash of the node
            depth: Remaining search depth this evaluation was performed at
            value: Evaluation score
            node_type: EXACT, LOWER_BOUND, or UPPER_BOUND
        """
        key = (zobrist_hash, depth)
        existing = self.table.get(key)

        # An exact value is never replaced by a bound
        if existing is not None and existing.node_type == NodeType.EXACT and node_type != NodeType.EXACT:
            return

        self.table[key] = TTEntry(zobrist_hash, depth, value, node_type)

        # Evict the oldest entry (dicts keep insertion order)
        if len(self.table) > self.max_size:
            del self.table[next(iter(self.table))]

    def lookup(self, zobrist_hash: int, depth: int) -> Optional[TTEntry]:
        """
        Look up a node searched to exactly `depth`.

        Returns:
            TTEntry if found, None otherwise
        """
        entry = self.table.get((zobrist_hash, depth))
        if entry is not None:
            self.hits += 1
            return entry

        self.misses += 1
        return None

    def clear(self):
        """Clear all entries from the transposition table."""

        self.table.clear()
        self.hits = 0
        self.misses = 0

    def get_stats(self) -> Dict[str, int | float]:
        """Get statistics about transposition table usage."""

        total_lookups = self.hits + self.misses
        hit_rate = (self.hits / total_lookups * 100) if total_lookups > 0 else 0

        return {
            "entries": len(self.table),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": hit_rate,
        }

    def __len__(self) -> int:
        return len(self.table)

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (
            f"TranspositionTable(entries={stats['entries']}, "
            f"hit_rate={stats['hit_rate']:.1f}%)"
        )

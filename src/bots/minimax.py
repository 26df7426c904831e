"""
Minimax Search with Alpha-Beta Pruning

Minimax explores the game tree to find the best move, and alpha-beta pruning skips
branches that cannot change the result.

Key Concepts:
    - One ply is one ATOMIC move. A multi-capture turn is searched as several consecutive plies by the same player,
      so the maximizing/minimizing side is decided per node (whose turn is it?) instead of alternating blindly.
    - The search walks a single mutable GameState: apply a move, recurse, undo the move.
      `applied()` guarantees the undo on every way out of the block (normal return, cutoff, exception).
    - Leaf value: material difference from the bot's point of view.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional

from src.bots.evaluation import material_difference
from src.bots.transposition import NodeType, TranspositionTable, zobrist_hash
from src.checkers.game import GameState
from src.checkers.moves import Move
from src.core.exceptions import GameStateError
from src.core.shared_types import Player

logger = logging.getLogger(__name__)

MAX_DEPTH = 100  # Always enforced, also when no depth limit is given
INFINITY = float("inf")


@dataclass
class SearchResult:
    move: Move
    score: float
    nodes: int


@contextmanager
def applied(state: GameState, move: Move) -> Iterator[GameState]:
    """
    Play `move` on `state` for the duration of the block.

    On exit the move is undone and the selection is put back the way it was,
    so the node is restored exactly before the caller looks at the next sibling.
    """
    selected = state.selected_piece
    state.apply_move(move)
    try:
        yield state
    finally:
        state.undo_last_atomic_move()
        if selected is None:
            state.deselect()
        elif state.selected_piece != selected:
            state.select(selected)


def minimax(
    state: GameState,
    depth: int,
    alpha: float,
    beta: float,
    bot_player: Player,
    transposition_table: Optional[TranspositionTable] = None,
    prune: bool = True,
    nodes_searched: Optional[List[int]] = None,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    Args:
        state: Node to evaluate (mutated during the call, restored before returning)
        depth: Remaining search depth in atomic moves
        alpha: Best value the maximizer can already guarantee
        beta: Best value the minimizer can already guarantee
        bot_player: The player the search is playing for (the maximizer)
        transposition_table: Optional cache for previously evaluated nodes
        prune: False to search every branch (plain minimax)
        nodes_searched: Optional mutable list [count] to track nodes visited

    Returns:
        float: Material difference for `bot_player` at the end of the best line

    Algorithm:
        1. No legal moves or depth = 0 (leaf node) → evaluate
        2. For each legal atomic move:
            a. Apply it
            b. Recursively search (depth - 1)
            c. Undo it
            d. Update alpha/beta
            e. Prune if alpha >= beta
        3. Return best score found
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    moves = state.legal_moves()
    if depth == 0 or not moves:
        return material_difference(state, bot_player)

    alpha_orig, beta_orig = alpha, beta
    key = None
    if transposition_table is not None:
        key = zobrist_hash(state, bot_player)
        entry = transposition_table.lookup(key, depth)
        if entry is not None:
            if entry.node_type == NodeType.EXACT:
                return entry.value
            if entry.node_type == NodeType.LOWER_BOUND:
                alpha = max(alpha, entry.value)
            elif entry.node_type == NodeType.UPPER_BOUND:
                beta = min(beta, entry.value)
            if alpha >= beta:
                return entry.value

    # Decided per node: halfway a chain the same player moves again
    maximizing = state.current_player == bot_player
    best_score = -INFINITY if maximizing else INFINITY
    for move in moves:
        with applied(state, move):
            score = minimax(
                state,
                depth - 1,
                alpha,
                beta,
                bot_player,
                transposition_table,
                prune,
                nodes_searched,
            )

        if maximizing:
            best_score = max(best_score, score)
            alpha = max(alpha, score)
        else:
            best_score = min(best_score, score)
            beta = min(beta, score)

        if prune and beta <= alpha:
            break

    if transposition_table is not None and key is not None:
        if best_score <= alpha_orig:
            node_type = NodeType.UPPER_BOUND
        elif best_score >= beta_orig:
            node_type = NodeType.LOWER_BOUND
        else:
            node_type = NodeType.EXACT
        transposition_table.store(key, depth, best_score, node_type)

    return best_score


def find_best_move(
    state: GameState,
    depth: Optional[int] = None,
    prune: bool = True,
    transposition_table: Optional[TranspositionTable] = None,
) -> SearchResult:
    """
    Find the best atomic move for the player to move.

    Args:
        state: Current game state (left untouched: the search runs on a clone)
        depth: Search depth in atomic moves. None searches up to MAX_DEPTH
        prune: Use alpha-beta pruning
        transposition_table: Optional cache for node evaluations

    Returns:
        SearchResult with the best move, its score and the number of nodes searched

    Raises:
        GameStateError: If no legal moves available (game over)
    """
    moves = state.legal_moves()
    if not moves:
        raise GameStateError("No legal moves available: the game is over.")

    depth = MAX_DEPTH if depth is None else min(depth, MAX_DEPTH)
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    search_state = state.clone()
    bot_player = search_state.current_player

    best_move = moves[0]
    best_score = -INFINITY
    alpha = -INFINITY
    nodes = [0]
    for move in moves:
        with applied(search_state, move):
            score = minimax(
                search_state,
                depth - 1,
                alpha,
                INFINITY,
                bot_player,
                transposition_table,
                prune,
                nodes,
            )

        logger.debug("move %s scored %s", move, score)
        if score > best_score:
            best_score = score
            best_move = move
        if prune:
            alpha = max(alpha, score)

    logger.debug(
        "%s searched %d nodes at depth %d: best move %s (score %s)",
        bot_player,
        nodes[0],
        depth,
        best_move,
        best_score,
    )
    if transposition_table is not None:
        logger.debug("%r", transposition_table)

    return SearchResult(best_move, best_score, nodes[0])

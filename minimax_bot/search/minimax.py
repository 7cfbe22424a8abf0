"""
Minimax Search with Alpha-Beta Pruning

This module implements the core search algorithm of the bot.
Minimax explores the game tree to find the best move, and alpha-beta
pruning skips subtrees that cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Move order: the rules engine's natural enumeration order, no heuristic

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (~35), d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

from minimax_bot.evaluation.base import Evaluator, INFINITY
from minimax_bot.rules import PythonChessRules, RulesEngine

logger = logging.getLogger(__name__)


class NoMoveAvailable(ValueError):
    """
    The search produced no move for the root position.

    Happens when the root has no legal moves (checkmate, stalemate) or the
    search depth is 0. Callers treat it as game over, never as a move.
    """


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of searching one node.

    Attributes:
        score: Minimax value of the node (White's perspective)
        move: Best move at the node, None for a pure evaluation return
    """
    score: int
    move: Optional[Any] = None


@dataclass
class SearchStats:
    """
    Counters collected during one search.

    Attributes:
        nodes: Nodes visited, root included
        evaluations: Static evaluations performed at terminal nodes
        cutoffs: Times the remaining siblings were pruned
        elapsed: Wall-clock seconds spent in find_best_move()
    """
    nodes: int = 0
    evaluations: int = 0
    cutoffs: int = 0
    elapsed: float = 0.0


def alpha_beta(
    position: Any,
    depth: int,
    alpha: int,
    beta: int,
    maximizing_player: bool,
    evaluator: Evaluator,
    rules: RulesEngine,
    stats: Optional[SearchStats] = None,
    prune: bool = True,
) -> SearchResult:
    """
    Minimax search with alpha-beta pruning.

    Recursively explores the game tree, assuming both players play
    optimally, and returns the value of the best line together with the
    move that starts it.

    Args:
        position: Current position, mutated in place and restored
        depth: Remaining search depth (decrements each recursive call)
        alpha: Best score the maximizer can guarantee so far
        beta: Best score the minimizer can guarantee so far
        maximizing_player: True if the side to move wants to maximize score
        evaluator: Position evaluation function
        rules: Rules engine used to enumerate, apply and undo moves
        stats: Optional counters updated in place
        prune: If False, search the full tree (plain minimax)

    Returns:
        SearchResult: (score, move). move is None at terminal nodes.

    Algorithm:
        1. Depth 0, checkmate or stalemate → evaluate position
        2. For each legal move, in enumeration order:
            a. Make move
            b. Recursively search (depth - 1, other player)
            c. Undo move
            d. Keep the first move reaching the best score
            e. Update alpha/beta, prune if beta <= alpha
        3. Return best score and move
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0 or rules.is_checkmate(position) or rules.is_stalemate(position):
        if stats is not None:
            stats.evaluations += 1
        return SearchResult(evaluator.evaluate(position))

    best_move = None

    if maximizing_player:
        max_eval = -INFINITY
        for move in rules.get_legal_moves(position):
            rules.make_move(position, move)
            eval_score = alpha_beta(
                position, depth - 1, alpha, beta, False,
                evaluator, rules, stats, prune,
            ).score
            rules.undo_move(position, move)

            if eval_score > max_eval:
                max_eval = eval_score
                best_move = move

            alpha = max(alpha, eval_score)

            # Beta cutoff: minimizing player won't allow this branch
            if prune and beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break

        return SearchResult(max_eval, best_move)

    min_eval = INFINITY
    for move in rules.get_legal_moves(position):
        rules.make_move(position, move)
        eval_score = alpha_beta(
            position, depth - 1, alpha, beta, True,
            evaluator, rules, stats, prune,
        ).score
        rules.undo_move(position, move)

        if eval_score < min_eval:
            min_eval = eval_score
            best_move = move

        beta = min(beta, eval_score)

        # Alpha cutoff: maximizing player won't allow this branch
        if prune and beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break

    return SearchResult(min_eval, best_move)


def find_best_move(
    position: Any,
    depth: int,
    evaluator: Evaluator,
    rules: Optional[RulesEngine] = None,
    maximizing: Optional[bool] = None,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Find the best move in the current position.

    Args:
        position: Current position (chess.Board with the default rules)
        depth: Search depth in plies
        evaluator: Position evaluation function
        rules: Rules engine (default: PythonChessRules)
        maximizing: Root player maximizes? Defaults to "White to move",
            since scores are from White's perspective
        stats: Optional counters updated in place

    Returns:
        SearchResult with a move that is always present

    Raises:
        ValueError: If depth is negative
        NoMoveAvailable: If the search produced no move (game over at the
            root, or depth 0)
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    if rules is None:
        rules = PythonChessRules()
    if maximizing is None:
        maximizing = rules.is_white_to_move(position)
    if stats is None:
        stats = SearchStats()

    start_time = time.perf_counter()
    result = alpha_beta(
        position, depth, -INFINITY, INFINITY, maximizing, evaluator, rules, stats
    )
    stats.elapsed = time.perf_counter() - start_time

    logger.debug(
        f"Search depth={depth} maximizing={maximizing}: score={result.score}, "
        f"nodes={stats.nodes}, cutoffs={stats.cutoffs}, time={stats.elapsed:.3f}s"
    )

    if result.move is None:
        raise NoMoveAvailable(f"No move available at depth {depth}")

    return result

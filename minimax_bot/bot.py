"""
Bot Session

ChessBot is what a game driver talks to: one instance per game (or per
match seat). It owns the evaluator, the search depth and the per-session
telemetry, and answers think(board) with a move.
"""

import logging
from typing import Any, Optional

import chess

from minimax_bot.config import BotConfig
from minimax_bot.evaluation import ClassicalEvaluator, Evaluator
from minimax_bot.rules import PythonChessRules, RulesEngine
from minimax_bot.search import NoMoveAvailable, SearchResult, SearchStats, find_best_move

logger = logging.getLogger(__name__)


class ChessBot:
    """
    Depth-bounded alpha-beta player.

    Attributes:
        config: Bot configuration
        rules: Rules engine (python-chess by default)
        evaluator: Position evaluator (ClassicalEvaluator by default)
        move_counter: Number of think() calls in this session
        last_result: SearchResult of the latest think(), None if it found no move
        last_stats: SearchStats of the latest think()
    """

    def __init__(
        self,
        config: Optional[BotConfig] = None,
        evaluator: Optional[Evaluator] = None,
        rules: Optional[RulesEngine] = None,
    ):
        self.config = config if config else BotConfig()
        self.rules = rules if rules else PythonChessRules()
        self.evaluator = evaluator if evaluator else ClassicalEvaluator(self.config, self.rules)

        self.move_counter = 0
        self.last_result: Optional[SearchResult] = None
        self.last_stats: Optional[SearchStats] = None

    def think(
        self,
        board: chess.Board,
        timer: Any = None,
        depth: Optional[int] = None,
    ) -> chess.Move:
        """
        Choose a move for the side to move.

        Args:
            board: Current position. Searched in place and left unchanged.
            timer: Accepted for driver compatibility and ignored; the
                search is bounded by depth only
            depth: Override config.max_depth for this call

        Returns:
            chess.Move: A legal move

        Raises:
            NoMoveAvailable: If the search produced no move. The game is
                over for this side; do not feed anything to the board.
        """
        self.move_counter += 1
        depth = self.config.max_depth if depth is None else depth
        stats = SearchStats()
        self.last_stats = stats
        self.last_result = None

        try:
            result = find_best_move(
                board,
                depth,
                self.evaluator,
                rules=self.rules,
                stats=stats,
            )
        except NoMoveAvailable:
            logger.info(f"Move {self.move_counter}: no move available at depth {depth}")
            raise

        self.last_result = result
        logger.info(
            f"Move {self.move_counter}: {result.move} score={result.score} "
            f"nodes={stats.nodes} cutoffs={stats.cutoffs} time={stats.elapsed:.3f}s"
        )
        return result.move

    def new_game(self):
        """Reset the session telemetry."""
        self.move_counter = 0
        self.last_result = None
        self.last_stats = None

    def __repr__(self) -> str:
        return f"ChessBot(depth={self.config.max_depth}, evaluator={self.evaluator!r})"

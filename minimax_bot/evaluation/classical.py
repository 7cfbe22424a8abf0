"""
Classical Heuristic Evaluation

This module implements the bot's static evaluation function. Every piece
contributes a value built from:
    1. Material (piece values)
    2. Piece-Square Tables for pawns and knights
    3. Pawn heuristics (central files, isolation)
    4. An early development bonus for pieces
    5. An optional "riskiness" penalty (off by default)

Each piece value is negated for Black before summing, so the total is
positive when White is better.

Evaluation Components:
    - Material: P=100, N=320, B=330, R=500, Q=900, K=20000
    - Position: PST bonuses for pawns and knights only

Reference:
    Simplified Evaluation Function
    https://www.chessprogramming.org/Simplified_Evaluation_Function
"""

import logging
import random
from typing import Optional

import chess
import numpy as np

from minimax_bot.config import BotConfig
from minimax_bot.evaluation.base import Evaluator
from minimax_bot.rules import PieceView, PythonChessRules, RulesEngine

logger = logging.getLogger(__name__)

#fmt: off
# ============================================================================
# Material Values (centipawns)
# ============================================================================

PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 20000,
}


# ============================================================================
# Piece-Square Tables (PSTs)
# ============================================================================
# Indexed [rank, file] with row 0 = rank 1 (White's back rank) and
# column 0 = a-file. White reads the tables as written. Black reads them
# with the rank mirrored unless mirror_black_tables is turned off.
#
# Units: Centipawns (added to material value)
# ============================================================================

PAWN_TABLE = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 1
    [  5,  10,  10, -10, -10,  10,  10,   5],  # Rank 2
    [  5,  -5, -10,   0,   0, -10,  -5,   5],  # Rank 3
    [  0,   0,   0,  20,  20,   0,   0,   0],  # Rank 4
    [  5,   5,  10,  25,  25,  10,   5,   5],  # Rank 5
    [ 10,  10,  20,  30,  30,  20,  10,  10],  # Rank 6
    [ 50,  50,  50,  50,  50,  50,  50,  50],  # Rank 7
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 8
], dtype=np.int32)

# "Knights on the rim are dim"
KNIGHT_TABLE = np.array([
    [-50, -40, -30, -30, -30, -30, -40, -50],
    [-40, -20,   0,   0,   0,   0, -20, -40],
    [-30,   0,  10,  15,  15,  10,   0, -30],
    [-30,   5,  15,  20,  20,  15,   5, -30],
    [-30,   0,  15,  20,  20,  15,   0, -30],
    [-30,   5,  10,  15,  15,  10,   5, -30],
    [-40, -20,   0,   5,   5,   0, -20, -40],
    [-50, -40, -30, -30, -30, -30, -40, -50],
], dtype=np.int32)
#fmt: on

CENTRAL_FILES = (3, 4)


class ClassicalEvaluator(Evaluator):
    """
    Heuristic evaluation using material, piece-square tables and pawn terms.

    Attributes:
        config: BotConfig holding the heuristic weights and switches
        rules: RulesEngine used to enumerate and look up pieces
        piece_tables: Dictionary mapping piece types to PST arrays
    """

    def __init__(
        self,
        config: Optional[BotConfig] = None,
        rules: Optional[RulesEngine] = None,
    ):
        self.config = config if config else BotConfig()
        self.rules = rules if rules else PythonChessRules()
        self.piece_tables = {
            chess.PAWN: PAWN_TABLE,
            chess.KNIGHT: KNIGHT_TABLE,
        }

        # Owned per instance so a seeded evaluator replays the same penalties
        self._rng = random.Random(self.config.risk_seed)

        if self.config.risk_mode == "random":
            logger.warning(
                "Random risk penalty enabled: evaluation is not deterministic "
                "unless risk_seed is set"
            )

    def table_value(self, piece: PieceView) -> int:
        """
        Look up the piece-square bonus for a piece.

        Returns 0 for piece types without a table.
        """
        table = self.piece_tables.get(piece.piece_type)
        if table is None:
            return 0

        rank = piece.rank
        if not piece.is_white and self.config.mirror_black_tables:
            rank = 7 - rank

        return int(table[rank, piece.file])

    def is_pawn_isolated(self, position, pawn: PieceView, edge_empty: bool = True) -> bool:
        """
        True when the squares left and right of the pawn are both empty.

        Only the pawn's own rank is inspected. A neighbour off the edge of
        the board counts as empty unless edge_empty is False, in which case
        an a-file or h-file pawn is never isolated.
        """
        file, rank = pawn.file, pawn.rank

        if file == 0:
            left_empty = edge_empty
        else:
            left_empty = self.rules.get_piece_at(position, chess.square(file - 1, rank)) is None
        if file == 7:
            right_empty = edge_empty
        else:
            right_empty = self.rules.get_piece_at(position, chess.square(file + 1, rank)) is None

        return left_empty and right_empty

    def isolation_applies(self, position, pawn: PieceView) -> bool:
        """Whether the isolation penalty hits this pawn under the configured rule."""
        if self.config.isolation_rule == "connected":
            # Edge pawns always count as connected here, so they are always penalized
            return not self.is_pawn_isolated(position, pawn, edge_empty=False)
        return self.is_pawn_isolated(position, pawn)

    def is_risky(self, piece: PieceView) -> bool:
        """Coin flip per non-king piece, only when risk_mode is 'random'."""
        if self.config.risk_mode != "random" or piece.piece_type == chess.KING:
            return False
        return self._rng.random() < self.config.risk_probability

    def piece_value(self, position, piece: PieceView, ply_count: int) -> int:
        """
        Value of a single piece from its own side's point of view.

        Args:
            position: Position the piece stands in
            piece: The piece to score
            ply_count: Plies played so far in the game

        Returns:
            int: Centipawn value before the colour sign flip
        """
        cfg = self.config
        value = PIECE_VALUES[piece.piece_type]

        if piece.piece_type == chess.PAWN:
            value += self.table_value(piece)

            if piece.file in CENTRAL_FILES:
                value += cfg.central_pawn_bonus

            if self.isolation_applies(position, piece):
                value -= cfg.isolated_pawn_penalty

        elif piece.piece_type == chess.KNIGHT:
            value += self.table_value(piece)

        if ply_count < cfg.development_ply_limit and piece.piece_type != chess.PAWN:
            value += cfg.development_bonus

        if self.is_risky(piece):
            value -= cfg.risk_penalty

        return value

    def evaluate(self, position) -> int:
        """
        Evaluate position as the signed sum of all piece values.

        Args:
            position: Chess board to evaluate

        Returns:
            int: Evaluation in centipawns (White's perspective)
        """
        ply_count = self.rules.get_ply_count(position)
        score = 0

        for group in self.rules.get_all_pieces(position):
            for piece in group:
                value = self.piece_value(position, piece, ply_count)

                if not piece.is_white:
                    value = -value

                score += value

        return score

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(mirror={self.config.mirror_black_tables}, "
            f"isolation={self.config.isolation_rule!r}, risk={self.config.risk_mode!r})"
        )

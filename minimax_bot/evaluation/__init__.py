"""
Evaluation Module

This module provides position evaluation functions for the bot.
The key design principle is that evaluators are SWAPPABLE - the search
algorithm works with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - ClassicalEvaluator: Material, pawn/knight piece-square tables and
      pawn heuristics

Data Flow:
    chess.Board → evaluator.evaluate() → int (centipawns)
                                         Positive = White advantage
                                         Negative = Black advantage
"""

from minimax_bot.evaluation.base import Evaluator, INFINITY
from minimax_bot.evaluation.classical import ClassicalEvaluator, PIECE_VALUES

__all__ = ['Evaluator', 'ClassicalEvaluator', 'INFINITY', 'PIECE_VALUES']

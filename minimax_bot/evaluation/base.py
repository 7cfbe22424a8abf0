"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between
evaluators without modifying the search algorithm.

Key Principles:
    1. evaluate() returns an integer score from White's perspective
    2. Positive = White advantage, Negative = Black advantage
    3. The same position must always get the same score; alpha-beta
       assumes a stable value function
    4. Checkmate and stalemate are NOT special-cased: the search sends
       them through evaluate() like any other leaf

Convention:
    - Material values in centipawns (pawn = 100, queen = 900, king = 20000)
    - Return 0 for perfectly equal positions
"""

from abc import ABC, abstractmethod
from typing import Any

# Search window sentinels. Far outside any reachable evaluation.
INFINITY = 1_000_000


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with the search algorithm.

    Methods:
        evaluate(position): Returns position evaluation in centipawns
    """

    @abstractmethod
    def evaluate(self, position: Any) -> int:
        """
        Evaluate a position from White's perspective.

        Args:
            position: Position to evaluate (chess.Board for chess evaluators)

        Returns:
            int: Evaluation in centipawns

        Raises:
            NotImplementedError: If subclass doesn't implement this method
        """
        pass

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"

"""
Rules Module

The narrow interface through which search and evaluation consume the game
rules, plus its python-chess implementation.

Key Components:
    - RulesEngine (ABC): enumerate / apply / undo moves, terminal queries
    - PieceView: read-only (type, color, square) view of a piece
    - PythonChessRules: RulesEngine over chess.Board
"""

from minimax_bot.rules.base import PieceView, RulesEngine, RulesEngineError
from minimax_bot.rules.python_chess import PythonChessRules

__all__ = ['PieceView', 'RulesEngine', 'RulesEngineError', 'PythonChessRules']

"""
Search Module

This module implements the bot's search: depth-bounded minimax with
alpha-beta pruning over the moves supplied by the rules engine.

Key Components:
    - alpha_beta: Core recursive search
    - find_best_move: Root-level search function
    - SearchResult / SearchStats: Search outcome and counters
    - NoMoveAvailable: Raised when the root yields no move
"""

from minimax_bot.search.minimax import (
    alpha_beta,
    find_best_move,
    NoMoveAvailable,
    SearchResult,
    SearchStats,
)

__all__ = [
    'alpha_beta',
    'find_best_move',
    'NoMoveAvailable',
    'SearchResult',
    'SearchStats',
]

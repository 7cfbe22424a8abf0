"""
UCI Protocol Interface

This module implements the Universal Chess Interface (UCI) protocol,
which lets GUIs and match runners drive the bot.

Protocol Flow:
    GUI → "uci"
    Engine → "id name MinimaxBot 0.1.0"
    Engine → "uciok"
    GUI → "isready"
    Engine → "readyok"
    GUI → "position startpos moves e2e4"
    GUI → "go depth 4"
    Engine → "info depth 4 score cp 25 nodes 12345 time 800 pv e7e5"
    Engine → "bestmove e7e5"

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

from minimax_bot.uci.interface import UCIEngine

__all__ = ['UCIEngine']

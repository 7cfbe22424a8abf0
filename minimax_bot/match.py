"""
Match harness: two bots play a game on a python-chess board.
"""

import logging
from datetime import datetime
from typing import Optional

import chess
import chess.pgn

from minimax_bot.bot import ChessBot
from minimax_bot.search import NoMoveAvailable

logger = logging.getLogger(__name__)


def play_game(
    white: ChessBot,
    black: ChessBot,
    board: Optional[chess.Board] = None,
    max_plies: int = 200,
    white_name: str = "White",
    black_name: str = "Black",
) -> chess.pgn.Game:
    """
    Play one game between two bots.

    A bot that raises NoMoveAvailable in a position that is not game over
    loses the game (resignation).

    Args:
        white: Bot playing White
        black: Bot playing Black
        board: Starting position (default: standard start). Not modified.
        max_plies: Stop with result "*" after this many plies
        white_name: PGN White header
        black_name: PGN Black header

    Returns:
        chess.pgn.Game with the moves, Result and Termination headers
    """
    board = board.copy() if board is not None else chess.Board()
    result = "*"
    termination = "ply limit"
    plies = 0

    while True:
        outcome = board.outcome()
        if outcome is not None:
            result = outcome.result()
            termination = outcome.termination.name.lower()
            break

        if plies >= max_plies:
            break

        bot = white if board.turn == chess.WHITE else black
        try:
            move = bot.think(board)
        except NoMoveAvailable:
            result = "0-1" if board.turn == chess.WHITE else "1-0"
            termination = "resignation"
            break

        board.push(move)
        plies += 1

    logger.info(f"Game over after {plies} plies: {result} ({termination})")

    game = chess.pgn.Game.from_board(board)
    game.headers["Event"] = "minimax_bot match"
    game.headers["Date"] = datetime.now().strftime("%Y.%m.%d")
    game.headers["White"] = white_name
    game.headers["Black"] = black_name
    game.headers["Result"] = result
    game.headers["Termination"] = termination
    return game

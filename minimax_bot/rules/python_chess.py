"""
python-chess Rules Adapter

Exposes chess.Board through the RulesEngine interface. python-chess does
all the real work (move generation, legality, mate and stalemate
detection); this module only reshapes its answers.
"""

from typing import List, Optional

import chess

from minimax_bot.rules.base import PieceView, RulesEngine, RulesEngineError

# Group order used by get_all_pieces(): White pieces first, pawn to king
PIECE_GROUPS = [
    (piece_type, color)
    for color in (chess.WHITE, chess.BLACK)
    for piece_type in chess.PIECE_TYPES
]


class PythonChessRules(RulesEngine):
    """RulesEngine backed by a python-chess Board."""

    def get_legal_moves(self, position: chess.Board) -> List[chess.Move]:
        # Materialized: the generator is lazy and the search mutates the board
        return list(position.legal_moves)

    def make_move(self, position: chess.Board, move: chess.Move) -> None:
        position.push(move)

    def undo_move(self, position: chess.Board, move: chess.Move) -> None:
        popped = position.pop()
        if popped != move:
            raise RulesEngineError(
                f"Undo mismatch: expected {move.uci()}, popped {popped.uci()}"
            )

    def is_checkmate(self, position: chess.Board) -> bool:
        return position.is_checkmate()

    def is_stalemate(self, position: chess.Board) -> bool:
        return position.is_stalemate()

    def is_white_to_move(self, position: chess.Board) -> bool:
        return position.turn == chess.WHITE

    def get_all_pieces(self, position: chess.Board) -> List[List[PieceView]]:
        groups = []
        for piece_type, color in PIECE_GROUPS:
            squares = position.pieces(piece_type, color)
            groups.append([PieceView(piece_type, color, square) for square in squares])
        return groups

    def get_piece_at(self, position: chess.Board, square: chess.Square) -> Optional[PieceView]:
        piece = position.piece_at(square)
        if piece is None:
            return None
        return PieceView(piece.piece_type, piece.color, square)

    def get_ply_count(self, position: chess.Board) -> int:
        return position.ply()

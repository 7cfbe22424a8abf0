"""
Abstract Rules Engine Interface

The search and the evaluator never touch board internals directly. They
consume the game rules through this narrow interface, so any collaborator
that can enumerate, apply and undo moves can be searched.

Key Principles:
    1. Moves are applied and undone in place (stack discipline, no copies)
    2. undo_move() must restore the position exactly
    3. Legal moves come back in a stable order; that order decides ties
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import chess


class RulesEngineError(RuntimeError):
    """Raised when the rules collaborator breaks its contract."""


@dataclass(frozen=True)
class PieceView:
    """
    Read-only view of a piece on the board.

    Attributes:
        piece_type: chess.PAWN ... chess.KING
        color: chess.WHITE or chess.BLACK
        square: 0-63, a1 = 0, h8 = 63
    """
    piece_type: chess.PieceType
    color: chess.Color
    square: chess.Square

    @property
    def rank(self) -> int:
        return chess.square_rank(self.square)

    @property
    def file(self) -> int:
        return chess.square_file(self.square)

    @property
    def is_white(self) -> bool:
        return self.color == chess.WHITE


class RulesEngine(ABC):
    """
    Abstract base class for the game-rules collaborator.

    Positions and moves are opaque to this interface: the chess adapter
    uses chess.Board and chess.Move, tests use synthetic game trees.
    """

    @abstractmethod
    def get_legal_moves(self, position: Any) -> Sequence[Any]:
        """Return all legal moves for the side to move, in a stable order."""

    @abstractmethod
    def make_move(self, position: Any, move: Any) -> None:
        """Apply a move to the position in place."""

    @abstractmethod
    def undo_move(self, position: Any, move: Any) -> None:
        """Revert the last applied move, which must be `move`."""

    @abstractmethod
    def is_checkmate(self, position: Any) -> bool:
        pass

    @abstractmethod
    def is_stalemate(self, position: Any) -> bool:
        pass

    @abstractmethod
    def is_white_to_move(self, position: Any) -> bool:
        pass

    @abstractmethod
    def get_all_pieces(self, position: Any) -> List[List[PieceView]]:
        """Return every piece on the board, grouped by (type, color)."""

    @abstractmethod
    def get_piece_at(self, position: Any, square: chess.Square) -> Optional[PieceView]:
        """Return the piece on a square, or None if it is empty."""

    @abstractmethod
    def get_ply_count(self, position: Any) -> int:
        """Return the number of half-moves played since the game started."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

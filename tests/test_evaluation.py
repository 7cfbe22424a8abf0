"""
Unit Tests for Evaluation Module

Tests for the heuristic evaluator, focusing on:
    - Material and piece-square values
    - Pawn heuristics (central files, isolation rule)
    - Development bonus
    - Symmetry with and without table mirroring
    - The optional random risk term
"""

import chess
import pytest

from minimax_bot.config import BotConfig
from minimax_bot.evaluation import ClassicalEvaluator, Evaluator, PIECE_VALUES
from minimax_bot.evaluation.classical import KNIGHT_TABLE, PAWN_TABLE
from minimax_bot.rules import PieceView

# White king e1 + pawn a2, no Black pieces, ply 0
LONE_A_PAWN = "8/8/8/8/8/8/P7/4K3 w - - 0 1"
# Same with the pawn on c2
LONE_C_PAWN = "8/8/8/8/8/8/2P5/4K3 w - - 0 1"
# King value + development bonus
KING_SCORE = 20000 + 10


class TestClassicalEvaluator:
    """Tests for ClassicalEvaluator with default settings."""

    @pytest.fixture
    def evaluator(self):
        """Create a ClassicalEvaluator instance."""
        return ClassicalEvaluator()

    def test_starting_position_is_zero(self, evaluator):
        """
        Test that the symmetric starting layout scores exactly 0.

        Material, tables, central and development bonuses all cancel.
        """
        board = chess.Board()

        assert evaluator.evaluate(board) == 0

    def test_returns_int(self, evaluator):
        score = evaluator.evaluate(chess.Board())
        assert type(score) is int, f"Expected int, got {type(score)}"

    def test_material_advantage(self, evaluator):
        """
        Test that a missing Black queen is worth the queen plus its
        development bonus to White.
        """
        board = chess.Board("rnb1kbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")

        assert evaluator.evaluate(board) == PIECE_VALUES[chess.QUEEN] + 10

    def test_knight_table(self, evaluator):
        """Test that a central knight beats a cornered one by the table difference."""

        board_edge = chess.Board("7k/8/8/8/8/8/8/N6K w - - 0 1")  # Knight on a1
        board_center = chess.Board("7k/8/8/8/4N3/8/8/7K w - - 0 1")  # Knight on e4

        difference = evaluator.evaluate(board_center) - evaluator.evaluate(board_edge)

        assert difference == int(KNIGHT_TABLE[3, 4] - KNIGHT_TABLE[0, 0]) == 70

    def test_isolated_a_pawn_penalized_once(self, evaluator):
        """
        Test that an isolated White a-pawn loses the penalty exactly once.

        Pawn: 100 + table 5 - 20 isolated.
        """
        board = chess.Board(LONE_A_PAWN)

        assert evaluator.evaluate(board) == KING_SCORE + 100 + 5 - 20

    def test_connected_pawns_not_penalized(self, evaluator):
        """Test that side-by-side pawns are not isolated."""

        board = chess.Board("8/8/8/8/8/8/PP6/4K3 w - - 0 1")

        assert evaluator.evaluate(board) == KING_SCORE + (100 + 5) + (100 + 10)

    def test_central_pawn_bonus(self, evaluator):
        """Test the d/e-file bonus on an isolated d-pawn."""

        board = chess.Board("8/8/8/8/3P4/8/8/4K3 w - - 0 1")

        # table 20 + central 10 - isolated 20
        assert evaluator.evaluate(board) == KING_SCORE + 100 + 20 + 10 - 20

    def test_development_bonus_expires(self, evaluator):
        """Test that pieces lose the bonus from ply 10 on."""

        early = chess.Board("8/8/8/8/8/8/P7/4K3 w - - 0 5")  # ply 8
        late = chess.Board("8/8/8/8/8/8/P7/4K3 w - - 0 6")  # ply 10

        assert evaluator.evaluate(early) - evaluator.evaluate(late) == 10

    def test_black_pieces_negative(self, evaluator):
        """Test that Black material counts against White."""

        board = chess.Board("4k3/8/8/8/8/8/8/8 w - - 0 1")

        assert evaluator.evaluate(board) == -KING_SCORE

    def test_symmetry(self, evaluator):
        """
        Test that swapping colours and mirroring the board negates the score.
        """
        board = chess.Board("rnbqkb1r/pppppppp/5n2/8/4P3/8/PPPP1PPP/RNBQKBNR w KQkq - 1 2")

        score = evaluator.evaluate(board)
        mirrored = evaluator.evaluate(board.mirror())

        assert score != 0
        assert mirrored == -score, f"{mirrored} != -{score}"

    def test_consistency(self, evaluator):
        """Test that the evaluator is deterministic."""

        board = chess.Board("r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 2 3")

        scores = [evaluator.evaluate(board) for _ in range(5)]

        assert len(set(scores)) == 1, f"Evaluator is not deterministic: {scores}"

    def test_table_value_mirrors_black(self, evaluator):
        """Test that a Black pawn on rank 7 reads the rank 2 row."""

        black_pawn = PieceView(chess.PAWN, chess.BLACK, chess.D7)
        white_pawn = PieceView(chess.PAWN, chess.WHITE, chess.D2)

        assert evaluator.table_value(black_pawn) == evaluator.table_value(white_pawn) == -10

    def test_no_table_for_other_pieces(self, evaluator):
        rook = PieceView(chess.ROOK, chess.WHITE, chess.E4)
        assert evaluator.table_value(rook) == 0


class TestIsolationRule:
    """Tests for the two directions of the isolation penalty."""

    def test_is_pawn_isolated(self):
        evaluator = ClassicalEvaluator()
        board = chess.Board("8/8/8/8/8/8/PP5P/4K3 w - - 0 1")

        a_pawn = PieceView(chess.PAWN, chess.WHITE, chess.A2)
        h_pawn = PieceView(chess.PAWN, chess.WHITE, chess.H2)

        assert not evaluator.is_pawn_isolated(board, a_pawn)
        assert evaluator.is_pawn_isolated(board, h_pawn)

    def test_any_neighbouring_piece_breaks_isolation(self):
        """Test that the check looks at occupancy, not only pawns."""

        evaluator = ClassicalEvaluator()
        board = chess.Board("8/8/8/8/8/8/Pn6/4K3 w - - 0 1")

        assert not evaluator.is_pawn_isolated(board, PieceView(chess.PAWN, chess.WHITE, chess.A2))

    def test_connected_rule_spares_isolated_pawn(self):
        """Test the inverted rule: a lone c-pawn keeps its 20."""

        evaluator = ClassicalEvaluator(BotConfig(isolation_rule="connected"))
        board = chess.Board(LONE_C_PAWN)

        assert evaluator.evaluate(board) == KING_SCORE + 100 + 10

    @pytest.mark.parametrize("fen,table_bonus", [
        (LONE_A_PAWN, 5),
        ("8/8/8/8/8/8/7P/4K3 w - - 0 1", 5),
    ])
    def test_connected_rule_always_penalizes_edge_pawns(self, fen, table_bonus):
        """Test that an a-file or h-file pawn is never isolated under the inverted rule."""

        config = BotConfig(isolation_rule="connected", mirror_black_tables=False)
        evaluator = ClassicalEvaluator(config)

        assert evaluator.evaluate(chess.Board(fen)) == KING_SCORE + 100 + table_bonus - 20

    def test_edge_counts_as_occupied_only_when_asked(self):
        evaluator = ClassicalEvaluator()
        board = chess.Board(LONE_A_PAWN)
        a_pawn = PieceView(chess.PAWN, chess.WHITE, chess.A2)

        assert evaluator.is_pawn_isolated(board, a_pawn)
        assert not evaluator.is_pawn_isolated(board, a_pawn, edge_empty=False)

    def test_connected_rule_penalizes_neighbours(self):
        """Test the inverted rule on two side-by-side pawns."""

        evaluator = ClassicalEvaluator(BotConfig(isolation_rule="connected"))
        board = chess.Board("8/8/8/8/8/8/PP6/4K3 w - - 0 1")

        assert evaluator.evaluate(board) == KING_SCORE + (100 + 5 - 20) + (100 + 10 - 20)

    def test_rules_differ_by_one_penalty(self):
        """Test that the lone c-pawn scores differ by exactly one penalty."""

        board = chess.Board(LONE_C_PAWN)
        isolated = ClassicalEvaluator(BotConfig(isolation_rule="isolated")).evaluate(board)
        connected = ClassicalEvaluator(BotConfig(isolation_rule="connected")).evaluate(board)

        assert connected - isolated == 20

    def test_starting_position_zero_under_both_rules(self):
        board = chess.Board()
        for rule in ("isolated", "connected"):
            assert ClassicalEvaluator(BotConfig(isolation_rule=rule)).evaluate(board) == 0


class TestUnmirroredTables:
    """Tests documenting the colour asymmetry without table mirroring."""

    @pytest.fixture
    def evaluator(self):
        return ClassicalEvaluator(BotConfig(mirror_black_tables=False))

    def test_starting_position_favours_black(self, evaluator):
        """
        Black pawns on rank 7 read the +50 row: 8 * 50 against White's 30.
        """
        board = chess.Board()

        expected = int(PAWN_TABLE[1].sum() - PAWN_TABLE[6].sum())

        assert evaluator.evaluate(board) == expected == -370

    def test_mirror_symmetry_broken(self, evaluator):
        board = chess.Board()

        assert evaluator.evaluate(board.mirror()) != -evaluator.evaluate(board)


class TestRiskTerm:
    """Tests for the optional random risk penalty."""

    def test_off_by_default(self):
        evaluator = ClassicalEvaluator()
        piece = PieceView(chess.QUEEN, chess.WHITE, chess.D1)

        assert not any(evaluator.is_risky(piece) for _ in range(50))

    def test_always_risky_hits_non_king_pieces(self):
        """Test the penalty with probability 1: pawn pays 50, king never."""

        evaluator = ClassicalEvaluator(BotConfig(risk_mode="random", risk_probability=1.0))
        board = chess.Board(LONE_A_PAWN)

        assert evaluator.evaluate(board) == KING_SCORE + 100 + 5 - 20 - 50

    def test_zero_probability_matches_off(self):
        """Test that with the coin disabled the start is exactly 0 again."""

        evaluator = ClassicalEvaluator(BotConfig(risk_mode="random", risk_probability=0.0))

        assert evaluator.evaluate(chess.Board()) == 0

    def test_random_term_makes_evaluation_unstable(self):
        """Test that the random term is the source of nondeterminism."""

        evaluator = ClassicalEvaluator(BotConfig(risk_mode="random", risk_seed=3))
        board = chess.Board()

        scores = {evaluator.evaluate(board) for _ in range(30)}

        assert len(scores) > 1, "Random risk term should vary between calls"
        assert all(score % 50 == 0 for score in scores), "Only the risk term moves the score"

    def test_seeded_evaluators_agree(self):
        board = chess.Board()
        first = ClassicalEvaluator(BotConfig(risk_mode="random", risk_seed=11))
        second = ClassicalEvaluator(BotConfig(risk_mode="random", risk_seed=11))

        assert [first.evaluate(board) for _ in range(10)] == [
            second.evaluate(board) for _ in range(10)
        ]


class TestEvaluatorInterface:
    """Tests for Evaluator abstract interface."""

    def test_evaluator_is_abstract(self):
        """Test that Evaluator cannot be instantiated directly."""

        with pytest.raises(TypeError):
            Evaluator()

    def test_repr(self):
        assert "isolation='isolated'" in repr(ClassicalEvaluator())

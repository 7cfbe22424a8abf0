"""
Bot configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ISOLATION_RULES = ("isolated", "connected")
RISK_MODES = ("off", "random")


@dataclass
class BotConfig:
    """Configuration for the search and the evaluation heuristics.

    Defaults give a deterministic, colour-symmetric evaluator. The
    `connected`, `random` and `mirror_black_tables=False` settings
    reproduce the behaviour of the first version of the bot.
    """

    # Search
    max_depth: int = 4
    """Plies searched by ChessBot.think()"""

    # Piece-square tables
    mirror_black_tables: bool = True
    """Look up Black pieces with the table rank mirrored"""

    # Pawn heuristics
    central_pawn_bonus: int = 10
    """Bonus for a pawn on the d or e file"""

    isolation_rule: str = "isolated"
    """'isolated' penalizes isolated pawns, 'connected' penalizes the others"""

    isolated_pawn_penalty: int = 20
    """Penalty applied according to isolation_rule"""

    # Development
    development_bonus: int = 10
    """Bonus for every non-pawn piece early in the game"""

    development_ply_limit: int = 10
    """Development bonus applies while the ply count is below this"""

    # Riskiness
    risk_mode: str = "off"
    """'off' or 'random' (coin-flip penalty per non-king piece)"""

    risk_penalty: int = 50
    """Penalty subtracted when the risk coin comes up"""

    risk_probability: float = 0.5
    """Chance of the risk penalty per piece per evaluation"""

    risk_seed: Optional[int] = None
    """Seed for the risk RNG (None for an unseeded RNG)"""

    # Logging
    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    log_file: Optional[Path] = None
    """Engine log file (None for ~/.minimax_bot/engine.log)"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.log_file is not None:
            self.log_file = Path(self.log_file)

        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

        if self.isolation_rule not in ISOLATION_RULES:
            raise ValueError(
                f"isolation_rule should be one of {ISOLATION_RULES}, got {self.isolation_rule!r}"
            )

        if self.risk_mode not in RISK_MODES:
            raise ValueError(
                f"risk_mode should be one of {RISK_MODES}, got {self.risk_mode!r}"
            )

        if not 0.0 <= self.risk_probability <= 1.0:
            raise ValueError(
                f"risk_probability must be in [0, 1], got {self.risk_probability}"
            )

        if self.development_ply_limit < 0:
            raise ValueError(
                f"development_ply_limit must be non-negative, got {self.development_ply_limit}"
            )

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"BotConfig(\n"
            f"  Search: max_depth={self.max_depth}\n"
            f"  Tables: mirror_black_tables={self.mirror_black_tables}\n"
            f"  Pawns: isolation_rule={self.isolation_rule}, "
            f"penalty={self.isolated_pawn_penalty}, central_bonus={self.central_pawn_bonus}\n"
            f"  Risk: mode={self.risk_mode}, penalty={self.risk_penalty}, "
            f"p={self.risk_probability}, seed={self.risk_seed}\n"
            f")"
        )

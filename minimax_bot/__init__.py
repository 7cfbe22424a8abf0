"""
MinimaxBot Chess Engine

A small chess bot: depth-bounded minimax with alpha-beta pruning over a
heuristic evaluation, driven through python-chess.

## Architecture

1. **rules**: The narrow interface to the game rules
   - RulesEngine (ABC): legal moves, make/undo, mate and stalemate queries
   - PythonChessRules: implementation over chess.Board

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - ClassicalEvaluator: material, pawn/knight tables, pawn heuristics

3. **search**: Minimax with alpha-beta pruning
   - No move ordering, no transposition table, no iterative deepening

4. **bot**: ChessBot session (depth, telemetry, logging)

5. **uci** / **match**: Drivers (UCI protocol, bot-vs-bot games)

## Quick Start

```python
import chess
from minimax_bot import ChessBot, BotConfig

bot = ChessBot(BotConfig(max_depth=3))
board = chess.Board()
move = bot.think(board)
print(f"Best move: {move} (score: {bot.last_result.score})")
```

### As a UCI Engine

```bash
python -m minimax_bot.uci
```
"""

__version__ = "0.1.0"
__license__ = "MIT"

from minimax_bot.config import BotConfig
from minimax_bot.evaluation import Evaluator, ClassicalEvaluator
from minimax_bot.search import find_best_move, alpha_beta, NoMoveAvailable
from minimax_bot.bot import ChessBot

__all__ = [
    'BotConfig',
    'Evaluator',
    'ClassicalEvaluator',
    'find_best_move',
    'alpha_beta',
    'NoMoveAvailable',
    'ChessBot',
]

"""
UCI Protocol Implementation

This module implements the Universal Chess Interface (UCI) protocol for
communication between the bot and GUI applications or match runners.

UCI Commands Supported:
    - uci: Identify engine
    - isready: Synchronization check
    - ucinewgame: Start new game
    - setoption name Depth value N: Change search depth
    - position: Set board position
    - go: Search and answer with bestmove
    - stop: Acknowledged (search is synchronous)
    - quit: Shutdown engine

Searching:
    The search is depth-bounded and runs on the command thread; by the time
    'stop' can be read the answer has already been sent. Clock parameters
    of 'go' are logged and ignored.

References:
    - UCI Protocol: https://www.chessprogramming.org/UCI
"""

import sys
import time
from typing import Optional

import chess

from minimax_bot.bot import ChessBot
from minimax_bot.config import BotConfig
from minimax_bot.search import NoMoveAvailable
from minimax_bot.utils import setup_logger

NULL_MOVE = "0000"
MAX_UCI_DEPTH = 10


class UCIEngine:
    """
    UCI-compliant engine interface.

    Attributes:
        board: Current chess position
        config: Bot configuration (depth, heuristics, logging)
        bot: Session answering 'go'

    Methods:
        run: Main UCI command loop
        handle_uci: Respond to 'uci' command
        handle_isready: Respond to 'isready' command
        handle_setoption: Change engine options
        handle_position: Set board position
        handle_go: Search and print bestmove
        handle_stop: Respond to 'stop' command
        handle_quit: Shutdown engine
    """

    def __init__(self, config: Optional[BotConfig] = None, bot: Optional[ChessBot] = None):
        """
        Initialize UCI engine.

        Args:
            config: Bot configuration (default: BotConfig())
            bot: Pre-built session (default: ChessBot(config)); its config
                takes precedence
        """
        self.bot = bot if bot else ChessBot(config if config else BotConfig())
        self.config = self.bot.config
        self.board = chess.Board()

        self.name = "MinimaxBot"
        self.version = "0.1.0"
        self.author = "MinimaxBot developers"

        self.logger = setup_logger(debug=self.config.debug, log_file=self.config.log_file)
        self.logger.info("=== MinimaxBot Engine Started ===")
        self.logger.info(f"Config: {self.config!r}")

    def send(self, line: str):
        """Write one protocol line to stdout and mirror it to the log."""
        print(line)
        sys.stdout.flush()
        self.logger.debug(f"<<< {line}")

    def run(self):
        """
        Main UCI command loop.

        Listens for UCI commands on stdin and responds on stdout.
        Runs until 'quit' command or end of input.
        """
        while True:
            try:
                command = input().strip()
            except EOFError:
                self.logger.info("EOF received, shutting down")
                break

            if not command:
                continue

            self.logger.debug(f">>> {command}")

            if not self.handle_command(command):
                break

    def handle_command(self, command: str) -> bool:
        """
        Dispatch a single command line.

        Returns:
            bool: False once the engine should stop reading commands
        """
        tokens = command.split()
        cmd = tokens[0].lower()

        try:
            if cmd == "uci":
                self.handle_uci()
            elif cmd == "isready":
                self.handle_isready()
            elif cmd == "ucinewgame":
                self.handle_ucinewgame()
            elif cmd == "setoption":
                self.handle_setoption(tokens)
            elif cmd == "position":
                self.handle_position(tokens)
            elif cmd == "go":
                self.handle_go(tokens)
            elif cmd == "stop":
                self.handle_stop()
            elif cmd == "quit":
                self.handle_quit()
                return False
            else:
                # Unknown command - the UCI protocol says to ignore it
                self.logger.debug(f"Unknown command ignored: {command}")
        except ValueError as e:
            self.logger.error(f"Command error: {e}", exc_info=True)
            print(f"# Error: {e}", file=sys.stderr)

        return True

    def handle_uci(self):
        """
        Handle 'uci' command - identify engine.

        Response:
            id name MinimaxBot 0.1.0
            id author ...
            option name Depth ...
            uciok
        """
        self.logger.info("Handling: uci")
        self.send(f"id name {self.name} {self.version}")
        self.send(f"id author {self.author}")
        self.send(
            f"option name Depth type spin default {self.config.max_depth} "
            f"min 1 max {MAX_UCI_DEPTH}"
        )
        self.send("uciok")

    def handle_isready(self):
        """Handle 'isready' command - synchronization."""
        self.logger.info("Handling: isready")
        self.send("readyok")

    def handle_ucinewgame(self):
        """Handle 'ucinewgame' command - reset board and session telemetry."""
        self.logger.info("Handling: ucinewgame - resetting board and session")
        self.board = chess.Board()
        self.bot.new_game()

    def handle_setoption(self, tokens):
        """
        Handle 'setoption name <id> value <x>'.

        Only Depth is recognised; other options are logged and ignored.
        """
        if "name" not in tokens or "value" not in tokens:
            self.logger.warning(f"Malformed setoption: {' '.join(tokens)}")
            return

        name_index = tokens.index("name")
        value_index = tokens.index("value")
        name = " ".join(tokens[name_index + 1:value_index]).lower()
        value = " ".join(tokens[value_index + 1:])

        if name == "depth":
            depth = int(value)
            if not 1 <= depth <= MAX_UCI_DEPTH:
                raise ValueError(f"Depth must be in [1, {MAX_UCI_DEPTH}], got {depth}")
            self.config.max_depth = depth
            self.logger.info(f"Depth set to {depth}")
        else:
            self.logger.debug(f"Unsupported option ignored: {name}")

    def handle_position(self, tokens):
        """
        Handle 'position' command - set board position.

        Formats:
            position startpos
            position startpos moves e2e4 e7e5
            position fen <FEN string>
            position fen <FEN string> moves e2e4

        Args:
            tokens: Command tokens (e.g., ['position', 'startpos', 'moves', 'e2e4'])
        """
        self.logger.info(f"Handling: position {' '.join(tokens[1:])}")

        if len(tokens) < 2:
            self.logger.warning("Position command with insufficient arguments")
            return

        if tokens[1] == "startpos":
            board = chess.Board()
            move_index = 2
        elif tokens[1] == "fen":
            if "moves" in tokens:
                move_index = tokens.index("moves")
            else:
                move_index = len(tokens)
            fen = " ".join(tokens[2:move_index])

            try:
                board = chess.Board(fen)
            except ValueError as e:
                self.logger.error(f"Invalid FEN: {e}")
                print(f"# Invalid FEN: {e}", file=sys.stderr)
                return
        else:
            self.logger.warning(f"Unknown position type: {tokens[1]}")
            return

        if move_index < len(tokens) and tokens[move_index] == "moves":
            for move_str in tokens[move_index + 1:]:
                try:
                    move = chess.Move.from_uci(move_str)
                except ValueError as e:
                    self.logger.error(f"Invalid move format: {move_str} - {e}")
                    print(f"# Invalid move format: {move_str}", file=sys.stderr)
                    break

                if move not in board.legal_moves:
                    self.logger.error(f"Illegal move: {move_str}")
                    print(f"# Illegal move: {move_str}", file=sys.stderr)
                    break
                board.push(move)

        self.board = board
        self.logger.debug(f"Position updated: {self.board.fen()}")

    def handle_go(self, tokens):
        """
        Handle 'go' command - search and answer.

        Formats:
            go depth 5
            go wtime 300000 btime 300000 (clock ignored, configured depth used)

        A depth that is not a positive integer falls back to the configured
        depth.

        Output:
            info depth X score cp Y nodes Z time T pv <move>
            bestmove <move>, or bestmove 0000 when no move exists
        """
        self.logger.info(f"Handling: go {' '.join(tokens[1:])}")

        depth = self.config.max_depth
        ignored = []

        i = 1
        while i < len(tokens):
            if tokens[i] == "depth" and i + 1 < len(tokens):
                try:
                    requested = int(tokens[i + 1])
                except ValueError:
                    requested = 0
                if requested >= 1:
                    depth = requested
                else:
                    # Every go is answered with a bestmove
                    print(f"# Invalid depth: {tokens[i + 1]}", file=sys.stderr)
                    self.logger.warning(
                        f"Invalid go depth {tokens[i + 1]!r}, using {self.config.max_depth}"
                    )
                i += 2
            elif tokens[i] in ("movetime", "wtime", "btime", "winc", "binc", "movestogo") \
                    and i + 1 < len(tokens):
                ignored.append(f"{tokens[i]}={tokens[i + 1]}")
                i += 2
            else:
                i += 1

        if ignored:
            self.logger.debug(f"Time controls ignored: {', '.join(ignored)}")

        start_time = time.time()
        try:
            move = self.bot.think(self.board, depth=depth)
        except NoMoveAvailable:
            self.logger.warning(f"No move available at depth {depth}, answering null move")
            self.send(f"bestmove {NULL_MOVE}")
            return

        elapsed_ms = int((time.time() - start_time) * 1000)
        stats = self.bot.last_stats
        score = self.bot.last_result.score

        # UCI scores are from the side to move
        if self.board.turn == chess.BLACK:
            score = -score

        self.send(
            f"info depth {depth} score cp {score} nodes {stats.nodes} "
            f"time {elapsed_ms} pv {move.uci()}"
        )
        self.send(f"bestmove {move.uci()}")

    def handle_stop(self):
        """Handle 'stop' command. Nothing to interrupt."""
        self.logger.info("Handling: stop (search already finished)")

    def handle_quit(self):
        """Handle 'quit' command - shutdown engine."""
        self.logger.info("=== MinimaxBot Engine Stopped ===")


def main():
    """Console entry point."""
    UCIEngine().run()


if __name__ == "__main__":
    main()

"""
Main entry point for running MinimaxBot as a UCI engine.

Usage:
    python -m minimax_bot.uci
"""

from minimax_bot.uci.interface import main

if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Bot-vs-Bot Match Runner

Plays a series of games between two ChessBot configurations, alternating
colours, and writes the games to a PGN file.

Usage:
    python tools/run_match.py [--games 4] [--depth-a 3] [--depth-b 2]
                              [--legacy-b] [--pgn match.pgn]
"""

import sys
import argparse
import logging
from pathlib import Path

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from minimax_bot.bot import ChessBot
from minimax_bot.config import BotConfig
from minimax_bot.match import play_game

# Settings of the first version of the bot
LEGACY_SETTINGS = dict(
    mirror_black_tables=False,
    isolation_rule="connected",
    risk_mode="random",
)


def make_config(depth: int, legacy: bool, seed: int) -> BotConfig:
    if legacy:
        return BotConfig(max_depth=depth, risk_seed=seed, **LEGACY_SETTINGS)
    return BotConfig(max_depth=depth)


def run_match(args) -> dict:
    """
    Play args.games games, bot A taking White in the even-numbered ones.

    Returns:
        Dictionary with points per bot and game counts per result
    """
    bot_a = ChessBot(make_config(args.depth_a, args.legacy_a, args.seed))
    bot_b = ChessBot(make_config(args.depth_b, args.legacy_b, args.seed + 1))
    name_a = f"A (depth {args.depth_a}{', legacy' if args.legacy_a else ''})"
    name_b = f"B (depth {args.depth_b}{', legacy' if args.legacy_b else ''})"

    points = {name_a: 0.0, name_b: 0.0}
    results = {"1-0": 0, "0-1": 0, "1/2-1/2": 0, "*": 0}

    pgn_path = Path(args.pgn)
    with open(pgn_path, "w", encoding="utf-8") as pgn_file:
        for game_index in tqdm(range(args.games), desc="Games"):
            if game_index % 2 == 0:
                white, black, white_name, black_name = bot_a, bot_b, name_a, name_b
            else:
                white, black, white_name, black_name = bot_b, bot_a, name_b, name_a

            white.new_game()
            black.new_game()
            game = play_game(
                white, black,
                max_plies=args.max_plies,
                white_name=white_name,
                black_name=black_name,
            )
            game.headers["Round"] = str(game_index + 1)

            result = game.headers["Result"]
            results[result] += 1
            if result == "1-0":
                points[white_name] += 1
            elif result == "0-1":
                points[black_name] += 1
            elif result == "1/2-1/2":
                points[white_name] += 0.5
                points[black_name] += 0.5

            print(game, file=pgn_file, end="\n\n")

    return {"points": points, "results": results}


def main():
    parser = argparse.ArgumentParser(description="Play ChessBot against itself")
    parser.add_argument("--games", type=int, default=2, help="Number of games (default: 2)")
    parser.add_argument("--depth-a", type=int, default=3, help="Search depth of bot A")
    parser.add_argument("--depth-b", type=int, default=3, help="Search depth of bot B")
    parser.add_argument("--legacy-a", action="store_true", help="Bot A uses the legacy heuristics")
    parser.add_argument("--legacy-b", action="store_true", help="Bot B uses the legacy heuristics")
    parser.add_argument("--max-plies", type=int, default=200, help="Ply cap per game")
    parser.add_argument("--seed", type=int, default=0, help="Risk RNG seed for legacy bots")
    parser.add_argument("--pgn", type=str, default="match.pgn", help="Output PGN file")
    parser.add_argument("--verbose", action="store_true", help="Log search summaries to stderr")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S',
    )

    try:
        summary = run_match(args)
    except KeyboardInterrupt:
        print("\n\nMatch interrupted by user")
        sys.exit(1)

    print("\n" + "=" * 60)
    print("MATCH SUMMARY")
    print("=" * 60)
    for name, score in summary["points"].items():
        print(f"{name:<30} {score:>5.1f} / {args.games}")
    print(f"Results: {summary['results']}")
    print(f"Games written to {args.pgn}")


if __name__ == "__main__":
    main()

"""
Command-line interface: play the connection game against the AI.
"""

import argparse
import logging
import sys
from typing import List, Optional

from edgelink.api import play_vs_ai
from edgelink.utils.config import DEFAULT_DEPTH, DEFAULT_SIZE, HEURISTICS, Config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Connect opposite edges of the board before the AI does"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Board size N for an N x N board (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"AI search depth in plies (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "--ai-color", "-c",
        choices=["white", "black"],
        default="white",
        help="Colour the AI plays; white moves first (default: white)",
    )
    parser.add_argument(
        "--heuristic",
        choices=list(HEURISTICS.keys()),
        default="min_pieces",
        help="Leaf evaluation (default: min_pieces)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI's move shuffling (default: random)",
    )
    parser.add_argument(
        "--time-limit", "-t",
        type=float,
        default=None,
        help="Seconds per AI move before it settles for the best move so far",
    )
    parser.add_argument(
        "--node-budget", "-n",
        type=int,
        default=None,
        help="Positions per AI move before it settles for the best move so far",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays both colours (no human player)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        size=args.size,
        max_depth=args.depth,
        ai_color=args.ai_color,
        seed=args.seed,
        time_limit=args.time_limit,
        node_budget=args.node_budget,
        heuristic=args.heuristic,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        play_vs_ai(config, self_play=args.self_play)
    except (KeyboardInterrupt, EOFError):
        print("\nGame abandoned.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

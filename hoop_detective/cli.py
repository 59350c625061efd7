"""Command-line entry point: load players, pick a mystery player, run one game."""

from __future__ import annotations

import argparse
import logging

from colorama import init

from hoop_detective.config import Config
from hoop_detective.directory import PlayerDirectory
from hoop_detective.session import GameSession
from hoop_detective.utils import load_players


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Guess the mystery NBA player in 8 tries and 6 minutes")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the Ball Don't Lie API and play with the bundled player list",
    )
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Initialize colorama for Windows/Mac compatibility
    init(autoreset=True)

    print("🏀 HOOP DETECTIVE 🏀")
    print("Loading NBA player database...")
    players = load_players(Config.from_env(), offline=args.offline)

    session = GameSession(PlayerDirectory(players))
    session.print_intro()
    try:
        session.play()
    except KeyboardInterrupt:
        session.quit()
    return 0

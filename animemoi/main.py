"""Entry point for the lunch tray and unscramble Textual apps."""

from __future__ import annotations

import argparse

from animemoi.debug_log import configure_debug_log
from animemoi.lunch_tray_app import LunchTrayApp
from animemoi.unscramble_app import UnscrambleApp

APPS = {
    "lunch": LunchTrayApp,
    "game": UnscrambleApp,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="animemoi", description="Lunch tray ordering and word unscramble game.")
    parser.add_argument("app", nargs="?", choices=sorted(APPS), default="game", help="which screen to run")
    parser.add_argument("--debug-log", default=None, help="debug log file (default: $ANIMEMOI_DEBUG_LOG or /tmp)")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the selected Textual application."""
    args = build_parser().parse_args(argv)
    configure_debug_log(args.debug_log)
    APPS[args.app]().run()


if __name__ == "__main__":
    main()

"""Application entry point."""

from __future__ import annotations

import argparse
import sys

from chesswidget.core.enums import ValidationMode
from chesswidget.game.settings import STARTING_FEN, BoardSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesswidget", description="Interactive chessboard demo"
    )
    parser.add_argument("--fen", default=STARTING_FEN, help="starting position")
    parser.add_argument(
        "--permissive",
        action="store_true",
        help="accept moves and positions the rules engine rejects",
    )
    parser.add_argument("--flipped", action="store_true", help="black at the bottom")
    parser.add_argument("--tile-size", type=int, default=80, help="pixels per square")
    parser.add_argument(
        "--theme", choices=("default", "blue"), default="default", help="board colours"
    )
    parser.add_argument("--log-level", default="INFO")
    return parser


def settings_from_args(args: argparse.Namespace) -> BoardSettings:
    return BoardSettings(
        validation_mode=(
            ValidationMode.PERMISSIVE if args.permissive else ValidationMode.STRICT
        ),
        fen=args.fen,
        tile_size=args.tile_size,
        flipped=args.flipped,
        theme=args.theme,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the chessboard demo."""
    from chesswidget.ui.bootstrap import configure_logging, run_application

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    sys.exit(run_application(settings_from_args(args), [sys.argv[0]]))


if __name__ == "__main__":
    main()

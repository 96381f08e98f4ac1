from __future__ import annotations

import argparse
import logging

from .constants import MAX_CAMPAIGN_TICKS, GameMode
from .renderer import Renderer
from .session import Session


def main(argv: list[str] | None = None) -> None:
    """Entry point parsed from command line."""
    parser = argparse.ArgumentParser(description="Run Campus Tycoon")
    parser.add_argument("--seed", type=int, default=None, help="Campus seed")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameMode.STANDARD.value,
        help="Game mode",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a terminal UI and log notifications",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=MAX_CAMPAIGN_TICKS,
        help="Days to simulate in headless mode",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colour output")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    mode = GameMode(args.mode)
    if args.headless:
        Session(mode=mode, seed=args.seed).run_headless(args.ticks)
        return
    session = Session(mode=mode, seed=args.seed, renderer=Renderer(use_color=not args.no_color))
    session.run()


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse
import logging
import random

from tictactoe.ai.random_agent import RandomAgent
from tictactoe.config import AI_THINK_DELAY_SEC, CLEAR_SCREEN, LOG_FORMAT, USE_COLOR
from tictactoe.game.match import Match
from tictactoe.ui.console import ConsoleIO
from tictactoe.ui.render import ConsoleRenderer

log = logging.getLogger("tictactoe")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play tic-tac-toe against the computer.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between boards")
    ap.add_argument("--no-delay", action="store_true", help="Skip the computer 'thinking' pause")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every move")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    renderer = ConsoleRenderer(
        use_color=USE_COLOR and not args.no_color,
        clear_screen=CLEAR_SCREEN and not args.no_clear,
        think_delay_sec=0 if args.no_delay else AI_THINK_DELAY_SEC,
    )
    match = Match(ConsoleIO(), renderer, computer_agent=RandomAgent(random.Random(args.seed)))

    try:
        match.play()
    except (EOFError, KeyboardInterrupt):
        log.info("Input closed; leaving after %d rounds", len(match.rounds))
        print()
        print("Thanks for playing Tic Tac Toe! Goodbye!")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

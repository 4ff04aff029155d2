from __future__ import annotations

import argparse
import logging
import sys

from tictactoe import __version__
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.ai.scripted_agent import ScriptedAgent
from tictactoe.config import CLEAR_SCREEN, DEFAULT_CONFIG_PATH, PAUSE_BEFORE_COMPUTER, USE_COLOR
from tictactoe.game.controller import run_game
from tictactoe.io.load_config import ConfigError, load_config
from tictactoe.ui.human import HumanAgent


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictactoe", description="Play tic-tac-toe against the computer.")
    p.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help=f"Game setup JSON (default: {DEFAULT_CONFIG_PATH})",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    p.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    p.add_argument("--no-pause", action="store_true", help="Skip the <ENTER> pause before computer moves")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    try:
        cfg = load_config(ns.config)
    except ConfigError as e:
        logging.error("Invalid config: %s", e)
        return 1

    human = HumanAgent()
    computer = ScriptedAgent(cfg.computer_moves, fallback=RandomAgent(seed=ns.seed))

    try:
        run_game(
            cfg,
            human,
            computer,
            clear=CLEAR_SCREEN and not ns.no_clear,
            color=USE_COLOR and not ns.no_color,
            pause_before_computer=PAUSE_BEFORE_COMPUTER and not ns.no_pause,
        )
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    except EOFError:
        logging.error("Input closed before the game finished.")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

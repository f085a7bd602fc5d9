"""Command-line entry point.

Runs the game full-screen under curses and prints the final score once the
terminal has been restored.

Usage:
    meteor-dodge
    meteor-dodge --board classic --seed 7 --log-file meteors.log
"""

import argparse
import curses
from dataclasses import replace
from typing import List, Optional

from loguru import logger

from meteor_dodge.config import BOARD_PRESETS, DEFAULT_CONFIG, GameConfig
from meteor_dodge.game import play
from meteor_dodge.renderer.terminal import CursesInput, CursesSurface
from meteor_dodge.utils.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meteor-dodge",
        description="Dodge the meteors. Every key press advances the game one tick.",
    )
    parser.add_argument(
        "--meteors",
        type=int,
        default=DEFAULT_CONFIG.num_meteors,
        help="meteors on the board at start (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--board",
        choices=sorted(BOARD_PRESETS),
        default="terminal",
        help="playfield size preset (default: %(default)s)",
    )
    parser.add_argument("--log-file", default=None, help="write logs to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    if args.meteors < 0:
        raise ValueError(f"--meteors must be non-negative, got {args.meteors}")
    return replace(
        DEFAULT_CONFIG,
        num_meteors=args.meteors,
        seed=args.seed,
        board=BOARD_PRESETS[args.board],
    )


def _curses_main(stdscr: "curses.window", config: GameConfig) -> int:
    window = stdscr
    if config.board is not None:
        height, width = config.board
        max_height, max_width = stdscr.getmaxyx()
        if height > max_height or width > max_width:
            raise ValueError(
                f"Terminal is {max_width}x{max_height}; the board needs {width}x{height}"
            )
        window = stdscr.derwin(height, width, 0, 0)

    surface = CursesSurface(window, blank=config.blank_glyph)
    surface.draw_chrome()
    source = CursesInput(window, config.keymap)
    return play(surface, source, config)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    try:
        config = config_from_args(args)
        score = curses.wrapper(_curses_main, config)
    except ValueError as e:
        parser.exit(2, f"meteor-dodge: error: {e}\n")
    logger.info(f"Final score: {score}")
    print(f"Final score: {score}")
    return 0

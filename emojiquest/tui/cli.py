from __future__ import annotations

import argparse
import curses
import locale
import logging
import random
from typing import get_args

from ..config import LogLevel, Settings
from ..engine.session import GameSession
from ..logging_listeners import register_listeners
from ..missions.demo import demo_world
from .keys import curses_input_source
from .loop import run
from .screen import CursesRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="emojiquest",
        description="Explore an emoji world, fight trolls and unlock the castle.",
    )
    p.add_argument("--seed", type=int, help="seed for a repeatable world")
    p.add_argument("--name", dest="player_name", help="player name")
    p.add_argument("--fish", type=int, help="number of fish")
    p.add_argument("--trolls", type=int, help="number of trolls")
    p.add_argument("--spiders", type=int, help="number of spiders")
    p.add_argument("--frame-delay-ms", type=int, help="pause between frames")
    p.add_argument("--log-file", help="write the game log to this file")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=get_args(LogLevel),
        help="log verbosity (default WARNING)",
    )
    p.add_argument(
        "--demo", action="store_true", help="play the small hand-made demo map"
    )
    return p


def load_settings(args: argparse.Namespace, env: dict[str, str] | None = None) -> Settings:
    """Environment first, then any flag given on the command line."""
    settings = Settings.from_env(env)
    overrides = {
        k: v
        for k, v in vars(args).items()
        if k in Settings.model_fields and v is not None
    }
    return Settings.model_validate({**settings.model_dump(), **overrides})


def configure_logging(settings: Settings) -> None:
    # the terminal belongs to curses; logs only ever go to a file
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())
    register_listeners()


def new_session(settings: Settings, demo: bool = False) -> GameSession:
    rng = random.Random(settings.seed)
    if demo:
        return GameSession(demo_world(settings.player_name), rng)
    return GameSession.new(rng, settings)


def _play(stdscr, session: GameSession, settings: Settings):
    curses.curs_set(0)
    stdscr.keypad(True)
    # Esc should not wait for an escape sequence
    curses.set_escdelay(25)
    return run(
        session,
        curses_input_source(stdscr),
        CursesRenderer(stdscr),
        frame_delay=settings.frame_delay,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args)
    configure_logging(settings)
    logger.info("starting game with seed %s", settings.seed)
    session = new_session(settings, demo=args.demo)

    locale.setlocale(locale.LC_ALL, "")
    state = curses.wrapper(_play, session, settings)
    logger.info("game over: %s (won=%s)", state.value, session.won)
    print("You claimed the castle. Well played!" if session.won else "Thanks for playing!")
    return 0

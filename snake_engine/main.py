#!/usr/bin/env python3
"""
Command line entry point for the snake engine.

Usage:
    snake-engine play [--player greedy] [--max-ticks N] [--fast] [--render] [--no-sound]
    snake-engine high-score [--reset]

Examples:
    # Play a headless game as fast as possible with the greedy player
    snake-engine play --fast

    # Watch a random player in real time
    snake-engine play --player random --render

    # Show or reset the stored high score
    snake-engine high-score
    snake-engine high-score --reset
"""

import argparse
import json
import logging
import time
from typing import Any, Dict, Optional

from .config import get_settings
from .data_access import HighScoreRepository
from .domain.enums import GameStatus
from .engine.session import GameSession
from .players import AVAILABLE_PLAYERS, Player, get_player_class, list_players
from .services.audio import LoggingAudioSink
from .services.clock import SimulatedClock
from .services.renderer import ConsoleRenderer

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 5000


def run_game(
    session: GameSession,
    player: Player,
    max_ticks: Optional[int] = DEFAULT_MAX_TICKS,
    clock: Optional[SimulatedClock] = None,
) -> Dict[str, Any]:
    """
    Play one game to completion (or until `max_ticks`).

    When `clock` is a SimulatedClock the ticks are issued back-to-back and
    the clock is moved by the current interval before each one. Otherwise
    the session's tick timer drives the game in real time.

    Returns:
        The session summary.
    """
    if max_ticks is not None and max_ticks < 0:
        raise ValueError(f"max_ticks must be non-negative, got {max_ticks}")

    session.start()
    session.handle_direction(player.get_move(session.snapshot()))

    ticks = 0
    while session.status is GameStatus.RUNNING:
        if max_ticks is not None and ticks >= max_ticks:
            logger.info(f"Stopping after {ticks} ticks")
            session.pause()
            break

        if clock is not None:
            clock.advance(session.interval)
            session.on_tick()
        else:
            idle = session.timer.idle_seconds
            if idle is not None and idle > 0:
                time.sleep(idle)
            before = session.state.tick_count
            session.timer.run_pending()
            if session.state.tick_count == before:
                continue

        ticks += 1
        if session.status is GameStatus.RUNNING:
            session.handle_direction(player.get_move(session.snapshot()))

    return session.summary()


def play(args: argparse.Namespace, settings) -> Dict[str, Any]:
    store = HighScoreRepository(args.db or settings.db_path)
    clock = SimulatedClock() if args.fast else None
    session = GameSession(
        high_score_store=store,
        renderer=ConsoleRenderer() if args.render else None,
        audio=LoggingAudioSink(),
        clock=clock,
        sound_enabled=settings.sound_enabled and not args.no_sound,
    )
    player = get_player_class(args.player)()
    return run_game(session, player, max_ticks=args.max_ticks, clock=clock)


def high_score(args: argparse.Namespace, settings) -> Dict[str, Any]:
    store = HighScoreRepository(args.db or settings.db_path)
    if args.reset:
        store.reset()
    return {"high_score": store.get(), "database": store.db_path}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grid snake simulation engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--db", type=str, default=None,
                        help="SQLite file for the high score (default: SNAKE_DB_PATH or ./snake_engine.db)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Play one headless game")
    play_parser.add_argument("--player", choices=AVAILABLE_PLAYERS, default="greedy",
                             help="Input source steering the snake: " + "; ".join(
                                 f"{p['key']} ({p['description']})" for p in list_players()))
    play_parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                             help="Stop after this many ticks")
    play_parser.add_argument("--fast", action="store_true",
                             help="Use a simulated clock instead of real-time ticks")
    play_parser.add_argument("--render", action="store_true",
                             help="Print the board after every tick")
    play_parser.add_argument("--no-sound", action="store_true",
                             help="Suppress audio cues")
    play_parser.set_defaults(handler=play)

    score_parser = subparsers.add_parser("high-score", help="Show the stored high score")
    score_parser.add_argument("--reset", action="store_true", help="Reset the stored high score")
    score_parser.set_defaults(handler=high_score)

    return parser


def main(argv=None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    args = build_parser().parse_args(argv)
    result = args.handler(args, settings)
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

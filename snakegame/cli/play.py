#!/usr/bin/env python3
"""Headless driver: play one game of snake with an autopilot player.

The driver does what a windowed front end would do, minus the window: once
per loop iteration it forwards the player's direction request to the engine
and calls tick(). The engine's throttle decides when the snake actually moves.

Usage examples:

    python -m snakegame.cli.play --player greedy --seed 7

    snakegame-play --width 30 --height 15 --json --show-board
"""

import argparse
import json
import logging
import random
from typing import Optional

from .. import config
from ..domain.constants import Status
from ..domain.game_state import GameState
from ..engine import GameEngine
from ..players import AVAILABLE_PLAYERS, Player, get_player_class

logger = logging.getLogger(__name__)


def run_game(engine: GameEngine, player: Player, max_ticks: int) -> GameState:
    """
    Play a fresh game until it is lost or max_ticks ticks have been made.

    The player is consulted only right before a tick that executes a step,
    so it always sees the position the step will start from.

    Returns the final GameState.
    """
    engine.play_new()
    logger.info("Playing a %dx%d game with the %s player", engine.width, engine.height, player.name)

    ticks = 0
    while ticks < max_ticks:
        if engine.throttle_count == 0:
            move = player.get_move(engine.get_current_state())
            if move is not None:
                engine.update_direction(move)

        steps = engine.steps
        ticks += 1
        if engine.tick() is Status.LOST:
            break

        if engine.steps != steps and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tick %d\n%s", ticks, engine.get_current_state().print_board())

    state = engine.get_current_state()
    if state.status is Status.LOST:
        logger.info("Game over after %d ticks: %s", ticks, state)
    else:
        logger.info("Tick budget of %d reached: %s", max_ticks, state)
    return state


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Play a headless game of snake with an autopilot player.",
    )
    parser.add_argument("--width", type=int, default=config.BOARD_WIDTH,
                        help=f"Board width in cells (default: {config.BOARD_WIDTH})")
    parser.add_argument("--height", type=int, default=config.BOARD_HEIGHT,
                        help=f"Board height in cells (default: {config.BOARD_HEIGHT})")
    parser.add_argument("--player", type=str, default="greedy", choices=AVAILABLE_PLAYERS,
                        help="Autopilot that steers the snake (default: greedy)")
    parser.add_argument("--seed", type=int,
                        help="Seed for food placement and the player's choices")
    parser.add_argument("--max-ticks", type=int, default=config.MAX_TICKS,
                        help=f"Maximum number of tick() calls (default: {config.MAX_TICKS})")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the final board")
    parser.add_argument("--json", action="store_true",
                        help="Print the final game state as JSON")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL,
                        help=f"Logging level (default: {config.LOG_LEVEL})")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.max_ticks < 1:
        parser.error("--max-ticks must be at least 1")

    # Separate streams so the player's choices don't shift food placement
    seeder = random.Random(args.seed)
    try:
        engine = GameEngine(args.width, args.height, rng=random.Random(seeder.random()))
    except ValueError as e:
        parser.error(str(e))
    player = get_player_class(args.player)(rng=random.Random(seeder.random()))

    state = run_game(engine, player, args.max_ticks)

    if args.show_board:
        print("\n" + state.print_board() + "\n")

    if args.json:
        print(json.dumps(state.to_dict(), indent=2))
    else:
        print(f"{state.status.value}: score {state.score}, speed {state.speed}, steps {state.steps}")


if __name__ == "__main__":
    main()

import argparse
import json
import logging
import os
import random
from typing import Dict, Optional

from dotenv import load_dotenv

from config import EngineConfig
from database import MemoryHighScoreStore, SqliteHighScoreStore
from domain.constants import GAME_OVER, RUNNING
from domain.errors import SnakeEngineError
from domain.game_state import GameState
from engine import GameEngine
from players import PLAYER_TYPES, Player, RandomPlayer
from services.tick_scheduler import TickScheduler

load_dotenv()

LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO")
DEFAULT_MAX_TICKS = 5000

logger = logging.getLogger(__name__)


def print_snapshot(state: GameState) -> None:
    """
    Prints a visual representation of the board plus a status line.
    """
    print("\n" + state.print_board())
    line = (
        f"tick={state.tick_number} score={state.score} high={state.high_score} "
        f"speed={state.speed_ms}ms status={state.status}"
    )
    if state.game_over_reason:
        line += f" reason={state.game_over_reason}"
    print(line)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(config: EngineConfig, game_params: argparse.Namespace) -> Dict:
    """
    Runs one episode with an automatic player.

    Args:
        config: engine configuration for the episode
        game_params: An object (like argparse.Namespace) with player,
                     max_ticks, seed, realtime, quiet and no_persist

    Returns:
        A dictionary summarizing the episode (score, high_score, ticks, reason, status).
    """
    seed = getattr(game_params, 'seed', None)
    rng = random.Random(seed)

    if getattr(game_params, 'no_persist', False):
        store = MemoryHighScoreStore()
    else:
        store = SqliteHighScoreStore()

    realtime = getattr(game_params, 'realtime', False)
    scheduler = TickScheduler() if realtime else None
    renderer = None if getattr(game_params, 'quiet', False) else print_snapshot

    engine = GameEngine(
        config=config,
        scheduler=scheduler,
        renderer=renderer,
        high_score_store=store,
        rng=rng,
    )

    player_cls = PLAYER_TYPES[getattr(game_params, 'player', 'greedy')]
    if player_cls is RandomPlayer:
        player: Player = RandomPlayer(rng=random.Random(seed))
    else:
        player = player_cls()
    max_ticks = getattr(game_params, 'max_ticks', DEFAULT_MAX_TICKS)

    def steer():
        engine.set_intent(player.get_move(engine.snapshot()))

    engine.start()

    if realtime:
        def done() -> bool:
            if engine.tick_number >= max_ticks and engine.status == RUNNING:
                engine.pause()
            return engine.status != RUNNING

        scheduler.run_until(done, between_checks=steer)
    else:
        while engine.status == RUNNING and engine.tick_number < max_ticks:
            steer()
            engine.tick()

    state = engine.snapshot()
    if state.status != GAME_OVER:
        logger.info("Stopped after %d ticks without dying", state.tick_number)

    return {
        "score": state.score,
        "high_score": engine.get_high_score(),
        "ticks": state.tick_number,
        "reason": state.game_over_reason,
        "status": state.status,
        "length": len(state.snake),
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def build_parser() -> argparse.ArgumentParser:
    defaults = EngineConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Run a single-player Snake episode with an automatic player."
    )
    parser.add_argument("--width", type=int, default=defaults.grid_width,
                        help="Number of grid columns")
    parser.add_argument("--height", type=int, default=defaults.grid_height,
                        help="Number of grid rows")
    parser.add_argument("--wrap", action="store_true", default=defaults.wrap_enabled,
                        help="Leaving an edge re-enters from the opposite edge")
    parser.add_argument("--obstacles", action="store_true", default=defaults.obstacles_enabled,
                        help="Place single-cell obstacles on the board")
    parser.add_argument("--obstacle-count", dest="obstacle_count", type=int,
                        default=defaults.obstacle_count,
                        help="Number of obstacles when --obstacles is set")
    parser.add_argument("--speed", type=int, default=defaults.initial_speed_ms,
                        help="Initial tick interval in milliseconds (smaller is faster)")
    parser.add_argument("--player", choices=sorted(PLAYER_TYPES), default="greedy",
                        help="Automatic player that steers the snake")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="Stop the episode after this many moves")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for placement and the player")
    parser.add_argument("--realtime", action="store_true",
                        help="Tick on a timer at the current speed instead of as fast as possible")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board")
    parser.add_argument("--no-persist", dest="no_persist", action="store_true",
                        help="Keep the high score in memory only")
    return parser


def main(argv: Optional[list] = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    args = build_parser().parse_args(argv)

    config = EngineConfig(
        grid_width=args.width,
        grid_height=args.height,
        wrap_enabled=args.wrap,
        obstacles_enabled=args.obstacles,
        obstacle_count=args.obstacle_count,
        initial_speed_ms=args.speed,
    )

    try:
        result = run_simulation(config, args)
    except SnakeEngineError as e:
        logger.error("Could not run episode: %s", e)
        return 2

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

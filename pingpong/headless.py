"""
Headless CPU-vs-CPU matches on the real simulation, no window needed.

Usage:
- python -m pingpong.headless --matches 20 --seed 1
- python -m pingpong.headless --matches 5 --dt 0.01 --win-score 3

The left paddle gets its own CpuPaddleController, so both sides play the same
policy. observe() packs the table into a small normalized state vector.
"""
import argparse
import logging
import random
from dataclasses import dataclass
from typing import Optional

import numpy as np

from pingpong.controllers import CpuPaddleController
from pingpong.settings import DEFAULT_SETTINGS, PlayerSlot
from pingpong.table import Table

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    winner: Optional[PlayerSlot]
    player_one_score: int
    player_two_score: int
    rounds: int
    frames: int


def observe(table):
    # Normalize positions/velocities to [-1,1]
    s = table.settings
    half_w, half_h = s.width / 2, s.height / 2
    ball = table.ball
    state = np.array([
        (table.left_paddle.center_y - half_h) / half_h,
        (table.right_paddle.center_y - half_h) / half_h,
        (ball.pos_x - half_w) / half_w,
        (ball.pos_y - half_h) / half_h,
        ball.velocity.x * ball.speed / ball.max_speed,
        ball.velocity.y * ball.speed / ball.max_speed,
    ], dtype=np.float32)
    return np.clip(state, -1.0, 1.0)


def run_match(settings=DEFAULT_SETTINGS, seed=None, dt=1.0 / 60, max_frames=200_000):
    rng = random.Random(seed)
    table = Table(settings, rng)
    autopilot = CpuPaddleController(table.left_paddle, table.ball, settings, rng)
    table.start_match()

    frames = 0
    while table.is_match_running and frames < max_frames:
        autopilot.update(dt)
        table.update(dt)
        frames += 1

    if table.is_match_running:
        logger.warning("match stopped after %d frames without a winner", frames)

    board = table.score_board
    return MatchResult(
        winner=board.winner,
        player_one_score=board.player_one_score,
        player_two_score=board.player_two_score,
        rounds=board.round,
        frames=frames,
    )


def run_matches(matches, settings=DEFAULT_SETTINGS, seed=None, dt=1.0 / 60):
    base = random.Random(seed)
    return [run_match(settings, base.randrange(2**32), dt) for _ in range(matches)]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Simulate CPU vs CPU matches")
    parser.add_argument("--matches", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--dt", type=float, default=1.0 / 60)
    parser.add_argument("--win-score", type=int, default=DEFAULT_SETTINGS.win_score)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.matches < 1:
        parser.error("--matches must be at least 1")
    if args.dt <= 0:
        parser.error("--dt must be positive")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        settings = DEFAULT_SETTINGS.with_overrides(win_score=args.win_score)
    except ValueError as e:
        parser.error(str(e))

    results = run_matches(args.matches, settings, args.seed, args.dt)
    for i, r in enumerate(results):
        winner = r.winner.name if r.winner is not None else "none"
        print(f"Match {i+1}: {r.player_one_score}-{r.player_two_score} winner {winner}, "
              f"{r.rounds} rounds, {r.frames * args.dt:.1f}s")

    wins = sum(1 for r in results if r.winner == PlayerSlot.ONE)
    print(f"Left wins {wins}/{len(results)}, mean match length "
          f"{np.mean([r.frames for r in results]) * args.dt:.1f}s")
    return results


if __name__ == "__main__":
    main()

"""
The court: owns both paddles, the ball, the controllers and the score, and runs
one simulation step per frame.
"""
import logging
import random

from pingpong.ball import Ball, Velocity
from pingpong.controllers import CpuPaddleController, PlayerPaddleController
from pingpong.paddle import Paddle
from pingpong.scoreboard import ScoreBoard
from pingpong.settings import DEFAULT_SETTINGS, PlayerSlot

logger = logging.getLogger(__name__)


class Table:
    def __init__(self, settings=DEFAULT_SETTINGS, rng=None):
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()
        self.bounds = settings.bounds

        w, h = settings.width, settings.height
        start_y = h / 2 - settings.paddle_height / 2
        self.left_paddle = Paddle(settings.paddle_width, start_y, PlayerSlot.ONE, self.bounds, settings)
        self.right_paddle = Paddle(
            w - settings.paddle_width - settings.court_margin_x, start_y,
            PlayerSlot.TWO, self.bounds, settings,
        )
        self.ball = Ball(w / 2, h / 2, self.bounds, self.score_point, settings)

        self.player_controller = PlayerPaddleController(self.left_paddle)
        self.cpu_controller = CpuPaddleController(self.right_paddle, self.ball, settings, self.rng)
        self.score_board = ScoreBoard(settings.win_score)
        self.is_match_running = False

    @property
    def center(self):
        return self.settings.width / 2, self.settings.height / 2

    def update(self, dt, actions=frozenset()):
        if not self.is_match_running:
            return

        self.player_controller.update(dt, actions)
        self.cpu_controller.update(dt)
        self.ball.update(dt, self.left_paddle, self.right_paddle)

    def start_match(self):
        if self.is_match_running:
            return False

        self.is_match_running = True
        self.score_board.reset()
        self.score_board.round = 1
        self.left_paddle.reset()
        self.right_paddle.reset()
        self.spawn_ball()
        logger.info("match started, first to %d", self.settings.win_score)
        return True

    def spawn_ball(self):
        velocity = Velocity(x=self.rng.choice((-1, 1)), y=self.rng.choice((-1, 1)))
        x, y = self.center
        self.ball.spawn(x, y, velocity)

    def score_point(self, slot):
        board = self.score_board
        board.add_point(slot)
        logger.info(
            "round %d to player %s (%d - %d)",
            board.round, slot.name, board.player_one_score, board.player_two_score,
        )

        if board.winner is not None:
            self.is_match_running = False
            logger.info("player %s wins the match", board.winner.name)
        else:
            board.round += 1
            self.spawn_ball()

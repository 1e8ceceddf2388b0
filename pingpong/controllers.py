"""
Paddle controllers: the human player reads held actions, the CPU follows the ball
with an error that grows with distance and ball speed.
"""
import random

from pingpong.ball import sign
from pingpong.settings import DEFAULT_SETTINGS, Action


class PlayerPaddleController:
    def __init__(self, paddle):
        self.paddle = paddle

    @staticmethod
    def velocity_y(actions):
        dy = 0
        if Action.UP in actions: dy -= 1
        if Action.DOWN in actions: dy += 1
        return dy

    def update(self, dt, actions=frozenset()):
        dy = self.velocity_y(actions)
        if dy > 0:
            self.paddle.move_down(dt)
        elif dy < 0:
            self.paddle.move_up(dt)


class CpuPaddleController:
    """
    Two-stage random policy.

    One draw decides whether the paddle tracks the ball this frame. When it does
    not, a second draw decides whether it moves the wrong way or stays put.
    """

    def __init__(self, paddle, ball, settings=DEFAULT_SETTINGS, rng=None):
        self.paddle = paddle
        self.ball = ball
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()

    def error_margin(self):
        return self.settings.error_margin_max * self.ball.normalized_speed

    def ball_distance(self):
        return abs(self.paddle.pos_x - self.ball.pos_x)

    def predict_chance(self):
        s = self.settings
        distance = self.ball_distance() - s.prediction_distance_min
        return 1.0 - distance / s.prediction_distance_max - self.error_margin()

    def update(self, dt):
        predict_chance = self.predict_chance()
        ball_delta_y = sign(self.paddle.center_y - self.ball.pos_y)

        if self.rng.random() <= predict_chance:
            if ball_delta_y > 0:
                self.paddle.move_up(dt)
            else:
                self.paddle.move_down(dt)
        elif self.rng.random() < self.settings.wrong_move_chance:
            if ball_delta_y > 0:
                self.paddle.move_down(dt)
            else:
                self.paddle.move_up(dt)

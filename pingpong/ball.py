import logging
import math
from dataclasses import dataclass

from pingpong.geometry import Rectangle
from pingpong.settings import DEFAULT_SETTINGS, PlayerSlot

logger = logging.getLogger(__name__)


def sign(value):
    return int(math.copysign(1, value)) if value else 0


@dataclass
class Velocity:
    """Direction only: each component is -1, 0 or +1."""
    x: int = 0
    y: int = 0


class Ball:
    def __init__(self, x, y, bounds, score_point, settings=DEFAULT_SETTINGS):
        self.pos_x = x
        self.pos_y = y
        self.radius = settings.ball_radius
        self.velocity = Velocity()
        self.min_speed = settings.min_ball_speed
        self.max_speed = settings.max_ball_speed
        self.acceleration = settings.ball_acceleration
        self._speed = self.min_speed
        self._bounds = bounds
        self._score_point = score_point

    @property
    def speed(self):
        return self._speed

    @speed.setter
    def speed(self, value):
        self._speed = max(self.min_speed, min(value, self.max_speed))

    @property
    def normalized_speed(self):
        span = self.max_speed - self.min_speed
        if span == 0:
            return 0.0
        return (self._speed - self.min_speed) / span

    @property
    def collision_box(self):
        return Rectangle(
            self.pos_x - self.radius,
            self.pos_y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )

    def spawn(self, x, y, velocity):
        self.pos_x = x
        self.pos_y = y
        self.velocity = velocity
        self.speed = self.min_speed

    def update(self, dt, left_paddle, right_paddle):
        bounds = self._bounds

        # Vertical move, then reflect off the walls
        self.pos_y += sign(self.velocity.y) * self.speed * dt
        if self.pos_y - self.radius < bounds.upper:
            self.pos_y = bounds.upper + self.radius
            self.velocity.y *= -1
            logger.debug("ball hit upper wall at x=%.1f", self.pos_x)
        elif self.pos_y + self.radius > bounds.lower:
            self.pos_y = bounds.lower - self.radius
            self.velocity.y *= -1
            logger.debug("ball hit lower wall at x=%.1f", self.pos_x)

        # Paddles are checked independently, left first
        if self.collision_box.overlaps(left_paddle.collision_box):
            self.velocity.x *= -1
            self.pos_x = left_paddle.collision_box.right + self.radius
            logger.debug("ball returned by paddle %s", left_paddle.slot.name)

        if self.collision_box.overlaps(right_paddle.collision_box):
            self.velocity.x *= -1
            self.pos_x = right_paddle.collision_box.left - self.radius
            logger.debug("ball returned by paddle %s", right_paddle.slot.name)

        self.pos_x += sign(self.velocity.x) * self.speed * dt

        if self.pos_x < bounds.left:
            self._score_point(PlayerSlot.TWO)
            return
        if self.pos_x > bounds.right:
            self._score_point(PlayerSlot.ONE)
            return

        self.speed += self.acceleration * dt

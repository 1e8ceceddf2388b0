"""
Game constants and the immutable settings object shared by the simulation.
"""
from dataclasses import dataclass, replace
from enum import Enum, IntEnum

WIDTH, HEIGHT = 640, 400
TARGET_FPS = 60
FONT_NAME = "arial"
SMALL_FONT = 16
LARGE_FONT = 20

WHITE = (240, 240, 240)
BG = (25, 25, 30)
WALL = (32, 32, 32)
BUTTON = (17, 17, 17)
BUTTON_TEXT = (238, 238, 238)
SCORE_TEXT = (238, 238, 238)
RED = (220, 40, 40)
BLUE = (40, 90, 230)


class PlayerSlot(IntEnum):
    ONE = 1
    TWO = 2


class Action(Enum):
    UP = "up"
    DOWN = "down"
    START = "start"


@dataclass(frozen=True)
class Bounds:
    """Court limits the ball and paddles move within."""
    upper: float
    lower: float
    left: float
    right: float


@dataclass(frozen=True)
class Settings:
    width: float = WIDTH
    height: float = HEIGHT
    target_fps: int = TARGET_FPS
    wall_size: float = 20
    court_margin_x: float = 12
    court_margin_y: float = 5
    win_score: int = 7

    paddle_width: float = 12
    paddle_height: float = 48
    paddle_speed: float = 150.0

    ball_radius: float = 8
    min_ball_speed: float = 100.0
    max_ball_speed: float = 300.0
    ball_acceleration: float = 2.0

    # CPU opponent
    prediction_distance_min: float = 20.0
    prediction_distance_max: float = 400.0
    error_margin_max: float = 0.5
    wrong_move_chance: float = 0.2

    player_one_color: tuple = RED
    player_two_color: tuple = BLUE

    def __post_init__(self):
        if self.min_ball_speed > self.max_ball_speed:
            raise ValueError(
                f"min_ball_speed ({self.min_ball_speed}) exceeds max_ball_speed ({self.max_ball_speed})"
            )
        if self.win_score < 1:
            raise ValueError(f"win_score must be at least 1, got {self.win_score}")
        if self.target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {self.target_fps}")
        if self.prediction_distance_max <= 0:
            raise ValueError("prediction_distance_max must be positive")
        narrowest = 3 * self.paddle_width + self.court_margin_x + 2 * self.ball_radius
        if self.width < narrowest:
            raise ValueError(
                f"court of width {self.width} is too narrow, needs at least {narrowest}px"
            )
        playable = self.height - 2 * (self.court_margin_y + self.wall_size)
        if playable < self.paddle_height:
            raise ValueError(
                f"court of height {self.height} leaves {playable}px, paddle needs {self.paddle_height}px"
            )

    @property
    def bounds(self):
        inset = self.court_margin_y + self.wall_size
        return Bounds(upper=inset, lower=self.height - inset, left=0.0, right=self.width)

    def color_for(self, slot):
        return self.player_one_color if slot == PlayerSlot.ONE else self.player_two_color

    def with_overrides(self, **changes):
        return replace(self, **changes)


DEFAULT_SETTINGS = Settings()

from pingpong.geometry import Rectangle
from pingpong.settings import DEFAULT_SETTINGS


class Paddle:
    """Vertical-only paddle; x is fixed, y is clamped to the court after every move."""

    def __init__(self, x, y, slot, bounds, settings=DEFAULT_SETTINGS):
        self.pos_x = x
        self.pos_y = y
        self.width = settings.paddle_width
        self.height = settings.paddle_height
        self.slot = slot
        self.speed = settings.paddle_speed
        self.start_pos_x = x
        self.start_pos_y = y
        self._bounds = bounds
        self._settings = settings

    @property
    def collision_box(self):
        return Rectangle(self.pos_x, self.pos_y, self.width, self.height)

    @property
    def center_y(self):
        return self.pos_y + self.height / 2

    @property
    def render_color(self):
        return self._settings.color_for(self.slot)

    def move_up(self, dt):
        self.pos_y -= self.speed * dt
        self._clamp()

    def move_down(self, dt):
        self.pos_y += self.speed * dt
        self._clamp()

    def _clamp(self):
        self.pos_y = max(self._bounds.upper, min(self.pos_y, self._bounds.lower - self.height))

    def reset(self):
        self.pos_x = self.start_pos_x
        self.pos_y = self.start_pos_y

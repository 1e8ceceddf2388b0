"""
Playable pygame front-end.

Usage:
- python -m pingpong.pong              # W/S or UP/DOWN to move, SPACE or click to start
- python -m pingpong.pong --win-score 3 --seed 7
"""
import argparse
import logging
import random

import pygame

from pingpong.render import draw_frame, start_button_rect
from pingpong.settings import DEFAULT_SETTINGS, FONT_NAME, Action
from pingpong.table import Table

logger = logging.getLogger(__name__)

KEY_ACTIONS = {
    pygame.K_w: Action.UP,
    pygame.K_UP: Action.UP,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_SPACE: Action.START,
}


class PygameCanvas:
    """Drawing surface backed by a pygame Surface."""

    def __init__(self, surface):
        self.surface = surface
        self._fonts = {}

    @property
    def width(self):
        return self.surface.get_width()

    @property
    def height(self):
        return self.surface.get_height()

    def clear(self, color):
        self.surface.fill(color)

    def fill_rect(self, rect, color):
        pygame.draw.rect(self.surface, color, (int(rect.x), int(rect.y), int(rect.width), int(rect.height)))

    def fill_circle(self, x, y, radius, color):
        pygame.draw.circle(self.surface, color, (int(x), int(y)), int(radius))

    def _font(self, size):
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.SysFont(FONT_NAME, size)
        return self._fonts[size]

    def draw_text(self, text, x, y, size, color):
        rendered = self._font(size).render(text, True, color)
        self.surface.blit(rendered, (int(x), int(y)))


def keys_to_actions(pressed):
    return frozenset(action for key, action in KEY_ACTIONS.items() if pressed[key])


class Game:
    def __init__(self, canvas, settings=DEFAULT_SETTINGS, rng=None):
        self.canvas = canvas
        self.settings = settings
        self.table = Table(settings, rng)
        self.start_button = start_button_rect(canvas.width, canvas.height)
        self.running = True

    def request_start(self):
        if self.table.is_match_running:
            return False
        return self.table.start_match()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif KEY_ACTIONS.get(event.key) is Action.START:
                self.request_start()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.start_button.contains(*event.pos):
                self.request_start()

    def tick(self, dt, actions=frozenset()):
        self.table.update(dt, actions)
        draw_frame(self.canvas, self.table, self.start_button)

    def run(self, clock):
        while self.running:
            dt = clock.tick(self.settings.target_fps) / 1000.0
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break
            self.tick(dt, keys_to_actions(pygame.key.get_pressed()))
            pygame.display.flip()


def build_parser():
    parser = argparse.ArgumentParser(description="Ping pong against the computer")
    parser.add_argument("--width", type=int, default=DEFAULT_SETTINGS.width)
    parser.add_argument("--height", type=int, default=DEFAULT_SETTINGS.height)
    parser.add_argument("--win-score", type=int, default=DEFAULT_SETTINGS.win_score)
    parser.add_argument("--fps", type=int, default=DEFAULT_SETTINGS.target_fps)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser


def settings_from_args(parser, args):
    try:
        return DEFAULT_SETTINGS.with_overrides(
            width=args.width, height=args.height, win_score=args.win_score, target_fps=args.fps,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    settings = settings_from_args(parser, args)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(settings.width), int(settings.height)))
        pygame.display.set_caption("Ping Pong")
        game = Game(PygameCanvas(screen), settings, random.Random(args.seed))
        logger.info("window %dx%d open, press SPACE to start", settings.width, settings.height)
        game.run(pygame.time.Clock())
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()

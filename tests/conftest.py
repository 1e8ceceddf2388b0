import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from pingpong.settings import DEFAULT_SETTINGS
from pingpong.table import Table


class ScriptedRandom:
    """Replays queued draws; falls back to fixed values once the queue runs dry."""

    def __init__(self, draws=(), choices=(), default=0.0):
        self.draws = list(draws)
        self.choices = list(choices)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.draws.pop(0) if self.draws else self.default

    def choice(self, seq):
        return self.choices.pop(0) if self.choices else seq[0]


class FakeCanvas:
    def __init__(self, width=640, height=400):
        self.width = width
        self.height = height
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, rect, color):
        self.calls.append(("rect", rect, color))

    def fill_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))

    def draw_text(self, text, x, y, size, color):
        self.calls.append(("text", text, x, y, size, color))

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]


@pytest.fixture
def settings():
    return DEFAULT_SETTINGS


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def table(settings, rng):
    return Table(settings, rng)


@pytest.fixture
def canvas():
    return FakeCanvas()

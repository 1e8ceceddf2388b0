"""
Axis-aligned rectangles used for collision boxes and the start button.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"rectangle extent must be non-negative, got {self.width}x{self.height}")

    @property
    def left(self):
        return self.x

    @property
    def right(self):
        return self.x + self.width

    @property
    def top(self):
        return self.y

    @property
    def bottom(self):
        return self.y + self.height

    def overlaps(self, other):
        return overlaps(self, other)

    def contains(self, x, y):
        return contains(self, x, y)


def overlaps(a, b):
    """Open-interval test on both axes: rectangles that only touch do not overlap."""
    return (
        b.left < a.right and a.left < b.right
        and b.top < a.bottom and a.top < b.bottom
    )


def contains(rect, x, y):
    return rect.left < x < rect.right and rect.top < y < rect.bottom

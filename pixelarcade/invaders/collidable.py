"""Axis-aligned boxes and collision between game entities."""

from abc import ABC, abstractmethod
from typing import NamedTuple

INVADERS_WIDTH = 1000
INVADERS_HEIGHT = 800


def _span(start, length):
    end = start + length
    return min(start, end), max(start, end)


class Rect(NamedTuple):
    """An axis-aligned box: left, top, width and height."""

    left: float
    top: float
    width: float
    height: float

    def intersects(self, other):
        """True if the two boxes overlap by more than an edge."""
        a_left, a_right = _span(self.left, self.width)
        a_top, a_bottom = _span(self.top, self.height)
        b_left, b_right = _span(other.left, other.width)
        b_top, b_bottom = _span(other.top, other.height)
        return max(a_left, b_left) < min(a_right, b_right) and max(a_top, b_top) < min(
            a_bottom, b_bottom
        )

    def contains(self, point):
        """True if the point is inside; the right and bottom edges are excluded."""
        x, y = point
        left, right = _span(self.left, self.width)
        top, bottom = _span(self.top, self.height)
        return left <= x < right and top <= y < bottom


class Collidable(ABC):
    """An entity with a box of fixed size at its ``position``.

    Subclasses provide a ``position`` attribute holding the top-left corner.
    """

    def __init__(self, width, height):
        self.size = (width, height)

    def try_collide_with(self, other):
        """If the boxes overlap, notify both entities and return True."""
        if self.box().intersects(other.box()):
            self.on_collide(other)
            other.on_collide(self)
            return True
        return False

    def box(self):
        """The entity's box at its current position."""
        x, y = self.position
        width, height = self.size
        return Rect(x, y, width, height)

    @abstractmethod
    def on_collide(self, other):
        """React to touching another entity."""
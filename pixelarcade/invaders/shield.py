"""Destructible shields made of pixel sections."""

import enum

from ..rng import Random
from .collidable import INVADERS_HEIGHT, Collidable

SECT_SIZE = 20
SIZE = SECT_SIZE * 4

_GREEN = (0, 255, 0)
_BLACK = (0, 0, 0)
_BLAST_RADIUS = 12.0
_BLAST_POINTS = 35


class SectorStyle(enum.Enum):
    SQUARE = enum.auto()
    SLOPE_UP = enum.auto()
    SLOPE_DOWN = enum.auto()
    SLOPE_UNDER_UP = enum.auto()
    SLOPE_UNDER_DOWN = enum.auto()


_STYLE_RULES = {
    SectorStyle.SQUARE: lambda x, y: True,
    SectorStyle.SLOPE_UP: lambda x, y: SECT_SIZE - y < x,
    SectorStyle.SLOPE_DOWN: lambda x, y: x < y,
    SectorStyle.SLOPE_UNDER_UP: lambda x, y: SECT_SIZE - x > y,
    SectorStyle.SLOPE_UNDER_DOWN: lambda x, y: x > y,
}

_CORNER_STYLES = {
    (0, 0): SectorStyle.SLOPE_UP,
    (3, 0): SectorStyle.SLOPE_DOWN,
    (1, 3): SectorStyle.SLOPE_UNDER_UP,
    (2, 3): SectorStyle.SLOPE_UNDER_DOWN,
}


class ShieldSection(Collidable):
    """A square block of pixels; its style decides which pixels exist."""

    def __init__(self, x, y, style):
        super().__init__(SECT_SIZE, SECT_SIZE)
        self.position = (x, y)
        self.style = style
        include = _STYLE_RULES[style]
        # True: intact, False: destroyed, None: not part of the shape.
        self._pixels = [
            [True if include(px, py) else None for px in range(SECT_SIZE)]
            for py in range(SECT_SIZE)
        ]

    def on_collide(self, other):
        """Sections take damage through ``destroy_area`` instead."""

    def is_solid(self, x, y):
        """True if the pixel at local coordinates is intact."""
        return bool(self._pixels[y][x])

    def solid_pixels(self):
        """Absolute positions of the intact pixels, row by row."""
        left, top = self.position
        for py, row in enumerate(self._pixels):
            for px, state in enumerate(row):
                if state:
                    yield (left + px, top + py)

    def touching_point(self, projectile):
        """The first intact pixel inside the projectile's box, or None."""
        box = projectile.box()
        return next((point for point in self.solid_pixels() if box.contains(point)), None)

    def destroy_area(self, x, y):
        """Destroy the 5x5 block of pixels centred on local (x, y)."""
        for ny in range(y - 2, y + 3):
            for nx in range(x - 2, x + 3):
                if 0 <= nx < SECT_SIZE and 0 <= ny < SECT_SIZE:
                    if self._pixels[ny][nx] is not None:
                        self._pixels[ny][nx] = False

    def draw(self, surface):
        """Draw intact pixels green and destroyed ones black."""
        left, top = self.position
        for py, row in enumerate(self._pixels):
            for px, state in enumerate(row):
                if state is not None:
                    surface.set_at((int(left + px), int(top + py)), _GREEN if state else _BLACK)


class Shield(Collidable):
    """A 4x4 grid of sections standing above the player."""

    def __init__(self, x, rng=None):
        super().__init__(SIZE, SIZE)
        self.position = (x, INVADERS_HEIGHT - 200)
        self._rng = rng or Random()
        top = self.position[1]
        self.sections = [
            ShieldSection(
                x + sx * SECT_SIZE,
                top + sy * SECT_SIZE,
                _CORNER_STYLES.get((sx, sy), SectorStyle.SQUARE),
            )
            for sy in range(4)
            for sx in range(4)
        ]

    def on_collide(self, other):
        """Shields take damage through ``is_touching`` instead."""

    def section(self, x, y):
        """The section in column ``x`` and row ``y``."""
        return self.sections[y * 4 + x]

    def destroy_point(self, rel_x, rel_y):
        """Destroy around a point relative to the shield's top-left corner."""
        if not (0 <= rel_x < SIZE and 0 <= rel_y < SIZE):
            return
        section = self.section(int(rel_x) // SECT_SIZE, int(rel_y) // SECT_SIZE)
        section_x, section_y = section.position
        shield_x, shield_y = self.position
        pixel_x = rel_x - (section_x - shield_x)
        pixel_y = rel_y - (section_y - shield_y)
        section.destroy_area(int(pixel_x), int(pixel_y))

    def is_touching(self, projectile):
        """If the projectile touches an intact pixel, blast a hole and return True."""
        if not projectile.box().intersects(self.box()):
            return False
        shield_x, shield_y = self.position
        for section in self.sections:
            hit = section.touching_point(projectile)
            if hit is None:
                continue
            rel_x = hit[0] - shield_x
            rel_y = hit[1] - shield_y
            for dy in range(-3, 3):
                for dx in range(-3, 3):
                    self.destroy_point(rel_x + dx * 2, rel_y + dy * 2)
            for _ in range(_BLAST_POINTS):
                offset_x = self._rng.float_in_range(-_BLAST_RADIUS, _BLAST_RADIUS)
                offset_y = self._rng.float_in_range(-_BLAST_RADIUS, _BLAST_RADIUS)
                self.destroy_point(rel_x + offset_x, rel_y + offset_y)
            return True
        return False

    def draw(self, surface):
        """Draw every section."""
        for section in self.sections:
            section.draw(surface)
"""A field of stars drifting up the screen."""

from ..rng import Random
from .collidable import INVADERS_HEIGHT, INVADERS_WIDTH

STAR_COUNT = 500
STAR_SPEED = 250

_WHITE = (255, 255, 255)


class StarryBackground:
    """Stars move upwards and reappear below the screen when they leave it."""

    def __init__(self, rng=None):
        self._rng = rng or Random()
        self._stars = []
        for _ in range(STAR_COUNT):
            x, y = self._start_location()
            self._stars.append((x, y - INVADERS_HEIGHT))

    @property
    def stars(self):
        """Star positions."""
        return tuple(self._stars)

    def _start_location(self):
        return (
            self._rng.float_in_range(0, float(INVADERS_WIDTH)),
            self._rng.float_in_range(float(INVADERS_HEIGHT), INVADERS_HEIGHT * 2.0),
        )

    def _advance(self, star, dt):
        x, y = star
        y -= STAR_SPEED * dt
        if y <= 0:
            return self._start_location()
        return (x, y)

    def update(self, dt):
        """Move every star by ``dt`` seconds."""
        self._stars = [self._advance(star, dt) for star in self._stars]

    def draw(self, surface):
        """Draw each visible star as a white point."""
        area = surface.get_rect()
        for x, y in self._stars:
            point = (int(x), int(y))
            if area.collidepoint(point):
                surface.set_at(point, _WHITE)
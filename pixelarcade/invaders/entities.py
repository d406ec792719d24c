"""Explosions, invaders and projectiles."""

import enum
import itertools

from ..timing import Clock
from .collidable import INVADERS_HEIGHT, Collidable

EXPLOSION_LIFETIME = 0.2
PROJECTILE_SPEED = 650


class Explosion:
    """A short-lived explosion at a fixed position."""

    def __init__(self, position, clock=None):
        self.position = tuple(position)
        self._clock = clock or Clock()

    def is_life_over(self):
        """True once the explosion has been shown long enough."""
        return self._clock.elapsed() >= EXPLOSION_LIFETIME


class InvaderType(enum.IntEnum):
    OCTOPUS = 0
    CRAB = 1
    SQUID = 2


class Invader(Collidable):
    """A single invader; it starts dead and is brought in by ``make_alive``."""

    WIDTH = 48
    HEIGHT = 32

    def __init__(self, initial_position, kind):
        super().__init__(self.WIDTH, self.HEIGHT)
        self.initial_position = tuple(initial_position)
        self.position = self.initial_position
        self.kind = kind
        self.is_alive = False

    def move(self, dx, dy):
        """Shift the invader by an offset."""
        x, y = self.position
        self.position = (x + dx, y + dy)

    def on_collide(self, other):
        self.is_alive = False

    def make_alive(self):
        """Bring the invader to life at its initial position."""
        self.is_alive = True
        self.position = self.initial_position


class ProjectileType(enum.IntEnum):
    RECTANGLE = 0
    LIGHTNING = 1
    KNIFE = 2


class Direction(enum.IntEnum):
    UP = -1
    DOWN = 1


_projectile_ids = itertools.count()


class Projectile(Collidable):
    """A shot travelling straight up or down; each has a unique id."""

    HEIGHT = 24
    WIDTH = 12

    def __init__(self, position, kind, direction):
        super().__init__(self.WIDTH / 1.5, self.HEIGHT)
        self.position = tuple(position)
        self.kind = kind
        self.direction = direction
        self.is_active = True
        self.id = next(_projectile_ids)

    def update(self, dt):
        """Move the projectile, destroying it when it leaves the screen."""
        x, y = self.position
        y += PROJECTILE_SPEED * int(self.direction) * dt
        self.position = (x, y)
        if y <= 0 or y >= INVADERS_HEIGHT:
            self.destroy()

    def on_collide(self, other):
        self.destroy()

    def destroy(self):
        """Mark the projectile as spent."""
        self.is_active = False
"""The mystery ship that now and then crosses the top of the screen."""

import enum

from ..animation import Animation
from ..timing import Clock
from .animation_renderer import draw_region
from .collidable import INVADERS_WIDTH, Collidable

WIDTH = 72
HEIGHT = 36
Y_POS = 45
SPEED = 200.0
OFFSCREEN = (-1000.0, 0.0)

_APPEAR_ROLL = 100
_SOUND_LOOP = 1.3
_VOLUME = 0.1


class UFOState(enum.Enum):
    WAITING = enum.auto()
    FLYING = enum.auto()
    DESTROYED = enum.auto()


class UFO(Collidable):
    """Waits for a lucky roll, then flies across the screen.

    ``clock`` is a function returning the current time in seconds.
    """

    def __init__(self, rng, clock=None, sprite_sheet=None, sound=None):
        super().__init__(WIDTH, HEIGHT)
        self._rng = rng
        self.sprite_sheet = sprite_sheet
        self._sound = sound
        if sound is not None:
            sound.set_volume(_VOLUME)
        self._sound_clock = Clock(clock)
        self.animation = Animation(16, 8, Clock(clock))
        for i in range(3):
            self.animation.add_frame(i, 0.2)
        self.position = (float(INVADERS_WIDTH), float(Y_POS))
        self.velocity_x = 0.0
        self.state = UFOState.WAITING

    def update(self, dt):
        """Advance the ship by ``dt`` seconds."""
        if self.state is UFOState.DESTROYED:
            self.state = UFOState.WAITING
        elif self.state is UFOState.FLYING:
            x, y = self.position
            x += self.velocity_x * dt
            self.position = (x, y)
            if x <= -WIDTH or x >= INVADERS_WIDTH + WIDTH:
                self.state = UFOState.WAITING
            self._keep_sound_playing()
        elif self._rng.int_in_range(1, 250) == _APPEAR_ROLL:
            self.state = UFOState.FLYING
            self.velocity_x = float(self._rng.int_in_range(-1, 1)) * SPEED
            start_x = -WIDTH if self.velocity_x >= 0 else INVADERS_WIDTH
            self.position = (float(start_x), float(Y_POS))

    def _keep_sound_playing(self):
        if self._sound is None:
            return
        if self._sound.get_num_channels() == 0 or self._sound_clock.elapsed() >= _SOUND_LOOP:
            self._sound.stop()
            self._sound.play()
            self._sound_clock.restart()

    def on_collide(self, other):
        self.state = UFOState.DESTROYED
        # Off screen, so no other projectile can hit it.
        self.position = OFFSCREEN

    def draw(self, surface):
        """Draw the ship while it is flying."""
        if self.state is UFOState.FLYING:
            region = self.animation.current_frame()
            draw_region(surface, self.sprite_sheet, region, self.position, self.size)
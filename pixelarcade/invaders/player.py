"""The player's cannon."""

import pygame

from ..animation import Animation
from ..timing import Clock
from .animation_renderer import draw_region
from .collidable import INVADERS_HEIGHT, INVADERS_WIDTH, Collidable

BASE_Y = INVADERS_HEIGHT - 40.0
START_LIVES = 3
REVIVE_DELAY = 1.5

_SPEED = 20
_FRICTION = 0.95
_IDLE_FRAME = (0, 0, 11, 8)


def _pygame_key_state(key):
    return bool(pygame.key.get_pressed()[key])


class Player(Collidable):
    """Moves left and right along the bottom of the screen."""

    WIDTH = 44
    HEIGHT = 32

    def __init__(self, clock=None, sprite_sheet=None, death_sound=None):
        super().__init__(self.WIDTH, self.HEIGHT)
        self._death_timer = clock or Clock()
        self.sprite_sheet = sprite_sheet
        self._death_sound = death_sound
        self.death_animation = Animation(11, 8)
        for i in range(20):
            self.death_animation.add_frame(i % 2 + 1, 0.1)
        self.position = (float(INVADERS_WIDTH // 2), BASE_Y)
        self.velocity = (0.0, 0.0)
        self.texture_rect = _IDLE_FRAME
        self.is_alive = True
        self.lives = START_LIVES

    def _restart(self):
        self.velocity = (0.0, 0.0)
        self.texture_rect = _IDLE_FRAME
        self.is_alive = True
        self.lives -= 1
        self.position = (float(INVADERS_WIDTH // 2), BASE_Y)

    def input(self, key_state=None):
        """Accelerate left on A or right on D; ``key_state(key)`` tells if a key is down."""
        key_down = key_state or _pygame_key_state
        vx, vy = self.velocity
        if key_down(pygame.K_a):
            vx -= _SPEED
        elif key_down(pygame.K_d):
            vx += _SPEED
        self.velocity = (vx, vy)

    def update(self, dt):
        """Move by the velocity, slow down and bounce off the screen edges."""
        if not self.is_alive:
            return
        vx, vy = self.velocity
        x, y = self.position
        x += vx * dt
        y += vy * dt
        vx *= _FRICTION
        vy *= _FRICTION
        if x <= 0:
            vx = 1.0
            x, y = 1.0, BASE_Y
        elif x + self.WIDTH >= INVADERS_WIDTH:
            vx = -1.0
            x, y = INVADERS_WIDTH - 1.0 - self.WIDTH, BASE_Y
        self.velocity = (vx, vy)
        self.position = (x, y)

    def gun_position(self):
        """The point shots leave from: the top centre of the cannon."""
        x, y = self.position
        return (x + self.WIDTH / 2, y)

    def on_collide(self, other):
        self.is_alive = False
        self._death_timer.restart()
        if self._death_sound is not None:
            self._death_sound.play()

    def try_revive(self):
        """Come back, losing a life, once the death delay has passed."""
        if self._death_timer.elapsed() >= REVIVE_DELAY:
            self._restart()

    def draw(self, surface):
        """Draw the cannon, showing the death animation while dead."""
        if not self.is_alive:
            self.texture_rect = self.death_animation.current_frame()
        if self.lives >= 0:
            draw_region(surface, self.sprite_sheet, self.texture_rect, self.position, self.size)
import pygame
import pytest

from pixelarcade.invaders import ufo as ufo_module
from pixelarcade.invaders.collidable import INVADERS_WIDTH
from pixelarcade.invaders.entities import Direction, Projectile, ProjectileType
from pixelarcade.invaders.ufo import UFO, UFOState

WHITE = pygame.Color(255, 255, 255, 255)
BLACK = pygame.Color(0, 0, 0, 255)


class ScriptedRandom:
    def __init__(self, *ints):
        self.ints = list(ints)
        self.calls = []

    def int_in_range(self, low, high):
        self.calls.append((low, high))
        return self.ints.pop(0) if self.ints else low


class FakeTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_ufo(*ints):
    return UFO(ScriptedRandom(*ints), FakeTime())


def test_starts_waiting_off_screen_right():
    ufo = make_ufo()
    assert ufo.state is UFOState.WAITING
    assert ufo.position == (INVADERS_WIDTH, ufo_module.Y_POS)


def test_other_rolls_keep_it_waiting():
    rng = ScriptedRandom(99)
    ufo = UFO(rng, FakeTime())
    ufo.update(0.1)
    assert ufo.state is UFOState.WAITING
    assert rng.calls == [(1, 250)]


def test_launch_to_the_right_starts_at_left_edge():
    ufo = make_ufo(100, 1)
    ufo.update(0.1)
    assert ufo.state is UFOState.FLYING
    assert ufo.velocity_x == ufo_module.SPEED
    assert ufo.position == (-ufo_module.WIDTH, ufo_module.Y_POS)


def test_launch_to_the_left_starts_at_right_edge():
    ufo = make_ufo(100, -1)
    ufo.update(0.1)
    assert ufo.velocity_x == -ufo_module.SPEED
    assert ufo.position == (INVADERS_WIDTH, ufo_module.Y_POS)


def test_flying_moves_by_velocity():
    ufo = make_ufo(100, 1)
    ufo.update(0.1)
    start_x = ufo.position[0]
    ufo.update(0.5)
    assert ufo.position[0] == pytest.approx(start_x + ufo.velocity_x * 0.5)
    assert ufo.position[1] == ufo_module.Y_POS
    assert ufo.state is UFOState.FLYING


def test_leaving_the_screen_returns_to_waiting():
    ufo = make_ufo(100, 1)
    ufo.update(0.1)
    ufo.update(10.0)
    assert ufo.state is UFOState.WAITING


def test_collision_destroys_and_hides_then_waits():
    ufo = make_ufo(100, 1)
    ufo.update(0.1)
    ufo.on_collide(None)
    assert ufo.state is UFOState.DESTROYED
    assert ufo.position == ufo_module.OFFSCREEN
    ufo.update(0.1)
    assert ufo.state is UFOState.WAITING


def test_projectile_hit_destroys_ufo():
    ufo = make_ufo(100, 1)
    ufo.update(0.1)
    ufo.position = (100.0, float(ufo_module.Y_POS))
    projectile = Projectile((110.0, 50.0), ProjectileType.RECTANGLE, Direction.UP)
    assert ufo.try_collide_with(projectile) is True
    assert ufo.state is UFOState.DESTROYED
    assert projectile.is_active is False


def test_draws_only_while_flying():
    surface = pygame.Surface((400, 100))
    ufo = make_ufo(100, 1)
    ufo.position = (100.0, float(ufo_module.Y_POS))
    ufo.draw(surface)
    assert surface.get_at((110, 50)) == BLACK

    ufo.update(0.1)
    ufo.position = (100.0, float(ufo_module.Y_POS))
    ufo.draw(surface)
    assert surface.get_at((110, 50)) == WHITE
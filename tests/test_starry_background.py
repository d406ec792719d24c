import pygame
import pytest

from pixelarcade.invaders.collidable import INVADERS_HEIGHT, INVADERS_WIDTH
from pixelarcade.invaders.starry_background import STAR_COUNT, STAR_SPEED, StarryBackground
from pixelarcade.rng import Random

WHITE = pygame.Color(255, 255, 255, 255)


def test_stars_start_on_screen():
    background = StarryBackground(Random(7))
    stars = background.stars
    assert len(stars) == STAR_COUNT
    for x, y in stars:
        assert 0 <= x <= INVADERS_WIDTH
        assert 0 <= y <= INVADERS_HEIGHT


def test_same_seed_same_sky():
    first = list(StarryBackground(Random(3)).stars)
    second = list(StarryBackground(Random(3)).stars)
    assert len(first) == STAR_COUNT
    assert first == second
    assert all(0 <= x <= INVADERS_WIDTH for x, _ in first)


def test_update_moves_up_or_respawns_below():
    background = StarryBackground(Random(11))
    before = background.stars
    dt = 0.5
    background.update(dt)
    for (bx, by), (ax, ay) in zip(before, background.stars):
        moved = by - STAR_SPEED * dt
        if moved > 0:
            assert ax == bx
            assert ay == pytest.approx(moved)
        else:
            assert INVADERS_HEIGHT <= ay <= INVADERS_HEIGHT * 2


def test_long_update_respawns_every_star():
    background = StarryBackground(Random(5))
    background.update(10.0)
    assert all(INVADERS_HEIGHT <= y <= INVADERS_HEIGHT * 2 for _, y in background.stars)


def test_draw_paints_visible_stars():
    background = StarryBackground(Random(9))
    surface = pygame.Surface((INVADERS_WIDTH, INVADERS_HEIGHT))
    background.draw(surface)
    visible = [
        (int(x), int(y))
        for x, y in background.stars
        if 0 <= x < INVADERS_WIDTH and 0 <= y < INVADERS_HEIGHT
    ]
    assert visible
    assert all(surface.get_at(point) == WHITE for point in visible)
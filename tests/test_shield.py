import pygame

from pixelarcade.invaders.collidable import INVADERS_HEIGHT
from pixelarcade.invaders.entities import Direction, Projectile, ProjectileType
from pixelarcade.invaders.shield import (
    SECT_SIZE,
    SIZE,
    SectorStyle,
    Shield,
    ShieldSection,
)
from pixelarcade.rng import Random


def solid_count(shield):
    return sum(len(list(section.solid_pixels())) for section in shield.sections)


def test_square_section_is_full():
    section = ShieldSection(0, 0, SectorStyle.SQUARE)
    assert len(list(section.solid_pixels())) == SECT_SIZE * SECT_SIZE


def test_slope_styles_cut_corners():
    assert ShieldSection(0, 0, SectorStyle.SLOPE_DOWN).is_solid(0, 5)
    assert not ShieldSection(0, 0, SectorStyle.SLOPE_DOWN).is_solid(5, 0)
    assert ShieldSection(0, 0, SectorStyle.SLOPE_UNDER_DOWN).is_solid(5, 0)
    assert not ShieldSection(0, 0, SectorStyle.SLOPE_UNDER_DOWN).is_solid(0, 5)
    assert ShieldSection(0, 0, SectorStyle.SLOPE_UP).is_solid(19, 19)
    assert not ShieldSection(0, 0, SectorStyle.SLOPE_UP).is_solid(0, 0)
    assert ShieldSection(0, 0, SectorStyle.SLOPE_UNDER_UP).is_solid(0, 0)
    assert not ShieldSection(0, 0, SectorStyle.SLOPE_UNDER_UP).is_solid(19, 19)


def test_shield_layout():
    shield = Shield(100, Random(1))
    top = INVADERS_HEIGHT - 200
    assert shield.position == (100, top)
    assert len(shield.sections) == 16
    assert shield.section(0, 0).style is SectorStyle.SLOPE_UP
    assert shield.section(3, 0).style is SectorStyle.SLOPE_DOWN
    assert shield.section(1, 3).style is SectorStyle.SLOPE_UNDER_UP
    assert shield.section(2, 3).style is SectorStyle.SLOPE_UNDER_DOWN
    assert shield.section(1, 1).style is SectorStyle.SQUARE
    for sy in range(4):
        for sx in range(4):
            assert shield.section(sx, sy).position == (100 + sx * SECT_SIZE, top + sy * SECT_SIZE)


def test_destroy_area_clears_five_by_five():
    section = ShieldSection(0, 0, SectorStyle.SQUARE)
    section.destroy_area(10, 10)
    assert not section.is_solid(10, 10)
    assert not section.is_solid(8, 12)
    assert section.is_solid(13, 10)
    assert section.is_solid(10, 7)


def test_destroy_area_at_corner_stays_in_bounds():
    section = ShieldSection(0, 0, SectorStyle.SQUARE)
    section.destroy_area(0, 0)
    assert not section.is_solid(0, 0)
    assert section.is_solid(3, 3)


def test_touching_point_inside_projectile():
    section = ShieldSection(100, 100, SectorStyle.SQUARE)
    projectile = Projectile((105, 105), ProjectileType.RECTANGLE, Direction.DOWN)
    point = section.touching_point(projectile)
    assert projectile.box().contains(point)
    assert section.is_solid(int(point[0] - 100), int(point[1] - 100))


def test_touching_point_none_when_away():
    section = ShieldSection(100, 100, SectorStyle.SQUARE)
    projectile = Projectile((300, 300), ProjectileType.RECTANGLE, Direction.DOWN)
    assert section.touching_point(projectile) is None


def test_is_touching_blasts_a_hole():
    shield = Shield(100, Random(1))
    before = solid_count(shield)
    x, y = shield.section(1, 1).position
    projectile = Projectile((x + 2, y + 2), ProjectileType.RECTANGLE, Direction.DOWN)
    assert shield.is_touching(projectile)
    assert solid_count(shield) < before


def test_is_touching_far_projectile():
    shield = Shield(100, Random(1))
    before = solid_count(shield)
    projectile = Projectile((600, 100), ProjectileType.RECTANGLE, Direction.DOWN)
    assert not shield.is_touching(projectile)
    assert solid_count(shield) == before


def test_destroy_point_out_of_bounds_does_nothing():
    shield = Shield(100, Random(1))
    before = solid_count(shield)
    shield.destroy_point(-1, 10)
    shield.destroy_point(10, SIZE)
    assert solid_count(shield) == before


def test_destroy_point_hits_the_right_section():
    shield = Shield(100, Random(1))
    shield.destroy_point(SECT_SIZE + 5, SECT_SIZE + 5)
    assert not shield.section(1, 1).is_solid(5, 5)
    assert shield.section(0, 0).is_solid(19, 19)


def test_draw_shows_intact_and_destroyed_pixels():
    surface = pygame.Surface((300, 800))
    surface.fill((255, 255, 255))
    shield = Shield(100, Random(1))
    section = shield.section(1, 1)
    section.destroy_area(10, 10)
    shield.draw(surface)
    x, y = section.position
    assert tuple(surface.get_at((x + 1, y + 1)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((x + 10, y + 10)))[:3] == (0, 0, 0)
from pixelarcade.invaders.collidable import INVADERS_HEIGHT
from pixelarcade.invaders.entities import (
    EXPLOSION_LIFETIME,
    Direction,
    Explosion,
    Invader,
    InvaderType,
    Projectile,
    ProjectileType,
)
from pixelarcade.timing import Clock


class FakeTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_explosion_lifetime():
    fake = FakeTime()
    explosion = Explosion((3, 4), Clock(fake))
    assert not explosion.is_life_over()
    fake.now = EXPLOSION_LIFETIME / 2
    assert not explosion.is_life_over()
    fake.now = EXPLOSION_LIFETIME
    assert explosion.is_life_over()
    assert explosion.position == (3, 4)


def test_invader_starts_dead():
    invader = Invader((10, 20), InvaderType.CRAB)
    assert not invader.is_alive
    assert invader.kind is InvaderType.CRAB


def test_invader_move_and_make_alive_resets_position():
    invader = Invader((10, 20), InvaderType.SQUID)
    invader.move(5, 7)
    assert invader.position == (15, 27)
    invader.make_alive()
    assert invader.is_alive
    assert invader.position == (10, 20)


def test_invader_box_size():
    invader = Invader((0, 0), InvaderType.OCTOPUS)
    box = invader.box()
    assert (box.width, box.height) == (Invader.WIDTH, Invader.HEIGHT)


def test_invader_dies_on_collide():
    invader = Invader((0, 0), InvaderType.OCTOPUS)
    invader.make_alive()
    invader.on_collide(invader)
    assert not invader.is_alive


def test_projectile_ids_are_unique_and_increasing():
    a = Projectile((0, 100), ProjectileType.RECTANGLE, Direction.UP)
    b = Projectile((0, 100), ProjectileType.RECTANGLE, Direction.UP)
    assert b.id > a.id


def test_projectile_box_is_narrower_than_sprite():
    projectile = Projectile((0, 100), ProjectileType.KNIFE, Direction.DOWN)
    box = projectile.box()
    assert box.width == Projectile.WIDTH / 1.5
    assert box.height == Projectile.HEIGHT


def test_projectile_moves_in_its_direction():
    down = Projectile((0, 400), ProjectileType.LIGHTNING, Direction.DOWN)
    up = Projectile((0, 400), ProjectileType.RECTANGLE, Direction.UP)
    down.update(0.1)
    up.update(0.1)
    assert down.position[1] > 400
    assert up.position[1] < 400
    assert down.is_active and up.is_active


def test_projectile_destroyed_off_screen():
    up = Projectile((0, 10), ProjectileType.RECTANGLE, Direction.UP)
    up.update(1.0)
    assert not up.is_active
    down = Projectile((0, INVADERS_HEIGHT - 1), ProjectileType.RECTANGLE, Direction.DOWN)
    down.update(1.0)
    assert not down.is_active


def test_projectile_hits_invader():
    invader = Invader((100, 100), InvaderType.CRAB)
    invader.make_alive()
    projectile = Projectile((110, 110), ProjectileType.RECTANGLE, Direction.UP)
    assert projectile.try_collide_with(invader)
    assert not projectile.is_active
    assert not invader.is_alive
"""The playing field: player, invaders, shields, UFO and the shots between them."""

import pygame

from ..resources import resources
from ..rng import Random
from ..timing import Clock
from .animation_renderer import AnimationRenderer, draw_region
from .collidable import INVADERS_WIDTH
from .entities import Direction, Explosion, Invader, Projectile, ProjectileType
from .invader_manager import CollisionResult, InvaderManager
from .player import Player
from .shield import SIZE as SHIELD_SIZE
from .shield import Shield
from .ufo import UFO

EXPLOSION_SIZE = (52, 28)
PLAYER_SHOT_DELAY = 0.5
INVADER_SHOT_DELAY = 0.1
UFO_SCORE = 200

_ANIMATION_DELAY = 0.2
_SHOOT_VOLUME = 0.25


def _pygame_key_state(key):
    return bool(pygame.key.get_pressed()[key])


def _play(sound):
    if sound is not None:
        sound.play()


class World:
    """Runs the interactions between every entity of a game.

    ``clock`` is a function returning the current time in seconds and
    ``holder`` supplies textures and sounds.
    """

    def __init__(self, rng=None, clock=None, holder=None):
        self._rng = rng or Random()
        self._time = clock
        holder = holder or resources()
        textures = holder.textures
        sounds = holder.sound_buffers

        self.projectile_renderer = AnimationRenderer(
            4, 8, Projectile.WIDTH, Projectile.HEIGHT, textures.get("si/projectile")
        )
        self.invaders = InvaderManager(
            self.set_game_over,
            clock,
            AnimationRenderer(12, 8, Invader.WIDTH, Invader.HEIGHT, textures.get("si/invaders")),
        )
        self.invaders.step_sounds = [sounds.get(f"si/fastinvader{i}") for i in range(1, 5)]
        self.invaders.killed_sound = sounds.get("si/invaderkilled")
        self.player = Player(Clock(clock), textures.get("si/player"), sounds.get("si/explosion"))
        self.ufo = UFO(self._rng, clock, textures.get("si/ufo"), sounds.get("si/ufo_lowpitch"))

        self.projectiles = []
        self.explosions = []
        section = INVADERS_WIDTH // 4
        self.shields = [
            Shield(float(i * section + section // 2 - SHIELD_SIZE // 2), self._rng)
            for i in range(4)
        ]

        self.explosion_texture = textures.get("si/explosion")
        self._invader_shot_clock = Clock(clock)
        self._player_shot_clock = Clock(clock)
        self._anim_timer = Clock(clock)
        self._shoot_sound = sounds.get("si/shoot")
        if self._shoot_sound is not None:
            self._shoot_sound.set_volume(_SHOOT_VOLUME)
        self._is_game_over = False

    def input(self, key_state=None):
        """Read the controls; ``key_state(key)`` tells whether a key is down."""
        key_down = key_state or _pygame_key_state
        if self.player.is_alive:
            if self.invaders.are_invaders_alive():
                self.player.input(key_down)
                self._player_projectile_input(key_down)
        else:
            self.player.try_revive()

    def update(self, dt):
        """Advance the world by ``dt`` seconds and return the score gained."""
        score = 0
        if self.invaders.are_invaders_alive():
            self.player.update(dt)
            if self.player.is_alive:
                self.invaders.try_step_invaders()
                self._enemy_projectile_fire()
                result = self._collision_result(dt)
                if result.points:
                    score += result.score
                    self.explosions.extend(
                        Explosion(point, Clock(self._time)) for point in result.points
                    )
                self.ufo.update(dt)
            self.explosions = [e for e in self.explosions if not e.is_life_over()]
        else:
            self.invaders.init_add_invader()
            self.projectiles.clear()
            self.explosions.clear()
        return score

    def is_game_over(self):
        """True once the player is out of lives or the invaders have landed."""
        return self.player.lives == -1 or self._is_game_over

    def set_game_over(self):
        """End the game."""
        self._is_game_over = True

    def _player_projectile_input(self, key_down):
        if key_down(pygame.K_SPACE) and self._player_shot_clock.elapsed() > PLAYER_SHOT_DELAY:
            x, y = self.player.gun_position()
            point = (x - Projectile.WIDTH / 2.0, y - Projectile.HEIGHT)
            self.projectiles.append(Projectile(point, ProjectileType.RECTANGLE, Direction.UP))
            self._player_shot_clock.restart()
            _play(self._shoot_sound)

    def _enemy_projectile_fire(self):
        if (
            self._invader_shot_clock.elapsed() >= INVADER_SHOT_DELAY
            and self._rng.int_in_range(0, 30) == 2
        ):
            point = self.invaders.random_lowest_invader_point(self._rng)
            if point is None:
                return
            kind = ProjectileType(self._rng.int_in_range(1, 2))
            self.projectiles.append(Projectile(point, kind, Direction.DOWN))
            self._invader_shot_clock.restart()

    def _collision_result(self, dt):
        result = self.invaders.try_collide_with_projectiles(self.projectiles)
        self._update_projectiles(dt, result.points)
        for projectile in self.projectiles:
            for shield in self.shields:
                if shield.is_touching(projectile):
                    projectile.destroy()
                    result.points.append(projectile.position)
            if self.ufo.try_collide_with(projectile):
                result.points.append(projectile.position)
                result.score += UFO_SCORE
            for other in self.projectiles:
                if other.id != projectile.id and other.try_collide_with(projectile):
                    result.points.append(projectile.position)
        return result

    def _update_projectiles(self, dt, points):
        kept = []
        for projectile in self.projectiles:
            if not projectile.is_active:
                continue
            if projectile.try_collide_with(self.player):
                points.append(self.player.gun_position())
                self.projectiles = []
                return
            projectile.update(dt)
            kept.append(projectile)
        self.projectiles = kept

    def draw(self, surface):
        """Draw every entity."""
        if self._anim_timer.elapsed() > _ANIMATION_DELAY:
            self.projectile_renderer.next_frame()
            self._anim_timer.restart()

        for shield in self.shields:
            shield.draw(surface)
        for projectile in self.projectiles:
            self.projectile_renderer.render_entity(surface, projectile.kind, projectile.position)
        region = (
            self.explosion_texture.get_rect() if self.explosion_texture is not None else (0, 0, 0, 0)
        )
        for explosion in self.explosions:
            draw_region(surface, self.explosion_texture, region, explosion.position, EXPLOSION_SIZE)

        self.invaders.draw_invaders(surface)
        self.player.draw(surface)
        self.ufo.draw(surface)


__all__ = ["World", "CollisionResult"]
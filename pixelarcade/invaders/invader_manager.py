"""The invader formation: arrival, stepping, shooting points and hits."""

from dataclasses import dataclass, field

from ..resources import resources
from ..timing import Clock
from .animation_renderer import AnimationRenderer
from .collidable import INVADERS_HEIGHT, INVADERS_WIDTH
from .entities import Invader, InvaderType

COLUMNS = 11
ROWS = 5
MAX_INVADERS = COLUMNS * ROWS
STEP_DISTANCE = 10.0
ADD_DELAY = 0.02
INITIAL_STEP_GAP = 0.5

_GAP = 10
_EDGE = 15
_GAME_OVER_LINE = INVADERS_HEIGHT - 150
_ROW_TYPES = (
    InvaderType.SQUID,
    InvaderType.CRAB,
    InvaderType.CRAB,
    InvaderType.OCTOPUS,
    InvaderType.OCTOPUS,
)


@dataclass
class CollisionResult:
    """Score gained and the points where hits happened."""

    score: int = 0
    points: list = field(default_factory=list)


def _play(sound):
    if sound is not None:
        sound.play()


class InvaderManager:
    """Moves, draws and collides the grid of invaders.

    ``on_game_over`` is called when an invader gets too low. ``clock`` is a
    function returning the current time in seconds.
    """

    def __init__(self, on_game_over, clock=None, renderer=None):
        self._on_game_over = on_game_over
        self._step_clock = Clock(clock)
        self._add_clock = Clock(clock)
        if renderer is None:
            renderer = AnimationRenderer(
                12, 8, Invader.WIDTH, Invader.HEIGHT, resources().textures.get("si/invaders")
            )
        self.renderer = renderer
        self.step_gap = INITIAL_STEP_GAP
        self.step_sounds = []
        self.killed_sound = None

        self._invaders = [
            Invader(
                (
                    float(x * Invader.WIDTH + _GAP * x * 3 + Invader.WIDTH),
                    float(y * Invader.HEIGHT + _GAP * y + Invader.HEIGHT * 4),
                ),
                _ROW_TYPES[y],
            )
            for y in range(ROWS)
            for x in range(COLUMNS)
        ]
        self._alive = 0
        self._all_added = False
        self._moving_left = False
        self._move_down = False
        self._init_x = 0
        self._init_y = ROWS - 1
        self._ticks = 0

    @property
    def invaders(self):
        """All invaders, row by row from the top, dead ones included."""
        return tuple(self._invaders)

    @property
    def alive_invaders_count(self):
        """How many invaders are alive."""
        return self._alive

    def try_step_invaders(self):
        """Step the formation sideways, or down at an edge, once the step delay is up."""
        if self._step_clock.elapsed() <= self.step_gap:
            return
        self.renderer.next_frame()
        move_down_next = False
        step = -STEP_DISTANCE if self._moving_left else STEP_DISTANCE
        if self._move_down:
            step = -step
        if self.step_sounds:
            _play(self.step_sounds[self._ticks % len(self.step_sounds)])
        self._ticks += 1

        for invader in self._invaders:
            if not invader.is_alive:
                continue
            invader.move(step, 0.0)
            if self._move_down:
                invader.move(0.0, Invader.HEIGHT / 2.0)
            elif not move_down_next:
                move_down_next = self._test_invader_position(invader)

        if self._move_down:
            self._moving_left = not self._moving_left
        self._move_down = move_down_next
        self._step_clock.restart()

    def draw_invaders(self, surface):
        """Draw every living invader."""
        for invader in self._invaders:
            if invader.is_alive:
                self.renderer.render_entity(surface, invader.kind, invader.position)

    def try_collide_with_projectiles(self, projectiles):
        """Hit invaders with active projectiles and return the score and hit points."""
        result = CollisionResult()
        for projectile in projectiles:
            for invader in self._invaders:
                if not invader.is_alive or not projectile.is_active:
                    continue
                if projectile.try_collide_with(invader):
                    self._alive -= 1
                    _play(self.killed_sound)
                    if self._alive == 0:
                        self._all_added = False
                    result.points.append(invader.position)
                    result.score += (int(invader.kind) + 1) * 100
                    self._update_step_delay()
        return result

    def random_lowest_invader_point(self, rng):
        """Below the lowest living invader of a random column, or None if none live."""
        if self._alive == 0:
            return None
        while True:
            column = rng.int_in_range(0, COLUMNS - 1)
            for row in reversed(range(ROWS)):
                invader = self._invaders[row * COLUMNS + column]
                if invader.is_alive:
                    x, y = invader.position
                    return (x + Invader.WIDTH / 2, y + Invader.HEIGHT + 5)

    def init_add_invader(self):
        """Bring in the next invader, bottom row first, one per short delay."""
        if self._add_clock.elapsed() > ADD_DELAY:
            self._invaders[self._init_y * COLUMNS + self._init_x].make_alive()
            self._alive += 1
            self._init_x += 1
            if self._init_x == COLUMNS:
                self._init_x = 0
                self._init_y -= 1
            self._add_clock.restart()

        if self._alive == MAX_INVADERS:
            self._all_added = True
            self._init_x = 0
            self._init_y = ROWS - 1
            self._update_step_delay()

    def are_invaders_alive(self):
        """True once the whole formation has arrived and until it is wiped out."""
        return self._all_added

    def _update_step_delay(self):
        self.step_gap = self._alive / 90.0

    def _test_invader_position(self, invader):
        x, y = invader.position
        if y > _GAME_OVER_LINE:
            self._on_game_over()
        return (x < _EDGE and self._moving_left) or (
            x + Invader.WIDTH > INVADERS_WIDTH - _EDGE and not self._moving_left
        )
"""The state stack and main loop shared by all games."""

import enum
from abc import ABC, abstractmethod

import pygame

from .resources import resources
from .timing import Clock, FPSCounter

WINDOW_TITLE = "Pixel Arcade"
TICKS_PER_SECOND = 30
FRAMERATE_LIMIT = 60
ICON_PATH = "res/txrs/icon.png"


class StateBase(ABC):
    """One screen of a game, driven by the main loop.

    When ``resize`` is a (width, height) pair the game window is resized.
    """

    def __init__(self, game, name, resize=None):
        self.game = game
        self.name = name
        if resize is not None:
            game.resize_window(*resize)

    def on_open(self):
        """Called when the state becomes the top of the stack again."""

    def handle_event(self, event):
        """Handle one window event."""

    def handle_input(self):
        """Poll real-time input once per frame."""

    def update(self, delta_time):
        """Advance by ``delta_time`` seconds, once per frame."""

    def fixed_update(self, delta_time):
        """Advance at the fixed tick rate."""

    @abstractmethod
    def render(self, surface):
        """Draw the state."""


class ActionType(enum.Enum):
    NONE = enum.auto()
    PUSH = enum.auto()
    CHANGE = enum.auto()
    POP = enum.auto()
    QUIT = enum.auto()


class Game:
    """Owns the window and the state stack and runs the main loop.

    Stack changes requested while a frame runs are applied at its end.
    """

    def __init__(self):
        self._states = []
        self._action = ActionType.NONE
        self._pending = None
        self._window = None
        self._is_open = False
        self.window_size = (1, 1)
        self._counter = FPSCounter()

    @property
    def window(self):
        """The display surface, or None while the game is not running."""
        return self._window

    @property
    def mouse_position(self):
        """Mouse position in window coordinates."""
        if self._window is None:
            return (0, 0)
        return pygame.mouse.get_pos()

    @property
    def states(self):
        """The state stack, bottom first."""
        return tuple(self._states)

    def run(self):
        """Run the main loop until the window closes or no state is left."""
        pygame.init()
        try:
            self._open_window()
            font = self._counter_font()
            ticker = pygame.time.Clock()
            timer = Clock()
            step = 1.0 / TICKS_PER_SECOND
            last_time = 0.0
            lag = 0.0
            while self._is_open and self._states:
                state = self.current_state()

                now = timer.elapsed()
                elapsed = now - last_time
                last_time = now
                lag += elapsed

                state.handle_input()
                state.update(elapsed)
                self._counter.update()

                while lag >= step:
                    lag -= step
                    state.fixed_update(elapsed)

                self._window.fill((0, 0, 0))
                state.render(self._window)
                self._counter.draw(self._window, font)
                pygame.display.flip()
                ticker.tick(FRAMERATE_LIMIT)

                self._handle_events()
                self.update_states()
        finally:
            self._window = None
            self._is_open = False
            pygame.quit()

    def init_game(self, state_factory):
        """Put the first state, built by ``state_factory(game)``, on the stack."""
        self._states.append(state_factory(self))

    def open_state(self, state):
        """Push a state immediately and open it."""
        self._states.append(state)
        self.current_state().on_open()

    def push_state(self, state):
        """Push a state at the end of the frame."""
        self._action = ActionType.PUSH
        self._pending = state

    def change_state(self, state):
        """Replace the current state at the end of the frame."""
        self._action = ActionType.CHANGE
        self._pending = state

    def pop_state(self):
        """Pop the current state at the end of the frame."""
        self._action = ActionType.POP

    def exit_game(self):
        """Drop all states at the end of the frame."""
        self._action = ActionType.QUIT

    def current_state(self):
        """The state on top of the stack."""
        if not self._states:
            raise IndexError("no state on the stack")
        return self._states[-1]

    def update_states(self):
        """Apply the pending stack change."""
        if self._action is ActionType.PUSH:
            self._states.append(self._pending)
            self._pending = None
            self._action = ActionType.NONE
        elif self._action is ActionType.POP:
            self._states.pop()
            if self._states:
                self.current_state().on_open()
            self._action = ActionType.NONE
        elif self._action is ActionType.CHANGE:
            self._states.pop()
            self._states.append(self._pending)
            self._pending = None
            self._action = ActionType.NONE
        elif self._action is ActionType.QUIT:
            self._states.clear()

    def resize_window(self, width, height):
        """Set the window size, recreating the window if it is open."""
        self.window_size = (width, height)
        if self._window is not None:
            self._window = pygame.display.set_mode(self.window_size)

    def _open_window(self):
        self._window = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            pygame.display.set_icon(pygame.image.load(ICON_PATH))
        except (OSError, pygame.error):
            pass
        self._is_open = True

    def _counter_font(self):
        path = resources().fonts.get("arcade")
        return pygame.font.Font(str(path) if path is not None else None, 15)

    def _handle_events(self):
        for event in pygame.event.get():
            if self._states:
                self.current_state().handle_event(event)
            if event.type == pygame.QUIT:
                self._is_open = False
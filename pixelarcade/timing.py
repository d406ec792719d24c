"""Clocks, the frame-rate counter and debounced key presses."""

import time

import pygame

_REFRESH_SECONDS = 0.2


class Clock:
    """Measures time elapsed since it was created or last restarted."""

    def __init__(self, time_source=None):
        self._time_source = time_source or time.perf_counter
        self._start = self._time_source()

    def elapsed(self):
        """Seconds since the last restart."""
        return self._time_source() - self._start

    def restart(self):
        """Reset the clock and return the seconds that had elapsed."""
        now = self._time_source()
        elapsed = now - self._start
        self._start = now
        return elapsed


class FPSCounter:
    """Counts frames and refreshes the frame rate a few times a second."""

    def __init__(self, clock=None):
        self._clock = clock or Clock()
        self._frame_count = 0
        self.fps = 0.0

    def update(self):
        """Record one frame."""
        self._frame_count += 1
        if self._clock.elapsed() > _REFRESH_SECONDS:
            self.fps = self._frame_count / self._clock.restart()
            self._frame_count = 0

    def label(self):
        """The text shown on screen."""
        return f"FPS {int(self.fps)}"

    def draw(self, surface, font):
        """Draw the counter, outlined in black, at the top-left corner."""
        text = self.label()
        outline = font.render(text, True, (0, 0, 0))
        for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2)):
            surface.blit(outline, (2 + dx, 2 + dy))
        surface.blit(font.render(text, True, (255, 255, 255)), (2, 2))


def _pygame_key_state(key):
    return bool(pygame.key.get_pressed()[key])


class ToggleKey:
    """A key that reports a press at most once every fifth of a second."""

    def __init__(self, key, clock=None, key_state=None):
        self.key = key
        self._clock = clock or Clock()
        self._key_state = key_state or _pygame_key_state

    def is_key_pressed(self):
        """True when the key is down and the delay has passed."""
        if self._clock.elapsed() > _REFRESH_SECONDS and self._key_state(self.key):
            self._clock.restart()
            return True
        return False
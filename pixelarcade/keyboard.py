"""Keyboard state tracked from events."""

import pygame


class Keyboard:
    """Holds which keys are down and which key was just released."""

    def __init__(self):
        self._down = set()
        self._recently_released = None

    def update(self, event):
        """Update the state from one event; call for every event."""
        self._recently_released = None
        if event.type == pygame.KEYUP:
            self._recently_released = event.key
            self._down.discard(event.key)
        elif event.type == pygame.KEYDOWN:
            self._down.add(event.key)

    def is_key_down(self, key):
        """True if the key is currently held."""
        return key in self._down

    def key_released(self, key):
        """True if the last event released this key."""
        return self._recently_released == key
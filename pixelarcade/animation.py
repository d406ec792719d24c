"""Frame-based sprite-sheet animation."""

from dataclasses import dataclass

from .timing import Clock


@dataclass(frozen=True)
class Frame:
    """A frame's area in the texture, as (left, top, width, height), and its delay."""

    bounds: tuple
    delay: float


class Animation:
    """Cycles through frames laid out in a single row of a sprite sheet."""

    def __init__(self, frame_width, frame_height, clock=None):
        self.frame_width = frame_width
        self.frame_height = frame_height
        self._clock = clock or Clock()
        self._frames = []
        self._index = 0

    def add_frame(self, index, delay):
        """Add the sheet cell at ``index``, shown for ``delay`` seconds."""
        bounds = (index * self.frame_width, 0, self.frame_width, self.frame_height)
        self._frames.append(Frame(bounds, delay))

    def current_frame(self):
        """Return the bounds of the active frame, advancing when its delay is up."""
        if not self._frames:
            raise IndexError("animation has no frames")
        if self._clock.elapsed() >= self._frames[self._index].delay:
            self._clock.restart()
            self._index = (self._index + 1) % len(self._frames)
        return self._frames[self._index].bounds
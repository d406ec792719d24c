"""The widget interface and the text and rectangle shapes widgets draw."""

from abc import ABC, abstractmethod
from typing import NamedTuple

import pygame

from ..resources import resources

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 255, 0)

_fonts = {}


def font_for(size):
    """The arcade font at the given character size, falling back to pygame's default."""
    if not pygame.font.get_init():
        pygame.font.init()
        _fonts.clear()
    font = _fonts.get(size)
    if font is None:
        path = resources().fonts.get("arcade")
        font = pygame.font.Font(str(path) if path is not None else None, size)
        _fonts[size] = font
    return font


class Bounds(NamedTuple):
    """An axis-aligned area: left, top, width and height."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, point):
        """True if the point lies inside; the right and bottom edges are excluded."""
        x, y = point
        return (
            self.left <= x < self.left + self.width
            and self.top <= y < self.top + self.height
        )


class Widget(ABC):
    """An element of a menu that can be positioned, drawn and clicked."""

    @abstractmethod
    def handle_event(self, event, mouse_pos):
        """React to a window event, given the mouse position."""

    @abstractmethod
    def render(self, surface):
        """Draw the widget."""

    @abstractmethod
    def set_position(self, pos):
        """Move the widget's top-left corner to ``pos``."""

    @property
    @abstractmethod
    def size(self):
        """The (width, height) the widget takes up."""

    @abstractmethod
    def disable(self):
        """Stop the widget reacting to events."""

    @abstractmethod
    def enable(self):
        """Let the widget react to events again."""


class Text:
    """A string drawn in the arcade font, white with a black outline colour."""

    def __init__(self, string="", character_size=25):
        self.string = string
        self.character_size = character_size
        self.position = (0.0, 0.0)
        self.origin = (0.0, 0.0)
        self.fill_color = WHITE
        self.outline_color = BLACK
        self.outline_thickness = 0

    def move(self, dx, dy):
        """Shift the text by an offset."""
        x, y = self.position
        self.position = (x + dx, y + dy)

    def _lines(self):
        return self.string.split("\n") if self.string else []

    def bounds(self):
        """The area the text covers on screen."""
        font = font_for(self.character_size)
        lines = self._lines()
        width = max((font.size(line)[0] for line in lines), default=0)
        height = font.get_linesize() * (len(lines) - 1) + font.get_height() if lines else 0
        x, y = self.position
        ox, oy = self.origin
        return Bounds(x - ox, y - oy, width, height)

    def render(self, surface):
        """Draw the text."""
        font = font_for(self.character_size)
        left, top, _, _ = self.bounds()
        step = font.get_linesize()
        thickness = self.outline_thickness
        for row, line in enumerate(self._lines()):
            if not line:
                continue
            y = top + row * step
            if thickness:
                outline = font.render(line, True, self.outline_color[:3])
                for dx, dy in ((-thickness, 0), (thickness, 0), (0, -thickness), (0, thickness)):
                    surface.blit(outline, (left + dx, y + dy))
            surface.blit(font.render(line, True, self.fill_color[:3]), (left, y))


class Rectangle:
    """A filled, optionally outlined or textured rectangle."""

    def __init__(self, x=0.0, y=0.0, width=0.0, height=0.0):
        self.position = (x, y)
        self.size = (width, height)
        self.fill_color = WHITE
        self.outline_color = WHITE
        self.outline_thickness = 0
        self.texture = None

    def bounds(self):
        """The area covered on screen, outline included."""
        x, y = self.position
        width, height = self.size
        t = self.outline_thickness
        return Bounds(x - t, y - t, width + 2 * t, height + 2 * t)

    def contains(self, point):
        """True if the point lies on the rectangle or its outline."""
        return self.bounds().contains(point)

    def is_rolled_on(self, mouse_pos):
        """True if the mouse is over the rectangle."""
        return self.contains(mouse_pos)

    def is_clicked(self, event, mouse_pos):
        """True if the event is a left-button press over the rectangle."""
        return (
            self.is_rolled_on(mouse_pos)
            and event.type == pygame.MOUSEBUTTONDOWN
            and getattr(event, "button", None) == 1
        )

    def render(self, surface):
        """Draw the rectangle."""
        x, y = self.position
        width, height = self.size
        area = pygame.Rect(round(x), round(y), round(width), round(height))
        if self.texture is not None:
            surface.blit(pygame.transform.scale(self.texture, area.size), area.topleft)
        elif len(self.fill_color) == 4 and self.fill_color[3] < 255:
            layer = pygame.Surface(area.size, pygame.SRCALPHA)
            layer.fill(self.fill_color)
            surface.blit(layer, area.topleft)
        else:
            pygame.draw.rect(surface, self.fill_color[:3], area)
        t = self.outline_thickness
        if t:
            pygame.draw.rect(surface, self.outline_color[:3], area.inflate(2 * t, 2 * t), t)
"""A clickable button with a caption."""

import enum

import pygame

from .widget import BLACK, GREEN, WHITE, Rectangle, Text, Widget


class ButtonSize(enum.Enum):
    SMALL = enum.auto()
    WIDE = enum.auto()


_DIMENSIONS = {
    ButtonSize.WIDE: (256, 64),
    ButtonSize.SMALL: (128, 64),
}


class Button(Widget):
    """Calls ``on_click`` when the left mouse button is released over it."""

    def __init__(self, kind=ButtonSize.WIDE, text="", on_click=None):
        self.rect = Rectangle()
        self.rect.outline_thickness = 1
        self.rect.outline_color = GREEN
        self.rect.fill_color = BLACK
        self.rect.size = _DIMENSIONS[kind]
        self.caption = Text()
        self.on_click = on_click or (lambda: None)
        self.position = (0.0, 0.0)
        self.is_disabled = False
        self.text = text

    @property
    def text(self):
        """The caption shown on the button."""
        return self.caption.string

    @text.setter
    def text(self, value):
        self.caption.string = value
        self._update_text()

    @property
    def texture(self):
        """Image drawn as the button's background, if any."""
        return self.rect.texture

    @texture.setter
    def texture(self, image):
        self.rect.texture = image

    def handle_event(self, event, mouse_pos):
        if self.is_disabled:
            return
        if (
            event.type == pygame.MOUSEBUTTONUP
            and getattr(event, "button", None) == 1
            and self.rect.contains(mouse_pos)
        ):
            self.on_click()

    def render(self, surface):
        self.rect.render(surface)
        self.caption.render(surface)

    def set_position(self, pos):
        self.position = tuple(pos)
        self.rect.position = self.position
        self._update_text()

    def _update_text(self):
        text_bounds = self.caption.bounds()
        self.caption.origin = (text_bounds.width / 2, text_bounds.height / 2)
        rect_bounds = self.rect.bounds()
        x, y = self.position
        self.caption.position = (x + rect_bounds.width / 2, y + rect_bounds.height / 2.5)

    @property
    def size(self):
        return self.rect.size

    def disable(self):
        self.caption.fill_color = (100, 100, 100)
        self.rect.fill_color = (50, 50, 50)
        self.is_disabled = True

    def enable(self):
        self.caption.fill_color = WHITE
        self.rect.fill_color = BLACK
        self.is_disabled = False


def make_button():
    """A new wide button."""
    return Button()
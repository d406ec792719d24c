"""A text entry box editing a shared string."""

from dataclasses import dataclass

import pygame

from .widget import BLACK, WHITE, Rectangle, Text, Widget

_IDLE_COLOR = (52, 152, 219)
_ACTIVE_COLOR = (82, 132, 239)
_BACKSPACE = 8


@dataclass
class TextVar:
    """A string that a text box edits and other code reads."""

    value: str = ""

    def __str__(self):
        return self.value


def is_valid_character(key_code):
    """True for digits, ASCII letters, space and dot."""
    return (
        48 <= key_code <= 57
        or 65 <= key_code <= 90
        or 97 <= key_code <= 122
        or key_code == 32
        or key_code == 46
    )


def is_backspace(key_code):
    """True for the backspace character."""
    return key_code == _BACKSPACE


class TextBox(Widget):
    """Clicking the box activates it; typing then edits ``variable.value``."""

    def __init__(self, variable, label=""):
        self.variable = variable
        self.position = (0.0, 0.0)
        self.is_active = False
        self.is_disabled = False
        self._text = Text(variable.value)
        self._label = Text(label, 15)
        self._rect = Rectangle()
        self._rect.fill_color = _IDLE_COLOR
        self._rect.size = (256, 64)

    @property
    def label(self):
        """The caption above the entry area."""
        return self._label.string

    @label.setter
    def label(self, value):
        self._label.string = value

    @property
    def texture(self):
        """Image drawn as the box background, if any."""
        return self._rect.texture

    @texture.setter
    def texture(self, image):
        self._rect.texture = image

    def handle_event(self, event, mouse_pos):
        self._handle_click(event, mouse_pos)
        self._handle_text_input(event)

    def _handle_click(self, event, mouse_pos):
        if self.is_disabled:
            return
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == 1:
            self.is_active = self._rect.contains(mouse_pos)

    def _handle_text_input(self, event):
        if self.is_disabled or not self.is_active:
            return
        if event.type == pygame.TEXTINPUT:
            codes = [ord(char) & 0xFF for char in event.text]
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
            codes = [_BACKSPACE]
        else:
            return
        for code in codes:
            if is_valid_character(code):
                if self._text.bounds().width + 30 <= self._rect.bounds().width:
                    self.variable.value += chr(code)
            elif is_backspace(code):
                self.variable.value = self.variable.value[:-1]
            self._text.string = self.variable.value

    def render(self, surface):
        self._rect.fill_color = _ACTIVE_COLOR if self.is_active else _IDLE_COLOR
        self._rect.render(surface)
        self._label.render(surface)
        self._text.render(surface)

    def set_position(self, pos):
        self.position = tuple(pos)
        x, y = self.position
        self._rect.position = self.position
        rect_height = self._rect.bounds().height
        self._label.position = (x, y + self._label.bounds().height - rect_height / 2)
        self._text.position = (x + 5, y + rect_height / 2.5)

    @property
    def size(self):
        width, height = self._rect.size
        return (width, height + self._label.bounds().height)

    def disable(self):
        self._text.fill_color = (100, 100, 100)
        self._rect.fill_color = (50, 50, 50)
        self.is_disabled = True

    def enable(self):
        self._text.fill_color = WHITE
        self._rect.fill_color = BLACK
        self.is_disabled = False


def make_text_box(variable):
    """A new text box editing ``variable``."""
    return TextBox(variable)
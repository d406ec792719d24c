"""A line of static text in a menu."""

from .widget import Text, Widget


class Label(Widget):
    """Static text; ignores events."""

    def __init__(self, text=""):
        self.caption = Text(text, 30)
        self.position = (0.0, 0.0)

    @property
    def text(self):
        """The label's text."""
        return self.caption.string

    @text.setter
    def text(self, value):
        self.caption.string = value

    def handle_event(self, event, mouse_pos):
        """Labels do not react to events."""

    def render(self, surface):
        self.caption.render(surface)

    def set_position(self, pos):
        self.position = tuple(pos)
        x, y = self.position
        self.caption.position = (x, y + self.caption.bounds().height - 32)

    @property
    def size(self):
        bounds = self.caption.bounds()
        return (bounds.width, bounds.height + 5)

    def disable(self):
        """Labels have no disabled look."""

    def enable(self):
        """Labels have no disabled look."""


def make_label():
    """A new empty label."""
    return Label()
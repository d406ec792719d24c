"""A menu whose widgets are stacked vertically."""

from .widget import BLACK, GREEN, Rectangle, Text

_GAP = 25


class StackMenu:
    """Widgets added to the menu are centred on ``position`` and stacked downwards."""

    def __init__(self, position, width=300):
        x, y = position
        self.base_position = (x, y)
        self._base_size = (width, 20)
        self._widgets = []

        self.background = Rectangle(x - width / 2, y - 30, *self._base_size)
        self.background.outline_thickness = 2
        self.background.outline_color = GREEN
        self.background.fill_color = (100, 100, 100, 230)

        self.title = Text("", 30)
        self.title.position = (x, y - 35)
        self.title.outline_color = BLACK
        self.title.outline_thickness = 1

    @classmethod
    def centered(cls, window_width, base_y, width=300):
        """A menu centred horizontally in a window of the given width."""
        menu = cls((window_width / 2, base_y), width)
        menu.title.position = (0, base_y - 35)
        return menu

    @property
    def widgets(self):
        """The widgets, top first."""
        return tuple(self._widgets)

    def add_widget(self, widget):
        """Place a widget below the previous ones and return it."""
        x, y = self.base_position
        width, _ = widget.size
        widget.set_position((x - width / 2, y))
        _, height = widget.size
        self._grow(height + _GAP)
        self._widgets.append(widget)
        return widget

    def set_title(self, title):
        """Set the title, centred over the menu background."""
        self.title.string = title
        bg_x, _ = self.background.position
        bg_width, _ = self.background.size
        bounds = self.title.bounds()
        self.title.position = (bg_x + bg_width / 2 - bounds.width / 2, self.title.position[1])
        self._grow(bounds.height)

    def _grow(self, amount):
        x, y = self.base_position
        self.base_position = (x, y + amount)
        width, height = self._base_size
        self._base_size = (width, height + amount)
        self.background.size = self._base_size

    def handle_event(self, event, mouse_pos):
        """Pass an event to every widget."""
        for widget in self._widgets:
            widget.handle_event(event, mouse_pos)

    def render(self, surface):
        """Draw the background, title and widgets."""
        self.background.render(surface)
        self.title.render(surface)
        for widget in self._widgets:
            widget.render(surface)
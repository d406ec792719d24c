"""The space invaders title screen."""

import pygame

from ..game import StateBase
from ..gui.button import Button
from ..gui.stack_menu import StackMenu
from ..gui.widget import Rectangle
from ..resources import resources
from .collidable import INVADERS_HEIGHT, INVADERS_WIDTH
from .highscores import StateHighscores
from .playing import StatePlaying
from .starry_background import StarryBackground


def _mouse_pos(event):
    pos = getattr(event, "pos", None)
    if pos is not None:
        return pos
    try:
        return pygame.mouse.get_pos()
    except pygame.error:
        return (0, 0)


class StateMainMenu(StateBase):
    """Offers to play, view the high scores or leave."""

    def __init__(self, game):
        super().__init__(game, "Main Menu", (INVADERS_WIDTH, INVADERS_HEIGHT))
        self._game = game
        self.menu = StackMenu.centered(INVADERS_WIDTH, INVADERS_HEIGHT // 2 - 100)
        self.banner = Rectangle(0, 0, INVADERS_WIDTH, 200)
        self.banner.texture = resources().textures.get("si/logo")
        self.background = StarryBackground()

        self.menu.add_widget(Button(text="Play game", on_click=self._play))
        self.menu.add_widget(Button(text="Highscores", on_click=self._highscores))
        self.menu.add_widget(Button(text="Exit game", on_click=game.pop_state))
        self.menu.set_title("Choose Action")

    def _play(self):
        self._game.push_state(StatePlaying(self._game))

    def _highscores(self):
        self._game.push_state(StateHighscores(self._game))

    def handle_event(self, event):
        self.menu.handle_event(event, _mouse_pos(event))

    def update(self, delta_time):
        self.background.update(delta_time)

    def render(self, surface):
        self.background.draw(surface)
        self.menu.render(surface)
        self.banner.render(surface)
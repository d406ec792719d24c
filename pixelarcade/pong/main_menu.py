"""The pong title screen with its lobby menus."""

import pygame

from ..game import StateBase
from ..gui.button import Button
from ..gui.stack_menu import StackMenu
from ..gui.textbox import TextBox, TextVar
from ..gui.widget import Rectangle
from ..resources import resources
from .lobby import StateLobby

WIDTH = 800
HEIGHT = 600
DEFAULT_JOIN_IP = "192.168.0.19"


def _mouse_pos(event):
    pos = getattr(event, "pos", None)
    if pos is not None:
        return pos
    try:
        return pygame.mouse.get_pos()
    except pygame.error:
        return (0, 0)


class PongStateMainMenu(StateBase):
    """Lets the player host a lobby, join one or leave."""

    def __init__(self, game):
        super().__init__(game, "Main Menu", (WIDTH, HEIGHT))
        self._game = game
        self.join_ip = TextVar(DEFAULT_JOIN_IP)
        self.name = TextVar()

        self.main_menu = StackMenu.centered(WIDTH, HEIGHT // 2 - 100)
        self.join_menu = StackMenu.centered(WIDTH, HEIGHT // 2 - 100)
        self.create_lobby_menu = StackMenu.centered(WIDTH, HEIGHT // 2 - 100)
        self.active_menu = self.main_menu

        self.banner = Rectangle(0, 0, WIDTH, 200)
        self.banner.texture = resources().textures.get("pong/logo")

        self._init_main_menu()
        self._init_create_lobby_menu()
        self._init_join_menu()

    def _show(self, menu):
        self.active_menu = menu

    def _init_main_menu(self):
        menu = self.main_menu
        menu.add_widget(Button(text="Play Vs Computer"))
        menu.add_widget(Button(text="Create Lobby", on_click=lambda: self._show(self.create_lobby_menu)))
        menu.add_widget(Button(text="Join Lobby", on_click=lambda: self._show(self.join_menu)))
        menu.add_widget(Button(text="Exit game", on_click=self._game.pop_state))
        menu.set_title("Choose Action")

    def _init_create_lobby_menu(self):
        menu = self.create_lobby_menu
        menu.set_title("Create Lobby")
        menu.add_widget(TextBox(self.name, "Enter your name"))
        menu.add_widget(Button(text="Start Lobby", on_click=self._start_lobby))
        menu.add_widget(Button(text="Back", on_click=lambda: self._show(self.main_menu)))

    def _init_join_menu(self):
        menu = self.join_menu
        menu.set_title("")
        menu.add_widget(TextBox(self.name, "Enter your name"))
        menu.add_widget(TextBox(self.join_ip, "Enter host IP Address"))
        menu.add_widget(Button(text="Join Lobby", on_click=self._join_lobby))
        menu.add_widget(Button(text="Back", on_click=lambda: self._show(self.main_menu)))

    def _start_lobby(self):
        if not self.name.value:
            self.name.value = "Host"
        self._game.push_state(StateLobby(self._game, self.name.value))

    def _join_lobby(self):
        if not self.name.value:
            self.name.value = "Guest"
        self._game.push_state(StateLobby(self._game, self.name.value, self.join_ip.value))

    def handle_event(self, event):
        self.active_menu.handle_event(event, _mouse_pos(event))

    def update(self, delta_time):
        """Nothing changes over time."""

    def render(self, surface):
        self.active_menu.render(surface)
        self.banner.render(surface)
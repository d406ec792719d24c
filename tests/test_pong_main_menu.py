import pygame
import pytest

from pixelarcade.pong.lobby import StateLobby
from pixelarcade.pong.main_menu import PongStateMainMenu


class FakeGame:
    def __init__(self):
        self.pushed = []
        self.changed = []
        self.pops = 0
        self.resized = []

    def push_state(self, state):
        self.pushed.append(state)

    def change_state(self, state):
        self.changed.append(state)

    def pop_state(self):
        self.pops += 1

    def exit_game(self):
        pass

    def resize_window(self, width, height):
        self.resized.append((width, height))


def click(state, widget):
    x, y = widget.rect.position
    state.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(x + 5, y + 5)))


def find_button(menu, text):
    return next(w for w in menu.widgets if getattr(w, "text", None) == text)


@pytest.fixture
def game():
    return FakeGame()


@pytest.fixture
def menu(game):
    return PongStateMainMenu(game)


def test_window_is_resized_and_main_menu_active(menu, game):
    assert game.resized == [(800, 600)]
    assert menu.active_menu is menu.main_menu
    assert menu.main_menu.title.string == "Choose Action"
    assert menu.join_ip.value == "192.168.0.19"


def test_main_menu_buttons_in_order(menu):
    texts = [w.text for w in menu.main_menu.widgets]
    assert texts == ["Play Vs Computer", "Create Lobby", "Join Lobby", "Exit game"]


def test_create_lobby_and_back(menu):
    click(menu, find_button(menu.main_menu, "Create Lobby"))
    assert menu.active_menu is menu.create_lobby_menu
    click(menu, find_button(menu.create_lobby_menu, "Back"))
    assert menu.active_menu is menu.main_menu


def test_join_lobby_with_default_name(menu, game):
    click(menu, find_button(menu.main_menu, "Join Lobby"))
    assert menu.active_menu is menu.join_menu
    click(menu, find_button(menu.join_menu, "Join Lobby"))
    assert menu.name.value == "Guest"
    assert len(game.pushed) == 1
    lobby = game.pushed[0]
    assert isinstance(lobby, StateLobby)
    assert lobby.is_host is False
    assert lobby.name == "Guest"
    assert lobby.host_ip == "192.168.0.19"


def test_join_lobby_keeps_given_name_and_ip(menu, game):
    menu.name.value = "Zed"
    menu.join_ip.value = "10.0.0.5"
    menu.active_menu = menu.join_menu
    click(menu, find_button(menu.join_menu, "Join Lobby"))
    assert menu.name.value == "Zed"
    assert menu.join_ip.value == "10.0.0.5"
    assert len(game.pushed) == 1
    lobby = game.pushed[0]
    assert lobby.name == "Zed"
    assert lobby.host_ip == "10.0.0.5"


def test_exit_pops_state(menu, game):
    click(menu, find_button(menu.main_menu, "Exit game"))
    assert menu.active_menu is menu.main_menu
    assert game.pops == 1
    assert game.pushed == []
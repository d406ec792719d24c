import socket
import time

import pygame
import pytest

from pixelarcade.pong.lobby import StateError, StateLobby
from pixelarcade.pong.net import Packet, PacketReceiver, ToClientCommand, ToServerCommand, make_packet


class FakeGame:
    def __init__(self):
        self.pushed = []
        self.changed = []
        self.pops = 0

    def push_state(self, state):
        self.pushed.append(state)

    def change_state(self, state):
        self.changed.append(state)

    def pop_state(self):
        self.pops += 1

    def exit_game(self):
        pass

    def resize_window(self, width, height):
        pass


def click(state, widget):
    x, y = widget.rect.position
    state.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(x + 5, y + 5)))


def find_button(menu, text):
    return next(w for w in menu.widgets if getattr(w, "text", None) == text)


def read_packets(sock, count, timeout=2.0):
    sock.settimeout(0.05)
    receiver = PacketReceiver()
    found = []
    deadline = time.monotonic() + timeout
    while len(found) < count:
        assert time.monotonic() < deadline, "packets did not arrive"
        try:
            data = sock.recv(4096)
        except socket.timeout:
            continue
        receiver.feed(data)
        found.extend(receiver.packets())
    return found


@pytest.fixture
def game():
    return FakeGame()


@pytest.fixture
def lobby(game):
    return StateLobby(game, "Ann", "127.0.0.1")


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


def test_client_lobby_setup(lobby):
    assert lobby.is_host is False
    assert lobby.host_ip == "127.0.0.1"
    assert lobby.main_menu.title.string == "Waiting for host to start game..."
    assert lobby.player_list.title.string == "Player List"
    assert len(lobby.player_name_labels) == 4
    assert lobby.server is None


def test_player_list_fills_labels(lobby):
    packet = Packet().write_u8(2).write_u8(0).write_string("Bob").write_u8(2).write_string("Cy")
    lobby.handle_packet(ToClientCommand.PLAYER_LIST, packet)
    assert lobby.peer_connections == 2
    assert [label.text for label in lobby.player_name_labels] == ["Bob", "", "Cy", ""]


def test_connect_and_disconnect_update_labels(lobby):
    lobby.handle_packet(ToClientCommand.PLAYER_CONNECTED, Packet().write_u8(1).write_string("Dee"))
    assert lobby.peer_connections == 1
    assert lobby.player_name_labels[1].text == "Dee"
    lobby.handle_packet(ToClientCommand.PLAYER_DISCONNECTED, Packet().write_u8(1))
    assert lobby.peer_connections == 0
    assert lobby.player_name_labels[1].text == ""


def test_host_disconnect_shows_error(lobby, game):
    lobby.handle_packet(ToClientCommand.DISCONNECT, Packet())
    assert lobby.socket is None
    assert lobby.peer_connections == 0
    assert len(game.changed) == 1
    error = game.changed[0]
    assert isinstance(error, StateError)
    assert error.menu.title.string == "Host has disconnected."


def test_player_id_is_answered_with_name(lobby, pair):
    a, b = pair
    lobby.socket = a
    lobby.handle_packet(ToClientCommand.PLAYER_ID, Packet().write_u8(3))
    assert lobby.player_id == 3
    (reply,) = read_packets(b, 1)
    assert reply.read_u8() == ToServerCommand.NAME
    assert reply.read_u8() == 3
    assert reply.read_string() == "Ann"


def test_update_reads_packets_from_socket(lobby, pair):
    a, b = pair
    a.setblocking(False)
    lobby.socket = a
    lobby.is_connected = True
    b.sendall(make_packet(ToClientCommand.PLAYER_CONNECTED).write_u8(2).write_string("Eve").encode())
    deadline = time.monotonic() + 2
    while lobby.player_name_labels[2].text != "Eve" and time.monotonic() < deadline:
        lobby.update(0.0)
    assert lobby.player_name_labels[2].text == "Eve"
    assert lobby.peer_connections == 1


def test_back_sends_disconnect_and_leaves(lobby, game, pair):
    a, b = pair
    lobby.socket = a
    lobby.handle_packet(ToClientCommand.PLAYER_ID, Packet().write_u8(2))
    click(lobby, find_button(lobby.main_menu, "Back"))
    assert game.pops == 1
    assert lobby.socket is None
    name_packet, leave = read_packets(b, 2)
    assert name_packet.read_u8() == ToServerCommand.NAME
    assert leave.read_u8() == ToServerCommand.DISCONNECT
    assert leave.read_u8() == 2


def test_error_state_exit_pops(game):
    error = StateError(game, "Failed to connect to host.")
    assert error.menu.title.string == "Failed to connect to host."
    click(error, find_button(error.menu, "Exit"))
    assert game.pops == 1
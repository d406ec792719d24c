"""The pong lobby, where players gather before a game, and the error screen."""

import logging
import socket

import pygame

from ..game import StateBase
from ..gui.button import Button
from ..gui.label import Label
from ..gui.stack_menu import StackMenu
from .net import MAX_CONNECTS, PORT, PacketError, PacketReceiver, ToClientCommand, ToServerCommand, make_packet
from .server import PongServer

WIDTH = 800
HEIGHT = 600
LOCALHOST = "127.0.0.1"
CONNECT_TIMEOUT = 5.0

log = logging.getLogger(__name__)


def _mouse_pos(event):
    pos = getattr(event, "pos", None)
    if pos is not None:
        return pos
    try:
        return pygame.mouse.get_pos()
    except pygame.error:
        return (0, 0)


class StateError(StateBase):
    """Shows a message with a button leading back."""

    def __init__(self, game, message):
        super().__init__(game, "State Error", None)
        self._game = game
        self.menu = StackMenu.centered(WIDTH, HEIGHT // 2 - 100, 400)
        self.menu.add_widget(Button(text="Exit", on_click=game.pop_state))
        self.menu.set_title(message)

    def handle_event(self, event):
        self.menu.handle_event(event, _mouse_pos(event))

    def update(self, delta_time):
        """Nothing changes over time."""

    def render(self, surface):
        self.menu.render(surface)


class StateLobby(StateBase):
    """Lists the players in a lobby.

    Without ``host_ip`` this player hosts: a server is started and the
    player joins it on this machine. With ``host_ip`` the player joins
    the lobby hosted there.
    """

    def __init__(self, game, name, host_ip=None):
        super().__init__(game, "State Lobby", None)
        self._game = game
        self.is_host = host_ip is None
        self.name = name
        self.host_ip = LOCALHOST if self.is_host else host_ip
        self.socket = None
        self.is_connected = False
        self.player_id = 0
        self.peer_connections = 0
        self.server = None
        self.start_button = None
        self._receiver = PacketReceiver()

        self.main_menu = StackMenu.centered(WIDTH, HEIGHT // 2 - 100, 400)
        self.player_list = StackMenu((128, 64), 250)
        if self.is_host:
            self._init_host_menu()
        else:
            self._init_client_menu()
        self.player_name_labels = self._init_player_list()

    def _init_host_menu(self):
        start = Button(text="Start")
        start.disable()
        self.server = PongServer()
        try:
            self.server.start(PORT)
        except OSError:
            self._game.pop_state()
        self.main_menu.add_widget(Button(text="Back", on_click=self._leave_as_host))
        self.start_button = self.main_menu.add_widget(start)
        self.main_menu.set_title("Choose Action")

    def _init_client_menu(self):
        self.main_menu.add_widget(Button(text="Back", on_click=self._leave_as_client))
        self.main_menu.set_title("Waiting for host to start game...")

    def _init_player_list(self):
        self.player_list.set_title("Player List")
        return [self.player_list.add_widget(Label()) for _ in range(MAX_CONNECTS)]

    def _leave_as_host(self):
        self.server.stop()
        self.server.close()
        self._close_socket()
        self._game.pop_state()

    def _leave_as_client(self):
        if self.socket is not None:
            self._send(make_packet(ToServerCommand.DISCONNECT).write_u8(self.player_id))
        self._game.pop_state()
        self._close_socket()

    def _close_socket(self):
        if self.socket is not None:
            self.socket.close()
            self.socket = None

    def _send(self, packet):
        if self.socket is None:
            return
        try:
            self.socket.sendall(packet.encode())
        except OSError:
            pass

    def _connect(self):
        try:
            sock = socket.create_connection((self.host_ip, PORT), timeout=CONNECT_TIMEOUT)
        except OSError:
            self._game.change_state(StateError(self._game, "Failed to connect to host."))
            return
        sock.setblocking(False)
        self.socket = sock
        self.is_connected = True

    def _set_label(self, player_id, text):
        if player_id < len(self.player_name_labels):
            self.player_name_labels[player_id].text = text

    def _check_host_start_button(self):
        if self.is_host and self.start_button is not None:
            if self.peer_connections > 1:
                self.start_button.enable()
            else:
                self.start_button.disable()

    def handle_event(self, event):
        self.main_menu.handle_event(event, _mouse_pos(event))

    def handle_packet(self, command, packet):
        """React to a packet from the server; ``packet`` is read past its command byte."""
        if command is ToClientCommand.DISCONNECT:
            self._game.change_state(StateError(self._game, "Host has disconnected."))
            self._close_socket()
        elif command is ToClientCommand.PLAYER_ID:
            self.player_id = packet.read_u8()
            self._send(make_packet(ToServerCommand.NAME).write_u8(self.player_id).write_string(self.name))
        elif command is ToClientCommand.PLAYER_CONNECTED:
            self.peer_connections += 1
            self._check_host_start_button()
            player_id = packet.read_u8()
            self._set_label(player_id, packet.read_string())
        elif command is ToClientCommand.PLAYER_DISCONNECTED:
            self.peer_connections -= 1
            self._check_host_start_button()
            self._set_label(packet.read_u8(), "")
        elif command is ToClientCommand.PLAYER_LIST:
            count = packet.read_u8()
            self.peer_connections += count
            for _ in range(count):
                player_id = packet.read_u8()
                name = packet.read_string()
                log.info("Player list entry %d: %s", player_id, name)
                self._set_label(player_id, name)
            log.info("Got player list of %d", count)

    def update(self, delta_time):
        if not self.is_connected:
            self._connect()
        if self.is_host and self.server is not None:
            self.server.update()
        if self.is_connected and self.socket is not None:
            self._receive()

    def _receive(self):
        try:
            data = self.socket.recv(4096)
        except OSError:
            return
        if not data:
            return
        self._receiver.feed(data)
        for packet in self._receiver.packets():
            try:
                command = ToClientCommand(packet.read_u8())
                self.handle_packet(command, packet)
            except (ValueError, PacketError):
                continue
            if self.socket is None:
                return

    def render(self, surface):
        self.player_list.render(surface)
        self.main_menu.render(surface)
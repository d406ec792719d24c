"""The lobby server that a hosting player runs."""

import enum
import logging
import socket
from dataclasses import dataclass, field

from .net import MAX_CONNECTS, PacketError, PacketReceiver, ToClientCommand, ToServerCommand, make_packet

log = logging.getLogger(__name__)


@dataclass
class Connection:
    """One player slot on the server."""

    id: int = 0
    socket: object = None
    is_connected: bool = False
    name: str = ""
    receiver: PacketReceiver = field(default_factory=PacketReceiver)


class ServerState(enum.Enum):
    LOBBY = enum.auto()
    IN_GAME = enum.auto()


def _send(sock, packet):
    try:
        sock.sendall(packet.encode())
    except OSError:
        pass


class PongServer:
    """Accepts up to four players and relays who joins and leaves."""

    def __init__(self):
        self.state = ServerState.LOBBY
        self.connections = [Connection(id=index) for index in range(MAX_CONNECTS)]
        self.current_connections = 0
        self._listener = None

    @property
    def port(self):
        """The port the server listens on, once started."""
        if self._listener is None:
            return None
        return self._listener.getsockname()[1]

    def start(self, port):
        """Listen for players on ``port``; raises OSError if that is impossible."""
        if self._listener is not None:
            self._listener.close()
            self._listener = None
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind(("", port))
            listener.listen()
            listener.setblocking(False)
        except OSError:
            listener.close()
            raise
        self._listener = listener

    def stop(self):
        """Tell every connected player that the host is leaving."""
        self._broadcast(make_packet(ToClientCommand.DISCONNECT))

    def close(self):
        """Close every socket."""
        for connection in self.connections:
            if connection.socket is not None:
                connection.socket.close()
                connection.socket = None
            connection.is_connected = False
        if self._listener is not None:
            self._listener.close()
            self._listener = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def update(self):
        """Accept new players and handle what connected players sent."""
        for connection in self.connections:
            if connection.is_connected:
                self._receive(connection)
            else:
                self._try_accept(connection)

    def _try_accept(self, connection):
        if self._listener is None:
            return
        try:
            sock, _ = self._listener.accept()
        except OSError:
            return
        sock.setblocking(False)

        player_list = make_packet(ToClientCommand.PLAYER_LIST).write_u8(self.current_connections)
        for player in self.connections:
            if player.is_connected:
                player_list.write_u8(player.id).write_string(player.name)
        _send(sock, player_list)

        self.current_connections += 1
        connection.socket = sock
        connection.receiver = PacketReceiver()
        connection.is_connected = True
        _send(sock, make_packet(ToClientCommand.PLAYER_ID).write_u8(connection.id))

    def _receive(self, connection):
        try:
            data = connection.socket.recv(4096)
        except OSError:
            return
        if not data:
            return
        connection.receiver.feed(data)
        for packet in connection.receiver.packets():
            try:
                command = ToServerCommand(packet.read_u8())
                self._handle_packet(command, packet)
            except (ValueError, PacketError):
                continue

    def _broadcast(self, packet):
        for connection in self.connections:
            if connection.is_connected:
                _send(connection.socket, packet)

    def _handle_packet(self, command, packet):
        if command is ToServerCommand.DISCONNECT:
            player_id = packet.read_u8()
            if player_id >= len(self.connections):
                return
            connection = self.connections[player_id]
            connection.is_connected = False
            if connection.socket is not None:
                connection.socket.close()
                connection.socket = None
            self._broadcast(make_packet(ToClientCommand.PLAYER_DISCONNECTED).write_u8(player_id))
            self.current_connections -= 1
        elif command is ToServerCommand.NAME:
            player_id = packet.read_u8()
            name = packet.read_string()
            if player_id >= len(self.connections):
                return
            self.connections[player_id].name = name
            log.info("Server got name %s %d", name, player_id)
            self._broadcast(
                make_packet(ToClientCommand.PLAYER_CONNECTED).write_u8(player_id).write_string(name)
            )
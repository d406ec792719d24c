"""Wire format and commands shared by the pong server and its clients."""

import enum
import struct
from dataclasses import dataclass, field

from ..gui.widget import Rectangle

PORT = 52324
MAX_CONNECTS = 4

_LENGTH = struct.Struct(">I")


class PacketError(ValueError):
    """Raised when reading past the end of a packet."""


class ToServerCommand(enum.IntEnum):
    DISCONNECT = 0
    NAME = 1


class ToClientCommand(enum.IntEnum):
    DISCONNECT = 0
    # u8: player id
    PLAYER_ID = 1
    # u8: player id, string: name
    PLAYER_CONNECTED = 2
    # u8: player id
    PLAYER_DISCONNECTED = 3
    # u8: count, then count pairs of (u8 id, string name)
    PLAYER_LIST = 4


class Packet:
    """A message of unsigned bytes and length-prefixed strings.

    On the wire a packet is its length as a big-endian 32-bit number
    followed by its data.
    """

    def __init__(self, data=b""):
        self._data = bytearray(data)
        self._pos = 0

    @property
    def data(self):
        """The packet's payload."""
        return bytes(self._data)

    @property
    def at_end(self):
        """True when everything in the packet has been read."""
        return self._pos >= len(self._data)

    def __len__(self):
        return len(self._data)

    def write_u8(self, value):
        """Append one unsigned byte; returns the packet for chaining."""
        value = int(value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"not an unsigned byte: {value}")
        self._data.append(value)
        return self

    def write_string(self, value):
        """Append a string as its byte length and UTF-8 bytes."""
        encoded = value.encode("utf-8")
        self._data += _LENGTH.pack(len(encoded))
        self._data += encoded
        return self

    def _take(self, count):
        end = self._pos + count
        if end > len(self._data):
            raise PacketError("read past the end of the packet")
        chunk = bytes(self._data[self._pos:end])
        self._pos = end
        return chunk

    def read_u8(self):
        """Read one unsigned byte."""
        return self._take(1)[0]

    def read_string(self):
        """Read a length-prefixed string."""
        (length,) = _LENGTH.unpack(self._take(_LENGTH.size))
        return self._take(length).decode("utf-8", errors="replace")

    def encode(self):
        """The bytes sent over a stream for this packet."""
        return _LENGTH.pack(len(self._data)) + bytes(self._data)


class PacketReceiver:
    """Collects stream bytes and splits them into whole packets."""

    def __init__(self):
        self._buffer = bytearray()

    def feed(self, data):
        """Add bytes received from the stream."""
        self._buffer += data

    def packets(self):
        """Remove and return every complete packet received so far."""
        found = []
        while len(self._buffer) >= _LENGTH.size:
            (length,) = _LENGTH.unpack_from(self._buffer)
            end = _LENGTH.size + length
            if len(self._buffer) < end:
                break
            found.append(Packet(self._buffer[_LENGTH.size:end]))
            del self._buffer[:end]
        return found


def make_packet(command):
    """A new packet starting with the command byte."""
    return Packet().write_u8(int(command))


class PlayerDirection(enum.Enum):
    UP_DOWN = enum.auto()
    LEFT_RIGHT = enum.auto()


@dataclass
class PongPlayer:
    """A client-side player: the local one, a peer or a computer player."""

    name: str = ""
    score: int = 0
    is_connected: bool = False
    paddle: Rectangle = field(default_factory=Rectangle)
    direction: PlayerDirection = PlayerDirection.UP_DOWN


def client_player_list():
    """One fresh player for every possible connection."""
    return [PongPlayer() for _ in range(MAX_CONNECTS)]
"""Packet kinds exchanged between client and server."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

_ID_SIZE = 4
_BYTE_SIZE = 1
_HEADER_SIZE = _ID_SIZE + _BYTE_SIZE + _BYTE_SIZE
_TERRAIN_ENTRY_SIZE = _BYTE_SIZE + 4 * _ID_SIZE
_PLAYER_ENTRY_SIZE = _BYTE_SIZE + 5 * _ID_SIZE


class PacketFamily(enum.IntEnum):
    """What a packet is about."""

    NONE = 0
    CONNECT = 1
    DISCONNECT = 2
    TERRAIN = 3
    PLAYER = 4


class PacketAction(enum.IntEnum):
    """What a packet asks for or announces."""

    NONE = 0
    REQUEST = 1
    ACCEPT = 2
    DECLINE = 3
    TELL = 4
    ADD = 5
    REMOVE = 6


def family_to_string(family: int) -> str:
    """Name of *family*, or ``"N/A"`` if it is not a known family."""
    try:
        return f"FAMILY_{PacketFamily(family).name}"
    except ValueError:
        return "N/A"


def action_to_string(action: int) -> str:
    """Name of *action*, or ``"N/A"`` if it is not a known action."""
    try:
        return f"ACTION_{PacketAction(action).name}"
    except ValueError:
        return "N/A"


def _as_family(value: int) -> int:
    try:
        return PacketFamily(value)
    except ValueError:
        return int(value)


def _as_action(value: int) -> int:
    try:
        return PacketAction(value)
    except ValueError:
        return int(value)


@dataclass
class BasePacket:
    """Header shared by every packet; unknown families and actions are kept as ints."""

    connection_id: int
    family: int
    action: int

    def __post_init__(self) -> None:
        self.family = _as_family(self.family)
        self.action = _as_action(self.action)

    def packet_size(self) -> int:
        """Size of the encoded packet in bytes."""
        return _HEADER_SIZE


@dataclass
class ConnectPacket(BasePacket):
    """Asks for, grants or refuses a connection."""

    family: int = field(default=PacketFamily.CONNECT, init=False)
    assigned_id: int = 0

    def packet_size(self) -> int:
        return _ID_SIZE + super().packet_size()


@dataclass
class DisconnectPacket(BasePacket):
    """Asks for or announces the end of a connection."""

    family: int = field(default=PacketFamily.DISCONNECT, init=False)


@dataclass
class TerrainData:
    """One piece of terrain as sent over the wire."""

    type: int = 0
    pos_x: int = 0
    pos_y: int = 0
    size_x: int = 0
    size_y: int = 0


@dataclass
class TerrainPacket(BasePacket):
    """Carries the level's terrain."""

    family: int = field(default=PacketFamily.TERRAIN, init=False)
    terrain_data: list[TerrainData] = field(default_factory=list)

    def packet_size(self) -> int:
        return (
            _BYTE_SIZE
            + _TERRAIN_ENTRY_SIZE * len(self.terrain_data)
            + super().packet_size()
        )

    def add_terrain_data(self, data: TerrainData) -> None:
        """Append one piece of terrain."""
        self.terrain_data.append(data)


@dataclass
class PlayerData:
    """One player's state as sent over the wire."""

    player_id: int = 0
    direction: int = 0
    pos_x: int = 0
    pos_y: int = 0
    vel_x: int = 0
    vel_y: int = 0


@dataclass
class PlayerPacket(BasePacket):
    """Adds, removes or updates players."""

    family: int = field(default=PacketFamily.PLAYER, init=False)
    player_data: list[PlayerData] = field(default_factory=list)

    def packet_size(self) -> int:
        return (
            _BYTE_SIZE
            + _PLAYER_ENTRY_SIZE * len(self.player_data)
            + super().packet_size()
        )

    def add_player_data(self, data: PlayerData) -> None:
        """Append one player's state."""
        self.player_data.append(data)
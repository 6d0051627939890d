"""Encoding packets to bytes and decoding them back."""

from __future__ import annotations

import struct

from ledgenet.network.packets import (
    BasePacket,
    ConnectPacket,
    DisconnectPacket,
    PacketFamily,
    PlayerData,
    PlayerPacket,
    TerrainData,
    TerrainPacket,
)

_HEADER = struct.Struct(">IBB")
_U32 = struct.Struct(">I")
_COUNT = struct.Struct(">B")
_TERRAIN_OUT = struct.Struct(">BIIII")
_TERRAIN_IN = struct.Struct(">Biiii")
_PLAYER_OUT = struct.Struct(">IBIIII")
_PLAYER_IN = struct.Struct(">IBiiii")

MAX_ENTRIES = 0xFF


class MalformedPacketError(ValueError):
    """Raised when bytes cannot be decoded as a packet."""


def _u32(value: int) -> int:
    return int(value) & 0xFFFFFFFF


def _u8(value: int) -> int:
    return int(value) & 0xFF


def _check_count(count: int) -> None:
    if count > MAX_ENTRIES:
        raise ValueError(f"too many entries for one packet: {count}")


def build_packet(packet: BasePacket) -> bytes:
    """Encode *packet* in network byte order."""
    parts = [_HEADER.pack(_u32(packet.connection_id), _u8(packet.family), _u8(packet.action))]

    if packet.family == PacketFamily.CONNECT:
        parts.append(_U32.pack(_u32(packet.assigned_id)))
    elif packet.family == PacketFamily.TERRAIN:
        entries = packet.terrain_data
        _check_count(len(entries))
        parts.append(_COUNT.pack(len(entries)))
        parts.extend(
            _TERRAIN_OUT.pack(
                _u8(entry.type),
                _u32(entry.pos_x),
                _u32(entry.pos_y),
                _u32(entry.size_x),
                _u32(entry.size_y),
            )
            for entry in entries
        )
    elif packet.family == PacketFamily.PLAYER:
        entries = packet.player_data
        _check_count(len(entries))
        parts.append(_COUNT.pack(len(entries)))
        parts.extend(
            _PLAYER_OUT.pack(
                _u32(entry.player_id),
                _u8(entry.direction),
                _u32(entry.pos_x),
                _u32(entry.pos_y),
                _u32(entry.vel_x),
                _u32(entry.vel_y),
            )
            for entry in entries
        )

    return b"".join(parts)


class _Cursor:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def take(self, layout: struct.Struct) -> tuple:
        try:
            values = layout.unpack_from(self._data, self._offset)
        except struct.error as exc:
            raise MalformedPacketError(
                f"packet truncated at byte {self._offset}"
            ) from exc
        self._offset += layout.size
        return values


def read_packet(data: bytes) -> BasePacket:
    """Decode one packet; positions and velocities come back as signed ints."""
    cursor = _Cursor(bytes(data))
    connection_id, family, action = cursor.take(_HEADER)

    if family == PacketFamily.CONNECT:
        (assigned_id,) = cursor.take(_U32)
        return ConnectPacket(connection_id, action, assigned_id=assigned_id)
    if family == PacketFamily.DISCONNECT:
        return DisconnectPacket(connection_id, action)
    if family == PacketFamily.TERRAIN:
        (count,) = cursor.take(_COUNT)
        terrain = [TerrainData(*cursor.take(_TERRAIN_IN)) for _ in range(count)]
        return TerrainPacket(connection_id, action, terrain_data=terrain)
    if family == PacketFamily.PLAYER:
        (count,) = cursor.take(_COUNT)
        players = [PlayerData(*cursor.take(_PLAYER_IN)) for _ in range(count)]
        return PlayerPacket(connection_id, action, player_data=players)
    return BasePacket(connection_id, family, action)
import pytest

from ledgenet.network.codec import MalformedPacketError, build_packet, read_packet
from ledgenet.network.packets import (
    BasePacket,
    ConnectPacket,
    DisconnectPacket,
    PacketAction,
    PacketFamily,
    PlayerData,
    PlayerPacket,
    TerrainData,
    TerrainPacket,
)


def _samples():
    terrain = TerrainPacket(0, PacketAction.TELL)
    terrain.add_terrain_data(TerrainData(1, -300, 0, 800, 20))
    terrain.add_terrain_data(TerrainData(2, 460, 200, 40, 200))
    players = PlayerPacket(3, PacketAction.ADD)
    players.add_player_data(PlayerData(4, 1, -12, 200, -160, 240))
    return [
        ConnectPacket(0, PacketAction.ACCEPT, assigned_id=42),
        DisconnectPacket(7, PacketAction.REQUEST),
        terrain,
        TerrainPacket(1, PacketAction.REQUEST),
        players,
        PlayerPacket(2, PacketAction.REMOVE),
    ]


@pytest.mark.parametrize("packet", _samples())
def test_round_trip(packet):
    assert read_packet(build_packet(packet)) == packet


@pytest.mark.parametrize("packet", _samples())
def test_encoded_length_matches_packet_size(packet):
    assert len(build_packet(packet)) == packet.packet_size()


def test_disconnect_wire_bytes():
    assert build_packet(DisconnectPacket(7, PacketAction.REQUEST)) == b"\x00\x00\x00\x07\x02\x01"


def test_connect_wire_bytes_are_big_endian():
    encoded = build_packet(ConnectPacket(1, PacketAction.ACCEPT, assigned_id=2))
    assert encoded == b"\x00\x00\x00\x01\x01\x02\x00\x00\x00\x02"


def test_negative_values_round_trip_as_signed():
    packet = PlayerPacket(0, PacketAction.TELL)
    packet.add_player_data(PlayerData(9, 0, -1, -2, -3, -4))
    decoded = read_packet(build_packet(packet))
    assert decoded.player_data[0] == PlayerData(9, 0, -1, -2, -3, -4)


def test_unknown_family_decodes_as_base_packet():
    decoded = read_packet(b"\x00\x00\x00\x01\x09\x04")
    assert type(decoded) is BasePacket
    assert decoded.family == 9
    assert decoded.action == PacketAction.TELL


def test_decoded_family_is_enum():
    decoded = read_packet(build_packet(DisconnectPacket(5, PacketAction.ACCEPT)))
    assert decoded.family is PacketFamily.DISCONNECT
    assert decoded.connection_id == 5


def test_trailing_bytes_are_ignored():
    encoded = build_packet(DisconnectPacket(5, PacketAction.ACCEPT))
    assert read_packet(encoded + b"\xff\xff") == DisconnectPacket(5, PacketAction.ACCEPT)


@pytest.mark.parametrize("cut", [0, 3, 5])
def test_truncated_header_raises(cut):
    encoded = build_packet(DisconnectPacket(5, PacketAction.ACCEPT))
    with pytest.raises(MalformedPacketError):
        read_packet(encoded[:cut])


def test_truncated_entries_raise():
    packet = _samples()[2]
    encoded = build_packet(packet)
    with pytest.raises(MalformedPacketError):
        read_packet(encoded[:-1])


def test_too_many_entries_raise():
    packet = TerrainPacket(0, PacketAction.TELL)
    for _ in range(256):
        packet.add_terrain_data(TerrainData())
    with pytest.raises(ValueError):
        build_packet(packet)
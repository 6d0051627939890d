import pygame
import pytest

from ledgenet.client.gameclient import GameClient
from ledgenet.gamecore.actors import Direction
from ledgenet.gamecore.terrain import TerrainType
from ledgenet.gamecore.vector2 import Vector2
from ledgenet.network.address import Address
from ledgenet.network.codec import build_packet, read_packet
from ledgenet.network.packets import (
    ConnectPacket,
    DisconnectPacket,
    PacketAction,
    PacketFamily,
    PlayerData,
    PlayerPacket,
    TerrainData,
    TerrainPacket,
)

SERVER = Address.from_octets(127, 0, 0, 1, 50000)


class FakeSocket:
    def __init__(self):
        self.is_open = True
        self.sent = []
        self.incoming = []

    def open(self, port):
        self.is_open = True
        return True

    def close(self):
        self.is_open = False

    def send(self, destination, data):
        self.sent.append((destination, data))
        return True

    def receive(self, size):
        return self.incoming.pop(0) if self.incoming else None


def scripted(*batches):
    pending = list(batches)

    def source():
        if pending:
            return pending.pop(0)
        return [pygame.event.Event(pygame.QUIT)]

    return source


@pytest.fixture
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def connected_client(*batches, assigned_id=7):
    sock = FakeSocket()
    client = GameClient(socket=sock, event_source=scripted(*batches), clock=lambda: 0)
    client.server_address = SERVER
    client.handle_connect(ConnectPacket(0, PacketAction.ACCEPT, assigned_id=assigned_id), SERVER)
    sock.sent.clear()
    return client, sock


def test_accept_creates_local_player_and_requests_terrain():
    sock = FakeSocket()
    client = GameClient(socket=sock)
    client.server_address = SERVER
    handled = client.handle_connect(ConnectPacket(0, PacketAction.ACCEPT, assigned_id=7), SERVER)
    assert handled is True
    assert client.is_connected
    assert client.player.network_owner == 7
    assert client.player in client.data_model.player_list.players
    assert client.player in client.data_model.world.actors
    destination, data = sock.sent[0]
    request = read_packet(data)
    assert destination == SERVER
    assert request.family == PacketFamily.TERRAIN
    assert request.action == PacketAction.REQUEST
    assert request.connection_id == 7


def test_decline_stops_running():
    client = GameClient(socket=FakeSocket())
    client.is_running = True
    assert client.handle_connect(ConnectPacket(0, PacketAction.DECLINE), SERVER) is True
    assert client.is_running is False
    assert client.player is None


def test_tick_handles_accept_from_server():
    sock = FakeSocket()
    client = GameClient(socket=sock)
    client.connect(SERVER)
    assert read_packet(sock.sent[0][1]).action == PacketAction.REQUEST
    reply = build_packet(ConnectPacket(0, PacketAction.ACCEPT, assigned_id=3))
    sock.incoming.append((reply, SERVER))
    client.tick()
    assert client.is_connected
    assert client.player.network_owner == 3


def test_disconnect_tell_stops_running():
    client = GameClient(socket=FakeSocket())
    client.is_running = True
    assert client.handle_disconnect(DisconnectPacket(0, PacketAction.REQUEST), SERVER) is True
    assert client.is_running is True
    assert client.handle_disconnect(DisconnectPacket(0, PacketAction.TELL), SERVER) is True
    assert client.is_running is False


def test_terrain_tell_replaces_terrain():
    client = GameClient(socket=FakeSocket())
    client.data_model.world.load_world()
    packet = TerrainPacket(0, PacketAction.TELL)
    packet.add_terrain_data(TerrainData(int(TerrainType.PLATFORM), -300, 0, 800, 20))
    packet.add_terrain_data(TerrainData(int(TerrainType.WALL), 460, 200, 40, 200))
    packet.add_terrain_data(TerrainData(9, 1, 2, 3, 4))
    assert client.handle_terrain(packet, SERVER) is True
    world = client.data_model.world
    assert [piece.terrain_type for piece in world.terrain] == [TerrainType.PLATFORM, TerrainType.WALL]
    assert world.terrain[0].position == Vector2(-300, 0)
    assert world.terrain[1].size == Vector2(40, 200)
    assert world.terrain_loaded is True


def test_terrain_request_is_not_handled():
    client = GameClient(socket=FakeSocket())
    assert client.handle_terrain(TerrainPacket(0, PacketAction.REQUEST), SERVER) is False
    assert client.data_model.world.terrain_loaded is False


def test_player_add_tell_remove():
    client = GameClient(socket=FakeSocket())
    players = client.data_model.player_list

    add = PlayerPacket(0, PacketAction.ADD)
    add.add_player_data(PlayerData(5, int(Direction.RIGHT), 10, 20, 30, 40))
    assert client.handle_player(add, SERVER) is True
    other = players.find_player(5)
    assert other.direction == Direction.RIGHT
    assert other.position == Vector2(10, 20)
    assert other.velocity == Vector2(30, 40)

    assert client.handle_player(add, SERVER) is True
    assert len(players.players) == 1

    tell = PlayerPacket(0, PacketAction.TELL)
    tell.add_player_data(PlayerData(5, int(Direction.LEFT), -1, -2, -3, -4))
    assert client.handle_player(tell, SERVER) is True
    assert other.direction == Direction.LEFT
    assert other.position == Vector2(-1, -2)

    remove = PlayerPacket(0, PacketAction.REMOVE)
    remove.add_player_data(PlayerData(5))
    assert client.handle_player(remove, SERVER) is True
    assert players.find_player(5) is None
    assert other not in client.data_model.world.actors


def test_player_packet_with_other_action_is_not_handled():
    client = GameClient(socket=FakeSocket())
    assert client.handle_player(PlayerPacket(0, PacketAction.REQUEST), SERVER) is False


def test_run_sends_move_and_disconnects(dummy_video):
    right = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT)
    client, sock = connected_client([right])
    client.run()
    packets = [read_packet(data) for _, data in sock.sent]
    assert [p.family for p in packets] == [PacketFamily.PLAYER, PacketFamily.DISCONNECT]
    state = packets[0].player_data[0]
    assert state.player_id == 7
    assert state.direction == int(Direction.RIGHT)
    assert state.vel_x == 160
    assert packets[1].action == PacketAction.REQUEST
    assert client.is_connected is False


def test_run_key_up_cancels_walk(dummy_video):
    down = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)
    up = pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)
    client, _ = connected_client([down], [up])
    client.run()
    assert client.player.velocity.x == 0
    assert client.player.direction == Direction.LEFT


def test_run_jump_only_from_rest(dummy_video):
    up = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)
    client, _ = connected_client([up, up])
    client.data_model.world.load_world()
    client.run()
    assert client.player.velocity.y == 240


def test_run_stops_on_quit_without_player(dummy_video):
    sock = FakeSocket()
    client = GameClient(socket=sock, event_source=scripted(), clock=lambda: 0)
    client.run()
    assert client.is_running is False
    assert sock.sent == []
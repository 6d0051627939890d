"""The game server: keeps the world running and relays player state."""

from __future__ import annotations

import sys
import time
from typing import Callable

from ledgenet.gamecore.actors import Direction, Player
from ledgenet.gamecore.datamodel import DataModel
from ledgenet.gamecore.vector2 import Vector2
from ledgenet.network.address import Address
from ledgenet.network.packets import (
    DisconnectPacket,
    PacketAction,
    PlayerData,
    PlayerPacket,
    TerrainData,
    TerrainPacket,
)
from ledgenet.network.peer import DatagramSocket
from ledgenet.network.server import ClientConnection, Server
from ledgenet.util.log import Logger
from ledgenet.util.timer import Timer

TICK_MS = 16


def _player_data(player: Player) -> PlayerData:
    return PlayerData(
        player_id=player.network_owner,
        direction=int(player.direction),
        pos_x=int(player.position.x),
        pos_y=int(player.position.y),
        vel_x=int(player.velocity.x),
        vel_y=int(player.velocity.y),
    )


class GameServer(Server):
    """A server that owns the game state and simulates it."""

    def __init__(
        self,
        socket: DatagramSocket | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        super().__init__(socket)
        self.data_model = DataModel()
        self.data_model.init()
        self.is_running = False
        self.log = Logger.instance().get_log("GameServer")
        self._clock = clock

    def stop(self) -> None:
        """Make :meth:`run` return after the current step."""
        self.is_running = False

    def run(self) -> None:
        """Load the level and step the simulation until stopped."""
        world = self.data_model.world
        world.load_world()

        timer = Timer(self._clock)
        timer.start()
        self.is_running = True
        while self.is_running:
            delta_ms = timer.elapsed_ms()
            if delta_ms >= TICK_MS:
                timer.reset()
                self.tick()
                world.update(delta_ms / 1000)
                Logger.instance().write_all(sys.stdout)
            else:
                time.sleep(0.001)

    def _send_to_others(self, packet: PlayerPacket, connection: ClientConnection) -> None:
        for other in list(self.connections.values()):
            if other is not connection:
                self.send_packet(packet, other.address)

    def client_connection_added(self, connection: ClientConnection) -> None:
        player_list = self.data_model.player_list
        player = player_list.find_player(connection.connection_id)
        if player is None:
            player = Player(network_owner=connection.connection_id)
            player_list.add_player(player)

        roster = PlayerPacket(0, PacketAction.ADD)
        for other in player_list.players:
            if other is not player:
                roster.add_player_data(_player_data(other))
        self.send_packet(roster, connection.address)

        announcement = PlayerPacket(0, PacketAction.ADD)
        announcement.add_player_data(_player_data(player))
        self._send_to_others(announcement, connection)

    def client_connection_removing(self, connection: ClientConnection) -> None:
        player_list = self.data_model.player_list
        player = player_list.find_player(connection.connection_id)
        if player is None:
            return

        packet = PlayerPacket(0, PacketAction.REMOVE)
        packet.add_player_data(
            PlayerData(player_id=player.network_owner, direction=int(player.direction))
        )
        self._send_to_others(packet, connection)
        player_list.remove_player(player)

    def handle_terrain(self, packet: TerrainPacket, sender: Address) -> bool:
        if packet.action != PacketAction.REQUEST:
            return False

        reply = TerrainPacket(0, PacketAction.TELL)
        for piece in self.data_model.world.terrain:
            reply.add_terrain_data(
                TerrainData(
                    type=int(piece.terrain_type),
                    pos_x=int(piece.position.x),
                    pos_y=int(piece.position.y),
                    size_x=int(piece.size.x),
                    size_y=int(piece.size.y),
                )
            )
        self.send_packet(reply, sender)
        return True

    def handle_player(self, packet: PlayerPacket, sender: Address) -> bool:
        if packet.action != PacketAction.TELL:
            return False

        connection = self.get_connection_from_address(sender)
        if connection is None:
            self.send_packet(DisconnectPacket(0, PacketAction.TELL), sender)
            return False

        player_list = self.data_model.player_list
        relay = PlayerPacket(0, PacketAction.TELL)
        for data in packet.player_data:
            if data.player_id != connection.connection_id:
                continue
            player = player_list.find_player(data.player_id)
            if player is None:
                continue
            try:
                player.direction = Direction(data.direction)
            except ValueError:
                pass
            player.position = Vector2(data.pos_x, data.pos_y)
            player.velocity = Vector2(data.vel_x, data.vel_y)
            relay.add_player_data(data)

        self._send_to_others(relay, connection)
        return True
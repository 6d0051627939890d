"""The playable client: a window, keyboard control and a networked world."""

from __future__ import annotations

import os
import sys
from typing import Callable, Iterable

import pygame

from ledgenet.client.drawing import draw_actor, draw_terrain
from ledgenet.gamecore.actors import Direction, Player
from ledgenet.gamecore.datamodel import DataModel
from ledgenet.gamecore.terrain import Platform, Terrain, TerrainType, Wall
from ledgenet.gamecore.vector2 import Vector2
from ledgenet.network.address import Address
from ledgenet.network.client import Client
from ledgenet.network.packets import (
    ConnectPacket,
    DisconnectPacket,
    PacketAction,
    PlayerData,
    PlayerPacket,
    TerrainPacket,
)
from ledgenet.network.peer import DatagramSocket
from ledgenet.util.log import Logger
from ledgenet.util.timer import Timer

WINDOW_SIZE = (1152, 648)
FPS = 60
DRAW_BEGIN = Vector2(1152 / 2, 648 * 0.8)
WALK_SPEED = Vector2(160, 0)

BACKGROUND_COLOR = (0, 0, 0)
DEFAULT_TERRAIN_COLOR = (255, 255, 255)
TERRAIN_COLORS = {
    TerrainType.PLATFORM: (20, 20, 220),
    TerrainType.WALL: (20, 220, 20),
}
OTHER_PLAYER_COLOR = (0, 255, 255)
OWN_PLAYER_COLOR = (255, 255, 0)

_TERRAIN_KINDS: dict[int, type[Terrain]] = {
    TerrainType.PLATFORM: Platform,
    TerrainType.WALL: Wall,
}


def _apply_player_data(player: Player, data: PlayerData) -> None:
    try:
        player.direction = Direction(data.direction)
    except ValueError:
        pass
    player.position = Vector2(data.pos_x, data.pos_y)
    player.velocity = Vector2(data.vel_x, data.vel_y)


class GameClient(Client):
    """A client that shows the world and sends the local player's moves.

    *event_source* returns the pending input events (pygame's queue by
    default); *clock* is passed to the frame timer.
    """

    def __init__(
        self,
        socket: DatagramSocket | None = None,
        event_source: Callable[[], Iterable[pygame.event.Event]] | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        super().__init__(socket)
        self.log = Logger.instance().get_log("GameClient")
        self.data_model = DataModel()
        self.data_model.init()
        self.is_running = False
        self.player: Player | None = None
        self._event_source = event_source or (lambda: pygame.event.get())
        self._clock = clock
        self._needs_physics_update = False

    def run(self) -> None:
        """Open the window and play until it is closed or the server ends it."""
        os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "10,10")
        pygame.init()
        screen = pygame.display.set_mode(WINDOW_SIZE)
        frame_clock = pygame.time.Clock()

        timer = Timer(self._clock)
        timer.start()
        self._needs_physics_update = False
        self.is_running = True
        while self.is_running:
            for event in self._event_source():
                self._handle_event(event)
            if not self.is_running:
                break
            self._advance(timer)
            self._draw(screen)
            frame_clock.tick(FPS)

        if self.is_connected:
            self.disconnect()

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.is_running = False
        elif event.type == pygame.KEYDOWN:
            self._key_down(event.key)
        elif event.type == pygame.KEYUP:
            self._key_up(event.key)

    def _key_down(self, key: int) -> None:
        player = self.player
        if player is None:
            return
        if key == pygame.K_UP:
            if player.velocity.y == 0:
                self._needs_physics_update = True
                player.jump()
        elif key == pygame.K_LEFT:
            self._needs_physics_update = True
            player.add_velocity(-WALK_SPEED)
            player.direction = Direction.LEFT
        elif key == pygame.K_RIGHT:
            self._needs_physics_update = True
            player.add_velocity(WALK_SPEED)
            player.direction = Direction.RIGHT

    def _key_up(self, key: int) -> None:
        player = self.player
        if player is None:
            return
        if key == pygame.K_LEFT:
            self._needs_physics_update = True
            player.add_velocity(WALK_SPEED)
        elif key == pygame.K_RIGHT:
            self._needs_physics_update = True
            player.add_velocity(-WALK_SPEED)

    def _advance(self, timer: Timer) -> None:
        self.tick()
        delta_ms = timer.elapsed_ms()
        timer.reset()
        self.data_model.world.update(delta_ms / 1000)

        if self._needs_physics_update and self.player is not None:
            self._needs_physics_update = False
            self._send_player_state(self.player)

        Logger.instance().write_all(sys.stdout)

    def _send_player_state(self, player: Player) -> None:
        packet = PlayerPacket(self.connection_id, PacketAction.TELL)
        packet.add_player_data(
            PlayerData(
                player_id=player.network_owner,
                direction=int(player.direction),
                pos_x=int(player.position.x),
                pos_y=int(player.position.y),
                vel_x=int(player.velocity.x),
                vel_y=int(player.velocity.y),
            )
        )
        self.send_packet(packet, self.server_address)

    def _draw(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND_COLOR)
        world = self.data_model.world
        if world.terrain_loaded and self.player is not None:
            focus = DRAW_BEGIN - Vector2(self.player.position.x, 0)
            for piece in world.terrain:
                color = TERRAIN_COLORS.get(piece.terrain_type, DEFAULT_TERRAIN_COLOR)
                draw_terrain(screen, piece, focus, color)
            for actor in world.actors:
                if actor.is_player and actor is not self.player:
                    draw_actor(screen, actor, focus, OTHER_PLAYER_COLOR)
            draw_actor(screen, self.player, focus, OWN_PLAYER_COLOR)
        pygame.display.flip()

    def handle_connect(self, packet: ConnectPacket, sender: Address) -> bool:
        handled = super().handle_connect(packet, sender)
        if handled:
            if self.is_connected:
                self.send_packet(
                    TerrainPacket(self.connection_id, PacketAction.REQUEST),
                    self.server_address,
                )
                player = Player(network_owner=self.connection_id)
                self.data_model.player_list.add_player(player)
                self.player = player
            else:
                self.is_running = False
        return handled

    def handle_disconnect(self, packet: DisconnectPacket, sender: Address) -> bool:
        if packet.action == PacketAction.TELL:
            self.is_running = False
        return True

    def handle_terrain(self, packet: TerrainPacket, sender: Address) -> bool:
        if packet.action != PacketAction.TELL:
            return False

        world = self.data_model.world
        world.clear_terrain()
        for data in packet.terrain_data:
            kind = _TERRAIN_KINDS.get(data.type)
            if kind is not None:
                world.add_terrain(
                    kind(
                        position=Vector2(data.pos_x, data.pos_y),
                        size=Vector2(data.size_x, data.size_y),
                    )
                )
        world.terrain_loaded = True
        return True

    def handle_player(self, packet: PlayerPacket, sender: Address) -> bool:
        player_list = self.data_model.player_list
        if packet.action == PacketAction.ADD:
            for data in packet.player_data:
                if player_list.find_player(data.player_id) is None:
                    player = Player(network_owner=data.player_id)
                    _apply_player_data(player, data)
                    player_list.add_player(player)
            return True
        if packet.action == PacketAction.REMOVE:
            for data in packet.player_data:
                player = player_list.find_player(data.player_id)
                if player is not None:
                    player_list.remove_player(player)
            return True
        if packet.action == PacketAction.TELL:
            for data in packet.player_data:
                player = player_list.find_player(data.player_id)
                if player is not None:
                    _apply_player_data(player, data)
            return True
        return False
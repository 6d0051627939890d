"""The game's shared state: the world and its players."""

from __future__ import annotations

from ledgenet.gamecore.playerlist import PlayerList
from ledgenet.gamecore.world import World
from ledgenet.util.services import ServiceProvider

WORLD_SERVICE = "World"
PLAYER_LIST_SERVICE = "PlayerList"


class DataModel(ServiceProvider):
    """A service provider holding a :class:`World` and a :class:`PlayerList`."""

    def init(self) -> None:
        """Create the world and the player list."""
        super().init()
        self.add_service(WORLD_SERVICE, World())
        self.add_service(PLAYER_LIST_SERVICE, PlayerList())

    @property
    def world(self) -> World:
        return self.get_service(WORLD_SERVICE)

    @property
    def player_list(self) -> PlayerList:
        return self.get_service(PLAYER_LIST_SERVICE)
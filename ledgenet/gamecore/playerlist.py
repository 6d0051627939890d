"""The set of players known to a data model."""

from __future__ import annotations

from ledgenet.gamecore.actors import Player
from ledgenet.gamecore.world import World
from ledgenet.util.services import Service


class PlayerList(Service):
    """Players in the game; every player is also an actor in the world."""

    def __init__(self) -> None:
        super().__init__()
        self.players: list[Player] = []

    def _world(self) -> World:
        world = getattr(self.provider, "world", None)
        if world is None:
            raise RuntimeError("player list is not attached to a data model")
        return world

    def add_player(self, player: Player) -> None:
        """Add *player* here and to the world."""
        world = self._world()
        self.players.append(player)
        world.add_actor(player)

    def remove_player(self, player: Player) -> None:
        """Remove *player* from here and from the world."""
        world = self._world()
        self.players = [other for other in self.players if other is not player]
        world.remove_actor(player)

    def find_player(self, network_id: int) -> Player | None:
        """Return the player owned by connection *network_id*, if any."""
        return next(
            (player for player in self.players if player.network_owner == network_id),
            None,
        )
"""The simulated world: gravity, actors and the terrain they collide with."""

from __future__ import annotations

from ledgenet.gamecore.actors import Actor
from ledgenet.gamecore.terrain import Platform, Terrain, TerrainType, Wall
from ledgenet.gamecore.vector2 import Vector2
from ledgenet.util.services import Service

DEFAULT_GRAVITY = Vector2(0, -480)

_FALL_LIMIT = -300
_RESPAWN_POSITION = Vector2(0, 300)


def segments_overlap(x1: float, x2: float, y1: float, y2: float) -> bool:
    """Tell whether the open segments (x1, x2) and (y1, y2) overlap."""
    return x2 > y1 and y2 > x1


class World(Service):
    """Holds actors and terrain and advances the physics."""

    def __init__(self) -> None:
        super().__init__()
        self.gravity: Vector2 = DEFAULT_GRAVITY
        self.actors: list[Actor] = []
        self.terrain: list[Terrain] = []
        self.terrain_loaded = False

    def update(self, delta_t: float) -> None:
        """Advance every actor by *delta_t* seconds and resolve collisions."""
        for actor in self.actors:
            self._step_actor(actor, delta_t)

    def _step_actor(self, actor: Actor, delta_t: float) -> None:
        size = actor.size
        before = actor.position

        if before.y < _FALL_LIMIT:
            actor.position = _RESPAWN_POSITION
            before = actor.position
            actor.add_velocity(Vector2(0, -actor.velocity.y))

        actor.add_velocity(self.gravity * delta_t)
        actor.update(delta_t)

        after_x, after_y = actor.position
        vel_x, vel_y = actor.velocity

        for piece in self.terrain:
            top_left = piece.position
            right = top_left.x + piece.size.x
            bottom = top_left.y - piece.size.y

            horizontal = segments_overlap(after_x, after_x + size.x, top_left.x, right)

            if piece.terrain_type == TerrainType.PLATFORM:
                if vel_y < 0 and horizontal:
                    if before.y - size.y >= top_left.y and top_left.y > after_y - size.y:
                        after_y = top_left.y + size.y
                        vel_y = 0.0
            elif piece.terrain_type == TerrainType.WALL:
                if horizontal:
                    if vel_y < 0:
                        if before.y - size.y >= top_left.y and top_left.y > after_y - size.y:
                            after_y = top_left.y + size.y
                            vel_y = 0.0
                    elif vel_y > 0:
                        if bottom >= before.y and after_y > bottom:
                            after_y = bottom

                if segments_overlap(after_y - size.y, after_y, bottom, top_left.y):
                    if vel_x > 0:
                        if top_left.x >= before.x + size.x and after_x + size.x > top_left.x:
                            after_x = top_left.x - size.x
                    elif vel_x < 0:
                        if right <= before.x and after_x < right:
                            after_x = right

        actor.position = Vector2(after_x, after_y)
        actor.velocity = Vector2(vel_x, vel_y)

    def add_actor(self, actor: Actor) -> None:
        """Put *actor* into the world."""
        self.actors.append(actor)

    def remove_actor(self, actor: Actor) -> None:
        """Take *actor* out of the world; unknown actors are ignored."""
        self.actors = [other for other in self.actors if other is not actor]

    def load_world(self) -> None:
        """Build the built-in level and mark the terrain as loaded."""
        self.add_terrain(Platform(position=Vector2(-300, 0), size=Vector2(800, 20)))
        self.add_terrain(Wall(position=Vector2(-300, 200), size=Vector2(40, 200)))
        self.add_terrain(Wall(position=Vector2(460, 200), size=Vector2(40, 200)))

        for step in range(4):
            width = 60 * (5 - step)
            self.add_terrain(
                Platform(
                    position=Vector2(460 - width, 40 * (step + 1)),
                    size=Vector2(width, 20),
                )
            )

        self.add_terrain(Platform(position=Vector2(500, 200), size=Vector2(600, 20)))
        self.terrain_loaded = True

    def clear_terrain(self) -> None:
        """Remove every piece of terrain."""
        self.terrain.clear()

    def add_terrain(self, terrain: Terrain) -> None:
        """Add a piece of terrain."""
        self.terrain.append(terrain)
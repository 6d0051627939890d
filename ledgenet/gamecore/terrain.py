"""Static pieces of the level: platforms and walls."""

from __future__ import annotations

import enum

from ledgenet.gamecore.vector2 import Vector2


class TerrainType(enum.IntEnum):
    """Kind of terrain; values travel over the wire."""

    PLATFORM = 1
    WALL = 2


class Terrain:
    """A rectangle whose top-left corner is *position*, extending by *size*."""

    def __init__(
        self,
        terrain_type: TerrainType,
        position: Vector2 | None = None,
        size: Vector2 | None = None,
    ) -> None:
        self.terrain_type = TerrainType(terrain_type)
        self.position = position if position is not None else Vector2()
        self.size = size if size is not None else Vector2()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position!r}, size={self.size!r})"
        )


class Platform(Terrain):
    """Terrain that can be stood on from above and passed through otherwise."""

    def __init__(self, position: Vector2 | None = None, size: Vector2 | None = None) -> None:
        super().__init__(TerrainType.PLATFORM, position, size)


class Wall(Terrain):
    """Solid terrain that blocks from every side."""

    def __init__(self, position: Vector2 | None = None, size: Vector2 | None = None) -> None:
        super().__init__(TerrainType.WALL, position, size)
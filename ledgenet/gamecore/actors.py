"""Moving things in the world: actors and networked players."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from ledgenet.gamecore.vector2 import Vector2

JUMP_VELOCITY = Vector2(0, 240)


class Direction(enum.IntEnum):
    """Which way an actor faces."""

    LEFT = 0
    RIGHT = 1


@dataclass(eq=False)
class Actor:
    """A box with a position, a velocity and a facing."""

    size: Vector2 = field(default_factory=lambda: Vector2(40, 80))
    position: Vector2 = field(default_factory=lambda: Vector2(0, 200))
    velocity: Vector2 = field(default_factory=Vector2)
    direction: Direction = Direction.LEFT

    @property
    def is_player(self) -> bool:
        return False

    def add_velocity(self, velocity: Vector2) -> None:
        """Add *velocity* to the current velocity."""
        self.velocity = self.velocity + velocity

    def update(self, delta_t: float) -> None:
        """Move by the current velocity over *delta_t* seconds."""
        self.position = self.position + self.velocity * delta_t

    def jump(self) -> None:
        """Give the actor an upward push."""
        self.add_velocity(JUMP_VELOCITY)


@dataclass(eq=False)
class Player(Actor):
    """An actor controlled by a network connection."""

    network_owner: int = 0

    @property
    def is_player(self) -> bool:
        return True
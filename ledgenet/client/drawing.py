"""Drawing actors and terrain onto a pygame surface."""

from __future__ import annotations

import pygame

from ledgenet.gamecore.actors import Actor, Direction
from ledgenet.gamecore.terrain import Terrain
from ledgenet.gamecore.vector2 import Vector2

BLACK = (0, 0, 0)


def _fill(surface: pygame.Surface, color, x1: float, y1: float, x2: float, y2: float) -> pygame.Rect:
    left, right = sorted((x1, x2))
    top, bottom = sorted((y1, y2))
    left_px, top_px = round(left), round(top)
    rect = pygame.Rect(left_px, top_px, round(right) - left_px, round(bottom) - top_px)
    if rect.width > 0 and rect.height > 0:
        pygame.draw.rect(surface, color, rect)
    return rect


def _draw_start(position: Vector2, draw_begin: Vector2) -> Vector2:
    # World y grows upwards, screen y grows downwards.
    return draw_begin + Vector2(position.x, -position.y)


def draw_actor(surface: pygame.Surface, actor: Actor, draw_begin: Vector2, color) -> pygame.Rect:
    """Draw *actor* relative to *draw_begin*, with a face on the side it looks to.

    Returns the rectangle of the actor's body.
    """
    start = _draw_start(actor.position, draw_begin)
    end = start + actor.size
    body = _fill(surface, color, start.x, start.y, end.x, end.y)

    if actor.direction == Direction.LEFT:
        _fill(surface, BLACK, start.x + 4, start.y + 4, start.x + 20, start.y + 20)
        _fill(surface, BLACK, start.x, start.y + 28, start.x + 14, start.y + 32)
    elif actor.direction == Direction.RIGHT:
        right, top = end.x, start.y
        _fill(surface, BLACK, right - 20, top + 4, right - 4, top + 20)
        _fill(surface, BLACK, right - 14, top + 28, right, top + 32)
    return body


def draw_terrain(surface: pygame.Surface, terrain: Terrain, draw_begin: Vector2, color) -> pygame.Rect:
    """Draw *terrain* relative to *draw_begin*; returns the filled rectangle."""
    start = _draw_start(terrain.position, draw_begin)
    end = start + terrain.size
    return _fill(surface, color, start.x, start.y, end.x, end.y)
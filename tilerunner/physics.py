"""Axis-separated movement with tile collision."""

from __future__ import annotations

from dataclasses import dataclass

from tilerunner.game_utils import FloatRect, Vec2
from tilerunner.tiles import TileMap

_EPSILON = 0.0001


@dataclass
class PhysicsResult:
    """Where a body ended up, its corrected velocity, and whether it landed."""

    position: Vec2
    velocity: Vec2
    grounded: bool


def _cell(coordinate: float, tile_size: int) -> int:
    """Grid index of a coordinate, truncating toward zero at both steps."""
    value = int(coordinate)
    quotient = abs(value) // tile_size
    return quotient if value >= 0 else -quotient


class PhysicsSystem:
    """Moves boxes through a tile map, stopping them at solid tiles."""

    def __init__(self, tile_map: TileMap) -> None:
        self.tile_map = tile_map

    def move_and_collide(self, bounds: FloatRect, velocity: Vec2, dt: float) -> PhysicsResult:
        """Move horizontally then vertically, snapping against the first solid tile hit."""
        tm = self.tile_map
        tile = int(tm.tile_size)
        vx, vy = velocity
        left, top = bounds.left, bounds.top
        width, height = bounds.width, bounds.height
        grounded = False

        left += vx * dt
        if vx != 0.0:
            rows = range(_cell(top, tile), _cell(top + height - 1, tile) + 1)
            tile_x = _cell(left + width - 1.0, tile) if vx > 0 else _cell(left, tile)
            if any(tm.is_solid_tile(tile_x, y) for y in rows):
                left = tile_x * tm.tile_size - width if vx > 0 else (tile_x + 1) * tm.tile_size
                vx = 0.0

        top += vy * dt
        if vy != 0.0:
            columns = range(_cell(left, tile), _cell(left + width - 1, tile) + 1)
            tile_y = _cell(top + height - _EPSILON, tile) if vy > 0 else _cell(top, tile)
            if any(tm.is_solid_tile(x, tile_y) for x in columns):
                if vy > 0:
                    top = tile_y * tm.tile_size - height
                    grounded = True
                else:
                    top = (tile_y + 1) * tm.tile_size
                vy = 0.0

        return PhysicsResult(position=(left, top), velocity=(vx, vy), grounded=grounded)
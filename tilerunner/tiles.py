"""Tile definitions, the default registry and the room tile map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tilerunner.constants import TileType
from tilerunner.game_utils import FloatRect, Vec2
from tilerunner.room import RoomData

if TYPE_CHECKING:
    from tilerunner.camera import Canvas

Color = tuple[int, ...]


@dataclass(frozen=True)
class TileProperties:
    """Gameplay flags of a tile kind."""

    type: TileType
    is_solid: bool = False
    is_damaging: bool = False
    is_checkpoint: bool = False


@dataclass(frozen=True)
class TileDefinition:
    """How a tile symbol looks and behaves."""

    color: Color
    properties: TileProperties


def create_tile_registry() -> dict[str, TileDefinition]:
    """The tile symbols used in room files."""
    return {
        "#": TileDefinition((255, 0, 255), TileProperties(TileType.SOLID, True, False, False)),
        ".": TileDefinition((165, 42, 42), TileProperties(TileType.EMPTY, False, False, False)),
        "B": TileDefinition((0, 0, 255), TileProperties(TileType.WATER, False, True, False)),
    }


class TileMap:
    """A room's tiles on a square grid."""

    TILE_SIZE = 32.0

    def __init__(self, registry: dict[str, TileDefinition]) -> None:
        self._registry = dict(registry)
        self.tile_size = self.TILE_SIZE
        self.symbol_grid: list[str] = []
        self.tiles: list[tuple[FloatRect, Color]] = []

    def load_from_room(self, room: RoomData) -> None:
        """Replace the map's grid and drawable tiles with those of a room."""
        size = self.tile_size
        self.symbol_grid = list(room.tile_grid)
        self.tiles = [
            (FloatRect(x * size, y * size, size, size), self._registry[symbol].color)
            for y, row in enumerate(room.tile_grid)
            for x, symbol in enumerate(row)
            if symbol in self._registry
        ]

    def render(self, canvas: Canvas) -> None:
        for rect, color in self.tiles:
            canvas.draw_rect(rect, color)

    def _in_bounds(self, grid_x: int, grid_y: int) -> bool:
        return 0 <= grid_y < len(self.symbol_grid) and 0 <= grid_x < len(self.symbol_grid[grid_y])

    def tile_properties_at_world(self, world_pos: Vec2) -> TileProperties:
        """Properties of the tile under a world position (cell index truncated toward zero)."""
        grid_x = int(world_pos[0] / self.tile_size)
        grid_y = int(world_pos[1] / self.tile_size)
        if not self._in_bounds(grid_x, grid_y):
            raise IndexError("World position maps to invalid grid coordinates.")

        symbol = self.symbol_grid[grid_y][grid_x]
        definition = self._registry.get(symbol)
        if definition is None:
            raise LookupError(f"No tile definition found for symbol '{symbol}'")
        return definition.properties

    def is_solid_tile(self, grid_x: int, grid_y: int) -> bool:
        """Whether a cell blocks movement; cells off the grid or unknown never do."""
        if not self._in_bounds(grid_x, grid_y):
            return False
        definition = self._registry.get(self.symbol_grid[grid_y][grid_x])
        return definition is not None and definition.properties.is_solid
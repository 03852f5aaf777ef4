"""Room layouts: tile grids plus entity placements, and their text file format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike

from tilerunner.game_utils import Vec2

_ENTITIES_HEADER = "[Entities]"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass
class RoomEntity:
    """An entity placed in a room at a grid cell, with free-form properties."""

    type: str
    x: int
    y: int
    properties: dict[str, str] = field(default_factory=dict)


@dataclass
class RoomData:
    """A room's tile rows and its entities."""

    tile_grid: list[str] = field(default_factory=list)
    entities: list[RoomEntity] = field(default_factory=list)

    def room_dimensions(self, tile_size: float) -> Vec2:
        """Width and height of the room in world units, based on the first row."""
        if not self.tile_grid:
            return (0.0, 0.0)
        return (len(self.tile_grid[0]) * tile_size, len(self.tile_grid) * tile_size)

    def entity_spawn(self, entity_type: str, tile_size: float) -> Vec2:
        """World position of the first entity of the given type."""
        for entity in self.entities:
            if entity.type == entity_type:
                return (entity.x * tile_size, entity.y * tile_size)
        raise LookupError(f"No spawn found for entity type: {entity_type}")


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer in room file: {text!r}")
    return int(match.group(1))


def _parse_entity(line: str) -> RoomEntity | None:
    entity_type, sep, rest = line.partition("=")
    if not sep:
        return None

    coords, has_props, props = rest.partition(";")
    parts = coords.split(",")
    x = _parse_int(parts[0])
    y = _parse_int(parts[1] if len(parts) > 1 else "")

    properties: dict[str, str] = {}
    if has_props:
        for pair in props.split(";"):
            key, eq, value = pair.partition("=")
            if eq:
                properties[key] = value
    return RoomEntity(entity_type, x, y, properties)


def load_room(filename: str | PathLike[str]) -> RoomData:
    """Read a room file: tile rows, then an ``[Entities]`` section of ``Type=x,y;k=v``."""
    try:
        handle = open(filename, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Failed to open room file: {filename}") from exc

    room = RoomData()
    in_entities = False
    with handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line:
                continue
            if line == _ENTITIES_HEADER:
                in_entities = True
                continue
            if not in_entities:
                room.tile_grid.append(line)
                continue
            entity = _parse_entity(line)
            if entity is not None:
                room.entities.append(entity)
    return room
"""Separating-axis intersection tests for transformed sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import pairwise

from tilerunner.game_utils import FloatRect, Vec2


@dataclass(frozen=True)
class SpriteGeometry:
    """The placement of a sprite: local bounds plus position, rotation, scale and origin."""

    local_bounds: FloatRect
    position: Vec2 = (0.0, 0.0)
    rotation: float = 0.0
    scale: Vec2 = (1.0, 1.0)
    origin: Vec2 = (0.0, 0.0)

    def transform_point(self, x: float, y: float) -> Vec2:
        """Map a local point to world coordinates (degrees, clockwise on screen)."""
        px = (x - self.origin[0]) * self.scale[0]
        py = (y - self.origin[1]) * self.scale[1]
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return (
            px * cos_a - py * sin_a + self.position[0],
            px * sin_a + py * cos_a + self.position[1],
        )


def transformed_vertices(sprite: SpriteGeometry) -> list[Vec2]:
    """The four corners of the sprite's bounds in world space, in winding order."""
    b = sprite.local_bounds
    corners = [
        (b.left, b.top),
        (b.left + b.width, b.top),
        (b.left + b.width, b.top + b.height),
        (b.left, b.top + b.height),
    ]
    return [sprite.transform_point(x, y) for x, y in corners]


def _project(vertices: list[Vec2], axis: Vec2) -> tuple[float, float]:
    projections = [vx * axis[0] + vy * axis[1] for vx, vy in vertices]
    return min(projections), max(projections)


def sprites_intersect(sprite_a: SpriteGeometry, sprite_b: SpriteGeometry) -> bool:
    """Whether two sprites overlap; touching edges count as overlapping."""
    vertices_a = transformed_vertices(sprite_a)
    vertices_b = transformed_vertices(sprite_b)

    for vertices in (vertices_a, vertices_b):
        for p1, p2 in pairwise([*vertices, vertices[0]]):
            normal = (p2[1] - p1[1], p1[0] - p2[0])
            min_a, max_a = _project(vertices_a, normal)
            min_b, max_b = _project(vertices_b, normal)
            if max_a < min_b or max_b < min_a:
                return False
    return True
"""Small geometry and formatting helpers shared across the game."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vec2 = tuple[float, float]


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def position(self) -> Vec2:
        return (self.left, self.top)

    @property
    def size(self) -> Vec2:
        return (self.width, self.height)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; the right and bottom edges are excluded."""
        min_x, max_x = sorted((self.left, self.left + self.width))
        min_y, max_y = sorted((self.top, self.top + self.height))
        return min_x <= x < max_x and min_y <= y < max_y


def pad_number_as_text(value: int, width: int, pad_char: str) -> str:
    """Right-align ``value`` in ``width`` characters, filling with ``pad_char``."""
    return str(value).rjust(width, pad_char)


def format_score_text(score: int) -> str:
    """Format a score as eight zero-padded digits."""
    return pad_number_as_text(score, 8, "0")


def bottom_right_position(view_size: Vec2, element_size: Vec2, margin: float = 10.0) -> Vec2:
    """Top-left position that places an element in the bottom-right corner of a view."""
    return (
        view_size[0] - element_size[0] - margin,
        view_size[1] - element_size[1] - margin,
    )


def normalise_vector(vector: Vec2) -> Vec2:
    """Unit vector in the direction of ``vector``, or the zero vector."""
    magnitude = math.hypot(vector[0], vector[1])
    if magnitude > 0:
        return (vector[0] / magnitude, vector[1] / magnitude)
    return (0.0, 0.0)


def euclidean_distance(a: Vec2, b: Vec2) -> float:
    """Straight-line distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def grid_to_world(grid_x: int, grid_y: int, tile_size: float) -> Vec2:
    """World position of the top-left corner of a grid cell."""
    return (grid_x * tile_size, grid_y * tile_size)
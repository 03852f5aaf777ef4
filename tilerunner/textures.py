"""Loaded textures by id, and named sub-rectangles of textures."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from os import PathLike

import pygame

from tilerunner.game_utils import FloatRect


class TextureManager:
    """Loads each texture once and hands it out by id."""

    def __init__(self) -> None:
        self._textures: dict[Hashable, pygame.Surface] = {}
        self.repeated: set[Hashable] = set()

    def load_texture(
        self,
        texture_id: Hashable,
        filepath: str | PathLike[str],
        is_repeated: bool = False,
    ) -> None:
        """Load an image under an id; an id already loaded is left as it is."""
        if texture_id in self._textures:
            return
        try:
            surface = pygame.image.load(str(filepath))
        except (pygame.error, OSError) as exc:
            raise OSError(f"Failed to load texture: {filepath}") from exc
        self._textures[texture_id] = surface
        if is_repeated:
            self.repeated.add(texture_id)

    def texture(self, texture_id: Hashable) -> pygame.Surface:
        try:
            return self._textures[texture_id]
        except KeyError:
            number = getattr(texture_id, "value", texture_id)
            raise LookupError(f"Texture not found: {number}") from None

    def has_texture(self, texture_id: Hashable) -> bool:
        return texture_id in self._textures


@dataclass
class TextureRectManager:
    """Named regions of texture sheets."""

    rects: dict[str, FloatRect] = field(default_factory=dict)
"""State shared between screens: fonts, level list, managers and the current room."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import pygame

from tilerunner.audio import AudioManager
from tilerunner.player import Player
from tilerunner.room import RoomData
from tilerunner.textures import TextureManager, TextureRectManager

Color = tuple[int, ...]

DEFAULT_FONT_PATH = Path("resources/fonts/PressStart2P-Regular.ttf")
DEFAULT_LEVEL_MAPS = ("resources/maps/room_01.txt",)


@dataclass(frozen=True)
class GameOverConfig:
    """Title and title colour shown on the game-over screen."""

    title_text: str
    title_color: Color

    @classmethod
    def default(cls) -> GameOverConfig:
        return cls("Game Over", (255, 0, 0))


class GameData:
    """Resources and progress shared by every game state."""

    def __init__(
        self,
        font_path: str | PathLike[str] | None = DEFAULT_FONT_PATH,
        level_map_paths: Iterable[str] = DEFAULT_LEVEL_MAPS,
    ) -> None:
        self._level_map_paths = list(level_map_paths)
        self.font_path = font_path
        self._fonts: dict[int, pygame.font.Font] = {}

        self.player: Player | None = None
        self.room_data = RoomData()

        self.texture_manager = TextureManager()
        self.audio_manager = AudioManager()
        self.rect_manager = TextureRectManager()

        self.font(24)
        self.reset()

    @property
    def level_map_paths(self) -> tuple[str, ...]:
        return tuple(self._level_map_paths)

    def font(self, size: int) -> pygame.font.Font:
        """The game font at a character size; ``None`` as path means pygame's own font."""
        cached = self._fonts.get(size)
        if cached is not None:
            return cached
        if not pygame.font.get_init():
            pygame.font.init()
        source = None if self.font_path is None else str(self.font_path)
        try:
            font = pygame.font.Font(source, size)
        except (pygame.error, OSError) as exc:
            raise OSError("Failed to load font") from exc
        self._fonts[size] = font
        return font

    def level_map(self, index: int) -> str:
        """Path of a level's room file, falling back to the first level."""
        if self.has_level_map(index):
            return self._level_map_paths[index]
        return self._level_map_paths[0]

    def has_level_map(self, index: int) -> bool:
        return 0 <= index < len(self._level_map_paths)

    def reset_level(self) -> None:
        """Clear per-level progress; there is none kept between rooms yet."""
        self.room_data = RoomData() if not self.room_data.tile_grid else self.room_data

    def reset(self) -> None:
        self.reset_level()
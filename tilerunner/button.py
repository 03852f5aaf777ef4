"""A clickable text button."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike
from typing import TYPE_CHECKING

import pygame

from tilerunner.constants import BUTTON_HEIGHT, BUTTON_WIDTH
from tilerunner.game_utils import FloatRect, Vec2

if TYPE_CHECKING:
    from tilerunner.camera import Canvas

FILL_COLOR = (31, 31, 31)
TEXT_COLOR = (255, 255, 255)
HOVER_COLOR = (255, 255, 0)
CHARACTER_SIZE = 24

FontSource = pygame.font.Font | str | PathLike[str] | None


def _as_font(font: FontSource) -> pygame.font.Font:
    if isinstance(font, pygame.font.Font):
        return font
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None if font is None else str(font), CHARACTER_SIZE)


class Button:
    """A fixed-size box with a centred label that runs an action when triggered."""

    def __init__(
        self,
        name: str,
        font: FontSource,
        label: str,
        position: Vec2,
        action: Callable[[], object],
    ) -> None:
        self.name = name
        self.label = label
        self._font = _as_font(font)
        self._action = action
        self.text_color = TEXT_COLOR
        self._text = self._font.render(label, True, self.text_color)
        self.shape = FloatRect(position[0], position[1], BUTTON_WIDTH, BUTTON_HEIGHT)
        self.text_position = self._centred_text_position()

    def _centred_text_position(self) -> Vec2:
        text_w, text_h = self._text.get_size()
        return (
            self.shape.left + (self.shape.width - text_w) / 2,
            self.shape.top + (self.shape.height - text_h) / 2,
        )

    def render(self, canvas: Canvas) -> None:
        canvas.draw_rect(self.shape, FILL_COLOR)
        canvas.draw_surface(self._text, self.text_position)

    def on_hover(self, is_hovered: bool) -> None:
        """Highlight the label while hovered or selected."""
        color = HOVER_COLOR if is_hovered else TEXT_COLOR
        if color != self.text_color:
            self.text_color = color
            self._text = self._font.render(self.label, True, color)

    def is_mouse_over(self, mouse_position: Vec2, canvas: Canvas) -> bool:
        """Whether a window pixel falls on the box, seen through the canvas view."""
        x, y = canvas.map_pixel_to_coords(mouse_position)
        return self.shape.contains(x, y)

    def trigger(self) -> None:
        self._action()

    def set_position(self, position: Vec2) -> None:
        self.shape = FloatRect(position[0], position[1], self.shape.width, self.shape.height)
        self.text_position = self._centred_text_position()
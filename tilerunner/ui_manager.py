"""Screen-space interface elements drawn over the game world."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Protocol

import pygame

if TYPE_CHECKING:
    from tilerunner.camera import Canvas
    from tilerunner.game_data import GameData


def request_quit() -> None:
    """Ask the main loop to close the window."""
    pygame.event.post(pygame.event.Event(pygame.QUIT))


class HudElement(Protocol):
    def handle_event(self, event: Any) -> None: ...

    def update(self) -> None: ...

    def render(self, canvas: Canvas) -> None: ...


class UIManager:
    """Runs interface elements in the canvas's default (screen) view."""

    def __init__(self, canvas: Canvas, game_data: GameData) -> None:
        self.canvas = canvas
        self.game_data = game_data
        self.elements: list[HudElement] = []

    @contextmanager
    def _screen_view(self) -> Iterator[None]:
        previous = self.canvas.view
        self.canvas.view = self.canvas.default_view()
        try:
            yield
        finally:
            self.canvas.view = previous

    def handle_event(self, event: Any) -> None:
        with self._screen_view():
            for element in self.elements:
                element.handle_event(event)

    def update(self) -> None:
        for element in self.elements:
            element.update()

    def render(self) -> None:
        with self._screen_view():
            for element in self.elements:
                element.render(self.canvas)
"""The settings screen."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from tilerunner.button import CHARACTER_SIZE, Button
from tilerunner.camera import Canvas, View
from tilerunner.constants import BUTTON_HEIGHT, BUTTON_WIDTH
from tilerunner.game_data import GameData
from tilerunner.game_utils import FloatRect
from tilerunner.input_utils import handle_button_event
from tilerunner.settings import SettingsManager, get_settings
from tilerunner.state_manager import State, StateManager
from tilerunner.ui_manager import request_quit

T = TypeVar("T")

TITLE_TEXT = "Settings"
TITLE_SIZE = 48
WHITE = (255, 255, 255)


@dataclass
class UIOption(Generic[T]):
    """A selectable value shown as a labelled box."""

    value: T
    box: FloatRect
    label: str


class SettingsState(State):
    """Save or discard settings, then return to the main menu."""

    def __init__(
        self,
        game_data: GameData,
        state_manager: StateManager,
        canvas: Canvas,
        settings: SettingsManager | None = None,
        on_exit: Callable[[], object] = request_quit,
    ) -> None:
        self.game_data = game_data
        self.state_manager = state_manager
        self.canvas = canvas
        self.settings = settings if settings is not None else get_settings()
        self.on_exit = on_exit
        self.view = View()
        self.button_spacing = BUTTON_HEIGHT + 10.0
        self.selected_index = 0
        self.return_to_menu = False
        canvas.view = self.view

        self.title = game_data.font(TITLE_SIZE).render(TITLE_TEXT, True, WHITE)
        self.title_position = (0.0, 0.0)

        font = game_data.font(CHARACTER_SIZE)
        self.buttons = [
            Button("Save", font, "Save", self._save_position(), self._save),
            Button("Back", font, "Back", self._back_position(), self._back),
        ]
        self._update_positions()

    def _save_position(self) -> tuple[float, float]:
        sx, sy = self.view.size
        return (sx - BUTTON_WIDTH - 10.0, sy - self.button_spacing)

    def _back_position(self) -> tuple[float, float]:
        return (10.0, self.view.size[1] - self.button_spacing)

    def _save(self) -> None:
        self.settings.save()
        self.return_to_menu = True

    def _back(self) -> None:
        self.settings.reset()
        self.return_to_menu = True

    def _update_positions(self) -> None:
        (cx, cy), (sx, sy) = self.view.center, self.view.size
        self.title_position = (cx - sx / 2 + 25.0, cy - sy / 2 + 25.0)
        self.buttons[0].set_position(self._save_position())
        self.buttons[1].set_position(self._back_position())

    def handle_event(self, event: Any) -> None:
        self.selected_index = handle_button_event(
            event, self.buttons, self.canvas, self.selected_index, getattr(event, "pos", (0, 0))
        )

    def handle_window_resize(self, new_size: tuple[int, int]) -> None:
        self._update_positions()

    def update(self, dt: float) -> None:
        if self.return_to_menu:
            from tilerunner.main_menu import MainMenuState

            self.state_manager.change_state(
                MainMenuState(self.game_data, self.state_manager, self.canvas, on_exit=self.on_exit)
            )

    def render(self) -> None:
        self.canvas.view = self.view
        self.canvas.draw_surface(self.title, self.title_position)
        for button in self.buttons:
            button.render(self.canvas)
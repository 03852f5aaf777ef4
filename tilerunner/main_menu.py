"""The title screen."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tilerunner.button import CHARACTER_SIZE, Button
from tilerunner.camera import Canvas, View
from tilerunner.constants import BUTTON_HEIGHT, BUTTON_WIDTH
from tilerunner.game_data import GameData
from tilerunner.input_utils import handle_button_event
from tilerunner.settings_state import SettingsState
from tilerunner.state_manager import State, StateManager
from tilerunner.ui_manager import request_quit

TITLE_TEXT = "Tower Defence"
TITLE_SIZE = 48
WHITE = (255, 255, 255)


class MainMenuState(State):
    """Title and the New Game, Settings and Exit buttons."""

    def __init__(
        self,
        game_data: GameData,
        state_manager: StateManager,
        canvas: Canvas,
        on_exit: Callable[[], object] = request_quit,
    ) -> None:
        self.game_data = game_data
        self.state_manager = state_manager
        self.canvas = canvas
        self.on_exit = on_exit
        self.view = View()
        self.button_spacing = BUTTON_HEIGHT + 10.0
        self.selected_index = 0
        canvas.view = self.view

        self.title = game_data.font(TITLE_SIZE).render(TITLE_TEXT, True, WHITE)
        self.title_position = (0.0, 0.0)

        cx, cy = self.view.center
        font = game_data.font(CHARACTER_SIZE)
        spacing = self.button_spacing
        self.buttons = [
            Button("New", font, "New Game", (cx - 100.0, cy - 60.0), self._new_game),
            Button("Settings", font, "Settings", (cx - 100.0, cy + spacing), self._open_settings),
            Button("Exit", font, "Exit", (cx - 100.0, cy + spacing * 2.0), lambda: self.on_exit()),
        ]
        self._update_positions()

    def _new_game(self) -> None:
        from tilerunner.game_state import GameState

        self.game_data.reset()
        self.state_manager.change_state(GameState(self.game_data, self.state_manager, self.canvas))

    def _open_settings(self) -> None:
        self.state_manager.change_state(
            SettingsState(self.game_data, self.state_manager, self.canvas, on_exit=self.on_exit)
        )

    def _update_positions(self) -> None:
        (cx, cy), (sx, sy) = self.view.center, self.view.size
        self.title_position = (cx - sx / 2 + 25.0, cy - sy / 2 + 25.0)

        left = cx - BUTTON_WIDTH / 2
        spacing = self.button_spacing
        self.buttons[0].set_position((left, cy - spacing / 2))
        self.buttons[1].set_position((left, cy + spacing / 2))
        self.buttons[2].set_position((left, cy + spacing * 1.5))

    def handle_event(self, event: Any) -> None:
        self.selected_index = handle_button_event(
            event, self.buttons, self.canvas, self.selected_index, getattr(event, "pos", (0, 0))
        )

    def handle_window_resize(self, new_size: tuple[int, int]) -> None:
        self._update_positions()

    def update(self, dt: float) -> None:
        self.game_data.audio_manager.cleanup_sounds()

    def render(self) -> None:
        self.canvas.view = self.view
        self.canvas.draw_surface(self.title, self.title_position)
        for button in self.buttons:
            button.render(self.canvas)
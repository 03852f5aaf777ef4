"""The screen shown when a run ends."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tilerunner.button import CHARACTER_SIZE, Button
from tilerunner.camera import Canvas, View
from tilerunner.constants import BUTTON_HEIGHT, BUTTON_WIDTH
from tilerunner.game_data import GameData, GameOverConfig
from tilerunner.game_utils import FloatRect, Vec2
from tilerunner.high_scores import HighScoreManager
from tilerunner.input_utils import handle_button_event
from tilerunner.main_menu import MainMenuState
from tilerunner.state_manager import State, StateManager
from tilerunner.ui_manager import request_quit

TITLE_SIZE = 60
BUTTON_SPACING = 20.0
BACKGROUND_MARGIN = 20.0
BACKGROUND_COLOR = (0, 0, 0, 150)


class GameOverState(State):
    """A titled overlay with New Game, Main Menu and Exit buttons along the bottom."""

    def __init__(
        self,
        game_data: GameData,
        state_manager: StateManager,
        canvas: Canvas,
        config: GameOverConfig | None = None,
        on_exit: Callable[[], object] = request_quit,
    ) -> None:
        self.game_data = game_data
        self.state_manager = state_manager
        self.canvas = canvas
        self.config = config if config is not None else GameOverConfig.default()
        self.on_exit = on_exit
        self.view = View()
        self.high_scores = HighScoreManager()
        self.button_spacing = BUTTON_SPACING
        self.selected_index = 0
        canvas.view = self.view

        sx, sy = self.view.size
        self.background = FloatRect(0.0, 0.0, sx - BACKGROUND_MARGIN, sy - BACKGROUND_MARGIN)
        self.title = game_data.font(TITLE_SIZE).render(
            self.config.title_text, True, self.config.title_color
        )
        self.title_position: Vec2 = (0.0, 0.0)

        font = game_data.font(CHARACTER_SIZE)
        new_pos, menu_pos, exit_pos = self._button_positions()
        self.buttons = [
            Button("New", font, "New Game", new_pos, self._new_game),
            Button("Menu", font, "Main Menu", menu_pos, self._main_menu),
            Button("Exit", font, "Exit", exit_pos, lambda: self.on_exit()),
        ]
        self._update_positions()

    def _button_positions(self) -> tuple[Vec2, Vec2, Vec2]:
        (cx, cy), (sx, sy) = self.view.center, self.view.size
        spacing = self.button_spacing
        row_y = cy + sy / 2 - BUTTON_HEIGHT - spacing
        left_edge = cx - sx / 2
        return (
            (left_edge + spacing, row_y),
            (left_edge + spacing * 2.0 + BUTTON_WIDTH, row_y),
            (cx + sx / 2 - BUTTON_WIDTH - spacing, row_y),
        )

    def _new_game(self) -> None:
        from tilerunner.game_state import GameState

        self.game_data.reset()
        self.state_manager.replace_states(
            GameState(self.game_data, self.state_manager, self.canvas, on_exit=self.on_exit)
        )

    def _main_menu(self) -> None:
        self.game_data.reset()
        self.state_manager.replace_states(
            MainMenuState(self.game_data, self.state_manager, self.canvas, on_exit=self.on_exit)
        )

    def _update_positions(self) -> None:
        (cx, cy), (sx, sy) = self.view.center, self.view.size
        width, height = self.background.size
        self.background = FloatRect(cx - width / 2, cy - height / 2, width, height)

        top_edge = cy - sy / 2
        self.title_position = (cx - self.title.get_width() / 2, top_edge + self.button_spacing)

        for button, position in zip(self.buttons, self._button_positions()):
            button.set_position(position)

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
        self.canvas.draw_rect(self.background, BACKGROUND_COLOR)
        self.canvas.draw_surface(self.title, self.title_position)
        for button in self.buttons:
            button.render(self.canvas)
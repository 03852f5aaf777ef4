"""The pause overlay shown over a running game."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pygame

from tilerunner.button import CHARACTER_SIZE, Button
from tilerunner.camera import Canvas, View
from tilerunner.constants import BUTTON_HEIGHT, BUTTON_WIDTH
from tilerunner.game_data import GameData
from tilerunner.game_utils import FloatRect
from tilerunner.input_utils import handle_button_event, is_any_key
from tilerunner.main_menu import MainMenuState
from tilerunner.state_manager import State, StateManager
from tilerunner.ui_manager import request_quit

TITLE_TEXT = "Paused"
TITLE_SIZE = 36
WHITE = (255, 255, 255)
BACKGROUND_COLOR = (0, 0, 0, 150)
BACKGROUND_SIZE = (300.0, 300.0)
RESUME_KEYS = (pygame.K_ESCAPE, pygame.K_p)


class PauseMenuState(State):
    """Resume, quit to the main menu, or exit the game."""

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

        self.background = FloatRect(0.0, 0.0, *BACKGROUND_SIZE)
        self.title = game_data.font(TITLE_SIZE).render(TITLE_TEXT, True, WHITE)
        self.title_position = (0.0, 0.0)

        cx, cy = self.view.center
        spacing = self.button_spacing
        font = game_data.font(CHARACTER_SIZE)
        self.buttons = [
            Button("Resume", font, "Resume", (cx - 100.0, cy - spacing), self.state_manager.pop_state),
            Button("Quit", font, "Quit Game", (cx - 100.0, cy), self._quit_to_menu),
            Button("Exit", font, "Exit", (cx - 100.0, cy + spacing), lambda: self.on_exit()),
        ]
        self._update_positions()

    def _quit_to_menu(self) -> None:
        self.game_data.reset()
        self.state_manager.replace_states(
            MainMenuState(self.game_data, self.state_manager, self.canvas, on_exit=self.on_exit)
        )

    def _update_positions(self) -> None:
        cx, cy = self.view.center
        width, height = self.background.size
        self.background = FloatRect(cx - width / 2, cy - height / 2, width, height)
        self.title_position = (
            self.background.left + (width - self.title.get_width()) / 2,
            self.background.top + 20.0,
        )

        left = cx - BUTTON_WIDTH / 2
        spacing = self.button_spacing
        self.buttons[0].set_position((left, cy - spacing))
        self.buttons[1].set_position((left, cy))
        self.buttons[2].set_position((left, cy + spacing))

    def handle_event(self, event: Any) -> None:
        if event.type == pygame.KEYDOWN and is_any_key(event.key, RESUME_KEYS):
            self.state_manager.pop_state()
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
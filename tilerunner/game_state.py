"""The running game: a room, its tiles and the player."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from os import PathLike
from typing import Any

import pygame

from tilerunner.camera import Camera, Canvas
from tilerunner.constants import VIEW_HEIGHT, VIEW_WIDTH
from tilerunner.game_data import GameData
from tilerunner.game_over import GameOverState
from tilerunner.input_utils import is_any_key
from tilerunner.pause_menu import PauseMenuState
from tilerunner.physics import PhysicsSystem
from tilerunner.player import Player
from tilerunner.room import load_room
from tilerunner.state_manager import State, StateManager
from tilerunner.tiles import TileMap, create_tile_registry
from tilerunner.ui_manager import UIManager, request_quit

PAUSE_KEYS = (pygame.K_ESCAPE, pygame.K_p)
PLAYER_ENTITY = "Player"


class GameState(State):
    """Loads the current level, runs the player through it and follows them with the camera."""

    def __init__(
        self,
        game_data: GameData,
        state_manager: StateManager,
        canvas: Canvas,
        on_exit: Callable[[], object] = request_quit,
        key_state: Callable[[], Mapping[int, Any]] | None = None,
    ) -> None:
        self.game_data = game_data
        self.state_manager = state_manager
        self.canvas = canvas
        self.on_exit = on_exit
        self.key_state = key_state if key_state is not None else pygame.key.get_pressed
        self.camera = Camera(VIEW_WIDTH, VIEW_HEIGHT)
        self.tile_map = TileMap(create_tile_registry())
        self.physics = PhysicsSystem(self.tile_map)
        self.ui_manager = UIManager(canvas, game_data)
        self.level_index = 0

        game_data.player = Player()
        self._load_map(game_data.level_map(self.level_index))

    @property
    def player(self) -> Player:
        player = self.game_data.player
        if player is None:
            raise RuntimeError("no player in game data")
        return player

    def _load_map(self, filename: str | PathLike[str]) -> None:
        room = load_room(filename)
        self.game_data.room_data = room
        self.tile_map.load_from_room(room)
        self.player.position = room.entity_spawn(PLAYER_ENTITY, self.tile_map.tile_size)

    def _on_player_death(self) -> None:
        self.state_manager.push_state(
            GameOverState(self.game_data, self.state_manager, self.canvas, on_exit=self.on_exit)
        )

    def handle_event(self, event: Any) -> None:
        if event.type == pygame.KEYDOWN and is_any_key(event.key, PAUSE_KEYS):
            self.state_manager.push_state(
                PauseMenuState(self.game_data, self.state_manager, self.canvas, on_exit=self.on_exit)
            )
        self.player.handle_event(event)
        self.ui_manager.handle_event(event)

    def handle_window_resize(self, new_size: tuple[int, int]) -> None:
        self.camera.handle_resize(new_size[0], new_size[1])

    def update(self, dt: float) -> None:
        player = self.player
        player.update(dt, self.physics, self.key_state())
        self.ui_manager.update()

        room_width, room_height = self.game_data.room_data.room_dimensions(self.tile_map.tile_size)
        self.camera.follow(player.position, room_width, room_height)

    def render(self) -> None:
        self.camera.apply(self.canvas)
        self.tile_map.render(self.canvas)
        self.player.render(self.canvas)
        self.ui_manager.render()
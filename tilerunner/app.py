"""Window setup and the fixed-timestep main loop."""

from __future__ import annotations

import argparse
import faulthandler
import signal
import sys
import time
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import Any

import pygame

from tilerunner.camera import Canvas
from tilerunner.game_data import GameData
from tilerunner.main_menu import MainMenuState
from tilerunner.state_manager import StateManager

WINDOW_TITLE = "Platformer"
WINDOW_SIZE = (800, 600)
ICON_PATH = Path("resources/images/icon.png")
FIXED_TIME_STEP = 1.0 / 60.0


def load_window_icon(path: str | PathLike[str] = ICON_PATH) -> pygame.Surface:
    """Load the window icon; a missing or unreadable icon ends the program with status 1."""
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError, FileNotFoundError):
        raise SystemExit(1) from None


def _fixed_steps(accumulator: float, elapsed: float, step: float = FIXED_TIME_STEP) -> tuple[int, float]:
    """How many whole steps fit in the accumulated time, and what is left over."""
    accumulator += elapsed
    count = 0
    while accumulator >= step:
        accumulator -= step
        count += 1
    return count, accumulator


def _on_fatal_signal(signum: int, frame: Any) -> None:
    print(f"Caught signal: {signum}", file=sys.stderr)
    sys.exit(signum)


def _install_signal_handlers() -> None:
    faulthandler.enable()
    signal.signal(signal.SIGABRT, _on_fatal_signal)


def _run() -> int:
    pygame.display.set_icon(load_window_icon(ICON_PATH))
    pygame.display.set_caption(WINDOW_TITLE)
    window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    canvas = Canvas(window)

    game_data = GameData()
    manager = StateManager()
    manager.push_state(MainMenuState(game_data, manager, canvas))

    fullscreen = False
    windowed_size = window.get_size()

    def recreate_window(full: bool) -> None:
        if full:
            surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            surface = pygame.display.set_mode(windowed_size, pygame.RESIZABLE)
        pygame.display.set_icon(load_window_icon(ICON_PATH))
        canvas.surface = surface
        manager.handle_window_resize(surface.get_size())

    previous = time.perf_counter()
    accumulator = 0.0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                canvas.surface = pygame.display.get_surface()
                manager.handle_window_resize(canvas.size)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                if not fullscreen:
                    windowed_size = canvas.size
                fullscreen = not fullscreen
                recreate_window(fullscreen)
                continue
            manager.handle_event(event)

        if not running:
            break

        now = time.perf_counter()
        steps, accumulator = _fixed_steps(accumulator, now - previous)
        previous = now
        for _ in range(steps):
            manager.update(FIXED_TIME_STEP)

        canvas.surface.fill((0, 0, 0))
        manager.render()
        pygame.display.flip()

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="tilerunner", description="A tile-based platformer.")
    parser.parse_args(argv)

    _install_signal_handlers()
    pygame.init()
    try:
        return _run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
"""Keyboard helpers and keyboard/mouse navigation of button lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import pygame

from tilerunner.button import Button
from tilerunner.game_utils import Vec2

if TYPE_CHECKING:
    from tilerunner.camera import Canvas


def any_key_held(keys: Iterable[int]) -> bool:
    """Whether any of the keys is currently held down."""
    pressed = pygame.key.get_pressed()
    return any(pressed[key] for key in keys)


def is_any_key(pressed_key: int, keys: Iterable[int]) -> bool:
    """Whether a pressed key is one of the given keys."""
    return pressed_key in keys


def handle_button_event(
    event: pygame.event.Event,
    buttons: Sequence[Button],
    canvas: Canvas,
    selected_index: int,
    mouse_position: Vec2 | None = None,
) -> int:
    """Move the selection or trigger buttons for one event; returns the new selection.

    Up and Down cycle the selection, Enter triggers the selected button, moving the
    mouse selects the first button under it and a left click triggers every button
    under it. The mouse position defaults to the current pointer position.
    """
    if mouse_position is None:
        mouse_position = pygame.mouse.get_pos()
    count = len(buttons)

    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_UP:
            selected_index = (selected_index - 1 + count) % count
        elif event.key == pygame.K_DOWN:
            selected_index = (selected_index + 1) % count
        elif event.key == pygame.K_RETURN:
            buttons[selected_index].trigger()
    elif event.type == pygame.MOUSEMOTION:
        selected_index = next(
            (i for i, button in enumerate(buttons) if button.is_mouse_over(mouse_position, canvas)),
            selected_index,
        )
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
        for button in buttons:
            if button.is_mouse_over(mouse_position, canvas):
                button.trigger()

    for i, button in enumerate(buttons):
        button.on_hover(i == selected_index)
    return selected_index
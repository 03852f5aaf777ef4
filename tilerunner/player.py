"""The player-controlled character."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import pygame

from tilerunner.constants import GRAVITY, JUMP_STRENGTH
from tilerunner.game_utils import FloatRect, Vec2
from tilerunner.input_utils import is_any_key

if TYPE_CHECKING:
    from tilerunner.camera import Canvas
    from tilerunner.physics import PhysicsSystem

PLAYER_SIZE = 32
PLAYER_COLOR = (255, 255, 0)
JUMP_KEYS = (pygame.K_SPACE,)


class Player:
    """A box that runs left and right, jumps from the ground and falls under gravity."""

    def __init__(self, position: Vec2 = (0.0, 0.0), speed: float = 200.0) -> None:
        self.image = pygame.Surface((PLAYER_SIZE, PLAYER_SIZE))
        self.image.fill(PLAYER_COLOR)
        self.position: Vec2 = position
        self.speed = speed
        self.grounded = False
        self.velocity: Vec2 = (0.0, 0.0)

    @property
    def bounds(self) -> FloatRect:
        width, height = self.image.get_size()
        return FloatRect(self.position[0], self.position[1], float(width), float(height))

    def handle_event(self, event: pygame.event.Event) -> None:
        """Jump when a jump key is pressed while standing on the ground."""
        if event.type == pygame.KEYDOWN and is_any_key(event.key, JUMP_KEYS) and self.grounded:
            self.velocity = (self.velocity[0], -JUMP_STRENGTH)
            self.grounded = False

    def update(
        self,
        dt: float,
        physics: PhysicsSystem,
        pressed: Mapping[int, Any] | None = None,
    ) -> None:
        """Apply held movement keys and gravity, then move through the tile map.

        ``pressed`` maps key codes to their held state and defaults to the
        current keyboard state.
        """
        if pressed is None:
            pressed = pygame.key.get_pressed()

        if pressed[pygame.K_a]:
            vx = -self.speed
        elif pressed[pygame.K_d]:
            vx = self.speed
        else:
            vx = 0.0

        vy = self.velocity[1]
        if not self.grounded:
            vy += GRAVITY * dt

        result = physics.move_and_collide(self.bounds, (vx, vy), dt)
        self.position = result.position
        self.velocity = result.velocity
        self.grounded = result.grounded

    def render(self, canvas: Canvas) -> None:
        canvas.draw_surface(self.image, self.position)
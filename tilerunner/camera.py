"""Views, a drawing canvas that honours them, and a room-following camera."""

from __future__ import annotations

import math
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace

import pygame

from tilerunner.game_utils import FloatRect, Vec2

Color = tuple[int, ...]


def _full_viewport() -> FloatRect:
    return FloatRect(0.0, 0.0, 1.0, 1.0)


@dataclass
class View:
    """A world-space rectangle shown in a fraction (viewport) of the render target."""

    center: Vec2 = (500.0, 500.0)
    size: Vec2 = (1000.0, 1000.0)
    viewport: FloatRect = field(default_factory=_full_viewport)

    def viewport_pixels(self, target_size: tuple[int, int]) -> FloatRect:
        """The viewport in pixels of a target of the given size."""
        w, h = target_size
        vp = self.viewport
        return FloatRect(vp.left * w, vp.top * h, vp.width * w, vp.height * h)

    def map_pixel_to_coords(self, pixel: Vec2, target_size: tuple[int, int]) -> Vec2:
        """World coordinates of a pixel of the render target."""
        port = self.viewport_pixels(target_size)
        (cx, cy), (sx, sy) = self.center, self.size
        return (
            cx - sx / 2 + (pixel[0] - port.left) / port.width * sx,
            cy - sy / 2 + (pixel[1] - port.top) / port.height * sy,
        )

    def map_coords_to_pixel(self, point: Vec2, target_size: tuple[int, int]) -> Vec2:
        """Pixel position of a world point on the render target."""
        port = self.viewport_pixels(target_size)
        (cx, cy), (sx, sy) = self.center, self.size
        return (
            port.left + (point[0] - (cx - sx / 2)) / sx * port.width,
            port.top + (point[1] - (cy - sy / 2)) / sy * port.height,
        )


class Canvas:
    """A pygame surface drawn through the current view."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.view = self.default_view()

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def default_view(self) -> View:
        """A view that maps world units one to one onto the whole surface."""
        w, h = self.size
        return View(center=(w / 2, h / 2), size=(float(w), float(h)))

    def map_pixel_to_coords(self, pixel: Vec2) -> Vec2:
        return self.view.map_pixel_to_coords(pixel, self.size)

    def _pixel_rect(self, rect: FloatRect) -> pygame.Rect:
        x0, y0 = self.view.map_coords_to_pixel((rect.left, rect.top), self.size)
        x1, y1 = self.view.map_coords_to_pixel((rect.right, rect.bottom), self.size)
        left, top = round(min(x0, x1)), round(min(y0, y1))
        return pygame.Rect(left, top, round(max(x0, x1)) - left, round(max(y0, y1)) - top)

    @contextmanager
    def _clipped(self) -> Iterator[None]:
        port = self.view.viewport_pixels(self.size)
        previous = self.surface.get_clip()
        self.surface.set_clip(
            pygame.Rect(
                math.floor(port.left),
                math.floor(port.top),
                math.ceil(port.width),
                math.ceil(port.height),
            )
        )
        try:
            yield
        finally:
            self.surface.set_clip(previous)

    def draw_rect(self, rect: FloatRect, color: Color) -> None:
        """Fill a world-space rectangle; a colour with alpha below 255 is blended."""
        target = self._pixel_rect(rect)
        if target.width <= 0 or target.height <= 0:
            return
        with self._clipped():
            if len(color) == 4 and color[3] < 255:
                overlay = pygame.Surface(target.size, pygame.SRCALPHA)
                overlay.fill(color)
                self.surface.blit(overlay, target.topleft)
            else:
                pygame.draw.rect(self.surface, color[:3], target)

    def draw_surface(self, surface: pygame.Surface, position: Vec2) -> None:
        """Draw an image with its top-left corner at a world position."""
        w, h = surface.get_size()
        target = self._pixel_rect(FloatRect(position[0], position[1], float(w), float(h)))
        if target.width <= 0 or target.height <= 0:
            return
        if target.size != (w, h):
            surface = pygame.transform.scale(surface, target.size)
        with self._clipped():
            self.surface.blit(surface, target.topleft)


class Camera:
    """A fixed-size view that follows a target and letterboxes on resize."""

    def __init__(self, view_width: float, view_height: float) -> None:
        self.base_width = view_width
        self.base_height = view_height
        self.view = View(
            center=(view_width / 2, view_height / 2),
            size=(view_width, view_height),
        )

    def _clamp_center(self, target: Vec2, room_width: float, room_height: float) -> Vec2:
        half_w = self.view.size[0] / 2
        half_h = self.view.size[1] / 2
        return (
            max(half_w, min(target[0], room_width - half_w)),
            max(half_h, min(target[1], room_height - half_h)),
        )

    def follow(self, target_pos: Vec2, room_width: float, room_height: float) -> None:
        """Centre on the target without showing anything outside the room."""
        self.view.center = self._clamp_center(target_pos, room_width, room_height)

    def apply(self, canvas: Canvas) -> None:
        """Make the canvas draw through a copy of this camera's view."""
        canvas.view = replace(self.view)

    def handle_resize(self, window_width: int, window_height: int) -> None:
        """Keep the aspect ratio by letterboxing or pillarboxing the viewport."""
        window_aspect = window_width / window_height if window_height else math.inf
        view_aspect = self.base_width / self.base_height

        viewport = _full_viewport()
        if abs(window_aspect - view_aspect) > 0.001:
            if window_aspect > view_aspect:
                scale = view_aspect / window_aspect
                viewport = FloatRect((1.0 - scale) / 2, 0.0, scale, 1.0)
            else:
                scale = window_aspect / view_aspect
                viewport = FloatRect(0.0, (1.0 - scale) / 2, 1.0, scale)

        self.view.viewport = viewport
        self.view.size = (self.base_width, self.base_height)
import pygame
import pytest

from tilerunner.camera import Canvas, View
from tilerunner.game_data import GameData
from tilerunner.ui_manager import UIManager


class _Recorder:
    def __init__(self, canvas):
        self.canvas = canvas
        self.seen = []

    def handle_event(self, event):
        self.seen.append(("event", self.canvas.view))

    def update(self):
        self.seen.append(("update", None))

    def render(self, canvas):
        self.seen.append(("render", canvas.view))


@pytest.fixture
def canvas():
    return Canvas(pygame.Surface((800, 600)))


@pytest.fixture
def ui(canvas):
    return UIManager(canvas, GameData(font_path=None))


def test_render_uses_screen_view_and_restores(canvas, ui):
    world_view = View(center=(10.0, 10.0), size=(20.0, 20.0))
    canvas.view = world_view
    recorder = _Recorder(canvas)
    ui.elements.append(recorder)
    ui.render()
    assert recorder.seen == [("render", canvas.default_view())]
    assert canvas.view is world_view


def test_handle_event_uses_screen_view_and_restores(canvas, ui):
    world_view = View(center=(10.0, 10.0), size=(20.0, 20.0))
    canvas.view = world_view
    recorder = _Recorder(canvas)
    ui.elements.append(recorder)
    ui.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert recorder.seen == [("event", canvas.default_view())]
    assert canvas.view is world_view


def test_update_reaches_elements(canvas, ui):
    recorder = _Recorder(canvas)
    ui.elements.append(recorder)
    ui.update()
    assert recorder.seen == [("update", None)]


def test_empty_manager_keeps_view(canvas, ui):
    world_view = View(center=(1.0, 2.0), size=(3.0, 4.0))
    canvas.view = world_view
    ui.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    ui.render()
    assert canvas.view is world_view
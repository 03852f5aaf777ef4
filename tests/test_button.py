import pygame
import pytest

from tilerunner.button import FILL_COLOR, HOVER_COLOR, TEXT_COLOR, Button
from tilerunner.camera import Canvas
from tilerunner.constants import BUTTON_HEIGHT, BUTTON_WIDTH


@pytest.fixture
def canvas():
    pygame.font.init()
    return Canvas(pygame.Surface((960, 540)))


@pytest.fixture
def pressed():
    return []


@pytest.fixture
def button(canvas, pressed):
    return Button("New", None, "New Game", (100.0, 100.0), lambda: pressed.append("New"))


def test_trigger_runs_action(button, pressed):
    button.trigger()
    button.trigger()
    assert pressed == ["New", "New"]
    assert button.name == "New"


def test_mouse_over_uses_box_bounds(button, canvas):
    assert button.is_mouse_over((101, 101), canvas) is True
    assert button.is_mouse_over((100 + BUTTON_WIDTH - 1, 100 + BUTTON_HEIGHT - 1), canvas) is True
    assert button.is_mouse_over((100 + BUTTON_WIDTH, 101), canvas) is False
    assert button.is_mouse_over((99, 101), canvas) is False


def test_set_position_moves_box_and_label(button, canvas):
    old_text = button.text_position
    button.set_position((400.0, 300.0))
    assert button.is_mouse_over((401, 301), canvas) is True
    assert button.is_mouse_over((101, 101), canvas) is False
    assert button.text_position[0] - old_text[0] == pytest.approx(300.0)
    assert button.text_position[1] - old_text[1] == pytest.approx(200.0)


def test_label_is_centred(button):
    shape = button.shape
    text_w, text_h = button._text.get_size()
    assert button.text_position[0] + text_w / 2 == pytest.approx(shape.left + shape.width / 2)
    assert button.text_position[1] + text_h / 2 == pytest.approx(shape.top + shape.height / 2)


def test_hover_changes_label_colour(button):
    button.on_hover(True)
    assert button.text_color == HOVER_COLOR
    button.on_hover(False)
    assert button.text_color == TEXT_COLOR


def test_render_fills_box(button, canvas):
    button.render(canvas)
    assert tuple(canvas.surface.get_at((101, 101)))[:3] == FILL_COLOR
    assert tuple(canvas.surface.get_at((90, 90)))[:3] == (0, 0, 0)
from collections import defaultdict

import pygame
import pytest

from tilerunner.camera import Canvas
from tilerunner.constants import JUMP_STRENGTH
from tilerunner.physics import PhysicsSystem
from tilerunner.player import PLAYER_COLOR, Player
from tilerunner.room import RoomData
from tilerunner.tiles import TileMap, create_tile_registry

DT = 1.0 / 60.0


def _keys(*held):
    pressed = defaultdict(bool)
    for key in held:
        pressed[key] = True
    return pressed


def _world(rows):
    tile_map = TileMap(create_tile_registry())
    tile_map.load_from_room(RoomData(tile_grid=list(rows)))
    return tile_map, PhysicsSystem(tile_map)


@pytest.fixture
def open_room():
    return _world(["......", "......", "......", "######"])


def test_falls_onto_floor(open_room):
    tile_map, physics = open_room
    player = Player((0.0, 0.0))
    for _ in range(120):
        player.update(DT, physics, _keys())
    assert player.bounds.bottom == pytest.approx(3 * tile_map.tile_size)
    assert player.velocity[1] == 0.0


def test_move_right_uses_speed(open_room):
    _, physics = open_room
    player = Player((0.0, 0.0))
    player.update(DT, physics, _keys(pygame.K_d))
    assert player.velocity[0] == player.speed
    assert player.position[0] > 0.0


def test_move_left_uses_speed(open_room):
    _, physics = open_room
    player = Player((64.0, 0.0))
    player.update(DT, physics, _keys(pygame.K_a))
    assert player.velocity[0] == -player.speed
    assert player.position[0] < 64.0


def test_left_wins_over_right(open_room):
    _, physics = open_room
    player = Player((64.0, 0.0))
    player.update(DT, physics, _keys(pygame.K_a, pygame.K_d))
    assert player.velocity[0] == -player.speed


def test_no_keys_stops_horizontal(open_room):
    _, physics = open_room
    player = Player((64.0, 0.0))
    player.velocity = (123.0, 0.0)
    player.update(DT, physics, _keys())
    assert player.velocity[0] == 0.0
    assert player.position[0] == 64.0


def test_wall_blocks_movement():
    tile_map, physics = _world(["..#", "..#", "###"])
    player = Player((0.0, 32.0))
    for _ in range(60):
        player.update(DT, physics, _keys(pygame.K_d))
    assert player.bounds.right == pytest.approx(2 * tile_map.tile_size)
    assert player.velocity[0] == 0.0


def test_jump_when_grounded():
    player = Player()
    player.grounded = True
    player.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert player.velocity == (0.0, -JUMP_STRENGTH)
    assert player.grounded is False


def test_no_jump_in_air():
    player = Player()
    player.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert player.velocity == (0.0, 0.0)


def test_other_key_does_not_jump():
    player = Player()
    player.grounded = True
    player.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    assert player.velocity == (0.0, 0.0)
    assert player.grounded is True


def test_render_draws_player_colour():
    canvas = Canvas(pygame.Surface((100, 100)))
    player = Player((10.0, 20.0))
    player.render(canvas)
    assert tuple(canvas.surface.get_at((15, 25)))[:3] == PLAYER_COLOR
    assert tuple(canvas.surface.get_at((5, 5)))[:3] == (0, 0, 0)
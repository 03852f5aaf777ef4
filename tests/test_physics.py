import pytest

from tilerunner.game_utils import FloatRect
from tilerunner.physics import PhysicsSystem
from tilerunner.room import RoomData
from tilerunner.tiles import TileMap, create_tile_registry


def make_physics(rows):
    tile_map = TileMap(create_tile_registry())
    tile_map.load_from_room(RoomData(tile_grid=rows))
    return PhysicsSystem(tile_map), tile_map


def test_landing_on_floor_snaps_and_grounds():
    physics, tm = make_physics([".....", ".....", "#####"])
    size = tm.tile_size
    bounds = FloatRect(size, size, size, size)
    res = physics.move_and_collide(bounds, (0.0, 100.0), 0.1)
    assert res.grounded is True
    assert res.velocity == (0.0, 0.0)
    assert res.position == pytest.approx((bounds.left, 2 * size - bounds.height))


def test_free_movement_keeps_velocity():
    physics, tm = make_physics([".....", ".....", "....."])
    bounds = FloatRect(40.0, 10.0, 20.0, 20.0)
    res = physics.move_and_collide(bounds, (30.0, 20.0), 0.5)
    assert res.grounded is False
    assert res.velocity == (30.0, 20.0)
    assert res.position == pytest.approx((bounds.left + 30.0 * 0.5, bounds.top + 20.0 * 0.5))


def test_hitting_wall_on_the_right_stops_at_its_edge():
    physics, tm = make_physics(["...#", "...#"])
    bounds = FloatRect(60.0, 0.0, 32.0, 32.0)
    res = physics.move_and_collide(bounds, (100.0, 0.0), 0.1)
    assert res.velocity[0] == 0.0
    assert res.position[0] + bounds.width == pytest.approx(3 * tm.tile_size)
    assert res.grounded is False


def test_hitting_wall_on_the_left_stops_at_its_edge():
    physics, tm = make_physics(["#...", "#..."])
    bounds = FloatRect(40.0, 0.0, 32.0, 32.0)
    res = physics.move_and_collide(bounds, (-100.0, 0.0), 0.1)
    assert res.velocity[0] == 0.0
    assert res.position[0] == pytest.approx(tm.tile_size)


def test_hitting_ceiling_stops_upward_motion():
    physics, tm = make_physics(["###", "...", "..."])
    bounds = FloatRect(32.0, 40.0, 32.0, 32.0)
    res = physics.move_and_collide(bounds, (0.0, -100.0), 0.1)
    assert res.velocity[1] == 0.0
    assert res.position[1] == pytest.approx(tm.tile_size)
    assert res.grounded is False


def test_non_solid_tiles_do_not_block():
    physics, _ = make_physics(["...", "BBB", "..."])
    bounds = FloatRect(32.0, 0.0, 32.0, 32.0)
    res = physics.move_and_collide(bounds, (0.0, 100.0), 0.1)
    assert res.grounded is False
    assert res.velocity == (0.0, 100.0)


def test_zero_velocity_leaves_box_in_place():
    physics, _ = make_physics(["###", "###"])
    bounds = FloatRect(5.0, 6.0, 10.0, 10.0)
    res = physics.move_and_collide(bounds, (0.0, 0.0), 1.0)
    assert res.position == (bounds.left, bounds.top)
    assert res.grounded is False


def test_outside_grid_is_open_space():
    physics, _ = make_physics(["#"])
    bounds = FloatRect(500.0, 500.0, 10.0, 10.0)
    res = physics.move_and_collide(bounds, (-50.0, 50.0), 0.1)
    assert res.velocity == (-50.0, 50.0)
    assert res.grounded is False


def test_horizontal_stop_then_fall_onto_floor():
    physics, tm = make_physics(["..#", "..#", "###"])
    size = tm.tile_size
    bounds = FloatRect(size - 4.0, size, size, size)
    res = physics.move_and_collide(bounds, (100.0, 100.0), 0.1)
    assert res.velocity == (0.0, 0.0)
    assert res.grounded is True
    assert res.position[0] + size == pytest.approx(2 * size)
    assert res.position[1] + size == pytest.approx(2 * size)
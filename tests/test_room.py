import pytest

from tilerunner.room import RoomData, RoomEntity, load_room

ROOM_TEXT = """#####
#...#
#####

[Entities]
Player=1,1
Door=3,1;target=room_02;locked=yes
Bad line
"""


@pytest.fixture
def room_file(tmp_path):
    path = tmp_path / "room.txt"
    path.write_text(ROOM_TEXT, encoding="utf-8")
    return path


def test_load_room_reads_grid(room_file):
    room = load_room(room_file)
    assert room.tile_grid == ["#####", "#...#", "#####"]


def test_load_room_reads_entities_and_skips_bad_lines(room_file):
    room = load_room(room_file)
    assert [e.type for e in room.entities] == ["Player", "Door"]
    door = room.entities[1]
    assert (door.x, door.y) == (3, 1)
    assert door.properties == {"target": "room_02", "locked": "yes"}
    assert room.entities[0].properties == {}


def test_room_dimensions(room_file):
    room = load_room(room_file)
    assert room.room_dimensions(32.0) == (160.0, 96.0)


def test_empty_room_dimensions():
    assert RoomData().room_dimensions(32.0) == (0.0, 0.0)


def test_entity_spawn_scales_grid_position():
    room = RoomData(entities=[RoomEntity("Player", 2, 5)])
    x, y = room.entity_spawn("Player", 16.0)
    assert (x / 16.0, y / 16.0) == (2, 5)


def test_entity_spawn_uses_first_match():
    room = RoomData(entities=[RoomEntity("Coin", 1, 1), RoomEntity("Coin", 7, 7)])
    assert room.entity_spawn("Coin", 1.0) == (1.0, 1.0)


def test_missing_spawn_raises():
    with pytest.raises(LookupError, match="Enemy"):
        RoomData().entity_spawn("Enemy", 32.0)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError, match="Failed to open room file"):
        load_room(tmp_path / "absent.txt")


@pytest.mark.parametrize("line", ["Player=a,b", "Player=4"])
def test_bad_coordinates_raise(tmp_path, line):
    path = tmp_path / "bad.txt"
    path.write_text(f"#\n[Entities]\n{line}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_room(path)


def test_coordinates_tolerate_leading_space_and_trailing_text(tmp_path):
    path = tmp_path / "loose.txt"
    path.write_text("#\n[Entities]\nPlayer= 2,3abc\n", encoding="utf-8")
    entity = load_room(path).entities[0]
    assert (entity.x, entity.y) == (2, 3)


def test_property_without_equals_is_ignored(tmp_path):
    path = tmp_path / "props.txt"
    path.write_text("#\n[Entities]\nKey=0,0;loose;colour=red;\n", encoding="utf-8")
    assert load_room(path).entities[0].properties == {"colour": "red"}
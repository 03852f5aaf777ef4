# tilerunner

A small tile-based side-scrolling platformer built on pygame. Rooms are plain
text files: one row of tile symbols per line, followed by an `[Entities]`
section that places the player and other entities on the grid.

## Installing

```
pip install .
```

## Playing

```
tilerunner
```

The game reads its resources from paths relative to the current working
directory, so start it from a directory that contains:

- `resources/images/icon.png`: the window icon; if it cannot be loaded the
  program exits with status 1
- `resources/fonts/PressStart2P-Regular.ttf`: the font for all text
- `resources/maps/room_01.txt`: the first room, which must place a `Player`

These files are not part of the package.

The game opens on the main menu with New Game, Settings and Exit buttons. Use
Up / Down and Enter, or the mouse, to pick a button.

| Key          | Action                            |
|--------------|-----------------------------------|
| A / D        | Move left / right                 |
| Space        | Jump (when standing on ground)    |
| Escape / P   | Pause; again to resume            |
| F11          | Toggle fullscreen                 |

The pause menu offers Resume, Quit Game (back to the main menu) and Exit. The
window can be resized; the game view keeps its 960×540 aspect ratio by adding
bars at the sides or top and bottom. The game logic runs at a fixed 60 steps
per second.

## Room files

```
##########
#........#
#........#
##########
[Entities]
Player=2,1
Door=8,2;target=room_02;locked=true
```

Tile symbols:

- `#` solid ground
- `.` empty space
- `B` water (not solid, flagged as damaging)

Symbols not in this list are not drawn and are not solid. Empty lines are
skipped. Each entity line is `Type=x,y`, optionally followed by `;key=value`
pairs; lines without `=` are ignored. Coordinates are grid cells, and a tile is
32 units wide.

Rooms can also be loaded and inspected from Python:

```python
from tilerunner.room import load_room

room = load_room("resources/maps/room_01.txt")
print(room.room_dimensions(32.0))      # width and height, from the first row
print(room.entity_spawn("Player", 32.0))
```

`entity_spawn` raises `LookupError` when no entity of that type exists, and
`load_room` raises `OSError` when the file cannot be opened.

## High scores

`tilerunner.high_scores.HighScoreManager` keeps scores sorted from best to
worst, holds at most ten after `add_score`, and stores them with `save` one per
line as `name|score|timestamp`. `load` replaces the table with a file's
entries; a missing file leaves it empty.

## What the game does not do

- There is only one room, and nothing in it ends a run: water is flagged as
  damaging but does not hurt the player, and the game-over screen is never
  reached during play.
- High scores are not recorded or shown in the game.
- The settings screen has no options. Save empties `settings.txt` and Back
  re-reads it; no setting changes how the game behaves.
- No sounds or textures are loaded; tiles are coloured squares and the player
  is a yellow box.

## Running the tests

```
pip install ".[test]"
pytest
```
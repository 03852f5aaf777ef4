"""Game-wide constants and enumerations."""

from enum import Enum, IntEnum

VIEW_WIDTH = 960.0
VIEW_HEIGHT = 540.0

BUTTON_WIDTH = 250.0
BUTTON_HEIGHT = 50.0

GRAVITY = 980.0
JUMP_STRENGTH = 450.0


class TileType(IntEnum):
    """Kinds of tile a room can be built from."""

    EMPTY = 0
    SOLID = 1
    PLATFORM = 2
    WATER = 3


class PendingChange(IntEnum):
    """A queued change to the state stack."""

    NONE = 0
    PUSH = 1
    POP = 2
    CHANGE = 3
    REPLACE = 4


class AudioId(IntEnum):
    """Identifiers of the sounds the game loads."""

    AMBIENT = 0


class TextureId(Enum):
    """Identifiers of the textures the game loads."""
"""Common type aliases and enumerations.

``TileID`` handles are produced only by :class:`ascii_bros.atlas.TileAtlas`;
``PixBuf`` is the glyph content of a single tile, read row-major within the
tile block.
"""

from enum import StrEnum, auto
from typing import Tuple

TileID = int
PixBuf = str
ColorBuf = Tuple[int, ...]
Color = int


class EntityType(StrEnum):
    """Classification tag binding an actor to its sprite (informational)."""

    NONE = auto()
    MARIO = auto()
    MUSHROOM = auto()
    ONE_UP = auto()
    BOWSER = auto()
    GOOMBA = auto()
    KOOPA = auto()
    PARAKOOPA = auto()
    PIRHANA = auto()
    LAKITU = auto()
    SPINEY = auto()
    BEETLE = auto()
    BULLET_BILL = auto()
    HAMMER_BRO = auto()
    FIRE_BAR = auto()

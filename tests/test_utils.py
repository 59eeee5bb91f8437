from typing import Optional, Sequence

from ascii_bros.actor import Actor, spawn
from ascii_bros.atlas import TileAtlas
from ascii_bros.components import Behavior
from ascii_bros.rasterizer import load_sprite
from ascii_bros.sprite import Sprite
from ascii_bros.types import EntityType

# 4x4 raster whose bottom-right block repeats the top-left block
REPEATED_CORNER_ROWS = [
    "abcd",
    "efgh",
    "ijab",
    "klef",
]


def make_sprite(
    atlas: TileAtlas,
    rows: Sequence[str],
    name: str = "sprite",
    z_order: int = 0,
    entity_type: EntityType = EntityType.NONE,
) -> Sprite:
    """Rasterize literal rows (no placeholder substitution needed)."""
    return load_sprite(
        atlas,
        "\n".join(rows),
        name=name,
        z_order=z_order,
        entity_type=entity_type,
    )


def make_block_sprite(
    atlas: TileAtlas, glyph: str, z_order: int = 0, size: int = 2
) -> Sprite:
    """Solid ``size x size`` sprite of one glyph."""
    return make_sprite(atlas, [glyph * size] * size, name=glyph, z_order=z_order)


def make_actor(
    sprite: Sprite, x: float = 0.0, y: float = 0.0, behavior: Optional[Behavior] = None
) -> Actor:
    return spawn(sprite, x, y, behavior)

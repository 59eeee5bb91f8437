"""Sprite: an immutable grid of tile references.

A sprite never holds glyphs itself; it stores the ids of the atlas tiles that
make it up in row-major block order (block-row 0 left to right, then block-row
1, ...). Sprites are shared by reference between actors.

``z_order`` is the compositing priority. Sorting is ascending, so larger
values are drawn later and end up on top.
"""

from dataclasses import dataclass
from typing import Tuple

from ascii_bros.errors import ValidationError
from ascii_bros.tile import TILE_AREA, tile_stride
from ascii_bros.types import EntityType, TileID

DEFAULT_Z_ORDER = 255


def validate_dimensions(width: int, height: int, stride: int) -> None:
    """Raise ``ValidationError`` unless both sides are positive multiples of ``stride``."""
    if width <= 0 or width % stride != 0:
        raise ValidationError(
            f"Sprite's width ({width}) is not a positive multiple of {stride}"
        )
    if height <= 0 or height % stride != 0:
        raise ValidationError(
            f"Sprite's height ({height}) is not a positive multiple of {stride}"
        )


@dataclass(frozen=True)
class Sprite:
    """Drawable image expressed as atlas tile ids.

    Attributes:
        name: Source name (asset file stem), used for stable load ordering.
        width: Width in cells.
        height: Height in cells.
        tile_ids: One id per ``stride x stride`` block, row-major block order.
        z_order: Compositing priority; larger is drawn on top.
        entity_type: Informational classification tag.
        stride: Tile side length the sprite was rasterized with.
    """

    name: str
    width: int
    height: int
    tile_ids: Tuple[TileID, ...]
    z_order: int = DEFAULT_Z_ORDER
    entity_type: EntityType = EntityType.NONE
    stride: int = tile_stride(TILE_AREA)

    def __post_init__(self) -> None:
        validate_dimensions(self.width, self.height, self.stride)
        expected = self.columns * self.rows
        if len(self.tile_ids) != expected:
            raise ValidationError(
                f"Sprite {self.name!r} has {len(self.tile_ids)} tiles, expected {expected}"
            )

    @property
    def columns(self) -> int:
        """Number of tile blocks per block-row."""
        return self.width // self.stride

    @property
    def rows(self) -> int:
        """Number of block-rows."""
        return self.height // self.stride

    def block_origin(self, index: int) -> Tuple[int, int]:
        """Cell offset ``(x, y)`` of the ``index``-th block relative to the sprite origin."""
        j, i = divmod(index, self.columns)
        return i * self.stride, j * self.stride

"""Tile primitive.

A tile is the atomic renderable unit: a square ``stride x stride`` block of
glyphs with one color attribute per glyph. Glyphs are stored row-major within
the block, so for a 2x2 tile ``pixels[0:2]`` is the top row and ``pixels[2:4]``
the bottom row. Both decomposition and compositing rely on this order.

Tiles are created once by the atlas and never mutated or deleted.
"""

import math
from dataclasses import dataclass

from ascii_bros.errors import ValidationError
from ascii_bros.types import ColorBuf, PixBuf, TileID

TILE_AREA = 4
DEFAULT_COLOR = 32  # SGR green foreground


def tile_stride(tile_area: int = TILE_AREA) -> int:
    """Return the side length of a square tile of ``tile_area`` cells."""
    if tile_area <= 0:
        raise ValidationError(f"Tile area must be positive, got {tile_area}")
    stride = math.isqrt(tile_area)
    if stride * stride != tile_area:
        raise ValidationError(f"Tile area ({tile_area}) is not a perfect square")
    return stride


def default_colors(tile_area: int = TILE_AREA) -> ColorBuf:
    """Placeholder color assignment used until sprites carry color data."""
    return (DEFAULT_COLOR,) * tile_area


@dataclass(frozen=True)
class Tile:
    """Immutable glyph + color block.

    Attributes:
        id: Atlas-assigned handle.
        pixels: ``tile_area`` glyphs, row-major within the block.
        colors: Color attribute per glyph, parallel to ``pixels``.
    """

    id: TileID
    pixels: PixBuf
    colors: ColorBuf

    def __post_init__(self) -> None:
        if len(self.pixels) != len(self.colors):
            raise ValidationError(
                f"Tile {self.id} has {len(self.pixels)} glyphs but {len(self.colors)} colors"
            )

    @property
    def stride(self) -> int:
        return tile_stride(len(self.pixels))

    def rows(self) -> list[str]:
        """Split the glyph buffer into ``stride`` rows."""
        stride = self.stride
        return [self.pixels[i : i + stride] for i in range(0, len(self.pixels), stride)]

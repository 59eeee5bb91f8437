"""Sprite rasterizer and tile deduplication.

Turns a plain-text raster (one glyph per cell) into the ``tile_ids`` of a
:class:`ascii_bros.sprite.Sprite`, registering any unseen block content with
the shared :class:`ascii_bros.atlas.TileAtlas`.

Pipeline:

1. :func:`parse_raster` splits asset text into rows and substitutes the
   placeholder glyph (``@``) for a literal space.
2. :func:`rasterize` validates the grid, cuts it into ``stride x stride``
   blocks with numpy, and resolves each block against the atlas.
3. :func:`load_sprite` wraps both steps and builds the ``Sprite``.

All validation runs before the first atlas insertion, so a rejected raster
leaves the atlas untouched. For a fixed atlas state the output is fully
deterministic; ids given to new content depend on insertion order, so assets
must be loaded in a fixed order (see :mod:`ascii_bros.levels.assets`).
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from ascii_bros.atlas import TileAtlas
from ascii_bros.errors import ValidationError
from ascii_bros.sprite import DEFAULT_Z_ORDER, Sprite, validate_dimensions
from ascii_bros.tile import default_colors
from ascii_bros.types import ColorBuf, EntityType, PixBuf, TileID

logger = logging.getLogger(__name__)

PLACEHOLDER_GLYPH = "@"

GlyphArray = npt.NDArray[np.str_]


def parse_raster(text: str, placeholder: str = PLACEHOLDER_GLYPH) -> List[str]:
    """Split sprite asset text into rows.

    Line terminators are dropped (a single trailing newline does not produce
    an extra empty row) and ``placeholder`` is replaced by a space.
    """
    # Only "\n" ends a row. str.splitlines also breaks on \x1c, \x85 and \u2028.
    rows = [row[:-1] if row.endswith("\r") else row for row in text.split("\n")]
    if rows and rows[-1] == "":
        rows.pop()
    return [row.replace(placeholder, " ") for row in rows]


def validate_raster(rows: Sequence[str], stride: int) -> Tuple[int, int]:
    """Check that ``rows`` form a tileable rectangle and return ``(width, height)``."""
    if len(rows) == 0:
        raise ValidationError("Sprite raster is empty")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValidationError(
                f"Malformed raster: row {y} has {len(row)} cells, expected {width}"
            )
    height = len(rows)
    validate_dimensions(width, height, stride)
    return width, height


def split_blocks(rows: Sequence[str], stride: int) -> List[PixBuf]:
    """Cut a validated raster into block contents.

    Blocks come out in row-major block order; glyphs inside each block are
    read row-major.
    """
    grid: GlyphArray = np.array([list(row) for row in rows], dtype="<U1")
    height, width = grid.shape
    block_rows, block_cols = height // stride, width // stride
    blocks = (
        grid.reshape(block_rows, stride, block_cols, stride)
        .swapaxes(1, 2)
        .reshape(block_rows * block_cols, stride * stride)
    )
    return ["".join(block) for block in blocks]


def resolve_tile(atlas: TileAtlas, pixels: PixBuf, colors: Optional[ColorBuf] = None) -> TileID:
    """Return the id for ``pixels``, inserting it into the atlas if unseen."""
    tile_id = atlas.find_id(pixels)
    if tile_id is not None:
        return tile_id
    return atlas.insert(pixels, default_colors(atlas.tile_area) if colors is None else colors)


def rasterize(
    atlas: TileAtlas, rows: Sequence[str], colors: Optional[ColorBuf] = None
) -> Tuple[TileID, ...]:
    """Convert a raster into a row-major sequence of atlas tile ids.

    Arguments:
        atlas: Shared atlas; grows by one entry per unseen block.
        rows: Equal-length glyph rows.
        colors: Color attributes given to every newly inserted tile;
            placeholder colors when omitted. Reused tiles keep their own.

    Returns:
        Tuple[TileID, ...]: ``(width / stride) * (height / stride)`` ids.

    Raises:
        ValidationError: Empty raster, ragged rows, a side that is not a
            multiple of the atlas stride, or ``colors`` not ``tile_area`` long.
    """
    validate_raster(rows, atlas.stride)
    if colors is not None and len(colors) != atlas.tile_area:
        raise ValidationError(
            f"Tile colors have {len(colors)} entries, expected {atlas.tile_area}"
        )
    blocks = split_blocks(rows, atlas.stride)
    before = len(atlas)
    tile_ids = tuple(resolve_tile(atlas, pixels, colors) for pixels in blocks)
    logger.debug(
        "Rasterized %d blocks into %d new tiles", len(blocks), len(atlas) - before
    )
    return tile_ids


def load_sprite(
    atlas: TileAtlas,
    text: str,
    name: str = "",
    z_order: int = DEFAULT_Z_ORDER,
    entity_type: EntityType = EntityType.NONE,
    placeholder: str = PLACEHOLDER_GLYPH,
    colors: Optional[ColorBuf] = None,
) -> Sprite:
    """Build a :class:`Sprite` from already-loaded asset text."""
    rows = parse_raster(text, placeholder)
    width, height = validate_raster(rows, atlas.stride)
    return Sprite(
        name=name,
        width=width,
        height=height,
        tile_ids=rasterize(atlas, rows, colors),
        z_order=z_order,
        entity_type=entity_type,
        stride=atlas.stride,
    )

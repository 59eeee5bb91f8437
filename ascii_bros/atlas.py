"""Deduplicating tile store.

The :class:`TileAtlas` is the sole authority for tile identity. It keeps two
persistent maps side by side:

* ``id -> Tile`` for lookups while compositing.
* ``pixels -> id`` so that content lookups before insertion are hashed rather
  than a scan over every stored tile.

Ids come from a counter owned by the instance; they are dense, start at 0 and
are never reused. The atlas only grows.

The atlas is not synchronized. Callers sharing it across threads must hold a
lock across each ``find_id`` / ``insert`` pair.
"""

import logging
from typing import List, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from ascii_bros.errors import ConsistencyError, ValidationError
from ascii_bros.tile import TILE_AREA, Tile, tile_stride
from ascii_bros.types import ColorBuf, PixBuf, TileID

logger = logging.getLogger(__name__)


class TileAtlas:
    tile_area: int
    stride: int

    def __init__(self, tile_area: int = TILE_AREA):
        self.stride = tile_stride(tile_area)
        self.tile_area = tile_area
        self._tiles: PMap[TileID, Tile] = pmap()
        self._index: PMap[PixBuf, TileID] = pmap()
        self._next_id: TileID = 0

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, tile_id: object) -> bool:
        return tile_id in self._tiles

    def __repr__(self) -> str:
        return f"TileAtlas(tile_area={self.tile_area}, next_id={self._next_id})"

    @property
    def next_id(self) -> TileID:
        return self._next_id

    @property
    def tiles(self) -> PMap[TileID, Tile]:
        """Immutable snapshot of every stored tile, keyed by id."""
        return self._tiles

    def contains(self, pixels: PixBuf) -> bool:
        """Return True iff a stored tile has exactly this glyph content."""
        return pixels in self._index

    def find_id(self, pixels: PixBuf) -> Optional[TileID]:
        """Return the id of the tile holding ``pixels``, if any."""
        return self._index.get(pixels)

    def insert(self, pixels: PixBuf, colors: ColorBuf) -> TileID:
        """Store new content under the next id and return that id.

        Raises:
            ValidationError: If either buffer is not ``tile_area`` long.
            ConsistencyError: If the content is already stored.
        """
        if len(pixels) != self.tile_area:
            raise ValidationError(
                f"Tile content has {len(pixels)} glyphs, expected {self.tile_area}"
            )
        if len(colors) != self.tile_area:
            raise ValidationError(
                f"Tile colors have {len(colors)} entries, expected {self.tile_area}"
            )
        if pixels in self._index:
            raise ConsistencyError(
                f"Content {pixels!r} already stored as tile {self._index[pixels]}"
            )

        tile_id = self._next_id
        tile = Tile(id=tile_id, pixels=pixels, colors=tuple(colors))
        self._tiles = self._tiles.set(tile_id, tile)
        self._index = self._index.set(pixels, tile_id)
        self._next_id += 1
        logger.debug("Registered tile %d %r", tile_id, pixels)
        return tile_id

    def get(self, tile_id: TileID) -> Tile:
        """Look up a tile by id.

        Raises:
            ConsistencyError: If the atlas never produced ``tile_id``.
        """
        tile = self._tiles.get(tile_id)
        if tile is None:
            raise ConsistencyError(f"Tile {tile_id} is not in the atlas")
        return tile

    def dump(self) -> List[str]:
        """Debug listing, one ``<id> [g, g, ...]`` line per tile in id order."""
        lines: List[str] = []
        for tile_id in sorted(self._tiles.keys()):
            glyphs = ", ".join(self._tiles[tile_id].pixels)
            lines.append(f"{tile_id:<2} [{glyphs}]")
        return lines

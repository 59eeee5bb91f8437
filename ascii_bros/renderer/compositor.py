"""Frame compositing.

Produces one fully painted :class:`Frame` from the current actors and the
tile atlas:

1. **Cull**: keep actors whose rounded origin lies inside the display.
2. **Order**: stable sort by ``z_order`` ascending; equal priorities keep
   their list order, so the later actor wins an overlap.
3. **Blit**: paint each actor's tiles block by block, painter's algorithm,
   no transparency.

Visibility is decided by the origin cell alone. An actor whose origin is on
screen is drawn even when the rest of its sprite runs past the right or
bottom edge; cells past the edge are clipped while painting.

Missing tiles raise :class:`ascii_bros.errors.ConsistencyError`; nothing is
synthesized in their place.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np
import numpy.typing as npt

from ascii_bros.actor import Actor
from ascii_bros.atlas import TileAtlas
from ascii_bros.errors import ValidationError
from ascii_bros.tile import DEFAULT_COLOR
from ascii_bros.types import Color

GlyphGrid = npt.NDArray[np.str_]
ColorGrid = npt.NDArray[np.int32]

BLANK_GLYPH = " "


@dataclass(frozen=True, eq=False)
class Frame:
    """Rendering output for one frame.

    Attributes:
        glyphs: ``(height, width)`` array of single-character strings.
        colors: ``(height, width)`` array of color attributes.
    """

    glyphs: GlyphGrid
    colors: ColorGrid

    @property
    def width(self) -> int:
        return int(self.glyphs.shape[1])

    @property
    def height(self) -> int:
        return int(self.glyphs.shape[0])

    def lines(self) -> List[str]:
        """Glyph rows as strings, top to bottom."""
        return ["".join(row) for row in self.glyphs]

    def text(self) -> str:
        return "\n".join(self.lines())

    def same_as(self, other: "Frame") -> bool:
        return bool(
            self.glyphs.shape == other.glyphs.shape
            and np.array_equal(self.glyphs, other.glyphs)
            and np.array_equal(self.colors, other.colors)
        )


def blank_frame(
    width: int,
    height: int,
    glyph: str = BLANK_GLYPH,
    color: Color = DEFAULT_COLOR,
) -> Frame:
    """Canvas of ``width x height`` cells filled with ``glyph``."""
    if width < 0 or height < 0:
        raise ValidationError(f"Invalid frame size {width}x{height}")
    return Frame(
        glyphs=np.full((height, width), glyph, dtype="<U1"),
        colors=np.full((height, width), color, dtype=np.int32),
    )


def is_visible(actor: Actor, width: int, height: int) -> bool:
    x, y = actor.origin()
    return 0 <= x < width and 0 <= y < height


def cull(actors: Iterable[Actor], width: int, height: int) -> List[Actor]:
    """Return the actors whose origin cell lies within the display."""
    return [actor for actor in actors if is_visible(actor, width, height)]


def order(actors: Iterable[Actor]) -> List[Actor]:
    """Stable ascending sort by ``z_order`` (highest priority drawn last)."""
    return sorted(actors, key=lambda actor: actor.z_order)


def blit(frame: Frame, actor: Actor, atlas: TileAtlas) -> None:
    """Paint ``actor``'s sprite onto ``frame`` in place.

    Block ``index`` of the sprite covers the cells starting at
    ``origin + sprite.block_origin(index)``; each tile's glyphs are laid out
    row-major inside that block.
    """
    sprite = actor.sprite
    stride = sprite.stride
    ox, oy = actor.origin()

    for index, tile_id in enumerate(sprite.tile_ids):
        tile = atlas.get(tile_id)
        bx, by = sprite.block_origin(index)
        x0, y0 = ox + bx, oy + by
        x1 = min(x0 + stride, frame.width)
        y1 = min(y0 + stride, frame.height)
        if x0 >= x1 or y0 >= y1:
            continue

        glyphs = np.array(list(tile.pixels), dtype="<U1").reshape(stride, stride)
        colors = np.array(tile.colors, dtype=np.int32).reshape(stride, stride)
        frame.glyphs[y0:y1, x0:x1] = glyphs[: y1 - y0, : x1 - x0]
        frame.colors[y0:y1, x0:x1] = colors[: y1 - y0, : x1 - x0]


def composite(
    actors: Sequence[Actor],
    atlas: TileAtlas,
    width: int,
    height: int,
    background: str = BLANK_GLYPH,
    background_color: Color = DEFAULT_COLOR,
) -> Frame:
    """Cull, order and blit ``actors`` into a fresh ``width x height`` frame."""
    frame = blank_frame(width, height, background, background_color)
    for actor in order(cull(actors, width, height)):
        blit(frame, actor, atlas)
    return frame


class Compositor:
    width: int
    height: int
    background: str
    background_color: Color

    def __init__(
        self,
        width: int,
        height: int,
        background: str = BLANK_GLYPH,
        background_color: Color = DEFAULT_COLOR,
    ):
        self.width = width
        self.height = height
        self.background = background
        self.background_color = background_color

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def render(self, actors: Sequence[Actor], atlas: TileAtlas) -> Frame:
        return composite(
            actors,
            atlas,
            self.width,
            self.height,
            background=self.background,
            background_color=self.background_color,
        )

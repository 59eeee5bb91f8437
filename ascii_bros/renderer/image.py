"""Pillow rendering of composited frames.

Draws each cell's glyph onto a fixed-size cell of an RGBA image using the
standard 16-color SGR palette. Used by the Streamlit viewer and for
snapshotting frames to disk.
"""

from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ascii_bros.renderer.compositor import Frame

DEFAULT_CELL_SIZE: Tuple[int, int] = (8, 16)
BACKGROUND_RGBA: Tuple[int, int, int, int] = (0, 0, 0, 255)

RGB = Tuple[int, int, int]

SGR_PALETTE: Dict[int, RGB] = {
    30: (0, 0, 0),
    31: (205, 49, 49),
    32: (13, 188, 121),
    33: (229, 229, 16),
    34: (36, 114, 200),
    35: (188, 63, 188),
    36: (17, 168, 205),
    37: (229, 229, 229),
    90: (102, 102, 102),
    91: (241, 76, 76),
    92: (35, 209, 139),
    93: (245, 245, 67),
    94: (59, 142, 234),
    95: (214, 112, 214),
    96: (41, 184, 219),
    97: (255, 255, 255),
}
FALLBACK_RGB: RGB = SGR_PALETTE[37]


def color_to_rgb(color: int, palette: Dict[int, RGB] = SGR_PALETTE) -> RGB:
    return palette.get(color, FALLBACK_RGB)


def render(
    frame: Frame,
    cell_size: Tuple[int, int] = DEFAULT_CELL_SIZE,
    palette: Optional[Dict[int, RGB]] = None,
) -> Image.Image:
    """Render ``frame`` as an RGBA image of ``width * cell_w x height * cell_h`` pixels."""
    cell_w, cell_h = cell_size
    palette = palette or SGR_PALETTE
    img = Image.new(
        "RGBA", (frame.width * cell_w, frame.height * cell_h), BACKGROUND_RGBA
    )
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for y in range(frame.height):
        for x in range(frame.width):
            glyph = str(frame.glyphs[y, x])
            if glyph == " ":
                continue
            fill = color_to_rgb(int(frame.colors[y, x]), palette)
            draw.text((x * cell_w, y * cell_h), glyph, fill=fill + (255,), font=font)
    return img


class ImageRenderer:
    cell_size: Tuple[int, int]
    palette: Dict[int, RGB]

    def __init__(
        self,
        cell_size: Tuple[int, int] = DEFAULT_CELL_SIZE,
        palette: Optional[Dict[int, RGB]] = None,
    ):
        self.cell_size = cell_size
        self.palette = palette or SGR_PALETTE

    def render(self, frame: Frame) -> Image.Image:
        return render(frame, cell_size=self.cell_size, palette=self.palette)

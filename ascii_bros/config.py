"""Engine configuration.

A single frozen dataclass with defaults matching the classic 80x25 terminal
window. Values are validated on construction so that a bad configuration is
reported before any asset is loaded.
"""

from dataclasses import dataclass
from typing import Optional

from ascii_bros.errors import ValidationError
from ascii_bros.rasterizer import PLACEHOLDER_GLYPH
from ascii_bros.renderer.compositor import BLANK_GLYPH
from ascii_bros.tile import DEFAULT_COLOR, TILE_AREA, tile_stride


@dataclass(frozen=True)
class EngineConfig:
    """Session configuration.

    Attributes:
        tile_area: Cells per tile; must be a perfect square.
        width: Display width in cells.
        height: Display height in cells.
        target_fps: Frame rate the game loop paces itself to.
        placeholder: Asset glyph standing in for a literal space.
        background: Glyph painted where no actor covers a cell.
        background_color: Color attribute of background cells.
        sprite_dir: Directory of ``*.txt`` sprite assets, if any.
        quit_key: Key that stops the session.
    """

    tile_area: int = TILE_AREA
    width: int = 80
    height: int = 25
    target_fps: int = 30
    placeholder: str = PLACEHOLDER_GLYPH
    background: str = BLANK_GLYPH
    background_color: int = DEFAULT_COLOR
    sprite_dir: Optional[str] = None
    quit_key: str = "q"

    def __post_init__(self) -> None:
        tile_stride(self.tile_area)
        if self.width <= 0 or self.height <= 0:
            raise ValidationError(
                f"Display size must be positive, got {self.width}x{self.height}"
            )
        if self.target_fps <= 0:
            raise ValidationError(f"target_fps must be positive, got {self.target_fps}")
        if len(self.placeholder) != 1 or len(self.background) != 1:
            raise ValidationError("placeholder and background must be single glyphs")

    @property
    def frame_duration(self) -> float:
        """Target seconds per frame."""
        return 1.0 / self.target_fps

"""Position component.

Sub-cell float coordinates so that actors can move smoothly by fractions of
a cell per frame. Conversion to integer cells happens only at render time via
:meth:`Position.cell`.
"""

from dataclasses import dataclass
from typing import Tuple

from ascii_bros.utils.math import round_half_away


@dataclass(frozen=True)
class Position:
    """Display coordinate in cells.

    Attributes:
        x: Column (0 at left), fractional allowed.
        y: Row (0 at top), fractional allowed.
    """

    x: float
    y: float

    def cell(self) -> Tuple[int, int]:
        """Integer cell the position rounds to."""
        return round_half_away(self.x), round_half_away(self.y)

    def offset(self, dx: float, dy: float) -> "Position":
        return Position(self.x + dx, self.y + dy)

"""ascii_bros.components
=======================

Aggregate import surface for actor component dataclasses::

    from ascii_bros.components import Position, Drift
"""

from .properties import Behavior
from .properties import Drift
from .properties import Idle
from .properties import MovingAxis
from .properties import Patrol
from .properties import Position

__all__ = [
    "Behavior",
    "Drift",
    "Idle",
    "MovingAxis",
    "Patrol",
    "Position",
]

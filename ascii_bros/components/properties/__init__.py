"""Property component aggregates.

Immutable dataclasses describing an actor: where it is and how it moves on
its own. State changes are expressed by replacing instances between frames.
"""

from .behavior import Behavior, Drift, Idle, MovingAxis, Patrol
from .position import Position

__all__ = [
    "Behavior",
    "Drift",
    "Idle",
    "MovingAxis",
    "Patrol",
    "Position",
]

"""Autonomous behavior components.

Per-actor update logic is a closed set of tagged variants rather than stored
callables, so behavior data stays inspectable and comparable. Dispatch lives
in :func:`ascii_bros.systems.behavior.update_actor`.

Speeds are expressed in cells per second and scaled by the frame's elapsed
time, so an elapsed time of zero leaves every actor where it is.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Union


class MovingAxis(StrEnum):
    """Axis enumeration for patrol motion."""

    HORIZONTAL = auto()
    VERTICAL = auto()


@dataclass(frozen=True)
class Idle:
    """Actor never moves on its own."""


@dataclass(frozen=True)
class Drift:
    """Constant velocity motion.

    Attributes:
        vx: Horizontal speed in cells per second.
        vy: Vertical speed in cells per second.
    """

    vx: float = 3.0
    vy: float = 0.0


@dataclass(frozen=True)
class Patrol:
    """Back-and-forth motion between two bounds along one axis.

    Attributes:
        axis: Axis of travel.
        speed: Cells per second, always positive.
        lower: Smallest coordinate reached along the axis.
        upper: Largest coordinate reached along the axis.
        direction: +1 or -1, flipped when a bound is reached.
    """

    axis: MovingAxis
    speed: float
    lower: float
    upper: float
    direction: int = 1  # 1 or -1


Behavior = Union[Idle, Drift, Patrol]

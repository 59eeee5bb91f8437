"""Immutable per-frame scene snapshot.

``Scene`` plays the role of the world state: systems in
:mod:`ascii_bros.systems` take a scene and return a new one. The tile atlas
is deliberately not part of it; the atlas is session-owned and only read
while compositing.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ascii_bros.actor import Actor


@dataclass(frozen=True)
class Scene:
    """Display size plus the active actor list.

    Attributes:
        width: Display width in cells, used for culling.
        height: Display height in cells, used for culling.
        actors: Active actors in list order (the z-order tie-break).
        frame: Number of frames advanced so far.
        elapsed: Total seconds advanced so far.
    """

    width: int
    height: int
    actors: PVector[Actor] = pvector()
    frame: int = 0
    elapsed: float = 0.0

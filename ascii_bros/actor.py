"""Actor: a positioned handle to a shared sprite.

Actors are value objects. Movement produces a new ``Actor`` via
``dataclasses.replace``; the referenced :class:`Sprite` is shared, never
copied.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ascii_bros.components import Behavior, Idle, Position
from ascii_bros.sprite import Sprite
from ascii_bros.types import EntityType


@dataclass(frozen=True)
class Actor:
    """Positioned, z-ordered sprite instance.

    Attributes:
        position: Sub-cell position of the sprite's top-left corner.
        sprite: Shared immutable sprite.
        entity_type: Classification tag.
        behavior: Autonomous update variant.
    """

    position: Position
    sprite: Sprite
    entity_type: EntityType = EntityType.NONE
    behavior: Behavior = field(default_factory=Idle)

    @property
    def z_order(self) -> int:
        return self.sprite.z_order

    def origin(self) -> Tuple[int, int]:
        """Integer cell of the top-left corner for this frame."""
        return self.position.cell()


def spawn(
    sprite: Sprite,
    x: float,
    y: float,
    behavior: Optional[Behavior] = None,
) -> Actor:
    """Create an actor tagged with its sprite's entity type."""
    return Actor(
        position=Position(x, y),
        sprite=sprite,
        entity_type=sprite.entity_type,
        behavior=behavior if behavior is not None else Idle(),
    )

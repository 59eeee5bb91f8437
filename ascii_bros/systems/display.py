"""Scene bookkeeping driven by display events."""

from dataclasses import replace

from ascii_bros.actor import Actor
from ascii_bros.errors import ValidationError
from ascii_bros.scene import Scene


def resize_system(scene: Scene, width: int, height: int) -> Scene:
    """Adopt a new display size for culling."""
    if width <= 0 or height <= 0:
        raise ValidationError(f"Display size must be positive, got {width}x{height}")
    if (scene.width, scene.height) == (width, height):
        return scene
    return replace(scene, width=width, height=height)


def add_actor(scene: Scene, actor: Actor) -> Scene:
    """Append ``actor``; it draws after existing actors of equal z_order."""
    return replace(scene, actors=scene.actors.append(actor))


def remove_actor(scene: Scene, actor: Actor) -> Scene:
    """Drop the first actor equal to ``actor``; unchanged if absent."""
    if actor not in scene.actors:
        return scene
    return replace(scene, actors=scene.actors.remove(actor))

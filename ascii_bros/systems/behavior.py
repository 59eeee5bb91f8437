"""Autonomous actor movement.

One dispatch point, :func:`update_actor`, covers every behavior variant.
Movement scales with the elapsed seconds passed in, so any elapsed value
(including zero) gives a consistent result.
"""

import math
from dataclasses import replace

from pyrsistent import pvector

from ascii_bros.actor import Actor
from ascii_bros.components import Drift, Idle, MovingAxis, Patrol, Position
from ascii_bros.errors import ValidationError
from ascii_bros.scene import Scene


def _patrol(position: Position, patrol: Patrol, elapsed: float) -> tuple[Position, Patrol]:
    if patrol.direction not in (-1, 1):
        raise ValidationError(f"Patrol direction must be 1 or -1, got {patrol.direction}")
    if patrol.lower > patrol.upper:
        raise ValidationError(f"Patrol bounds reversed: {patrol.lower} > {patrol.upper}")

    horizontal = patrol.axis == MovingAxis.HORIZONTAL
    coord = position.x if horizontal else position.y
    span = patrol.upper - patrol.lower
    direction = patrol.direction

    if span == 0:
        coord = patrol.lower
    else:
        # Unfold the bounce into one lap of length 2 * span travelled forward:
        # [0, span] is the rising leg, (span, 2 * span) the falling one.
        period = 2 * span
        lap = coord - patrol.lower if direction == 1 else period - (coord - patrol.lower)
        t = math.fmod(lap + patrol.speed * elapsed, period)
        if t < 0:
            t += period
        if t <= span:
            coord, direction = patrol.lower + t, 1
        else:
            coord, direction = patrol.upper - (t - span), -1

    new_pos = replace(position, x=coord) if horizontal else replace(position, y=coord)
    return new_pos, replace(patrol, direction=direction)


def update_actor(actor: Actor, elapsed: float) -> Actor:
    """Advance ``actor`` by ``elapsed`` seconds according to its behavior."""
    if not math.isfinite(elapsed) or elapsed < 0:
        raise ValidationError(f"Elapsed time must be finite and non-negative, got {elapsed}")

    behavior = actor.behavior
    if isinstance(behavior, Idle) or elapsed == 0:
        return actor
    elif isinstance(behavior, Drift):
        return replace(
            actor,
            position=actor.position.offset(behavior.vx * elapsed, behavior.vy * elapsed),
        )
    elif isinstance(behavior, Patrol):
        position, patrol = _patrol(actor.position, behavior, elapsed)
        return replace(actor, position=position, behavior=patrol)
    else:
        raise ValidationError(f"Unknown behavior: {behavior!r}")


def behavior_system(scene: Scene, elapsed: float) -> Scene:
    """Advance every actor and the scene clock."""
    return replace(
        scene,
        actors=pvector(update_actor(actor, elapsed) for actor in scene.actors),
        frame=scene.frame + 1,
        elapsed=scene.elapsed + elapsed,
    )

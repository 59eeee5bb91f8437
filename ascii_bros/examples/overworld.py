"""Small overworld scene built from inline sprite rasters.

Used by the Streamlit viewer and the terminal entry point, and handy as a
fixture in tests. Rasters use ``@`` for blank cells.
"""

from typing import Dict, List, Optional

from ascii_bros.components import Drift, MovingAxis, Patrol
from ascii_bros.config import EngineConfig
from ascii_bros.events import EventQueue
from ascii_bros.levels.actor_spec import ActorSpec
from ascii_bros.levels.assets import Manifest
from ascii_bros.session import Display, Session
from ascii_bros.types import EntityType

SPRITES: Dict[str, str] = {
    "brick": "[]\n[]\n",
    "ground": "####\n####\n",
    "goomba": "/^^\\\n(oo)\n@/\\@\n/@@\\\n",
    "mario": "@MM@\n@oo@\n/||\\\n@/\\@\n",
    "mushroom": "/##\\\n####\n@||@\n@||@\n",
}

MANIFEST: Manifest = {
    "brick": (0, EntityType.NONE),
    "ground": (0, EntityType.NONE),
    "goomba": (10, EntityType.GOOMBA),
    "mushroom": (20, EntityType.MUSHROOM),
    "mario": (30, EntityType.MARIO),
}

GROUND_ROW = 21


def default_actors(width: int = 80) -> List[ActorSpec]:
    ground = [ActorSpec("ground", float(x), float(GROUND_ROW)) for x in range(0, width, 4)]
    bricks = [ActorSpec("brick", float(x), 13.0) for x in range(30, 40, 2)]
    return (
        ground
        + bricks
        + [
            ActorSpec("mushroom", 5.0, 5.0, Drift(vx=3.0)),
            ActorSpec(
                "goomba",
                44.0,
                float(GROUND_ROW - 4),
                Patrol(axis=MovingAxis.HORIZONTAL, speed=4.0, lower=40.0, upper=60.0),
            ),
            ActorSpec("mario", 10.0, float(GROUND_ROW - 4)),
        ]
    )


def make_session(
    config: Optional[EngineConfig] = None,
    display: Optional[Display] = None,
    events: Optional[EventQueue] = None,
) -> Session:
    """Build an unstarted session holding the overworld sprites and actors."""
    config = config or EngineConfig()
    return Session(
        config=config,
        sources=SPRITES,
        manifest=MANIFEST,
        actors=default_actors(config.width),
        display=display,
        events=events,
    )

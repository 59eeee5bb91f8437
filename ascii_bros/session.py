"""Running game session.

The :class:`Session` owns the only shared mutable piece of the engine, the
:class:`TileAtlas`, together with the loaded sprites, the current
:class:`Scene` and the input :class:`EventQueue`. It mirrors the classic
start / update split:

* :meth:`Session.on_start` loads sprite assets (directory and inline sources,
  in name order) and spawns the configured actors.
* :meth:`Session.on_update` drains pending events, advances actor behaviors by
  the elapsed time, composites a frame and hands it to the display.

Everything runs on the caller's thread; frame pacing is left to
:mod:`ascii_bros.loop`.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap

from ascii_bros.atlas import TileAtlas
from ascii_bros.config import EngineConfig
from ascii_bros.errors import ValidationError
from ascii_bros.events import Event, EventQueue, KeyPress, Resize
from ascii_bros.levels.actor_spec import ActorSpec, spawn_actors
from ascii_bros.levels.assets import LoadResult, Manifest, load_sprite_texts, read_sprite_dir
from ascii_bros.renderer.compositor import Compositor, Frame
from ascii_bros.scene import Scene
from ascii_bros.sprite import Sprite
from ascii_bros.systems.behavior import behavior_system
from ascii_bros.systems.display import resize_system

logger = logging.getLogger(__name__)


class Display(Protocol):
    def present(self, frame: Frame) -> Any: ...


class Session:
    config: EngineConfig
    atlas: TileAtlas
    events: EventQueue
    scene: Scene
    sprites: PMap[str, Sprite]
    rejected: PMap[str, str]
    running: bool

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        sources: Optional[Mapping[str, str]] = None,
        manifest: Optional[Manifest] = None,
        actors: Sequence[ActorSpec] = (),
        display: Optional[Display] = None,
        events: Optional[EventQueue] = None,
    ):
        self.config = config or EngineConfig()
        self.atlas = TileAtlas(self.config.tile_area)
        self.events = events or EventQueue()
        self.scene = Scene(width=self.config.width, height=self.config.height)
        self.sprites = pmap()
        self.rejected = pmap()
        self.running = False
        self.last_frame: Optional[Frame] = None

        self._sources: Dict[str, str] = dict(sources or {})
        self._manifest = manifest
        self._actor_specs = list(actors)
        self._display = display
        self._compositor = Compositor(
            self.config.width,
            self.config.height,
            background=self.config.background,
            background_color=self.config.background_color,
        )

    def on_start(self) -> LoadResult:
        """Load every sprite source and spawn the configured actors."""
        texts: Dict[str, str] = {}
        if self.config.sprite_dir is not None:
            texts.update(read_sprite_dir(self.config.sprite_dir))
        texts.update(self._sources)

        result = load_sprite_texts(
            self.atlas, texts, self._manifest, placeholder=self.config.placeholder
        )
        self.sprites = result.sprites
        self.rejected = result.rejected

        actors = spawn_actors(self.sprites, self._actor_specs, self.rejected.keys())
        self.scene = replace(self.scene, actors=pvector(actors))
        self.running = True
        logger.info(
            "Session started: %d sprites, %d tiles, %d actors",
            len(self.sprites),
            len(self.atlas),
            len(actors),
        )
        return result

    def handle_events(self) -> None:
        for event in self.events.drain():
            try:
                self._handle_event(event)
            except ValidationError as e:
                logger.warning("Ignoring invalid event %r: %s", event, e)

    def _handle_event(self, event: Event) -> None:
        if isinstance(event, Resize):
            self.scene = resize_system(self.scene, event.width, event.height)
            logger.debug("Display resized to %dx%d", event.width, event.height)
        elif isinstance(event, KeyPress):
            if event.key == self.config.quit_key:
                self.running = False
            else:
                logger.debug("Ignoring key %r", event.key)

    def on_update(self, elapsed: float) -> Frame:
        """Advance one frame by ``elapsed`` seconds and present it."""
        self.handle_events()
        self.scene = behavior_system(self.scene, elapsed)
        frame = self.render()
        if self._display is not None:
            self._display.present(frame)
        self.last_frame = frame
        return frame

    def render(self) -> Frame:
        """Composite the current scene without advancing it."""
        self._compositor.resize(self.scene.width, self.scene.height)
        return self._compositor.render(self.scene.actors, self.atlas)

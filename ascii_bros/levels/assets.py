"""Sprite asset loading.

Reads ``*.txt`` rasters from a directory and rasterizes them into a shared
atlas. Files are always processed in lexicographic order of their names so
that tile ids are reproducible between runs.

A raster that fails validation is rejected on its own: the error is logged
and recorded, the atlas is left as it was, and loading continues with the
next file. Read errors (``OSError``) are not caught.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from ascii_bros.atlas import TileAtlas
from ascii_bros.errors import ValidationError
from ascii_bros.rasterizer import PLACEHOLDER_GLYPH, load_sprite
from ascii_bros.sprite import DEFAULT_Z_ORDER, Sprite
from ascii_bros.types import EntityType

logger = logging.getLogger(__name__)

SPRITE_EXTENSION = ".txt"

SpriteMeta = Tuple[int, EntityType]
Manifest = Mapping[str, SpriteMeta]

DEFAULT_META: SpriteMeta = (DEFAULT_Z_ORDER, EntityType.NONE)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a batch of sprite sources.

    Attributes:
        sprites: Accepted sprites keyed by source name.
        rejected: Validation message per rejected source name.
    """

    sprites: PMap[str, Sprite] = pmap()
    rejected: PMap[str, str] = pmap()


def load_sprite_texts(
    atlas: TileAtlas,
    sources: Mapping[str, str],
    manifest: Optional[Manifest] = None,
    placeholder: str = PLACEHOLDER_GLYPH,
) -> LoadResult:
    """Rasterize in-memory ``name -> raster text`` sources in name order."""
    manifest = manifest or {}
    sprites: Dict[str, Sprite] = {}
    rejected: Dict[str, str] = {}

    for name in sorted(sources):
        z_order, entity_type = manifest.get(name, DEFAULT_META)
        try:
            sprites[name] = load_sprite(
                atlas,
                sources[name],
                name=name,
                z_order=z_order,
                entity_type=entity_type,
                placeholder=placeholder,
            )
        except ValidationError as e:
            logger.warning("Rejected sprite %r: %s", name, e)
            rejected[name] = str(e)

    return LoadResult(sprites=pmap(sprites), rejected=pmap(rejected))


def sprite_files(directory: str) -> Iterable[Tuple[str, str]]:
    """Yield ``(name, path)`` for every sprite file in ``directory``, sorted by name."""
    for entry in sorted(os.listdir(directory)):
        stem, ext = os.path.splitext(entry)
        path = os.path.join(directory, entry)
        if ext.lower() == SPRITE_EXTENSION and os.path.isfile(path):
            yield stem, path


def read_sprite_dir(directory: str) -> Dict[str, str]:
    """Read every sprite raster in ``directory`` into ``name -> text``."""
    texts: Dict[str, str] = {}
    for name, path in sprite_files(directory):
        with open(path, encoding="utf-8") as f:
            texts[name] = f.read()
    return texts


def load_sprite_dir(
    atlas: TileAtlas,
    directory: str,
    manifest: Optional[Manifest] = None,
    placeholder: str = PLACEHOLDER_GLYPH,
) -> LoadResult:
    """Read and rasterize every sprite file in ``directory``."""
    result = load_sprite_texts(
        atlas, read_sprite_dir(directory), manifest, placeholder=placeholder
    )
    logger.info(
        "Loaded %d sprites from %s (%d rejected, %d tiles in atlas)",
        len(result.sprites),
        directory,
        len(result.rejected),
        len(atlas),
    )
    return result

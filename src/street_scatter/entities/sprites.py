"""Sprite registry for scattered objects.

Resolves sprite ids to RGBA images and per-sprite metadata (vertical anchor).
Sprites are loaded from a directory of .png files, generated as placeholder
shapes, or registered directly.

Functions
---------
load_sprites_from_directory
    Load .png sprites from a directory, keyed by relative path
load_sprite_defs
    Load sprite metadata (anchors) from a YAML file
build_sprite_registry
    Build a registry from a SpriteConfig
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import jax.numpy as jnp
import yaml
from termcolor import cprint

from ..core.errors import UnresolvableAssetError
from ..utils.shapes import make_placeholder_sprite


@dataclass
class SpriteConfig:
    """Where sprite artwork and metadata come from."""

    sprite_dir: Optional[str] = None  # Directory of .png sprites (searched recursively)
    defs_path: Optional[str] = None  # YAML mapping of sprite id -> {origin_y: ...}

    # Generated sprites: id -> {shape, color, width_px, height_px, origin_y}
    placeholders: dict[str, dict[str, Any]] = field(default_factory=dict)


@dataclass(frozen=True)
class SpriteDef:
    """Sprite-level metadata."""

    id: str
    origin_y: Optional[float] = None  # Anchor row in native pixels, measured from the top


@dataclass(frozen=True, eq=False)
class Sprite:
    id: str
    image: jnp.ndarray  # (h, w, 4) uint8 RGBA

    @property
    def width(self) -> int:
        return int(self.image.shape[1])

    @property
    def height(self) -> int:
        return int(self.image.shape[0])


class SpriteRegistry:
    """
    Lookup of sprite images and metadata by id.

    Lookups are side-effect free; unknown ids raise UnresolvableAssetError.
    """

    def __init__(self):
        self._sprites: dict[str, Sprite] = {}
        self._defs: dict[str, SpriteDef] = {}

    def __contains__(self, sprite_id: str) -> bool:
        return sprite_id in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)

    def ids(self) -> list[str]:
        return sorted(self._sprites)

    def register(self, sprite_id: str, image: jnp.ndarray, origin_y: Optional[float] = None) -> Sprite:
        image = jnp.asarray(image, dtype=jnp.uint8)
        if image.ndim != 3 or image.shape[2] != 4:
            raise ValueError(f"Sprite {sprite_id!r} must be (h, w, 4) RGBA, got shape {image.shape}")
        if image.shape[0] == 0 or image.shape[1] == 0:
            raise ValueError(f"Sprite {sprite_id!r} is empty")
        sprite = Sprite(id=sprite_id, image=image)
        self._sprites[sprite_id] = sprite
        if origin_y is not None:
            self.define(sprite_id, origin_y=origin_y)
        return sprite

    def define(self, sprite_id: str, origin_y: Optional[float] = None) -> SpriteDef:
        sprite_def = SpriteDef(id=sprite_id, origin_y=origin_y)
        self._defs[sprite_id] = sprite_def
        return sprite_def

    def get(self, sprite_id: str) -> Sprite:
        try:
            return self._sprites[sprite_id]
        except KeyError:
            raise UnresolvableAssetError(sprite_id) from None

    def get_def(self, sprite_id: str) -> SpriteDef:
        """Metadata for ``sprite_id``; sprites without a definition get an empty one."""
        if sprite_id not in self._sprites:
            raise UnresolvableAssetError(sprite_id)
        return self._defs.get(sprite_id, SpriteDef(id=sprite_id))


def load_sprites_from_directory(sprite_dir: str) -> dict[str, jnp.ndarray]:
    """
    Load all .png sprites from directory.

    Sprite ids are paths relative to ``sprite_dir`` without the suffix,
    e.g. ``trees/oak`` for ``sprite_dir/trees/oak.png``.

    Args:
        sprite_dir: Directory containing .png files

    Returns:
        Mapping of sprite id to (H, W, 4) uint8 JAX array
    """
    path = Path(sprite_dir)
    if not path.exists():
        cprint(f"Warning: Sprite directory not found: {sprite_dir}", "yellow")
        return {}

    image_files = sorted(path.glob("**/*.png"))
    if not image_files:
        cprint(f"Warning: No .png files found in {sprite_dir}", "yellow")
        return {}

    from PIL import Image

    sprites = {}
    for img_path in image_files:
        sprite_id = img_path.relative_to(path).with_suffix("").as_posix()
        try:
            with Image.open(img_path) as img:
                sprites[sprite_id] = jnp.array(img.convert("RGBA"), dtype=jnp.uint8)
        except OSError as e:
            cprint(f"Error loading sprite {img_path}: {e}", "red")

    return sprites


def load_sprite_defs(defs_path: str) -> dict[str, SpriteDef]:
    """
    Load sprite metadata from YAML.

    The file maps sprite ids to fields, e.g.::

        people/walker:
          origin_y: 90
    """
    path = Path(defs_path)
    if not path.exists():
        raise FileNotFoundError(f"Sprite definitions not found: {defs_path}")
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Sprite definitions must map sprite ids to fields, got {type(raw).__name__}: {defs_path}")

    defs = {}
    for sprite_id, fields_ in raw.items():
        fields_ = fields_ or {}
        if not isinstance(fields_, dict):
            raise ValueError(f"Definition of sprite {sprite_id!r} must be a mapping, got {fields_!r}")
        origin_y = fields_.get("origin_y", fields_.get("originY"))
        defs[str(sprite_id)] = SpriteDef(id=str(sprite_id), origin_y=origin_y)
    return defs


def build_sprite_registry(config: SpriteConfig) -> SpriteRegistry:
    """Build a registry from PNGs, placeholder params and YAML definitions, in that order."""
    registry = SpriteRegistry()

    if config.sprite_dir is not None:
        for sprite_id, image in load_sprites_from_directory(config.sprite_dir).items():
            registry.register(sprite_id, image)

    for sprite_id, params in config.placeholders.items():
        image = make_placeholder_sprite(
            params.get("shape", "rect"),
            params.get("color", "gray"),
            int(params["width_px"]),
            int(params["height_px"]),
        )
        registry.register(sprite_id, image, origin_y=params.get("origin_y"))

    if config.defs_path is not None:
        for sprite_id, sprite_def in load_sprite_defs(config.defs_path).items():
            registry.define(sprite_id, origin_y=sprite_def.origin_y)

    return registry

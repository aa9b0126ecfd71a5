"""Scene entities (sprites)."""

from __future__ import annotations

from .sprites import Sprite, SpriteConfig, SpriteDef, SpriteRegistry, build_sprite_registry

__all__ = [
    "Sprite",
    "SpriteConfig",
    "SpriteDef",
    "SpriteRegistry",
    "build_sprite_registry",
]

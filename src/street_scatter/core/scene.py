"""Render a full scene: background, ground band, then every segment."""

from __future__ import annotations

from typing import Optional

import jax.numpy as jnp

from ..entities.sprites import SpriteRegistry, build_sprite_registry
from ..systems.generation.background import COLOR_PALETTE, generate_background
from ..systems.renderer import Canvas, fill_band
from ..systems.scatter import DrawCall, draw_scattered_sprites
from .config import SceneConfig


def segment_offsets(config: SceneConfig) -> list[float]:
    """Left edge of every segment in CSS pixels.

    Segments without an explicit offset start where the previous one ended.
    """
    offsets = []
    cursor = float(config.street_offset)
    for segment in config.segments:
        left = cursor if segment.offset_left is None else float(segment.offset_left)
        offsets.append(left)
        cursor = left + config.units.feet_to_screen(segment.width, config.scale)
    return offsets


def render_scene(
    config: SceneConfig,
    sprites: Optional[SpriteRegistry] = None,
    on_segment=None,
) -> jnp.ndarray:
    """
    Render ``config`` to an image.

    Args:
        config: Scene configuration
        sprites: Sprite registry; built from ``config.sprites`` when omitted
        on_segment: Optional callback(index, draw_calls) after each segment

    Returns:
        image: (H * dpi, W * dpi, 3) uint8
    """
    if sprites is None:
        sprites = build_sprite_registry(config.sprites)

    canvas = Canvas.blank(config.H, config.W, config.dpi)
    canvas.image = generate_background(config.background, canvas.height, canvas.width)

    if config.ground_thickness > 0:
        top = int(round(config.ground_level * config.dpi))
        bottom = top + int(round(config.ground_thickness * config.dpi))
        canvas.image = fill_band(canvas.image, top, bottom, COLOR_PALETTE[config.ground_color])

    for i, (segment, offset_left) in enumerate(zip(config.segments, segment_offsets(config))):
        calls: list[DrawCall] = draw_scattered_sprites(
            segment.pool,
            canvas,
            segment.width,
            offset_left,
            config.ground_level,
            segment.seed,
            segment.min_spacing,
            segment.max_spacing,
            segment.adjustment,
            config.scale,
            config.dpi,
            sprites=sprites,
            units=config.units,
        )
        if on_segment is not None:
            on_segment(i, calls)

    return canvas.image

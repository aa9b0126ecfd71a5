"""Sprite compositing onto a canvas.

draw_segment_image is the draw primitive used by the scatter adapter:
draw_segment_image(sprite_id, canvas, position, scale, resolution)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import jax
import jax.numpy as jnp

from ..entities.sprites import SpriteRegistry
from .units import UnitsConfig


@dataclass
class Canvas:
    """
    Caller-owned drawing surface.

    Attributes
    ----------
    image : jnp.ndarray
        (H * resolution, W * resolution, 3) uint8 device-pixel image
    resolution : float
        Device pixels per CSS pixel
    """

    image: jnp.ndarray
    resolution: float = 1.0

    @classmethod
    def blank(cls, H: int, W: int, resolution: float = 1.0) -> "Canvas":
        h, w = int(round(H * resolution)), int(round(W * resolution))
        return cls(image=jnp.zeros((h, w, 3), dtype=jnp.uint8), resolution=resolution)

    @property
    def height(self) -> int:
        return int(self.image.shape[0])

    @property
    def width(self) -> int:
        return int(self.image.shape[1])


def scale_sprite(sprite: jnp.ndarray, out_h: int, out_w: int) -> jnp.ndarray:
    """Resize an RGBA sprite to (out_h, out_w) with bilinear filtering."""
    if sprite.shape[0] == out_h and sprite.shape[1] == out_w:
        return sprite
    resized = jax.image.resize(sprite.astype(jnp.float32), (out_h, out_w, 4), method="linear")
    return jnp.clip(jnp.round(resized), 0.0, 255.0).astype(jnp.uint8)


def blend_sprite(img: jnp.ndarray, sprite: jnp.ndarray, x_start: int, y_start: int) -> jnp.ndarray:
    """
    Alpha-blend ``sprite`` onto ``img`` with its top-left corner at (x_start, y_start).

    Args:
        img: (H, W, 3) uint8 image
        sprite: (sprite_H, sprite_W, 4) uint8 sprite with alpha channel
        x_start: Left column in image pixels (may be off-image)
        y_start: Top row in image pixels (may be off-image)

    Returns:
        img: (H, W, 3) uint8 image with sprite rendered
    """
    H, W = img.shape[:2]
    sprite_h, sprite_w = sprite.shape[:2]

    visible = (x_start < W) and (x_start + sprite_w > 0) and (y_start < H) and (y_start + sprite_h > 0)
    if not visible:
        return img

    # Pad by sprite dimensions so a partially visible sprite always fits,
    # blend on a slice, then crop back.
    pad_h, pad_w = sprite_h, sprite_w
    padded_img = jnp.pad(img, ((pad_h, pad_h), (pad_w, pad_w), (0, 0)), mode="constant")

    py_start = y_start + pad_h
    px_start = x_start + pad_w

    bg_patch = jax.lax.dynamic_slice(padded_img, (py_start, px_start, 0), (sprite_h, sprite_w, 3))

    sprite_rgb = sprite[..., :3].astype(jnp.float32)
    sprite_alpha = sprite[..., 3:4].astype(jnp.float32) / 255.0
    bg_patch_f = bg_patch.astype(jnp.float32)

    # result = alpha * sprite + (1 - alpha) * background
    blended_patch = sprite_alpha * sprite_rgb + (1.0 - sprite_alpha) * bg_patch_f
    blended_patch_u8 = jnp.clip(jnp.round(blended_patch), 0.0, 255.0).astype(jnp.uint8)

    updated_padded = jax.lax.dynamic_update_slice(padded_img, blended_patch_u8, (py_start, px_start, 0))
    return updated_padded[pad_h:pad_h + H, pad_w:pad_w + W]


def draw_segment_image(
    sprite_id: str,
    canvas: Canvas,
    position: tuple[float, float],
    scale: float,
    resolution: float,
    *,
    sprites: SpriteRegistry,
    units: Optional[UnitsConfig] = None,
) -> None:
    """
    Draw one sprite onto ``canvas``.

    The sprite's native size is converted to feet, then to screen pixels at
    ``scale``, then to device pixels at ``resolution``.

    Args:
        sprite_id: Sprite to draw
        canvas: Surface to draw on (its image is replaced)
        position: (x, y) of the sprite's top-left corner in CSS pixels
        scale: Screen zoom multiplier
        resolution: Device pixels per CSS pixel
        sprites: Sprite registry
        units: Unit conversion config
    """
    units = units or UnitsConfig()
    sprite = sprites.get(sprite_id)

    factor = units.tile_size / units.tile_size_actual * scale * resolution
    out_w = max(1, int(round(sprite.width * factor)))
    out_h = max(1, int(round(sprite.height * factor)))

    x, y = position
    x_start = int(round(x * resolution))
    y_start = int(round(y * resolution))

    scaled = scale_sprite(sprite.image, out_h, out_w)
    canvas.image = blend_sprite(canvas.image, scaled, x_start, y_start)


def fill_band(img: jnp.ndarray, top: int, bottom: int, color: tuple[int, int, int]) -> jnp.ndarray:
    """Paint rows [top, bottom) with a solid color."""
    H = img.shape[0]
    ys = jnp.arange(H, dtype=jnp.int32)[:, None]
    band = (ys >= top) & (ys < bottom)
    return jnp.where(band[:, :, None], jnp.array(color, dtype=jnp.uint8)[None, None, :], img)

"""
Placeholder sprite rasterization (pure JAX).

Used when no sprite artwork is available: each shape is filled into an RGBA
image whose alpha channel marks the shape, so placeholders blend exactly like
PNG sprites.

Notes
-----
- Image coordinates: x rightwards, y downwards.
- Shapes fill the whole (height, width) box; the bottom row is the ground line.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import jax.numpy as jnp


SHAPE_TYPES: List[str] = [
    "rect",
    "circle",
    "ellipse",
    "triangle",
    "diamond",
    "tree",
]

SHAPE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "orange": (255, 165, 0),
    "yellow": (255, 255, 0),
    "magenta": (255, 0, 255),
    "cyan": (0, 255, 255),
    "pink": (255, 192, 203),
    "brown": (165, 42, 42),
    "purple": (128, 0, 128),
    "navy": (0, 0, 128),
    "olive": (128, 128, 0),
    "teal": (0, 128, 128),
    "forest": (34, 139, 34),
    "gray": (128, 128, 128),
    "silver": (192, 192, 192),
    "white": (255, 255, 255),
}


def _coords(H: int, W: int) -> tuple[jnp.ndarray, jnp.ndarray]:
    # Pixel centers, normalized to [0, 1] over the box.
    ys = (jnp.arange(H, dtype=jnp.float32)[:, None] + 0.5) / H
    xs = (jnp.arange(W, dtype=jnp.float32)[None, :] + 0.5) / W
    return ys, xs


def shape_mask(shape_type: str, H: int, W: int) -> jnp.ndarray:
    """(H, W) bool mask of ``shape_type`` inscribed in an H x W box."""
    ys, xs = _coords(H, W)
    dx = xs - 0.5
    dy = ys - 0.5

    s = shape_type.lower().strip()
    if s == "rect":
        return jnp.ones((H, W), dtype=bool)
    if s in ("circle", "ellipse"):
        # A circle is an ellipse in a square box.
        return (dx / 0.5) ** 2 + (dy / 0.5) ** 2 <= 1.0
    if s == "triangle":
        # Apex at top center, base along the bottom row.
        return jnp.abs(dx) <= 0.5 * ys
    if s == "diamond":
        return (jnp.abs(dx) / 0.5 + jnp.abs(dy) / 0.5) <= 1.0
    if s == "tree":
        trunk = (jnp.abs(dx) <= 0.08) & (ys >= 0.6)
        crown = ((dx / 0.5) ** 2 + ((ys - 0.35) / 0.35) ** 2) <= 1.0
        return trunk | crown
    raise ValueError(f"Unknown shape: {shape_type}. Available shapes: {SHAPE_TYPES}")


def make_placeholder_sprite(
    shape_type: str,
    color: str | tuple[int, int, int],
    width_px: int,
    height_px: int,
) -> jnp.ndarray:
    """
    Rasterize a placeholder sprite.

    Args:
        shape_type: One of SHAPE_TYPES
        color: Name from SHAPE_COLORS or an RGB tuple
        width_px: Native sprite width in pixels
        height_px: Native sprite height in pixels

    Returns:
        sprite: (height_px, width_px, 4) uint8 RGBA
    """
    if width_px <= 0 or height_px <= 0:
        raise ValueError(f"Placeholder size must be positive, got {width_px}x{height_px}")
    if isinstance(color, str):
        if color not in SHAPE_COLORS:
            raise ValueError(f"Unknown color: {color}. Available colors: {list(SHAPE_COLORS.keys())}")
        color = SHAPE_COLORS[color]

    mask = shape_mask(shape_type, int(height_px), int(width_px))
    rgb = jnp.broadcast_to(jnp.array(color, dtype=jnp.uint8)[None, None, :], (height_px, width_px, 3))
    alpha = jnp.where(mask, jnp.uint8(255), jnp.uint8(0))[:, :, None]
    return jnp.concatenate([rgb, alpha], axis=-1)

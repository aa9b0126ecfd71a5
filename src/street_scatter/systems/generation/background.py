"""
Background fill for scene canvases.

Supports:
- Black background (default, no overhead)
- Color backgrounds (solid named colors)
"""
from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp


# Predefined color palette (RGB uint8 values)
COLOR_PALETTE = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (220, 20, 60),
    "orange": (255, 140, 0),
    "yellow": (255, 215, 0),
    "green": (34, 139, 34),
    "cyan": (0, 206, 209),
    "blue": (30, 144, 255),
    "purple": (138, 43, 226),
    "pink": (255, 105, 180),
    "brown": (139, 69, 19),
    "gray": (128, 128, 128),
    "asphalt": (72, 72, 72),
    "sky": (161, 212, 238),
    "lime": (50, 205, 50),
    "teal": (0, 128, 128),
    "indigo": (75, 0, 130),
    "magenta": (255, 0, 255),
}

BACKGROUND_MODES = ("black", "color")


@dataclass
class BackgroundConfig:
    """Configuration for background rendering."""

    mode: str = "black"  # "black" or "color"
    color_name: str = "sky"  # used in color mode


def generate_color_background(color_name: str, H: int, W: int) -> jnp.ndarray:
    """
    Generate solid color background.

    Args:
        color_name: Name of color from COLOR_PALETTE
        H: Height in pixels
        W: Width in pixels

    Returns:
        color_image: (H, W, 3) uint8 solid color
    """
    if color_name not in COLOR_PALETTE:
        raise ValueError(
            f"Unknown color: {color_name}. "
            f"Available colors: {list(COLOR_PALETTE.keys())}"
        )

    rgb = COLOR_PALETTE[color_name]
    color_array = jnp.array(rgb, dtype=jnp.uint8)
    return jnp.broadcast_to(color_array[None, None, :], (H, W, 3))


def generate_background(config: BackgroundConfig, H: int, W: int) -> jnp.ndarray:
    """
    Build the base layer for a canvas.

    Args:
        config: Background configuration
        H: Height in device pixels
        W: Width in device pixels

    Returns:
        image: (H, W, 3) uint8
    """
    if config.mode == "black":
        return jnp.zeros((H, W, 3), dtype=jnp.uint8)
    if config.mode == "color":
        return generate_color_background(config.color_name, H, W)
    raise ValueError(f"Unknown background mode: {config.mode}")

"""Scatter systems (packing, scattering, rendering, units)."""

from __future__ import annotations

from .packer import (
    ObjectDescriptor,
    PlacedObject,
    PlacementResult,
    get_pool_max_width,
    pick_objects_from_pool,
)
from .renderer import Canvas, draw_segment_image
from .scatter import DrawCall, SegmentConfig, compute_draw_calls, draw_scattered_sprites, resolve_pool
from .units import UnitsConfig

__all__ = [
    "ObjectDescriptor",
    "PlacedObject",
    "PlacementResult",
    "get_pool_max_width",
    "pick_objects_from_pool",
    "Canvas",
    "draw_segment_image",
    "DrawCall",
    "SegmentConfig",
    "compute_draw_calls",
    "draw_scattered_sprites",
    "resolve_pool",
    "UnitsConfig",
]

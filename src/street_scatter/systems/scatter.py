"""Scatter sprites across a segment.

Resolves a pool of sprite ids or descriptors, packs it with the seeded packer
and draws each placement in left-to-right order.

Functions
---------
resolve_pool
    Turn raw pool entries into width-bearing descriptors
compute_draw_calls
    Pack a resolved pool and map placements to draw positions
draw_scattered_sprites
    Resolve, pack and draw in one call
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, NamedTuple, Optional, Sequence, Union

from ..core.errors import InvalidPoolError
from ..core.rng import Seed
from ..entities.sprites import SpriteRegistry
from .packer import ObjectDescriptor, get_pool_max_width, pick_objects_from_pool
from .renderer import Canvas, draw_segment_image
from .units import UnitsConfig

PoolEntry = Union[str, ObjectDescriptor, Mapping[str, Any]]

DrawFn = Callable[[str, Canvas, tuple, float, float], None]


@dataclass
class SegmentConfig:
    """Configuration for one scattered segment."""

    # Sprite ids, or mappings with at least a width (id, disallow_first, origin_y, ...)
    pool: list = field(default_factory=list)

    width: float = 10.0  # Segment width in feet
    seed: int | str = 0

    # Density
    min_spacing: float = 0.0  # Minimum gap between objects (feet)
    max_spacing: float = 0.0  # Maximum gap between objects (feet)
    adjustment: float = 0.0  # Added to every object's span (feet), negative packs denser

    # Left edge in CSS pixels; None places the segment after the previous one
    offset_left: Optional[float] = None


class DrawCall(NamedTuple):
    sprite_id: str
    x: float
    y: float
    scale: float
    resolution: float


def resolve_pool(
    entries: Sequence[PoolEntry],
    sprites: SpriteRegistry,
    units: Optional[UnitsConfig] = None,
) -> list[ObjectDescriptor]:
    """
    Resolve pool entries into descriptors.

    A bare sprite id takes its width from the sprite's native pixel width.
    Descriptors pass through as-is; mappings are converted.
    """
    units = units or UnitsConfig()
    if not entries:
        raise InvalidPoolError("Pool must contain at least one object")

    pool = []
    for entry in entries:
        if isinstance(entry, str):
            sprite = sprites.get(entry)
            pool.append(ObjectDescriptor(id=entry, width=units.px_to_feet(sprite.width)))
        elif isinstance(entry, ObjectDescriptor):
            pool.append(entry)
        elif isinstance(entry, Mapping):
            pool.append(ObjectDescriptor.from_dict(entry))
        else:
            raise InvalidPoolError(f"Unsupported pool entry type: {type(entry).__name__}")
    return pool


def compute_draw_calls(
    pool: Sequence[ObjectDescriptor],
    sprites: SpriteRegistry,
    width: float,
    offset_left: float,
    ground_level: float,
    seed: Seed,
    min_spacing: float,
    max_spacing: float,
    adjustment: float = 0.0,
    multiplier: float = 1.0,
    dpi: float = 1.0,
    units: Optional[UnitsConfig] = None,
) -> list[DrawCall]:
    """
    Pack a resolved pool and compute where every placement is drawn.

    Every sprite is looked up before anything is returned, so an unknown id
    fails the whole segment.
    """
    units = units or UnitsConfig()
    max_pool_width = get_pool_max_width(pool)
    placements, start_left = pick_objects_from_pool(
        pool,
        width,
        seed,
        min_spacing,
        max_spacing,
        max_pool_width,
        adjustment,
        padding=units.segment_padding,
    )

    calls = []
    for obj in placements:
        if obj.id is None:
            raise InvalidPoolError(f"Placed object has no sprite id: {obj}")
        sprite = sprites.get(obj.id)
        sprite_def = sprites.get_def(obj.id)

        origin_y = sprite_def.origin_y
        if origin_y is None:
            origin_y = obj.origin_y if obj.origin_y is not None else 0
        distance_from_ground = (
            multiplier * units.tile_size * ((sprite.height - origin_y) / units.tile_size_actual)
        )

        x = offset_left + (
            obj.left
            # Center on the artwork's own width
            - units.px_to_feet(sprite.width) / 2
            # Then on the object's defined hitbox against the widest in the pool
            - (max_pool_width - obj.width) / 2
            + start_left
        ) * units.tile_size * multiplier

        calls.append(DrawCall(obj.id, x, ground_level - distance_from_ground, multiplier, dpi))
    return calls


def draw_scattered_sprites(
    pool: Sequence[PoolEntry],
    canvas: Canvas,
    width: float,
    offset_left: float,
    ground_level: float,
    seed: Seed,
    min_spacing: float,
    max_spacing: float,
    adjustment: float = 0.0,
    multiplier: float = 1.0,
    dpi: float = 1.0,
    *,
    sprites: SpriteRegistry,
    units: Optional[UnitsConfig] = None,
    draw: Optional[DrawFn] = None,
) -> list[DrawCall]:
    """
    Scatter sprites from ``pool`` across a segment and draw them.

    Args:
        pool: Sprite ids, descriptors or descriptor mappings
        canvas: Surface to draw on
        width: Segment width in feet
        offset_left: Left edge of the segment in CSS pixels
        ground_level: Ground line in CSS pixels
        seed: Keeps the sequence of objects consistent across renders
        min_spacing: Minimum spacing between objects, in feet
        max_spacing: Maximum spacing between objects, in feet
        adjustment: Spacing adjustment passed to the packer, in feet
        multiplier: Screen zoom
        dpi: Device pixels per CSS pixel
        sprites: Sprite registry
        units: Unit conversion config
        draw: Draw primitive, defaults to draw_segment_image

    Returns:
        The draw calls issued, in draw order
    """
    units = units or UnitsConfig()
    if draw is None:
        def draw(sprite_id, surface, position, scale, resolution):
            draw_segment_image(sprite_id, surface, position, scale, resolution, sprites=sprites, units=units)

    resolved = resolve_pool(pool, sprites, units)
    calls = compute_draw_calls(
        resolved,
        sprites,
        width,
        offset_left,
        ground_level,
        seed,
        min_spacing,
        max_spacing,
        adjustment,
        multiplier,
        dpi,
        units,
    )

    for call in calls:
        draw(call.sprite_id, canvas, (call.x, call.y), call.scale, call.resolution)
    return calls

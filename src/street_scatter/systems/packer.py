"""Seeded selection and packing of objects along a segment.

Objects are drawn from a pool until their accumulated footprint covers the
segment, so this module both chooses objects and sets the distances between
them. The same inputs and seed always give the same layout.

Functions
---------
get_pool_max_width
    Widest object in a pool, used for center alignment
pick_objects_from_pool
    Draw and pack objects until the segment width is covered
"""
from __future__ import annotations

import math
from typing import Any, Mapping, NamedTuple, Optional, Sequence

from flax import struct

from ..core.errors import DegenerateParametersError, InvalidPoolError
from ..core.rng import Seed, seeded_stream

# Buffer area to keep clear at both edges of a segment, in feet.
SEGMENT_PADDING = 2.0

# Selection rules only apply to pools at least this large.
MIN_CONSTRAINED_POOL = 4

# Consecutive rejected draws tolerated before giving up on a pool.
MAX_REDRAWS = 10_000

_FIELD_ALIASES = {
    "disallowFirst": "disallow_first",
    "originY": "origin_y",
}


@struct.dataclass
class ObjectDescriptor:
    width: float
    id: Optional[str] = struct.field(pytree_node=False, default=None)
    disallow_first: bool = struct.field(pytree_node=False, default=False)
    origin_y: Optional[float] = struct.field(pytree_node=False, default=None)
    extra: Mapping[str, Any] = struct.field(pytree_node=False, default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ObjectDescriptor":
        """Build a descriptor from a config mapping; unknown keys go to ``extra``."""
        known = {}
        extra = {}
        for key, value in data.items():
            key = _FIELD_ALIASES.get(key, key)
            if key in ("id", "width", "disallow_first", "origin_y"):
                known[key] = value
            else:
                extra[key] = value
        if "width" not in known:
            raise InvalidPoolError(f"Pool entry has no width: {dict(data)}")
        width = known["width"]
        if isinstance(width, bool):
            raise InvalidPoolError(f"Pool entry width must be a number, got {width!r}")
        try:
            width = float(width)
        except (TypeError, ValueError):
            raise InvalidPoolError(f"Pool entry width must be a number, got {width!r}") from None
        disallow_first = known.get("disallow_first", False)
        if not isinstance(disallow_first, bool):
            raise InvalidPoolError(f"disallow_first must be true or false, got {disallow_first!r}")
        return cls(
            width=width,
            id=known.get("id"),
            disallow_first=disallow_first,
            origin_y=known.get("origin_y"),
            extra=extra,
        )

    def place(self, left: float, index: int) -> "PlacedObject":
        return PlacedObject(
            width=self.width,
            left=left,
            id=self.id,
            disallow_first=self.disallow_first,
            origin_y=self.origin_y,
            extra=dict(self.extra),
            index=index,
        )


@struct.dataclass
class PlacedObject:
    width: float
    left: float
    id: Optional[str] = struct.field(pytree_node=False, default=None)
    disallow_first: bool = struct.field(pytree_node=False, default=False)
    origin_y: Optional[float] = struct.field(pytree_node=False, default=None)
    extra: Mapping[str, Any] = struct.field(pytree_node=False, default_factory=dict)
    index: int = struct.field(pytree_node=False, default=-1)  # position in the pool


class PlacementResult(NamedTuple):
    placements: tuple[PlacedObject, ...]
    start_left: float


def get_pool_max_width(pool: Sequence[ObjectDescriptor]) -> float:
    """
    Maximum width in a pool.

    This number is used during rendering to adjust sprites for center alignment.
    """
    if not pool:
        raise InvalidPoolError("Pool must contain at least one object")
    return max(obj.width for obj in pool)


def _validate(
    pool: Sequence[ObjectDescriptor],
    target_width: float,
    min_spacing: float,
    max_spacing: float,
    max_pool_width: float,
    spacing_adjustment: float,
) -> None:
    if not pool:
        raise InvalidPoolError("Pool must contain at least one object")
    for i, obj in enumerate(pool):
        if not math.isfinite(obj.width) or obj.width <= 0:
            raise InvalidPoolError(f"Pool entry {i} ({obj.id!r}) has non-positive width {obj.width}")
    if len(pool) >= MIN_CONSTRAINED_POOL and all(obj.disallow_first for obj in pool):
        raise InvalidPoolError("Every pool entry disallows being first; no valid first object exists")

    if not target_width > 0:
        raise DegenerateParametersError(f"target_width must be positive, got {target_width}")
    if min_spacing < 0:
        raise DegenerateParametersError(f"min_spacing must be >= 0, got {min_spacing}")
    if max_spacing < min_spacing:
        raise DegenerateParametersError(
            f"max_spacing ({max_spacing}) must be >= min_spacing ({min_spacing})"
        )
    widest = get_pool_max_width(pool)
    if max_pool_width < widest:
        raise DegenerateParametersError(
            f"max_pool_width ({max_pool_width}) is smaller than the widest pool entry ({widest})"
        )
    smallest_step = min(obj.width for obj in pool) + min_spacing + spacing_adjustment
    if smallest_step <= 0:
        raise DegenerateParametersError(
            f"spacing_adjustment ({spacing_adjustment}) allows non-advancing steps"
        )


def pick_objects_from_pool(
    pool: Sequence[ObjectDescriptor],
    target_width: float,
    seed: Seed,
    min_spacing: float,
    max_spacing: float,
    max_pool_width: float,
    spacing_adjustment: float = 0.0,
    *,
    padding: float = SEGMENT_PADDING,
) -> PlacementResult:
    """
    Draw from ``pool`` until the segment width is covered.

    Args:
        pool: Objects to draw from (never mutated)
        target_width: Width of the segment to populate, in feet
        seed: Seed for the draw sequence
        min_spacing: Minimum spacing between objects, in feet
        max_spacing: Maximum spacing between objects, in feet
        max_pool_width: Widest object in the pool (see ``get_pool_max_width``)
        spacing_adjustment: Extra spacing added to every object, in feet
        padding: Clear buffer at both ends of the segment, in feet

    Returns:
        PlacementResult(placements, start_left)
    """
    _validate(pool, target_width, min_spacing, max_spacing, max_pool_width, spacing_adjustment)

    stream = seeded_stream(seed)
    n = len(pool)

    def draw_index() -> int:
        return min(int(math.floor(next(stream) * n)), n - 1)

    placements: list[PlacedObject] = []
    running_width = 0.0
    previous_index: Optional[int] = None
    last_width = 0.0

    while not placements or running_width < target_width - padding * 2:
        index = draw_index()

        if n >= MIN_CONSTRAINED_POOL:
            # Never the same object twice in a row, and some objects look odd
            # on their own so they may not open a sequence.
            redraws = 0
            while index == previous_index or (not placements and pool[index].disallow_first):
                redraws += 1
                if redraws > MAX_REDRAWS:
                    raise InvalidPoolError(
                        f"Gave up after {MAX_REDRAWS} draws without a valid object"
                    )
                index = draw_index()

        placed = pool[index].place(running_width, index)

        # Space for this object plus a seeded gap before the next one.
        last_width = (
            placed.width
            + min_spacing
            + next(stream) * (max_spacing - min_spacing)
            + spacing_adjustment
        )
        running_width += last_width

        placements.append(placed)
        previous_index = index

    # No object follows the last one, so drop its trailing gap.
    total_width = running_width - last_width

    first_correction = (max_pool_width - placements[0].width) / 2
    last_correction = (max_pool_width - placements[-1].width) / 2

    start_left = (target_width - total_width) / 2
    if len(placements) == 1:
        start_left += first_correction
    else:
        start_left += (first_correction + last_correction) / 2

    return PlacementResult(tuple(placements), start_left)

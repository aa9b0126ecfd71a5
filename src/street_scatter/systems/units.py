from __future__ import annotations

from flax import struct


@struct.dataclass
class UnitsConfig:
    # Screen pixels per foot at multiplier 1
    tile_size: int = 12
    # Native sprite pixels per foot (sprite artwork is drawn at 2x)
    tile_size_actual: int = 24

    # Buffer kept free at both ends of a segment, in feet
    segment_padding: float = 2.0

    def px_to_feet(self, px: float) -> float:
        return px / self.tile_size_actual

    def feet_to_screen(self, feet: float, multiplier: float = 1.0) -> float:
        return feet * self.tile_size * multiplier

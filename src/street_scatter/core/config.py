"""Scene configuration composition.

SceneConfig composes all subsystem configurations into a single dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..entities.sprites import SpriteConfig
from ..systems.generation.background import BackgroundConfig
from ..systems.scatter import SegmentConfig
from ..systems.units import UnitsConfig


@dataclass
class SceneConfig:
    """Complete scene configuration.

    A scene is a row of segments drawn left to right over a background,
    each segment scattered from its own pool and seed.

    Attributes
    ----------
    H : int
        Canvas height in CSS pixels (default: 128)
    W : int
        Canvas width in CSS pixels (default: 512)
    scale : float
        Screen zoom multiplier applied to sprites and feet (default: 1.0)
    dpi : float
        Device pixels per CSS pixel (default: 1.0)
    ground_level : float
        Ground line in CSS pixels; defaults to the top of the ground band
    ground_thickness : int
        Height of the ground band in CSS pixels, 0 to disable (default: 8)
    ground_color : str
        COLOR_PALETTE name of the ground band (default: "asphalt")
    street_offset : float
        Left edge of the first auto-placed segment in CSS pixels (default: 0.0)
    background : BackgroundConfig
        Background fill config
    units : UnitsConfig
        Feet/pixel conversion and segment padding
    sprites : SpriteConfig
        Sprite sources
    segments : list[SegmentConfig]
        Segments to scatter, in draw order

    Examples
    --------
    >>> from street_scatter.systems.scatter import SegmentConfig
    >>> cfg = SceneConfig(segments=[SegmentConfig(pool=["tree"], width=20, seed=7)])
    """

    H: int = 128
    W: int = 512
    scale: float = 1.0
    dpi: float = 1.0

    ground_level: Optional[float] = None
    ground_thickness: int = 8
    ground_color: str = "asphalt"
    street_offset: float = 0.0

    background: BackgroundConfig = None
    units: UnitsConfig = None
    sprites: SpriteConfig = None
    segments: list[SegmentConfig] = field(default_factory=list)

    def __post_init__(self):
        """Initialize default sub-configs if not provided."""
        if self.background is None:
            self.background = BackgroundConfig()

        if self.units is None:
            self.units = UnitsConfig()

        if self.sprites is None:
            self.sprites = SpriteConfig()

        if self.ground_level is None:
            self.ground_level = float(self.H - self.ground_thickness)

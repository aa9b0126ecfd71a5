"""street-scatter: deterministic sprite scattering along street segments.

Given a pool of objects with known widths and a segment width, pick a
reproducible sequence of objects, space them out, center the result and draw
it. The same seed always yields the same layout.

Quickstart
----------
```python
from street_scatter import ObjectDescriptor, pick_objects_from_pool

pool = [ObjectDescriptor(width=2), ObjectDescriptor(width=3)]
placements, start_left = pick_objects_from_pool(
    pool, target_width=20, seed=42, min_spacing=1, max_spacing=3, max_pool_width=3,
)
```

Rendering a scene
-----------------
```python
from street_scatter import load_config_from_yaml, render_scene

config = load_config_from_yaml("src/street_scatter/configs/default_config.yaml")
image = render_scene(config)  # (H, W, 3) uint8
```

Modules
-------
core
    Errors, seeded stream, scene config and scene renderer
systems
    Packer, scatter adapter, draw primitive, units
entities
    Sprite registry
utils
    Placeholder shapes, YAML config loading
"""

from __future__ import annotations

# Core API
from .core import (
    DegenerateParametersError,
    InvalidPoolError,
    SceneConfig,
    ScatterError,
    SeededStream,
    UnresolvableAssetError,
    render_scene,
    seeded_stream,
)
from .entities import SpriteConfig, SpriteRegistry, build_sprite_registry
from .systems import (
    Canvas,
    DrawCall,
    ObjectDescriptor,
    PlacedObject,
    PlacementResult,
    SegmentConfig,
    UnitsConfig,
    draw_scattered_sprites,
    draw_segment_image,
    get_pool_max_width,
    pick_objects_from_pool,
    resolve_pool,
)
from .utils.config_loader import load_config_from_yaml


__version__ = "0.1.0"

__all__ = [
    # Packing
    "ObjectDescriptor",
    "PlacedObject",
    "PlacementResult",
    "get_pool_max_width",
    "pick_objects_from_pool",
    "SeededStream",
    "seeded_stream",
    # Scattering and drawing
    "Canvas",
    "DrawCall",
    "SegmentConfig",
    "UnitsConfig",
    "resolve_pool",
    "draw_scattered_sprites",
    "draw_segment_image",
    # Sprites
    "SpriteConfig",
    "SpriteRegistry",
    "build_sprite_registry",
    # Scenes
    "SceneConfig",
    "render_scene",
    "load_config_from_yaml",
    # Errors
    "ScatterError",
    "InvalidPoolError",
    "DegenerateParametersError",
    "UnresolvableAssetError",
]

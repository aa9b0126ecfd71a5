"""Core scene components.

This package contains:
- Error types raised by the pipeline
- The seeded uniform stream used for all random draws
- Scene configuration (SceneConfig) and the scene renderer
"""

from __future__ import annotations

from .config import SceneConfig
from .errors import DegenerateParametersError, InvalidPoolError, ScatterError, UnresolvableAssetError
from .rng import SeededStream, seeded_stream
from .scene import render_scene, segment_offsets

__all__ = [
    "SceneConfig",
    "render_scene",
    "segment_offsets",
    "SeededStream",
    "seeded_stream",
    "ScatterError",
    "InvalidPoolError",
    "DegenerateParametersError",
    "UnresolvableAssetError",
]

"""Procedural generation helpers (backgrounds)."""

from __future__ import annotations

from .background import COLOR_PALETTE, BackgroundConfig, generate_background

__all__ = [
    "COLOR_PALETTE",
    "BackgroundConfig",
    "generate_background",
]

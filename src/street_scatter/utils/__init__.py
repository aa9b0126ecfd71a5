"""Utility functions and helpers."""

from __future__ import annotations

from .shapes import SHAPE_COLORS, SHAPE_TYPES, make_placeholder_sprite

__all__ = [
    "SHAPE_TYPES",
    "SHAPE_COLORS",
    "make_placeholder_sprite",
]

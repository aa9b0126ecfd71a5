"""Exception types raised by the scatter pipeline.

All failures surface synchronously to the caller; nothing is retried and no
partial layout is drawn.
"""

from __future__ import annotations

from typing import Optional


class ScatterError(Exception):
    """Base class for all scatter errors."""


class InvalidPoolError(ScatterError, ValueError):
    """Pool is empty, holds a non-positive width, or cannot satisfy the selection rules."""


class DegenerateParametersError(ScatterError, ValueError):
    """Packing parameters that would produce a degenerate or endless layout."""


class UnresolvableAssetError(ScatterError, KeyError):
    """A sprite id could not be found by the sprite registry."""

    def __init__(self, sprite_id: str, message: Optional[str] = None):
        self.sprite_id = sprite_id
        super().__init__(message or f"Unknown sprite id: {sprite_id!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])

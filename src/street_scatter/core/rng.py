"""Seeded uniform stream backed by numpy's PCG64 bit generator.

The packer needs values in [0, 1) consumed strictly in order, the same way a
seeded ``random()`` would be called. Values come from
``numpy.random.Generator(PCG64(seed))``, whose stream is fixed by numpy's
compatibility policy, so a given seed yields the same sequence on any platform
and numpy release. Device-side randomness (JAX keys) is not used here because
its values depend on JAX version and configuration.
"""

from __future__ import annotations

import hashlib
from typing import Union

import numpy as np

Seed = Union[int, str]

# Values drawn from the generator per refill. Each double consumes one 64-bit
# output, so the block size does not change the sequence.
BLOCK_SIZE = 64


def normalize_seed(seed: Seed) -> int:
    """Map an int or string seed onto a non-negative 31-bit integer."""
    if isinstance(seed, bool):
        raise TypeError("seed must be an int or a string, not bool")
    if isinstance(seed, str):
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        return int.from_bytes(digest[:4], "big") % (2**31)
    if isinstance(seed, (int, np.integer)):
        return int(seed) % (2**31)
    raise TypeError(f"seed must be an int or a string, got {type(seed).__name__}")


class SeededStream:
    """
    Iterator over reproducible floats in [0, 1).

    Args:
        seed: int or string seed
        block_size: number of values generated per refill

    Examples
    --------
    >>> stream = SeededStream(42)
    >>> round(next(stream), 6)
    0.773956
    """

    def __init__(self, seed: Seed, block_size: int = BLOCK_SIZE):
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.seed = seed
        self._generator = np.random.Generator(np.random.PCG64(normalize_seed(seed)))
        self._block_size = int(block_size)
        self._block = np.empty((0,), dtype=np.float64)
        self._pos = 0
        self.draws = 0

    def _refill(self) -> None:
        self._block = self._generator.random(self._block_size)
        self._pos = 0

    def __iter__(self) -> "SeededStream":
        return self

    def __next__(self) -> float:
        if self._pos >= self._block.shape[0]:
            self._refill()
        value = float(self._block[self._pos])
        self._pos += 1
        self.draws += 1
        return value

    def random(self) -> float:
        return next(self)


def seeded_stream(seed: Seed) -> SeededStream:
    """Return a fresh stream for ``seed``; streams are never shared between calls."""
    return SeededStream(seed)

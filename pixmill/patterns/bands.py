"""Band arithmetic shared by the pattern generators."""
from __future__ import annotations

import math

import numpy as np

Array = np.ndarray


def band_size(extent: int, bands: int) -> int:
    """Width of one band: ``ceil(extent / bands)``."""
    return int(math.ceil(extent / float(bands)))


def band_index(extent: int, bands: int) -> Array:
    """Band number of every position ``0..extent-1`` along one axis.

    A new band starts at every non-zero position divisible by
    ``band_size(extent, bands)``; when ``extent`` is not a multiple of
    ``bands`` the last band comes out shorter than the others.
    """
    return np.arange(extent, dtype=np.int64) // band_size(extent, bands)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def paint(indices: Array, palette) -> Array:
    """Map an array of palette indices to an ``(..., 3)`` uint8 colour array."""
    colors = np.asarray(palette, dtype=np.uint8)
    return colors[indices]


__all__ = ["band_size", "band_index", "round_half_up", "paint"]

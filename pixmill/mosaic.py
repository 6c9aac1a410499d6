"""Seed-based mosaic.

A fixed number of seed pixels is chosen at random. Every pixel joins its
nearest seed (Euclidean distance over coordinates, lowest seed index on
ties) and the seed folds the pixel's colour into a running mean. Seeds
never move: this is one streaming pass, not k-means. Finally every pixel
is painted with its seed's mean colour.

Cost is O(H * W * seeds); nearest-seed search is vectorized one image row
at a time so memory stays at O(W * seeds).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Integral
from typing import List, Optional, Sequence, Union

import numpy as np

from .buffer import PixelBuffer, round_half_up
from .errors import InvalidSeedCount

Array = np.ndarray
RandomLike = Union[None, int, np.random.Generator]

logger = logging.getLogger(__name__)


@dataclass
class Seed:
    """A cluster centre with a fixed position and a running mean colour."""

    row: int
    col: int
    mean: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    count: int = 0

    def absorb(self, color: Sequence[float]) -> None:
        """Fold one pixel into the running mean."""
        n = self.count
        self.mean = [(m * n + float(c)) / (n + 1) for m, c in zip(self.mean, color)]
        self.count = n + 1


def _as_generator(rng: RandomLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def place_seeds(height: int, width: int, seed_count: int, rng: RandomLike = None) -> List[Seed]:
    """Pick ``seed_count`` coordinates uniformly over the image; duplicates allowed."""
    if isinstance(seed_count, bool) or not isinstance(seed_count, Integral) or seed_count < 1:
        raise InvalidSeedCount("Error: Not a valid number of seeds.")
    gen = _as_generator(rng)
    rows = gen.integers(0, height, size=int(seed_count))
    cols = gen.integers(0, width, size=int(seed_count))
    return [Seed(int(r), int(c)) for r, c in zip(rows, cols)]


def assign_seeds(height: int, width: int, seeds: Sequence[Seed]) -> Array:
    """Return an (H, W) array holding the index of each pixel's nearest seed."""
    seed_rows = np.array([s.row for s in seeds], dtype=np.float64)
    seed_cols = np.array([s.col for s in seeds], dtype=np.float64)
    cols = np.arange(width, dtype=np.float64)
    labels = np.empty((height, width), dtype=np.int64)
    dc2 = (cols[:, None] - seed_cols[None, :]) ** 2
    for y in range(height):
        d2 = dc2 + (y - seed_rows[None, :]) ** 2
        # argmin keeps the first minimum, so the lowest seed index wins ties
        labels[y] = np.argmin(d2, axis=1)
    return labels


def mosaic(buffer: PixelBuffer, seed_count: int, rng: RandomLike = None) -> PixelBuffer:
    """Turn a buffer into a mosaic of ``seed_count`` flat-coloured cells.

    Parameters
    ----------
    buffer : PixelBuffer
        Source image; it is only read.
    seed_count : int
        Number of seeds (>=1).
    rng : numpy.random.Generator | int | None
        Source of randomness for seed placement. An int makes the result
        reproducible; None draws fresh entropy.

    Returns
    -------
    PixelBuffer
        New buffer of identical dimensions.

    Raises
    ------
    InvalidSeedCount
        If ``seed_count`` is not an integer >= 1.
    """
    H, W = buffer.shape
    seeds = place_seeds(H, W, seed_count, rng)
    logger.debug("mosaic %dx%d with %d seeds", H, W, len(seeds))

    labels = assign_seeds(H, W, seeds)
    src = buffer.array
    for y in range(H):
        row_labels = labels[y]
        row_pixels = src[y]
        for x in range(W):
            seeds[row_labels[x]].absorb(row_pixels[x])

    palette = np.array([s.mean for s in seeds], dtype=np.float64)
    palette = np.clip(round_half_up(palette), 0, 255).astype(np.uint8)
    return PixelBuffer._adopt(palette[labels])


__all__ = ["Seed", "mosaic", "place_seeds", "assign_seeds"]

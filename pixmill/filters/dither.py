"""Floyd–Steinberg error diffusion to pure black and white.

The image is first converted to greyscale. Pixels are then visited in
row-major order (top to bottom, left to right); each one is thresholded
and its quantization error is pushed into the four not-yet-visited
neighbours. Later pixels depend on earlier corrections, so the scan is a
strict sequential fold and must not be reordered or parallelized.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from ..buffer import PixelBuffer
from .color import greyscale

Array = np.ndarray

logger = logging.getLogger(__name__)

THRESHOLD = 128

# Floyd–Steinberg kernel (normalized by 16):
#   *   7
#  3  5  1
DIFFUSION = (
    (0, 1, 7 / 16.0),
    (1, -1, 3 / 16.0),
    (1, 0, 5 / 16.0),
    (1, 1, 1 / 16.0),
)


def _binarize(value: int) -> int:
    return 0 if value <= THRESHOLD else 255


def _adjust(value: float) -> int:
    # clamp, then round half up
    if value > 255.0:
        value = 255.0
    elif value < 0.0:
        value = 0.0
    return int(math.floor(value + 0.5))


def diffuse(grey: Array) -> Array:
    """Run error diffusion over a 2-D array of grey levels.

    Parameters
    ----------
    grey : np.ndarray
        Array of shape (H, W) with integer grey levels in [0, 255].

    Returns
    -------
    np.ndarray
        Array of shape (H, W), dtype=uint8, containing only 0 and 255.
    """
    H, W = grey.shape
    work = [[int(v) for v in row] for row in grey]

    for y in range(H):
        row = work[y]
        for x in range(W):
            old = row[x]
            new = _binarize(old)
            row[x] = new
            err = old - new
            if err == 0:
                continue
            for dy, dx, weight in DIFFUSION:
                ny, nx = y + dy, x + dx
                if ny < H and 0 <= nx < W:
                    work[ny][nx] = _adjust(work[ny][nx] + weight * err)

    return np.array(work, dtype=np.uint8).reshape(H, W)


def dither(buffer: PixelBuffer) -> PixelBuffer:
    """Greyscale the buffer, then dither it to black and white.

    Parameters
    ----------
    buffer : PixelBuffer
        Source image; it is only read.

    Returns
    -------
    PixelBuffer
        New buffer whose pixels are all (0, 0, 0) or (255, 255, 255).
    """
    logger.debug("dither %dx%d", buffer.height, buffer.width)
    grey = greyscale(buffer).array[:, :, 0]
    bw = diffuse(grey)
    return PixelBuffer._adopt(np.repeat(bw[:, :, None], 3, axis=2))


__all__ = ["dither", "diffuse", "THRESHOLD"]

"""Nearest-neighbor upscaling for pixel buffers."""
from __future__ import annotations

import numpy as np

from ..buffer import PixelBuffer


def upscale_nearest(buffer: PixelBuffer, factor: int) -> PixelBuffer:
    """Upscale a buffer by an integer factor using nearest-neighbor.

    Parameters
    ----------
    buffer : PixelBuffer
        Source image; it is only read.
    factor : int
        Upscale factor (>=1).

    Returns
    -------
    PixelBuffer
        Upscaled image of size ``(H * factor, W * factor)``.
    """
    if factor < 1:
        raise ValueError("factor must be >= 1")
    if factor == 1:
        return buffer.clone()

    arr = buffer.array
    up = np.repeat(np.repeat(arr, factor, axis=0), factor, axis=1)
    return PixelBuffer.from_array(up)

"""Convolution filters: blur and sharpen.

Each output channel value is the weighted sum of a square kernel laid over
the same channel of the source pixel and its neighbours, always reading the
original (pre-filter) values. Kernel taps falling outside the image are
omitted from the sum, so border pixels get an un-normalized partial sum.
Results are clamped into [0, 255] and truncated.
"""
from __future__ import annotations

import logging

import numpy as np

from ..buffer import PixelBuffer, clamp_channels

Array = np.ndarray

logger = logging.getLogger(__name__)

BLUR_KERNEL = np.array(
    [
        [0.0625, 0.125, 0.0625],
        [0.125, 0.25, 0.125],
        [0.0625, 0.125, 0.0625],
    ],
    dtype=np.float64,
)

SHARPEN_KERNEL = np.array(
    [
        [-0.125, -0.125, -0.125, -0.125, -0.125],
        [-0.125, 0.25, 0.25, 0.25, -0.125],
        [-0.125, 0.25, 1.0, 0.25, -0.125],
        [-0.125, 0.25, 0.25, 0.25, -0.125],
        [-0.125, -0.125, -0.125, -0.125, -0.125],
    ],
    dtype=np.float64,
)


def convolve(buffer: PixelBuffer, kernel: Array) -> PixelBuffer:
    """Apply an odd-sized square ``kernel`` to every channel of ``buffer``.

    Parameters
    ----------
    buffer : PixelBuffer
        Source image; it is only read.
    kernel : np.ndarray
        Square kernel with odd side length, centred on the target pixel.

    Returns
    -------
    PixelBuffer
        New buffer of identical dimensions.
    """
    kernel = np.asarray(kernel, dtype=np.float64)
    if kernel.ndim != 2 or kernel.shape[0] != kernel.shape[1] or kernel.shape[0] % 2 == 0:
        raise ValueError("kernel must be square with an odd side length")

    H, W = buffer.shape
    r = kernel.shape[0] // 2
    src = buffer.array.astype(np.float64)
    # Zero padding: a tap outside the image adds nothing to the sum.
    padded = np.pad(src, ((r, r), (r, r), (0, 0)), mode="constant", constant_values=0.0)

    acc = np.zeros_like(src)
    for dy in range(kernel.shape[0]):
        for dx in range(kernel.shape[1]):
            weight = kernel[dy, dx]
            if weight == 0.0:
                continue
            acc += weight * padded[dy:dy + H, dx:dx + W, :]

    return PixelBuffer._adopt(clamp_channels(acc))


def blur(buffer: PixelBuffer) -> PixelBuffer:
    """Gaussian-like 3x3 blur."""
    logger.debug("blur %dx%d", buffer.height, buffer.width)
    return convolve(buffer, BLUR_KERNEL)


def sharpen(buffer: PixelBuffer) -> PixelBuffer:
    """5x5 unsharp-mask sharpen."""
    logger.debug("sharpen %dx%d", buffer.height, buffer.width)
    return convolve(buffer, SHARPEN_KERNEL)


__all__ = ["convolve", "blur", "sharpen", "BLUR_KERNEL", "SHARPEN_KERNEL"]

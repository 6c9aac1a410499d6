"""Per-pixel linear colour transforms: greyscale and sepia.

Each output channel is a fixed linear combination of the same pixel's
R, G and B values. Results are clamped into [0, 255] and then rounded to
the nearest integer, halves going up.
"""
from __future__ import annotations

import logging

import numpy as np

from ..buffer import PixelBuffer, round_half_up

Array = np.ndarray

logger = logging.getLogger(__name__)

# Rec. 709 luma weights for R, G, B.
GREYSCALE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Row i holds the contribution of source channel i (R, G, B) to output R, G, B.
SEPIA_MATRIX = np.array(
    [
        [0.393, 0.349, 0.272],
        [0.769, 0.686, 0.534],
        [0.189, 0.168, 0.131],
    ],
    dtype=np.float64,
)


def color_transform(buffer: PixelBuffer, matrix: Array) -> PixelBuffer:
    """Apply a 3x3 colour matrix to every pixel.

    Parameters
    ----------
    buffer : PixelBuffer
        Source image; it is only read.
    matrix : np.ndarray
        Shape (3, 3). ``out[c] = sum_k pixel[k] * matrix[k, c]``.

    Returns
    -------
    PixelBuffer
        New buffer of identical dimensions.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise ValueError("matrix must have shape (3, 3)")
    src = buffer.array.astype(np.float64)
    out = src @ matrix
    out = round_half_up(np.clip(out, 0.0, 255.0))
    return PixelBuffer._adopt(out.astype(np.uint8))


def greyscale(buffer: PixelBuffer) -> PixelBuffer:
    """Luma greyscale; all three output channels receive the same value."""
    logger.debug("greyscale %dx%d", buffer.height, buffer.width)
    weights = np.asarray(GREYSCALE_WEIGHTS, dtype=np.float64).reshape(3, 1)
    return color_transform(buffer, np.repeat(weights, 3, axis=1))


def sepia(buffer: PixelBuffer) -> PixelBuffer:
    """Classic sepia tone."""
    logger.debug("sepia %dx%d", buffer.height, buffer.width)
    return color_transform(buffer, SEPIA_MATRIX)


__all__ = ["color_transform", "greyscale", "sepia", "GREYSCALE_WEIGHTS", "SEPIA_MATRIX"]

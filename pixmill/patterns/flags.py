"""National flag generators: Greece, France and Switzerland.

Each flag enforces its own proportions and raises ``InvalidDimensions``
with a fixed message instead of adjusting the request.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from ..buffer import PixelBuffer
from ..errors import InvalidDimensions
from .bands import band_index, paint, round_half_up

Array = np.ndarray

logger = logging.getLogger(__name__)

GREEK_COLORS = ((13, 94, 175), (255, 255, 255))
FRENCH_COLORS = ((0, 35, 149), (255, 255, 255), (237, 41, 57))
SWISS_COLORS = ((255, 0, 0), (255, 255, 255))


def _grid(height: int, width: int):
    rows = np.arange(height, dtype=np.float64)[:, None]
    cols = np.arange(width, dtype=np.float64)[None, :]
    return rows, cols


# ---------- Greece ----------
def greek_flag(height: int, width: int) -> PixelBuffer:
    """Nine blue/white stripes with a blue canton carrying a white cross.

    ``height`` must be a positive multiple of 9 and ``width`` must equal
    ``height * 1.5`` rounded half up.
    """
    if height < 1 or height % 9 != 0:
        raise InvalidDimensions("The height must be a positive integer divisible by 9.")
    if width != round_half_up(height / 2.0 * 3):
        raise InvalidDimensions("The ratio from height to width must be 2 : 3")
    logger.debug("greek flag %dx%d", height, width)

    stripes = band_index(height, 9) % 2
    index = np.repeat(stripes[:, None], width, axis=1)

    canton_h = min(height, int(math.ceil(height / 9.0)) * 5)
    canton_w = min(width, int(math.ceil(width / 13.5)) * 5)
    rows, cols = _grid(canton_h, canton_w)
    row_unit = height / 9.0
    col_unit = width / 13.5
    cross = ((rows >= 2 * row_unit) & (rows <= 3 * row_unit)) | (
        (cols >= 2 * col_unit) & (cols <= 3 * col_unit)
    )
    index[:canton_h, :canton_w] = cross.astype(np.int64)

    return PixelBuffer._adopt(paint(index, GREEK_COLORS))


# ---------- France ----------
def french_flag(height: int, width: int) -> PixelBuffer:
    """Blue, white and red vertical thirds.

    ``height`` must be positive and even; ``width`` must equal
    ``height * 1.5`` rounded half up.
    """
    if height < 1 or height % 2 != 0:
        raise InvalidDimensions("The height must be a positive integer divisible by 2.")
    if width != round_half_up(height * 1.5):
        raise InvalidDimensions("The height : width ratio must be 2 : 3")
    logger.debug("french flag %dx%d", height, width)

    row = paint(band_index(width, 3), FRENCH_COLORS)
    return PixelBuffer._adopt(np.repeat(row[None, :, :], height, axis=0))


# ---------- Switzerland ----------
def swiss_cross(height: int, width: int) -> Array:
    """Boolean mask of the white cross on a ``height x width`` Swiss flag."""
    unit = width / 32.0
    rows, cols = _grid(height, width)
    long_cols = (cols >= 6 * unit) & (cols <= 26 * unit)
    long_rows = (rows >= 6 * unit) & (rows <= 26 * unit)
    mid_rows = (rows >= 13 * unit) & (rows <= 19 * unit)
    mid_cols = (cols >= 13 * unit) & (cols <= 19 * unit)
    return (long_cols & mid_rows) | (long_rows & mid_cols)


def swiss_flag(height: int, width: int) -> PixelBuffer:
    """Red square with a white plus.

    ``height`` must be a positive multiple of 32 and equal to ``width``.
    """
    if height < 1 or height % 32 != 0:
        raise InvalidDimensions("The height must be divisible by 32.")
    if height != width:
        raise InvalidDimensions("The height and width must be the same.")
    logger.debug("swiss flag %dx%d", height, width)

    index = swiss_cross(height, width).astype(np.int64)
    return PixelBuffer._adopt(paint(index, SWISS_COLORS))


__all__ = [
    "greek_flag",
    "french_flag",
    "swiss_flag",
    "swiss_cross",
    "GREEK_COLORS",
    "FRENCH_COLORS",
    "SWISS_COLORS",
]

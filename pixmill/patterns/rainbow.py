"""Seven-stripe ROYGBIV rainbows, vertical or horizontal.

Vertical rainbows run red to violet from left to right; horizontal ones
from top to bottom. The stripe-axis extent must split into seven equal
stripes, or leave the last stripe no more than six pixels short.
"""
from __future__ import annotations

import logging

import numpy as np

from ..buffer import PixelBuffer
from ..errors import InvalidDimensions
from .bands import band_index, paint

logger = logging.getLogger(__name__)

STRIPES = 7

RAINBOW_COLORS = (
    (255, 0, 0),
    (255, 127, 0),
    (255, 255, 0),
    (0, 255, 0),
    (0, 0, 255),
    (75, 0, 130),
    (148, 0, 211),
)

SLACK_MESSAGE = (
    "The stripes must either divide evenly or leave the last stripe no more "
    "than 6 pixels shorter than the other stripes."
)


def stripes_fit(extent: int) -> bool:
    """Check the slack rule for ``extent`` pixels split into seven stripes."""
    if extent % STRIPES == 0:
        return True
    next_multiple = STRIPES * (extent // STRIPES + 1)
    return next_multiple - extent < next_multiple // STRIPES


def _validate(height: int, width: int, stripe_extent: int) -> None:
    if height < 1 or width < 1:
        raise InvalidDimensions("Each dimension must be at least one.")
    if not stripes_fit(stripe_extent):
        raise InvalidDimensions(SLACK_MESSAGE)


def vertical_rainbow(height: int, width: int) -> PixelBuffer:
    """Vertical stripes; ``width`` is the stripe axis."""
    _validate(height, width, width)
    logger.debug("vertical rainbow %dx%d", height, width)
    row = paint(band_index(width, STRIPES), RAINBOW_COLORS)
    return PixelBuffer._adopt(np.repeat(row[None, :, :], height, axis=0))


def horizontal_rainbow(height: int, width: int) -> PixelBuffer:
    """Horizontal stripes; ``height`` is the stripe axis."""
    _validate(height, width, height)
    logger.debug("horizontal rainbow %dx%d", height, width)
    col = paint(band_index(height, STRIPES), RAINBOW_COLORS)
    return PixelBuffer._adopt(np.repeat(col[:, None, :], width, axis=1))


__all__ = ["vertical_rainbow", "horizontal_rainbow", "stripes_fit", "RAINBOW_COLORS"]

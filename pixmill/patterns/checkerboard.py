"""8x8 black-and-white checkerboard."""
from __future__ import annotations

import logging

from ..buffer import PixelBuffer
from ..errors import InvalidDimensions
from .bands import band_index, paint

logger = logging.getLogger(__name__)

SQUARES = 8

CHECKER_COLORS = ((0, 0, 0), (255, 255, 255))


def checkerboard(height: int, width: int) -> PixelBuffer:
    """Generate a checkerboard whose squares are ``height`` pixels wide.

    Parameters
    ----------
    height : int
        Side of one square in pixels (>=1).
    width : int
        Must equal ``height``.

    Returns
    -------
    PixelBuffer
        Square buffer of side ``8 * height``, black at (0, 0).
    """
    if height < 1:
        raise InvalidDimensions("The size of a square must be a positive integer.")
    if height != width:
        raise InvalidDimensions("The height must be the same as the width.")

    side = height * SQUARES
    logger.debug("checkerboard %dx%d", side, side)
    idx = band_index(side, SQUARES)
    parity = (idx[:, None] + idx[None, :]) % 2
    return PixelBuffer._adopt(paint(parity, CHECKER_COLORS))


__all__ = ["checkerboard", "CHECKER_COLORS"]

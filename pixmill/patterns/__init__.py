"""Procedural pattern generators and a unified entry-point.

Exported API
------------
- generate_pattern(kind, height, width)

Supported kinds
---------------
- "vertical_rainbow"   : 7 ROYGBIV columns
- "horizontal_rainbow" : 7 ROYGBIV rows
- "checkerboard"       : 8x8 squares, each ``height`` pixels wide
- "greek_flag"         : height % 9 == 0, width = 1.5 * height
- "french_flag"        : height % 2 == 0, width = 1.5 * height
- "swiss_flag"         : height % 32 == 0, width == height

Implementation notes
--------------------
Band transitions follow ``value % ceil(extent / bands) == 0`` (value != 0).
When the extent is not a multiple of the band count the final band is
shorter than the others; generators keep that behaviour.
"""
from __future__ import annotations

from typing import Union

from ..buffer import PixelBuffer
from ..kinds import PatternKind
from .checkerboard import checkerboard
from .flags import french_flag, greek_flag, swiss_flag
from .rainbow import horizontal_rainbow, vertical_rainbow


def generate_pattern(kind: Union[PatternKind, str], height: int, width: int) -> PixelBuffer:
    """Generate the selected pattern.

    Parameters
    ----------
    kind : PatternKind | str
        Pattern to generate; names are matched case-insensitively.
    height, width : int
        Requested dimensions, validated by the generator.

    Returns
    -------
    PixelBuffer
        Freshly generated image.

    Raises
    ------
    UnsupportedPattern
        If ``kind`` does not name a known pattern.
    InvalidDimensions
        If the generator rejects the requested dimensions.
    """
    k = PatternKind.parse(kind)
    if k is PatternKind.VERTICAL_RAINBOW:
        return vertical_rainbow(height, width)
    if k is PatternKind.HORIZONTAL_RAINBOW:
        return horizontal_rainbow(height, width)
    if k is PatternKind.CHECKERBOARD:
        return checkerboard(height, width)
    if k is PatternKind.GREEK_FLAG:
        return greek_flag(height, width)
    if k is PatternKind.FRENCH_FLAG:
        return french_flag(height, width)
    return swiss_flag(height, width)


__all__ = [
    "generate_pattern",
    "vertical_rainbow",
    "horizontal_rainbow",
    "checkerboard",
    "greek_flag",
    "french_flag",
    "swiss_flag",
]

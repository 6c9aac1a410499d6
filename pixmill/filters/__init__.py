"""Image filters and a unified entry-point for application.

Exported API
------------
- apply_filter(buffer, kind)

Supported kinds
---------------
- "blur"      : 3x3 Gaussian-like convolution
- "sharpen"   : 5x5 unsharp-mask convolution
- "sepia"     : 3x3 colour matrix
- "greyscale" : Rec. 709 luma
- "dither"    : greyscale followed by Floyd–Steinberg error diffusion

Implementation notes
--------------------
Every filter reads its input buffer and returns a brand-new buffer of the
same dimensions; the input is never modified.
"""
from __future__ import annotations

from typing import Union

from ..buffer import PixelBuffer
from ..kinds import FilterKind
from .color import color_transform, greyscale, sepia
from .convolution import blur, convolve, sharpen
from .dither import dither


def apply_filter(buffer: PixelBuffer, kind: Union[FilterKind, str]) -> PixelBuffer:
    """Apply the selected filter to a buffer.

    Parameters
    ----------
    buffer : PixelBuffer
        Source image.
    kind : FilterKind | str
        Filter to apply; names are matched case-insensitively.

    Returns
    -------
    PixelBuffer
        Filtered image.

    Raises
    ------
    UnsupportedFilter
        If ``kind`` does not name a known filter.
    """
    k = FilterKind.parse(kind)
    if k is FilterKind.BLUR:
        return blur(buffer)
    if k is FilterKind.SHARPEN:
        return sharpen(buffer)
    if k is FilterKind.SEPIA:
        return sepia(buffer)
    if k is FilterKind.GREYSCALE:
        return greyscale(buffer)
    return dither(buffer)


__all__ = [
    "apply_filter",
    "blur",
    "sharpen",
    "convolve",
    "sepia",
    "greyscale",
    "color_transform",
    "dither",
]

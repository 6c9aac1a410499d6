"""Image loading and saving utilities using Pillow.

All processing in this project occurs on ``PixelBuffer`` objects. These
helpers only convert between image files and buffers at the I/O edge.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..buffer import PixelBuffer

logger = logging.getLogger(__name__)


def load_image(path: Union[str, Path]) -> PixelBuffer:
    """Load an image file into an RGB PixelBuffer.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow. Alpha is discarded.

    Returns
    -------
    PixelBuffer
        Buffer of the image's height and width.

    Raises
    ------
    FileNotFoundError
        If the path does not point to a file.
    ValueError
        If Pillow cannot identify the file as an image.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Input file not found: {p}")
    try:
        with Image.open(p) as im:
            arr = np.array(im.convert("RGB"), dtype=np.uint8)
    except UnidentifiedImageError as exc:
        raise ValueError(f"File is not an image: {p}") from exc
    logger.debug("read %s (%dx%d)", p, arr.shape[0], arr.shape[1])
    return PixelBuffer.from_array(arr)


def save_image(buffer: PixelBuffer, path: Union[str, Path]) -> None:
    """Save a PixelBuffer to an image file via Pillow.

    Parameters
    ----------
    buffer : PixelBuffer
        Image to write.
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    if not isinstance(buffer, PixelBuffer):
        raise TypeError("buffer must be a PixelBuffer")

    p = Path(path)
    im = Image.fromarray(buffer.to_array())
    im.save(p)
    logger.debug("wrote %s (%dx%d)", p, buffer.height, buffer.width)

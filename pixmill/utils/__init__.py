"""I/O edge utilities for PixMill.

Modules:
- loader: Load/save Pillow <-> PixelBuffer conversion utilities.
- upscale: Nearest-neighbor upscaling for integer factors.
"""
from .loader import load_image, save_image
from .upscale import upscale_nearest

__all__ = [
    "load_image",
    "save_image",
    "upscale_nearest",
]

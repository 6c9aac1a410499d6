"""PixMill: an image transformation engine on NumPy-backed pixel buffers.

Public API re-exported from the implementation modules.
"""
from __future__ import annotations

from .buffer import PixelBuffer  # noqa: F401
from .errors import (  # noqa: F401
    InvalidDimensions,
    InvalidSeedCount,
    MissingImage,
    NoHistory,
    PixMillError,
    UnsupportedFilter,
    UnsupportedPattern,
)
from .filters import apply_filter  # noqa: F401
from .kinds import FilterKind, MosaicRequest, PatternKind, PatternRequest  # noqa: F401
from .mosaic import mosaic  # noqa: F401
from .patterns import generate_pattern  # noqa: F401
from .session import ImageSession, SessionState  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "PixelBuffer",
    "FilterKind",
    "PatternKind",
    "PatternRequest",
    "MosaicRequest",
    "apply_filter",
    "generate_pattern",
    "mosaic",
    "ImageSession",
    "SessionState",
    "PixMillError",
    "InvalidDimensions",
    "UnsupportedFilter",
    "UnsupportedPattern",
    "InvalidSeedCount",
    "MissingImage",
    "NoHistory",
]

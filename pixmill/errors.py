"""Exception types raised by the PixMill engine.

Every failure is local and recoverable: the engine raises one of these to
its caller and leaves any previously held buffer untouched. Nothing here is
printed or logged by the engine itself.
"""
from __future__ import annotations


class PixMillError(Exception):
    """Base class for all engine errors."""


class InvalidDimensions(PixMillError, ValueError):
    """Bad height/width for a buffer or a pattern request."""


class UnsupportedFilter(PixMillError, ValueError):
    """Unknown filter kind requested."""


class UnsupportedPattern(PixMillError, ValueError):
    """Unknown pattern kind requested."""


class InvalidSeedCount(PixMillError, ValueError):
    """Mosaic seed count below 1."""


class MissingImage(PixMillError, RuntimeError):
    """Operation requires a loaded buffer but none exists."""


class NoHistory(PixMillError, RuntimeError):
    """Undo or redo requested with an empty stack."""


__all__ = [
    "PixMillError",
    "InvalidDimensions",
    "UnsupportedFilter",
    "UnsupportedPattern",
    "InvalidSeedCount",
    "MissingImage",
    "NoHistory",
]

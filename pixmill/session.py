"""The mutable image session: current buffer, dispatch and undo history.

An ``ImageSession`` is either EMPTY or LOADED. Loading or generating an
image replaces the current buffer and clears history. Filters and mosaics
compute their result in full before anything changes, so a failed request
leaves the session exactly as it was.

History keeps full buffer snapshots, one per transformation: O(H * W)
memory each. Pass ``track_history=False`` for batch use, or bound the undo
stack with ``history_limit``.
"""
from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, Union

from .buffer import PixelBuffer
from .errors import MissingImage, NoHistory
from .filters import apply_filter
from .kinds import FilterKind, MosaicRequest, PatternKind, PatternRequest, Request
from .mosaic import RandomLike, mosaic
from .patterns import generate_pattern

logger = logging.getLogger(__name__)


class SessionState(Enum):
    EMPTY = "empty"
    LOADED = "loaded"


class ImageSession:
    """Owns one current PixelBuffer and its linear undo/redo history."""

    def __init__(self, track_history: bool = True, history_limit: Optional[int] = None) -> None:
        self.track_history = track_history
        self.history_limit = history_limit
        self._current: Optional[PixelBuffer] = None
        self._original: Optional[PixelBuffer] = None
        self._undo: Deque[PixelBuffer] = deque(maxlen=history_limit)
        self._redo: List[PixelBuffer] = []

    # ---- state ----
    @property
    def state(self) -> SessionState:
        return SessionState.EMPTY if self._current is None else SessionState.LOADED

    @property
    def current(self) -> PixelBuffer:
        """Live reference to the current buffer."""
        if self._current is None:
            raise MissingImage("Error: Image not found.")
        return self._current

    def get_current(self) -> PixelBuffer:
        return self.current

    @property
    def original(self) -> PixelBuffer:
        """The buffer as it was last loaded or generated."""
        if self._original is None:
            raise MissingImage("Error: Image not found.")
        return self._original

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    # ---- new images ----
    def load(self, buffer: PixelBuffer) -> PixelBuffer:
        """Take a private copy of ``buffer`` as the new current image."""
        if not isinstance(buffer, PixelBuffer):
            raise TypeError("buffer must be a PixelBuffer")
        self._replace(buffer.clone())
        logger.debug("loaded %dx%d buffer", buffer.height, buffer.width)
        return self._current

    def generate(self, kind: Union[PatternKind, str], height: int, width: int) -> PixelBuffer:
        """Generate a pattern and make it the current image."""
        result = generate_pattern(kind, height, width)
        self._replace(result)
        logger.debug("generated %s %dx%d", PatternKind.parse(kind).value, result.height, result.width)
        return result

    def reset(self) -> None:
        """Drop the current image and all history."""
        self._current = None
        self._original = None
        self._clear_history()

    # ---- transformations ----
    def apply_filter(self, kind: Union[FilterKind, str]) -> PixelBuffer:
        """Apply a filter to the current image."""
        result = apply_filter(self.current, kind)
        self._publish(result)
        return result

    def mosaic(self, seed_count: int, rng: RandomLike = None) -> PixelBuffer:
        """Replace the current image with a mosaic of ``seed_count`` cells."""
        result = mosaic(self.current, seed_count, rng)
        self._publish(result)
        return result

    def apply(self, request: Request) -> PixelBuffer:
        """Dispatch any request: a filter kind, a pattern or a mosaic."""
        if isinstance(request, PatternRequest):
            return self.generate(request.kind, request.height, request.width)
        if isinstance(request, MosaicRequest):
            return self.mosaic(request.seed_count, request.seed)
        return self.apply_filter(request)

    # ---- history ----
    def undo(self) -> PixelBuffer:
        """Restore the buffer held before the last transformation."""
        if not self._undo:
            raise NoHistory("Nothing to undo.")
        self._redo.append(self._current)
        self._current = self._undo.pop()
        logger.debug("undo (%d left)", len(self._undo))
        return self._current

    def redo(self) -> PixelBuffer:
        """Re-apply the last undone transformation."""
        if not self._redo:
            raise NoHistory("Nothing to redo.")
        self._undo.append(self._current)
        self._current = self._redo.pop()
        logger.debug("redo (%d left)", len(self._redo))
        return self._current

    # ---- internals ----
    def _replace(self, buffer: PixelBuffer) -> None:
        self._current = buffer
        self._original = buffer.clone()
        self._clear_history()

    def _publish(self, result: PixelBuffer) -> None:
        if self.track_history and self._current is not None:
            self._undo.append(self._current)
            self._redo.clear()
        self._current = result

    def _clear_history(self) -> None:
        self._undo.clear()
        self._redo.clear()


__all__ = ["ImageSession", "SessionState"]

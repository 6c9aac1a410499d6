"""Dense RGB pixel buffer backed by a NumPy array.

All processing in this project occurs on ``(H, W, 3)`` ``uint8`` arrays.
``PixelBuffer`` wraps one such array and keeps it rectangular, non-empty
and clamped to [0, 255] on every write.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from .errors import InvalidDimensions

Array = np.ndarray
RGB = Tuple[int, int, int]


def clamp_channels(values: Array) -> Array:
    """Clamp an array of channel values into [0, 255] and truncate to uint8."""
    return np.clip(values, 0, 255).astype(np.uint8)


def round_half_up(values: Array) -> Array:
    """Round to nearest integer with halves going up (``floor(x + 0.5)``).

    ``np.rint`` rounds halves to even, which would turn 0.5 into 0 and
    2.5 into 2. Channel arithmetic here wants the schoolbook rule.
    """
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


class PixelBuffer:
    """A height x width grid of 8-bit RGB pixels.

    Parameters
    ----------
    height : int
        Number of rows (>=1).
    width : int
        Number of columns (>=1).
    fill : tuple[int, int, int]
        Initial colour of every pixel.
    """

    __slots__ = ("_data",)

    def __init__(self, height: int, width: int, fill: Sequence[float] = (0, 0, 0)) -> None:
        _check_dimensions(height, width)
        if len(fill) != 3:
            raise ValueError("fill must be an RGB triple")
        self._data = np.empty((int(height), int(width), 3), dtype=np.uint8)
        self._data[:, :] = clamp_channels(np.asarray(fill, dtype=np.float64))

    # ---------- construction helpers ----------
    @classmethod
    def from_array(cls, arr: Array) -> "PixelBuffer":
        """Wrap a copy of an ``(H, W, 3)`` array, clamping values into [0, 255]."""
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise InvalidDimensions("arr must be an RGB array with shape (H, W, 3)")
        _check_dimensions(arr.shape[0], arr.shape[1])
        buf = cls.__new__(cls)
        if arr.dtype == np.uint8:
            buf._data = arr.copy()
        else:
            buf._data = clamp_channels(arr)
        return buf

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Sequence[float]]]) -> "PixelBuffer":
        """Build a buffer from nested rows of RGB triples."""
        rows = [list(r) for r in rows]
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise InvalidDimensions("rows must form a non-empty rectangle")
        return cls.from_array(np.array(rows, dtype=np.float64))

    @classmethod
    def _adopt(cls, arr: Array) -> "PixelBuffer":
        # Takes ownership of a freshly computed uint8 array without copying.
        buf = cls.__new__(cls)
        buf._data = arr
        return buf

    # ---------- accessors ----------
    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def array(self) -> Array:
        """Read-only view of the underlying ``(H, W, 3)`` uint8 array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def get(self, row: int, col: int) -> RGB:
        self._check_index(row, col)
        r, g, b = self._data[row, col]
        return int(r), int(g), int(b)

    def set(self, row: int, col: int, r: float, g: float, b: float) -> None:
        """Write one pixel; each channel is clamped into [0, 255]."""
        self._check_index(row, col)
        self._data[row, col] = clamp_channels(np.array([r, g, b], dtype=np.float64))

    def clone(self) -> "PixelBuffer":
        return PixelBuffer._adopt(self._data.copy())

    def to_array(self) -> Array:
        """Return a writable copy of the pixel data."""
        return self._data.copy()

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"pixel ({row}, {col}) outside {self.height}x{self.width} buffer")

    # ---------- dunder ----------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer(height={self.height}, width={self.width})"


def _check_dimensions(height: int, width: int) -> None:
    if height < 1 or width < 1:
        raise InvalidDimensions("The height and width must be at least 1.")


__all__ = ["PixelBuffer", "clamp_channels", "round_half_up", "RGB"]

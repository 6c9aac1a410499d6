import numpy as np
import pytest

from pixmill import PixelBuffer


@pytest.fixture
def gradient():
    """5x6 buffer with distinct values in every channel."""
    h, w = 5, 6
    arr = np.zeros((h, w, 3), dtype=np.uint8)
    for y in range(h):
        for x in range(w):
            arr[y, x] = (y * 40 + x, x * 30 + 10, 255 - y * 20 - x * 5)
    return PixelBuffer.from_array(arr)


@pytest.fixture
def uniform():
    def make(h, w, color):
        return PixelBuffer(h, w, fill=color)
    return make

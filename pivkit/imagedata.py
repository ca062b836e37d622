"""Grey-scale image held as a floating-point buffer."""

from __future__ import annotations

import math
import sys

import numpy as np


class ImageDataError(RuntimeError):
    """Raised when image data is accessed outside its limits."""


class ImageData:
    """A monochrome image stored as rows of ``float`` pixel values.

    ``ImageData()`` holds no buffer at all; ``ImageData(width, height)``
    allocates a zero-filled one; ``ImageData(data=array)`` copies a 2-D array.
    """

    def __init__(self, width: int = 0, height: int = 0, data=None) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self._gray8: np.ndarray | None = None
        if data is not None:
            array = np.array(data, dtype=float)
            if array.ndim != 2:
                raise ValueError("image data must be two-dimensional")
            rows, cols = array.shape
            if (width or height) and (width, height) != (cols, rows):
                raise ValueError(
                    f"data of {cols} x {rows} does not match size {width} x {height}"
                )
            self._buffer: np.ndarray | None = array
            self._width, self._height = cols, rows
        else:
            self._width, self._height = width, height
            self._buffer = np.zeros((height, width)) if width or height else None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """The image size as ``(width, height)``."""
        return self._width, self._height

    @property
    def buffer(self) -> np.ndarray | None:
        """The pixel values, one row per image line; ``None`` if unallocated."""
        return self._buffer

    def pixel(self, i: int, j: int) -> float:
        """Grey value at row ``i``, column ``j``; -1.0 if there is no buffer."""
        if self._buffer is None:
            return -1.0
        return float(self._buffer[i, j])

    def linebuffer(self, row: int) -> np.ndarray:
        """A writable view of one image row."""
        if row < 0 or row >= self._height or self._buffer is None:
            raise ImageDataError("row out of limits")
        return self._buffer[row]

    def to_gray8(self) -> np.ndarray:
        """The image scaled to 8-bit grey levels for display.

        The result is computed once and kept for later calls.
        """
        if self._gray8 is None:
            if self._buffer is None or self._buffer.size == 0:
                self._gray8 = np.zeros((self._height, self._width), dtype=np.uint8)
            else:
                low = min(float(self._buffer.min()), sys.float_info.max)
                high = max(float(self._buffer.max()), sys.float_info.min)
                span = high - low
                if span == 0.0:
                    scaled = np.zeros(self._buffer.shape)
                else:
                    scaled = np.ceil((self._buffer - low) / span * 255)
                self._gray8 = np.clip(scaled, 0, 255).astype(np.uint8)
        return self._gray8

    def __repr__(self) -> str:
        return f"ImageData(width={self._width}, height={self._height})"


def _is_finite(value: float) -> bool:
    return math.isfinite(value)
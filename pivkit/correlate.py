"""FFT-based cross-correlation of interrogation windows."""

from __future__ import annotations

import numpy as np

from .imagedata import ImageData


def _pixels(image) -> np.ndarray:
    if isinstance(image, ImageData):
        if image.buffer is None:
            raise ValueError("image has no pixel data")
        return image.buffer
    array = np.asarray(image, dtype=float)
    if array.ndim != 2:
        raise ValueError("image must be two-dimensional")
    return array


class FFTCrossCorrelator:
    """Cross-correlates windows of ``int_length_x`` by ``int_length_y`` pixels.

    Each window has its mean removed and is zero-padded to twice its size;
    window B is rotated by 180 degrees so that the product of the two
    transforms yields the correlation.
    """

    def __init__(self, int_length_x: int, int_length_y: int) -> None:
        if int_length_x <= 0 or int_length_y <= 0:
            raise ValueError("interrogation window lengths must be positive")
        self.int_length_x = int_length_x
        self.int_length_y = int_length_y

    def cross_correlate(
        self,
        image_a,
        image_b,
        top_left_row: int,
        top_left_column: int,
        mean_a: float,
        mean_b: float,
    ) -> np.ndarray:
        """Correlation map of the windows whose top-left corner is given.

        Returns an array of ``2 * int_length_y`` rows by ``2 * int_length_x``
        columns.
        """
        a = _pixels(image_a)
        b = _pixels(image_b)
        lx, ly = self.int_length_x, self.int_length_y
        rows = slice(top_left_row, top_left_row + ly)
        cols = slice(top_left_column, top_left_column + lx)
        for pixels in (a, b):
            if (
                top_left_row < 0
                or top_left_column < 0
                or top_left_row + ly > pixels.shape[0]
                or top_left_column + lx > pixels.shape[1]
            ):
                raise ValueError("interrogation window lies outside the image")

        window_a = np.zeros((2 * ly, 2 * lx), dtype=complex)
        window_b = np.zeros((2 * ly, 2 * lx), dtype=complex)
        window_a[:ly, :lx] = a[rows, cols] - mean_a
        window_b[:ly, :lx] = b[rows, cols][::-1, ::-1] - mean_b

        # The transforms run over a (2*lx, 2*ly) layout of the same buffer.
        plan_shape = (2 * lx, 2 * ly)
        spectrum = np.fft.fft2(window_a.reshape(plan_shape)) * np.fft.fft2(
            window_b.reshape(plan_shape)
        )
        result = np.fft.ifft2(spectrum, norm="forward")
        return result.real.reshape(2 * ly, 2 * lx)
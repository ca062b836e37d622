"""Positions of interrogation windows over a region of interest."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Rect:
    """A pixel rectangle; ``right`` and ``bottom`` are inclusive."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1


def _alpha(mask) -> np.ndarray | None:
    if mask is None:
        return None
    array = np.asarray(mask)
    if array.size == 0:
        return None
    if array.ndim == 3:
        return array[..., -1]
    if array.ndim != 2:
        raise ValueError("mask must be a 2-D alpha array or an RGBA image")
    return array


def generate_grid(
    roi: Rect,
    delta_x: int,
    delta_y: int,
    int_length_x: int,
    int_length_y: int,
    mask=None,
) -> list[tuple[int, int]]:
    """Top-left corners ``(x, y)`` of the windows to compute, row by row.

    With a mask, a window is kept only if every mask pixel it covers is fully
    transparent; pixels beyond the mask count as transparent.
    """
    if delta_x <= 0 or delta_y <= 0:
        raise ValueError("grid spacing must be positive")
    alpha = _alpha(mask)
    points = []
    for i in range(roi.top, roi.bottom - int_length_y + 1, delta_y):
        for j in range(roi.left, roi.right - int_length_x + 1, delta_x):
            if alpha is not None:
                covered = alpha[max(i, 0):i + int_length_y, max(j, 0):j + int_length_x]
                if np.any(covered != 0):
                    continue
            points.append((j, i))
    return points
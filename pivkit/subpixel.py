"""Sub-pixel displacement estimate from a correlation map."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_MAX_START = -1000.0


@dataclass
class SubPixelResult:
    """Displacement and signal-to-noise ratio of one interrogation window."""

    u: float = 0.0
    v: float = 0.0
    snr: float = 0.0


def _log_abs(value: float) -> float:
    magnitude = abs(value)
    return math.log(magnitude) if magnitude > 0.0 else -math.inf


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def gaussian_sub_pixel(cmap, int_length_x: int, int_length_y: int) -> SubPixelResult:
    """Fit a three-point Gaussian to the highest peak of a correlation map.

    The map holds ``2 * int_length_y`` rows of ``2 * int_length_x`` values,
    given either as a 2-D array or flattened in row order.
    """
    width = 2 * int_length_x
    height = 2 * int_length_y
    flat = np.asarray(cmap, dtype=float).ravel()
    if flat.size != width * height:
        raise ValueError(
            f"correlation map has {flat.size} values, expected {width * height}"
        )

    def at(index: int) -> float:
        if not 0 <= index < flat.size:
            raise ValueError("correlation peak lies on the edge of the map")
        return float(flat[index])

    # Highest value; the first one wins on ties.
    peak = _MAX_START
    max_i = max_j = None
    for index, value in enumerate(flat):
        if value > peak:
            peak = float(value)
            max_i, max_j = divmod(index, width)
    if max_i is None:
        raise ValueError("no correlation value exceeds the search threshold")

    # Mean magnitude of the map outside the region around the peak.
    rows, cols = np.indices((height, width))
    excluded = (rows == max_i) & (cols < max_j - 1)
    outside = np.abs(flat.reshape(height, width)[~excluded])
    result = SubPixelResult()
    if outside.size > 0:
        mean = float(outside.mean())
        result.snr = _divide(peak, mean)

    centre = width * max_i + max_j
    f0 = _log_abs(at(centre))
    above = at(centre - width)
    below = at(centre + width)
    f1 = _log_abs(above) if abs(above) > 0.0 else 0.0
    f2 = _log_abs(below) if abs(below) > 0.0 else 0.0
    denominator = 2 * f1 - 4 * f0 + 2 * f2
    if abs(denominator) > 0.0:
        result.v = float(int_length_y) - ((max_i + 1) + (f1 - f2) / denominator)
    else:
        result.v = 0.0

    f1 = _log_abs(at(centre - 1))
    f2 = _log_abs(at(centre + 1))
    denominator = 2 * f1 - 4 * f0 + 2 * f2
    if abs(denominator) > 0.0:
        result.u = float(int_length_x) - ((max_j + 1) + (f1 - f2) / denominator)
    else:
        result.u = 0.0

    return result
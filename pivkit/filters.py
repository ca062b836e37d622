"""Outlier detection, interpolation and smoothing of PIV vector fields."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from .options import FilterOptions, LocalMethod


@dataclass
class PivPoint:
    """One vector of a PIV field."""

    x: float = 0.0
    y: float = 0.0
    u: float = 0.0
    v: float = 0.0
    snr: float = 0.0
    intensity: float = 0.0
    filtered: bool = False
    valid: bool = True


class VectorField:
    """A rectangular grid of PIV vectors, addressed by row ``i`` and column ``j``.

    Positions outside the grid read as an invalid, zero vector that counts
    as filtered, so neighbourhood operations can run over the edges.
    """

    def __init__(
        self,
        width: int,
        height: int,
        points: Iterable[PivPoint] | None = None,
        index: int = -1,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("field dimensions must not be negative")
        if points is None:
            cells = [PivPoint() for _ in range(width * height)]
        else:
            cells = list(points)
            if len(cells) != width * height:
                raise ValueError(
                    f"field of {width} x {height} needs {width * height} points, "
                    f"got {len(cells)}"
                )
        self.width = width
        self.height = height
        self.index = index
        self._points = cells

    def _contains(self, i: int, j: int) -> bool:
        return 0 <= i < self.height and 0 <= j < self.width

    def _require(self, i: int, j: int) -> int:
        if not self._contains(i, j):
            raise IndexError(f"position ({i}, {j}) lies outside the field")
        return i * self.width + j

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every (row, column) position in row order."""
        return itertools.product(range(self.height), range(self.width))

    def is_valid(self, i: int, j: int) -> bool:
        """True if a vector was computed at this position."""
        return self._contains(i, j) and self._points[i * self.width + j].valid

    def filtered(self, i: int, j: int) -> bool:
        """True if the vector here has been rejected, or lies outside the field."""
        if not self._contains(i, j):
            return True
        return self._points[i * self.width + j].filtered

    def data(self, i: int, j: int) -> PivPoint:
        """The vector at this position; a zero, invalid vector outside the field."""
        if not self._contains(i, j):
            return PivPoint(valid=False, filtered=True)
        return self._points[i * self.width + j]

    def set_data(self, i: int, j: int, point: PivPoint) -> None:
        """Store a vector at this position."""
        self._points[self._require(i, j)] = point

    def set_filter(self, i: int, j: int, flag: bool) -> None:
        """Mark the vector at this position as rejected or accepted."""
        self._points[self._require(i, j)].filtered = flag

    def num_valid(self) -> int:
        """Number of positions holding a computed vector."""
        return sum(point.valid for point in self._points)

    def is_empty(self) -> bool:
        """True if the field holds no computed vector."""
        return self.num_valid() == 0


def _half_width(n: int) -> int:
    return math.floor((n - 1) / 2.0)


def _offsets(half: int) -> Iterator[tuple[int, int]]:
    span = range(-half, half + 1)
    return itertools.product(span, span)


def snr(field: VectorField, options: FilterOptions) -> None:
    """Reject vectors whose signal-to-noise ratio is below the threshold."""
    for i, j in field.cells():
        if field.is_valid(i, j) and field.data(i, j).snr < options.snr_thresh:
            field.set_filter(i, j, True)


def image_intensity(field: VectorField, options: FilterOptions) -> None:
    """Reject vectors whose image intensity is below the threshold."""
    for i, j in field.cells():
        if field.is_valid(i, j) and field.data(i, j).intensity < options.image_thresh:
            field.set_filter(i, j, True)


def global_range(field: VectorField, options: FilterOptions) -> None:
    """Reject vectors outside the allowed displacement ranges."""
    for i, j in field.cells():
        if not field.is_valid(i, j):
            continue
        point = field.data(i, j)
        if (
            point.u > options.umax
            or point.u < options.umin
            or point.v > options.vmax
            or point.v < options.vmin
        ):
            field.set_filter(i, j, True)


def global_std(field: VectorField, options: FilterOptions) -> None:
    """Reject vectors farther than ``n_std`` standard deviations from the mean."""
    valid = [(i, j) for i, j in field.cells() if field.is_valid(i, j)]
    count = len(valid)
    if count:
        mean_u = sum(field.data(i, j).u for i, j in valid) / count
        mean_v = sum(field.data(i, j).v for i, j in valid) / count
        std_u = math.sqrt(sum((field.data(i, j).u - mean_u) ** 2 for i, j in valid) / count)
        std_v = math.sqrt(sum((field.data(i, j).v - mean_v) ** 2 for i, j in valid) / count)
    else:
        mean_u = mean_v = std_u = std_v = 0.0

    n_sigma = options.n_std
    for i, j in valid:
        point = field.data(i, j)
        if (
            point.u > mean_u + n_sigma * std_u
            or point.u < mean_u - n_sigma * std_u
            or point.v > mean_v + n_sigma * std_v
            or point.v < mean_v - n_sigma * std_v
        ):
            field.set_filter(i, j, True)


def _median(values: list[float]) -> float:
    ordered = sorted(values)
    position = math.ceil(len(ordered) / 2.0)
    return ordered[position] if position < len(ordered) else 0.0


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def local_detect(field: VectorField, options: FilterOptions) -> None:
    """Reject vectors that deviate from the local mean or median.

    Vectors rejected earlier in the scan no longer contribute to the
    estimate for later positions.
    """
    half = _half_width(options.local_nxn)
    estimate = _mean if options.local_method == LocalMethod.MEAN else _median
    if options.local_method not in (LocalMethod.MEAN, LocalMethod.MEDIAN):
        return

    for i, j in field.cells():
        point = field.data(i, j)
        neighbours = [
            field.data(i + m, j + n)
            for m, n in _offsets(half)
            if not field.filtered(i + m, j + n)
        ]
        centre_u = estimate([p.u for p in neighbours])
        centre_v = estimate([p.v for p in neighbours])
        if (
            point.u > centre_u + options.u_tol
            or point.u < centre_u - options.u_tol
            or point.v > centre_v + options.v_tol
            or point.v < centre_v - options.v_tol
        ):
            field.set_filter(i, j, True)


def mean_interpolate(field: VectorField, options: FilterOptions) -> None:
    """Replace rejected vectors with the mean of valid, accepted neighbours."""
    half = _half_width(options.int_nxn)
    updates: dict[tuple[int, int], tuple[float, float]] = {}
    for i, j in field.cells():
        if not field.filtered(i, j):
            continue
        neighbours = [
            field.data(i + m, j + n)
            for m, n in _offsets(half)
            if not field.filtered(i + m, j + n) and field.is_valid(i + m, j + n)
        ]
        if neighbours:
            updates[i, j] = (
                sum(p.u for p in neighbours) / len(neighbours),
                sum(p.v for p in neighbours) / len(neighbours),
            )

    for (i, j), (u, v) in updates.items():
        field.set_data(i, j, replace(field.data(i, j), u=u, v=v))


def gaussian_blur(field: VectorField, options: FilterOptions) -> None:
    """Smooth the whole field with a normalised Gaussian kernel."""
    radius = options.smooth_radius
    half = _half_width(options.smooth_nxn)
    kernel = {
        (dy, dx): 0.5 / math.pi / radius / radius
        * math.exp(-(dx * dx + dy * dy) / 2.0 / radius / radius)
        for dy, dx in _offsets(half)
    }
    total = sum(kernel.values())

    smoothed = {}
    for i, j in field.cells():
        sum_u = sum_v = 0.0
        for (k1, k2), weight in kernel.items():
            neighbour = field.data(i - k1, j - k2)
            sum_u += neighbour.u * weight / total
            sum_v += neighbour.v * weight / total
        smoothed[i, j] = (sum_u, sum_v)

    for (i, j), (u, v) in smoothed.items():
        field.set_data(i, j, replace(field.data(i, j), u=u, v=v))
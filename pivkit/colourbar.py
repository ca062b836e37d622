"""Colour scale used to colour vectors by magnitude."""

from __future__ import annotations

import math

Colour = tuple[int, int, int]

BLACK: Colour = (0, 0, 0)

_POSITIVE = ((0, 0, 131), (0, 255, 200), (255, 255, 0))
_SIGNED = ((0, 0, 131), (255, 255, 255), (236, 0, 0))


def _rgb(values) -> Colour | None:
    """Truncate to integers; ``None`` if any channel is not a valid 0-255 value."""
    channels = []
    for value in values:
        if not math.isfinite(value):
            return None
        channel = int(value)
        if not 0 <= channel <= 255:
            return None
        channels.append(channel)
    return tuple(channels)


class ColourBar:
    """A three-stop colour scale over an integer value range.

    A range entirely at or above zero runs blue, cyan, yellow; a range that
    includes negative values runs blue, white, red with white at zero.
    Each bin of the scale holds an RGB tuple, or ``None`` where the computed
    channels fall outside 0-255.
    """

    def __init__(self, n_bins: int = 100) -> None:
        self.minimum = 0
        self.maximum = 1
        self.zero = 0.0
        self.only_positive = True
        self.n_bins = n_bins
        self._colours = self._generate()

    def set_range(self, min_value: int, max_value: int) -> None:
        """Set the value range; the two ends may be given in either order."""
        min_value, max_value = int(min_value), int(max_value)
        if max_value > min_value:
            self.minimum, self.maximum = min_value, max_value
        else:
            self.minimum, self.maximum = max_value, min_value
        if self.minimum < 0:
            span = self.maximum - self.minimum
            self.zero = (0.0 - self.minimum) / span if span else math.inf
            self.only_positive = False
        else:
            self.only_positive = True
        self._colours = self._generate()

    @property
    def labels(self) -> tuple[str, str]:
        """Text of the lower and upper range labels."""
        return str(self.minimum), str(self.maximum)

    def _stops(self) -> tuple[float, tuple[Colour, Colour, Colour]]:
        if self.only_positive:
            return 0.5, _POSITIVE
        return self.zero, _SIGNED

    @property
    def gradient_stops(self) -> list[tuple[float, Colour]]:
        """Positions and colours of the three gradient stops."""
        middle, (first, second, third) = self._stops()
        return [(0.0, first), (middle, second), (1.0, third)]

    @property
    def colours(self) -> list[Colour | None]:
        """The colour of every bin."""
        return list(self._colours)

    def _generate(self) -> list[Colour | None]:
        middle, (first, second, third) = self._stops()
        if not math.isfinite(middle):
            return [None] * self.n_bins
        to_middle = math.floor(self.n_bins * middle)

        def ratio(i: int) -> float:
            if to_middle:
                return i / to_middle
            return math.nan if i == 0 else math.inf

        colours: list[Colour | None] = []
        for i in range(min(to_middle, self.n_bins)):
            t = ratio(i)
            colours.append(
                _rgb(t * (s - f) + f for f, s in zip(first, second))
            )
        for i in range(to_middle, self.n_bins):
            t = ratio(i)
            colours.append(
                _rgb(t * (h - s) + f for f, s, h in zip(first, second, third))
            )
        return colours

    def color(self, percentile: int) -> Colour | None:
        """Colour of a bin; black past the last bin, ``None`` before the first."""
        if percentile < 0:
            return None
        if percentile < len(self._colours):
            return self._colours[percentile]
        return BLACK
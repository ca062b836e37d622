"""Post-processing of PIV vector fields."""

from __future__ import annotations

from collections.abc import Callable

from .datacontainer import DataContainer
from .filters import (
    VectorField,
    gaussian_blur,
    global_range,
    global_std,
    image_intensity,
    local_detect,
    mean_interpolate,
    snr,
)
from .options import FilterOptions


def filter_data(field: VectorField, options: FilterOptions) -> None:
    """Apply every enabled filter to the field, in a fixed order."""
    steps = (
        (options.snr, snr),
        (options.image_intensity, image_intensity),
        (options.global_range, global_range),
        (options.global_std, global_std),
        (options.local, local_detect),
        (options.interpolate, mean_interpolate),
        (options.smoothing, gaussian_blur),
    )
    for enabled, step in steps:
        if enabled:
            step(field, options)


class Analysis:
    """Filters the vector field currently on display.

    Callbacks in ``on_current_filtered`` are called with no arguments after
    the current field has been filtered.
    """

    def __init__(self, options: FilterOptions, data: DataContainer) -> None:
        self.options = options
        self.data = data
        self.on_current_filtered: list[Callable[[], object]] = []

    def filter_current(self) -> None:
        """Filter the current vector field, if there is one."""
        if not self.data.has_current_vectors():
            return
        filter_data(self.data.current_piv_data, self.options)
        for callback in self.on_current_filtered:
            callback()
"""Settings that control the vector-field filters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class LocalMethod(IntEnum):
    """Central estimator used by the local outlier detector."""

    MEAN = 0
    MEDIAN = 1


class InterpolationMethod(IntEnum):
    """Method used to fill in vectors rejected by a filter."""

    MEAN = 0


@dataclass
class FilterOptions:
    """All filtering options, with their default values."""

    # Global
    global_std: bool = False
    n_std: float = 3.0
    global_range: bool = False
    umin: float = -10.0
    umax: float = 10.0
    vmin: float = -10.0
    vmax: float = 10.0

    # Local
    local: bool = False
    local_method: LocalMethod = LocalMethod.MEDIAN
    local_nxn: int = 5
    u_tol: float = 3.0
    v_tol: float = 3.0

    # Interpolation
    interpolate: bool = False
    int_nxn: int = 5
    int_method: InterpolationMethod = InterpolationMethod.MEAN

    # Smoothing
    smoothing: bool = False
    smooth_nxn: int = 5
    smooth_radius: float = 0.8

    # Signal-to-noise ratio
    snr: bool = False
    snr_thresh: float = 2.0

    # Image intensity
    image_intensity: bool = False
    image_thresh: float = 0.0

    def set_range(self, umin: float, umax: float, vmin: float, vmax: float) -> None:
        """Set the allowed horizontal and vertical displacement ranges (pixels)."""
        self.umin = umin
        self.umax = umax
        self.vmin = vmin
        self.vmax = vmax

    def set_local_tolerance(self, u_tol: float, v_tol: float) -> None:
        """Set the allowed deviations from the local central estimator (pixels)."""
        self.u_tol = u_tol
        self.v_tol = v_tol
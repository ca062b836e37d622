"""Particle image velocimetry: FFT cross-correlation, sub-pixel fitting and vector field filtering."""

__version__ = "0.1.0"

__all__ = [
    "analysis",
    "colourbar",
    "correlate",
    "datacontainer",
    "filters",
    "grid",
    "imagedata",
    "importing",
    "options",
    "subpixel",
    "threadpool",
]
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pivkit"
version = "0.1.0"
description = "Particle image velocimetry toolkit: FFT cross-correlation, sub-pixel peak fitting and vector field filtering"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["piv", "particle image velocimetry", "cross-correlation", "fft", "vector field"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pivkit"]

[tool.pytest.ini_options]
addopts = "-ra"

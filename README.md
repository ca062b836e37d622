# pivkit

Building blocks for particle image velocimetry (PIV): cross-correlate
interrogation windows of two images, estimate the sub-pixel displacement of
the correlation peak, and clean up the resulting vector field.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Modules

- `pivkit.imagedata`: `ImageData`, a grey-scale image held as a numpy array
  of floats. `ImageData()` has no buffer, `ImageData(width, height)` is
  zero-filled, `ImageData(data=array)` copies a 2-D array. It offers
  `width`, `height`, `size`, `buffer`, `pixel(i, j)` (returns -1.0 when there
  is no buffer), `linebuffer(row)` (a writable row view; raises
  `ImageDataError` for a row out of range) and `to_gray8()`, which scales the
  image to 8-bit grey levels and keeps the result for later calls.
- `pivkit.grid`: `generate_grid(roi, delta_x, delta_y, int_length_x,
  int_length_y, mask=None)` returns the top-left corners `(x, y)` of the
  interrogation windows inside a `Rect`, row by row. With a mask (a 2-D alpha
  array or an RGBA image), a window is kept only if every mask pixel it
  covers is fully transparent. Spacing must be positive.
- `pivkit.correlate`: `FFTCrossCorrelator(int_length_x, int_length_y)`.
  Its `cross_correlate(image_a, image_b, top_left_row, top_left_column,
  mean_a, mean_b)` takes the windows at that corner from two images
  (`ImageData` or 2-D arrays), subtracts the given means, zero-pads them to
  twice their size and returns the FFT correlation map, `2 * int_length_y`
  rows by `2 * int_length_x` columns. A window outside the image raises
  `ValueError`.
- `pivkit.subpixel`: `gaussian_sub_pixel(cmap, int_length_x, int_length_y)`
  finds the highest correlation value, fits a three-point Gaussian in each
  direction and returns a `SubPixelResult` with `u`, `v` and `snr`. A peak
  on the edge of the map raises `ValueError`.
- `pivkit.filters`: `VectorField(width, height, points=None, index=-1)`, a
  grid of `PivPoint` values (`x`, `y`, `u`, `v`, `snr`, `intensity`,
  `filtered`, `valid`), with `is_valid`, `filtered`, `data`, `set_data`,
  `set_filter`, `num_valid` and `is_empty`. Positions outside the field read
  as invalid, filtered zero vectors. The filters `snr`, `image_intensity`,
  `global_range`, `global_std` and `local_detect` mark outliers as filtered;
  `mean_interpolate` replaces filtered vectors with the mean of accepted
  neighbours; `gaussian_blur` smooths the whole field.
- `pivkit.options`: `FilterOptions`, a dataclass of which filters run and
  with which parameters, plus `set_range` and `set_local_tolerance`.
  `LocalMethod` (`MEAN`, `MEDIAN`) and `InterpolationMethod` (`MEAN`) pick
  the variants.
- `pivkit.analysis`: `filter_data(field, options)` runs every enabled
  filter in a fixed order: signal-to-noise, image intensity, global range,
  global standard deviation, local detection, interpolation, smoothing.
  `Analysis(options, data).filter_current()` filters the vector field held
  as current in a `DataContainer` and then calls each callback in
  `on_current_filtered`.
- `pivkit.datacontainer`: `MetaData` (index, image names, vector file) and
  `DataContainer`, which keeps image pairs in order, tracks the current pair
  and its `VectorField`, and calls callbacks in `on_images_imported` and
  `on_vector_list_updated`. Loading a vector file is done by the
  `vector_reader` callable you supply.
- `pivkit.importing`: `filter_image_files(directory, names)` keeps names
  with a known image extension (case-insensitive) and returns sorted paths;
  `pair_images(names)` splits names into frame A and frame B lists;
  `only_num(text)` and `remove_indices(files, selected)` are helpers.
- `pivkit.colourbar`: `ColourBar` maps an integer value range onto a
  three-stop colour scale (`set_range`, `color`, `colours`, `labels`,
  `gradient_stops`). Bins whose channels fall outside 0-255 hold `None`;
  `color` returns black past the last bin.
- `pivkit.threadpool`: `ThreadPool(threads)` runs queued callables on worker
  threads. `shutdown()` runs all queued tasks, joins the workers and
  re-raises the first exception a task raised; the pool is also a context
  manager.

## Example

```python
import numpy as np

from pivkit.correlate import FFTCrossCorrelator
from pivkit.imagedata import ImageData
from pivkit.subpixel import gaussian_sub_pixel

rng = np.random.default_rng(0)
frame = rng.random((64, 64))
image_a = ImageData(data=frame)
image_b = ImageData(data=np.roll(frame, shift=(2, 3), axis=(0, 1)))

correlator = FFTCrossCorrelator(32, 32)
cmap = correlator.cross_correlate(
    image_a, image_b, 16, 16,
    mean_a=frame.mean(), mean_b=frame.mean(),
)
result = gaussian_sub_pixel(cmap, 32, 32)
print(result.u, result.v, result.snr)
```

Filtering a vector field:

```python
from pivkit.analysis import filter_data
from pivkit.filters import PivPoint, VectorField
from pivkit.options import FilterOptions

points = [PivPoint(u=1.0, v=0.5) for _ in range(8)] + [PivPoint(u=50.0, v=0.0)]
field = VectorField(3, 3, points)

options = FilterOptions(global_range=True)
options.set_range(-5.0, 5.0, -5.0, 5.0)
filter_data(field, options)
print(field.filtered(2, 2))  # True
```

## What it does not do

pivkit works on data already in memory. It does not read or write image
files or vector files, has no command-line program and no graphical
interface for browsing images or drawing vectors.
import numpy as np
import pytest

from pivkit.grid import Rect, generate_grid


def test_rect_inclusive_edges():
    rect = Rect(2, 3, 10, 5)
    assert rect.right == 11
    assert rect.bottom == 7


def test_grid_points_for_square_roi():
    grid = generate_grid(Rect(0, 0, 64, 64), 16, 16, 32, 32)
    assert grid == [(0, 0), (16, 0), (0, 16), (16, 16)]


def test_grid_windows_fit_inside_roi_and_follow_spacing():
    roi = Rect(5, 7, 100, 80)
    grid = generate_grid(roi, 12, 10, 24, 16)
    assert grid[0] == (roi.left, roi.top)
    for x, y in grid:
        assert x + 24 - 1 <= roi.right
        assert y + 16 - 1 <= roi.bottom
        assert (x - roi.left) % 12 == 0
        assert (y - roi.top) % 10 == 0
    assert len(set(grid)) == len(grid)


def test_grid_is_row_major():
    grid = generate_grid(Rect(0, 0, 50, 50), 8, 8, 16, 16)
    assert grid == sorted(grid, key=lambda p: (p[1], p[0]))


def test_roi_smaller_than_window_gives_empty_grid():
    assert generate_grid(Rect(0, 0, 10, 10), 4, 4, 16, 16) == []


def test_transparent_mask_keeps_all_points():
    roi = Rect(0, 0, 64, 48)
    plain = generate_grid(roi, 8, 8, 16, 16)
    masked = generate_grid(roi, 8, 8, 16, 16, mask=np.zeros((48, 64)))
    assert masked == plain


def test_empty_mask_is_ignored():
    roi = Rect(0, 0, 40, 40)
    assert generate_grid(roi, 8, 8, 16, 16, mask=np.zeros((0, 0))) == generate_grid(
        roi, 8, 8, 16, 16
    )


def _covers(point, length, row, col):
    x, y = point
    return x <= col < x + length and y <= row < y + length


def test_opaque_pixel_removes_covering_windows():
    roi = Rect(0, 0, 64, 64)
    mask = np.zeros((64, 64))
    mask[20, 30] = 255
    plain = generate_grid(roi, 8, 8, 16, 16)
    masked = generate_grid(roi, 8, 8, 16, 16, mask=mask)
    assert set(masked) <= set(plain)
    for point in plain:
        assert (point in masked) == (not _covers(point, 16, 20, 30))


def test_rgba_mask_uses_alpha_channel():
    roi = Rect(0, 0, 32, 32)
    mask = np.zeros((32, 32, 4), dtype=np.uint8)
    mask[..., :3] = 200
    plain = generate_grid(roi, 8, 8, 16, 16)
    assert generate_grid(roi, 8, 8, 16, 16, mask=mask) == plain
    mask[0, 0, 3] = 1
    masked = generate_grid(roi, 8, 8, 16, 16, mask=mask)
    assert (0, 0) not in masked
    assert len(masked) < len(plain)


@pytest.mark.parametrize("dx, dy", [(0, 8), (8, 0), (-1, 8)])
def test_non_positive_spacing_rejected(dx, dy):
    with pytest.raises(ValueError):
        generate_grid(Rect(0, 0, 32, 32), dx, dy, 16, 16)


def test_bad_mask_dimensions_rejected():
    with pytest.raises(ValueError):
        generate_grid(Rect(0, 0, 32, 32), 8, 8, 16, 16, mask=np.zeros(10))
import pytest

from pivkit.importing import (
    IMAGE_EXTENSIONS,
    filter_image_files,
    only_num,
    pair_images,
    remove_indices,
)


def test_filter_keeps_images_sorted_and_prefixed():
    names = ["b.PNG", "a.tif", "notes.txt", "c.jpeg", "readme"]
    assert filter_image_files("/data", names) == [
        "/data/a.tif",
        "/data/b.PNG",
        "/data/c.jpeg",
    ]


@pytest.mark.parametrize("extension", IMAGE_EXTENSIONS)
def test_filter_accepts_every_known_extension(extension):
    assert filter_image_files("d", ["frame" + extension.upper()]) == [
        "d/frame" + extension.upper()
    ]


def test_filter_rejects_unknown_extension():
    assert filter_image_files("d", ["frame.raw", "frame.tiff"]) == []


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("12a", False), ("", True), ("1_2.3", True), ("x", False)],
)
def test_only_num(text, expected):
    assert only_num(text) is expected


def test_remove_indices_drops_selected_positions():
    assert remove_indices(["a", "b", "c", "d"], [1, 3]) == ["a", "c"]


def test_remove_indices_with_nothing_selected_keeps_all():
    assert remove_indices(["a", "b"], []) == ["a", "b"]


def test_remove_indices_result_length():
    files = [f"f{n}" for n in range(10)]
    result = remove_indices(files, [0, 4, 9])
    assert len(result) == 7
    assert "f4" not in result


def test_pair_equal_length_names_consecutively():
    frame_a, frame_b = pair_images(["b2", "a1", "a2", "b1"])
    assert frame_a == ["a1", "b1"]
    assert frame_b == ["a2", "b2"]


def test_pair_equal_length_odd_count_drops_last():
    frame_a, frame_b = pair_images(["x1", "x2", "x3"])
    assert frame_a == ["x1"]
    assert frame_b == ["x2"]


def test_pair_empty_list():
    assert pair_images([]) == ([], [])


def test_pair_marked_names_ranked_by_length():
    names = ["run_1a.tif", "run_1b.tif", "run_10a.tif", "run_10b.tif"]
    frame_a, frame_b = pair_images(names)
    assert frame_a == ["run_1a.tif", "run_10a.tif"]
    assert frame_b == ["run_1b.tif", "run_10b.tif"]


def test_pair_marked_names_scan_order():
    frame_a, frame_b = pair_images(["pa", "pb", "qa", "qbb", "ra", "rb"])
    assert frame_a == ["pa", "ra", "qa"]
    assert frame_b == ["pb", "rb", "qbb"]


def test_pair_numbered_names_in_sorted_order():
    frame_a, frame_b = pair_images(["f1.png", "f2.png", "f10.png", "f11.png"])
    assert frame_a == ["f1.png", "f11.png"]
    assert frame_b == ["f10.png", "f2.png"]


def test_pair_marked_odd_count_raises():
    with pytest.raises(ValueError):
        pair_images(["xa", "xb", "xyc"])


def test_pair_covers_every_name_once():
    names = ["img_2a.png", "img_2b.png", "img_11a.png", "img_11b.png"]
    frame_a, frame_b = pair_images(names)
    assert len(frame_a) == len(frame_b)
    assert sorted(frame_a + frame_b) == sorted(names)
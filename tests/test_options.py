import pytest

from pivkit.options import FilterOptions, InterpolationMethod, LocalMethod


def test_method_codes_match_documented_values():
    options = FilterOptions()
    assert int(options.local_method) == 1
    assert int(options.int_method) == 0
    assert LocalMethod(0) is LocalMethod.MEAN
    assert LocalMethod(1) is options.local_method
    assert InterpolationMethod(0) is options.int_method


def test_defaults_global():
    options = FilterOptions()
    assert options.global_std is False
    assert options.n_std == 3.0
    assert options.global_range is False
    assert (options.umin, options.umax, options.vmin, options.vmax) == (
        -10.0,
        10.0,
        -10.0,
        10.0,
    )


def test_defaults_local_and_interpolation():
    options = FilterOptions()
    assert options.local is False
    assert options.local_method is LocalMethod.MEDIAN
    assert options.local_nxn == 5
    assert (options.u_tol, options.v_tol) == (3.0, 3.0)
    assert options.interpolate is False
    assert options.int_nxn == 5
    assert options.int_method is InterpolationMethod.MEAN


def test_defaults_smoothing_snr_intensity():
    options = FilterOptions()
    assert options.smoothing is False
    assert options.smooth_nxn == 5
    assert options.smooth_radius == pytest.approx(0.8)
    assert options.snr is False
    assert options.snr_thresh == 2.0
    assert options.image_intensity is False
    assert options.image_thresh == 0.0


def test_set_range_round_trip():
    options = FilterOptions()
    options.set_range(-1.5, 2.5, -3.5, 4.5)
    assert (options.umin, options.umax, options.vmin, options.vmax) == (
        -1.5,
        2.5,
        -3.5,
        4.5,
    )


def test_set_local_tolerance_round_trip():
    options = FilterOptions()
    options.set_local_tolerance(0.25, 0.75)
    assert options.u_tol == 0.25
    assert options.v_tol == 0.75


def test_instances_are_independent():
    first = FilterOptions()
    second = FilterOptions()
    first.set_range(0.0, 1.0, 0.0, 1.0)
    assert second.umax == 10.0
    assert first != second
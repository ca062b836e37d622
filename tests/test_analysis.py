from pivkit.analysis import Analysis, filter_data
from pivkit.datacontainer import DataContainer
from pivkit.filters import PivPoint, VectorField
from pivkit.options import FilterOptions


def _row(index=0):
    points = [
        PivPoint(u=1.0, v=0.0, snr=5.0),
        PivPoint(u=100.0, v=0.0, snr=1.0),
        PivPoint(u=3.0, v=0.0, snr=5.0),
    ]
    return VectorField(3, 1, points, index=index)


def test_nothing_enabled_leaves_field_unchanged():
    field = _row()
    filter_data(field, FilterOptions())
    assert [field.data(0, j).u for j in range(3)] == [1.0, 100.0, 3.0]
    assert not any(field.filtered(0, j) for j in range(3))


def test_snr_filter_flags_low_ratio():
    field = _row()
    filter_data(field, FilterOptions(snr=True))
    assert [field.filtered(0, j) for j in range(3)] == [False, True, False]
    assert field.data(0, 1).u == 100.0


def test_snr_then_interpolation_replaces_rejected_vector():
    field = _row()
    filter_data(field, FilterOptions(snr=True, interpolate=True, int_nxn=3))
    assert field.data(0, 1).u == 2.0
    assert field.data(0, 0).u == 1.0
    assert field.data(0, 2).u == 3.0


def test_filter_current_without_vectors_does_nothing():
    container = DataContainer()
    analysis = Analysis(FilterOptions(snr=True), container)
    calls = []
    analysis.on_current_filtered.append(lambda: calls.append(1))
    analysis.filter_current()
    assert calls == []


def test_filter_current_filters_displayed_field():
    container = DataContainer()
    container.append(["a"], ["b"])
    container.set_current_index(0, True)
    field = _row(index=0)
    container.set_current_piv_data(field)
    analysis = Analysis(FilterOptions(snr=True), container)
    calls = []
    analysis.on_current_filtered.append(lambda: calls.append(1))
    analysis.filter_current()
    assert calls == [1]
    assert field.filtered(0, 1) is True
    assert field.filtered(0, 0) is False


def test_filter_current_skips_field_of_other_pair():
    container = DataContainer()
    container.append(["a0", "a1"], ["b0", "b1"])
    container.set_current_index(1, True)
    field = _row(index=0)
    container.set_current_piv_data(field)
    Analysis(FilterOptions(snr=True), container).filter_current()
    assert field.filtered(0, 1) is False
import numpy as np
import pytest

from densela.errors import DimensionError, IndexOutOfRangeError
from densela.vector import ColumnView, DenseVector, RowView, vec
from tests.helpers import check_progression


def test_vec_factory_values():
    v = vec(0.0, 1.1, 2.2, 3.3, 4.4, 5.5)
    assert v.dimension == 6
    assert v.get(3) == 3.3


def test_dense_vector_starts_zeroed():
    v = DenseVector(6)
    assert v.dimension == 6
    assert len(v) == 6
    assert v.to_list() == [0.0] * 6


def test_get_set():
    v = vec(0.0, 1.1, 2.2, 3.3, 4.4, 5.5)
    v.set(3, 33.3)
    assert v.get(3) == 33.3
    v[0] = -1
    assert v[0] == -1.0
    assert isinstance(v.get(0), float)


def test_negative_dimension_rejected():
    with pytest.raises(DimensionError):
        DenseVector(-1)


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_index_is_fatal(index):
    v = vec(1, 2, 3)
    with pytest.raises(IndexOutOfRangeError):
        v.get(index)
    with pytest.raises(IndexOutOfRangeError):
        v.set(index, 0.0)


def test_non_integer_index_rejected():
    v = vec(1, 2, 3)
    with pytest.raises(TypeError):
        v.get(1.0)


def test_numpy_integer_index_accepted():
    v = vec(1, 2, 3)
    assert v.get(np.int64(2)) == 3.0


def test_compare_lexicographic():
    assert vec(1, 2, 3).compare(vec(1, 2, 4)) == -1
    assert vec(1, 3).compare(vec(1, 2, 4)) == 1
    assert vec(1, 2, 3).compare(vec(1, 2, 3)) == 0


def test_shorter_prefix_is_less():
    short = vec(1, 2)
    long = vec(1, 2, 0)
    assert short.compare(long) == -1
    assert long.compare(short) == 1
    assert short < long
    assert long >= short
    assert short != long


def test_nan_sorts_last_and_equals_itself():
    nan = float("nan")
    assert vec(nan) != vec(1.0)
    assert vec(nan) != vec(2.0)
    assert vec(nan) == vec(nan)
    assert vec(1.0) < vec(nan)
    assert vec(float("inf")).compare(vec(nan)) == -1
    assert vec(nan).compare(vec(float("inf"))) == 1
    assert vec(0, nan, 1).compare(vec(0, nan, 2)) == -1


def test_negative_zero_sorts_before_zero():
    assert vec(-0.0).compare(vec(0.0)) == -1
    assert vec(0.0).compare(vec(-0.0)) == 1
    assert vec(-0.0) != vec(0.0)
    assert vec(-0.0) == vec(-0.0)
    assert vec(-1.0) < vec(-0.0)


def test_equality_is_structural(grid):
    row = grid.get_row(2)
    assert isinstance(row, RowView)
    assert row == vec(20, 21, 22, 23, 24, 25)
    assert vec(20, 21, 22, 23, 24, 25) == row
    assert row != vec(20, 21, 22)


def test_equality_with_other_types():
    assert vec(1, 2) != [1.0, 2.0]
    assert (vec(1, 2) == "x") is False


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(vec(1, 2))


def test_str_uses_six_decimals():
    assert str(vec(1, 2.5, -3)) == "<1.000000, 2.500000, -3.000000>"
    assert str(DenseVector(0)) == "<>"


def test_iteration_and_conversion():
    v = vec(4, 5, 6)
    assert list(v) == [4.0, 5.0, 6.0]
    assert np.array_equal(v.to_numpy(), np.array([4.0, 5.0, 6.0]))


def test_row_and_column_views(grid):
    check_progression(grid.get_row(2), 20, 1)
    check_progression(grid.get_col(1), 1, 10)
    assert grid.get_col(1) == vec(1, 11, 21, 31, 41, 51)


def test_row_view_writes_through(grid):
    row = RowView(grid, 3, 2, 3)
    assert row.dimension == 3
    assert row.to_list() == [32.0, 33.0, 34.0]
    row.set(1, 99.0)
    assert grid.get(3, 3) == 99.0


def test_column_view_writes_through(grid):
    col = ColumnView(grid, 4, 1, 4)
    assert col.to_list() == [14.0, 24.0, 34.0, 44.0]
    col.set(3, 101.0)
    assert grid.get(4, 4) == 101.0


def test_view_sees_later_writes(grid):
    col = grid.get_col(0)
    grid.set(5, 0, -7.0)
    assert col.get(5) == -7.0


def test_view_index_bounds(grid):
    row = grid.get_sub_row(0, 2, 2)
    with pytest.raises(IndexOutOfRangeError):
        row.get(2)
    with pytest.raises(IndexOutOfRangeError):
        row.set(-1, 0.0)


def test_view_span_must_fit(grid):
    with pytest.raises(IndexOutOfRangeError):
        RowView(grid, 0, 4, 3)
    with pytest.raises(IndexOutOfRangeError):
        ColumnView(grid, 6, 0, 1)
    with pytest.raises(DimensionError):
        ColumnView(grid, 0, 0, -1)

"""
Tests for Grid: construction checks, bracket search and slices.
"""
import numpy as np
import pytest

from ndinterp import (
    Grid,
    InterpolationError,
    ExtrapolationBelow,
    ExtrapolationAbove,
)


def gen_grid():
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    y = np.array([4.0, 3.0, 2.0, 1.0, 1.0])
    return Grid((x,), y)


def gen_grid_2d():
    x = np.array([0.0, 0.5, 1.5, 3.0])
    y = np.array([-1.0, 0.0, 1.0])
    values = np.arange(12, dtype=np.float64).reshape(4, 3)
    return Grid((x, y), values)


# ===================================================================
# closest_below
# ===================================================================

class TestClosestBelow:
    def test_index_search(self):
        grid = gen_grid()
        assert grid.closest_below([0.5]) == (0,)
        assert grid.closest_below([3.2]) == (3,)

    def test_scalar_query(self):
        grid = gen_grid()
        assert grid.closest_below(2.5) == (2,)

    def test_interior_node_is_upper_end_of_bracket(self):
        grid = gen_grid()
        assert grid.closest_below([2.0]) == (1,)

    def test_first_node_is_below(self):
        grid = gen_grid()
        with pytest.raises(ExtrapolationBelow) as info:
            grid.closest_below([0.0])
        assert info.value.query == 0.0
        assert info.value.axis == 0

    def test_last_node_is_inside(self):
        grid = gen_grid()
        assert grid.closest_below([4.0]) == (3,)

    def test_below(self):
        grid = gen_grid()
        with pytest.raises(ExtrapolationBelow) as info:
            grid.closest_below([-0.25])
        assert info.value.query == -0.25

    def test_above(self):
        grid = gen_grid()
        with pytest.raises(ExtrapolationAbove) as info:
            grid.closest_below([4.5])
        assert info.value.query == 4.5

    def test_each_axis_searched_independently(self):
        grid = gen_grid_2d()
        assert grid.closest_below([1.0, 0.5]) == (1, 1)
        assert grid.closest_below([3.0, -0.5]) == (2, 0)

    def test_first_failing_axis_reported(self):
        grid = gen_grid_2d()
        with pytest.raises(ExtrapolationAbove) as info:
            grid.closest_below([3.5, -2.0])
        assert info.value.axis == 0
        assert info.value.query == 3.5

    def test_second_axis_failure(self):
        grid = gen_grid_2d()
        with pytest.raises(ExtrapolationBelow) as info:
            grid.closest_below([1.0, -2.0])
        assert info.value.axis == 1
        assert info.value.query == -2.0

    def test_errors_are_value_errors(self):
        grid = gen_grid()
        with pytest.raises(ValueError):
            grid.closest_below([5.0])

    def test_wrong_number_of_coordinates(self):
        grid = gen_grid_2d()
        with pytest.raises(ValueError, match="Expected 2"):
            grid.closest_below([1.0])

    @pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
    def test_non_finite_query(self, bad):
        grid = gen_grid_2d()
        with pytest.raises(ValueError, match="infs or nans") as info:
            grid.closest_below([1.0, bad])
        assert not isinstance(info.value, InterpolationError)


# ===================================================================
# Construction
# ===================================================================

class TestConstruction:
    def test_properties(self):
        grid = gen_grid_2d()
        assert grid.ndim == 2
        assert grid.shape == (4, 3)
        assert grid.bounds == ((0.0, 3.0), (-1.0, 1.0))

    def test_inputs_are_copied_and_read_only(self):
        x = np.array([0.0, 1.0, 2.0])
        y = np.array([1.0, 2.0, 3.0])
        grid = Grid((x,), y)
        x[0] = -10.0
        y[0] = -10.0
        assert grid.axes[0][0] == 0.0
        assert grid.values[0] == 1.0
        with pytest.raises(ValueError):
            grid.values[0] = 5.0
        with pytest.raises(ValueError):
            grid.axes[0][0] = 5.0

    def test_accepts_lists(self):
        grid = Grid([[0, 1, 2]], [1, 2, 3])
        assert grid.values.dtype == np.float64

    def test_unsorted_axis(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            Grid(([0.0, 2.0, 1.0],), [1.0, 2.0, 3.0])

    def test_repeated_node(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            Grid(([0.0, 1.0, 1.0],), [1.0, 2.0, 3.0])

    def test_single_node_axis(self):
        with pytest.raises(ValueError, match="too small"):
            Grid(([0.0],), [1.0])

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="Shape mismatch"):
            Grid(([0.0, 1.0, 2.0], [0.0, 1.0]), np.zeros((2, 3)))

    def test_rank_mismatch(self):
        with pytest.raises(ValueError, match="Rank mismatch"):
            Grid(([0.0, 1.0, 2.0],), np.zeros((3, 2)))

    def test_non_finite(self):
        with pytest.raises(ValueError, match="NaNs"):
            Grid(([0.0, np.nan, 2.0],), [1.0, 2.0, 3.0])
        with pytest.raises(ValueError, match="NaNs"):
            Grid(([0.0, 1.0, 2.0],), [1.0, np.inf, 3.0])

    def test_all_problems_reported(self):
        with pytest.raises(ValueError) as info:
            Grid(([0.0, 2.0, 1.0], [0.0]), np.zeros((3, 2)))
        msg = str(info.value)
        assert "strictly increasing" in msg
        assert "too small" in msg
        assert "Shape mismatch" in msg

    def test_no_axes(self):
        with pytest.raises(ValueError, match="At least one axis"):
            Grid((), 1.0)


# ===================================================================
# slice
# ===================================================================

class TestSlice:
    def test_slice_along_first_axis(self):
        grid = gen_grid_2d()
        line = grid.slice(0, [2])
        np.testing.assert_array_equal(line.x, grid.axes[0])
        np.testing.assert_array_equal(line.y, grid.values[:, 2])

    def test_slice_along_second_axis(self):
        grid = gen_grid_2d()
        line = grid.slice(1, [1])
        np.testing.assert_array_equal(line.x, grid.axes[1])
        np.testing.assert_array_equal(line.y, grid.values[1, :])

    def test_slice_derivative(self):
        grid = gen_grid()
        assert grid.slice(0, []).derivative_at(1) == -1.0

    def test_bad_axis(self):
        grid = gen_grid_2d()
        with pytest.raises(IndexError):
            grid.slice(2, [0])

    def test_bad_index_count(self):
        grid = gen_grid_2d()
        with pytest.raises(ValueError):
            grid.slice(0, [0, 1])

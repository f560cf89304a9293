"""
Tests for Slice: one-sided, central and boundary derivatives.
"""
import numpy as np
import pytest

from ndinterp import Slice


def gen_slice():
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    y = np.array([4.0, 3.0, 2.0, 1.0, 1.0])
    return Slice(x, y)


class TestCentral:
    def test_check_derivative(self):
        line = gen_slice()
        assert line.central_at(1) == -1.0
        assert line.central_at(3) == -0.5

    def test_derivative_at_interior_is_central(self):
        line = gen_slice()
        for i in range(1, 4):
            assert line.derivative_at(i) == line.central_at(i)

    def test_evenly_spaced_matches_centered_difference(self):
        x = np.linspace(-1.0, 2.0, 13)
        y = np.exp(x) + x**3
        line = Slice(x, y)
        dx = x[1] - x[0]
        for i in range(1, len(x) - 1):
            expected = (y[i + 1] - y[i - 1]) / (2 * dx)
            assert np.isclose(line.central_at(i), expected, rtol=1e-12)

    def test_uneven_spacing(self):
        line = Slice([0.0, 1.0, 3.0], [0.0, 1.0, 9.0])
        assert line.central_at(1) == pytest.approx(2.5)

    def test_needs_both_neighbours(self):
        line = gen_slice()
        with pytest.raises(IndexError):
            line.central_at(0)
        with pytest.raises(IndexError):
            line.central_at(4)


class TestOneSided:
    def test_backward(self):
        line = gen_slice()
        assert line.backward_at(1) == -1.0
        assert line.backward_at(4) == 0.0

    def test_forward(self):
        line = gen_slice()
        assert line.forward_at(0) == -1.0
        assert line.forward_at(3) == 0.0

    def test_out_of_range(self):
        line = gen_slice()
        with pytest.raises(IndexError):
            line.backward_at(0)
        with pytest.raises(IndexError):
            line.forward_at(4)
        with pytest.raises(IndexError):
            line.derivative_at(5)
        with pytest.raises(IndexError):
            line.derivative_at(-1)


class TestBoundaryPolicy:
    def test_first_node_uses_forward_difference(self):
        line = gen_slice()
        assert line.derivative_at(0) == line.forward_at(0) == -1.0

    def test_last_node_uses_backward_difference(self):
        line = gen_slice()
        assert line.derivative_at(4) == line.backward_at(4) == 0.0

    def test_two_nodes(self):
        line = Slice([1.0, 3.0], [2.0, 6.0])
        assert line.derivative_at(0) == 2.0
        assert line.derivative_at(1) == 2.0


class TestConstruction:
    def test_length(self):
        assert len(gen_slice()) == 5

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            Slice([0.0, 1.0, 2.0], [1.0, 2.0])

    def test_too_short(self):
        with pytest.raises(ValueError):
            Slice([0.0], [1.0])

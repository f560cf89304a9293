"""
Tests for inverse distance weighting of scattered samples.
"""
import numpy as np
import pytest

from ndinterp import (
    Commons,
    Input,
    Coordinates,
    GeoPoint,
    KDTree,
    InverseDistanceWeighting,
)


def gen_line():
    points = [Coordinates([x]) for x in (0.0, 1.0, 2.0, 4.0)]
    return Commons(Input.stack(points, [0.0, 10.0, 20.0, 40.0]))


class TestInverseDistanceWeighting:
    def test_exact_at_samples(self):
        commons = gen_line()
        idw = InverseDistanceWeighting(commons, k=3)
        for point, value in zip(commons.points, commons.values):
            assert idw(point) == value

    def test_midpoint_of_two(self):
        idw = InverseDistanceWeighting(gen_line(), k=2)
        assert idw(Coordinates([0.5])) == pytest.approx(5.0)

    def test_weights(self):
        idw = InverseDistanceWeighting(gen_line(), k=2, power=1.0)
        # Neighbours 1.0 (d=0.25) and 0.0 (d=0.75): weights 4 and 4/3
        expected = (4.0 * 10.0 + 4.0 / 3.0 * 0.0) / (4.0 + 4.0 / 3.0)
        assert idw(Coordinates([0.75])) == pytest.approx(expected)

    def test_constant_field(self):
        rng = np.random.default_rng(2)
        table = np.column_stack((rng.uniform(size=(40, 2)), np.full(40, 3.0)))
        commons = Commons.from_table(table)
        commons.build_finder(KDTree)
        idw = InverseDistanceWeighting(commons, k=5)
        values = idw.evaluate_many(rng.uniform(size=(10, 2)))
        np.testing.assert_allclose(values, 3.0, rtol=1e-14)

    def test_k_larger_than_samples(self):
        idw = InverseDistanceWeighting(gen_line(), k=100)
        value = idw(Coordinates([3.0]))
        assert 0.0 < value < 40.0

    def test_geographic(self):
        commons = Commons([
            (GeoPoint(0.0, 0.0), 1.0),
            (GeoPoint(0.0, 2.0), 3.0),
        ])
        idw = InverseDistanceWeighting(commons, k=2)
        assert idw(GeoPoint(0.0, 1.0)) == pytest.approx(2.0)

    def test_invalid_parameters(self):
        commons = gen_line()
        with pytest.raises(ValueError):
            InverseDistanceWeighting(commons, k=0)
        with pytest.raises(ValueError):
            InverseDistanceWeighting(commons, power=0.0)

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


import numpy as np


__all__ = ["InverseDistanceWeighting"]


class InverseDistanceWeighting:
    """
    Shepard interpolation over the nearest scattered samples.

    Parameters
    ----------
    commons : Commons
        Scattered samples, with or without an attached finder.
    k : int, optional
        Number of nearest samples to weight. Default is 8.
    power : float, optional
        Exponent of the inverse distance weights. Default is 2.0.
    """

    def __init__(self, commons, k=8, power=2.0):
        if int(k) != k or k < 1:
            raise ValueError(f"k must be a positive integer, got {k}.")
        if not power > 0:
            raise ValueError(f"power must be positive, got {power}.")
        self.commons = commons
        self.k = int(k)
        self.power = float(power)

    def __call__(self, point):
        """
        Interpolated value at a single point.

        A point that coincides with a sample returns the sample value.
        """

        nearest = self.commons.nearest(point, self.k)
        index = np.array([i for i, _ in nearest], dtype=np.int64)
        dist = np.array([d for _, d in nearest], dtype=np.float64)
        if dist[0] == 0.0:
            return float(self.commons.values[index[0]])
        w = dist ** -self.power
        return float(np.dot(w, self.commons.values[index]) / w.sum())

    def evaluate_many(self, points):
        """Interpolated values at a sequence of points."""
        return np.array([self(p) for p in points], dtype=np.float64)

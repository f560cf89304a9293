# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


"""
Numerical derivatives of one-dimensional slices.

A slice pairs one axis with the values taken along it, with every other
axis held at a fixed index. Slices come from a grid or from an
intermediate result of the cubic reduction.
"""

import numpy as np


__all__ = ["Slice"]


class Slice:
    """
    One-dimensional projection of sampled values along a single axis.

    Parameters
    ----------
    x : np.ndarray
        1D strictly increasing coordinates.
    y : np.ndarray
        1D values at the coordinates.
    """

    def __init__(self, x, y):
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        if x.ndim != 1 or y.shape != x.shape:
            raise ValueError(
                f"Slice coordinates and values must be 1D arrays of equal "
                f"length, got shapes {x.shape} and {y.shape}."
            )
        if x.shape[0] < 2:
            raise ValueError("A slice needs at least two nodes.")
        self.x = x
        self.y = y

    def __len__(self):
        return self.x.shape[0]

    def _check_index(self, index):
        n = len(self)
        if not 0 <= index < n:
            raise IndexError(f"Index {index} out of range for {n} nodes.")

    def backward_at(self, index):
        """One-sided difference towards the previous node, ``index >= 1``."""
        self._check_index(index)
        if index < 1:
            raise IndexError("Backward difference needs index >= 1.")
        x, y = self.x, self.y
        return (y[index] - y[index - 1]) / (x[index] - x[index - 1])

    def forward_at(self, index):
        """One-sided difference towards the next node, ``index <= n-2``."""
        self._check_index(index)
        return self.backward_at(index + 1)

    def central_at(self, index):
        """
        Average of the backward differences at ``index`` and
        ``index + 1``, for ``1 <= index <= n-2``.
        """
        self._check_index(index)
        if not 1 <= index <= len(self) - 2:
            raise IndexError(
                "Central difference needs a neighbour on both sides."
            )
        return 0.5 * (self.backward_at(index) + self.backward_at(index + 1))

    def derivative_at(self, index):
        """
        Derivative estimate at a node.

        Central difference in the interior, forward difference at the
        first node and backward difference at the last node.
        """
        self._check_index(index)
        if index == 0:
            return self.forward_at(0)
        if index == len(self) - 1:
            return self.backward_at(index)
        return self.central_at(index)

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


from threadpoolctl import threadpool_limits
from numba import set_num_threads

import numpy as np

from .derivatives import Slice
from .grid import Grid
from .logger import get_logger
from .utils import (
    check_points,
    check_bounds,
    raise_out_of_bounds,
    hermite_basis,
    hermite_band,
    evaluate,
)


__all__ = ["hermite", "interpolate", "CubicInterpolator"]


log = get_logger(__name__)


def hermite(line, index, query):
    """
    Evaluate the cubic Hermite interpolant of a slice on one bracket.

    Parameters
    ----------
    line : Slice
        Coordinates and values along one axis.
    index : int
        Lower node of the bracket ``[index, index + 1]``.
    query : float
        Coordinate inside the bracket.

    Returns
    -------
    float
    """

    x, y = line.x, line.y
    dx = x[index + 1] - x[index]
    t = (query - x[index]) / dx
    h00, h10, h01, h11 = hermite_basis(t)
    return (
        h00 * y[index]
        + h10 * dx * line.derivative_at(index)
        + h01 * y[index + 1]
        + h11 * dx * line.derivative_at(index + 1)
    )


def _reduce(axes, values, indices, query):
    # Innermost axis first; each outer node keeps the neighbours its
    # derivative needs.
    axis = axes[0]
    i = indices[0]
    lo = max(i - 1, 0)
    hi = min(i + 2, axis.shape[0] - 1)
    if values.ndim == 1:
        line = values[lo:hi + 1]
    else:
        line = np.array([
            _reduce(axes[1:], values[j], indices[1:], query[1:])
            for j in range(lo, hi + 1)
        ])
    return hermite(Slice(axis[lo:hi + 1], line), i - lo, query[0])


def interpolate(grid, query):
    """
    Cubic interpolation of a grid at a single point.

    The innermost axis is reduced first. On every outer axis the
    reduction keeps the bracket plus one neighbour on each side, since
    the derivative of the intermediate at a bracket node is a central
    difference over those neighbours. A query therefore costs up to
    ``4**(D-1)`` one-dimensional Hermite evaluations rather than
    ``2**D``.

    Parameters
    ----------
    grid : Grid
        Sampled values.
    query : array-like
        Query coordinates, one per axis.

    Returns
    -------
    float
        Interpolated value.

    Raises
    ------
    ExtrapolationBelow, ExtrapolationAbove
        If the query lies outside the grid on any axis. Nothing is
        evaluated in that case.
    ValueError
        If the query has the wrong length or is not finite.
    """

    query = np.asarray(query, dtype=np.float64).reshape(-1)
    indices = grid.closest_below(query)
    return float(_reduce(grid.axes, grid.values, indices, query))


class CubicInterpolator:
    """
    Batched cubic Hermite interpolator on a D-dimensional grid.

    Parameters
    ----------
    grid : Grid or tuple
        Sampled values, or an ``(axes, values)`` pair to build one from.
    num_threads : int, optional
        Number of threads to use for parallel computations. Default is 1.
    """

    def __init__(self, grid, num_threads=1):

        if not isinstance(grid, Grid):
            axes, values = grid
            grid = Grid(axes, values)
        if int(num_threads) < 1:
            raise ValueError(
                f"num_threads must be a positive integer, got {num_threads}."
            )

        # Store parameters and internal state
        data = np.ascontiguousarray(grid.values)
        self.grid = grid
        self.flat = data.reshape(-1)
        self.strides = np.array(data.strides, dtype=np.int64) // data.itemsize
        self.bounds = grid.bounds
        self.num_threads = int(num_threads)

        log.debug(
            "Cubic interpolator over %d-D grid, %d thread(s)",
            grid.ndim, self.num_threads,
        )

    def __call__(self, points):
        """
        Evaluate the interpolator at the given query points.

        Parameters
        ----------
        points : array-like
            Input query point coordinates.
            Expected shape is (num_points, ndim).

        Returns
        -------
        values : np.ndarray, shape (num_points,)
            Interpolated values at the input points.

        Raises
        ------
        ExtrapolationBelow, ExtrapolationAbove
            For the first out-of-domain coordinate, scanning points in
            order.
        """

        # Unpack attributes
        grid = self.grid
        ndim = grid.ndim
        num_threads = self.num_threads

        # Validate input points
        msg, points = check_points(points, ndim)
        if msg:
            raise ValueError(msg)

        # Reject out-of-bound points
        flag_all_in, mask_below, mask_above = check_bounds(points, self.bounds)
        if not flag_all_in:
            raise_out_of_bounds(points, mask_below, mask_above)

        num = points.shape[0]
        index = np.empty((num, ndim, 4), dtype=np.int64)
        weights = np.empty((num, ndim, 4), dtype=np.float64)

        # Stencil indices and Hermite weights along every axis
        with threadpool_limits(limits=num_threads):
            for a, axis in enumerate(grid.axes):
                index[:, a, :], weights[:, a, :] = hermite_band(
                    points[:, a], axis
                )

        # Tensor product using Numba JIT-parallelized function
        values = np.zeros(num, dtype=np.float64)
        set_num_threads(num_threads)
        evaluate(
            self.flat, self.strides, index, weights,
            num, ndim, 4, values
        )

        return values

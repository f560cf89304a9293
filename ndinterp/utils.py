# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


import numpy as np
import numba as nb

from .errors import ExtrapolationBelow, ExtrapolationAbove


__all__ = [
    "check_points",
    "check_bounds",
    "raise_out_of_bounds",
    "closest_below",
    "hermite_basis",
    "hermite_band",
    "evaluate",
]


def check_points(points, ndim):
    """
    Validate the input array of query points.

    Parameters
    ----------
    points : array-like
        Input query point coordinates to be validated.
        Expected shape is (num_points, ndim).
    ndim : int
        Number of grid dimensions.

    Returns
    -------
    msg : str or None
        Error message if validation fails, otherwise None.
    points : np.ndarray or None
        Validated array of shape (num_points, ndim), or None on failure.
    """

    try:
        points = np.asarray(points, dtype=np.float64)
    except (ValueError, TypeError):
        msg = "Invalid points: could not convert to a float64 array."
        return msg, None
    if points.ndim != 2 or points.shape[1] != ndim:
        msg = (
            f"Invalid points: expected a 2D array with shape (N, {ndim}), "
            f"got shape {points.shape}."
        )
        return msg, None
    if points.shape[0] == 0:
        msg = "Invalid points: expected at least one point, got empty."
        return msg, None
    if not np.isfinite(points).all():
        msg = "Invalid points: must not contain infs or nans."
        return msg, None
    return None, points


def check_bounds(points, bounds):
    """
    Check whether points lie within the given domain bounds.

    A coordinate equal to the lower bound is out of the domain, since no
    node lies strictly below it. A coordinate equal to the upper bound
    is inside.

    Parameters
    ----------
    points : np.ndarray, shape (num_points, ndim)
        Query point coordinates.
    bounds : tuple of tuples
        ((min_0, max_0), (min_1, max_1), ...) for every axis.

    Returns
    -------
    flag_all_in : bool
        True if all points lie inside the bounds.
    mask_below : np.ndarray, shape (num_points, ndim), dtype=bool
        Coordinates at or below the lower bound of their axis.
    mask_above : np.ndarray, shape (num_points, ndim), dtype=bool
        Coordinates above the upper bound of their axis.
    """

    lower = np.array([b[0] for b in bounds], dtype=np.float64)
    upper = np.array([b[1] for b in bounds], dtype=np.float64)
    mask_below = points <= lower
    mask_above = points > upper
    flag_all_in = not (mask_below.any() or mask_above.any())
    return flag_all_in, mask_below, mask_above


def raise_out_of_bounds(points, mask_below, mask_above):
    """
    Raise the extrapolation error of the first offending coordinate,
    scanning points in order and axes in order within a point.
    """

    mask_out = mask_below | mask_above
    row = int(np.argmax(mask_out.any(axis=1)))
    axis = int(np.argmax(mask_out[row]))
    query = points[row, axis]
    if mask_below[row, axis]:
        raise ExtrapolationBelow(query, axis)
    raise ExtrapolationAbove(query, axis)


def closest_below(p, x):
    """
    Index of the last node strictly below each coordinate.

    Parameters
    ----------
    p : np.ndarray
        1D array of coordinates along a single axis of the query points.
    x : np.ndarray
        1D strictly increasing axis.

    Returns
    -------
    index : np.ndarray, dtype=int
        Greatest ``idx`` with ``x[idx] < p``; -1 where no node lies
        below the coordinate. Coordinates above ``x[-1]`` give
        ``len(x) - 1``.
    """

    return np.searchsorted(x, p, side="left").astype(np.int64) - 1


def hermite_basis(t):
    """
    Cubic Hermite basis functions h00, h10, h01, h11 evaluated at t.
    """

    t2 = t * t
    t3 = t2 * t
    h00 = 2.0 * t3 - 3.0 * t2 + 1.0
    h10 = t3 - 2.0 * t2 + t
    h01 = -2.0 * t3 + 3.0 * t2
    h11 = t3 - t2
    return h00, h10, h01, h11


def hermite_band(p, x):
    """
    Compute the stencil indices and weights of the cubic Hermite
    interpolant at given points along one axis.

    The derivative at a bracket node is the central difference, or the
    one-sided difference at the first and last node of the axis. Each
    interpolated value is therefore a linear combination of at most four
    samples: ``i-1, i, i+1, i+2`` for the bracket ``[i, i+1]``.

    Parameters
    ----------
    p : np.ndarray
        1D array of in-domain coordinates along a single axis.
    x : np.ndarray
        1D strictly increasing axis with at least two nodes.

    Returns
    -------
    index : np.ndarray, shape (num_points, 4), dtype=int
        Stencil node indices, clamped to the axis. Clamped entries carry
        a zero weight.
    weights : np.ndarray, shape (num_points, 4)
        Weight of each stencil node.
    """

    n = x.shape[0]
    i = closest_below(p, x)

    im1 = np.maximum(i - 1, 0)
    ip1 = i + 1
    ip2 = np.minimum(i + 2, n - 1)
    index = np.stack((im1, i, ip1, ip2), axis=1)

    dx = x[ip1] - x[i]
    t = (p - x[i]) / dx
    h00, h10, h01, h11 = hermite_basis(t)
    a = h10 * dx
    b = h11 * dx

    # Central derivative needs a neighbour on the outer side
    left = i >= 1
    right = i <= n - 3
    dxb = np.where(left, x[i] - x[im1], 1.0)
    dxf = np.where(right, x[ip2] - x[ip1], 1.0)

    weights = np.zeros((p.shape[0], 4), dtype=np.float64)

    # Derivative at node i
    weights[:, 0] = np.where(left, -0.5 * a / dxb, 0.0)
    weights[:, 1] = h00 + np.where(left, a * (0.5 / dxb - 0.5 / dx), -a / dx)
    weights[:, 2] = h01 + np.where(left, 0.5 * a / dx, a / dx)

    # Derivative at node i+1
    weights[:, 1] += np.where(right, -0.5 * b / dx, -b / dx)
    weights[:, 2] += np.where(right, b * (0.5 / dx - 0.5 / dxf), b / dx)
    weights[:, 3] = np.where(right, 0.5 * b / dxf, 0.0)

    return index, weights


@nb.njit(parallel=True, fastmath=True)
def evaluate(
    flat,
    strides,
    index,
    weights,
    num,
    ndim,
    d,
    values,
):
    """
    Evaluate at multiple query points by contracting the value tensor
    with the per-axis stencil weights.

    Parameters
    ----------
    flat : np.ndarray
        Value tensor flattened in C order.
    strides : np.ndarray, shape (ndim,), dtype=int
        Element strides of the value tensor along each axis.
    index : np.ndarray, shape (num, ndim, d), dtype=int
        Stencil node indices of each point along each axis.
    weights : np.ndarray, shape (num, ndim, d)
        Stencil weights of each point along each axis.
    num : int
        Number of query points.
    ndim : int
        Number of grid dimensions.
    d : int
        Number of stencil nodes per dimension.
    values : np.ndarray
        1D output array to store the evaluated values, modified in place.

    Returns
    -------
    None
        The evaluated results are stored in-place in the `values` array.
    """

    ncomb = d ** ndim
    for i in nb.prange(0, num):
        value = 0.0
        for c in range(0, ncomb):
            rem = c
            offset = 0
            w = 1.0
            for a in range(ndim - 1, -1, -1):
                j = rem % d
                rem //= d
                offset += index[i, a, j] * strides[a]
                w *= weights[i, a, j]
            if w != 0.0:
                value += w * flat[offset]
        values[i] = value

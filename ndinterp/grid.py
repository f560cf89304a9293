# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


import numpy as np

from .errors import ExtrapolationBelow, ExtrapolationAbove
from .derivatives import Slice
from .logger import get_logger


__all__ = ["Grid"]


log = get_logger(__name__)


class Grid:
    """
    Values tabulated on a structured, axis-aligned grid.

    Parameters
    ----------
    axes : sequence of array-like
        A sequence of D 1D arrays, each strictly increasing, with at
        least two nodes.
    values : array-like
        D-dimensional array of sample values. Its shape must match the
        axis lengths exactly.

    Notes
    -----
    The arrays are copied and made read-only, so a grid can be queried
    from several threads at once.
    """

    def __init__(self, axes, values):

        axes, values = self._check_inputs(axes, values)

        for axis in axes:
            axis.flags.writeable = False
        values.flags.writeable = False

        self.axes = axes
        self.values = values

        log.debug("Built %d-D grid with shape %s", self.ndim, self.shape)

    @staticmethod
    def _check_inputs(axes, values):
        """
        Validate and convert the axes and the value tensor.

        Returns
        -------
        axes : tuple of np.ndarray
            Validated 1D float64 axes.
        values : np.ndarray
            Validated D-dimensional float64 values.
        """

        msg = []

        # Validate axes format and properties
        try:
            axes = tuple(np.array(axis, dtype=np.float64) for axis in axes)
        except (ValueError, TypeError):
            msg.append("Axes must be a sequence of 1D numeric arrays.")
            axes = None
        else:
            if not axes:
                msg.append("At least one axis is required.")
                axes = None

        if axes is not None:
            for n, axis in enumerate(axes):
                if axis.ndim != 1:
                    msg.append(f"Axis {n} must be 1-dimensional.")
                    continue
                if axis.shape[0] < 2:
                    msg.append(
                        f"Axis {n} size too small: "
                        f"expected at least 2, got {axis.shape[0]}."
                    )
                if not np.isfinite(axis).all():
                    msg.append(
                        f"Axis {n} must not contain "
                        "NaNs or infinite values."
                    )
                elif np.any(np.diff(axis) <= 0):
                    msg.append(f"Axis {n} must be strictly increasing.")

        # Validate value tensor
        try:
            values = np.array(values, dtype=np.float64)
        except (ValueError, TypeError):
            msg.append("Invalid values: a numeric array is expected.")
            values = None
        else:
            if not np.isfinite(values).all():
                msg.append("Values must not contain NaNs or infinite values.")

        # Check consistency between axes and value shapes
        if axes is not None and values is not None:
            expected = tuple(axis.shape[0] for axis in axes)
            if values.ndim != len(axes):
                msg.append(
                    f"Rank mismatch: expected {len(axes)} dimensions "
                    f"from axes, got {values.ndim} from values."
                )
            elif values.shape != expected:
                msg.append(
                    f"Shape mismatch: expected {expected} from axes, "
                    f"got {values.shape} from values."
                )

        if msg:
            raise ValueError("\n".join(msg))

        return axes, values

    @property
    def ndim(self):
        return len(self.axes)

    @property
    def shape(self):
        return self.values.shape

    @property
    def bounds(self):
        """((min_0, max_0), (min_1, max_1), ...) for every axis."""
        return tuple((axis[0], axis[-1]) for axis in self.axes)

    def closest_below(self, query):
        """
        Find the bracket of a query point on every axis.

        Parameters
        ----------
        query : array-like
            Query coordinates, one per axis.

        Returns
        -------
        indices : tuple of int
            For each axis, the greatest index ``idx`` such that
            ``axis[idx] < query[axis]``.

        Raises
        ------
        ExtrapolationBelow
            If a coordinate is at or below the first node of its axis.
        ExtrapolationAbove
            If a coordinate is above the last node of its axis.
        """

        query = np.asarray(query, dtype=np.float64).reshape(-1)
        if query.shape[0] != self.ndim:
            raise ValueError(
                f"Expected {self.ndim} query coordinates, "
                f"got {query.shape[0]}."
            )
        if not np.isfinite(query).all():
            raise ValueError(
                "Invalid query: must not contain infs or nans."
            )

        indices = []
        for n, (axis, q) in enumerate(zip(self.axes, query)):
            idx = int(np.searchsorted(axis, q, side="left")) - 1
            if idx < 0:
                raise ExtrapolationBelow(q, n)
            if q > axis[-1]:
                raise ExtrapolationAbove(q, n)
            indices.append(idx)
        return tuple(indices)

    def slice(self, axis, indices):
        """
        1D view of the values along ``axis``.

        Parameters
        ----------
        axis : int
            Axis the slice runs along.
        indices : sequence of int
            Fixed indices on every other axis, in axis order
            (``ndim - 1`` entries).

        Returns
        -------
        Slice
        """

        if not 0 <= axis < self.ndim:
            raise IndexError(f"Axis {axis} out of range for a {self.ndim}-D grid.")
        indices = list(indices)
        if len(indices) != self.ndim - 1:
            raise ValueError(
                f"Expected {self.ndim - 1} fixed indices, got {len(indices)}."
            )
        key = tuple(indices[:axis]) + (slice(None),) + tuple(indices[axis:])
        return Slice(self.axes[axis], self.values[key])

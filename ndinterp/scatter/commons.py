# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


from collections import namedtuple

import numpy as np

from ..logger import get_logger
from ..metric import Metric, Coordinates
from .knn import linear_scan


__all__ = ["Input", "Commons"]


log = get_logger(__name__)


class Input(namedtuple("Input", ["point", "value"])):
    """Sample point paired with its value."""

    __slots__ = ()

    @classmethod
    def stack(cls, points, values):
        """Pair up parallel sequences of points and values."""
        points = list(points)
        values = list(values)
        if len(points) != len(values):
            raise ValueError(
                f"Got {len(points)} points but {len(values)} values."
            )
        return [cls(p, v) for p, v in zip(points, values)]


class Commons:
    """
    Scattered samples: points, their values and an optional finder.

    Parameters
    ----------
    inputs : iterable of Input or (point, value) pairs
        Samples. Points must implement ``Metric``.

    Attributes
    ----------
    points : list of Metric
        Sample points. Index ``i`` refers to the same sample in
        ``points`` and ``values``.
    values : np.ndarray
        Sample values, read-only.
    finder : KNN or None
        Nearest-neighbour index over ``points``, once attached.
    """

    def __init__(self, inputs):

        msg = []
        points = []
        values = []
        for item in inputs:
            point, value = item
            points.append(point)
            values.append(value)

        if not points:
            msg.append("At least one sample is required.")
        bad = [i for i, p in enumerate(points) if not isinstance(p, Metric)]
        if bad:
            msg.append(
                f"Points must implement Metric; {len(bad)} do not "
                f"(first at index {bad[0]})."
            )
        try:
            values = np.array(values, dtype=np.float64)
        except (ValueError, TypeError):
            msg.append("Values must be numeric scalars.")
        else:
            if values.ndim != 1:
                msg.append("Values must be numeric scalars.")
            elif not np.isfinite(values).all():
                msg.append("Values must not contain NaNs or infinite values.")

        if msg:
            raise ValueError("\n".join(msg))

        values.flags.writeable = False
        self.points = points
        self.values = values
        self.finder = None

        log.debug("Collected %d scattered samples", len(points))

    @classmethod
    def from_table(cls, table):
        """
        Build from a 2D table whose rows are ``[x_1, ..., x_D, value]``.

        Parameters
        ----------
        table : array-like, shape (num_points, D + 1)

        Returns
        -------
        Commons
            Samples with ``Coordinates`` points.
        """

        table = np.array(table, dtype=np.float64)
        if table.ndim != 2 or table.shape[1] < 2:
            raise ValueError(
                "Expected a 2D table with at least two columns, "
                f"got shape {table.shape}."
            )
        table.flags.writeable = False

        # Points are read-only views into a single copy of the table
        points = [Coordinates(row) for row in table[:, :-1]]
        return cls(Input.stack(points, table[:, -1]))

    def __len__(self):
        return len(self.points)

    def __getitem__(self, index):
        return Input(self.points[index], float(self.values[index]))

    def set_finder(self, finder):
        """
        Attach a nearest-neighbour index built over ``self.points``.

        Raises
        ------
        ValueError
            If a finder is already attached, or if ``finder`` does not
            index the same point objects in the same order.
        """

        if self.finder is not None:
            raise ValueError("A finder is already attached.")
        if len(finder) != len(self.points):
            raise ValueError(
                f"Finder indexes {len(finder)} points, "
                f"expected {len(self.points)}."
            )
        indexed = finder.points
        if indexed is not self.points and not all(
            a is b for a, b in zip(indexed, self.points)
        ):
            raise ValueError(
                "Finder was not built over these points in this order."
            )
        self.finder = finder

    def build_finder(self, cls, **kwargs):
        """Build a finder of type ``cls`` over the samples and attach it."""
        finder = cls.build(self.points, **kwargs)
        self.set_finder(finder)
        return finder

    def nearest(self, point, k):
        """
        The ``k`` nearest samples to ``point``.

        Uses the attached finder, or an exhaustive scan without one.

        Returns
        -------
        list of (int, float)
            ``(index, distance)`` pairs, ascending by distance, ties
            broken by ascending index.
        """

        if self.finder is None:
            return linear_scan(self.points, point, k)
        return self.finder.query(point, k)

    def neighbours(self, point, k):
        """``(point, value, distance)`` of the ``k`` nearest samples."""
        return [
            (self.points[i], float(self.values[i]), d)
            for i, d in self.nearest(point, k)
        ]

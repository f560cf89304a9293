# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


from abc import ABC, abstractmethod

import numpy as np
from scipy.spatial import cKDTree

from ..logger import get_logger


__all__ = ["KNN", "BruteForce", "KDTree", "linear_scan"]


log = get_logger(__name__)


def _check_k(k):
    if int(k) != k or k < 1:
        raise ValueError(f"k must be a positive integer, got {k}.")
    return int(k)


def linear_scan(points, point, k):
    """
    Exhaustive k-nearest-neighbour search.

    Parameters
    ----------
    points : sequence of Metric
        Indexed points.
    point : Metric or array-like
        Query point, anything the stored points accept as ``other`` in
        ``distance``.
    k : int
        Number of neighbours.

    Returns
    -------
    list of (int, float)
        ``(index, distance)`` pairs, ascending by distance, ties broken
        by ascending index. At most ``min(k, len(points))`` entries.
    """

    k = _check_k(k)
    distances = np.array([p.distance(point) for p in points], dtype=np.float64)
    order = np.argsort(distances, kind="stable")[:k]
    return [(int(i), float(distances[i])) for i in order]


class KNN(ABC):
    """
    Nearest-neighbour index over a fixed list of points.

    The index keeps a reference to the list it was built from and
    answers queries with indices into it.

    Parameters
    ----------
    points : sequence of Metric
        Points to index. Must not be modified afterwards.
    """

    def __init__(self, points):
        self.points = points

    @classmethod
    def build(cls, points, **kwargs):
        """Build the index once over the full point list."""
        finder = cls(points, **kwargs)
        log.debug("Built %s over %d points", cls.__name__, len(finder))
        return finder

    def __len__(self):
        return len(self.points)

    @abstractmethod
    def query(self, point, k):
        """
        The ``k`` nearest points to ``point``.

        Returns
        -------
        list of (int, float)
            ``(index, distance)`` pairs, ascending by distance, ties
            broken by ascending index. At most ``min(k, len(self))``
            entries.
        """


class BruteForce(KNN):
    """Exact linear scan, for any point type with a metric."""

    def query(self, point, k):
        return linear_scan(self.points, point, k)


class KDTree(KNN):
    """
    k-d tree over Euclidean ``Coordinates`` points.

    Parameters
    ----------
    points : sequence of Coordinates
        Points to index, all of the same dimension.
    leafsize : int, optional
        Number of points at which the tree switches to brute force.
        Default is 16.
    """

    def __init__(self, points, leafsize=16):
        super().__init__(points)
        try:
            data = np.array([np.asarray(p) for p in points], dtype=np.float64)
        except (ValueError, TypeError):
            raise ValueError(
                "KDTree requires points convertible to equal-length "
                "float64 vectors."
            ) from None
        if data.ndim != 2 or data.shape[0] == 0:
            raise ValueError(
                "KDTree requires a non-empty list of 1D points, "
                f"got array of shape {data.shape}."
            )
        self.data = data
        self.tree = cKDTree(data, leafsize=leafsize)

    def query(self, point, k):
        k = min(_check_k(k), len(self))
        q = np.asarray(point, dtype=np.float64)
        if q.shape != (self.data.shape[1],):
            raise ValueError(
                f"Expected a point of dimension {self.data.shape[1]}, "
                f"got shape {q.shape}."
            )

        dist, idx = self.tree.query(q, k=k)
        dist = np.atleast_1d(dist)
        idx = np.atleast_1d(idx)

        # Gather every point tied with the k-th one, then order by
        # (distance, index)
        ball = self.tree.query_ball_point(q, r=dist[-1])
        cand = np.union1d(idx, np.asarray(ball, dtype=np.int64))
        d = np.linalg.norm(self.data[cand] - q, axis=1)
        order = np.lexsort((cand, d))[:k]
        return [(int(cand[i]), float(d[i])) for i in order]

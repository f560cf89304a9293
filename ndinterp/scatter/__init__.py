# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


"""Interpolation of values attached to scattered points."""

from .knn import KNN, BruteForce, KDTree
from .commons import Input, Commons
from .idw import InverseDistanceWeighting

__all__ = [
    "KNN",
    "BruteForce",
    "KDTree",
    "Input",
    "Commons",
    "InverseDistanceWeighting",
]

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


"""
ndinterp: interpolation of gridded and scattered samples

Grid path: cubic Hermite interpolation with finite-difference
derivatives on D-dimensional rectilinear grids.

Scatter path: nearest-neighbour search under a user-defined metric,
with inverse distance weighting.

Queries outside the sampled domain raise ExtrapolationBelow or
ExtrapolationAbove; no value is ever extrapolated.
"""


__version__ = "0.1.0"

from .errors import InterpolationError, ExtrapolationBelow, ExtrapolationAbove
from .grid import Grid
from .derivatives import Slice
from .cubic import interpolate, CubicInterpolator
from .metric import Metric, Coordinates, GeoPoint
from .scatter import (
    KNN,
    BruteForce,
    KDTree,
    Input,
    Commons,
    InverseDistanceWeighting,
)

__all__ = [
    "InterpolationError",
    "ExtrapolationBelow",
    "ExtrapolationAbove",
    "Grid",
    "Slice",
    "interpolate",
    "CubicInterpolator",
    "Metric",
    "Coordinates",
    "GeoPoint",
    "KNN",
    "BruteForce",
    "KDTree",
    "Input",
    "Commons",
    "InverseDistanceWeighting",
]

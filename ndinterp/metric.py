# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


from abc import ABC, abstractmethod

import numpy as np


__all__ = ["Metric", "Coordinates", "GeoPoint"]


EARTH_RADIUS_KM = 6371.0088


class Metric(ABC):
    """
    Point type with a pairwise distance.

    Implementations must return a non-negative, symmetric distance with
    ``a.distance(a) == 0``.
    """

    @abstractmethod
    def distance(self, other):
        """Distance between this point and ``other``."""


class Coordinates(Metric):
    """
    Point in a D-dimensional Euclidean space.

    Parameters
    ----------
    coords : array-like
        1D coordinate vector.
    """

    __slots__ = ("coords",)

    def __init__(self, coords):
        coords = np.asarray(coords, dtype=np.float64)
        if coords.ndim != 1:
            raise ValueError(
                f"Coordinates must be a 1D array, got shape {coords.shape}."
            )
        self.coords = coords

    def distance(self, other):
        other = np.asarray(other, dtype=np.float64)
        if other.shape != self.coords.shape:
            raise ValueError(
                f"Expected a point of dimension {self.coords.shape[0]}, "
                f"got shape {other.shape}."
            )
        return float(np.linalg.norm(self.coords - other))

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.coords
        return self.coords.astype(dtype)

    def __len__(self):
        return self.coords.shape[0]

    def __iter__(self):
        return iter(self.coords)

    def __eq__(self, other):
        if not isinstance(other, Coordinates):
            return NotImplemented
        return np.array_equal(self.coords, other.coords)

    __hash__ = None

    def __repr__(self):
        return f"Coordinates({self.coords.tolist()!r})"


class GeoPoint(Metric):
    """
    Point on a spherical Earth, with great-circle distance in km.

    Parameters
    ----------
    latitude, longitude : float
        Position in degrees.
    """

    __slots__ = ("latitude", "longitude")

    def __init__(self, latitude, longitude):
        latitude = float(latitude)
        longitude = float(longitude)
        if not -90.0 <= latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {latitude}.")
        self.latitude = latitude
        self.longitude = longitude

    def distance(self, other):
        phi1 = np.radians(self.latitude)
        phi2 = np.radians(other.latitude)
        dphi = phi2 - phi1
        dlam = np.radians(other.longitude - self.longitude)

        # Haversine formula
        h = (
            np.sin(0.5 * dphi) ** 2
            + np.cos(phi1) * np.cos(phi2) * np.sin(0.5 * dlam) ** 2
        )
        return float(2.0 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(min(h, 1.0))))

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return NotImplemented
        return (self.latitude, self.longitude) == (
            other.latitude, other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f"GeoPoint({self.latitude!r}, {self.longitude!r})"

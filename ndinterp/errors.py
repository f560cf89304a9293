# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


__all__ = [
    "InterpolationError",
    "ExtrapolationBelow",
    "ExtrapolationAbove",
]


class InterpolationError(ValueError):
    """
    Base class for errors raised while evaluating a query.

    Parameters
    ----------
    query : float
        The offending query coordinate.
    axis : int, optional
        Index of the axis on which the query failed.
    """

    direction = "outside"

    def __init__(self, query, axis=None):
        self.query = float(query)
        self.axis = axis
        super().__init__(self._message())

    def _message(self):
        where = "" if self.axis is None else f" on axis {self.axis}"
        return (
            f"Query {self.query!r} is {self.direction} "
            f"the sampled range{where}."
        )

    def __reduce__(self):
        return (type(self), (self.query, self.axis))


class ExtrapolationBelow(InterpolationError):
    """Query coordinate at or below the first node of an axis."""

    direction = "below"


class ExtrapolationAbove(InterpolationError):
    """Query coordinate above the last node of an axis."""

    direction = "above"

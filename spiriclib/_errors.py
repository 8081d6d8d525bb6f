"""Exceptions raised by spiriclib.

A missing intersection is never an error: it is reported with an all-NaN
row in the output array.
"""


class SpiricError(Exception):
    """Base class for spiriclib errors."""


class InvalidInputError(SpiricError, ValueError):
    """The query line or the parameters cannot be handled by the sweep.

    Raised for horizontal 2D lines, 3D lines that are not perpendicular to
    the torus axis, and out of range sweep parameters.
    """


class NumericValidationError(SpiricError, ArithmeticError):
    """A reconstructed intersection is not on the line or not on the torus."""

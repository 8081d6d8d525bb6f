"""
Sweep-line classification of a query line against a spiric section.

A family of horizontal sample lines is laid over ``[min_y, max_y]``. On each
sample line the spiric roots and the single crossing with the query line
are merged and sorted; where the query line crossing falls among the spiric
roots says whether the query line is inside or outside the spiric at that
ordinate. A change of label between two neighbouring samples brackets an
intersection.

Usage
-----
    samples = sweep(2.0, 1.0, 0.0, start, end, -2.0, 2.0, n_samples=100)
    samples.labels   # Region per sample ordinate
"""
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from spiriclib._errors import InvalidInputError
from spiriclib._quartic import N_SLOTS, spiric_line_roots

# Four spiric roots plus the query line crossing
N_ABSCISSAS = N_SLOTS + 1


class Region(IntEnum):
    """Position of the query line crossing relative to the spiric."""
    OUTSIDE = 0
    INSIDE = 1


class RootOrigin(IntEnum):
    """Which curve a sorted abscissa comes from."""
    SPIRIC = 0
    LINE = 1


@dataclass
class SweepSamples:
    """Result of one sweep pass.

    Attributes
    ----------
    y : np.ndarray of shape (N,)
        Ordinates of the sample lines, ascending, both ends included.
    abscissas : np.ndarray of shape (N, 5)
        Spiric roots and the line crossing, ascending, NaN last.
    origins : np.ndarray of shape (N, 5)
        :class:`RootOrigin` of each entry of ``abscissas``.
    counts : np.ndarray of shape (N,)
        Number of non-NaN abscissas per sample.
    line_positions : np.ndarray of shape (N,)
        Index of the line crossing in each sorted row.
    labels : np.ndarray of shape (N,)
        :class:`Region` of the query line at each ordinate.
    """
    y: np.ndarray
    abscissas: np.ndarray
    origins: np.ndarray
    counts: np.ndarray
    line_positions: np.ndarray
    labels: np.ndarray

    def __len__(self):
        return len(self.y)


def check_not_horizontal(start, end):
    """Raise InvalidInputError if the 2D line cannot be swept along Y."""
    if start[1] == end[1]:
        raise InvalidInputError(
            "line must not be parallel to the X axis for the sweep-line method"
        )


def line_abscissa_at(start, end, y):
    """Abscissa of the line through ``start`` and ``end`` at ordinate ``y``.

    This is the crossing of the query line with the horizontal line ``y``.
    A vertical line returns its constant X.
    """
    y = np.asarray(y, dtype=float)
    dx = end[0] - start[0]
    if dx == 0:
        return np.full_like(y, start[0])
    return start[0] + (y - start[1]) * dx / (end[1] - start[1])


def classify_samples(counts, positions, y, radius, tube_radius,
                     boundary_tolerance=0.0):
    """Inside/outside label of the query line for each sample line.

    Parameters
    ----------
    counts : array_like of int
        Number k of real abscissas on each sample line (line crossing
        included).
    positions : array_like of int
        Index of the line crossing among the sorted abscissas.
    y : array_like of float
        Sample ordinates.
    radius, tube_radius : float
        Torus radii; ``tube_radius > radius`` is a spindle torus.
    boundary_tolerance : float
        Slack on ``|y| == tube_radius`` for the three-abscissa case, where
        the sample line touches the top or bottom of the tube.

    Returns
    -------
    np.ndarray of int8
        :class:`Region` values.

    Notes
    -----
    ======  ==================================================================
    k       inside when
    ======  ==================================================================
    1, 2    never
    3       line crossing in the middle, unless the sample line is tangent
            to the top or bottom of the tube
    4       line crossing at position 1 or 2
    5       position 1 or 3; position 2 only for a spindle torus
    ======  ==================================================================
    """
    k = np.asarray(counts)
    p = np.asarray(positions)
    y = np.asarray(y, dtype=float)
    on_boundary = np.abs(np.abs(y) - tube_radius) <= boundary_tolerance
    spindle = tube_radius > radius

    inside = np.select(
        [k == 3, k == 4, k == 5],
        [(p == 1) & ~on_boundary,
         (p == 1) | (p == 2),
         (p == 1) | (p == 3) | ((p == 2) & spindle)],
        default=False,
    )
    return np.where(inside, Region.INSIDE, Region.OUTSIDE).astype(np.int8)


def sweep(radius, tube_radius, plane_distance, start, end, min_y, max_y,
          n_samples=100, boundary_tolerance=0.0) -> SweepSamples:
    """Classify the query line on ``n_samples`` horizontal lines.

    Parameters
    ----------
    radius, tube_radius, plane_distance : float
        Spiric parameters.
    start, end : array_like of shape (2,)
        Two distinct points of the query line, which must not be horizontal.
    min_y, max_y : float
        Ordinate range covered by the sample lines (ends included).
    n_samples : int
        Number of sample lines, at least 10.
    boundary_tolerance : float
        See :func:`classify_samples`.

    Returns
    -------
    SweepSamples
    """
    check_not_horizontal(start, end)
    if n_samples < 10:
        raise InvalidInputError(f"n_samples must be at least 10, got {n_samples}")

    y = np.linspace(min_y, max_y, n_samples)
    merged = np.empty((n_samples, N_ABSCISSAS))
    merged[:, :N_SLOTS] = spiric_line_roots(radius, tube_radius, y, plane_distance)
    merged[:, N_SLOTS] = line_abscissa_at(start, end, y)

    tags = np.full(merged.shape, RootOrigin.SPIRIC, dtype=np.int8)
    tags[:, N_SLOTS] = RootOrigin.LINE

    # argsort puts NaN last; the stable kind keeps spiric roots ahead of an
    # equal line crossing
    order = np.argsort(merged, axis=1, kind='stable')
    abscissas = np.take_along_axis(merged, order, axis=1)
    origins = np.take_along_axis(tags, order, axis=1)

    counts = np.count_nonzero(~np.isnan(abscissas), axis=1)
    line_positions = np.argmax(origins == RootOrigin.LINE, axis=1)
    labels = classify_samples(counts, line_positions, y, radius, tube_radius,
                              boundary_tolerance)

    return SweepSamples(y=y, abscissas=abscissas, origins=origins,
                        counts=counts, line_positions=line_positions,
                        labels=labels)

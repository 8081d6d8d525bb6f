"""
Intersections between a line and a torus, in the torus frame.

The torus is centred at the origin with its axis along Y:

    4 R^2 (x^2 + z^2) - (x^2 + y^2 + z^2 + R^2 - r^2)^2 = 0

A line perpendicular to the axis (constant z) lies in the plane ``z = d``,
which cuts the torus along a spiric section. The planar problem is solved
with a coarse sweep over the whole tube height followed by one bisection
per detected crossing, then lifted back to 3D and checked against both the
line and the torus.

Usage
-----
    from spiriclib import intersect_torus_and_line_3d

    count, points = intersect_torus_and_line_3d(2.0, 1.0, (2.5, -3.0, 0.0),
                                                (2.5, 3.0, 0.0))
    points[:count]   # the remaining rows are NaN
"""
import logging

import numpy as np

from spiriclib._bisection import find_flips, refine_crossing
from spiriclib._errors import InvalidInputError, NumericValidationError
from spiriclib._params import DEFAULT_PARAMS, SweepParams
from spiriclib._quartic import N_SLOTS
from spiriclib._sweep import check_not_horizontal, sweep
from spiriclib._vectors import (
    MIN_VECTOR_LENGTH,
    are_vectors_parallel,
    as_point,
    contains_nan,
    set_to_nan,
)

logger = logging.getLogger(__name__)

_ORDINALS = ('first', 'second', 'third', 'fourth')


def torus_residual(radius, tube_radius, point):
    """Value of the torus implicit function at ``point`` (0 on the surface)."""
    x, y, z = np.asarray(point, dtype=float)
    return (4 * radius ** 2 * (x ** 2 + z ** 2)
            - (x ** 2 + y ** 2 + z ** 2 + radius ** 2 - tube_radius ** 2) ** 2)


def is_point_on_torus(radius, tube_radius, point, tolerance) -> bool:
    """Test whether ``point`` satisfies the torus equation within ``tolerance``.

    A NaN point (absent intersection) is accepted.
    """
    if contains_nan(point):
        return True
    return bool(abs(torus_residual(radius, tube_radius, point)) <= tolerance)


def is_point_on_line_3d(start, end, point, tolerance) -> bool:
    """Test whether ``point`` lies on the line through ``start`` and ``end``.

    Parameters
    ----------
    start, end : array_like of shape (3,)
        Two distinct points of the line.
    point : array_like of shape (3,)
        Point to test; NaN points are accepted.
    tolerance : float
        Angle tolerance between the line direction and ``point - start``.
    """
    if contains_nan(point):
        return True
    start = np.asarray(start, dtype=float)
    offset = np.asarray(point, dtype=float) - start
    if np.linalg.norm(offset) < MIN_VECTOR_LENGTH:
        return True
    return are_vectors_parallel(np.asarray(end, dtype=float) - start, offset,
                                tolerance)


def intersect_spiric_and_line_2d(radius, tube_radius, plane_distance, start,
                                 end, out=None, params: SweepParams = None):
    """Intersect a spiric section with a 2D line.

    Parameters
    ----------
    radius : float
        Radius of the circle trajectory of the torus.
    tube_radius : float
        Radius of the generator circle.
    plane_distance : float
        Distance between the slicing plane and the torus axis.
    start, end : array_like of shape (2,)
        Two distinct points of the line. The line must not be parallel to X.
    out : np.ndarray of shape (4, 2), optional
        Intersection slots, filled in place. Unused slots are set to NaN.
    params : SweepParams, optional
        Numerical settings.

    Returns
    -------
    count : int
        Number of intersections found (0 to 4).
    points : np.ndarray of shape (4, 2)
        ``out`` if given, otherwise a new array.

    Raises
    ------
    InvalidInputError
        If the line is horizontal or ``params`` is invalid.
    """
    params = (DEFAULT_PARAMS if params is None else params).validate()
    start = as_point(start, 2)
    end = as_point(end, 2)
    check_not_horizontal(start, end)

    if out is None:
        out = np.empty((N_SLOTS, 2))
    set_to_nan(out)

    half_height = tube_radius + params.y_margin
    samples = sweep(radius, tube_radius, plane_distance, start, end,
                    -half_height, half_height, n_samples=params.n_samples,
                    boundary_tolerance=params.boundary_tolerance)
    flips = find_flips(samples.labels)
    logger.debug("Coarse sweep found %d label changes", flips.size)
    if flips.size > N_SLOTS:
        logger.warning("Found %d label changes, keeping the first %d",
                       flips.size, N_SLOTS)
        flips = flips[:N_SLOTS]

    for slot, i in enumerate(flips):
        result = refine_crossing(radius, tube_radius, plane_distance, start,
                                 end, samples.y[i], samples.y[i + 1], params)
        out[slot] = result.point

    return int(flips.size), out


def intersect_torus_and_line_3d(radius, tube_radius, start, end, out=None,
                                params: SweepParams = None):
    """Intersect a torus with a 3D line perpendicular to its axis.

    Parameters
    ----------
    radius : float
        Radius of the circle trajectory.
    tube_radius : float
        Radius of the generator circle.
    start, end : array_like of shape (3,)
        Two distinct points of the line, in the torus frame. Both must have
        the same z within ``params.axis_tolerance``.
    out : np.ndarray of shape (4, 3), optional
        Intersection slots, overwritten in place. Their previous contents
        are ignored.
    params : SweepParams, optional
        Numerical settings.

    Returns
    -------
    count : int
        Number of intersections found (0 to 4).
    points : np.ndarray of shape (4, 3)
        ``out`` if given, otherwise a new array. Unused rows are NaN.

    Raises
    ------
    InvalidInputError
        If the line is not perpendicular to the torus axis, or is parallel
        to X inside its plane.
    NumericValidationError
        If a reconstructed point is not on the line or not on the torus.
    """
    params = (DEFAULT_PARAMS if params is None else params).validate()
    start = as_point(start, 3)
    end = as_point(end, 3)
    if abs(start[2] - end[2]) > params.axis_tolerance:
        raise InvalidInputError(
            "line must be perpendicular to the torus axis (constant z), "
            f"got dz={end[2] - start[2]!r}"
        )
    plane_distance = float(start[2])

    planar = np.empty((N_SLOTS, 2))
    count, _ = intersect_spiric_and_line_2d(radius, tube_radius, plane_distance,
                                            start[:2], end[:2], out=planar,
                                            params=params)

    if out is None:
        out = np.empty((N_SLOTS, 3))
    out[:, :2] = planar
    out[:, 2] = np.where(np.isnan(planar).any(axis=1), np.nan, plane_distance)

    for slot, point in enumerate(out):
        if not is_point_on_line_3d(start, end, point, params.line_tolerance):
            raise NumericValidationError(
                f"{_ORDINALS[slot]} intersection {point} is not on the line"
            )
        if not is_point_on_torus(radius, tube_radius, point,
                                 params.torus_tolerance):
            raise NumericValidationError(
                f"{_ORDINALS[slot]} intersection {point} is not on the torus "
                f"(residual {torus_residual(radius, tube_radius, point):.3e})"
            )

    return count, out

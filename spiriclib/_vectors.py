"""
Small numpy helpers used in place of dedicated point and vector classes.

Points are float arrays of shape ``(2,)`` or ``(3,)``. An absent point is
an array whose components are all NaN.
"""
import numpy as np

from spiriclib._errors import InvalidInputError

# Vectors shorter than this have no usable direction
MIN_VECTOR_LENGTH = 1e-7


def as_point(p, dim):
    """Return ``p`` as a float array of shape ``(dim,)``."""
    point = np.asarray(p, dtype=float)
    if point.shape != (dim,):
        raise InvalidInputError(
            f"expected a {dim}D point, got shape {point.shape}"
        )
    return point


def set_to_nan(points):
    """Mark every point (row) of ``points`` as absent, in place."""
    points[...] = np.nan
    return points


def contains_nan(point) -> bool:
    """True if any component of ``point`` is NaN."""
    return bool(np.isnan(point).any())


def are_vectors_parallel(v1, v2, angle_epsilon):
    """Test whether two 3D vectors are parallel (or anti-parallel).

    Parameters
    ----------
    v1, v2 : array_like of shape (3,)
        Vectors to compare.
    angle_epsilon : float
        Largest angle (radians) between the two directions.

    Returns
    -------
    bool
        False when either vector is too short to define a direction.
    """
    v1 = np.asarray(v1, dtype=float)
    v2 = np.asarray(v2, dtype=float)
    n1 = np.linalg.norm(v1)
    n2 = np.linalg.norm(v2)
    if n1 < MIN_VECTOR_LENGTH or n2 < MIN_VECTOR_LENGTH:
        return False
    cross = np.linalg.norm(np.cross(v1, v2))
    return bool(cross <= n1 * n2 * np.sin(angle_epsilon))

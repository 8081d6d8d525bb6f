"""
Closed-form intersection of a spiric section with lines parallel to X.

A spiric section is the intersection of a torus with a plane parallel to the
torus axis. Centred on the plane origin it reads

    (x^2 + y^2)^2 + a x^2 + b y^2 + c = 0

Substituting a horizontal line ``y = Y`` leaves the biquadratic

    x^4 + B x^2 + C = 0,    B = 2 Y^2 + a,    C = Y^4 + b Y^2 + c

which is solved through ``u = x^2``.
"""
import numpy as np

# Pairs of roots are stored as (+sqrt(u), -sqrt(u)) in these slots
N_SLOTS = 4


def spiric_coefficients(radius, tube_radius, plane_distance):
    """Coefficients ``(a, b, c)`` of the implicit spiric curve.

    Parameters
    ----------
    radius : float
        Radius R of the circle trajectory.
    tube_radius : float
        Radius r of the generator circle.
    plane_distance : float
        Distance d between the slicing plane and the torus axis.
    """
    d2 = plane_distance ** 2
    r2 = tube_radius ** 2
    R2 = radius ** 2
    a = 2 * (d2 - r2 - R2)
    b = 2 * (d2 - r2 + R2)
    c = (d2 - r2 + R2) ** 2 - 4 * d2 * R2
    return a, b, c


def evaluate_spiric(radius, tube_radius, plane_distance, x, y):
    """Residual of the spiric equation at ``(x, y)``; broadcasts over arrays."""
    a, b, c = spiric_coefficients(radius, tube_radius, plane_distance)
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    return (x ** 2 + y ** 2) ** 2 + a * x ** 2 + b * y ** 2 + c


def _emit_pair(u):
    """Slot pair for ``x^2 = u``: (+sqrt u, -sqrt u), (0, nan) or (nan, nan)."""
    positive = u > 0
    root = np.sqrt(np.where(positive, u, np.nan))
    first = np.where(positive, root, np.where(u == 0, 0.0, np.nan))
    second = np.where(positive, -root, np.nan)
    return first, second


def spiric_line_roots(radius, tube_radius, y, plane_distance):
    """Abscissas where the horizontal line(s) ``y`` cross the spiric section.

    Parameters
    ----------
    radius, tube_radius, plane_distance : float
        Spiric parameters, see :func:`spiric_coefficients`.
    y : float or array_like
        Ordinate of each horizontal line.

    Returns
    -------
    np.ndarray of shape ``np.shape(y) + (4,)``
        Roots in fixed slot order, NaN where a slot is empty. Slots 0-1 come
        from ``u1 = (-B + sqrt(delta)) / 2`` and slots 2-3 from
        ``u2 = (-B - sqrt(delta)) / 2``. A double root ``delta == 0`` only
        fills slots 0-1.
    """
    a, b, c = spiric_coefficients(radius, tube_radius, plane_distance)
    y = np.asarray(y, dtype=float)
    y2 = y ** 2
    B = 2 * y2 + a
    C = y2 ** 2 + b * y2 + c
    delta = B ** 2 - 4 * C

    with np.errstate(invalid='ignore'):
        sqrt_delta = np.sqrt(np.where(delta >= 0, delta, np.nan))
        u1 = (-B + sqrt_delta) / 2
        u2 = np.where(delta > 0, (-B - sqrt_delta) / 2, np.nan)
        x1, x2 = _emit_pair(u1)
        x3, x4 = _emit_pair(u2)

    return np.stack([x1, x2, x3, x4], axis=-1)


def solve_spiric_line_x(radius, tube_radius, y, plane_distance, out=None):
    """Intersect the spiric section with the horizontal line ``y = Y``.

    Parameters
    ----------
    radius : float
        Radius of the circle trajectory.
    tube_radius : float
        Radius of the generator circle.
    y : float
        Ordinate of the line parallel to X.
    plane_distance : float
        Distance between the slicing plane and the torus axis.
    out : np.ndarray of shape (4, 2), optional
        Slots filled in place with ``(x, Y)`` or NaN.

    Returns
    -------
    count : int
        Number of real roots found (0 to 4).
    points : np.ndarray of shape (4, 2)
        ``out`` if given, otherwise a new array.
    """
    if out is None:
        out = np.empty((N_SLOTS, 2))
    roots = spiric_line_roots(radius, tube_radius, float(y), plane_distance)
    found = ~np.isnan(roots)
    out[:, 0] = roots
    out[:, 1] = np.where(found, y, np.nan)
    return int(found.sum()), out

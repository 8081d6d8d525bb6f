"""
Refinement of a bracketed crossing between a query line and a spiric.

Each pass re-sweeps the current bracket with the same number of sample
lines and keeps the sub-interval where the inside/outside label changes,
so the bracket shrinks by a factor ``n_samples - 1`` per pass.
"""
import logging
from dataclasses import dataclass, field

import numpy as np

from spiriclib._params import DEFAULT_PARAMS, SweepParams
from spiriclib._sweep import line_abscissa_at, sweep

logger = logging.getLogger(__name__)


@dataclass
class BisectionResult:
    """Outcome of :func:`refine_crossing`.

    Attributes
    ----------
    x, y : float
        Refined intersection; ``y`` is the middle of the final bracket and
        ``x`` the query line abscissa there.
    min_y, max_y : float
        Final bracket.
    iterations : int
        Number of refinement passes run.
    widths : list of float
        Bracket width before the first pass and after every pass.
    converged : bool
        True if the final bracket is narrower than the tolerance.
    """
    x: float
    y: float
    min_y: float
    max_y: float
    iterations: int
    widths: list = field(default_factory=list)
    converged: bool = False

    @property
    def point(self) -> np.ndarray:
        return np.array([self.x, self.y])


def find_flips(labels) -> np.ndarray:
    """Indices ``i`` where ``labels[i] != labels[i + 1]``."""
    labels = np.asarray(labels)
    return np.flatnonzero(labels[:-1] != labels[1:])


def refine_crossing(radius, tube_radius, plane_distance, start, end,
                    min_y, max_y, params: SweepParams = None) -> BisectionResult:
    """Narrow ``[min_y, max_y]`` around the single label change it contains.

    Parameters
    ----------
    radius, tube_radius, plane_distance : float
        Spiric parameters.
    start, end : array_like of shape (2,)
        Query line, not horizontal.
    min_y, max_y : float
        Initial bracket: two neighbouring sample ordinates with different
        labels.
    params : SweepParams, optional
        Sample count, tolerance and iteration cap.

    Returns
    -------
    BisectionResult

    Notes
    -----
    Reaching ``params.max_iterations`` is not an error: the middle of the
    best bracket is returned with ``converged=False``. Refinement also stops
    once the bracket can no longer shrink in floating point.
    """
    if params is None:
        params = DEFAULT_PARAMS
    min_y, max_y = float(min_y), float(max_y)
    widths = [abs(max_y - min_y)]
    iterations = 0

    while (abs(max_y - min_y) >= params.y_tolerance
           and iterations < params.max_iterations):
        iterations += 1
        samples = sweep(radius, tube_radius, plane_distance, start, end,
                        min_y, max_y, n_samples=params.n_samples,
                        boundary_tolerance=params.boundary_tolerance)
        flips = find_flips(samples.labels)
        if flips.size == 0:
            logger.warning("Label change lost in [%r, %r] after %d passes",
                           min_y, max_y, iterations)
            break
        i = flips[0]
        new_min_y, new_max_y = float(samples.y[i]), float(samples.y[i + 1])
        if abs(new_max_y - new_min_y) >= abs(max_y - min_y):
            logger.warning("Bracket [%r, %r] cannot shrink further", min_y, max_y)
            break
        min_y, max_y = new_min_y, new_max_y
        widths.append(abs(max_y - min_y))

    converged = abs(max_y - min_y) < params.y_tolerance
    if not converged and iterations >= params.max_iterations:
        logger.warning("Bisection stopped at the %d iteration cap, width %g",
                       params.max_iterations, abs(max_y - min_y))

    y = (min_y + max_y) / 2
    x = float(line_abscissa_at(start, end, y))
    logger.debug("Crossing refined to (%r, %r) in %d passes", x, y, iterations)
    return BisectionResult(x=x, y=y, min_y=min_y, max_y=max_y,
                           iterations=iterations, widths=widths,
                           converged=converged)

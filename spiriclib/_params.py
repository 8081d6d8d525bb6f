"""
Numerical settings for the sweep-line/bisection intersection search.

Usage
-----
    from spiriclib import SweepParams, intersect_torus_and_line_3d

    params = SweepParams(n_samples=200, torus_tolerance=1e-7)
    count, points = intersect_torus_and_line_3d(2.0, 1.0, p0, p1, params=params)
"""

from dataclasses import dataclass

from spiriclib._errors import InvalidInputError


@dataclass(frozen=True)
class SweepParams:
    """Parameters of an intersection query.

    Attributes
    ----------
    n_samples : int
        Number of horizontal sample lines per sweep pass (>= 10).
    y_margin : float
        Extra band added above and below the tube for the first pass,
        which covers ``[-tube_radius - y_margin, tube_radius + y_margin]``.
    y_tolerance : float
        Bisection stops once the bracket is narrower than this.
    max_iterations : int
        Hard cap on the number of refinement passes per crossing.
    boundary_tolerance : float
        Distance from ``|y| == tube_radius`` under which a sample line is
        treated as touching the top or bottom of the tube.
    axis_tolerance : float
        Largest ``|dz|`` accepted for a 3D line perpendicular to the axis.
    line_tolerance : float
        Angle tolerance of the on-line validation.
    torus_tolerance : float
        Residual tolerance of the on-torus validation.
    """
    n_samples: int = 100
    y_margin: float = 1.0
    y_tolerance: float = 1e-12
    max_iterations: int = 10_000
    boundary_tolerance: float = 1e-12
    axis_tolerance: float = 1e-8
    line_tolerance: float = 1e-6
    torus_tolerance: float = 1e-8

    def validate(self) -> 'SweepParams':
        """Check the settings and return self for chaining."""
        if self.n_samples < 10:
            raise InvalidInputError(
                f"n_samples must be at least 10, got {self.n_samples}"
            )
        if self.max_iterations < 1:
            raise InvalidInputError(
                f"max_iterations must be positive, got {self.max_iterations}"
            )
        for name in ('y_tolerance', 'axis_tolerance', 'line_tolerance',
                     'torus_tolerance'):
            if not getattr(self, name) > 0:
                raise InvalidInputError(f"{name} must be positive")
        if self.y_margin < 0 or self.boundary_tolerance < 0:
            raise InvalidInputError(
                "y_margin and boundary_tolerance must be non-negative"
            )
        return self


DEFAULT_PARAMS = SweepParams()

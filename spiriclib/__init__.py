"""
spiriclib: line/torus intersections through spiric sections.

Submodules
----------
_quartic   : closed-form roots of a spiric section on lines parallel to X
_sweep     : sweep-line inside/outside classification of a query line
_bisection : refinement of a bracketed crossing
_torus     : 2D and 3D intersection entry points and validation
"""

from spiriclib._errors import (
    SpiricError,
    InvalidInputError,
    NumericValidationError,
)
from spiriclib._params import SweepParams
from spiriclib._quartic import (
    spiric_coefficients,
    evaluate_spiric,
    spiric_line_roots,
    solve_spiric_line_x,
)
from spiriclib._sweep import (
    Region,
    RootOrigin,
    SweepSamples,
    classify_samples,
    line_abscissa_at,
    sweep,
)
from spiriclib._bisection import BisectionResult, find_flips, refine_crossing
from spiriclib._torus import (
    intersect_spiric_and_line_2d,
    intersect_torus_and_line_3d,
    is_point_on_line_3d,
    is_point_on_torus,
    torus_residual,
)

__all__ = [
    'SpiricError', 'InvalidInputError', 'NumericValidationError',
    'SweepParams',
    'spiric_coefficients', 'evaluate_spiric', 'spiric_line_roots',
    'solve_spiric_line_x',
    'Region', 'RootOrigin', 'SweepSamples', 'classify_samples',
    'line_abscissa_at', 'sweep',
    'BisectionResult', 'find_flips', 'refine_crossing',
    'intersect_spiric_and_line_2d', 'intersect_torus_and_line_3d',
    'is_point_on_line_3d', 'is_point_on_torus', 'torus_residual',
]

"""Tests for spiriclib._bisection (refinement of bracketed crossings)."""

import numpy as np
import numpy.testing as npt

from spiriclib._bisection import find_flips, refine_crossing
from spiriclib._params import SweepParams

# Line x = 2.5 leaves the right tube circle of R=2, r=1 at y = sqrt(0.75)
START = (2.5, -3.0)
END = (2.5, 3.0)
Y_CROSSING = np.sqrt(0.75)


class TestFindFlips:
    def test_indices(self):
        npt.assert_array_equal(find_flips([0, 0, 1, 1, 0]), [1, 3])

    def test_constant_labels(self):
        assert find_flips([1, 1, 1]).size == 0


class TestRefineCrossing:
    def test_converges_on_crossing(self):
        result = refine_crossing(2.0, 1.0, 0.0, START, END, 0.8, 0.9)
        assert result.converged
        assert result.max_y - result.min_y < 1e-12
        npt.assert_allclose(result.y, Y_CROSSING, atol=1e-11)
        assert result.x == 2.5
        npt.assert_allclose(result.point, [2.5, Y_CROSSING], atol=1e-11)

    def test_widths_decrease(self):
        result = refine_crossing(2.0, 1.0, 0.0, START, END, 0.8, 0.9)
        widths = np.asarray(result.widths)
        assert len(widths) == result.iterations + 1
        assert np.all(np.diff(widths) < 0)
        assert widths[-1] < 1e-12
        # each pass divides the bracket by n_samples - 1
        assert result.iterations < 10

    def test_iteration_cap_is_not_an_error(self):
        params = SweepParams(max_iterations=2)
        result = refine_crossing(2.0, 1.0, 0.0, START, END, 0.8, 0.9,
                                 params=params)
        assert result.iterations == 2
        assert not result.converged
        assert result.min_y <= Y_CROSSING <= result.max_y
        npt.assert_allclose(result.y, Y_CROSSING, atol=1e-4)

    def test_slanted_line(self):
        """y = x / 8 crosses the right circle (x - 2)^2 + y^2 = 1."""
        start, end = (-4.0, -0.5), (4.0, 0.5)
        x = (4 + np.sqrt(16 - 12 * 65 / 64)) / (2 * 65 / 64)
        result = refine_crossing(2.0, 1.0, 0.0, start, end, x / 8 - 0.02,
                                 x / 8 + 0.02)
        npt.assert_allclose(result.point, [x, x / 8], atol=1e-10)

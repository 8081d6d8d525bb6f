"""Tests for spiriclib._sweep (sweep-line inside/outside classification)."""

import numpy as np
import numpy.testing as npt
import pytest

from spiriclib._errors import InvalidInputError
from spiriclib._sweep import (
    Region,
    RootOrigin,
    classify_samples,
    line_abscissa_at,
    sweep,
)


def _classify(k, p, y=0.0, radius=2.0, tube_radius=1.0, tol=0.0):
    return Region(classify_samples([k], [p], [y], radius, tube_radius, tol)[0])


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def vertical_ring_sweep():
    """Line x = 2.5 against the ring torus R=2, r=1 cut through its axis."""
    return sweep(2.0, 1.0, 0.0, (2.5, -3.0), (2.5, 3.0), -2.0, 2.0,
                 n_samples=100)


# ---------------------------------------------------------------------------
# Classification table
# ---------------------------------------------------------------------------

class TestClassifySamples:
    @pytest.mark.parametrize("k,p", [(1, 0), (2, 0), (2, 1)])
    def test_too_few_roots_is_outside(self, k, p):
        assert _classify(k, p) is Region.OUTSIDE

    def test_three_abscissas(self):
        assert _classify(3, 0, y=0.5) is Region.OUTSIDE
        assert _classify(3, 2, y=0.5) is Region.OUTSIDE
        assert _classify(3, 1, y=0.5) is Region.INSIDE

    @pytest.mark.parametrize("y", [1.0, -1.0])
    def test_three_abscissas_on_tube_boundary(self, y):
        assert _classify(3, 1, y=y) is Region.OUTSIDE

    def test_boundary_tolerance(self):
        assert _classify(3, 1, y=1.0 - 1e-14) is Region.INSIDE
        assert _classify(3, 1, y=1.0 - 1e-14, tol=1e-12) is Region.OUTSIDE

    def test_four_abscissas(self):
        assert [_classify(4, p) for p in range(4)] == [
            Region.OUTSIDE, Region.INSIDE, Region.INSIDE, Region.OUTSIDE]

    def test_five_abscissas_ring(self):
        assert [_classify(5, p) for p in range(5)] == [
            Region.OUTSIDE, Region.INSIDE, Region.OUTSIDE, Region.INSIDE,
            Region.OUTSIDE]

    def test_spindle_flips_middle_position(self):
        """Same sample geometry, only the torus kind changes."""
        ring = _classify(5, 2, radius=2.0, tube_radius=1.5)
        spindle = _classify(5, 2, radius=1.0, tube_radius=1.5)
        assert ring is Region.OUTSIDE
        assert spindle is Region.INSIDE

    def test_vectorised(self):
        labels = classify_samples([1, 4, 5], [0, 2, 3], [0.0, 0.0, 0.0],
                                  2.0, 1.0)
        npt.assert_array_equal(labels, [Region.OUTSIDE, Region.INSIDE,
                                        Region.INSIDE])


# ---------------------------------------------------------------------------
# Line crossing
# ---------------------------------------------------------------------------

class TestLineAbscissaAt:
    def test_slanted(self):
        npt.assert_allclose(line_abscissa_at((0.0, 0.0), (1.0, 2.0), 1.0), 0.5)

    def test_vertical(self):
        x = line_abscissa_at((3.0, 0.0), (3.0, 1.0), np.array([-1.0, 5.0]))
        npt.assert_array_equal(x, [3.0, 3.0])


# ---------------------------------------------------------------------------
# Sweep
# ---------------------------------------------------------------------------

class TestSweep:
    def test_horizontal_line_rejected(self):
        with pytest.raises(InvalidInputError):
            sweep(2.0, 1.0, 0.0, (-5.0, 0.0), (5.0, 0.0), -2.0, 2.0)

    def test_too_few_samples_rejected(self):
        with pytest.raises(InvalidInputError, match="n_samples"):
            sweep(2.0, 1.0, 0.0, (2.5, -3.0), (2.5, 3.0), -2.0, 2.0,
                  n_samples=5)

    def test_sample_ordinates(self, vertical_ring_sweep):
        s = vertical_ring_sweep
        assert len(s) == 100
        assert s.y[0] == -2.0
        assert s.y[-1] == 2.0
        assert np.all(np.diff(s.y) > 0)

    def test_abscissas_sorted_nan_last(self, vertical_ring_sweep):
        s = vertical_ring_sweep
        for row, k in zip(s.abscissas, s.counts):
            assert np.all(np.diff(row[:k]) >= 0)
            assert not np.isnan(row[:k]).any()
            assert np.isnan(row[k:]).all()

    def test_origin_travels_with_value(self, vertical_ring_sweep):
        s = vertical_ring_sweep
        assert np.all((s.origins == RootOrigin.LINE).sum(axis=1) == 1)
        rows = np.arange(len(s))
        npt.assert_array_equal(s.abscissas[rows, s.line_positions], 2.5)

    def test_labels(self, vertical_ring_sweep):
        """x = 2.5 is inside the right tube circle for |y| < sqrt(0.75)."""
        s = vertical_ring_sweep
        inside = np.abs(s.y) < np.sqrt(0.75)
        expected = np.where(inside, Region.INSIDE, Region.OUTSIDE)
        npt.assert_array_equal(s.labels, expected)
        npt.assert_array_equal(s.counts[np.abs(s.y) > 1.0], 1)

    def test_spindle_lens_is_inside(self):
        """Between the two inner arcs of a spindle torus."""
        s = sweep(1.0, 1.5, 0.0, (0.2, -3.0), (0.2, 3.0), -0.5, 0.5,
                  n_samples=11)
        npt.assert_array_equal(s.counts, 5)
        npt.assert_array_equal(s.line_positions, 2)
        npt.assert_array_equal(s.labels, Region.INSIDE)

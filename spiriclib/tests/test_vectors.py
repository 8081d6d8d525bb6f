"""Tests for spiriclib._vectors and spiriclib._params."""

import numpy as np
import pytest

from spiriclib._errors import InvalidInputError
from spiriclib._params import SweepParams
from spiriclib._vectors import (
    are_vectors_parallel,
    as_point,
    contains_nan,
    set_to_nan,
)


class TestVectors:
    def test_as_point_shape(self):
        assert as_point((1, 2), 2).dtype == float
        with pytest.raises(InvalidInputError):
            as_point((1, 2, 3), 2)

    def test_set_to_nan_in_place(self):
        points = np.ones((4, 3))
        assert set_to_nan(points) is points
        assert np.isnan(points).all()

    def test_contains_nan(self):
        assert contains_nan(np.array([1.0, np.nan]))
        assert not contains_nan(np.array([1.0, 2.0]))

    def test_parallel(self):
        assert are_vectors_parallel((1, 0, 0), (-3, 0, 0), 1e-6)
        assert are_vectors_parallel((1, 1, 0), (2, 2, 1e-9), 1e-6)
        assert not are_vectors_parallel((1, 0, 0), (1, 1e-3, 0), 1e-6)

    def test_zero_vector_has_no_direction(self):
        assert not are_vectors_parallel((0, 0, 0), (1, 0, 0), 1e-6)


class TestSweepParams:
    def test_defaults(self):
        params = SweepParams().validate()
        assert params.n_samples == 100
        assert params.y_tolerance == 1e-12
        assert params.max_iterations == 10_000

    @pytest.mark.parametrize("kwargs", [
        {'n_samples': 9},
        {'max_iterations': 0},
        {'y_tolerance': 0.0},
        {'y_margin': -1.0},
    ])
    def test_rejects_bad_settings(self, kwargs):
        with pytest.raises(InvalidInputError):
            SweepParams(**kwargs).validate()

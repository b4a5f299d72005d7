"""
Tests for missing data handling.
"""

import math

import pytest

from pyexactstats.core.arithmetic import FLOAT
from pyexactstats.core.exceptions import ValidationError
from pyexactstats.descriptive._missing import apply_pairwise_policy, apply_use_policy

NAN = math.nan


class TestApplyUsePolicy:

    def test_everything_preserves_data(self):
        values = (1.0, NAN, 3.0)
        clean, n_complete = apply_use_policy(values, 'everything', FLOAT)
        assert clean is values
        assert n_complete == 2

    def test_complete_obs_removes_nan(self):
        clean, n_complete = apply_use_policy((1.0, NAN, 3.0), 'complete.obs', FLOAT)
        assert clean == (1.0, 3.0)
        assert n_complete == 2

    def test_complete_obs_all_nan_raises(self):
        with pytest.raises(ValidationError, match="No complete observations"):
            apply_use_policy((NAN, NAN), 'complete.obs', FLOAT)

    def test_complete_obs_empty_input_allowed(self):
        clean, n_complete = apply_use_policy((), 'complete.obs', FLOAT)
        assert clean == ()
        assert n_complete == 0

    def test_invalid_use_raises(self):
        with pytest.raises(ValidationError, match="Invalid use="):
            apply_use_policy((1.0,), 'pairwise.complete.obs', FLOAT)


class TestApplyPairwisePolicy:

    def test_everything_preserves_pairs(self):
        x, y = (1.0, NAN), (2.0, 3.0)
        x_clean, y_clean, n_complete = apply_pairwise_policy(x, y, 'everything', FLOAT)
        assert x_clean is x
        assert y_clean is y
        assert n_complete == 1

    def test_complete_obs_drops_pair_if_either_side_nan(self):
        x_clean, y_clean, n_complete = apply_pairwise_policy(
            (1.0, NAN, 3.0, 4.0), (5.0, 6.0, NAN, 8.0), 'complete.obs', FLOAT,
        )
        assert x_clean == (1.0, 4.0)
        assert y_clean == (5.0, 8.0)
        assert n_complete == 2

    def test_complete_obs_no_complete_pairs_raises(self):
        with pytest.raises(ValidationError, match="every pair contains NaN"):
            apply_pairwise_policy((NAN, 1.0), (1.0, NAN), 'complete.obs', FLOAT)

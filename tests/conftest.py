"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def paired_observations():
    """Five paired observations with known covariances (347.92 / 434.90)."""
    x = [5.0, 12.0, 18.0, -23.0, 45.0]
    y = [2.0, 8.0, 18.0, -20.0, 28.0]
    return x, y

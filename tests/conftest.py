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
def one_to_five():
    """The sample 1..5: mean 3, sample variance 2.5, population variance 2."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def skewed_data(rng):
    """Right-skewed continuous sample with no repeated values."""
    return rng.exponential(scale=2.0, size=200)

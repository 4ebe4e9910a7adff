"""
pytest configuration and shared fixtures.
"""

import math

import pytest
import numpy as np

from raytracing.linalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def invertible_4x4():
    """Non-singular matrix with no zero pivot during elimination."""
    return Matrix([
        [8.0, -5.0, 9.0, 2.0],
        [7.0, 5.0, 6.0, 1.0],
        [-6.0, 0.0, 9.0, 6.0],
        [-3.0, 0.0, -9.0, -4.0],
    ])


@pytest.fixture
def quarter_turn():
    return math.pi / 2.0

"""Shared fixtures for infopt tests."""

from typing import Optional

import numpy as np
import pytest
from scipy import stats

from infopt import InfiniteModel, ModelSettings


class PointSet:
    """Custom infinite set given by explicit sample points."""

    def __init__(self, points):
        self.points = np.asarray(points, dtype=float)

    def supports(self, num_points: int, seed: Optional[int] = None) -> np.ndarray:
        rng = np.random.default_rng(seed)
        return rng.choice(self.points, size=num_points)


# ============================================================================
# Models
# ============================================================================


@pytest.fixture
def model():
    """Empty model with deterministic settings."""
    return InfiniteModel("test", settings=ModelSettings(num_supports=5, seed=123))


@pytest.fixture
def other_model():
    """Second model for cross-model reference checks."""
    return InfiniteModel("other")


# ============================================================================
# Sets and distributions
# ============================================================================


@pytest.fixture
def point_set():
    """Custom set outside the built-in variants."""
    return PointSet([0.0, 0.5, 1.0])


@pytest.fixture
def normal():
    """Frozen univariate distribution."""
    return stats.norm(loc=0.0, scale=1.0)


@pytest.fixture
def uniform():
    """Frozen univariate distribution with finite support [2, 5]."""
    return stats.uniform(loc=2.0, scale=3.0)


@pytest.fixture
def mvnormal():
    """Frozen bivariate normal distribution."""
    return stats.multivariate_normal(mean=[0.0, 0.0], cov=np.eye(2))


@pytest.fixture
def wishart():
    """Frozen matrix variate distribution."""
    return stats.wishart(df=3, scale=np.eye(2))


# ============================================================================
# Parameters
# ============================================================================


@pytest.fixture
def t(model):
    """Time parameter on [0, 10]."""
    return model.infinite_parameter("t", lower_bound=0, upper_bound=10)


@pytest.fixture
def theta(model):
    """Three member parameter group theta[1..3] on [-1, 1]."""
    return model.infinite_parameters("θ", [1, 2, 3], lower_bound=-1, upper_bound=1)

"""Capability checks for probability distributions.

Distributions are supplied by scipy.stats. A distribution is any frozen
distribution object exposing ``rvs``; univariate ones are frozen
``rv_continuous``/``rv_discrete`` instances, everything else is treated as
multivariate.
"""

from typing import Any, Tuple

import numpy as np
from scipy.stats import rv_continuous, rv_discrete
from scipy.stats._multivariate import multi_rv_generic

# Fixed seed for the probe draw used to infer a distribution's event shape
_PROBE_SEED = 0


def is_distribution(obj: Any) -> bool:
    """Check whether an object behaves like a frozen distribution."""
    if isinstance(obj, (rv_continuous, rv_discrete, multi_rv_generic)):
        # Unfrozen generators have no fixed shape parameters
        return False
    return callable(getattr(obj, "rvs", None))


def is_univariate(dist: Any) -> bool:
    """Check whether a distribution is a frozen univariate scipy distribution."""
    return isinstance(getattr(dist, "dist", None), (rv_continuous, rv_discrete))


def event_ndim(dist: Any) -> int:
    """Number of dimensions of a single draw (0 scalar, 1 vector, 2 matrix)."""
    if is_univariate(dist):
        return 0
    # Two draws keep a leading sample axis for every scipy family
    draws = dist.rvs(size=2, random_state=np.random.default_rng(_PROBE_SEED))
    return max(int(np.ndim(draws)) - 1, 0)


def is_non_matrix_distribution(obj: Any) -> bool:
    """Check whether an object is a scalar or vector valued distribution.

    Matrix variate distributions (e.g. scipy.stats.wishart) are rejected.
    """
    if not is_distribution(obj):
        return False
    try:
        return event_ndim(obj) <= 1
    except (TypeError, ValueError):
        return False


def distribution_support(dist: Any) -> Tuple[float, float]:
    """Return the (minimum, maximum) of a univariate distribution."""
    low, high = dist.support()
    return float(low), float(high)


def distribution_name(dist: Any) -> str:
    """Name of the distribution family (e.g. "norm", "multivariate_normal")."""
    if is_univariate(dist):
        return dist.dist.name
    name = type(dist).__name__
    return name[:-len("_frozen")] if name.endswith("_frozen") else name

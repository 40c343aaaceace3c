"""Infinite set types.

An infinite set is the admissible domain of an infinite parameter. Any
object implementing the InfiniteSet protocol qualifies; two variants are
built in:
- IntervalSet: a closed interval [lower_bound, upper_bound]
- DistributionSet: the support of a probability distribution

Sets are immutable. A parameter's set is replaced wholesale, never edited.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import numpy as np

from ..errors import InvalidSpecification
from .distributions import distribution_name, is_non_matrix_distribution, is_univariate


@runtime_checkable
class InfiniteSet(Protocol):
    """Protocol for infinite sets.

    A set must be able to produce support points, which downstream
    discretization uses to build a finite model.
    """

    def supports(self, num_points: int, seed: Optional[int] = None) -> np.ndarray:
        """Generate support points.

        Args:
            num_points: Number of points to generate
            seed: Random seed for sets that sample

        Returns:
            Array of support points (one row per point)
        """
        ...


class SetKind(Enum):
    """Internal dispatch tag for infinite sets."""
    INTERVAL = "interval"
    DISTRIBUTION = "distribution"
    CUSTOM = "custom"


@dataclass(frozen=True)
class IntervalSet:
    """Closed interval [lower_bound, upper_bound].

    lower_bound <= upper_bound is expected but not enforced here.
    """
    lower_bound: float
    upper_bound: float

    def __post_init__(self):
        object.__setattr__(self, "lower_bound", float(self.lower_bound))
        object.__setattr__(self, "upper_bound", float(self.upper_bound))

    def supports(self, num_points: int, seed: Optional[int] = None) -> np.ndarray:
        """Evenly spaced points spanning the interval."""
        return np.linspace(self.lower_bound, self.upper_bound, num_points)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": SetKind.INTERVAL.value,
            "lower_bound": self.lower_bound,
            "upper_bound": self.upper_bound,
        }


@dataclass(frozen=True)
class DistributionSet:
    """Support of a frozen scipy.stats distribution.

    Attributes:
        distribution: Frozen univariate or (non-matrix) multivariate distribution
    """
    distribution: Any

    def __post_init__(self):
        if not is_non_matrix_distribution(self.distribution):
            raise InvalidSpecification(
                "Distribution must be a univariate or non-matrix multivariate "
                f"distribution, got {type(self.distribution).__name__}."
            )

    @property
    def is_univariate(self) -> bool:
        return is_univariate(self.distribution)

    def supports(self, num_points: int, seed: Optional[int] = None) -> np.ndarray:
        """Random draws from the distribution.

        Returns shape (num_points,) for univariate distributions and
        (num_points, dim) for multivariate ones.
        """
        draws = np.asarray(self.distribution.rvs(size=num_points, random_state=seed))
        if self.is_univariate:
            return draws.reshape(num_points)
        return draws.reshape(num_points, -1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": SetKind.DISTRIBUTION.value,
            "name": distribution_name(self.distribution),
            "args": [_plain(a) for a in getattr(self.distribution, "args", ())],
            "kwds": {k: _plain(v) for k, v in getattr(self.distribution, "kwds", {}).items()},
        }


def _plain(value: Any) -> Any:
    """Convert numpy values to plain Python for serialization."""
    return value.tolist() if hasattr(value, "tolist") else value


def is_infinite_set(obj: Any) -> bool:
    """Check whether an object satisfies the InfiniteSet protocol."""
    return isinstance(obj, InfiniteSet)


def set_kind(obj: Any) -> SetKind:
    """Classify a set for dispatch."""
    if isinstance(obj, IntervalSet):
        return SetKind.INTERVAL
    if isinstance(obj, DistributionSet):
        return SetKind.DISTRIBUTION
    return SetKind.CUSTOM


def set_to_dict(obj: Any) -> Dict[str, Any]:
    """Serialize any infinite set; custom sets export only their class."""
    if set_kind(obj) is SetKind.CUSTOM:
        cls = type(obj)
        return {"type": SetKind.CUSTOM.value, "class": f"{cls.__module__}.{cls.__qualname__}"}
    return obj.to_dict()

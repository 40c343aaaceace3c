"""Infinite sets: the admissible domains of infinite parameters."""

from .types import (
    InfiniteSet,
    SetKind,
    IntervalSet,
    DistributionSet,
    is_infinite_set,
    set_kind,
    set_to_dict,
)
from .distributions import (
    is_distribution,
    is_univariate,
    is_non_matrix_distribution,
    distribution_support,
)

__all__ = [
    "InfiniteSet",
    "SetKind",
    "IntervalSet",
    "DistributionSet",
    "is_infinite_set",
    "set_kind",
    "set_to_dict",
    "is_distribution",
    "is_univariate",
    "is_non_matrix_distribution",
    "distribution_support",
]

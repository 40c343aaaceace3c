"""Bound queries and updates for infinite parameters.

Bounds are defined per set kind:

| Set                        | has_*_bound      | *_bound            | set_*_bound         |
|----------------------------|------------------|--------------------|---------------------|
| IntervalSet                | True             | stored bound       | replaces the set    |
| univariate distribution    | True             | support min / max  | UnsupportedMutation |
| multivariate distribution  | IllDefinedBound  | IllDefinedBound    | UnsupportedMutation |
| custom set                 | UndefinedBound.. | UndefinedBound..   | UnsupportedMutation |

Sets are immutable, so updating an interval bound writes a new IntervalSet
back through the store.
"""

import logging
from typing import TYPE_CHECKING

from ..errors import (
    IllDefinedBound,
    InvalidSpecification,
    UndefinedBoundSemantics,
    UnsupportedMutation,
)
from ..sets import IntervalSet, SetKind, distribution_support, set_kind
from ..utils import is_real

if TYPE_CHECKING:
    from .types import ParameterRef

logger = logging.getLogger(__name__)

_LOWER = "lower"
_UPPER = "upper"


def _has_bound(pref: "ParameterRef", side: str) -> bool:
    current = pref.model.parameters.infinite_set(pref)
    kind = set_kind(current)
    if kind is SetKind.INTERVAL:
        return True
    name = pref.model.parameters.name(pref)
    if kind is SetKind.DISTRIBUTION:
        if current.is_univariate:
            return True
        raise IllDefinedBound(
            f"Only parameters with univariate distributions have well-defined {side} bounds "
            f"(parameter {name!r}).",
            parameter=pref,
            index=pref.index,
            name=name,
        )
    raise UndefinedBoundSemantics(
        f"Undefined infinite set type {type(current).__name__} for {side} bound checking "
        f"(parameter {name!r}).",
        parameter=pref,
        index=pref.index,
        name=name,
    )


def _bound(pref: "ParameterRef", side: str) -> float:
    _has_bound(pref, side)
    current = pref.model.parameters.infinite_set(pref)
    if set_kind(current) is SetKind.INTERVAL:
        return current.lower_bound if side == _LOWER else current.upper_bound
    low, high = distribution_support(current.distribution)
    return low if side == _LOWER else high


def _set_bound(pref: "ParameterRef", side: str, value: float) -> None:
    store = pref.model.parameters
    current = store.infinite_set(pref)
    name = store.name(pref)
    kind = set_kind(current)
    if kind is SetKind.DISTRIBUTION:
        raise UnsupportedMutation(
            f"Cannot set the {side} bound of a distribution (parameter {name!r}); "
            "replace the distribution with a truncated one (e.g. scipy.stats.truncnorm) instead.",
            parameter=pref,
            index=pref.index,
            name=name,
        )
    if kind is not SetKind.INTERVAL:
        raise UnsupportedMutation(
            f"Parameter {name!r} is not an interval set.",
            parameter=pref,
            index=pref.index,
            name=name,
        )

    if not is_real(value):
        raise InvalidSpecification(
            f"Bound for parameter {name!r} must be a number, got {type(value).__name__}",
            parameter=pref,
            index=pref.index,
            name=name,
        )

    if side == _LOWER:
        new_set = IntervalSet(value, current.upper_bound)
    else:
        new_set = IntervalSet(current.lower_bound, value)
    if new_set.lower_bound > new_set.upper_bound:
        logger.warning(
            f"Parameter {name!r} now has lower bound {new_set.lower_bound} "
            f"above upper bound {new_set.upper_bound}"
        )
    store.set_infinite_set(pref, new_set)


def has_lower_bound(pref: "ParameterRef") -> bool:
    """Whether pref has a lower bound (raises where the notion is undefined)."""
    return _has_bound(pref, _LOWER)


def lower_bound(pref: "ParameterRef") -> float:
    """Lower bound of pref's interval or univariate distribution support."""
    return _bound(pref, _LOWER)


def set_lower_bound(pref: "ParameterRef", value: float) -> None:
    """Replace pref's interval with one having the new lower bound."""
    _set_bound(pref, _LOWER, value)


def has_upper_bound(pref: "ParameterRef") -> bool:
    return _has_bound(pref, _UPPER)


def upper_bound(pref: "ParameterRef") -> float:
    return _bound(pref, _UPPER)


def set_upper_bound(pref: "ParameterRef", value: float) -> None:
    _set_bound(pref, _UPPER, value)

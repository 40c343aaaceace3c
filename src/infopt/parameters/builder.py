"""Builder for infinite parameter specifications.

A parameter is declared through exactly one of three channels:
- lower_bound and upper_bound together (an interval)
- distribution (a frozen scipy.stats distribution)
- set (any object implementing the InfiniteSet protocol)

ParameterInfo accumulates these channels one call at a time, rejects
duplicate or conflicting inputs immediately, and resolves the final
infinite set. Building never touches a model.

    info = ParameterInfo.from_kwargs(lower_bound=0, upper_bound=10)
    param = build_parameter(info.resolve())
    pref = model.parameters.add(param, "t")
"""

from dataclasses import dataclass
from typing import Any

from ..constants import PARAMETER_KEYWORDS
from ..errors import (
    ConflictingSpecification,
    DuplicateSpecification,
    IncompleteSpecification,
    InvalidSpecification,
)
from ..sets import DistributionSet, IntervalSet, is_infinite_set
from ..utils import is_real
from .types import InfOptParameter


@dataclass
class ParameterInfo:
    """Partially specified infinite parameter.

    Attributes:
        has_lb, lower_bound: Lower bound channel
        has_ub, upper_bound: Upper bound channel
        has_dist, distribution: Distribution channel
        has_set, set: Custom set channel
    """
    has_lb: bool = False
    lower_bound: Any = None
    has_ub: bool = False
    upper_bound: Any = None
    has_dist: bool = False
    distribution: Any = None
    has_set: bool = False
    set: Any = None

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> "ParameterInfo":
        """Build from keyword arguments, applied in the order given.

        Raises:
            InvalidSpecification: On an unrecognized keyword
        """
        info = cls()
        setters = {
            "lower_bound": info.set_lower_bound,
            "upper_bound": info.set_upper_bound,
            "distribution": info.set_distribution,
            "set": info.set_set,
        }
        for key, value in kwargs.items():
            if key not in setters:
                raise InvalidSpecification(
                    f"Unrecognized keyword argument {key!r}. Available: {list(PARAMETER_KEYWORDS)}"
                )
            setters[key](value)
        return info

    def set_lower_bound(self, lower: Any) -> None:
        if self.has_lb:
            raise DuplicateSpecification("Cannot specify parameter lower_bound twice")
        if self.has_dist:
            raise ConflictingSpecification("Cannot specify parameter lower_bound and distribution")
        if self.has_set:
            raise ConflictingSpecification("Cannot specify parameter lower_bound and set")
        self.has_lb = True
        self.lower_bound = lower

    def set_upper_bound(self, upper: Any) -> None:
        if self.has_ub:
            raise DuplicateSpecification("Cannot specify parameter upper_bound twice")
        if self.has_dist:
            raise ConflictingSpecification("Cannot specify parameter upper_bound and distribution")
        if self.has_set:
            raise ConflictingSpecification("Cannot specify parameter upper_bound and set")
        self.has_ub = True
        self.upper_bound = upper

    def set_distribution(self, dist: Any) -> None:
        if self.has_dist:
            raise DuplicateSpecification("Cannot specify parameter distribution twice")
        if self.has_lb or self.has_ub:
            raise ConflictingSpecification("Cannot specify parameter distribution and upper/lower bounds")
        if self.has_set:
            raise ConflictingSpecification("Cannot specify parameter distribution and set")
        self.has_dist = True
        self.distribution = dist

    def set_set(self, new_set: Any) -> None:
        if self.has_set:
            raise DuplicateSpecification("Cannot specify parameter set twice")
        if self.has_lb or self.has_ub:
            raise ConflictingSpecification("Cannot specify parameter set and upper/lower bounds")
        if self.has_dist:
            raise ConflictingSpecification("Cannot specify parameter set and distribution")
        self.has_set = True
        self.set = new_set

    def resolve(self) -> Any:
        """Resolve the specification to an infinite set.

        Returns:
            IntervalSet, DistributionSet, or the custom set as given

        Raises:
            IncompleteSpecification: If only one bound or nothing was given
            InvalidSpecification: If the given values have the wrong type
        """
        if self.has_lb != self.has_ub:
            raise IncompleteSpecification("Must specify both an upper bound and a lower bound")
        if self.has_lb:
            if not (is_real(self.lower_bound) and is_real(self.upper_bound)):
                raise InvalidSpecification("Bounds must be a number.")
            return IntervalSet(self.lower_bound, self.upper_bound)
        if self.has_dist:
            return DistributionSet(self.distribution)
        if self.has_set:
            if not is_infinite_set(self.set):
                raise InvalidSpecification(
                    f"Set must implement the InfiniteSet protocol, got {type(self.set).__name__}."
                )
            return self.set
        raise IncompleteSpecification("Must specify upper/lower bounds, a distribution, or a set")


def build_parameter(infinite_set: Any, **extra_kwargs: Any) -> InfOptParameter:
    """Build an infinite parameter from a resolved set.

    Args:
        infinite_set: The parameter's infinite set
        **extra_kwargs: Not accepted; present to report misspelled keywords

    Returns:
        New InfOptParameter

    Raises:
        InvalidSpecification: On any extra keyword or a non-set argument
    """
    for kwarg in extra_kwargs:
        raise InvalidSpecification(f"Unrecognized keyword argument {kwarg!r}")
    if not is_infinite_set(infinite_set):
        raise InvalidSpecification(
            f"Expected an infinite set, got {type(infinite_set).__name__}"
        )
    return InfOptParameter(infinite_set)

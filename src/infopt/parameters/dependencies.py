"""Validation of parameter dependency tuples.

A variable, constraint or measure declares the infinite parameters it is a
function of as an ordered tuple of groups. Each group is either a single
ParameterRef or a collection of ParameterRefs that together form one
named dimension, e.g. ``theta[1], theta[2], theta[3]`` for a random
vector ``theta``. Supported collections are lists, tuples, dicts keyed by
index, and numpy object arrays.

Validation is all-or-nothing and reports the first failing group only.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..errors import InvalidParameterType, MixedParameterNames
from ..utils import root_name
from .types import ParameterRef


def _members(group: Any) -> Optional[List[Any]]:
    """Flatten a collection group into its elements (None if unsupported)."""
    if isinstance(group, dict):
        return list(group.values())
    if isinstance(group, np.ndarray):
        return list(group.flat)
    if isinstance(group, (list, tuple)):
        return list(group)
    return None


def _is_valid_group(group: Any) -> bool:
    if isinstance(group, ParameterRef):
        return True
    members = _members(group)
    if not members:
        return False
    return all(isinstance(m, ParameterRef) for m in members)


def group_names(group: Any) -> List[str]:
    """Display names of every member of a group, in iteration order."""
    if isinstance(group, ParameterRef):
        return [group.name]
    return [pref.name for pref in _members(group)]


def group_root_name(group: Any) -> str:
    """Root name of a group: the name of a single ref, or the shared base
    name of a collection's members."""
    if isinstance(group, ParameterRef):
        return group.name
    return root_name(group_names(group)[0])


def get_root_names(groups: Sequence[Any]) -> List[str]:
    """Root name of every group of a validated tuple."""
    return [group_root_name(group) for group in groups]


def check_parameter_tuple(groups: Iterable[Any]) -> None:
    """Check every group is a ParameterRef or a collection of them.

    Raises:
        InvalidParameterType: Naming the position of the first bad group
    """
    for position, group in enumerate(groups):
        if not _is_valid_group(group):
            raise InvalidParameterType(
                f"Invalid parameter type given at position {position}: expected a "
                f"ParameterRef or a non-empty collection of ParameterRefs, got "
                f"{type(group).__name__}.",
                group=position,
            )


def check_tuple_names(groups: Iterable[Any]) -> None:
    """Check every collection group reduces to a single root name.

    Raises:
        MixedParameterNames: Naming the position of the first bad group
    """
    for position, group in enumerate(groups):
        if isinstance(group, ParameterRef):
            continue
        roots = sorted({root_name(name) for name in group_names(group)})
        if len(roots) != 1:
            raise MixedParameterNames(
                f"Each parameter tuple element must contain only one infinite parameter "
                f"name; element {position} mixes {roots}.",
                name=roots[0],
                group=position,
            )


def validate_parameter_tuple(groups: Iterable[Any]) -> Tuple[Any, ...]:
    """Validate a dependency tuple and return it unchanged.

    Args:
        groups: Ordered groups, each a ParameterRef or a collection of them

    Returns:
        The groups as a tuple

    Raises:
        InvalidParameterType: If a group is not a ParameterRef or collection thereof
        MixedParameterNames: If a collection mixes differently named parameters
        InvalidReference: If a member refers to a deleted parameter
    """
    groups = tuple(groups)
    check_parameter_tuple(groups)
    check_tuple_names(groups)
    return groups

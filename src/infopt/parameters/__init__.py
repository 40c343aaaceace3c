"""Infinite parameters for infopt models.

This module provides the parameter types, the specification builder, the
per-model store, the bound accessors and the dependency tuple validator.
"""

from .types import InfOptParameter, ParameterRef
from .builder import ParameterInfo, build_parameter
from .names import NameIndex
from .store import ParameterStore
from .bounds import (
    has_lower_bound,
    lower_bound,
    set_lower_bound,
    has_upper_bound,
    upper_bound,
    set_upper_bound,
)
from .dependencies import (
    check_parameter_tuple,
    check_tuple_names,
    validate_parameter_tuple,
    get_root_names,
    group_names,
    group_root_name,
)

__all__ = [
    # Types
    "InfOptParameter",
    "ParameterRef",
    # Builder
    "ParameterInfo",
    "build_parameter",
    # Store
    "NameIndex",
    "ParameterStore",
    # Bounds
    "has_lower_bound",
    "lower_bound",
    "set_lower_bound",
    "has_upper_bound",
    "upper_bound",
    "set_upper_bound",
    # Dependencies
    "check_parameter_tuple",
    "check_tuple_names",
    "validate_parameter_tuple",
    "get_root_names",
    "group_names",
    "group_root_name",
]

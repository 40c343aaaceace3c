"""Public API for infopt.

This module provides the complete public API for the infinite parameter
layer, including infinite sets, parameter management, dependency
validation, settings and errors.
"""

# Model
from .model import InfiniteModel

# Infinite sets
from .sets import (
    InfiniteSet,
    SetKind,
    IntervalSet,
    DistributionSet,
    is_infinite_set,
    is_non_matrix_distribution,
)

# Parameters
from .parameters import (
    InfOptParameter,
    ParameterRef,
    ParameterInfo,
    ParameterStore,
    build_parameter,
    # Bounds
    has_lower_bound,
    lower_bound,
    set_lower_bound,
    has_upper_bound,
    upper_bound,
    set_upper_bound,
    # Dependencies
    validate_parameter_tuple,
    get_root_names,
)

# Settings
from .config import ModelSettings, load_settings, read_pyproject

# Errors
from .errors import (
    ErrorKind,
    InfOptError,
    SpecificationError,
    DuplicateSpecification,
    ConflictingSpecification,
    IncompleteSpecification,
    InvalidSpecification,
    InvalidReference,
    AmbiguousName,
    InvalidParameterType,
    MixedParameterNames,
    BoundError,
    UnsupportedMutation,
    IllDefinedBound,
    UndefinedBoundSemantics,
)

# Constants
from .constants import AMBIGUOUS_INDEX

# Version
try:
    from importlib.metadata import version
    __version__ = version("infopt")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Model
    "InfiniteModel",

    # Sets
    "InfiniteSet",
    "SetKind",
    "IntervalSet",
    "DistributionSet",
    "is_infinite_set",
    "is_non_matrix_distribution",

    # Parameters
    "InfOptParameter",
    "ParameterRef",
    "ParameterInfo",
    "ParameterStore",
    "build_parameter",

    # Bounds
    "has_lower_bound",
    "lower_bound",
    "set_lower_bound",
    "has_upper_bound",
    "upper_bound",
    "set_upper_bound",

    # Dependencies
    "validate_parameter_tuple",
    "get_root_names",

    # Settings
    "ModelSettings",
    "load_settings",
    "read_pyproject",

    # Errors
    "ErrorKind",
    "InfOptError",
    "SpecificationError",
    "DuplicateSpecification",
    "ConflictingSpecification",
    "IncompleteSpecification",
    "InvalidSpecification",
    "InvalidReference",
    "AmbiguousName",
    "InvalidParameterType",
    "MixedParameterNames",
    "BoundError",
    "UnsupportedMutation",
    "IllDefinedBound",
    "UndefinedBoundSemantics",

    # Constants
    "AMBIGUOUS_INDEX",

    # Version
    "__version__",
]

"""Error types for infopt.

Every failure raised by the parameter layer is an ``InfOptError`` carrying
an ``ErrorKind`` and the context needed to locate the fault (parameter,
index, name, dependency group position). Each concrete error also derives
from the builtin exception it refines, so callers that already catch
``ValueError`` or ``TypeError`` keep working.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Closed set of failure categories."""
    DUPLICATE_SPECIFICATION = "duplicate_specification"
    CONFLICTING_SPECIFICATION = "conflicting_specification"
    INCOMPLETE_SPECIFICATION = "incomplete_specification"
    INVALID_SPECIFICATION = "invalid_specification"
    INVALID_REFERENCE = "invalid_reference"
    AMBIGUOUS_NAME = "ambiguous_name"
    INVALID_PARAMETER_TYPE = "invalid_parameter_type"
    MIXED_PARAMETER_NAMES = "mixed_parameter_names"
    UNSUPPORTED_MUTATION = "unsupported_mutation"
    ILL_DEFINED_BOUND = "ill_defined_bound"
    UNDEFINED_BOUND_SEMANTICS = "undefined_bound_semantics"


class InfOptError(Exception):
    """Base class for all infopt errors.

    Attributes:
        kind: Category of the failure
        parameter: Offending parameter reference, if any
        index: Offending parameter index, if any
        name: Offending parameter or group name, if any
        group: Position of the offending dependency group, if any
    """
    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        parameter: Any = None,
        index: Optional[int] = None,
        name: Optional[str] = None,
        group: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.parameter = parameter
        self.index = index
        self.name = name
        self.group = group

    def __str__(self) -> str:
        return self.message


class SpecificationError(InfOptError, ValueError):
    """Malformed parameter declaration."""


class DuplicateSpecification(SpecificationError):
    kind = ErrorKind.DUPLICATE_SPECIFICATION


class ConflictingSpecification(SpecificationError):
    kind = ErrorKind.CONFLICTING_SPECIFICATION


class IncompleteSpecification(SpecificationError):
    kind = ErrorKind.INCOMPLETE_SPECIFICATION


class InvalidSpecification(SpecificationError):
    kind = ErrorKind.INVALID_SPECIFICATION


class InvalidReference(InfOptError, LookupError):
    """Reference to a parameter that is not live in its owning model."""
    kind = ErrorKind.INVALID_REFERENCE


class AmbiguousName(InfOptError, ValueError):
    """Name lookup matched more than one live parameter."""
    kind = ErrorKind.AMBIGUOUS_NAME


class InvalidParameterType(InfOptError, TypeError):
    kind = ErrorKind.INVALID_PARAMETER_TYPE


class MixedParameterNames(InfOptError, ValueError):
    kind = ErrorKind.MIXED_PARAMETER_NAMES


class BoundError(InfOptError):
    """Bound query or update not supported by the parameter's set."""


class UnsupportedMutation(BoundError, TypeError):
    kind = ErrorKind.UNSUPPORTED_MUTATION


class IllDefinedBound(BoundError, ValueError):
    kind = ErrorKind.ILL_DEFINED_BOUND


class UndefinedBoundSemantics(BoundError, ValueError):
    kind = ErrorKind.UNDEFINED_BOUND_SEMANTICS

"""Core parameter types.

This module implements the fundamental types for infinite parameters:
- InfOptParameter: An infinite parameter, i.e. its infinite set
- ParameterRef: Lightweight handle (owning model + index) to a stored parameter

References never copy a parameter's set; every query goes through the
owning model's ParameterStore.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from . import bounds

if TYPE_CHECKING:
    from ..model import InfiniteModel


@dataclass(frozen=True)
class InfOptParameter:
    """An infinite parameter.

    Attributes:
        set: The parameter's infinite set (replaced wholesale, never mutated)
    """
    set: Any


class ParameterRef:
    """Reference to an infinite parameter stored in an InfiniteModel.

    Two references are equal iff they point at the same model object and
    carry the same index. A reference does not own its parameter: once the
    parameter is deleted the reference is stale and ``is_valid()`` returns
    False.

    Attributes:
        model: The owning InfiniteModel
        index: Integer identity of the parameter within its model
    """

    __slots__ = ("model", "index")

    def __init__(self, model: "InfiniteModel", index: int):
        self.model = model
        self.index = index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterRef):
            return NotImplemented
        return self.model is other.model and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.model), self.index))

    def __repr__(self) -> str:
        return f"ParameterRef(index={self.index})"

    def __str__(self) -> str:
        if self.is_valid():
            return self.name
        return f"<deleted parameter {self.index}>"

    def copy(self, new_model: "InfiniteModel") -> "ParameterRef":
        """Return a reference with the same index on another model."""
        return ParameterRef(new_model, self.index)

    # Store access

    def is_valid(self) -> bool:
        return self.model.parameters.is_valid(self)

    def delete(self) -> None:
        self.model.parameters.delete(self)

    @property
    def name(self) -> str:
        return self.model.parameters.name(self)

    def set_name(self, name: str) -> None:
        self.model.parameters.set_name(self, name)

    def infinite_set(self) -> Any:
        return self.model.parameters.infinite_set(self)

    def set_infinite_set(self, new_set: Any) -> None:
        self.model.parameters.set_infinite_set(self, new_set)

    # Bounds

    def has_lower_bound(self) -> bool:
        return bounds.has_lower_bound(self)

    def lower_bound(self) -> float:
        return bounds.lower_bound(self)

    def set_lower_bound(self, value: float) -> None:
        bounds.set_lower_bound(self, value)

    def has_upper_bound(self) -> bool:
        return bounds.has_upper_bound(self)

    def upper_bound(self) -> float:
        return bounds.upper_bound(self)

    def set_upper_bound(self, value: float) -> None:
        bounds.set_upper_bound(self, value)

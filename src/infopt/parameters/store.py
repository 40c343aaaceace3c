"""Per-model storage of infinite parameters.

The ParameterStore owns every infinite parameter of one InfiniteModel:
- params: index -> InfOptParameter
- param_to_name: index -> display name
- name_index: lazily rebuilt name -> index cache
- next_param_index: monotonic allocator, indices are never reused

The store is not thread safe. Mutating operations (add, delete, set_name,
set_infinite_set and the bound setters) must be serialized by the caller
if a model is shared between threads; reads may interleave with reads.
"""

import logging
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

import numpy as np

from ..constants import AMBIGUOUS_INDEX
from ..errors import AmbiguousName, InvalidReference, InvalidSpecification
from ..sets import is_infinite_set, set_to_dict
from .names import NameIndex
from .types import InfOptParameter, ParameterRef

if TYPE_CHECKING:
    from ..model import InfiniteModel

logger = logging.getLogger(__name__)


class ParameterStore:
    """Arena of infinite parameters keyed by integer index.

    Attributes:
        model: The owning InfiniteModel
        params: Mapping of index to parameter
        param_to_name: Mapping of index to display name
        name_index: Cached reverse mapping, see NameIndex
        next_param_index: Last allocated index (0 before the first add)
    """

    def __init__(self, model: "InfiniteModel"):
        self.model = model
        self.params: Dict[int, InfOptParameter] = {}
        self.param_to_name: Dict[int, str] = {}
        self.name_index = NameIndex()
        self.next_param_index = 0

    def __len__(self) -> int:
        return len(self.params)

    def __contains__(self, pref: object) -> bool:
        return isinstance(pref, ParameterRef) and self.is_valid(pref)

    def _check(self, pref: ParameterRef) -> None:
        if not self.is_valid(pref):
            raise InvalidReference(
                f"Parameter reference {pref.index} is not valid for model {self.model.name!r}",
                parameter=pref,
                index=pref.index,
            )

    def add(self, parameter: Union[InfOptParameter, Any], name: str = "") -> ParameterRef:
        """Add a parameter and return a reference to it.

        Args:
            parameter: An InfOptParameter or a bare infinite set
            name: Display name

        Returns:
            Reference to the new parameter

        Raises:
            InvalidSpecification: If parameter is neither an InfOptParameter
                nor an infinite set
        """
        if not isinstance(parameter, InfOptParameter):
            if not is_infinite_set(parameter):
                raise InvalidSpecification(
                    f"Expected an InfOptParameter or infinite set, got {type(parameter).__name__}",
                    name=name,
                )
            parameter = InfOptParameter(parameter)

        self.next_param_index += 1
        pref = ParameterRef(self.model, self.next_param_index)
        self.params[pref.index] = parameter
        self.param_to_name[pref.index] = name
        self.name_index.invalidate()
        logger.debug(f"Added parameter {name!r} with index {pref.index}")
        return pref

    def is_valid(self, pref: ParameterRef) -> bool:
        """Check that pref belongs to this model and is still live."""
        return pref.model is self.model and pref.index in self.params

    def delete(self, pref: ParameterRef) -> None:
        """Remove a parameter.

        Detaching the parameter from variables or measures that depend on it
        is up to the caller. Outstanding references become invalid.

        Raises:
            InvalidReference: If pref is not valid
        """
        self._check(pref)
        name = self.param_to_name.pop(pref.index)
        del self.params[pref.index]
        self.name_index.invalidate()
        logger.debug(f"Deleted parameter {name!r} with index {pref.index}")

    def name(self, pref: ParameterRef) -> str:
        self._check(pref)
        return self.param_to_name[pref.index]

    def set_name(self, pref: ParameterRef, name: str) -> None:
        """Rename a parameter (the name index is rebuilt lazily)."""
        self._check(pref)
        old = self.param_to_name[pref.index]
        self.param_to_name[pref.index] = name
        self.name_index.invalidate()
        logger.debug(f"Renamed parameter {pref.index} from {old!r} to {name!r}")

    def parameter_by_name(self, name: str) -> Optional[ParameterRef]:
        """Look up a parameter by display name.

        Returns:
            The reference, or None if no live parameter has this name

        Raises:
            AmbiguousName: If several live parameters share the name
        """
        index = self.name_index.lookup(name, self.param_to_name)
        if index is None:
            return None
        if index == AMBIGUOUS_INDEX:
            raise AmbiguousName(f"Multiple parameters have the name {name!r}.", name=name)
        return ParameterRef(self.model, index)

    def all_parameters(self) -> List[ParameterRef]:
        """All live parameters in ascending index order."""
        return [ParameterRef(self.model, index) for index in sorted(self.params)]

    def num_parameters(self) -> int:
        return len(self.params)

    def infinite_set(self, pref: ParameterRef) -> Any:
        """Return the infinite set of pref."""
        self._check(pref)
        return self.params[pref.index].set

    def set_infinite_set(self, pref: ParameterRef, new_set: Any) -> None:
        """Replace the infinite set of pref; index and name are unchanged.

        Raises:
            InvalidReference: If pref is not valid
            InvalidSpecification: If new_set is not an infinite set
        """
        self._check(pref)
        if not is_infinite_set(new_set):
            raise InvalidSpecification(
                f"Set for parameter {self.param_to_name[pref.index]!r} must be an infinite set, "
                f"got {type(new_set).__name__}",
                parameter=pref,
                index=pref.index,
                name=self.param_to_name[pref.index],
            )
        self.params[pref.index] = InfOptParameter(new_set)
        logger.debug(f"Replaced set of parameter {self.param_to_name[pref.index]!r}")

    def supports(
        self,
        pref: ParameterRef,
        num_points: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> np.ndarray:
        """Generate support points for a parameter.

        Args:
            pref: Parameter reference
            num_points: Number of points (defaults to the model settings)
            seed: Random seed (defaults to the model settings)

        Returns:
            Array of support points
        """
        settings = self.model.settings
        if num_points is None:
            num_points = settings.num_supports
        if seed is None:
            seed = settings.seed
        if num_points <= 0:
            raise ValueError(f"num_points must be positive, got {num_points}")
        return self.infinite_set(pref).supports(num_points, seed=seed)

    def to_dict(self) -> Dict[str, Any]:
        """Export all parameters as a serializable dictionary."""
        return {
            "parameters": [
                {
                    "index": index,
                    "name": self.param_to_name[index],
                    "set": set_to_dict(self.params[index].set),
                }
                for index in sorted(self.params)
            ]
        }

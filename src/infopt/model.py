"""InfiniteModel: container for infinite parameters.

The model owns a ParameterStore (``model.parameters``) holding every
infinite parameter and its display name. Every ParameterRef points back at
the model it came from, so references from one model are never valid in
another.

Example:
    >>> from scipy import stats
    >>> model = InfiniteModel("reactor")
    >>> t = model.infinite_parameter("t", lower_bound=0, upper_bound=10)
    >>> xi = model.infinite_parameter("xi", distribution=stats.norm(0, 1))
    >>> theta = model.infinite_parameters("theta", [1, 2, 3], lower_bound=-1, upper_bound=1)
"""

import logging
from typing import Any, Dict, Hashable, Iterable, List, Optional

from .config import ModelSettings
from .parameters import ParameterInfo, ParameterRef, ParameterStore, build_parameter
from .utils import indexed_name

logger = logging.getLogger(__name__)


class InfiniteModel:
    """Optimization model over infinite parameters.

    Attributes:
        name: Model name (used in error messages)
        settings: Runtime defaults, see ModelSettings
        parameters: The model's ParameterStore
    """

    def __init__(self, name: str = "", settings: Optional[ModelSettings] = None):
        self.name = name
        self.settings = settings or ModelSettings()
        self.parameters = ParameterStore(self)

    def __repr__(self) -> str:
        return f"InfiniteModel({self.name!r}, {len(self.parameters)} parameters)"

    def infinite_parameter(self, name: str = "", **kwargs: Any) -> ParameterRef:
        """Declare an infinite parameter.

        Args:
            name: Display name
            **kwargs: lower_bound/upper_bound, distribution, or set

        Returns:
            Reference to the new parameter

        Raises:
            SpecificationError: If the specification is malformed
        """
        infinite_set = ParameterInfo.from_kwargs(**kwargs).resolve()
        return self.parameters.add(build_parameter(infinite_set), name)

    def infinite_parameters(
        self,
        name: str,
        indices: Iterable[Hashable],
        **kwargs: Any,
    ) -> Dict[Hashable, ParameterRef]:
        """Declare a group of infinite parameters sharing one root name.

        Each member is named ``name[i]`` (or ``name[i,j]`` for tuple
        indices). All members share the resolved set, which is immutable;
        replacing one member's set leaves the others untouched. The group
        passes dependency tuple validation as one dimension.

        Args:
            name: Root name of the group
            indices: Index of every member
            **kwargs: lower_bound/upper_bound, distribution, or set

        Returns:
            Mapping of index to parameter reference, in the given order
        """
        infinite_set = ParameterInfo.from_kwargs(**kwargs).resolve()
        group = {}
        for index in indices:
            group[index] = self.parameters.add(build_parameter(infinite_set), indexed_name(name, index))
        logger.debug(f"Declared parameter group {name!r} with {len(group)} members")
        return group

    def parameter_by_name(self, name: str) -> Optional[ParameterRef]:
        return self.parameters.parameter_by_name(name)

    def all_parameters(self) -> List[ParameterRef]:
        return self.parameters.all_parameters()

    def num_parameters(self) -> int:
        return self.parameters.num_parameters()

    def is_valid(self, pref: ParameterRef) -> bool:
        return self.parameters.is_valid(pref)

    def delete(self, pref: ParameterRef) -> None:
        self.parameters.delete(pref)

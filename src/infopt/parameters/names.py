"""Lazily rebuilt name -> index lookup for parameters."""

import logging
from typing import Dict, Mapping, Optional

from ..constants import AMBIGUOUS_INDEX

logger = logging.getLogger(__name__)


class NameIndex:
    """Cache mapping display names to parameter indices.

    The cache is either invalid (``None``) or a full mapping built from the
    store's index -> name map. Invalidation is O(1); the O(n) rebuild is
    deferred until the next lookup. A name shared by several live
    parameters maps to AMBIGUOUS_INDEX.
    """

    def __init__(self):
        self._index: Optional[Dict[str, int]] = None

    @property
    def is_valid(self) -> bool:
        return self._index is not None

    def invalidate(self) -> None:
        self._index = None

    def rebuild(self, param_to_name: Mapping[int, str]) -> None:
        index: Dict[str, int] = {}
        for param, name in param_to_name.items():
            if name in index:
                index[name] = AMBIGUOUS_INDEX
            else:
                index[name] = param
        self._index = index
        logger.debug(f"Rebuilt parameter name index ({len(param_to_name)} parameters)")

    def lookup(self, name: str, param_to_name: Mapping[int, str]) -> Optional[int]:
        """Find the index for a name.

        Returns:
            The parameter index, AMBIGUOUS_INDEX, or None if no live
            parameter has this name
        """
        if self._index is None:
            self.rebuild(param_to_name)
        found = self._index.get(name)
        if found is not None and found != AMBIGUOUS_INDEX and param_to_name.get(found) != name:
            # Stale hit; the parameter was removed or renamed behind our back
            self.rebuild(param_to_name)
            found = self._index.get(name)
        return found

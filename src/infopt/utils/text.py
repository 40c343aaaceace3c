"""Display name helpers for grouped parameters."""

from typing import Any, Tuple, Union

from ..constants import INDEX_OPEN


def root_name(name: str) -> str:
    """Return the base of a display name, before any index suffix.

    Examples:
        >>> root_name("theta[1]")
        'theta'
        >>> root_name("x[1,2]")
        'x'
        >>> root_name("t")
        't'
    """
    position = name.find(INDEX_OPEN)
    return name if position < 0 else name[:position]


def indexed_name(base: str, index: Union[Any, Tuple[Any, ...]]) -> str:
    """Format the display name of one member of a parameter group.

    Examples:
        >>> indexed_name("theta", 1)
        'theta[1]'
        >>> indexed_name("x", (1, 2))
        'x[1,2]'
    """
    if isinstance(index, tuple):
        inner = ",".join(str(i) for i in index)
    else:
        inner = str(index)
    return f"{base}{INDEX_OPEN}{inner}]"

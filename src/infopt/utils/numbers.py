"""Numeric helpers."""

from numbers import Real
from typing import Any


def is_real(value: Any) -> bool:
    """Numeric check that rejects bool (an int subclass in Python)."""
    return isinstance(value, Real) and not isinstance(value, bool)

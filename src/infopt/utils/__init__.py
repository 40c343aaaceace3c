"""Utility helpers for infopt."""

from .numbers import is_real
from .text import root_name, indexed_name

__all__ = ["is_real", "root_name", "indexed_name"]

"""Three-way classification of values: mapping, sequence or scalar."""

from collections.abc import Mapping, Sequence
from typing import Any, TypeGuard

# Text types are sequences to Python but scalars to tidykit.
_TEXT_TYPES = (str, bytes, bytearray)


def is_sequence(value: Any) -> TypeGuard[Sequence[Any]]:
    """Return True for ordered sequences other than text (lists, tuples, ...)."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def is_container(value: Any) -> bool:
    """Return True for mappings and non-text sequences."""
    return isinstance(value, Mapping) or is_sequence(value)

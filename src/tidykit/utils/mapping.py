"""Helpers for turning plain mappings into dataclass instances."""

import re
from collections.abc import Callable, Mapping
from dataclasses import MISSING, fields, is_dataclass
from typing import Any, TypeVar, cast

D = TypeVar("D")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def camel_to_snake(name: str) -> str:
    """Convert a camelCase key to snake_case.

    Keys that are already snake_case are returned unchanged.

    Example:
        ``camel_to_snake("allowDecimals")`` returns ``"allow_decimals"``.
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def dict_to_dataclass(dc_type: type[D], values: Mapping[str, Any]) -> D:
    """Build a dataclass instance from a flat mapping of field values.

    Args:
        dc_type: The dataclass type to build.
        values: Field values keyed by snake_case or camelCase field name.

    Returns:
        An instance of dc_type populated with data from values.

    Raises:
        TypeError: If dc_type is not a dataclass type.
        KeyError: If a field without a default is missing from values.

    Note:
        - Keys that do not name an init field of dc_type are ignored.
        - When both spellings of a key are given, the snake_case one wins.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    normalized: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(key, str) and key != (snake := camel_to_snake(key)):
            normalized.setdefault(snake, value)
        else:
            normalized[key] = value

    kwargs = {}
    for field in fields(dc_type):
        if not field.init:
            continue
        if field.name in normalized:
            kwargs[field.name] = normalized[field.name]
        elif field.default is not MISSING:
            kwargs[field.name] = field.default
        elif field.default_factory is not MISSING:
            factory = cast(Callable[[], Any], field.default_factory)
            kwargs[field.name] = factory()
        else:
            raise KeyError(f"Missing required field '{field.name}'")
    return cast(D, dc_type(**kwargs))

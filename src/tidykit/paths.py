"""Dot-path lookups into nested mappings and sequences.

`resolve_object_path` walks ``data`` one path segment at a time. Lists met
along the way are fanned out: the rest of the path is resolved against every
element and the hits are collected into one flat list.

    >>> data = {"user": {"name": "John", "addresses": [{"city": "NY"}, {"city": "LA"}]}}
    >>> resolve_object_path(data, "user.name")
    'John'
    >>> resolve_object_path(data, "user.addresses.city")
    ['NY', 'LA']
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from tidykit.utils.shapes import is_container, is_sequence


def _get_not_found() -> "_NotFoundType":
    # Factory used by pickle to retrieve the one true instance.
    return NOT_FOUND


@dataclass(frozen=True)
class _NotFoundType:
    """Sentinel for paths that lead nowhere.

    This is distinct from `None`, which may be a stored value.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_not_found, ())


# Singleton instance
NOT_FOUND = _NotFoundType()


def resolve_object_path(data: Any, path: str, default: Any = None) -> Any:
    """Get the value(s) at a dot-notation path.

    Args:
        data: Nested mappings and sequences to traverse. ``None`` is allowed.
        path: Dot-separated keys, e.g. ``"user.address.street"``. An empty
            path returns ``data`` itself.
        default: Returned when nothing is found. Pass `NOT_FOUND` to tell a
            missing path apart from a stored ``None``.

    Returns:
        The value at the path, a flat list of values when a sequence was
        fanned out, or ``default``.

    Note:
        Malformed paths (``"a..b"``, ``".a"``, ``"a."``) are reported as not
        found rather than raising.
    """
    if data is None:
        return default
    if not path:
        return data

    keys = path.split(".")
    if not all(keys):
        return default

    result = _traverse(data, keys)
    return default if result is NOT_FOUND else result


def _traverse(current: Any, keys: Sequence[str]) -> Any:
    if current is None:
        return NOT_FOUND

    if is_sequence(current):
        return _fan_out(current, keys)

    if not isinstance(current, Mapping):
        return NOT_FOUND

    first, rest = keys[0], keys[1:]
    if first not in current:
        return NOT_FOUND
    found = current[first]
    if not rest:
        return found
    return _traverse(found, rest)


def _fan_out(items: Sequence[Any], keys: Sequence[str]) -> Any:
    hits = 0
    flat: list[Any] = []
    for item in items:
        result = _traverse(item, keys)
        if _is_blank(result):
            continue
        hits += 1
        if is_sequence(result):
            flat.extend(result)
        else:
            flat.append(result)
    return flat if hits else NOT_FOUND


def _is_blank(value: Any) -> bool:
    # Containers always count as hits, even when empty; scalars by truthiness.
    if value is NOT_FOUND:
        return True
    if is_container(value):
        return False
    return not value

"""Recursive normalization of empty values in nested data."""

from collections.abc import Mapping
from typing import Any

from tidykit.errors import InvalidArgumentTypeError
from tidykit.options import EmptyValueOptions, resolve_options
from tidykit.utils.shapes import is_container, is_sequence


def transform_empty_values(
    value: Any,
    options: EmptyValueOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Any:
    """Replace empty values in a mapping or sequence, keeping its structure.

    By default blank strings (after stripping) become ``None``. Nested mappings
    and sequences are walked recursively; other values are only tested for
    emptiness. The input is not modified.

    Args:
        value: A mapping or a non-text sequence.
        options: An `EmptyValueOptions`, a mapping of its fields, or None.
        **overrides: Individual option fields, e.g. ``replace_with="n/a"``.

    Returns:
        A new dict (for mappings), tuple (for tuples) or list (for other
        sequences). If ``value`` itself counts as empty, ``replace_with`` is
        returned instead.

    Raises:
        InvalidArgumentTypeError: If ``value`` is not a mapping or sequence.

    Examples:
        ``transform_empty_values({"name": "", "age": 25})`` returns
        ``{"name": None, "age": 25}``.

        ``transform_empty_values({"tags": []}, process_empty_arrays=True)``
        returns ``{"tags": None}``.

        ``transform_empty_values({"count": 0}, is_empty_fn=lambda v: v == 0)``
        returns ``{"count": None}``.
    """
    if not is_container(value):
        raise InvalidArgumentTypeError("value", "a mapping or sequence", value)

    opts = resolve_options(EmptyValueOptions, options, overrides)
    return _transform(value, opts)


def is_empty(value: Any, opts: EmptyValueOptions) -> bool:
    """Apply the emptiness rule configured by ``opts`` to a single value.

    A supplied ``is_empty_fn`` decides alone. Otherwise strings are empty when
    blank (or exactly ``""`` with ``trim_strings=False``) and sequences are
    empty when zero-length and ``process_empty_arrays`` is set.
    """
    if opts.is_empty_fn is not None:
        return bool(opts.is_empty_fn(value))
    if isinstance(value, str):
        return (value.strip() if opts.trim_strings else value) == ""
    if opts.process_empty_arrays and is_sequence(value):
        return len(value) == 0
    return False


def _transform(value: Any, opts: EmptyValueOptions) -> Any:
    if is_empty(value, opts):
        return opts.replace_with

    if isinstance(value, Mapping):
        return {key: _transform_item(item, opts) for key, item in value.items()}

    items = [_transform_item(item, opts) for item in value]
    return tuple(items) if isinstance(value, tuple) else items


def _transform_item(item: Any, opts: EmptyValueOptions) -> Any:
    if is_container(item):
        return _transform(item, opts)
    return opts.replace_with if is_empty(item, opts) else item

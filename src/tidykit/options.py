"""Option bundles accepted by the tidykit helpers.

Every helper that takes configuration accepts it in one of three forms:

* ``None``: all defaults apply.
* an instance of the matching options dataclass.
* a plain mapping, keyed by snake_case (``allow_decimals``) or camelCase
  (``allowDecimals``) field names. Unknown keys are ignored.

Keyword overrides passed to the helper take precedence over ``options``. The
bundle is resolved once at call entry by `resolve_options`.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar

from tidykit.errors import InvalidArgumentTypeError
from tidykit.utils.mapping import camel_to_snake, dict_to_dataclass

O = TypeVar("O")


@dataclass(frozen=True, slots=True)
class ExtractNumberOptions:
    """Options for `tidykit.extract_number`.

    Attributes:
        allow_decimals: Accept a fractional part (``123.45``) and parse as float.
        allow_negative: Accept a leading minus sign.
        default_value: Returned when the text holds no number.
    """

    allow_decimals: bool = False
    allow_negative: bool = False
    default_value: int | float = 0


@dataclass(frozen=True, slots=True)
class EmptyValueOptions:
    """Options for `tidykit.transform_empty_values`.

    Attributes:
        replace_with: Value substituted for every empty value.
        trim_strings: Strip whitespace before testing a string for emptiness.
        process_empty_arrays: Treat zero-length sequences as empty.
        is_empty_fn: Predicate that, when given, replaces the built-in
            emptiness rules entirely.
    """

    replace_with: Any = None
    trim_strings: bool = True
    process_empty_arrays: bool = False
    is_empty_fn: Callable[[Any], bool] | None = None


@dataclass(frozen=True, slots=True)
class ReplaceOptions:
    """Options for `tidykit.replace_string`.

    Attributes:
        ignore_case: Match keys case-insensitively.
        replace_all: Replace every occurrence instead of only the first.
        escape_regex: Match keys literally. When False, keys are raw regular
            expression fragments.
    """

    ignore_case: bool = True
    replace_all: bool = True
    escape_regex: bool = True


def resolve_options(
    options_type: type[O],
    options: O | Mapping[str, Any] | None,
    overrides: Mapping[str, Any] | None = None,
) -> O:
    """Resolve caller-supplied options into an ``options_type`` instance.

    Args:
        options_type: The options dataclass to build.
        options: None, an ``options_type`` instance or a mapping of field values.
        overrides: Keyword overrides applied on top of ``options``.

    Returns:
        A frozen ``options_type`` instance.

    Raises:
        InvalidArgumentTypeError: If ``options`` is of any other type.
    """
    if options is None:
        resolved = options_type()
    elif isinstance(options, options_type):
        resolved = options
    elif isinstance(options, Mapping):
        resolved = dict_to_dataclass(options_type, options)
    else:
        raise InvalidArgumentTypeError(
            "options", f"a mapping or {options_type.__name__}", options
        )

    if overrides:
        resolved = replace(resolved, **_known_fields(options_type, overrides))  # type: ignore[type-var]
    return resolved


def _known_fields(options_type: type[Any], values: Mapping[str, Any]) -> dict[str, Any]:
    names = {field.name for field in fields(options_type)}
    known = {}
    for key, value in values.items():
        if (name := camel_to_snake(key)) in names:
            known[name] = value
    return known

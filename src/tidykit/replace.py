"""Multi-key string substitution in a single pass."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from tidykit.errors import InvalidArgumentTypeError, PatternSyntaxError
from tidykit.options import ReplaceOptions, resolve_options

logger = logging.getLogger(__name__)


def replace_string(
    text: str,
    replacements: Mapping[str, str | int | float | bool],
    options: ReplaceOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Replace every occurrence of any key in ``replacements`` with its value.

    All keys are combined into one alternation, so the text is scanned once
    and a replaced value is never matched again.

    Args:
        text: The text to perform replacements on.
        replacements: Search keys mapped to their replacement. Values are
            converted to text; booleans become ``"true"``/``"false"`` and
            whole-number floats drop their fraction (``100.0`` -> ``"100"``).
            Empty keys are ignored.
        options: A `ReplaceOptions`, a mapping of its fields, or None.
        **overrides: Individual option fields, e.g. ``ignore_case=False``.

    Returns:
        The text with replacements applied. ``text`` itself when it is empty
        or ``replacements`` has no entries.

    Raises:
        InvalidArgumentTypeError: If ``text`` is not a string or
            ``replacements`` is not a mapping.
        PatternSyntaxError: If ``escape_regex`` is False and the keys do not
            form a valid regular expression.

    Examples:
        ``replace_string("Hello :name!", {":name": "John"})`` returns ``"Hello John!"``.

        ``replace_string("TEST test", {"test": "done"}, ignore_case=False)``
        returns ``"TEST done"``.

        ``replace_string("1 + 1 = 2", {"+": "plus"})`` returns ``"1 plus 1 = 2"``.
    """
    if not isinstance(text, str):
        raise InvalidArgumentTypeError("text", "a string", text)
    if not isinstance(replacements, Mapping):
        raise InvalidArgumentTypeError("replacements", "a mapping", replacements)

    if not text or not replacements:
        return text

    opts = resolve_options(ReplaceOptions, options, overrides)
    # An empty key would match between every character; it replaces nothing.
    values = {
        str(key): _to_text(value) for key, value in replacements.items() if str(key)
    }
    if not values:
        return text

    pattern = "|".join(re.escape(key) if opts.escape_regex else key for key in values)
    flags = re.IGNORECASE if opts.ignore_case else 0
    try:
        regex = re.compile(pattern, flags)
    except re.error as e:
        logger.debug("Could not compile replacement pattern %r: %s", pattern, e)
        raise PatternSyntaxError(pattern, str(e)) from e

    def substitute(match: re.Match[str]) -> str:
        matched = match.group()
        if opts.ignore_case:
            folded = matched.lower()
            key = next((k for k in values if k.lower() == folded), None)
        else:
            key = matched if matched in values else None
        return values[key] if key is not None else matched

    return regex.sub(substitute, text, count=0 if opts.replace_all else 1)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

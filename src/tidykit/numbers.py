"""Number extraction from free text."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from tidykit.errors import InvalidArgumentTypeError
from tidykit.options import ExtractNumberOptions, resolve_options

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"-?\d+", re.ASCII)
_FLOAT_PREFIX = re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)


def extract_number(
    text: str,
    options: ExtractNumberOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> int | float:
    """Extract a number from free text.

    Every digit run in ``text`` is collected and the runs are concatenated
    before parsing, so ``"Price is $123.45"`` yields ``12345``. The runs are
    joined, not summed and not returned as a list.

    Args:
        text: The text to extract digits from.
        options: An `ExtractNumberOptions`, a mapping of its fields, or None.
        **overrides: Individual option fields, e.g. ``allow_decimals=True``.

    Returns:
        An int, or a float when ``allow_decimals`` is set. ``default_value``
        when ``text`` is blank or holds no digits.

    Raises:
        InvalidArgumentTypeError: If ``text`` is not a string (a `TypeError`).

    Examples:
        ``extract_number("Price is $123.45")`` returns ``12345``.
        ``extract_number("Price is $123.45", allow_decimals=True)`` returns ``123.45``.
        ``extract_number("Temperature is -5°C", allow_negative=True)`` returns ``-5``.
        ``extract_number("No numbers here", default_value=-1)`` returns ``-1``.
    """
    if not isinstance(text, str):
        raise InvalidArgumentTypeError("text", "a string", text)

    opts = resolve_options(ExtractNumberOptions, options, overrides)

    if not text.strip():
        return opts.default_value

    pattern = "".join(
        [
            "-?" if opts.allow_negative else "",
            r"\d+",
            r"(?:\.\d+)?" if opts.allow_decimals else "",
        ]
    )
    joined = "".join(re.findall(pattern, text, re.ASCII))

    # Only the leading numeric part of the joined text is parsed ("-5-3" -> -5).
    prefix = (_FLOAT_PREFIX if opts.allow_decimals else _INT_PREFIX).match(joined)
    if prefix is None:
        logger.debug("No number in %r; using default %r", text, opts.default_value)
        return opts.default_value
    if opts.allow_decimals:
        return float(prefix.group())
    return int(prefix.group(), 10)

"""URL slug generation."""

import re

_NON_WORD = re.compile(r"[^\w ]+", re.ASCII)
_SPACES = re.compile(r" +")


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-joined slug.

    Characters other than ASCII letters, digits, underscores and spaces are
    dropped, then each run of spaces becomes a single hyphen. Hyphens left at
    the ends (e.g. from ``"!hi "``) are kept as-is.

    Args:
        text: Text to convert.

    Returns:
        The slug, possibly empty.

    Example:
        ``slugify("Hello World")`` returns ``"hello-world"``.
    """
    return _SPACES.sub("-", _NON_WORD.sub("", text.lower()))

"""CLI helpers for tidykit.

Option parsers for ``NAME=VALUE`` style arguments and a stderr warning
emitter with an emoji→ASCII fallback.
"""

from .messages import warn
from .pairs import parse_log_level, parse_replacements

__all__ = ["parse_log_level", "parse_replacements", "warn"]

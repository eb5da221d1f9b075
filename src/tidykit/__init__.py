"""TIDYKIT

Small, stateless helpers for reshaping strings and nested data: URL slugs,
dot-path lookups with fan-out over lists, number extraction from free text,
empty-value normalization and multi-key string substitution.
"""

from tidykit.empty import transform_empty_values
from tidykit.numbers import extract_number
from tidykit.options import EmptyValueOptions, ExtractNumberOptions, ReplaceOptions
from tidykit.paths import NOT_FOUND, resolve_object_path
from tidykit.replace import replace_string
from tidykit.slug import slugify

__all__ = [
    "__version__",
    "NOT_FOUND",
    "EmptyValueOptions",
    "ExtractNumberOptions",
    "ReplaceOptions",
    "extract_number",
    "replace_string",
    "resolve_object_path",
    "slugify",
    "transform_empty_values",
]
__version__ = "0.1.0"

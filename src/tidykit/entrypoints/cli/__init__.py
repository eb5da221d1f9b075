"""The ``tidykit`` command-line interface."""

from .main import tidykit

__all__ = ["tidykit"]

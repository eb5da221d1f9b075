"""Global pytest fixtures for tidykit."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by CLI runs so tests don't leak logging state."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

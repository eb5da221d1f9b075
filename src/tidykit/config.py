"""Configuration constants and input helpers for the tidykit CLI."""

import json
from pathlib import Path
from typing import Any, TextIO

from platformdirs import user_log_dir

from tidykit.errors import InvalidDocumentError

APP_NAME = "tidykit"
ENV_PREFIX = "TIDYKIT"

LOG_PATH_ENVVAR = f"{ENV_PREFIX}_LOG_PATH"
LOGGER_LEVELS_ENVVAR = f"{ENV_PREFIX}_LOGGER_LEVELS"

FLIGHT_RECORDER_CAPACITY = 2000

# Baseline per-logger levels; -L/--logger-level items are merged on top.
DEFAULT_LOGGER_LEVELS: dict[str, int] = {}


def default_log_path() -> Path:
    """Return the default flight-recorder file, creating its directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"


def load_json_document(stream: TextIO) -> Any:
    """Parse a JSON document from an open text stream.

    Args:
        stream: Text stream to read, e.g. a file opened by click or stdin.

    Returns:
        The decoded document.

    Raises:
        InvalidDocumentError: If the stream does not hold valid JSON or its
            bytes are not valid in the stream's encoding.
    """
    source = getattr(stream, "name", "<stream>")
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise InvalidDocumentError(str(source), e.msg) from e
    except UnicodeDecodeError as e:
        raise InvalidDocumentError(str(source), f"{e.encoding} decode error: {e.reason}") from e

"""Click callbacks for ``NAME=VALUE`` style options.

``-L/--logger-level`` takes ``NAME=LEVEL`` items, repeatable or as one
comma/space-separated string (e.g. from ``TIDYKIT_LOGGER_LEVELS``).
``-r/--replace`` takes ``KEY=VALUE`` items, repeatable only, since keys and
values may themselves hold commas and spaces.
"""

import logging
import re

import click

from tidykit.config import DEFAULT_LOGGER_LEVELS


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten a Click option value into non-empty comma/space-separated items."""
    if not value:
        return []
    raw = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in raw:
        items.extend(s for s in re.split(r"[,\s]+", v) if s)
    return items


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a logger-name -> numeric-level dict.

    Later items win over earlier ones for the same logger name. Level names
    are case-insensitive.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        if not isinstance(lvl := getattr(logging, level_str.strip().upper(), None), int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels


def parse_replacements(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...] | list[str] | None,
) -> dict[str, str]:
    """Parse KEY=VALUE items into an ordered replacement map.

    The item is split on the first ``=``, so values may contain ``=``. The
    value may be empty; the key may not.

    Raises:
        click.BadParameter: If an item has no ``=`` or an empty key.
    """
    replacements: dict[str, str] = {}
    for item in value or ():
        key, sep, replacement = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        replacements[key] = replacement
    return replacements

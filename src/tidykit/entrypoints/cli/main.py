"""tidykit CLI entry point.

Defines the top-level ``tidykit`` command (via Click-Extra), configures
logging for the run, and registers one subcommand per helper.

Examples
    $ tidykit slugify "Hello World"
    $ echo '{"user": {"name": "John"}}' | tidykit resolve user.name
    $ tidykit -v replace "Hello :name!" -r :name=John
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from tidykit import __version__, config
from tidykit.logging import (
    config_console_handler,
    config_flight_recorder,
    effective_level,
    log_startup,
)

from .commands import (
    extract_number_cmd,
    replace_cmd,
    resolve_cmd,
    slugify_cmd,
    transform_empty_cmd,
)
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """tidykit command-line interface.

    Reshape strings and JSON documents from the shell: build URL slugs, look up
    dot-paths, pull numbers out of text, normalize empty values and substitute
    several keys at once. Results go to stdout; messages and logs to stderr.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Lower the default WARNING threshold by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Raise the default WARNING threshold by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Flight recorder output file (defaults to the user log directory).",
    default=None,
    envvar=config.LOG_PATH_ENVVAR,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING/ERROR occurs."
    ),
    default=False,
    show_default=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=config.LOGGER_LEVELS_ENVVAR,
    help=(
        "Set the minimum LEVEL for a specific logger (NAME=LEVEL). Repeatable "
        "(e.g. -L tidykit.replace=DEBUG) or via TIDYKIT_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    show_envvar=True,
)
@clickx.pass_context
def tidykit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """tidykit command-line interface."""

    level = effective_level(verbose_count, quiet_count)
    handlers: list[Handler] = []

    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    if flight_recorder:
        log_path = log_path or config.default_log_path()
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=config.FLIGHT_RECORDER_CAPACITY,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


tidykit.add_command(slugify_cmd)
tidykit.add_command(resolve_cmd)
tidykit.add_command(extract_number_cmd)
tidykit.add_command(transform_empty_cmd)
tidykit.add_command(replace_cmd)

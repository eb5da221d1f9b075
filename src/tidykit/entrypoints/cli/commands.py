"""Subcommands wrapping the tidykit helpers.

Each command parses its arguments, calls exactly one helper and prints the
result to stdout. Library errors are turned into ``ClickException`` so the
user sees a message and a non-zero exit code instead of a traceback.
"""

import json
import logging
from typing import Any, TextIO

import click

from tidykit import config
from tidykit.empty import transform_empty_values
from tidykit.errors import (
    InvalidArgumentTypeError,
    InvalidDocumentError,
    PatternSyntaxError,
)
from tidykit.numbers import extract_number
from tidykit.paths import NOT_FOUND, resolve_object_path
from tidykit.replace import replace_string
from tidykit.slug import slugify

from .helpers import parse_replacements, warn

logger = logging.getLogger(__name__)

INPUT_HELP = "JSON document to read ('-' for stdin)."


def _read_document(stream: TextIO) -> Any:
    try:
        return config.load_json_document(stream)
    except InvalidDocumentError as e:
        raise click.ClickException(str(e)) from e


def _echo_json(value: Any) -> None:
    click.echo(json.dumps(value, ensure_ascii=False))


def _parse_json_option(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | None,
) -> Any:
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Expected a JSON value, got {value!r}") from e


def _parse_number_option(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str,
) -> int | float:
    try:
        return int(value)
    except ValueError:
        try:
            return float(value)
        except ValueError as e:
            raise click.BadParameter(f"Expected a number, got {value!r}") from e


@click.command("slugify")
@click.argument("words", nargs=-1, required=True)
def slugify_cmd(words: tuple[str, ...]) -> None:
    """Print WORDS (joined by spaces) as a URL slug."""
    click.echo(slugify(" ".join(words)))


@click.command("resolve")
@click.argument("path")
@click.option(
    "--input",
    "-i",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help=INPUT_HELP,
)
@click.pass_context
def resolve_cmd(ctx: click.Context, path: str, source: TextIO) -> None:
    """Print the JSON value(s) found at dot-notation PATH.

    Lists met along the path are fanned out, so ``users.name`` over a list of
    users prints a list of names. Exits with status 1 when nothing is found.
    """
    document = _read_document(source)
    result = resolve_object_path(document, path, default=NOT_FOUND)
    if result is NOT_FOUND:
        logger.debug("Path %r matched nothing", path)
        warn(f"Path '{path}' not found.")
        ctx.exit(1)
    _echo_json(result)


@click.command("extract-number")
@click.argument("text")
@click.option("--decimals/--no-decimals", default=False, help="Accept a fractional part.")
@click.option("--negative/--no-negative", default=False, help="Accept a leading minus sign.")
@click.option(
    "--default",
    "default_value",
    default="0",
    callback=_parse_number_option,
    show_default=True,
    help="Value printed when TEXT holds no number.",
)
def extract_number_cmd(
    text: str, decimals: bool, negative: bool, default_value: int | float
) -> None:
    """Print the number formed by the digits in TEXT."""
    click.echo(
        extract_number(
            text,
            allow_decimals=decimals,
            allow_negative=negative,
            default_value=default_value,
        )
    )


@click.command("transform-empty")
@click.option(
    "--input",
    "-i",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help=INPUT_HELP,
)
@click.option(
    "--replace-with",
    callback=_parse_json_option,
    help="JSON value substituted for empty values (default: null).",
)
@click.option(
    "--trim/--no-trim",
    default=True,
    show_default=True,
    help="Treat whitespace-only strings as empty.",
)
@click.option(
    "--empty-arrays/--no-empty-arrays",
    default=False,
    show_default=True,
    help="Treat empty lists as empty.",
)
def transform_empty_cmd(
    source: TextIO, replace_with: Any, trim: bool, empty_arrays: bool
) -> None:
    """Print the JSON document with empty values replaced."""
    document = _read_document(source)
    try:
        result = transform_empty_values(
            document,
            replace_with=replace_with,
            trim_strings=trim,
            process_empty_arrays=empty_arrays,
        )
    except InvalidArgumentTypeError as e:
        raise click.ClickException("The document must be a JSON object or array.") from e
    _echo_json(result)


@click.command("replace")
@click.argument("text")
@click.option(
    "--replace",
    "-r",
    "replacements",
    multiple=True,
    callback=parse_replacements,
    help="KEY=VALUE substitution. Repeatable.",
)
@click.option("--case-sensitive", is_flag=True, default=False, help="Match keys exactly.")
@click.option("--first-only", is_flag=True, default=False, help="Replace only the first match.")
@click.option(
    "--raw-patterns",
    is_flag=True,
    default=False,
    help="Use keys as regular expressions instead of literal text.",
)
def replace_cmd(  # pylint: disable=too-many-arguments
    text: str,
    replacements: dict[str, str],
    case_sensitive: bool,
    first_only: bool,
    raw_patterns: bool,
) -> None:
    """Print TEXT with every KEY replaced by its VALUE."""
    try:
        result = replace_string(
            text,
            replacements,
            ignore_case=not case_sensitive,
            replace_all=not first_only,
            escape_regex=not raw_patterns,
        )
    except PatternSyntaxError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result)

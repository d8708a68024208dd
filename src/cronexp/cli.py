"""Command-line interface for cronexp."""

import logging
from typing import Annotated, Optional

import typer

from cronexp.common import OutputFormatEnum
from cronexp.errors import CronexpError
from cronexp.expression import CronParser
from cronexp.formatting import render
from cronexp.logging import configure_logging
from cronexp.settings import CronexpSettings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cronexp",
    help="Expand a cron line into the explicit values of each time field",
    add_completion=False,
)


def _fail(message: str) -> typer.Exit:
    typer.echo(f"error - {message}", err=True)
    return typer.Exit(code=1)


@app.command()
def main(
    arguments: Annotated[
        Optional[list[str]],
        typer.Argument(
            help='Cron line to expand, quoted, e.g. "*/15 0 1,15 * 1-5 /usr/bin/find". '
            "Only the first argument is parsed.",
            metavar="EXPRESSION",
            show_default=False,
        ),
    ] = None,
    output_format: Annotated[
        Optional[OutputFormatEnum],
        typer.Option("--format", "-f", help="Output format (defaults to CRONEXP_OUTPUT_FORMAT or table)"),
    ] = None,
    strict: Annotated[
        Optional[bool],
        typer.Option("--strict/--no-strict", help="Reject list items of unrecognized shape"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level name (defaults to CRONEXP_LOG_LEVEL or WARNING)"),
    ] = None,
) -> None:
    """Parse a cron line and print the values of each field and the command."""
    try:
        settings = CronexpSettings.load()
    except CronexpError as exc:
        raise _fail(str(exc)) from exc

    if output_format is not None:
        settings.update(output_format=output_format)
    if strict is not None:
        settings.update(strict_items=strict)
    if log_level is not None:
        settings.update(log_level=log_level)

    try:
        configure_logging(settings.log_level)
    except ValueError as exc:
        raise _fail(str(exc)) from exc

    if not arguments:
        raise _fail("invalid input")
    expression = arguments[0]

    try:
        cron = CronParser(settings).parse(expression)
    except CronexpError as exc:
        logger.debug("Failed to parse %r", expression, exc_info=True)
        raise _fail(str(exc)) from exc

    typer.echo(render(cron, settings.output_format).rstrip("\n"))

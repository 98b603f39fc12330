"""List calendar events in ledger format."""

import asyncio
import logging

import typer
from typing_extensions import Annotated

from caledger.exceptions import CaledgerError
from caledger.models.settings import CliFlags, TriState
from caledger.processing.effective import resolve_effective
from caledger.processing.list_pipeline import run_list
from cli.context import CLIContext
from cli.utils import exit_with_error

logger = logging.getLogger(__name__)


def ls(
    ctx: typer.Context,
    calendar: Annotated[
        list[str] | None,
        typer.Option(
            "--calendar",
            "-c",
            help="Calendar name to read from (repeatable, default: all calendars)",
        ),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option(
            "--start", "-s", help="Start date (YYYY-MM-DD or relative: -1Y, -3M2W, +10D)"
        ),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option(
            "--end", "-e", help="End date (YYYY-MM-DD or relative: +1Y, +2W, +1h30m)"
        ),
    ] = None,
    title_filter: Annotated[
        str | None,
        typer.Option(
            "--filter", "-f", help="Filter events by title (case-insensitive contains)"
        ),
    ] = None,
    notes: Annotated[
        bool | None,
        typer.Option("--notes/--no-notes", "-n", help="Append event notes to the title"),
    ] = None,
    tag: Annotated[
        bool | None,
        typer.Option("--tag/--no-tag", "-t", help="Tag output with calendar name"),
    ] = None,
    use_map: Annotated[
        bool | None,
        typer.Option("--map/--nomap", help="Apply title mappings from settings"),
    ] = None,
    day_break: Annotated[
        bool | None,
        typer.Option("--break/--no-break", "-b", help="Add date headers between days"),
    ] = None,
) -> None:
    """List calendar events.

    Command line options override values from settings files.

    Output format:
        i YYYY-MM-DD HH:MM:SS title    notes
        ; :CalendarName:
        o YYYY-MM-DD HH:MM:SS
    """
    context: CLIContext = ctx.obj

    flags = CliFlags(
        calendar_names=tuple(calendar or ()),
        start_expr=start,
        end_expr=end,
        title_filter=title_filter,
        notes=TriState.from_bool(notes),
        tag=TriState.from_bool(tag),
        map=TriState.from_bool(use_map),
        day_break=TriState.from_bool(day_break),
    )
    settings = resolve_effective(flags, context.settings)
    logger.info(
        f"Listing events between {settings.start:%Y-%m-%d %H:%M} "
        f"and {settings.end:%Y-%m-%d %H:%M}"
    )

    try:
        lines = asyncio.run(run_list(context.event_source, settings))
    except CaledgerError as e:
        exit_with_error(e)

    for line in lines:
        typer.echo(line)

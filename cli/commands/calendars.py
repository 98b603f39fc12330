"""List available calendars."""

import asyncio

import typer

from caledger.exceptions import CaledgerError, CalendarAccessDeniedError
from cli.context import CLIContext
from cli.utils import exit_with_error


def calendars(ctx: typer.Context) -> None:
    """List the names of all available calendars."""
    context: CLIContext = ctx.obj
    source = context.event_source

    try:
        if not asyncio.run(source.request_access()):
            raise CalendarAccessDeniedError(
                f"Calendar access denied. Make sure {source.calendar_dir} exists and is readable."
            )
        names = source.calendars()
    except CaledgerError as e:
        exit_with_error(e)

    if not names:
        typer.echo(f"No calendars found in {source.calendar_dir}")
        return

    for name in names:
        typer.echo(name)

"""CLI utilities for reporting errors."""

import logging
from typing import NoReturn

import typer

from caledger.exceptions import CaledgerError, CalendarNotFoundError

logger = logging.getLogger(__name__)


def exit_with_error(error: CaledgerError) -> NoReturn:
    """Report a caledger error on stderr and exit with status 1."""
    logger.debug(f"Exiting on {type(error).__name__}: {error}")
    typer.echo(str(error), err=True)

    if isinstance(error, CalendarNotFoundError):
        typer.echo("Available calendars:", err=True)
        for name in error.available:
            typer.echo(f"  - {name}", err=True)

    raise typer.Exit(1)

"""Manage title mappings in settings files."""

from pathlib import Path

import typer
from typing_extensions import Annotated

from caledger.exceptions import CaledgerError
from caledger.storage.settings_file import (
    add_mapping,
    remove_mapping,
    settings_file_for_edit,
)
from cli.context import CLIContext
from cli.utils import exit_with_error

map_app = typer.Typer(help="Manage title mappings")


def _target_file(context: CLIContext, file: Path | None) -> Path:
    if file is not None:
        return file
    return settings_file_for_edit(
        context.cwd, context.config.settings_filename, context.config.home_settings_path
    )


@map_app.callback(invoke_without_command=True)
def map_callback(ctx: typer.Context) -> None:
    """Manage title mappings (lists mappings when no subcommand is given)."""
    if ctx.invoked_subcommand is None:
        map_ls(ctx)


@map_app.command("ls")
def map_ls(
    ctx: typer.Context,
    mapping_filter: Annotated[
        str | None,
        typer.Option(
            "--filter", "-f", help="Filter mappings by key or value (case-insensitive)"
        ),
    ] = None,
) -> None:
    """List all title mappings."""
    context: CLIContext = ctx.obj
    settings = context.settings

    if not settings.title_mappings:
        typer.echo("No mappings defined")
        return

    mappings = sorted(settings.title_mappings.items())
    if mapping_filter:
        folded = mapping_filter.casefold()
        mappings = [
            (key, value)
            for key, value in mappings
            if folded in key.casefold() or folded in value.casefold()
        ]

    if not mappings:
        typer.echo(f"No mappings match '{mapping_filter}'")
        return

    for key, value in mappings:
        typer.echo(f"{key} = {value}")

    if settings.duplicate_keys:
        keys = ", ".join(sorted(settings.duplicate_keys))
        typer.echo(f"### Duplicate mappings found (last value used): {keys}")


@map_app.command("add")
def map_add(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Event title to match")],
    value: Annotated[str, typer.Argument(help="Replacement value")],
    file: Annotated[
        Path | None,
        typer.Option("--file", help="Settings file to edit (default: nearest)"),
    ] = None,
) -> None:
    """Add or update a title mapping."""
    path = _target_file(ctx.obj, file)
    try:
        updated = add_mapping(path, key, value)
    except OSError as e:
        typer.echo(f"Could not write {path}: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"{'Updated' if updated else 'Added'}: {key} = {value}")


@map_app.command("rm")
def map_rm(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Event title mapping to remove")],
    file: Annotated[
        Path | None,
        typer.Option("--file", help="Settings file to edit (default: nearest)"),
    ] = None,
) -> None:
    """Remove a title mapping."""
    path = _target_file(ctx.obj, file)
    try:
        remove_mapping(path, key)
    except CaledgerError as e:
        exit_with_error(e)
    except OSError as e:
        typer.echo(f"Could not write {path}: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Removed: {key}")

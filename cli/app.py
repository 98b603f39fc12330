"""Typer application and command routing."""

import typer
from typing_extensions import Annotated

from caledger.config import CaledgerConfig
from caledger.models.settings import MergePolicy
from cli import setup_logging
from cli.commands import calendars, config, ls, map_app
from cli.context import CLIContext

app = typer.Typer(
    help="Read calendar events and print them in ledger time-clock format.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show informational log messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
    merge: Annotated[
        MergePolicy | None,
        typer.Option(
            "--merge",
            help="How settings files along the directory chain are combined",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """List calendar events (runs ``ls`` when no command is given)."""
    cfg = CaledgerConfig.from_env()
    setup_logging(verbose=verbose, quiet=quiet, config=cfg)
    ctx.obj = CLIContext(cfg, merge_policy=merge)

    if ctx.invoked_subcommand is None:
        ls(ctx)


app.command("ls")(ls)
app.command("calendars")(calendars)
app.command("config")(config)
app.add_typer(map_app, name="map")

"""Shared Rich console instance for informational output.

Event listings are written with plain ``typer.echo`` so the ledger format is
never touched by Rich markup or wrapping.
"""

from rich.console import Console

console = Console()

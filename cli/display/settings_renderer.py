"""Renderer for the settings chain and effective settings."""

from dataclasses import dataclass
from pathlib import Path

from rich.table import Table

from cli.display.console import console


@dataclass
class SettingRow:
    """One effective setting for display."""

    name: str
    value: str
    source: str


class SettingsRenderer:
    """Render settings chain information with Rich."""

    def _create_table(self, setting_width: int, source_width: int) -> Table:
        """Create a styled table with fixed column widths."""
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("SETTING", style="cyan", min_width=setting_width, no_wrap=True)
        table.add_column("SOURCE", style="dim", min_width=source_width, no_wrap=True)
        table.add_column("VALUE")
        return table

    def render(
        self,
        files: list[Path],
        used: list[Path],
        policy: str,
        rows: list[SettingRow],
        mapping_count: int,
    ) -> None:
        """Render settings files, merge policy and effective settings.

        Args:
            files: Discovered settings files, near-to-far.
            used: Files actually read under the merge policy.
            policy: Merge policy name.
            rows: Effective settings rows.
            mapping_count: Number of merged title mappings.
        """
        console.print()
        console.print("━" * 50)
        console.print("[bold]  Configuration[/bold]")
        console.print("━" * 50)

        console.print("\n[bold]Settings Files:[/bold]")
        if files:
            for path in files:
                marker = "" if path in used else " [dim](ignored)[/dim]"
                console.print(f"  [cyan]{path}[/cyan]{marker}")
        else:
            console.print("  [dim]Not found (using defaults)[/dim]")

        console.print(f"\n[bold]Merge Policy:[/bold] {policy}")

        setting_width = max([len("SETTING")] + [len(row.name) for row in rows])
        source_width = max([len("SOURCE")] + [len(row.source) for row in rows])

        console.print("\n[bold]Effective Settings:[/bold]")
        table = self._create_table(setting_width, source_width)
        for row in rows:
            table.add_row(row.name, row.source, row.value)
        console.print(table)

        console.print(f"\n[bold]Title Mappings:[/bold] {mapping_count}")
        console.print()

"""Display the settings chain and effective settings."""

import typer

from caledger.models.settings import CliFlags, MergePolicy, SettingsRecord
from caledger.processing.effective import resolve_effective
from cli.context import CLIContext
from cli.display.settings_renderer import SettingRow, SettingsRenderer


def _get_source(merged: SettingsRecord, field: str) -> str:
    """Determine whether a setting came from a settings file."""
    value = getattr(merged, field)
    if field == "calendar_names":
        present = bool(value)
    elif hasattr(value, "is_set"):
        present = value.is_set
    else:
        present = value is not None
    return "config" if present else "default"


def config(ctx: typer.Context) -> None:
    """Display settings files and the settings they produce."""
    context: CLIContext = ctx.obj
    merged = context.settings
    effective = resolve_effective(CliFlags(), merged)

    files = context.settings_files
    used = files[:1] if context.merge_policy is MergePolicy.CLOSEST else files

    def on_off(value: bool) -> str:
        return "on" if value else "off"

    rows = [
        SettingRow(
            "calendar",
            ", ".join(effective.calendar_names) or "[dim]all[/dim]",
            _get_source(merged, "calendar_names"),
        ),
        SettingRow(
            "start",
            f"{effective.start:%Y-%m-%d %H:%M}"
            + (f" ({merged.start_expr})" if merged.start_expr else ""),
            _get_source(merged, "start_expr"),
        ),
        SettingRow(
            "end",
            f"{effective.end:%Y-%m-%d %H:%M}"
            + (f" ({merged.end_expr})" if merged.end_expr else ""),
            _get_source(merged, "end_expr"),
        ),
        SettingRow(
            "filter",
            effective.title_filter or "[dim]None[/dim]",
            _get_source(merged, "title_filter"),
        ),
        SettingRow("notes", on_off(effective.notes), _get_source(merged, "notes")),
        SettingRow("tag", on_off(effective.tag), _get_source(merged, "tag")),
        SettingRow("map", on_off(effective.map), _get_source(merged, "map")),
        SettingRow("break", on_off(effective.day_break), _get_source(merged, "day_break")),
    ]

    SettingsRenderer().render(
        files,
        used,
        context.merge_policy.value,
        rows,
        len(merged.title_mappings),
    )

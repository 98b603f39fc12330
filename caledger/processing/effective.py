"""Resolve effective settings from CLI flags and merged configuration."""

import logging
from datetime import datetime

from caledger import temporal
from caledger.models.settings import CliFlags, EffectiveSettings, SettingsRecord

logger = logging.getLogger(__name__)

# Built-in defaults for boolean options
DEFAULT_NOTES = False
DEFAULT_TAG = False
DEFAULT_MAP = True
DEFAULT_DAY_BREAK = False


def _resolve_endpoint(
    field: str, token: str | None, now: datetime, default: datetime
) -> datetime:
    if token is None:
        return default
    resolved = temporal.resolve(token, now)
    if resolved is None:
        logger.warning(
            f"Could not parse {field} date '{token}', using {default:%Y-%m-%d %H:%M}"
        )
        return default
    return resolved


def resolve_effective(
    flags: CliFlags,
    merged: SettingsRecord,
    now: datetime | None = None,
) -> EffectiveSettings:
    """Combine CLI flags with merged settings.

    For every field an explicit CLI value wins, then the merged settings
    value, then the built-in default. An empty CLI calendar list counts as
    not supplied.

    Args:
        flags: Values given on the command line.
        merged: Settings merged from the settings chain.
        now: Reference instant for relative dates and the default range.

    Returns:
        Fully resolved settings.
    """
    if now is None:
        now = datetime.now()
    default_start, default_end = temporal.default_range(now)

    start_token = flags.start_expr if flags.start_expr is not None else merged.start_expr
    end_token = flags.end_expr if flags.end_expr is not None else merged.end_expr

    def flag(name: str, default: bool) -> bool:
        cli_value = getattr(flags, name)
        if cli_value.is_set:
            return cli_value.resolve(default)
        return getattr(merged, name).resolve(default)

    return EffectiveSettings(
        calendar_names=flags.calendar_names or merged.calendar_names,
        start=_resolve_endpoint("start", start_token, now, default_start),
        end=_resolve_endpoint("end", end_token, now, default_end),
        title_filter=(
            flags.title_filter if flags.title_filter is not None else merged.title_filter
        ),
        notes=flag("notes", DEFAULT_NOTES),
        tag=flag("tag", DEFAULT_TAG),
        map=flag("map", DEFAULT_MAP),
        day_break=flag("day_break", DEFAULT_DAY_BREAK),
        title_mappings=dict(merged.title_mappings),
    )

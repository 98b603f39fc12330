"""CLI commands package."""

from cli.commands.calendars import calendars
from cli.commands.config import config
from cli.commands.ls import ls
from cli.commands.map import map_app

__all__ = [
    "calendars",
    "config",
    "ls",
    "map_app",
]

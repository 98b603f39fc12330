"""Display module for rendering informational output.

- console: Shared Rich console instance
- SettingsRenderer: Settings chain and effective settings display
"""

from cli.display.console import console
from cli.display.settings_renderer import SettingRow, SettingsRenderer

__all__ = [
    "console",
    "SettingRow",
    "SettingsRenderer",
]

"""CLI context with lazy-initialized dependencies."""

from pathlib import Path

from caledger.config import CaledgerConfig
from caledger.models.settings import MergePolicy, SettingsRecord
from caledger.processing.settings_chain import discover_settings_files, resolve_chain
from caledger.sources.ics_source import ICSEventSource


class CLIContext:
    """Dependencies shared by CLI commands for one invocation.

    Created once by the app callback and handed to commands through
    ``typer.Context.obj``.

    Usage:
        context: CLIContext = ctx.obj
        events = context.event_source.fetch_events(...)
    """

    def __init__(
        self,
        config: CaledgerConfig,
        merge_policy: MergePolicy | None = None,
        cwd: Path | None = None,
    ):
        """Initialize CLI context.

        Args:
            config: Application configuration
            merge_policy: Settings chain merge policy (default: from config)
            cwd: Directory the settings chain starts from (default: cwd)
        """
        self.config = config
        self.merge_policy = merge_policy or config.merge_policy
        self.cwd = cwd or Path.cwd()

        # Lazy-loaded dependencies
        self._settings: SettingsRecord | None = None
        self._event_source: ICSEventSource | None = None

    @property
    def settings_files(self) -> list[Path]:
        """Settings files found for the working directory, near-to-far."""
        return discover_settings_files(
            self.cwd, self.config.settings_filename, self.config.home_settings_path
        )

    @property
    def settings(self) -> SettingsRecord:
        """Merged settings chain (lazy-loaded)."""
        if self._settings is None:
            self._settings = resolve_chain(
                self.cwd,
                self.merge_policy,
                self.config.settings_filename,
                self.config.home_settings_path,
            )
        return self._settings

    @property
    def event_source(self) -> ICSEventSource:
        """Event source (lazy-loaded)."""
        if self._event_source is None:
            self._event_source = ICSEventSource(self.config.calendar_dir)
        return self._event_source

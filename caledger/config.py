"""Application configuration for caledger."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from caledger.constants import SETTINGS_FILENAME
from caledger.models.settings import MergePolicy


class CaledgerConfig(BaseModel):
    """Caledger configuration with Pydantic validation.

    These are process-level settings (where calendars live, where logs go,
    how the settings chain is merged). The per-directory ``.caledger`` files
    that drive event listing are handled by the settings chain resolver.
    """

    # Settings chain
    settings_filename: str = Field(default=SETTINGS_FILENAME)
    home_settings_path: Path = Field(
        default_factory=lambda: Path.home() / SETTINGS_FILENAME
    )
    merge_policy: MergePolicy = Field(default=MergePolicy.CLOSEST)

    # Event source
    calendar_dir: Path = Field(default_factory=lambda: Path.home() / "Calendars")

    # Logging
    log_dir: Path = Field(default_factory=lambda: Path.home() / ".caledger.d" / "logs")
    log_filename: str = Field(default="caledger.log")

    @classmethod
    def from_env(cls) -> "CaledgerConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Settings chain
        if "CALEDGER_SETTINGS_FILENAME" in os.environ:
            config_dict["settings_filename"] = os.environ["CALEDGER_SETTINGS_FILENAME"]
        if "CALEDGER_HOME_SETTINGS" in os.environ:
            config_dict["home_settings_path"] = Path(
                os.environ["CALEDGER_HOME_SETTINGS"]
            ).expanduser()
        if "CALEDGER_MERGE_POLICY" in os.environ:
            try:
                config_dict["merge_policy"] = MergePolicy(
                    os.environ["CALEDGER_MERGE_POLICY"].strip().lower()
                )
            except ValueError:
                pass  # Keep default if invalid

        # Event source
        if "CALEDGER_CALENDAR_DIR" in os.environ:
            config_dict["calendar_dir"] = Path(
                os.environ["CALEDGER_CALENDAR_DIR"]
            ).expanduser()

        # Logging
        if "CALEDGER_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["CALEDGER_LOG_DIR"]).expanduser()
        if "CALEDGER_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["CALEDGER_LOG_FILENAME"]

        return cls(**config_dict)

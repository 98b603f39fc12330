"""Settings models: parsed settings files, CLI flags and effective settings."""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TriState(str, Enum):
    """Three-valued boolean: a flag can be unset, on or off."""

    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_bool(cls, value: bool | None) -> "TriState":
        """Convert an optional bool (None meaning "not given")."""
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE

    @property
    def is_set(self) -> bool:
        return self is not TriState.UNSET

    def resolve(self, default: bool) -> bool:
        """Return the flag value, or ``default`` when unset."""
        if self is TriState.UNSET:
            return default
        return self is TriState.TRUE


class MergePolicy(str, Enum):
    """How settings files found along the directory chain are combined.

    CLOSEST uses only the nearest file. PARENT and LOCAL fold every file in
    the chain; on conflicts the farther (parent) or nearer (local) file wins.
    """

    CLOSEST = "closest"
    PARENT = "parent"
    LOCAL = "local"


class SettingsRecord(BaseModel):
    """Parsed contents of one settings file (or a merge of several).

    Optional fields left as None / TriState.UNSET were not specified and
    never override a specified value during a merge. title_mappings is a
    read-only view.
    """

    model_config = ConfigDict(frozen=True)

    calendar_names: tuple[str, ...] = ()
    start_expr: str | None = None
    end_expr: str | None = None
    title_filter: str | None = None
    notes: TriState = TriState.UNSET
    tag: TriState = TriState.UNSET
    map: TriState = TriState.UNSET
    day_break: TriState = TriState.UNSET
    title_mappings: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True
    )
    duplicate_keys: frozenset[str] = frozenset()

    @field_validator("title_mappings")
    @classmethod
    def freeze_mappings(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


class CliFlags(BaseModel):
    """Raw values supplied on the command line."""

    model_config = ConfigDict(frozen=True)

    calendar_names: tuple[str, ...] = ()
    start_expr: str | None = None
    end_expr: str | None = None
    title_filter: str | None = None
    notes: TriState = TriState.UNSET
    tag: TriState = TriState.UNSET
    map: TriState = TriState.UNSET
    day_break: TriState = TriState.UNSET


class EffectiveSettings(BaseModel):
    """Fully resolved settings for one invocation (title_mappings is read-only)."""

    model_config = ConfigDict(frozen=True)

    calendar_names: tuple[str, ...]
    start: datetime
    end: datetime
    title_filter: str | None
    notes: bool
    tag: bool
    map: bool
    day_break: bool
    title_mappings: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("title_mappings")
    @classmethod
    def freeze_mappings(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

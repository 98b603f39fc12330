"""Pydantic models for caledger."""

from caledger.models.event import EventRecord
from caledger.models.settings import (
    CliFlags,
    EffectiveSettings,
    MergePolicy,
    SettingsRecord,
    TriState,
)

__all__ = [
    "EventRecord",
    "CliFlags",
    "EffectiveSettings",
    "MergePolicy",
    "SettingsRecord",
    "TriState",
]

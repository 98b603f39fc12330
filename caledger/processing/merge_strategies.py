"""Merge strategies for combining settings records from a settings chain."""

from functools import reduce

from caledger.models.settings import MergePolicy, SettingsRecord, TriState

_OPTIONAL_FIELDS = ("start_expr", "end_expr", "title_filter")
_FLAG_FIELDS = ("notes", "tag", "map", "day_break")


def _override(winner: SettingsRecord, loser: SettingsRecord) -> SettingsRecord:
    """Combine two records; present values in ``winner`` take precedence.

    Absent values (None, TriState.UNSET, an empty calendar list) never
    override present ones. Mappings merge key by key; duplicate keys are
    unioned.
    """
    fields: dict = {}

    # Calendar lists are replaced wholesale, not merged element-wise
    fields["calendar_names"] = winner.calendar_names or loser.calendar_names

    for name in _OPTIONAL_FIELDS:
        value = getattr(winner, name)
        fields[name] = value if value is not None else getattr(loser, name)

    for name in _FLAG_FIELDS:
        value: TriState = getattr(winner, name)
        fields[name] = value if value.is_set else getattr(loser, name)

    fields["title_mappings"] = {**loser.title_mappings, **winner.title_mappings}
    fields["duplicate_keys"] = winner.duplicate_keys | loser.duplicate_keys

    return SettingsRecord(**fields)


def merge_records(
    near: SettingsRecord,
    far: SettingsRecord,
    policy: MergePolicy,
) -> SettingsRecord:
    """Merge a nearer record with a farther (parent) one.

    Args:
        near: Record closer to the starting directory.
        far: Record farther up the directory chain.
        policy: Merge policy deciding which side wins conflicts.

    Returns:
        A new merged record.
    """
    match policy:
        case MergePolicy.PARENT:
            return _override(far, near)

        case MergePolicy.LOCAL:
            return _override(near, far)

        case MergePolicy.CLOSEST:
            return near

    raise ValueError(f"Unknown merge policy: {policy}")


def fold_records(
    records: list[SettingsRecord],
    policy: MergePolicy,
) -> SettingsRecord:
    """Fold a near-to-far list of records into one.

    CLOSEST returns the first record unmerged. PARENT and LOCAL start from an
    empty record and merge each subsequent (farther) record into the
    accumulated result.
    """
    if not records:
        return SettingsRecord()

    if policy is MergePolicy.CLOSEST:
        return records[0]

    return reduce(
        lambda acc, record: merge_records(acc, record, policy),
        records,
        SettingsRecord(),
    )

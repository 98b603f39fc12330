"""Tests for settings merge strategies."""

import pytest

from caledger.models.settings import MergePolicy, SettingsRecord, TriState
from caledger.processing.merge_strategies import fold_records, merge_records

NEAR = SettingsRecord(
    calendar_names=("Work",),
    start_expr="-1M",
    notes=TriState.TRUE,
    title_mappings={"Standup": "near:standup", "Lunch": "near:lunch"},
    duplicate_keys=frozenset({"Lunch"}),
)

FAR = SettingsRecord(
    calendar_names=("Home", "Family"),
    start_expr="-1Y",
    end_expr="+1W",
    notes=TriState.FALSE,
    tag=TriState.TRUE,
    title_mappings={"Standup": "far:standup", "Gym": "far:gym"},
    duplicate_keys=frozenset({"Gym"}),
)


def test_parent_wins():
    """Test that the farther record wins conflicts."""
    merged = merge_records(NEAR, FAR, MergePolicy.PARENT)
    assert merged.calendar_names == ("Home", "Family")
    assert merged.start_expr == "-1Y"
    assert merged.end_expr == "+1W"
    assert merged.notes is TriState.FALSE
    assert merged.tag is TriState.TRUE
    assert merged.title_mappings == {
        "Standup": "far:standup",
        "Lunch": "near:lunch",
        "Gym": "far:gym",
    }
    assert merged.duplicate_keys == frozenset({"Lunch", "Gym"})


def test_local_wins():
    """Test that the nearer record wins conflicts but absent values are filled."""
    merged = merge_records(NEAR, FAR, MergePolicy.LOCAL)
    assert merged.calendar_names == ("Work",)
    assert merged.start_expr == "-1M"
    assert merged.end_expr == "+1W"
    assert merged.notes is TriState.TRUE
    assert merged.tag is TriState.TRUE
    assert merged.title_mappings["Standup"] == "near:standup"
    assert merged.title_mappings["Gym"] == "far:gym"


def test_absent_values_never_override():
    """Test that an empty winning record does not erase values."""
    merged = merge_records(NEAR, SettingsRecord(), MergePolicy.PARENT)
    assert merged == NEAR


def test_empty_calendar_list_does_not_replace():
    """Test wholesale calendar replacement only when non-empty."""
    far = SettingsRecord(calendar_names=())
    assert merge_records(NEAR, far, MergePolicy.PARENT).calendar_names == ("Work",)


def test_closest_returns_near():
    """Test CLOSEST ignores the farther record."""
    assert merge_records(NEAR, FAR, MergePolicy.CLOSEST) == NEAR


@pytest.mark.parametrize("policy", list(MergePolicy))
def test_merge_idempotent(policy):
    """Test that merging a record with itself yields the record."""
    assert merge_records(NEAR, NEAR, policy) == NEAR
    assert fold_records([FAR, FAR], policy) == FAR


def test_fold_empty():
    """Test folding no records."""
    assert fold_records([], MergePolicy.PARENT) == SettingsRecord()


def test_fold_closest_uses_first():
    """Test CLOSEST folding returns the nearest record."""
    assert fold_records([NEAR, FAR], MergePolicy.CLOSEST) == NEAR


@pytest.mark.parametrize("policy", [MergePolicy.PARENT, MergePolicy.LOCAL])
def test_fold_is_associative(policy):
    """Test that folding (A, B, C) equals merging A with the merge of (B, C)."""
    c = SettingsRecord(
        end_expr="+2Y",
        day_break=TriState.TRUE,
        title_mappings={"Gym": "c:gym", "Walk": "c:walk"},
    )
    folded = fold_records([NEAR, FAR, c], policy)
    nested = merge_records(NEAR, fold_records([FAR, c], policy), policy)
    assert folded == nested


def test_fold_three_levels_parent_wins():
    """Test that the farthest present value wins under PARENT."""
    middle = SettingsRecord(title_filter="mid")
    root = SettingsRecord(title_filter="root")
    merged = fold_records([NEAR, middle, root], MergePolicy.PARENT)
    assert merged.title_filter == "root"
    assert merged.start_expr == "-1M"


def test_merged_mappings_are_read_only():
    """Test that title mappings cannot be changed through a frozen record."""
    merged = merge_records(NEAR, SettingsRecord(), MergePolicy.CLOSEST)
    with pytest.raises(TypeError):
        merged.title_mappings["Standup"] = "changed"
    with pytest.raises(TypeError):
        NEAR.title_mappings["Gym"] = "far:gym"
    assert NEAR.title_mappings["Standup"] == "near:standup"

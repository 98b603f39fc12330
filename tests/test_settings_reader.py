"""Tests for settings file parsing."""

from caledger.ingestion.settings_reader import load, load_file
from caledger.models.settings import SettingsRecord, TriState


def test_load_structured_keys():
    """Test calendar, start, end and filter keys."""
    record = load(
        "calendar = Work, Personal ,Work\n"
        "start = -1M\n"
        "end=+0D\n"
        "filter = wb\n"
    )
    assert record.calendar_names == ("Work", "Personal", "Work")
    assert record.start_expr == "-1M"
    assert record.end_expr == "+0D"
    assert record.title_filter == "wb"
    assert record.title_mappings == {}


def test_load_boolean_flags():
    """Test bare-word flags set tri-state values."""
    record = load("notes\nnotag\n  nomap  \nbreak\n")
    assert record.notes is TriState.TRUE
    assert record.tag is TriState.FALSE
    assert record.map is TriState.FALSE
    assert record.day_break is TriState.TRUE


def test_load_later_flag_wins():
    """Test that a later flag overrides an earlier one in the same file."""
    record = load("notes\nnonotes\n")
    assert record.notes is TriState.FALSE


def test_unset_flags_stay_unset():
    """Test that unspecified flags are UNSET, not False."""
    record = load("calendar = Work\n")
    assert record.notes is TriState.UNSET
    assert record.map is TriState.UNSET


def test_comments_blank_lines_and_unknown_words_ignored():
    """Test that comments, blanks and unknown bare words are skipped."""
    record = load(
        "; a comment\n"
        "   ; indented comment = with equals\n"
        "\n"
        "   \n"
        "verbose\n"
    )
    assert record == SettingsRecord()


def test_hash_line_is_not_a_comment():
    """Test that only ';' starts a comment; a '#' line is a mapping."""
    record = load("# Standup = meetings:standup\n#notes\n")
    assert record.title_mappings == {"# Standup": "meetings:standup"}
    assert record.notes is TriState.UNSET


def test_unknown_keys_become_mappings():
    """Test title mappings, split at the first '='."""
    record = load("wb12345 = expenses:travel:client\nA = b = c\n")
    assert record.title_mappings == {
        "wb12345": "expenses:travel:client",
        "A": "b = c",
    }
    assert record.duplicate_keys == frozenset()


def test_duplicate_mapping_keys():
    """Test that the last value wins and the key is reported once."""
    record = load("Standup = first\nStandup = second\nStandup = third\n")
    assert record.title_mappings == {"Standup": "third"}
    assert record.duplicate_keys == frozenset({"Standup"})


def test_empty_key_or_value_ignored():
    """Test that entries with an empty side are ignored."""
    record = load("= value\nkey =\nfilter =\n")
    assert record.title_mappings == {}
    assert record.title_filter is None


def test_empty_calendar_names_dropped():
    """Test that empty parts of the calendar list are dropped."""
    record = load("calendar = Work,, Home,\n")
    assert record.calendar_names == ("Work", "Home")


def test_invalid_start_accepted_at_load():
    """Test that tokens are not validated when loading."""
    record = load("start = not-a-date\n")
    assert record.start_expr == "not-a-date"


def test_windows_line_endings():
    """Test CRLF files."""
    record = load("notes\r\nStandup = meetings:standup\r\n")
    assert record.notes is TriState.TRUE
    assert record.title_mappings == {"Standup": "meetings:standup"}


def test_load_file_missing(tmp_path):
    """Test that a missing file loads as an empty record."""
    assert load_file(tmp_path / "missing") == SettingsRecord()


def test_load_file_unreadable_is_empty(tmp_path):
    """Test that a file that cannot be decoded loads as empty."""
    path = tmp_path / ".caledger"
    path.write_bytes(b"\xff\xfe\xfa notes\n")
    assert load_file(path) == SettingsRecord()


def test_load_file(tmp_path):
    """Test loading a settings file from disk."""
    path = tmp_path / ".caledger"
    path.write_text("tag\nLunch = personal:food\n")
    record = load_file(path)
    assert record.tag is TriState.TRUE
    assert record.title_mappings == {"Lunch": "personal:food"}

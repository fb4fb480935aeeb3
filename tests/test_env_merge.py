"""Tests for last-write-wins materialization and merging."""

from __future__ import annotations

from launchdeck.utils.env_merge import MergedEntries, materialize, merge_entries
from launchdeck.utils.env_parser import Entry, parse_env_text


class TestMaterialize:
    def test_last_duplicate_wins(self):
        merged = materialize([Entry("A", "1"), Entry("B", "2"), Entry("A", "3")])
        assert merged.values == {"A": "3", "B": "2"}

    def test_key_keeps_first_position(self):
        merged = materialize([Entry("A", "1"), Entry("B", "2"), Entry("A", "3")])
        assert merged.order == ["A", "B"]

    def test_accepts_mapping(self):
        merged = materialize({"X": "1", "Y": "2"})
        assert merged.entries() == [Entry("X", "1"), Entry("Y", "2")]

    def test_empty(self):
        merged = materialize([])
        assert len(merged) == 0
        assert merged.order == []


class TestMergeEntries:
    def test_incoming_overrides_and_appends(self):
        merged = merge_entries([Entry("A", "1")], [Entry("A", "2"), Entry("B", "3")])
        assert merged.values == {"A": "2", "B": "3"}
        assert merged.order == ["A", "B"]

    def test_untouched_keys_keep_value_and_position(self):
        base = [Entry("A", "1"), Entry("B", "2"), Entry("C", "3")]
        merged = merge_entries(base, [Entry("B", "20")])
        assert merged.order == ["A", "B", "C"]
        assert merged.values == {"A": "1", "B": "20", "C": "3"}

    def test_new_keys_appended_in_first_seen_order(self):
        incoming = [Entry("Z", "1"), Entry("Y", "2"), Entry("Z", "3")]
        merged = merge_entries([Entry("A", "0")], incoming)
        assert merged.order == ["A", "Z", "Y"]
        assert merged.values["Z"] == "3"

    def test_duplicates_within_incoming_last_wins(self):
        merged = merge_entries([], [Entry("K", "first"), Entry("K", "second")])
        assert merged.values == {"K": "second"}

    def test_duplicates_within_base_collapse(self):
        merged = merge_entries([Entry("K", "a"), Entry("K", "b")], [])
        assert merged.values == {"K": "b"}

    def test_empty_incoming_is_noop(self):
        base = {"A": "1", "B": "2"}
        merged = merge_entries(base, [])
        assert merged.values == base
        assert merged.order == ["A", "B"]

    def test_does_not_mutate_inputs(self):
        base = {"A": "1"}
        incoming = [Entry("A", "2")]
        merge_entries(base, incoming)
        assert base == {"A": "1"}
        assert incoming == [Entry("A", "2")]

    def test_with_parsed_file(self):
        existing = {"DB_HOST": "localhost", "API_KEY": "old"}
        parsed = parse_env_text("API_KEY=new\nDEBUG=true\n# comment\n")
        merged = merge_entries(existing, parsed)
        assert merged.order == ["DB_HOST", "API_KEY", "DEBUG"]
        assert merged.values["API_KEY"] == "new"

    def test_contains(self):
        merged = merge_entries({"A": "1"}, [Entry("B", "2")])
        assert "B" in merged
        assert "C" not in merged
        assert isinstance(merged, MergedEntries)

"""Collapse ordered entries into a duplicate-free mapping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from launchdeck.utils.env_parser import Entry


@dataclass
class MergedEntries:
    """Materialized entries: one value per key, plus display order."""

    values: dict[str, str] = field(default_factory=dict)

    @property
    def order(self) -> list[str]:
        return list(self.values)

    def entries(self) -> list[Entry]:
        return [Entry(k, v) for k, v in self.values.items()]

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, key: object) -> bool:
        return key in self.values


def _as_entries(source: Iterable[Entry] | Mapping[str, str]) -> Iterable[Entry]:
    if isinstance(source, Mapping):
        return (Entry(k, v) for k, v in source.items())
    return source


def materialize(entries: Iterable[Entry] | Mapping[str, str]) -> MergedEntries:
    """Collapse entries so the last value seen for a key wins.

    A key keeps the position where it first appeared.
    """
    merged = MergedEntries()
    for entry in _as_entries(entries):
        merged.values[entry.key] = entry.value
    return merged


def merge_entries(
    existing: Iterable[Entry] | Mapping[str, str],
    incoming: Iterable[Entry] | Mapping[str, str],
) -> MergedEntries:
    """Merge ``incoming`` into ``existing`` with last-write-wins.

    Keys already present keep their position and take the newest value;
    new keys are appended in the order they first appear in ``incoming``.
    """
    merged = materialize(existing)
    for entry in _as_entries(incoming):
        merged.values[entry.key] = entry.value
    return merged

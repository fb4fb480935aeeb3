"""Editing session for a project's environment variables."""

from __future__ import annotations

from collections.abc import Mapping

from launchdeck.utils.env_merge import merge_entries
from launchdeck.utils.env_parser import ParseReport, parse_env_report

MASK = "••••••••"


class EnvEditorError(ValueError):
    """Invalid add/edit/delete on an editing session."""


class EnvEditorSession:
    """Holds the live variables and which of them are revealed.

    Imports go through the parser and merge; manual add/edit/delete change
    the mapping directly.
    """

    def __init__(
        self,
        initial: Mapping[str, str] | None = None,
        *,
        reveal_by_default: bool = False,
    ) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self._revealed: dict[str, bool] = {}
        self._reveal_by_default = reveal_by_default
        self.dirty = False

    @property
    def values(self) -> dict[str, str]:
        return dict(self._values)

    @property
    def keys(self) -> list[str]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def reset(self, values: Mapping[str, str]) -> None:
        """Replace the session contents with values loaded from the API."""
        self._values = dict(values)
        self._revealed = {k: v for k, v in self._revealed.items() if k in self._values}
        self.dirty = False

    def import_text(self, raw: str, *, strict: bool = False) -> ParseReport:
        """Parse ``raw`` and merge the result over the current variables."""
        report = parse_env_report(raw)
        if strict:
            report.raise_for_unterminated()
        if report.entries:
            self._values = merge_entries(self._values, report.entries).values
            self.dirty = True
        return report

    def add(self, key: str, value: str) -> None:
        key = key.strip()
        if not key or not value:
            raise EnvEditorError("Both key and value are required")
        self._values[key] = value
        self.dirty = True

    def edit(self, key: str, value: str) -> None:
        if key not in self._values:
            raise EnvEditorError(f"Unknown variable: {key}")
        self._values[key] = value
        self.dirty = True

    def delete(self, key: str) -> None:
        if key not in self._values:
            raise EnvEditorError(f"Unknown variable: {key}")
        del self._values[key]
        self._revealed.pop(key, None)
        self.dirty = True

    def is_revealed(self, key: str) -> bool:
        return self._revealed.get(key, self._reveal_by_default)

    def toggle_reveal(self, key: str) -> bool:
        if key not in self._values:
            raise EnvEditorError(f"Unknown variable: {key}")
        self._revealed[key] = not self.is_revealed(key)
        return self._revealed[key]

    def display_value(self, key: str) -> str:
        if self.is_revealed(key):
            return self._values[key]
        return MASK

    def to_payload(self) -> dict[str, str]:
        """Variables ready for submission, skipping empty keys or values."""
        return {k: v for k, v in self._values.items() if k and v}

    def mark_saved(self) -> None:
        self.dirty = False

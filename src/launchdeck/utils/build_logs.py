"""Render deployment build logs as rich markup."""

from __future__ import annotations

import re

from rich.markup import escape

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_RE.sub("", text)


def render_log_line(line: str) -> str:
    if "✓" in line:
        return f"[green]{escape(line)}[/green]"
    if "error" in line or "Error" in line:
        return f"[red]{escape(line)}[/red]"
    if "[" in line:
        # Timestamp-style prefix up to the first "]" is dimmed.
        cut = line.find("]") + 1
        return f"[dim]{escape(line[:cut])}[/dim]{escape(line[cut:])}"
    return escape(line)


def render_build_logs(logs: str | None) -> str:
    if not logs:
        return "[dim]No build logs available[/dim]"
    return "\n".join(render_log_line(line) for line in strip_ansi(logs).split("\n"))

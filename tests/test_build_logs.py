"""Tests for build log rendering."""

from __future__ import annotations

from launchdeck.utils.build_logs import render_build_logs, render_log_line, strip_ansi


def test_strip_ansi():
    assert strip_ansi("\x1b[32mok\x1b[0m done") == "ok done"


def test_success_line_green():
    assert render_log_line("✓ Compiled") == "[green]✓ Compiled[/green]"


def test_error_line_red():
    assert render_log_line("npm ERR! Error: missing") == "[red]npm ERR! Error: missing[/red]"
    assert render_log_line("build error").startswith("[red]")


def test_bracket_prefix_dimmed():
    rendered = render_log_line("[12:00:01] Installing")
    assert rendered.startswith("[dim]")
    assert rendered.endswith(" Installing")
    assert "12:00:01" in rendered


def test_plain_line_escaped():
    assert render_log_line("plain output") == "plain output"


def test_empty_logs():
    assert render_build_logs("") == "[dim]No build logs available[/dim]"
    assert render_build_logs(None) == "[dim]No build logs available[/dim]"


def test_multiline_logs():
    rendered = render_build_logs("step one\n\x1b[31mError: boom\x1b[0m")
    lines = rendered.split("\n")
    assert lines[0] == "step one"
    assert lines[1] == "[red]Error: boom[/red]"

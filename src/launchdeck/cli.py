"""CLI entry point for the launchdeck command."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from launchdeck.utils.env_merge import materialize
from launchdeck.utils.env_parser import EnvParseError, parse_env_report
from launchdeck.utils.env_session import MASK
from launchdeck.utils.log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchdeck", description="Project deployment dashboard."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--log-file", type=Path, help="write logs to this file")
    sub = parser.add_subparsers(dest="command")

    parse_cmd = sub.add_parser("parse", help="parse a .env file and print its variables")
    parse_cmd.add_argument("file", type=Path)
    parse_cmd.add_argument("--strict", action="store_true", help="fail on unclosed quotes")
    parse_cmd.add_argument("--json", action="store_true", help="print a JSON object")
    parse_cmd.add_argument("--reveal", action="store_true", help="print values unmasked")
    return parser


def run_parse(args: argparse.Namespace, console: Console) -> int:
    try:
        content = args.file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Could not read {escape(str(args.file))}: {escape(str(e))}[/red]")
        return 1

    report = parse_env_report(content)
    if args.strict:
        try:
            report.raise_for_unterminated()
        except EnvParseError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            return 2

    merged = materialize(report.entries)
    values = {
        key: value if args.reveal else MASK for key, value in merged.values.items()
    }
    if args.json:
        console.print_json(json.dumps(values))
    else:
        table = Table("Key", "Value")
        for key, value in values.items():
            table.add_row(escape(key), escape(value))
        console.print(table)
    for warning in report.unterminated:
        console.print(f"[yellow]warning: {escape(warning.message)}[/yellow]")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Launch the Launchdeck TUI, or run a subcommand."""
    args = build_parser().parse_args(argv)
    if args.verbose or args.log_file:
        setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    if args.command == "parse":
        sys.exit(run_parse(args, Console()))

    from launchdeck.app import LaunchdeckApp

    app = LaunchdeckApp()
    app.run()

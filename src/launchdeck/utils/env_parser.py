"""Parse uploaded .env / .properties content into ordered entries.

The scanner walks the text one line at a time in one of two states:
``Scanning`` looks for ``KEY=VALUE`` (or ``KEY:VALUE``) lines, while
``InQuote`` accumulates a quoted value that spans several lines until the
matching quote character shows up.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'")
COMMENT_PREFIXES = ("#", "!")

UNTERMINATED_QUOTE = "unterminated-quote"
NO_SEPARATOR = "no-separator"


@dataclass(frozen=True)
class Entry:
    """A single key/value pair in the order it was found."""

    key: str
    value: str


@dataclass(frozen=True)
class Scanning:
    """Looking for the next key/value line."""


@dataclass(frozen=True)
class InQuote:
    """Inside a quoted value that has not been closed yet."""

    quote_char: str
    pending_key: str
    pending_value: str
    start_line: int


ParserState = Scanning | InQuote


@dataclass(frozen=True)
class ParseWarning:
    line_number: int
    kind: str
    message: str


@dataclass
class ParseReport:
    """Entries plus anything the parser skipped along the way."""

    entries: list[Entry] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)

    @property
    def unterminated(self) -> list[ParseWarning]:
        return [w for w in self.warnings if w.kind == UNTERMINATED_QUOTE]

    @property
    def has_unterminated(self) -> bool:
        return bool(self.unterminated)

    def raise_for_unterminated(self) -> None:
        """Raise :class:`EnvParseError` if any quoted value was dropped."""
        if self.unterminated:
            raise EnvParseError(self.unterminated)


class EnvParseError(ValueError):
    """Raised in strict mode when a quoted value never closes."""

    def __init__(self, warnings: list[ParseWarning]) -> None:
        self.warnings = warnings
        super().__init__("; ".join(w.message for w in warnings))


def strip_matching_quotes(value: str) -> str:
    """Remove one pair of matching outer quotes, if present."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def _find_separator(line: str) -> int:
    index = line.find("=")
    if index == -1:
        index = line.find(":")
    return index


def _opens_quote(value: str) -> bool:
    if not value or value[0] not in QUOTE_CHARS:
        return False
    return not (len(value) >= 2 and value[-1] == value[0])


def _scan_line(
    line: str, line_number: int, report: ParseReport
) -> ParserState:
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIXES):
        return Scanning()

    sep = _find_separator(stripped)
    if sep == -1:
        logger.debug("line %d: no separator, skipped", line_number)
        report.warnings.append(
            ParseWarning(line_number, NO_SEPARATOR, f"line {line_number}: no '=' or ':' found")
        )
        return Scanning()

    key = stripped[:sep].strip()
    raw_value = stripped[sep + 1:].strip()

    if _opens_quote(raw_value):
        return InQuote(
            quote_char=raw_value[0],
            pending_key=key,
            pending_value=raw_value[1:],
            start_line=line_number,
        )

    report.entries.append(Entry(key, strip_matching_quotes(raw_value)))
    return Scanning()


def _continue_quote(
    state: InQuote, line: str, report: ParseReport
) -> ParserState:
    before, found, _ = line.partition(state.quote_char)
    value = f"{state.pending_value}\n{before}"
    if found:
        report.entries.append(Entry(state.pending_key, value))
        return Scanning()
    return InQuote(state.quote_char, state.pending_key, value, state.start_line)


def parse_env_report(raw: str) -> ParseReport:
    """Parse ``raw`` and return entries together with parse warnings."""
    report = ParseReport()
    state: ParserState = Scanning()

    for line_number, line in enumerate(raw.split("\n"), start=1):
        if isinstance(state, InQuote):
            state = _continue_quote(state, line, report)
        else:
            state = _scan_line(line, line_number, report)

    if isinstance(state, InQuote):
        logger.debug(
            "unterminated %s quote for %r opened on line %d, value dropped",
            state.quote_char, state.pending_key, state.start_line,
        )
        report.warnings.append(
            ParseWarning(
                state.start_line,
                UNTERMINATED_QUOTE,
                f"line {state.start_line}: value for {state.pending_key!r} "
                f"opens with {state.quote_char} but never closes",
            )
        )

    return report


def parse_env_text(raw: str, *, strict: bool = False) -> list[Entry]:
    """Parse .env content into entries in order of appearance.

    Comments (``#``/``!``), blank lines and lines with no separator are
    skipped. Quoted values may span lines; one that is still open at the
    end of the input is dropped, or raises :class:`EnvParseError` when
    ``strict`` is set.
    """
    report = parse_env_report(raw)
    if strict:
        report.raise_for_unterminated()
    return report.entries

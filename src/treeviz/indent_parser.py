"""Split raw text into (indent, label) lines."""

from __future__ import annotations

import logging

from treeviz.models import Line

logger = logging.getLogger(__name__)

# ASCII whitespace only; Unicode spaces such as U+3000 belong to the label.
_WHITESPACE = " \t\n\v\f\r"


def count_indent(line: str) -> int:
    """Return the indent level of *line*.

    Every tab in the leading run counts as one level. Spaces count in pairs:
    a space adds a level only when its position in the run is even, so two
    spaces equal one tab. Tabs and spaces may be mixed.
    """
    indent = 0
    for pos, char in enumerate(line):
        if char == "\t":
            indent += 1
        elif char == " ":
            if pos % 2 == 0:
                indent += 1
        else:
            break
    return indent


def strip_label(line: str) -> str:
    """Return *line* with leading ASCII whitespace removed."""
    return line.lstrip(_WHITESPACE)


def split_lines(text: str) -> list[str]:
    """Split *text* on newlines.

    A trailing newline ends the last line instead of starting an empty one,
    and a carriage return right before a newline is dropped with it.
    Blank lines in the middle of the text are kept.
    """
    if not text:
        return []
    raw = text.split("\n")
    if raw[-1] == "":
        raw.pop()
    return [r[:-1] if r.endswith("\r") else r for r in raw]


def parse_lines(text: str) -> list[Line]:
    """Parse *text* into one Line per input line, in input order."""
    lines = [Line(count_indent(raw), strip_label(raw)) for raw in split_lines(text)]
    logger.debug("Parsed %d lines", len(lines))
    return lines

"""Line/column accumulation over text slices.

A cursor is threaded left-to-right across the input.  Each slice moves
it forward: columns grow within a line, and every line terminator
bumps the line and restarts the column.  "\\r\\n" counts as a single
terminator, even when the match stream cuts it between two slices: a
trailing "\\r" is held pending until the next character shows whether
it was a lone terminator or the first half of a pair.
"""

from __future__ import annotations
import re
from collections.abc import Iterator

from .types import Cursor, Location, MatchSpan

COLUMN_OFFSET = 1

# Alternation order matters: "\r\n" must win over a lone "\r"
_LINE_BREAK = re.compile(r"\r\n|\n|\r")

START_CURSOR = Cursor(1, COLUMN_OFFSET)


def count_lines(text: str) -> tuple[int, int]:
    """Return (terminator count, codepoint length after the last terminator)."""
    breaks = 0
    tail_start = 0
    for m in _LINE_BREAK.finditer(text):
        breaks += 1
        tail_start = m.end()
    return breaks, len(text) - tail_start


def advance(cursor: Cursor, text: str) -> Cursor:
    """Move the cursor past `text`."""
    if not text:
        return cursor
    line, col = cursor.line, cursor.col
    if cursor.pending_cr:
        line, col = line + 1, COLUMN_OFFSET
        if text[0] == "\n":
            text = text[1:]

    pending_cr = text.endswith("\r")
    if pending_cr:
        text = text[:-1]
    breaks, tail_len = count_lines(text)
    if breaks == 0:
        col += tail_len
    else:
        line += breaks
        col = tail_len + COLUMN_OFFSET
    if pending_cr:
        col += 1
    return Cursor(line, col, pending_cr)


def resolve(cursor: Cursor, next_char: str) -> Location:
    """Location of the character after `cursor`, given that character."""
    if cursor.pending_cr and next_char != "\n":
        return Location(cursor.line + 1, COLUMN_OFFSET)
    return Location(cursor.line, cursor.col)


def locate_slice(cursor: Cursor, span: MatchSpan) -> tuple[Location, Cursor]:
    """Return the begin location of `span`'s match and the cursor after it."""
    begin = advance(cursor, span.preceding_text)
    after = advance(begin, span.matched_text)
    return resolve(begin, span.next_char), after


def stream_lines(text: str) -> Iterator[tuple[str, int]]:
    """Lazily yield (line_text, line_number) pairs, numbered from 1."""
    line_no = 1
    pos = 0
    for m in _LINE_BREAK.finditer(text):
        yield text[pos:m.start()], line_no
        line_no += 1
        pos = m.end()
    yield text[pos:], line_no

"""Tests for line/column accumulation and the location helpers."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from sublocator import COLUMN_OFFSET, Location, new_loc, stream_lines
from sublocator.lines import START_CURSOR, advance, count_lines, locate_slice, resolve
from sublocator.types import Cursor, MatchSpan


# ── Locations ────────────────────────────────────────────────────────

def test_new_loc():
    assert new_loc(2, 4) == Location(2, 4)
    assert new_loc(42, 12).as_dict() == {"line": 42, "col": 12}


@pytest.mark.parametrize("line, col", [("1", 2), (1, 2.0), (True, 1)])
def test_new_loc_requires_integers(line, col):
    with pytest.raises(TypeError):
        new_loc(line, col)


def test_locations_order_by_line_then_col():
    assert Location(1, 50) < Location(2, 1)
    assert Location(2, 3) < Location(2, 4)
    assert Location(2, 4) >= Location(2, 4)


# ── count_lines ──────────────────────────────────────────────────────

def test_count_lines_no_terminator():
    assert count_lines("hello") == (0, 5)
    assert count_lines("") == (0, 0)


def test_count_lines_crlf_is_one_terminator():
    assert count_lines("a\r\n\r\nbc") == (2, 2)


def test_count_lines_mixed():
    assert count_lines("a\rb\nc\r\nde") == (3, 2)
    assert count_lines("\n\r") == (2, 0)


# ── advance ──────────────────────────────────────────────────────────

def test_start_cursor():
    assert START_CURSOR == Cursor(1, COLUMN_OFFSET)


def test_advance_same_line():
    assert advance(Cursor(1, 1), "abc") == Cursor(1, 4)


def test_advance_across_lines_resets_column():
    assert advance(Cursor(3, 5), "x\nyz") == Cursor(4, 3)
    assert advance(Cursor(3, 5), "\r\n") == Cursor(4, 1)


def test_advance_empty_is_noop():
    cursor = Cursor(7, 9, True)
    assert advance(cursor, "") is cursor


def test_advance_holds_trailing_cr():
    assert advance(Cursor(1, 1), "ab\r") == Cursor(1, 4, True)


def test_advance_completes_crlf_across_slices():
    pending = advance(Cursor(1, 1), "ab\r")
    assert advance(pending, "\n") == Cursor(2, 1)
    assert advance(pending, "\nxy") == Cursor(2, 3)


def test_advance_lone_cr_across_slices():
    pending = advance(Cursor(1, 1), "ab\r")
    assert advance(pending, "xy") == Cursor(2, 3)
    assert advance(pending, "\r") == Cursor(2, 2, True)


def test_advance_counts_codepoints():
    assert advance(Cursor(1, 1), "\u00e5\u2202\u0153") == Cursor(1, 4)


# ── resolve / locate_slice ───────────────────────────────────────────

def test_resolve_pending_cr():
    pending = Cursor(1, 4, True)
    assert resolve(pending, "\n") == Location(1, 4)
    assert resolve(pending, "x") == Location(2, 1)
    assert resolve(Cursor(1, 4), "x") == Location(1, 4)


def test_locate_slice_reports_begin_not_end():
    loc, after = locate_slice(Cursor(1, 1), MatchSpan("ab", "c\nde", "c"))
    assert loc == Location(1, 3)
    assert after == Cursor(2, 3)


def test_locate_slice_preceding_spans_lines():
    loc, after = locate_slice(Cursor(2, 7), MatchSpan("x\n\nyy", "z", "z"))
    assert loc == Location(4, 3)
    assert after == Cursor(4, 4)


# ── stream_lines ─────────────────────────────────────────────────────

def test_stream_lines():
    assert list(stream_lines("a\r\nb\rc\n")) == [("a", 1), ("b", 2), ("c", 3), ("", 4)]


def test_stream_lines_single_line():
    assert list(stream_lines("")) == [("", 1)]
    assert list(stream_lines("abc")) == [("abc", 1)]


def test_stream_lines_is_lazy():
    lines = stream_lines("first\n" * 10_000)
    assert next(lines) == ("first", 1)
    assert next(lines) == ("first", 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""Core types."""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Union

from .errors import LocatorError

# at_most sentinel: report every location
ALL = "all"


@dataclass(frozen=True, slots=True, order=True)
class Location:
    """A 1-based (line, col) position; col counts codepoints."""
    line: int
    col: int

    def as_dict(self) -> dict[str, int]:
        return {"line": self.line, "col": self.col}


# Sorts before every real location (default start point)
BEGINNING = Location(0, 0)


def new_loc(line: int, col: int) -> Location:
    """Create a Location from two integers.

        >>> new_loc(42, 12)
        Location(line=42, col=12)
    """
    if not is_integer(line) or not is_integer(col):
        raise TypeError(f"line and col must be integers, got {line!r}, {col!r}")
    return Location(line, col)


def is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ── Patterns ─────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Literal:
    """A single string matched by exact substring search."""
    text: str


@dataclass(frozen=True, slots=True)
class LiteralSet:
    """Ordered literal alternatives; earlier items win ties."""
    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CompiledRegex:
    handle: re.Pattern


Pattern = Union[Literal, LiteralSet, CompiledRegex]


# ── Search state ─────────────────────────────────────────────────────

@dataclass(slots=True)
class SearchOptions:
    """Options for a single search."""
    at_most: int | str = ALL          # positive int or ALL
    start: Location = BEGINNING       # only locations >= start are reported


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """Text since the previous match, then the match itself."""
    preceding_text: str
    matched_text: str
    next_char: str = ""               # text[match start], "" at end of input


@dataclass(frozen=True, slots=True)
class Cursor:
    """Position just past the text consumed so far."""
    line: int
    col: int
    pending_cr: bool = False          # last consumed char was a "\r"


@dataclass(slots=True)
class LocateResult:
    """Result of a search: either locations or an error, never both."""
    locations: list[Location] = field(default_factory=list)
    error: LocatorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[Location]:
        """Return the locations, raising the captured error if any."""
        if self.error is not None:
            raise self.error
        return self.locations

"""Locator — the main API.

Usage:
    from sublocator import locate, find_locations

    result = locate('<h2>\\n  <span class="a"', "a")
    result.locations   # [Location(2, 6), Location(2, 11), Location(2, 16)]

    find_locations(text, ["h", "l"], at_most=1)
    find_locations(text, re.compile(r"<(?!h)"), start={"line": 2, "col": 1})

Everything is one lazy pipeline:

    normalize → match_spans → report_locations → filter_and_limit

so a bounded search stops scanning as soon as it has enough results.
"""

from __future__ import annotations
import logging
from collections.abc import Iterable, Iterator, Mapping

from .errors import InvalidAtMostError, InvalidStartError, LocatorError, NotAStringError
from .lines import START_CURSOR, locate_slice
from .patterns import coerce_pattern, normalize
from .streaming import match_spans
from .types import ALL, BEGINNING, Location, LocateResult, MatchSpan, SearchOptions, is_integer

logger = logging.getLogger(__name__)

_UNSET = object()


def report_locations(spans: Iterable[MatchSpan]) -> Iterator[Location]:
    """Fold spans through the cursor, yielding each match's begin location."""
    cursor = START_CURSOR
    for span in spans:
        begin, cursor = locate_slice(cursor, span)
        yield begin


def include_location(loc: Location, start: Location) -> bool:
    if loc.line == start.line:
        return loc.col >= start.col
    return loc.line > start.line


def filter_and_limit(locations: Iterable[Location], options: SearchOptions) -> Iterator[Location]:
    """Drop locations before options.start, then take at most options.at_most.

    Stops pulling from `locations` as soon as the cap is reached.
    """
    taken = 0
    for loc in locations:
        if not include_location(loc, options.start):
            continue
        yield loc
        taken += 1
        if taken == options.at_most:
            logger.debug("Reached at_most=%d, stopping scan", taken)
            return


# ── Validation ───────────────────────────────────────────────────────

def validate_at_most(at_most: object) -> int | str:
    if at_most == ALL:
        return ALL
    if not is_integer(at_most):
        raise InvalidAtMostError("at_most value must be an integer or 'all'")
    if at_most <= 0:
        raise InvalidAtMostError("at_most value must be greater than 0 or 'all'")
    return at_most


def validate_start(start: object) -> Location:
    if isinstance(start, Location):
        line, col = start.line, start.col
    elif isinstance(start, Mapping):
        line, col = start.get("line"), start.get("col")
    else:
        raise InvalidStartError()
    if not is_integer(line) or not is_integer(col):
        raise InvalidStartError()
    return Location(line, col)


def build_options(at_most: object = ALL, start: object = BEGINNING) -> SearchOptions:
    """Validate raw option values into SearchOptions."""
    return SearchOptions(at_most=validate_at_most(at_most), start=validate_start(start))


# ── Entry points ─────────────────────────────────────────────────────

def find_locations(
    text: str,
    pattern: object,
    *,
    at_most: object = ALL,
    start: object = BEGINNING,
) -> list[Location]:
    """Find the (line, col) locations of a pattern in text.

    The pattern can be a string, a sequence of strings, or a compiled
    regex.  Locations are listed top to bottom, left to right.

    Args:
        text: String to search.
        pattern: What to look for.  A sequence of strings is matched as
            an alternation, earlier items winning when two would match
            at the same offset.
        at_most: Positive int caps the number of locations; "all" (default)
            reports every one.
        start: Location or {"line": int, "col": int}.  Only locations at
            or after this point are reported.

    Raises:
        NotAStringError, InvalidAtMostError, InvalidStartError, PatternError.
    """
    if not isinstance(text, str):
        raise NotAStringError()
    options = build_options(at_most, start)
    normalized = normalize(coerce_pattern(pattern))

    logger.debug(
        "Locating %s pattern (at_most=%s, start=%s)",
        type(normalized).__name__, options.at_most, options.start,
    )
    spans = match_spans(text, normalized)
    return list(filter_and_limit(report_locations(spans), options))


def locate(
    text: str,
    pattern: object,
    *,
    at_most: object = ALL,
    start: object = BEGINNING,
) -> LocateResult:
    """Like find_locations, but returns a LocateResult instead of raising."""
    try:
        locations = find_locations(text, pattern, at_most=at_most, start=start)
    except LocatorError as exc:
        return LocateResult(error=exc)
    return LocateResult(locations=locations)


class Locator:
    """Reusable searcher bound to default SearchOptions.

    Holds no per-search state; the same instance can be used for any
    number of calls.
    """

    def __init__(self, options: SearchOptions | None = None) -> None:
        self.options = options or SearchOptions()

    def find(self, text: str, pattern: object, *, at_most: object = _UNSET, start: object = _UNSET) -> list[Location]:
        return find_locations(
            text,
            pattern,
            at_most=self.options.at_most if at_most is _UNSET else at_most,
            start=self.options.start if start is _UNSET else start,
        )

    def locate(self, text: str, pattern: object, *, at_most: object = _UNSET, start: object = _UNSET) -> LocateResult:
        try:
            return LocateResult(locations=self.find(text, pattern, at_most=at_most, start=start))
        except LocatorError as exc:
            return LocateResult(error=exc)

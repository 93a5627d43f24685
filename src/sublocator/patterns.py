"""Pattern normalization.

Callers hand us a plain string, a list of strings, or a compiled regex.
Everything is first coerced into one of the tagged pattern types, then
normalized into what the match stream actually runs:

    Literal       → passed through, matched with str.find
    LiteralSet    → escaped, joined with "|" in order, compiled once
    CompiledRegex → passed through as-is
"""

from __future__ import annotations
import logging
import re
from collections.abc import Sequence

from .errors import PatternError
from .types import CompiledRegex, Literal, LiteralSet, Pattern

logger = logging.getLogger(__name__)


def coerce_pattern(pattern: object) -> Pattern:
    """Wrap a raw caller value in its tagged pattern type."""
    if isinstance(pattern, (Literal, LiteralSet, CompiledRegex)):
        return pattern
    if isinstance(pattern, str):
        return Literal(pattern)
    if isinstance(pattern, re.Pattern):
        return CompiledRegex(pattern)
    if isinstance(pattern, Sequence) and not isinstance(pattern, (bytes, bytearray)):
        return LiteralSet(tuple(pattern))
    raise PatternError(
        f"pattern must be a string, a list of strings or a compiled regex, "
        f"got {type(pattern).__name__}"
    )


def normalize(pattern: Pattern) -> Literal | CompiledRegex:
    """Reduce a pattern to a Literal or a CompiledRegex."""
    match pattern:
        case Literal(text=text):
            if not isinstance(text, str):
                raise PatternError(f"literal must be a string, got {type(text).__name__}")
            if not text:
                raise PatternError("literal must not be empty")
            return pattern
        case LiteralSet(items=items):
            return _compile_alternation(items)
        case CompiledRegex(handle=handle):
            if not isinstance(handle, re.Pattern) or not isinstance(handle.pattern, str):
                raise PatternError("compiled regex must be a str pattern")
            return pattern
    raise PatternError(f"unsupported pattern type: {type(pattern).__name__}")


def _compile_alternation(items: Sequence[str]) -> CompiledRegex:
    if not items:
        raise PatternError("literal set must not be empty")
    for item in items:
        if not isinstance(item, str):
            raise PatternError(f"literal set items must be strings, got {type(item).__name__}")
        if not item:
            raise PatternError("literal set items must not be empty")

    joined = "|".join(re.escape(item) for item in items)
    try:
        compiled = re.compile(f"(?:{joined})")
    except re.error as exc:
        raise PatternError(f"could not compile literal set: {exc}") from exc

    logger.debug("Compiled literal set of %d items", len(items))
    return CompiledRegex(compiled)

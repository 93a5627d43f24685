"""Match stream — lazily turns a normalized pattern into MatchSpans.

The whole text is scanned in one forward pass, never line by line, so
a regex may match across line terminators.  Each span carries the text
between the previous match and this one, so concatenating every
(preceding_text, matched_text) pair reproduces the input up to the end
of the last match.

Usage:
    for span in match_spans(text, normalize(Literal("a"))):
        ...  # stop whenever you like, nothing is computed ahead
"""

from __future__ import annotations
from collections.abc import Iterator

from .types import CompiledRegex, Literal, MatchSpan


def match_spans(text: str, pattern: Literal | CompiledRegex) -> Iterator[MatchSpan]:
    """Yield a MatchSpan per occurrence, in document order."""
    if isinstance(pattern, Literal):
        return _literal_spans(text, pattern.text)
    return _regex_spans(text, pattern)


def _literal_spans(text: str, needle: str) -> Iterator[MatchSpan]:
    pos = 0
    while True:
        idx = text.find(needle, pos)
        if idx == -1:
            return
        yield MatchSpan(text[pos:idx], needle, needle[0])
        pos = idx + len(needle)


def _regex_spans(text: str, pattern: CompiledRegex) -> Iterator[MatchSpan]:
    pos = 0
    last_start = -1
    for m in pattern.handle.finditer(text):
        start = m.start()
        # A non-empty match may begin where a zero-width one just did
        if start == last_start:
            continue
        yield MatchSpan(text[pos:start], m.group(), text[start:start + 1])
        pos = m.end()
        last_start = start

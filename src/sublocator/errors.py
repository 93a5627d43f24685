"""Error types raised during argument validation and pattern normalization."""

from __future__ import annotations


class LocatorError(Exception):
    """Base class for all sublocator errors."""


class NotAStringError(LocatorError, TypeError):
    def __init__(self, message: str = "intended only for a string") -> None:
        super().__init__(message)


class InvalidAtMostError(LocatorError, ValueError):
    pass


class InvalidStartError(LocatorError, ValueError):
    def __init__(self, message: str = "start value must be {line: int, col: int}") -> None:
        super().__init__(message)


class PatternError(LocatorError, ValueError):
    pass

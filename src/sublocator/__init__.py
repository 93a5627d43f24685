"""Sublocator — find the line and column of every occurrence of a pattern."""

from .locator import Locator, find_locations, locate
from .config import create_locator, load_config, load_from_yaml
from .errors import (
    InvalidAtMostError, InvalidStartError, LocatorError, NotAStringError, PatternError,
)
from .lines import COLUMN_OFFSET, stream_lines
from .types import (
    ALL, BEGINNING, CompiledRegex, Literal, LiteralSet, LocateResult, Location,
    SearchOptions, new_loc,
)

__all__ = [
    "locate", "find_locations", "Locator",
    "create_locator", "load_config", "load_from_yaml",
    "LocatorError", "NotAStringError", "InvalidAtMostError", "InvalidStartError", "PatternError",
    "COLUMN_OFFSET", "stream_lines",
    "ALL", "BEGINNING", "Location", "new_loc", "SearchOptions", "LocateResult",
    "Literal", "LiteralSet", "CompiledRegex",
]
__version__ = "0.1.0"

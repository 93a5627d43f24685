"""YAML/dict config loader for search options.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    sublocator:
      at_most: 10        # positive integer or "all"
      start:
        line: 2
        col: 1
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .locator import Locator, build_options
from .types import ALL, BEGINNING, SearchOptions


def load_config(data: dict[str, Any]) -> SearchOptions:
    """Validate a config dict (from YAML or inline) into SearchOptions."""
    # Support nested under "sublocator" key or flat
    if "sublocator" in data:
        data = data["sublocator"] or {}

    return build_options(
        at_most=data.get("at_most", ALL),
        start=data.get("start", BEGINNING),
    )


def load_from_yaml(path: str | Path) -> SearchOptions:
    """Load search options from a YAML file."""
    import yaml
    with open(path) as f:
        return load_config(yaml.safe_load(f) or {})


def create_locator(config: dict[str, Any] | SearchOptions | None = None) -> Locator:
    """Create a Locator from a config dict or ready-made options."""
    if config is None or isinstance(config, SearchOptions):
        return Locator(config)
    return Locator(load_config(config))

"""Tests for loading search options from dicts and YAML."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from sublocator import (
    ALL, BEGINNING, InvalidAtMostError, InvalidStartError, Location, Locator,
    SearchOptions, create_locator, load_config, load_from_yaml,
)


def test_defaults():
    assert load_config({}) == SearchOptions(at_most=ALL, start=BEGINNING)


def test_flat_config():
    options = load_config({"at_most": 3, "start": {"line": 2, "col": 4}})
    assert options == SearchOptions(at_most=3, start=Location(2, 4))


def test_nested_config():
    options = load_config({"sublocator": {"at_most": "all"}, "other_tool": {}})
    assert options.at_most == ALL
    assert options.start == BEGINNING


def test_invalid_values_raise():
    with pytest.raises(InvalidAtMostError):
        load_config({"at_most": 0})
    with pytest.raises(InvalidStartError):
        load_config({"start": [2, 4]})


def test_load_from_yaml(tmp_path):
    path = tmp_path / "sublocator.yaml"
    path.write_text(
        "sublocator:\n"
        "  at_most: 2\n"
        "  start:\n"
        "    line: 2\n"
        "    col: 7\n"
    )
    assert load_from_yaml(path) == SearchOptions(at_most=2, start=Location(2, 7))


def test_load_from_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_from_yaml(path) == SearchOptions()


def test_create_locator():
    locator = create_locator({"at_most": 1})
    assert isinstance(locator, Locator)
    assert locator.find('<h2>\n  <span class="a"', "a") == [Location(2, 6)]
    assert create_locator().options == SearchOptions()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

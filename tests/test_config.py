"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from doclinks.load_config import DEFAULT_CONFIG, load_config, with_defaults
from doclinks.merge_config import merge_config
from doclinks.load_error import LoadError


def test_merge_config_scalars() -> None:
    """Verify scalar replacement when merging."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    assert merge_config(base, update) == {"a": 1, "b": 3, "c": 4}


def test_merge_config_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    merged = merge_config({"extensions": [".md"]}, {"extensions": [".markdown"]})
    assert merged == {"extensions": [".markdown"]}


def test_merge_config_exclude_additive() -> None:
    """Verify that exclude globs are appended without duplicates."""
    merged = merge_config({"exclude": [".*", "_site"]}, {"exclude": ["_site", "drafts"]})
    assert merged["exclude"] == [".*", "_site", "drafts"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(tmp_path / "absent.yml") == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "doclinks.yml"
    config_file.write_text(
        yaml.dump({"check_anchors": True, "exclude": ["drafts"], "ignore": ["api/*"]})
    )
    loaded = load_config(str(config_file))
    assert loaded["check_anchors"] is True
    assert "node_modules" in loaded["exclude"]  # Default
    assert "drafts" in loaded["exclude"]  # Added
    assert loaded["ignore"] == ["api/*"]
    assert loaded["extensions"] == [".md"]


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Verify that an unparsable config file is a LoadError."""
    config_file = tmp_path / "bad.yml"
    config_file.write_text("exclude: [unclosed\n")
    with pytest.raises(LoadError) as excinfo:
        load_config(config_file)
    assert excinfo.value.paths == (config_file,)


def test_load_config_not_a_mapping(tmp_path: Path) -> None:
    """Verify that a top-level list is rejected."""
    config_file = tmp_path / "list.yml"
    config_file.write_text("- a\n- b\n")
    with pytest.raises(LoadError, match="mapping"):
        load_config(config_file)


def test_with_defaults_fills_partial_config() -> None:
    """Verify that a partial config keeps the remaining defaults."""
    config = with_defaults({"check_anchors": True})
    assert config["check_anchors"] is True
    assert config["index_names"] == ["index", "readme"]
    assert with_defaults(None) == DEFAULT_CONFIG

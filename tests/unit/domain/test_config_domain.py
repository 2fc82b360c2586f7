from __future__ import annotations

"""
Unit tests for Configuration Domain Management.

Verifies defaults, JSON persistence and schema validation with coercion.
"""

import json
from pathlib import Path

import pytest

from treewright.domain.config import (
    get_default_config,
    load_config,
    save_config,
    validate_config,
)


def test_defaults() -> None:
    """TC-01: Default configuration is complete and valid."""
    cfg, warnings = validate_config(get_default_config())

    assert cfg["encoding"] == "utf-8"
    assert cfg["log_level"] == "INFO"
    assert cfg["log_file"] is None
    assert warnings == []


def test_load_missing_file_returns_defaults(tmp_path: Path) -> None:
    """TC-02: A missing config file is not an error."""
    assert load_config(str(tmp_path / "none.json")) == get_default_config()


def test_load_corrupt_file_returns_defaults(tmp_path: Path) -> None:
    """TC-03: Malformed JSON and non-object documents fall back to defaults."""
    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{oops", encoding="utf-8")
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")

    assert load_config(str(corrupt)) == get_default_config()
    assert load_config(str(listing)) == get_default_config()


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    """TC-04: Saved settings are merged over defaults on load."""
    path = tmp_path / "nested" / "config.json"

    assert save_config({"encoding": "latin-1"}, str(path)) is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"encoding": "latin-1"}

    loaded = load_config(str(path))
    assert loaded["encoding"] == "latin-1"
    assert loaded["log_level"] == "INFO"


def test_validate_coerces_values() -> None:
    """TC-05: Loose values are coerced and reported as warnings."""
    cfg, warnings = validate_config({
        "dry_run": "yes",
        "json_output": 0,
        "log_level": "warn",
        "encoding": "UTF8",
        "log_file": "  ",
    })

    assert cfg["dry_run"] is True
    assert cfg["json_output"] is False
    assert cfg["log_level"] == "WARNING"
    assert cfg["encoding"] == "utf-8"
    assert cfg["log_file"] is None
    assert len(warnings) == 2


def test_validate_falls_back_on_bad_values() -> None:
    """TC-06: Unknown codecs, levels and keys are replaced or dropped."""
    cfg, warnings = validate_config({
        "encoding": "no-such-codec",
        "log_level": "LOUD",
        "surprise": True,
    })

    assert cfg["encoding"] == "utf-8"
    assert cfg["log_level"] == "INFO"
    assert "surprise" not in cfg
    assert len(warnings) == 3


def test_validate_non_dict() -> None:
    """TC-07: Non-dict input yields defaults (or TypeError in strict mode)."""
    cfg, warnings = validate_config(["nope"])
    assert cfg == get_default_config()
    assert warnings

    with pytest.raises(TypeError):
        validate_config(["nope"], strict=True)


def test_strict_mode_raises() -> None:
    """TC-08: Strict mode refuses coercion."""
    with pytest.raises(TypeError):
        validate_config({"dry_run": "yes"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"encoding": "no-such-codec"}, strict=True)

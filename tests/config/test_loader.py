"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from numrange.config import load_config, load_from_env, load_yaml_file, merge_configs


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a YAML configuration file."""
    path = tmp_path / "numrange.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "logging": {"level": "INFO"},
                "ranges": {"angle": "[0,360)", "percent": "(0,100]"},
            }
        )
    )
    return path


def test_load_yaml_file(config_file: Path) -> None:
    """Test loading a mapping from YAML."""
    data = load_yaml_file(config_file)
    assert data["logging"] == {"level": "INFO"}
    assert data["ranges"]["angle"] == "[0,360)"


def test_load_yaml_file_empty(tmp_path: Path) -> None:
    """Test that an empty file gives an empty mapping."""
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_yaml_file(path) == {}


def test_load_yaml_file_not_mapping(tmp_path: Path) -> None:
    """Test that a non-mapping document is rejected."""
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_yaml_file(path)


def test_load_yaml_file_missing(tmp_path: Path) -> None:
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_yaml_file(tmp_path / "missing.yaml")


def test_merge_configs_deep() -> None:
    """Test that nested dictionaries are merged key by key."""
    base = {"logging": {"level": "WARNING", "file": None}, "ranges": {"a": "[0,1]"}}
    override = {"logging": {"level": "DEBUG"}, "ranges": {"b": "[0,2]"}}
    merged = merge_configs(base, override)
    assert merged == {
        "logging": {"level": "DEBUG", "file": None},
        "ranges": {"a": "[0,1]", "b": "[0,2]"},
    }


def test_merge_configs_does_not_modify_inputs() -> None:
    """Test that merging leaves both inputs untouched."""
    base = {"logging": {"level": "WARNING"}}
    override = {"logging": {"level": "DEBUG"}}
    merge_configs(base, override)
    assert base == {"logging": {"level": "WARNING"}}
    assert override == {"logging": {"level": "DEBUG"}}


def test_merge_configs_replaces_non_dict_values() -> None:
    """Test that non-dict values in the override replace the base."""
    assert merge_configs({"ranges": {"a": "[0,1]"}}, {"ranges": None}) == {
        "ranges": None
    }


def test_load_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test collecting nested overrides from the environment."""
    monkeypatch.setenv("NUMRANGE_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("NUMRANGE_RANGES__ANGLE", "[0,360)")
    monkeypatch.setenv("OTHER_SETTING", "ignored")
    assert load_from_env() == {
        "logging": {"level": "DEBUG"},
        "ranges": {"angle": "[0,360)"},
    }


def test_load_from_env_empty() -> None:
    """Test that no variables give no overrides."""
    assert load_from_env() == {}


def test_load_config_defaults() -> None:
    """Test loading with no file gives the defaults."""
    config = load_config()
    assert config.logging.level == "WARNING"
    assert config.ranges["degrees"] == "[0,360)"


def test_load_config_file_layers_over_defaults(config_file: Path) -> None:
    """Test that a file adds to and overrides the defaults."""
    config = load_config(config_file)
    assert config.logging.level == "INFO"
    assert config.ranges["angle"] == "[0,360)"
    assert config.ranges["percent"] == "(0,100]"
    assert config.ranges["degrees"] == "[0,360)"


def test_load_config_env_layers_over_file(
    config_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that environment variables override the file."""
    monkeypatch.setenv("NUMRANGE_LOGGING__LEVEL", "ERROR")
    config = load_config(config_file)
    assert config.logging.level == "ERROR"


def test_load_config_overrides_layer_over_env(
    config_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that keyword overrides win over everything else."""
    monkeypatch.setenv("NUMRANGE_LOGGING__LEVEL", "ERROR")
    config = load_config(config_file, logging={"level": "DEBUG"})
    assert config.logging.level == "DEBUG"


def test_load_config_invalid_range(tmp_path: Path) -> None:
    """Test that an invalid named range in a file fails validation."""
    path = tmp_path / "bad.yaml"
    path.write_text('ranges:\n  broken: "[0,"\n')
    with pytest.raises(ValidationError, match="Invalid range 'broken'"):
        load_config(path)

"""Unit tests for configuration loading and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from script_builder.core.config import (
    EXAMPLE_CONFIG,
    MAX_INDENT_SIZE,
    BuilderConfig,
    ConfigError,
    ConfigManager,
    load_config,
)


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults() -> None:
    config = ConfigManager().get_config()
    assert config == BuilderConfig()
    assert config.use_tabs is True
    assert config.indent_size == 4
    assert config.header_template is None


def test_overrides_win_over_file(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "style.json", {"use_tabs": False, "indent_size": 2})
    config = ConfigManager().get_config({"indent_size": 3}, path)
    assert config.use_tabs is False
    assert config.indent_size == 3


def test_header_context_default_is_not_shared() -> None:
    manager = ConfigManager()
    first = manager.get_config()
    first.header_context["tool"] = "x"
    assert manager.get_config().header_context == {}


def test_load_config_convenience(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "style.json", EXAMPLE_CONFIG)
    config = load_config(config_file=path)
    assert config.header_template == "auto-generated"
    assert config.header_context == {"tool": "script-builder"}


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        ConfigManager().get_config(config_file=tmp_path / "nope.json")


def test_non_json_suffix(tmp_path: Path) -> None:
    path = tmp_path / "style.yaml"
    path.write_text("use_tabs: false", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be JSON"):
        ConfigManager().get_config(config_file=path)


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "style.json"
    path.write_text("{use_tabs: false", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        ConfigManager().get_config(config_file=path)


def test_json_must_be_an_object(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "style.json", [1, 2])
    with pytest.raises(ConfigError, match="JSON object"):
        ConfigManager().get_config(config_file=path)


def test_unknown_keys() -> None:
    with pytest.raises(ConfigError, match="line_length"):
        ConfigManager().get_config({"line_length": 80})


@pytest.mark.parametrize("indent_size", [0, -2, "4", True])
def test_indent_size_must_be_positive_integer(indent_size) -> None:
    with pytest.raises(ConfigError, match="indent_size"):
        ConfigManager().get_config({"indent_size": indent_size})


def test_save_config_writes_loadable_json(tmp_path: Path) -> None:
    manager = ConfigManager()
    config = BuilderConfig(use_tabs=False, indent_size=2, header_template="auto-generated")
    path = tmp_path / "saved.json"
    manager.save_config(config, path)
    assert manager.get_config(config_file=path) == config


def test_validate_config_accepts_defaults() -> None:
    assert ConfigManager().validate_config(BuilderConfig()) == []


def test_validate_config_reports_problems() -> None:
    config = BuilderConfig(use_tabs="yes", indent_size=12, header_template="  ", header_context=[])
    warnings = ConfigManager().validate_config(config)
    assert len(warnings) == 4
    assert any("indent_size" in w for w in warnings)


def test_create_builder_uses_style() -> None:
    builder = BuilderConfig(use_tabs=False, indent_size=2).create_builder(indentation=2)
    builder.append_indented_line("x")
    assert builder.to_string() == "    x\n"


def test_indent_size_limit_is_independent_of_depth_limit() -> None:
    manager = ConfigManager()
    assert manager.validate_config(BuilderConfig(indent_size=MAX_INDENT_SIZE)) == []
    assert manager.validate_config(BuilderConfig(indent_size=MAX_INDENT_SIZE + 1))

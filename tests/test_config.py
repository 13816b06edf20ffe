"""Tests for umlgen.codegen.core.config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from umlgen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    EXAMPLE_CONFIG,
    EmitterConfig,
    InvalidConfigurationError,
    load_config,
)


def test_defaults() -> None:
    config = load_config()

    assert config.use_tabs is False
    assert config.indent_spaces == 4
    assert config.name_prefix == ""
    assert config.doc_string is True
    assert config.base_class == "AVObject"
    assert config.file_extension == ".dart"
    assert config.init_file_name == "__init__.dart"
    assert config.custom == {}


def test_config_file_accepts_preference_aliases(tmp_path: Path) -> None:
    config_file = tmp_path / "codegen.json"
    config_file.write_text(
        json.dumps({"useTab": True, "indentSpaces": 2, "namePrefix": "LC", "docString": False}),
        encoding="utf-8",
    )

    config = ConfigManager().get_config(config_file=config_file)

    assert config.use_tabs is True
    assert config.indent_spaces == 2
    assert config.name_prefix == "LC"
    assert config.doc_string is False


def test_overrides_win_over_file(tmp_path: Path) -> None:
    config_file = tmp_path / "codegen.json"
    config_file.write_text(json.dumps({"prefix": "A"}), encoding="utf-8")

    config = ConfigManager().get_config({"name_prefix": "B"}, config_file)

    assert config.name_prefix == "B"


def test_unknown_keys_are_collected_in_custom() -> None:
    config = ConfigManager().get_config({"author": "me", "indent_spaces": 3})

    assert config.custom == {"author": "me"}
    assert config.indent_spaces == 3


@pytest.mark.parametrize("value", [-1, "4", 2.5, True])
def test_invalid_indent_width_is_rejected(value) -> None:
    with pytest.raises(InvalidConfigurationError):
        EmitterConfig(indent_spaces=value)


def test_non_boolean_flags_are_rejected() -> None:
    with pytest.raises(InvalidConfigurationError):
        EmitterConfig(use_tabs="yes")


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        ConfigManager().get_config(config_file=tmp_path / "absent.json")


def test_config_file_must_be_json(tmp_path: Path) -> None:
    config_file = tmp_path / "codegen.yml"
    config_file.write_text("useTab: true", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be JSON"):
        ConfigManager().get_config(config_file=config_file)


def test_malformed_config_file(tmp_path: Path) -> None:
    config_file = tmp_path / "codegen.json"
    config_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidConfigurationError):
        ConfigManager().get_config(config_file=config_file)


def test_config_file_must_hold_an_object(tmp_path: Path) -> None:
    config_file = tmp_path / "codegen.json"
    config_file.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(InvalidConfigurationError):
        ConfigManager().get_config(config_file=config_file)


def test_save_and_reload(tmp_path: Path) -> None:
    manager = ConfigManager()
    original = manager.get_config({"name_prefix": "X", "indent_spaces": 2, "author": "me"})
    target = tmp_path / "saved.json"

    manager.save_config(original, target)
    reloaded = manager.get_config(config_file=target)

    assert reloaded == original


def test_validate_config_warnings(tmp_path: Path) -> None:
    config = EmitterConfig(
        use_tabs=True,
        indent_spaces=2,
        file_extension="dart",
        template_dir=str(tmp_path / "missing"),
    )

    warnings = ConfigManager().validate_config(config)

    assert len(warnings) == 3
    assert ConfigManager().validate_config(EmitterConfig()) == []


def test_example_config_uses_known_options() -> None:
    config = ConfigManager().get_config(EXAMPLE_CONFIG)

    assert config.custom == {}
    assert config.indent_spaces == 2
    assert config.name_prefix == "LC"


def test_template_dir_must_be_a_string(tmp_path: Path) -> None:
    config_file = tmp_path / "codegen.json"
    config_file.write_text(json.dumps({"templateDir": 5}), encoding="utf-8")

    with pytest.raises(InvalidConfigurationError, match="template_dir"):
        ConfigManager().get_config(config_file=config_file)
    assert EmitterConfig(template_dir=str(tmp_path)).template_dir == str(tmp_path)

"""Tests for PipelineConfig and voxtidy.apps.config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from voxtidy.apps.config import VoxtidyConfig, load_config, resolve_config_path
from voxtidy.core.symbols import DEFAULT_COMMAND_TABLE
from voxtidy.core.types import PipelineConfig


class TestPipelineConfig:
    def test_defaults(self) -> None:
        config = PipelineConfig()
        assert config.auto_punctuation is True
        assert config.numbers_as_digits is False
        assert config.voice_commands is True
        assert config.debug is False

    def test_frozen(self) -> None:
        config = PipelineConfig()
        with pytest.raises(AttributeError):
            config.debug = True

    def test_from_mapping_snake_case(self) -> None:
        config = PipelineConfig.from_mapping({"numbers_as_digits": True})
        assert config.numbers_as_digits is True

    def test_from_mapping_camel_case(self) -> None:
        config = PipelineConfig.from_mapping(
            {"autoPunctuation": False, "numbersAsDigits": True, "voiceCommands": False},
        )
        assert config == PipelineConfig(
            auto_punctuation=False, numbers_as_digits=True, voice_commands=False,
        )

    def test_unknown_keys_ignored(self) -> None:
        assert PipelineConfig.from_mapping({"timeout": 5}) == PipelineConfig()

    def test_wrong_types_fall_back(self) -> None:
        config = PipelineConfig.from_mapping({"debug": "yes", "autoPunctuation": 0})
        assert config == PipelineConfig()

    def test_none(self) -> None:
        assert PipelineConfig.from_mapping(None) == PipelineConfig()


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, config_dir: Path) -> None:
        assert load_config() == VoxtidyConfig()

    def test_env_dir_respected(self, config_dir: Path) -> None:
        assert resolve_config_path() == config_dir / "config.json"

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.json"
        assert resolve_config_path(str(path)) == path

    def test_reads_pipeline_and_commands(self, config_dir: Path) -> None:
        (config_dir / "config.json").write_text(json.dumps({
            "pipeline": {"numbersAsDigits": True, "debug": "nope"},
            "commands": {"smiley face": ":)", "bad": 3, " ": "x"},
        }))
        config = load_config()
        assert config.pipeline == PipelineConfig(numbers_as_digits=True)
        assert config.commands == {"smiley face": ":)"}

    def test_non_object_json(self, config_dir: Path) -> None:
        (config_dir / "config.json").write_text("[1, 2, 3]")
        assert load_config() == VoxtidyConfig()

    def test_non_object_sections(self, config_dir: Path) -> None:
        (config_dir / "config.json").write_text(
            json.dumps({"pipeline": [], "commands": "nope"}),
        )
        assert load_config() == VoxtidyConfig()

    def test_broken_json_raises(self, config_dir: Path) -> None:
        (config_dir / "config.json").write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_config()


class TestCommandTable:
    def test_default_table_without_commands(self) -> None:
        assert VoxtidyConfig().command_table() is DEFAULT_COMMAND_TABLE

    def test_custom_commands_extend_table(self) -> None:
        table = VoxtidyConfig(commands={"smiley face": ":)"}).command_table()
        assert table.get("smiley face") == ":)"
        assert table.get("period") == "."

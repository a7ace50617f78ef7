"""Tests for voxtidy.apps.cli."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from voxtidy.apps.cli import build_arg_parser, main, merge_pipeline_flags
from voxtidy.core.types import PipelineConfig


class TestArgParser:
    def test_flags_default_to_none(self) -> None:
        args = build_arg_parser().parse_args([])
        assert args.auto_punctuation is None
        assert args.numbers_as_digits is None
        assert args.voice_commands is None
        assert args.debug is None

    def test_merge_keeps_config_when_unset(self) -> None:
        base = PipelineConfig(numbers_as_digits=True)
        args = build_arg_parser().parse_args([])
        assert merge_pipeline_flags(base, args) == base

    def test_merge_overrides(self) -> None:
        args = build_arg_parser().parse_args(
            ["--no-auto-punctuation", "--numbers-as-digits"],
        )
        merged = merge_pipeline_flags(PipelineConfig(), args)
        assert merged.auto_punctuation is False
        assert merged.numbers_as_digits is True
        assert merged.voice_commands is True


class TestMain:
    def test_positional_text(
        self, config_dir: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["hello", "world", "period"]) == 0
        assert capsys.readouterr().out == "Hello world.\n"

    def test_numbers_flag(
        self, config_dir: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["--numbers-as-digits", "i have twenty three apples"]) == 0
        assert capsys.readouterr().out == "I have 23 apples.\n"

    def test_stdin_lines(
        self,
        config_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("hello\nhow are you question mark\n"))
        assert main([]) == 0
        assert capsys.readouterr().out == "Hello.\nHow are you?\n"

    def test_config_file_commands(
        self, config_dir: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        (config_dir / "config.json").write_text(json.dumps({
            "pipeline": {"autoPunctuation": False},
            "commands": {"brb": "be right back"},
        }))
        assert main(["ok", "brb"]) == 0
        assert capsys.readouterr().out == "ok be right back\n"

    def test_list_commands(
        self, config_dir: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["--list-commands"]) == 0
        out = capsys.readouterr().out
        assert "Voice Commands" in out
        assert "question mark" in out

    def test_stages_table(
        self, config_dir: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["--stages", "hello"]) == 0
        out = capsys.readouterr().out
        assert "Pipeline Stages" in out
        assert "punctuation" in out

"""Shared test fixtures."""

from __future__ import annotations

import pytest

from voxtidy.core.symbols import CommandEntry, CommandTable
from voxtidy.core.types import PipelineConfig


@pytest.fixture
def default_config() -> PipelineConfig:
    return PipelineConfig()


@pytest.fixture
def digits_config() -> PipelineConfig:
    return PipelineConfig(numbers_as_digits=True)


@pytest.fixture
def paren_table() -> CommandTable:
    """Table with a multi-word phrase and no entry for its parts."""
    return CommandTable((
        CommandEntry("open paren", "("),
        CommandEntry("close paren", ")"),
    ))


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point VOXTIDY_CONFIG_DIR at an empty temp directory."""
    monkeypatch.setenv("VOXTIDY_CONFIG_DIR", str(tmp_path))
    return tmp_path

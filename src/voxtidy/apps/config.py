"""Application-level configuration: user defaults and custom commands.

The core pipeline never reads files; this module turns
``~/.config/voxtidy/config.json`` into a :class:`PipelineConfig` and an
extended :class:`CommandTable` for the CLI (or any other shell) to pass in.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from voxtidy.core.constants import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_DIR_ENV,
    DEFAULT_CONFIG_FILE,
    LOGGER_NAME,
)
from voxtidy.core.symbols import DEFAULT_COMMAND_TABLE, CommandTable
from voxtidy.core.types import PipelineConfig

_log = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True, slots=True)
class VoxtidyConfig:
    """Top-level configuration loaded from ~/.config/voxtidy/config.json."""

    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    commands: dict[str, str] = field(default_factory=dict)

    def command_table(self) -> CommandTable:
        """Built-in table extended with the user's custom commands."""
        if not self.commands:
            return DEFAULT_COMMAND_TABLE
        return DEFAULT_COMMAND_TABLE.extended(self.commands)


def resolve_config_path(path: str | None = None) -> Path:
    """Return *path*, or the default config file honoring ``VOXTIDY_CONFIG_DIR``."""
    if path:
        return Path(path).expanduser()
    config_dir = Path(
        os.environ.get(DEFAULT_CONFIG_DIR_ENV, "") or DEFAULT_CONFIG_DIR,
    ).expanduser()
    return config_dir / DEFAULT_CONFIG_FILE


def _parse_commands(raw: Any) -> dict[str, str]:
    """Keep only string → string entries with a non-blank phrase."""
    if not isinstance(raw, dict):
        if raw is not None:
            _log.debug("Ignoring 'commands': expected an object, got %r", raw)
        return {}
    commands: dict[str, str] = {}
    for phrase, output in raw.items():
        if not isinstance(output, str) or not str(phrase).strip():
            _log.debug("Ignoring custom command %r -> %r", phrase, output)
            continue
        commands[str(phrase)] = output
    return commands


def load_config(path: str | None = None) -> VoxtidyConfig:
    """Load voxtidy configuration from a JSON file.

    Reads ``~/.config/voxtidy/config.json`` (or *path*). Supports the
    ``VOXTIDY_CONFIG_DIR`` environment variable to override the config
    directory.

    Returns a default config if the file does not exist or does not hold a
    JSON object. Unknown or mistyped settings fall back to their defaults.
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        return VoxtidyConfig()

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        _log.debug("Config %s is not a JSON object; using defaults", config_path)
        return VoxtidyConfig()

    pipeline_raw = data.get("pipeline", {})
    if not isinstance(pipeline_raw, dict):
        pipeline_raw = {}

    return VoxtidyConfig(
        pipeline=PipelineConfig.from_mapping(pipeline_raw),
        commands=_parse_commands(data.get("commands")),
    )

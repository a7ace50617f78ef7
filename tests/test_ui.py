"""Tests for voxtidy.ui — pure render functions."""

from __future__ import annotations

from rich.table import Table

from voxtidy.api import process_with_trace
from voxtidy.core.symbols import DEFAULT_COMMAND_TABLE, CommandEntry, CommandTable
from voxtidy.ui import render_command_table, render_stages, visible


def test_visible_escapes_whitespace_commands() -> None:
    assert visible("a\nb\tc") == "a\\nb\\tc"


class TestRenderCommandTable:
    def test_one_row_per_entry(self) -> None:
        rendered = render_command_table(DEFAULT_COMMAND_TABLE)
        assert isinstance(rendered, Table)
        assert rendered.row_count == len(DEFAULT_COMMAND_TABLE)

    def test_small_table(self) -> None:
        table = CommandTable((CommandEntry("new line", "\n", "navigation"),))
        assert render_command_table(table).row_count == 1


class TestRenderStages:
    def test_input_plus_each_stage(self) -> None:
        result = process_with_trace("hello period")
        rendered = render_stages(result)
        assert rendered.row_count == 1 + len(result.stages)

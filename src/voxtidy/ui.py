"""Terminal rendering for voxtidy.

All render functions are pure: they take a table or result and return
Rich renderables. No side effects, no mutation.
"""

from rich.table import Table
from rich.text import Text

from voxtidy.core.symbols import CommandTable
from voxtidy.core.types import ProcessResult

_VISIBLE_WHITESPACE = {"\n": "\\n", "\t": "\\t", " ": "␣"}


def visible(text: str) -> str:
    """Show newlines and tabs as escapes so they survive a table cell."""
    return text.replace("\n", "\\n").replace("\t", "\\t")


def _symbol(output: str) -> str:
    return _VISIBLE_WHITESPACE.get(output) or visible(output)


def render_command_table(table: CommandTable) -> Table:
    """Render every command phrase with its symbol, grouped by category."""
    rendered = Table(title="Voice Commands")
    rendered.add_column("Category", style="cyan")
    rendered.add_column("Phrase", style="white")
    rendered.add_column("Output", style="green")
    for category in table.categories():
        for i, entry in enumerate(table.by_category(category)):
            rendered.add_row(
                category if i == 0 else "",
                entry.phrase,
                Text(_symbol(entry.output)),
            )
    return rendered


def render_stages(result: ProcessResult) -> Table:
    """Render the input and the text after each pipeline stage."""
    rendered = Table(title="Pipeline Stages")
    rendered.add_column("Stage", style="cyan")
    rendered.add_column("Text", style="white")
    rendered.add_row("input", Text(visible(result.original)))
    for name, text in result.stages:
        rendered.add_row(name, Text(visible(text)))
    return rendered

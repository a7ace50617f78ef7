"""CLI entry point for voxtidy.

Parses arguments, configures logging, and runs dictated text through the
pipeline. Text comes from the positional arguments (joined with spaces)
or, when none are given, from stdin with one utterance per line.
"""

import argparse
import logging
import os
import sys
from collections.abc import Iterable, Sequence

from voxtidy.core.types import PipelineConfig


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="voxtidy",
        description="Turn raw dictation into punctuated, symbol-substituted text",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Raw transcript (default: read one utterance per line from stdin)",
    )
    parser.add_argument(
        "--numbers-as-digits",
        action="store_true",
        default=None,
        help="Convert number words to digits",
    )
    parser.add_argument(
        "--no-auto-punctuation",
        dest="auto_punctuation",
        action="store_false",
        default=None,
        help="Skip sentence capitalization and the closing period",
    )
    parser.add_argument(
        "--no-voice-commands",
        dest="voice_commands",
        action="store_false",
        default=None,
        help="Keep spoken command phrases as words",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Log the text produced by every stage",
    )
    parser.add_argument(
        "--stages",
        action="store_true",
        help="Print a table of intermediate stage output instead of plain text",
    )
    parser.add_argument(
        "--list-commands",
        action="store_true",
        help="List the available voice commands",
    )
    parser.add_argument(
        "--config-file",
        default=None,
        help="JSON config file (default: ~/.config/voxtidy/config.json)",
    )
    return parser


def merge_pipeline_flags(
    base: PipelineConfig, args: argparse.Namespace,
) -> PipelineConfig:
    """Overlay flags given on the command line onto the configured defaults."""
    import dataclasses

    overrides = {
        name: getattr(args, name)
        for name in ("auto_punctuation", "numbers_as_digits", "voice_commands", "debug")
        if getattr(args, name) is not None
    }
    return dataclasses.replace(base, **overrides)


def _utterances(args: argparse.Namespace) -> Iterable[str]:
    if args.text:
        yield " ".join(args.text)
        return
    for line in sys.stdin:
        yield line.rstrip("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns exit code."""
    from rich.console import Console
    from rich.logging import RichHandler

    from voxtidy.api import process_with_trace
    from voxtidy.apps.config import load_config
    from voxtidy.ui import render_command_table, render_stages

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                rich_tracebacks=False,
            )
        ],
    )

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    voxtidy_config = load_config(args.config_file)
    table = voxtidy_config.command_table()

    if args.list_commands:
        Console().print(render_command_table(table))
        return 0

    config = merge_pipeline_flags(voxtidy_config.pipeline, args)
    console = Console()
    for utterance in _utterances(args):
        result = process_with_trace(utterance, config, table=table)
        if args.stages:
            console.print(render_stages(result))
        else:
            sys.stdout.write(result.text + "\n")
    return 0
